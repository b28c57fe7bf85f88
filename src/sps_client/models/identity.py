"""Merchant identity models."""

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    """Language used for translated error messages."""

    EN = "en"
    JA = "ja"


@dataclass(frozen=True)
class Identity:
    """
    Merchant credentials issued by SBPS.

    Fixed for the lifetime of a client. ``hash_key`` is the shared secret
    used both for request signatures and as the Basic auth password.
    """

    merchant_id: str
    service_id: str
    hash_key: str
    locale: Locale = Locale.EN

    @property
    def basic_auth_username(self) -> str:
        return f"{self.merchant_id}{self.service_id}"

    def __repr__(self) -> str:
        return (
            f"Identity(merchant_id={self.merchant_id!r}, "
            f"service_id={self.service_id!r}, hash_key='***', "
            f"locale={self.locale.value!r})"
        )
