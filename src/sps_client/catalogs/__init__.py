"""
Locale error catalogs.

Each locale module defines three tables used by ErrorTranslator:
- PAYMENT_METHOD: method code -> text
- PAYMENT_TYPE_ERROR: method code -> (type code -> text)
- PAYMENT_ITEM_ERROR: item code -> text, or method code -> (item code -> text)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from sps_client.catalogs import en, ja
from sps_client.models.exceptions import UnknownLocale
from sps_client.models.identity import Locale

ItemEntry = Union[str, Mapping[str, str]]


@dataclass(frozen=True)
class ErrorCatalog:
    """Read-only error tables for one locale."""

    payment_method: Mapping[str, str]
    payment_type_error: Mapping[str, Mapping[str, str]]
    payment_item_error: Mapping[str, ItemEntry]

    @classmethod
    def from_module(cls, module) -> "ErrorCatalog":
        return cls(
            payment_method=MappingProxyType(module.PAYMENT_METHOD),
            payment_type_error=MappingProxyType(module.PAYMENT_TYPE_ERROR),
            payment_item_error=MappingProxyType(module.PAYMENT_ITEM_ERROR),
        )


CATALOGS: Mapping[Locale, ErrorCatalog] = MappingProxyType(
    {
        Locale.EN: ErrorCatalog.from_module(en),
        Locale.JA: ErrorCatalog.from_module(ja),
    }
)


def get_catalog(locale: Locale | str) -> ErrorCatalog:
    """
    Resolve the catalog for a locale.

    Raises:
        UnknownLocale: If no catalog exists for the locale
    """
    try:
        return CATALOGS[Locale(locale)]
    except ValueError as e:
        available = ", ".join(item.value for item in CATALOGS)
        raise UnknownLocale(
            f"Unknown locale: {locale}. Available locales: {available}"
        ) from e


__all__ = ["CATALOGS", "ErrorCatalog", "get_catalog"]
