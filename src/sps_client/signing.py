"""Request signature (``sps_hashcode``) generation."""

import hashlib
from collections.abc import Sequence


def sign(
    merchant_id: str,
    service_id: str,
    secret: str,
    fields: Sequence[str],
) -> str:
    """
    Compute the SBPS request signature.

    The gateway recomputes the same digest to verify the request, so the
    input must match byte for byte: values are concatenated with no
    separator, in order, and never trimmed or case-folded.

    Args:
        merchant_id: Merchant ID issued by SBPS
        service_id: Service ID issued by SBPS
        secret: Hash key (shared secret)
        fields: Operation field values in the order the operation defines

    Returns:
        Lowercase hex SHA-1 digest (40 characters)
    """
    payload = f"{merchant_id}{service_id}{''.join(fields)}{secret}"
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()
