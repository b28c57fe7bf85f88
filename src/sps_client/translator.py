"""Translation of SBPS error codes into human-readable messages."""

from collections.abc import Mapping

from sps_client.catalogs import ErrorCatalog

UNDEFINED = "Undefined"


class ErrorTranslator:
    """
    Resolves a composite ``res_err_code`` against one locale catalog.

    The code is read as three fixed windows: payment method (chars 0-2),
    payment type (chars 3-4) and payment item (chars 5-8). Each window is
    looked up independently and missing entries resolve to "Undefined";
    translation never raises.
    """

    def __init__(self, catalog: ErrorCatalog):
        self.catalog = catalog

    def translate(self, error_code: str) -> str:
        """
        Build the message for an error code.

        Type texts are always scoped by payment method. Item texts are
        looked up by item code first and only fall back to the
        method-scoped table when the item code has no top-level entry.

        Args:
            error_code: Numeric error code, e.g. "10103001"

        Returns:
            "<method> <type> <item>", space separated
        """
        method = error_code[0:3]
        type_code = error_code[3:5]
        item = error_code[5:9]

        method_text = self.catalog.payment_method.get(method, UNDEFINED)

        type_text = UNDEFINED
        type_table = self.catalog.payment_type_error.get(method)
        if type_table is not None:
            type_text = type_table.get(type_code, UNDEFINED)

        item_text = UNDEFINED
        flat = self.catalog.payment_item_error.get(item)
        if isinstance(flat, str) and flat:
            item_text = flat
        else:
            scoped = self.catalog.payment_item_error.get(method)
            if isinstance(scoped, Mapping):
                item_text = scoped.get(item, UNDEFINED)

        return f"{method_text} {type_text} {item_text}"
