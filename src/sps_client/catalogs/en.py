"""English error catalog."""

# Payment method segment (res_err_code[0:3])
PAYMENT_METHOD = {
    "101": "Credit card payment",
    "201": "Convenience store payment",
    "301": "Pay-easy payment",
    "401": "SoftBank carrier billing",
    "402": "docomo carrier billing",
    "405": "au carrier billing",
    "501": "PayPay payment",
    "999": "Common",
}

_CARRIER_TYPES = {
    "03": "Required item missing",
    "04": "Invalid attribute",
    "05": "Invalid length",
    "07": "Invalid value",
    "09": "Record not found",
    "20": "Carrier rejected the request",
    "99": "Carrier system error",
}

# Payment type segment (res_err_code[3:5]), scoped per payment method
PAYMENT_TYPE_ERROR = {
    "101": {
        "01": "Card company authorization error",
        "02": "Card company communication error",
        "03": "Required item missing",
        "04": "Invalid attribute",
        "05": "Invalid length",
        "06": "Invalid format",
        "07": "Invalid value",
        "08": "Duplicate request",
        "09": "Record not found",
        "10": "Card declined",
        "11": "Card expired",
        "12": "Credit limit exceeded",
        "13": "Security code mismatch",
        "20": "Invalid transaction status",
        "99": "Credit card system error",
    },
    "201": {
        "03": "Required item missing",
        "04": "Invalid attribute",
        "05": "Invalid length",
        "07": "Invalid value",
        "21": "Payment deadline passed",
    },
    "401": _CARRIER_TYPES,
    "402": _CARRIER_TYPES,
    "405": _CARRIER_TYPES,
    "999": {
        "01": "System error",
        "02": "Service under maintenance",
        "03": "Authentication error",
        "04": "Hash code mismatch",
        "05": "Access from unregistered IP address",
        "06": "Unsupported request ID",
    },
}

# Payment item segment (res_err_code[5:9]). Common request fields are keyed
# by item code alone; method-specific fields are nested under the method.
PAYMENT_ITEM_ERROR = {
    "001": "Merchant ID",
    "002": "Service ID",
    "003": "Customer ID",
    "004": "Order ID",
    "005": "Item ID",
    "006": "Item name",
    "007": "Tax",
    "008": "Amount",
    "009": "Payment type",
    "010": "Auto charge type",
    "011": "Service type",
    "012": "Settlement division",
    "013": "Last charge month",
    "014": "Campaign type",
    "015": "Tracking ID",
    "016": "Terminal type",
    "017": "Request date",
    "018": "Encrypted flag",
    "019": "Hash code",
    "020": "Request ID",
    "999": "Other",
    "101": {
        "101": "Card number",
        "102": "Card expiration",
        "103": "Security code",
        "104": "Card brand",
        "105": "Token",
        "106": "Token key",
        "107": "Installment count",
        "108": "Transaction ID",
        "109": "Processing date",
    },
    "201": {
        "201": "Convenience store code",
        "202": "Customer name",
        "203": "Phone number",
        "204": "Payment deadline",
    },
    "401": {
        "201": "SoftBank subscriber ID",
        "202": "Billing month",
    },
    "402": {
        "201": "docomo subscriber ID",
        "202": "Billing month",
    },
    "405": {
        "201": "au ID",
        "202": "Billing month",
    },
}
