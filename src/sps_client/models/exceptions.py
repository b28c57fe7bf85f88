"""Custom exceptions for the SBPS client."""


class SpsClientError(Exception):
    """Base exception for client-related errors."""

    pass


class UnknownLocale(SpsClientError):
    """
    Raised when a client is constructed with a locale that has no catalog.

    This is a configuration error and is raised eagerly at construction
    time, never from ``execute``.
    """

    pass


class TransportFailure(SpsClientError):
    """
    Base for every failure that collapses into the sentinel response.

    ProtocolClient.execute() catches this family and answers with a
    synthetic NG envelope carrying error code "0000000". Callers never
    see these exceptions.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class HttpTransportError(TransportFailure):
    """
    Raised when the HTTP round trip fails.

    Examples:
    - Connection refused / DNS failure
    - Transport timeout
    - Non-2xx status code from the gateway
    """

    pass


class DocumentEncodeError(TransportFailure):
    """Raised when a request tree cannot be serialized (bad tag name, unencodable text)."""

    pass


class DocumentDecodeError(TransportFailure):
    """Raised when a response body is not well-formed XML."""

    pass


class MissingResponseRoot(TransportFailure):
    """Raised when the decoded document root is not ``sps-api-response``."""

    pass


class MalformedResponse(TransportFailure):
    """Raised when the response root carries no ``res_result`` leaf."""

    pass
