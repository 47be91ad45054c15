"""
Exception classes for s3presign
"""


class S3PresignException(Exception):
    """
    Base exception for all s3presign errors.
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class InvalidBucketException(S3PresignException):
    """Thrown when a bucket descriptor cannot be built from its endpoint."""

    def __init__(self, message: str, error_code: str = "InvalidEndpoint"):
        super().__init__(message, error_code=error_code)


class UnsupportedSchemeException(InvalidBucketException):
    """Thrown when the endpoint scheme is neither http nor https."""

    def __init__(self, endpoint: str, scheme: str):
        super().__init__(
            f"Endpoint '{endpoint}' uses unsupported scheme '{scheme}'.",
            error_code="UnsupportedScheme"
        )
        self.scheme = scheme


class MissingHostException(InvalidBucketException):
    """Thrown when the endpoint has no host."""

    def __init__(self, endpoint: str):
        super().__init__(
            f"Endpoint '{endpoint}' has no host.",
            error_code="MissingHost"
        )


class ResponseParseException(S3PresignException):
    """Thrown when an S3 XML response is malformed or does not match the schema."""

    def __init__(self, message: str, error_code: str = "MalformedXML"):
        super().__init__(message, error_code=error_code)


class MissingFieldException(ResponseParseException):
    """Thrown when a required element is absent from a response record."""

    def __init__(self, element: str, field: str):
        super().__init__(
            f"Element '{element}' is missing required field '{field}'.",
            error_code="MissingField"
        )
        self.element = element
        self.field = field
