"""
HTTP methods used by S3 actions
"""

from enum import Enum


class Method(str, Enum):
    """HTTP verb of an S3 action, as it appears in the canonical request."""
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
