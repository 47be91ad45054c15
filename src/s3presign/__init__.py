"""
s3presign - presigned URLs and response parsing for S3-compatible storage
"""

__version__ = "0.1.0"

from .bucket import Bucket, UrlStyle
from .credentials import Credentials
from .method import Method
from .actions import (
    S3Action,
    ListObjectVersions,
    PutBucketVersioning,
    VersioningStatus,
)
from .models import (
    Owner,
    ObjectVersion,
    DeleteMarker,
    CommonPrefix,
    ListObjectVersionsResult,
)
from .error import (
    S3PresignException,
    InvalidBucketException,
    UnsupportedSchemeException,
    MissingHostException,
    ResponseParseException,
    MissingFieldException,
)

__all__ = [
    "Bucket",
    "UrlStyle",
    "Credentials",
    "Method",
    "S3Action",
    "ListObjectVersions",
    "PutBucketVersioning",
    "VersioningStatus",
    "Owner",
    "ObjectVersion",
    "DeleteMarker",
    "CommonPrefix",
    "ListObjectVersionsResult",
    "S3PresignException",
    "InvalidBucketException",
    "UnsupportedSchemeException",
    "MissingHostException",
    "ResponseParseException",
    "MissingFieldException",
]
