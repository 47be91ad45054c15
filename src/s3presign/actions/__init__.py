"""
Presignable S3 actions
"""

from .base import S3Action
from .list_object_versions import ListObjectVersions
from .put_bucket_versioning import PutBucketVersioning, VersioningStatus

__all__ = [
    "S3Action",
    "ListObjectVersions",
    "PutBucketVersioning",
    "VersioningStatus",
]
