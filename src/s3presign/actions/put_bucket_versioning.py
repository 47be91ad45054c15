"""
PutBucketVersioning action
"""

import xml.etree.ElementTree as ET
from datetime import datetime
from enum import Enum
from typing import Optional

from .._sorting import merge_sorted
from ..bucket import Bucket
from ..credentials import Credentials
from ..method import Method
from ..models import S3_XMLNS
from .base import S3Action


class VersioningStatus(str, Enum):
    """Versioning state of a bucket."""
    ENABLED = "Enabled"
    SUSPENDED = "Suspended"


class PutBucketVersioning(S3Action):
    """
    Configure bucket versioning.

    The URL only authorizes the request; send :meth:`body` as the request
    payload.

    See https://docs.aws.amazon.com/AmazonS3/latest/API/API_PutBucketVersioning.html
    """

    METHOD = Method.PUT

    def __init__(self, bucket: Bucket, credentials: Credentials, status: VersioningStatus):
        super().__init__(bucket, credentials)
        self.status = status
        self.mfa_delete: Optional[bool] = None

    def with_mfa_delete(self, enabled: bool) -> "PutBucketVersioning":
        """Set MFA delete for the bucket configuration."""
        self.mfa_delete = enabled
        return self

    def body(self) -> str:
        """Generate the XML body for the request."""
        root = ET.Element("VersioningConfiguration")
        root.set("xmlns", S3_XMLNS)
        ET.SubElement(root, "Status").text = VersioningStatus(self.status).value
        if self.mfa_delete is not None:
            ET.SubElement(root, "MfaDelete").text = "Enabled" if self.mfa_delete else "Disabled"
        return ET.tostring(root, encoding="unicode")

    def sign_with_time(self, expires_in_seconds: int, time: datetime) -> str:
        query = merge_sorted([("versioning", "")], self._query.items())
        return self._presign(expires_in_seconds, time, query)
