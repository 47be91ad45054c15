"""
ListObjectVersions action
"""

from datetime import datetime
from typing import IO, AnyStr, Optional, Union

from .._sorting import merge_sorted
from ..bucket import Bucket
from ..credentials import Credentials
from ..method import Method
from ..models import ListObjectVersionsResult, parse_list_object_versions
from .base import S3Action


class ListObjectVersions(S3Action):
    """
    List all versions of objects in the bucket.

    If ``next_key_marker`` or ``next_version_id_marker`` of the parsed
    response is set, the listing is truncated. Build the action again with
    :meth:`with_key_marker` and :meth:`with_version_id_marker` set to those
    values to get the next page.

    See https://docs.aws.amazon.com/AmazonS3/latest/API/API_ListObjectVersions.html

    Example:
        action = bucket.list_object_versions(credentials).with_prefix("photos/")
        url = action.sign(3600)
        # GET url with any HTTP client, then:
        result = ListObjectVersions.parse_response(body)
    """

    METHOD = Method.GET

    def __init__(self, bucket: Bucket, credentials: Optional[Credentials] = None):
        super().__init__(bucket, credentials)
        self._query["encoding-type"] = "url"

    def with_prefix(self, prefix: str) -> "ListObjectVersions":
        """Limit the response to keys that begin with the prefix."""
        self._query["prefix"] = prefix
        return self

    def with_max_keys(self, max_keys: int) -> "ListObjectVersions":
        """Set the maximum number of keys returned in the response."""
        self._query["max-keys"] = str(max_keys)
        return self

    def with_key_marker(self, key: str) -> "ListObjectVersions":
        """Start listing after this key."""
        self._query["key-marker"] = key
        return self

    def with_version_id_marker(self, version_id: str) -> "ListObjectVersions":
        """Start listing after this version of the key marker."""
        self._query["version-id-marker"] = version_id
        return self

    def with_delimiter(self, delimiter: str) -> "ListObjectVersions":
        """Group keys sharing a prefix up to the delimiter into common prefixes."""
        self._query["delimiter"] = delimiter
        return self

    def sign_with_time(self, expires_in_seconds: int, time: datetime) -> str:
        query = merge_sorted([("versions", "1")], self._query.items())
        return self._presign(expires_in_seconds, time, query)

    @staticmethod
    def parse_response(data: Union[bytes, str]) -> ListObjectVersionsResult:
        """
        Parse the XML response body.

        Raises:
            ResponseParseException: the body could not be parsed
        """
        return parse_list_object_versions(data)

    @staticmethod
    def parse_response_from_reader(reader: IO[AnyStr]) -> ListObjectVersionsResult:
        """Parse the XML response from a binary or text file object."""
        return parse_list_object_versions(reader.read())
