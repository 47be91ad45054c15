"""
Bucket descriptor: endpoint, addressing style, name and region
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from ._signer import encode_path
from .credentials import Credentials
from .error import InvalidBucketException, MissingHostException, UnsupportedSchemeException

if TYPE_CHECKING:
    from .actions import ListObjectVersions, PutBucketVersioning, VersioningStatus

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


class UrlStyle(Enum):
    """How the bucket name is placed in request URLs."""
    PATH = "path"
    VIRTUAL_HOST = "virtual-host"


class Bucket:
    """
    An S3 bucket reachable through a given endpoint.

    The base URL is resolved once, when the bucket is created, and never
    changes afterwards.

    Example:
        bucket = Bucket(
            "https://s3.amazonaws.com",
            UrlStyle.VIRTUAL_HOST,
            "examplebucket",
            "us-east-1",
        )
        bucket.base_url  # "https://examplebucket.s3.amazonaws.com/"
    """

    __slots__ = ("_base_url", "_name", "_region", "_url_style")

    def __init__(self, endpoint: str, url_style: UrlStyle, name: str, region: str):
        """
        Args:
            endpoint: Absolute http(s) URL of the S3 service
            url_style: Path or virtual-host addressing
            name: Bucket name
            region: Region used in the credential scope

        Raises:
            UnsupportedSchemeException: the endpoint is not http or https
            MissingHostException: the endpoint has no host
            InvalidBucketException: the endpoint port is not a valid number
        """
        parts = urlsplit(endpoint)
        if parts.scheme not in ("http", "https"):
            raise UnsupportedSchemeException(endpoint, parts.scheme)
        if not parts.hostname:
            raise MissingHostException(endpoint)
        try:
            port = parts.port
        except ValueError as ex:
            raise InvalidBucketException(f"Endpoint '{endpoint}' has an invalid port: {ex}") from ex

        self._name = name
        self._region = region
        self._url_style = url_style
        self._base_url = self._resolve_base_url(parts, port, url_style, name)

        logger.debug(
            "[S3Presign][Bucket] name=%s region=%s style=%s baseUrl=%s",
            name,
            region,
            url_style.value,
            self._base_url,
        )

    @staticmethod
    def _resolve_base_url(parts: SplitResult, port: Optional[int], url_style: UrlStyle, name: str) -> str:
        path = parts.path if parts.path.endswith("/") else parts.path + "/"
        hostname = parts.hostname
        if ":" in hostname:
            if url_style is UrlStyle.VIRTUAL_HOST:
                raise InvalidBucketException(
                    f"Endpoint host '{hostname}' is an IPv6 address and cannot carry a "
                    "virtual-host bucket name; use path style."
                )
            hostname = f"[{hostname}]"

        if url_style is UrlStyle.VIRTUAL_HOST:
            hostname = f"{name}.{hostname}"
            path_with_bucket = path
        else:
            path_with_bucket = f"{path}{name}/"

        if port is not None and port != _DEFAULT_PORTS[parts.scheme]:
            hostname += f":{port}"
        return urlunsplit((parts.scheme, hostname, path_with_bucket, "", ""))

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def name(self) -> str:
        return self._name

    @property
    def region(self) -> str:
        return self._region

    @property
    def url_style(self) -> UrlStyle:
        return self._url_style

    def object_url(self, key: str) -> str:
        """Return the URL of an object in this bucket, with the key path-encoded."""
        # base_url always ends with "/", so the key is appended verbatim
        return self._base_url + encode_path(key)

    def list_object_versions(self, credentials: Optional[Credentials] = None) -> "ListObjectVersions":
        """Build a ListObjectVersions action for this bucket."""
        from .actions import ListObjectVersions

        return ListObjectVersions(self, credentials)

    def put_bucket_versioning(
        self,
        credentials: Credentials,
        status: "VersioningStatus",
    ) -> "PutBucketVersioning":
        """Build a PutBucketVersioning action for this bucket."""
        from .actions import PutBucketVersioning

        return PutBucketVersioning(self, credentials, status)

    def __repr__(self) -> str:
        return (
            f"Bucket(name={self._name!r}, region={self._region!r}, "
            f"url_style={self._url_style}, base_url={self._base_url!r})"
        )
