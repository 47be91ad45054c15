"""
AWS Signature V4 query-string signer for s3presign
"""

import hashlib
import hmac
import logging
from datetime import datetime, UTC
from typing import Iterable, List, Optional, Union
from urllib.parse import SplitResult, quote, unquote, urlsplit, urlunsplit

from ._sorting import Pair, merge_sorted
from .method import Method

ALGORITHM = "AWS4-HMAC-SHA256"
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"
SERVICE = "s3"
TERMINATOR = "aws4_request"

_DEFAULT_PORTS = {"http": 80, "https": 443}

logger = logging.getLogger(__name__)


def encode_path(path: str) -> str:
    """Percent-encode a URL path the way S3 canonicalizes it; "/" is kept."""
    return quote(path, safe="/-_.~")


def encode_query_component(value: str) -> str:
    """Percent-encode a query key or value; only A-Z a-z 0-9 - _ . ~ are kept."""
    return quote(value, safe="-_.~")


def _build_query_string(pairs: Iterable[Pair]) -> str:
    return "&".join(
        f"{encode_query_component(k)}={encode_query_component(v)}"
        for k, v in pairs
    )


def _replace_query(url: str, query: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, ""))


def _to_utc(timestamp: datetime) -> datetime:
    # naive datetimes are taken to already be in UTC
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)


def _host_header(parts: SplitResult) -> str:
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
        host += f":{port}"
    return host


def _hmac_sha256(key: bytes, msg: str) -> bytes:
    return hmac.new(key, msg.encode(), hashlib.sha256).digest()


class AwsSignatureV4Signer:
    """
    Signs S3 URLs using AWS Signature Version 4 query-string authentication.

    The payload is never signed: presigned URLs always use UNSIGNED-PAYLOAD,
    so a request body can be attached by whoever sends the request.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        token: Optional[str] = None,
        region: str = "us-east-1",
    ):
        self.access_key = access_key
        self.secret_key = secret_key
        self.token = token
        self.region = region

    def _build_canonical_headers(self, host: str, headers: Iterable[Pair]) -> List[Pair]:
        """Lower-case names, trim values and order the headers with host among them."""
        normalized = (
            (name.lower(), " ".join(value.split()))
            for name, value in headers
        )
        return list(merge_sorted([("host", host)], normalized))

    def _build_canonical_querystring(
        self,
        amz_date: str,
        credential_scope: str,
        expires_in_seconds: int,
        signed_headers: str,
        query_params: Iterable[Pair],
    ) -> str:
        """Merge the X-Amz-* parameters with the action's own and encode them."""
        presigned_params = [
            ("X-Amz-Algorithm", ALGORITHM),
            ("X-Amz-Credential", f"{self.access_key}/{credential_scope}"),
            ("X-Amz-Date", amz_date),
            ("X-Amz-Expires", str(int(expires_in_seconds))),
            ("X-Amz-SignedHeaders", signed_headers),
        ]
        if self.token is not None:
            presigned_params.append(("X-Amz-Security-Token", self.token))

        return _build_query_string(merge_sorted(presigned_params, query_params))

    def _derive_signing_key(self, datestamp: str) -> bytes:
        """Derive the signing key for AWS Signature V4."""
        k_date = _hmac_sha256(f"AWS4{self.secret_key}".encode(), datestamp)
        k_region = _hmac_sha256(k_date, self.region)
        k_service = _hmac_sha256(k_region, SERVICE)
        return _hmac_sha256(k_service, TERMINATOR)

    def generate_presigned_url(
        self,
        method: Union[Method, str],
        url: str,
        expires_in_seconds: int,
        query_params: Iterable[Pair] = (),
        headers: Iterable[Pair] = (),
        timestamp: Optional[datetime] = None,
    ) -> str:
        """
        Generate a presigned URL with AWS Signature V4.

        Args:
            method: HTTP method the URL will be used with
            url: Base URL, without a query string
            expires_in_seconds: How long the URL stays valid
            query_params: Action query pairs, merged with the X-Amz-* parameters
            headers: Headers the request will carry, signed along with host
            timestamp: Signing time, defaults to now; converted to UTC
        """
        if timestamp is None:
            timestamp = datetime.now(UTC)
        timestamp = _to_utc(timestamp)

        amz_date = timestamp.strftime("%Y%m%dT%H%M%SZ")
        datestamp = timestamp.strftime("%Y%m%d")
        credential_scope = f"{datestamp}/{self.region}/{SERVICE}/{TERMINATOR}"

        parts = urlsplit(url)
        host = _host_header(parts)
        canonical_headers = self._build_canonical_headers(host, headers)
        signed_headers = ";".join(name for name, _ in canonical_headers)

        canonical_querystring = self._build_canonical_querystring(
            amz_date,
            credential_scope,
            expires_in_seconds,
            signed_headers,
            query_params,
        )

        canonical_request = "\n".join([
            Method(method).value,
            encode_path(unquote(parts.path or "/")),
            canonical_querystring,
            "".join(f"{name}:{value}\n" for name, value in canonical_headers),
            signed_headers,
            UNSIGNED_PAYLOAD,
        ])

        # String to sign
        canonical_request_hash = hashlib.sha256(
            canonical_request.encode()
        ).hexdigest()

        string_to_sign = "\n".join([
            ALGORITHM,
            amz_date,
            credential_scope,
            canonical_request_hash,
        ])

        # Signature
        signing_key = self._derive_signing_key(datestamp)
        signature = hmac.new(
            signing_key,
            string_to_sign.encode(),
            hashlib.sha256
        ).hexdigest()

        logger.debug(
            "[S3Presign][Sign] method=%s host=%s expirySeconds=%s signedHeaders=%s date=%s",
            Method(method).value,
            host,
            expires_in_seconds,
            signed_headers,
            amz_date,
        )

        return _replace_query(url, f"{canonical_querystring}&X-Amz-Signature={signature}")


def sign(
    time: datetime,
    method: Union[Method, str],
    url: str,
    key: str,
    secret: str,
    token: Optional[str],
    region: str,
    expires_in_seconds: int,
    query_pairs: Iterable[Pair],
    header_pairs: Iterable[Pair],
) -> str:
    """Sign ``url`` for ``method`` at ``time`` and return the presigned URL."""
    signer = AwsSignatureV4Signer(key, secret, token=token, region=region)
    return signer.generate_presigned_url(
        method,
        url,
        expires_in_seconds,
        query_params=query_pairs,
        headers=header_pairs,
        timestamp=time,
    )


def add_query_params(url: str, query_pairs: Iterable[Pair]) -> str:
    """Attach the pairs to ``url`` unsigned, for anonymous access."""
    return _replace_query(url, _build_query_string(query_pairs))
