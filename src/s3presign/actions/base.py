"""
Shared behaviour of presignable S3 actions
"""

from abc import ABC, abstractmethod
from datetime import datetime, UTC
from typing import Dict, Iterable, Optional

from .._signer import add_query_params, sign
from .._sorting import Pair
from ..bucket import Bucket
from ..credentials import Credentials
from ..method import Method


class S3Action(ABC):
    """
    A single S3 API call that can be turned into a presigned URL.

    Subclasses set ``METHOD`` and implement :meth:`sign_with_time`, usually by
    merging their sub-resource marker into the query and calling
    :meth:`_presign`. The ``query`` and ``headers`` dicts can be edited freely
    before signing; their order does not matter.
    """

    METHOD: Method

    def __init__(self, bucket: Bucket, credentials: Optional[Credentials] = None):
        self._bucket = bucket
        self._credentials = credentials
        self._query: Dict[str, str] = {}
        self._headers: Dict[str, str] = {}

    @property
    def bucket(self) -> Bucket:
        return self._bucket

    @property
    def query(self) -> Dict[str, str]:
        return self._query

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    def sign(self, expires_in_seconds: int) -> str:
        """Presign the action with the current time."""
        return self.sign_with_time(expires_in_seconds, datetime.now(UTC))

    @abstractmethod
    def sign_with_time(self, expires_in_seconds: int, time: datetime) -> str:
        """Presign the action as if it were ``time``."""

    def _presign(self, expires_in_seconds: int, time: datetime, query: Iterable[Pair]) -> str:
        """Sign against the bucket's base URL, or attach the query unsigned without credentials."""
        url = self._bucket.base_url
        if self._credentials is None:
            return add_query_params(url, query)

        return sign(
            time,
            self.METHOD,
            url,
            self._credentials.key,
            self._credentials.secret,
            self._credentials.token,
            self._bucket.region,
            expires_in_seconds,
            query,
            self._headers.items(),
        )
