"""
Access credentials used to sign S3 requests
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class Credentials:
    """
    An access key, its secret and an optional session token.

    The secret and token are kept out of ``repr()``.
    """
    key: str
    secret: str = field(repr=False)
    token: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Optional["Credentials"]:
        """
        Read credentials from the standard AWS environment variables.

        Returns None when either the access key or the secret is unset, which
        callers can pass straight through to get anonymous URLs.
        """
        if environ is None:
            environ = os.environ

        key = environ.get("AWS_ACCESS_KEY_ID")
        secret = environ.get("AWS_SECRET_ACCESS_KEY")
        if not key or not secret:
            return None

        token = environ.get("AWS_SESSION_TOKEN") or None
        return cls(key=key, secret=secret, token=token)
