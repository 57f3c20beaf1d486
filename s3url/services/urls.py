"""Split storage URLs into bucket and key.

Two shapes are understood::

    s3://BUCKET/KEY
    https://s3-ap-northeast-1.amazonaws.com/BUCKET/KEY

The key is kept whole, so ``s3://bucket/a/b/c`` yields the key ``a/b/c``.
"""

import logging
import re
from urllib.parse import unquote, urlsplit

logger = logging.getLogger(__name__)

NATIVE_SCHEME = "s3"

_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidURLError(ValueError):
    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


def parse_storage_url(url: str) -> tuple[str, str]:
    """Return ``(bucket, key)`` for ``url``.

    Raises :class:`InvalidURLError` when the URL is malformed or, for
    path-style URLs, when the path has no bucket and key segments.
    """
    if _CONTROL_OR_SPACE.search(url) or _BAD_ESCAPE.search(url):
        raise InvalidURLError(url)
    try:
        parts = urlsplit(url)
        parts.port  # non-numeric ports only fail on access
    except ValueError as exc:
        raise InvalidURLError(url) from exc

    path = unquote(parts.path)

    if parts.scheme == NATIVE_SCHEME:
        bucket = parts.netloc.rpartition("@")[2]
        key = path[1:] if path.startswith("/") else path
    else:
        segments = path.split("/", 2)
        if len(segments) < 3:
            raise InvalidURLError(url, "Expected a path of the form /BUCKET/KEY.")
        _, bucket, key = segments

    logger.debug("Parsed %s into bucket=%r key=%r", url, bucket, key)
    return bucket, key
