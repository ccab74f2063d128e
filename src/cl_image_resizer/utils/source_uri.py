"""Source location helpers: share-link rewriting and remote fetching."""

import logging
import re

import httpx

from ..common.errors import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0

_DROPBOX_PREVIEW = re.compile(r"^https?://(www\.)?dropbox\.com/.*\?dl=0")


def is_remote_uri(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_source_uri(source: str) -> str:
    """
    Turn a Dropbox gallery link into a direct download link.

    ``?dl=0`` serves an HTML preview page; ``?dl=1`` serves the file itself.
    Anything else is returned unchanged.
    """
    if _DROPBOX_PREVIEW.match(source):
        return source.replace("?dl=0", "?dl=1", 1)
    return source


def read_source_bytes(uri: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Fetch a remote source image.

    Args:
        uri: http(s) URI of the image
        timeout: Request timeout in seconds

    Returns:
        Raw response body

    Raises:
        DecodeError: If the request fails or returns an error status
    """
    url = resolve_source_uri(uri)
    logger.info(f"Fetching source image from {url}")

    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
        _ = response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch source image from {url}: {e}")
        raise DecodeError(f"Unable to fetch image from `{url}`: {e}") from e

    return response.content
