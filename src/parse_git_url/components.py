import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from .errors import MalformedGitUrl

logger = logging.getLogger(__name__)

INVALID_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
INVALID_HOST_CHARACTERS = re.compile(r"[\s\x00-\x1f\x7f<>\"{}|\\^`]")

# Schemes whose URLs legitimately have no host
HOSTLESS_SCHEMES = frozenset({"file"})


@dataclass(frozen=True)
class UrlComponents:
    scheme: str
    netloc: str
    host: Optional[str]
    username: Optional[str]
    password: Optional[str]
    port: Optional[int]
    path: str


def split_url(url: str) -> UrlComponents:
    """Decompose a normalized URL, rejecting what is not a valid URL.

    Scheme and host come back lowercased. Path and userinfo are left
    percent-encoded.
    """
    if INVALID_PERCENT_ESCAPE.search(url):
        raise MalformedGitUrl(f"invalid percent-encoding in `{url}`", url)

    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as err:
        raise MalformedGitUrl(f"unable to parse URL `{url}`: {err}", url) from err

    if not parts.scheme or "://" not in url:
        raise MalformedGitUrl(f"missing scheme in `{url}`", url)

    host = parts.hostname or None
    if host is None and parts.scheme not in HOSTLESS_SCHEMES:
        raise MalformedGitUrl(f"could not isolate host from URL `{url}`", url)
    if host is not None and INVALID_HOST_CHARACTERS.search(host):
        raise MalformedGitUrl(f"invalid host `{host}` in `{url}`", url)

    components = UrlComponents(
        scheme=parts.scheme,
        netloc=parts.netloc,
        host=host,
        username=parts.username or None,
        password=parts.password or None,
        port=port,
        path=parts.path,
    )
    # userinfo may hold a token, keep it out of the logs
    logger.debug(
        "Split URL into scheme=%r host=%r port=%r path=%r",
        components.scheme,
        components.host,
        components.port,
        components.path,
    )
    return components
