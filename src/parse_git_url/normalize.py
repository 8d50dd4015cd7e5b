import logging
import re

from .errors import MalformedGitUrl

logger = logging.getLogger(__name__)

# git:host/path, as opposed to git://host/path
SHORT_GIT_PREFIX = re.compile(r"^git:(?!/)")


def normalize_url(url: str) -> str:
    """Rewrite `url` into a string a generic URL parser can decompose.

    SSH shorthand (`[user@]host:path`) becomes `ssh://[user@]host/path`,
    `git:host/path` becomes `git://host/path` and absolute paths become
    `file://` URLs. Anything carrying an explicit `scheme://` is returned
    as is, minus trailing slashes. Strings with no recognizable shape are
    returned unchanged and left for the parser to reject.
    """
    if "\0" in url:
        raise MalformedGitUrl("input URL contains null bytes", url)

    url = url.rstrip("/")

    if SHORT_GIT_PREFIX.match(url):
        url = "git://" + url.removeprefix("git:")
        logger.debug("Expanded short git notation to %r", url)

    if "://" in url:
        return url

    if is_ssh_shorthand(url):
        return normalize_ssh_url(url)

    if url.startswith("/"):
        logger.debug("Treating %r as a local path", url)
        return f"file://{url}"

    logger.debug("No known shape for %r, passing it through", url)
    return url


def is_ssh_shorthand(url: str) -> bool:
    colon = url.find(":")
    if colon <= 0:
        return False
    if is_windows_drive(url):
        return False
    slash = url.find("/")
    return slash == -1 or colon < slash


def normalize_ssh_url(url: str) -> str:
    parts = url.split(":")

    if len(parts) == 2:
        login, path = parts
        normalized = f"ssh://{login}/{path}"
    elif len(parts) == 3 and parts[1].isdigit():
        login, port, path = parts
        normalized = f"ssh://{login}:{port}/{path}"
    else:
        raise MalformedGitUrl(f"unsupported SSH pattern `{url}`", url)

    logger.debug("Normalized ssh shorthand %r to %r", url, normalized)
    return normalized


def is_windows_drive(url: str) -> bool:
    # C:/path or C:\path
    return len(url) >= 3 and url[0].isalpha() and url[1] == ":" and url[2] in "/\\"
