import logging
from dataclasses import dataclass, replace
from typing import Optional

from .components import UrlComponents, split_url
from .errors import ParseError
from .normalize import normalize_url
from .scheme import Scheme

logger = logging.getLogger(__name__)

GIT_SUFFIX = ".git"

# Azure DevOps: https://dev.azure.com/Org/Project/_git/Repo
ORGANIZATION_MARKER = "_git"

# Azure DevOps: git@ssh.dev.azure.com:v3/Org/Project/Repo
AZURE_SSH_HOSTS = frozenset({"ssh.dev.azure.com", "vs-ssh.visualstudio.com"})
AZURE_SSH_PREFIX = "v3"

VISUALSTUDIO_DOMAIN = ".visualstudio.com"

USERINFO_SCHEMES = (Scheme.SSH, Scheme.GIT, Scheme.GIT_SSH)
CREDENTIAL_SCHEMES = (Scheme.HTTP, Scheme.HTTPS)


@dataclass(frozen=True)
class GitUrl:
    """A Git remote URL broken down into the metadata hosting services use."""

    host: Optional[str] = None
    name: str = ""
    owner: Optional[str] = None
    organization: Optional[str] = None
    fullname: str = ""
    scheme: Scheme = Scheme.UNKNOWN
    user: Optional[str] = None
    token: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    git_suffix: bool = False
    scheme_prefix: bool = False

    @classmethod
    def parse(cls, url: str, strict: bool = False) -> "GitUrl":
        return parse(url, strict=strict)

    def trim_auth(self) -> "GitUrl":
        return replace(self, user=None, token=None)

    def __str__(self) -> str:
        """Rebuild the URL from the parsed fields.

        An unrecognized scheme was parsed as `Scheme.UNKNOWN` and its original
        text is not kept, so such URLs render with an `unknown://` prefix
        rather than the input's scheme.
        """
        prefix = f"{self.scheme}://" if self.scheme_prefix else ""

        if self.scheme in USERINFO_SCHEMES:
            auth = f"{self.user}@" if self.user else ""
        elif self.scheme in CREDENTIAL_SCHEMES:
            credentials = ":".join(part for part in (self.user, self.token) if part)
            auth = f"{credentials}@" if credentials else ""
        else:
            auth = ""

        port = f":{self.port}" if self.port is not None else ""

        if self.scheme is Scheme.SSH:
            separator = "/" if self.scheme_prefix else ":"
            path = f"{separator}{self.path}"
        else:
            path = self.path

        return f"{prefix}{auth}{self.host or ''}{port}{path}"


def parse(url: str, strict: bool = False) -> GitUrl:
    """Normalize and parse `url` into a `GitUrl`.

    Unrecognized schemes come back as `Scheme.UNKNOWN` unless `strict` is
    set, in which case `UnsupportedScheme` is raised.
    """
    try:
        normalized = normalize_url(url)
        components = split_url(normalized)
        return extract(components, url, strict=strict)
    except ParseError as err:
        err.url = url
        raise


def extract(components: UrlComponents, original: str, strict: bool = False) -> GitUrl:
    scheme = Scheme.lookup(components.scheme, strict=strict)

    if scheme is Scheme.SSH:
        # normalized ssh urls always carry the leading '/' of the authority form
        path = components.path.removeprefix("/")
    elif scheme is Scheme.FILE:
        path = components.netloc + components.path
    else:
        path = components.path

    host = None if scheme is Scheme.FILE else components.host
    segments = [segment for segment in path.split("/") if segment]
    logger.debug("Path segments of %r: %r", path, segments)

    if scheme is Scheme.FILE:
        # no owner metadata can be assumed from a filesystem path
        organization, owner = None, None
        name = segments[-1] if segments else ""
    else:
        organization, owner, name = split_namespace(segments, host)

    while name.endswith(GIT_SUFFIX):
        name = name[: -len(GIT_SUFFIX)]

    fullname = "/".join(part for part in (organization, owner, name) if part)

    return GitUrl(
        host=host,
        name=name,
        owner=owner,
        organization=organization,
        fullname=fullname,
        scheme=scheme,
        user=components.username,
        token=components.password,
        port=components.port,
        path=path,
        git_suffix=path.endswith(GIT_SUFFIX),
        scheme_prefix="://" in original or original.startswith("git:"),
    )


def split_namespace(
    segments: list[str], host: Optional[str]
) -> tuple[Optional[str], Optional[str], str]:
    """Split path segments into organization, owner and repo name.

    The name keeps its `.git` suffix; callers strip it.
    """
    if host in AZURE_SSH_HOSTS and segments[:1] == [AZURE_SSH_PREFIX]:
        segments = segments[1:]

    if ORGANIZATION_MARKER in segments[:-1]:
        marker = segments.index(ORGANIZATION_MARKER)
        logger.debug("Found organization marker at segment %d", marker)
        namespace, name = segments[:marker], segments[marker + 1]

        if len(namespace) == 1:
            if is_visualstudio_host(host):
                # https://Org.visualstudio.com/Project/_git/Repo
                return host.split(".")[0], namespace[0], name
            # https://dev.azure.com/Org/_git/Repo
            return namespace[0], None, name
    elif segments:
        namespace, name = segments[:-1], segments[-1]
    else:
        return None, None, ""

    owner = namespace[-1] if namespace else None
    organization = "/".join(namespace[:-1]) or None
    return organization, owner, name


def is_visualstudio_host(host: Optional[str]) -> bool:
    return (
        host is not None
        and host.endswith(VISUALSTUDIO_DOMAIN)
        and host not in AZURE_SSH_HOSTS
    )
