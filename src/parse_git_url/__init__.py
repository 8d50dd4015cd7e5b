from .components import UrlComponents, split_url
from .errors import MalformedGitUrl, ParseError, UnsupportedScheme
from .git_url import GitUrl, extract, parse
from .normalize import normalize_url
from .remote import parse_remote, parse_remotes
from .scheme import Scheme

__version__ = "0.1.0"

__all__ = [
    "GitUrl",
    "MalformedGitUrl",
    "ParseError",
    "Scheme",
    "UnsupportedScheme",
    "UrlComponents",
    "extract",
    "normalize_url",
    "parse",
    "parse_remote",
    "parse_remotes",
    "split_url",
]
