from typing import Optional


class ParseError(ValueError):
    """Base exception for URLs that cannot be parsed as Git URLs."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class MalformedGitUrl(ParseError):
    """The URL is not syntactically valid once normalized."""


class UnsupportedScheme(ParseError):
    """The URL scheme is valid but not one used by Git."""

    def __init__(self, scheme: str, url: Optional[str] = None):
        super().__init__(f"unsupported scheme `{scheme}`", url)
        self.scheme = scheme
