from enum import Enum

from .errors import UnsupportedScheme


class Scheme(str, Enum):
    """URL schemes a Git remote can use."""

    SSH = "ssh"
    GIT_SSH = "git+ssh"
    HTTPS = "https"
    HTTP = "http"
    GIT = "git"
    FILE = "file"
    FTP = "ftp"
    FTPS = "ftps"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: str) -> "Scheme":
        lowered = value.lower()
        if lowered == cls.UNKNOWN.value:
            raise UnsupportedScheme(value)
        try:
            return cls(lowered)
        except ValueError:
            raise UnsupportedScheme(value) from None

    @classmethod
    def lookup(cls, value: str, strict: bool = False) -> "Scheme":
        try:
            return cls.from_str(value)
        except UnsupportedScheme:
            if strict:
                raise
            return cls.UNKNOWN
