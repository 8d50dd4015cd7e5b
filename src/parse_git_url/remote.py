from typing import TYPE_CHECKING

from .git_url import GitUrl, parse

if TYPE_CHECKING:
    from git.repo import Repo


def open_repo(path: str) -> "Repo":
    # Imported lazily so parsing works where no git executable is installed
    from git.repo import Repo

    return Repo(path, search_parent_directories=True)


def parse_remote(path: str = ".", name: str = "origin", strict: bool = False) -> GitUrl:
    repo = open_repo(path)
    remote = repo.remote(name)
    return parse(remote.url, strict=strict)


def parse_remotes(path: str = ".", strict: bool = False) -> dict[str, GitUrl]:
    repo = open_repo(path)
    return {remote.name: parse(remote.url, strict=strict) for remote in repo.remotes}
