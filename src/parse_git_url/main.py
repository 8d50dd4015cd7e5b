import logging
from argparse import ArgumentParser
from os import getenv
from typing import NoReturn, Optional

from dotenv import load_dotenv

from . import __version__
from .errors import ParseError
from .git_url import GitUrl, parse
from .remote import parse_remote, parse_remotes


program = "parse-git-url"

formats = ["debug", "url", "fullname"]

truthy_values = {"1", "true", "yes", "on"}


def main(argv: Optional[list[str]] = None):
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug or env_flag("PARSE_GIT_URL_DEBUG"))
    strict = args.strict or env_flag("PARSE_GIT_URL_STRICT")
    output_format = args.format or getenv("PARSE_GIT_URL_FORMAT", "debug")
    if output_format not in formats:
        fail(f"Unknown output format {output_format}, expected one of: {', '.join(formats)}.")

    if not (args.urls or args.remotes or args.all_remotes):
        parser.print_usage()
        fail("Nothing to parse.")

    for git_url in collect_git_urls(args.urls, args.remotes, args.all_remotes, strict):
        if args.trim_auth:
            git_url = git_url.trim_auth()
        print(render(git_url, output_format))


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=program, description="Parse Git repository URLs.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("urls", nargs="*", metavar="URL")
    parser.add_argument(
        "-r", "--remote", action="append", dest="remotes", default=[], metavar="NAME"
    )
    parser.add_argument("--all-remotes", action="store_true")
    parser.add_argument("--strict", action="store_true")
    parser.add_argument("--trim-auth", action="store_true")
    parser.add_argument("--format", choices=formats)
    parser.add_argument("--debug", action="store_true")
    return parser


def collect_git_urls(
    urls: list[str], remotes: list[str], all_remotes: bool, strict: bool
) -> list[GitUrl]:
    git_urls: list[GitUrl] = []

    for url in urls:
        try:
            git_urls.append(parse(url, strict=strict))
        except ParseError as err:
            fail(str(err))

    if remotes or all_remotes:
        git_urls.extend(collect_remote_urls(remotes, all_remotes, strict))

    return git_urls


def collect_remote_urls(
    remotes: list[str], all_remotes: bool, strict: bool
) -> list[GitUrl]:
    # GitPython is only needed once a local checkout is involved
    from git.exc import InvalidGitRepositoryError, NoSuchPathError

    try:
        if all_remotes:
            return list(parse_remotes(strict=strict).values())
        return [parse_remote(name=name, strict=strict) for name in remotes]
    except (InvalidGitRepositoryError, NoSuchPathError):
        fail("Not a Git repository.")
    except ValueError as err:
        # ParseError, or GitPython's missing remote
        fail(str(err))


def render(git_url: GitUrl, output_format: str) -> str:
    if output_format == "url":
        return str(git_url)
    if output_format == "fullname":
        return git_url.fullname
    return repr(git_url)


def env_flag(name: str) -> bool:
    return (getenv(name) or "").strip().lower() in truthy_values


def configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")
