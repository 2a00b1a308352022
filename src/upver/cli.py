from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv

from upver.config import VersionSettings
from upver.core.aggregate import highest, lowest
from upver.core.comparison import Ordering, compare, sort_key
from upver.core.errors import VersionError
from upver.core.grammar import is_valid
from upver.core.hashing import legacy_hash, version_digest
from upver.core.serde import version_to_json
from upver.core.versioning import VersionIdentifier, from_descriptive_form, parse

_FORMS = ("descriptive", "basic", "compact")

_ORDERING_WORDS = {
    Ordering.GREATER: "newer",
    Ordering.LESS: "older",
    Ordering.EQUAL: "equal",
}


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", type=str, default=None, help="Path to a TOML config file.")
    p.add_argument(
        "--no-env",
        action="store_true",
        help="Do not auto-load .env (by default, .env is loaded if present).",
    )
    p.add_argument("--verbose", action="store_true", help="Log warnings and debug output.")


def _load_settings(args: argparse.Namespace) -> VersionSettings:
    """Load .env (unless disabled) and resolve settings (env > TOML > defaults)."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")
    if not args.no_env:
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path, override=False)
            if args.verbose:
                print(f"[INFO] Loaded env from {env_path.resolve()}")
    return VersionSettings.load(args.config)


def _render(version: VersionIdentifier, form: str) -> str:
    if form == "basic":
        return version.basic_form
    if form == "compact":
        return version.compact_form
    return version.descriptive_form


def _parse_all(texts: list[str]) -> list[VersionIdentifier]:
    return [parse(t) for t in texts]


def _cmd_parse(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="upver parse", description="Parse a version and print it.")
    p.add_argument("text", type=str, help="Version text, e.g. 1.2.3.4-rc.5.")
    p.add_argument(
        "--form", choices=_FORMS, default=None, help="Output form (default from settings)."
    )
    p.add_argument("--json", action="store_true", help="Print the JSON record instead.")
    p.add_argument(
        "--descriptive",
        action="store_true",
        help="Read TEXT as a descriptive form (e.g. '1.2.3.4 Beta 2').",
    )
    _add_common(p)
    args = p.parse_args(argv)
    settings = _load_settings(args)

    if args.descriptive:
        version = from_descriptive_form(args.text, strict=settings.strict_stage_words)
    else:
        version = parse(args.text)

    if args.json:
        print(version_to_json(version))
    else:
        print(_render(version, args.form or settings.output_form))
    return 0


def _cmd_validate(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="upver validate", description="Check version strings.")
    p.add_argument("texts", nargs="+", help="Version strings to check.")
    _add_common(p)
    args = p.parse_args(argv)
    _load_settings(args)

    code = 0
    for text in args.texts:
        if is_valid(text):
            print(f"[INFO] valid: {text}")
        else:
            print(f"[ERROR] invalid: {text}", file=sys.stderr)
            code = 1
    return code


def _cmd_compare(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="upver compare", description="Print whether A is newer, older, or equal to B."
    )
    p.add_argument("a", type=str)
    p.add_argument("b", type=str)
    _add_common(p)
    args = p.parse_args(argv)
    _load_settings(args)

    print(_ORDERING_WORDS[compare(parse(args.a), parse(args.b))])
    return 0


def _aggregate_command(
    name: str,
    description: str,
    pick: Callable[[list[VersionIdentifier], VersionSettings], VersionIdentifier],
) -> Callable[[list[str]], int]:
    def run(argv: list[str]) -> int:
        p = argparse.ArgumentParser(prog=f"upver {name}", description=description)
        p.add_argument("texts", nargs="*", help="Version strings.")
        p.add_argument("--form", choices=_FORMS, default=None, help="Output form.")
        _add_common(p)
        args = p.parse_args(argv)
        settings = _load_settings(args)

        result = pick(_parse_all(args.texts), settings)
        print(_render(result, args.form or settings.output_form))
        return 0

    return run


_cmd_highest = _aggregate_command(
    "highest",
    "Print the newest version (0.0.0.0 when none is newer).",
    lambda versions, settings: highest(versions, on_empty=settings.empty_highest),
)
_cmd_lowest = _aggregate_command(
    "lowest",
    "Print the oldest version.",
    lambda versions, settings: lowest(versions),
)


def _cmd_sort(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="upver sort", description="Sort versions oldest first.")
    p.add_argument("texts", nargs="*", help="Version strings.")
    p.add_argument("--reverse", action="store_true", help="Newest first.")
    p.add_argument("--form", choices=_FORMS, default=None, help="Output form.")
    _add_common(p)
    args = p.parse_args(argv)
    settings = _load_settings(args)

    for version in sorted(_parse_all(args.texts), key=sort_key, reverse=args.reverse):
        print(_render(version, args.form or settings.output_form))
    return 0


def _cmd_hash(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="upver hash", description="Print a version hash.")
    p.add_argument("text", type=str)
    p.add_argument("--mode", choices=("full", "legacy"), default=None, help="Hash flavor.")
    _add_common(p)
    args = p.parse_args(argv)
    settings = _load_settings(args)

    version = parse(args.text)
    mode = args.mode or settings.hash_mode
    print(legacy_hash(version) if mode == "legacy" else version_digest(version))
    return 0


_COMMANDS: dict[str, Callable[[list[str]], int]] = {
    "parse": _cmd_parse,
    "validate": _cmd_validate,
    "compare": _cmd_compare,
    "highest": _cmd_highest,
    "lowest": _cmd_lowest,
    "sort": _cmd_sort,
    "hash": _cmd_hash,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="upver", description="Version identifier utilities CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    else:
        try:
            code = handler(rest)
        except VersionError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
