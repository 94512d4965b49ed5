from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml

from .errors import IniStoreError
from .lookup import Lookup
from .parser import dumps
from .paths import settings_file, user_config_dir
from .settings import load_settings
from .store import IniStore

logger = logging.getLogger("inistore.cli")

DEBUG_ENV = "INISTORE_DEBUG"


def _configure_logging(verbosity: int) -> None:
    root = logging.getLogger("inistore")
    if os.environ.get(DEBUG_ENV) or verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
        root.addHandler(handler)
    root.setLevel(level)


def _store(args: argparse.Namespace) -> IniStore:
    settings = load_settings(
        args.settings,
        encoding=args.encoding,
        strict=True if args.strict else None,
    )
    return IniStore(args.path, settings)


def _report(result: Lookup, section: str, key: str) -> None:
    if result.found:
        logger.info("[%s] %s: %s", section, key, result.describe())
    else:
        logger.warning(result.describe())


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def get_cmd(args: argparse.Namespace) -> int:
    result = _store(args).get_value_by_key(args.section, args.key)
    if not result.found:
        _report(result, args.section, args.key)
        return 1
    print(result.value)
    return 0


def set_cmd(args: argparse.Namespace) -> int:
    result = _store(args).modify_key(args.section, args.key, args.value)
    _report(result, args.section, args.key)
    return 0 if result.found else 1


def show_cmd(args: argparse.Namespace) -> int:
    doc = _store(args).read()
    if args.format == "json":
        print(json.dumps(doc, indent=2))
    elif args.format == "yaml":
        print(yaml.safe_dump(doc, sort_keys=False, allow_unicode=True).rstrip())
    else:
        print(dumps(doc).rstrip())
    return 0


def paths_cmd(args: argparse.Namespace) -> int:
    data = {
        "user_config": user_config_dir(),
        "settings_file": settings_file(),
    }
    if args.as_json:
        print(json.dumps({k: str(v) for k, v in data.items()}))
    else:
        for k, v in data.items():
            print(f"{k}: {v}")
    return 0


def build_parser(prog: str = "inistore") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Read and edit INI files.")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log output (-vv for debug)"
    )
    parser.add_argument("--encoding", help="Text encoding of the INI file")
    parser.add_argument(
        "--strict", action="store_true", help="Reject lines outside the section/key=value format"
    )
    parser.add_argument("--settings", type=Path, default=None, help="Alternate settings.ini")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_get = subparsers.add_parser("get", help="Print the value of KEY in SECTION.")
    p_get.add_argument("path", type=Path)
    p_get.add_argument("section")
    p_get.add_argument("key")
    p_get.set_defaults(func=get_cmd)

    p_set = subparsers.add_parser("set", help="Change the value of an existing KEY in SECTION.")
    p_set.add_argument("path", type=Path)
    p_set.add_argument("section")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.set_defaults(func=set_cmd)

    p_show = subparsers.add_parser("show", help="Print the whole file.")
    p_show.add_argument("path", type=Path)
    p_show.add_argument("--as", dest="format", choices=["ini", "json", "yaml"], default="ini")
    p_show.set_defaults(func=show_cmd)

    p_paths = subparsers.add_parser("paths", help="Show inistore settings paths.")
    p_paths.add_argument("--json", dest="as_json", action="store_true")
    p_paths.set_defaults(func=paths_cmd)

    return parser


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    parser = build_parser(prog=prog or "inistore")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return int(args.func(args))
    except (IniStoreError, OSError, UnicodeError, LookupError) as exc:
        # LookupError: unknown codec name
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
