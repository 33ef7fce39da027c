"""
Command line interface

    locale-registry list --dir ./locales
    locale-registry translate ID_TEST --dir ./locales --locale zh-CN
    locale-registry translate ID_MISSING --dir ./locales --locale English --fallback "n/a"
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from locale_registry.config import get_settings
from locale_registry.exceptions import LocaleRegistryError
from locale_registry.locales import Locales
from locale_registry.utils.app_logger import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--dir",
        dest="locales_dir",
        default=str(settings.locales_dir) if settings.locales_dir else None,
        help="Directory scanned for locale files (default: LOCALE_REGISTRY_LOCALES_DIR)",
    )
    common.add_argument("--prefix", default=settings.filename_prefix, help="Locale filename prefix")
    common.add_argument("--default-language", default=settings.default_language)
    common.add_argument("--log-level", default=settings.log_level)

    parser = argparse.ArgumentParser(prog="locale-registry", description="Inspect locale files.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", parents=[common], help="List loaded locales")

    translate = subparsers.add_parser("translate", parents=[common], help="Translate a message id")
    translate.add_argument("message_id")
    translate.add_argument("--locale", required=True, help="Tag or display name to activate")
    translate.add_argument("--fallback", default=None, help="Printed when the message is missing")

    return parser


def _load(args: argparse.Namespace) -> Locales:
    if not args.locales_dir:
        raise SystemExit("locale-registry: --dir is required (or set LOCALE_REGISTRY_LOCALES_DIR)")
    locales = Locales(args.prefix, args.default_language)
    report = locales.load_locales_dir(args.locales_dir)
    for path in report.failed:
        print(f"failed: {path}", file=sys.stderr)
    return locales


def _cmd_list(args: argparse.Namespace) -> int:
    locales = _load(args)
    for entry in locales.entries():
        print(f"{entry.tag}\t{entry.display_name}")
    return 0


def _cmd_translate(args: argparse.Namespace) -> int:
    locales = _load(args)
    locales.set_locale(args.locale)
    print(locales.localize(args.message_id, args.fallback))
    return 0


COMMANDS = {
    "list": _cmd_list,
    "translate": _cmd_translate,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return COMMANDS[args.command](args)
    except LocaleRegistryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
