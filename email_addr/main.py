"""Консольная утилита для проверки и нормализации адресов."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from email_addr.config import get_settings
from email_addr.modules.address import parse_address
from email_addr.modules.equivalence import compare, hash_address, normalize
from email_addr.modules.errors import AddressError, describe_error
from email_addr.modules.storage import index_hash

LOGGER = logging.getLogger("email_addr.main")


def _cmd_check(args: argparse.Namespace) -> int:
    failures = 0
    for raw in args.addresses:
        try:
            addr = parse_address(raw)
        except AddressError as exc:
            failures += 1
            print(f"{raw}\tINVALID\t{describe_error(exc)}")
            continue
        print(f"{raw}\tOK\t{addr.domain.kind.value}")
    LOGGER.info("Проверено адресов: %d, отклонено: %d", len(args.addresses), failures)
    return 1 if failures else 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    for raw in args.addresses:
        print(normalize(parse_address(raw)))
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    print(compare(parse_address(args.left), parse_address(args.right)))
    return 0


def _cmd_hash(args: argparse.Namespace) -> int:
    addr = parse_address(args.address)
    value = index_hash(addr) if args.index else hash_address(addr)
    print(value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="email-addr", description="RFC 5321/5322 email address tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Проверить адреса и вывести причину отказа")
    check.add_argument("addresses", nargs="+")
    check.set_defaults(handler=_cmd_check)

    norm = subparsers.add_parser("normalize", help="Вывести канонические формы адресов")
    norm.add_argument("addresses", nargs="+")
    norm.set_defaults(handler=_cmd_normalize)

    cmp_parser = subparsers.add_parser("compare", help="Сравнить два адреса (-1, 0, 1)")
    cmp_parser.add_argument("left")
    cmp_parser.add_argument("right")
    cmp_parser.set_defaults(handler=_cmd_compare)

    hash_parser = subparsers.add_parser("hash", help="32-битный хэш адреса")
    hash_parser.add_argument("address")
    hash_parser.add_argument(
        "--index",
        action="store_true",
        help="Заменить зарезервированные значения 0 и 0xFFFFFFFF",
    )
    hash_parser.set_defaults(handler=_cmd_hash)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы и выполняет выбранную команду."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )

    try:
        return args.handler(args)
    except AddressError as exc:
        print(describe_error(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
