"""Command line validation of account numbers and resource identifiers.

Usage::

    akahu-types account 3890000000000123 12-3456-7890123-001
    akahu-types id account acc_abc123
    akahu-types banks
    akahu-types generate account --count 5 --seed 42
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from akahu_types.account_number import BankAccountNumber
from akahu_types.banks import BankPrefix, all_banks
from akahu_types.config import AkahuTypesConfig
from akahu_types.exceptions import ConfigurationError, ValidationError
from akahu_types.generators import BankAccountNumberGenerator, IdentifierGenerator
from akahu_types.identifiers import IdentifierKind, from_user_input
from akahu_types.logging import get_logger, setup_logging
from akahu_types.serialization import serialize_value

logger = get_logger(__name__)

KIND_CHOICES = [kind.value for kind in IdentifierKind]


def _emit(record: dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(serialize_value(record)))
    else:
        print("\t".join(str(serialize_value(v)) for v in record.values()))


def _account_record(number: BankAccountNumber) -> dict[str, Any]:
    return {
        "canonical": number,
        "bank_name": number.bank_name,
        "bank_code": number.bank_code,
        "branch_code": number.branch_code,
        "account_number": number.account_number,
        "suffix": number.suffix,
    }


def cmd_account(args: argparse.Namespace) -> int:
    failures = 0
    for text in args.values:
        try:
            number = BankAccountNumber.parse(text)
        except ValidationError as exc:
            failures += 1
            print(f"error: {exc}", file=sys.stderr)
            continue
        logger.debug("Canonicalized %r to %s", text, number)
        if args.json:
            _emit(_account_record(number), as_json=True)
        else:
            _emit({"canonical": number, "bank_name": number.bank_name}, as_json=False)
    return 1 if failures else 0


def cmd_id(args: argparse.Namespace) -> int:
    failures = 0
    for text in args.values:
        try:
            identifier = from_user_input(args.kind, text)
        except ValidationError as exc:
            failures += 1
            print(f"error: {exc}", file=sys.stderr)
            continue
        _emit({"identifier": identifier, "kind": identifier.kind}, args.json)
    return 1 if failures else 0


def cmd_banks(args: argparse.Namespace) -> int:
    for identity in all_banks():
        _emit({"code": identity.display_code, "bank_name": identity.bank_name}, args.json)
    return 0


def cmd_generate(args: argparse.Namespace, config: AkahuTypesConfig) -> int:
    seed = args.seed if args.seed is not None else config.generator.seed
    if args.what == "account":
        bank = None
        if args.bank is not None:
            bank = BankPrefix.from_code(args.bank)
            if bank is None:
                print(f"error: unknown bank code {args.bank!r}", file=sys.stderr)
                return 1
        account_gen = BankAccountNumberGenerator(seed=seed, locale=config.generator.locale)
        for number in account_gen.generate_batch(args.count, bank=bank):
            _emit(_account_record(number) if args.json else {"canonical": number}, args.json)
    else:
        id_gen = IdentifierGenerator(
            seed=seed,
            locale=config.generator.locale,
            length=config.generator.identifier_length,
        )
        for identifier in id_gen.generate_batch(args.kind, args.count):
            _emit({"identifier": identifier}, args.json)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="akahu-types",
        description="Validate and canonicalize NZ bank account numbers and Akahu identifiers",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per line",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    account = subparsers.add_parser("account", help="Canonicalize bank account numbers")
    account.add_argument("values", nargs="+", help="Hyphenated or 16-digit account numbers")

    ident = subparsers.add_parser("id", help="Validate resource identifiers")
    ident.add_argument("kind", choices=KIND_CHOICES, help="Identifier kind")
    ident.add_argument("values", nargs="+", help="Identifiers to check")

    subparsers.add_parser("banks", help="List known bank prefixes")

    generate = subparsers.add_parser("generate", help="Generate synthetic values")
    generate.add_argument("what", choices=["account", "id"])
    generate.add_argument(
        "--kind",
        choices=KIND_CHOICES,
        default=IdentifierKind.ACCOUNT.value,
        help="Identifier kind for 'id' (default: account)",
    )
    generate.add_argument("--bank", type=str, default=None, help="Bank code for 'account'")
    generate.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of values to generate (default: 1)",
    )
    generate.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: AKAHU_TYPES_SEED)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        config = AkahuTypesConfig.from_env()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    setup_logging(
        level=args.log_level or config.log_level,
        format_type=config.log_format,
        stream=sys.stderr,
    )

    if args.command == "account":
        return cmd_account(args)
    if args.command == "id":
        return cmd_id(args)
    if args.command == "banks":
        return cmd_banks(args)
    return cmd_generate(args, config)


if __name__ == "__main__":
    sys.exit(main())
