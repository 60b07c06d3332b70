from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .catalog import key_types, signature_algorithms
from .config import load_policy_config
from .crypto.identify import identify
from .crypto.selector import default_for_key_type, for_algorithm, for_key_type
from .errors import KeyPolicyError, NoSuchElement
from .policy.resolver import get_allowed, get_default


def _policy(args: argparse.Namespace) -> tuple[str | None, str | None]:
    cfg = load_policy_config()
    allow = args.allow if args.allow is not None else cfg.keytype_allow
    default = args.default if args.default is not None else cfg.keytype_default
    return allow, default


def cmd_allowed(args: argparse.Namespace) -> int:
    allow, _ = _policy(args)
    for kt in get_allowed(allow):
        print(f"{kt.id}\t{kt.description}")
    return 0


def cmd_default(args: argparse.Namespace) -> int:
    allow, default = _policy(args)
    kt = get_default(allow, default)
    print(f"{kt.id}\t{kt.description}")
    return 0


def cmd_identify(args: argparse.Namespace) -> int:
    data = Path(args.file).read_bytes()
    try:
        kt = identify(data)
    except KeyPolicyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"{kt.id}\t{kt.description}")
    return 0


def cmd_signatures(args: argparse.Namespace) -> int:
    try:
        kt = key_types.find_by_id(args.id)
    except NoSuchElement:
        kt = None
    if kt is not None:
        ladder = for_key_type(kt)
        chosen = default_for_key_type(kt)
    else:
        try:
            chosen = signature_algorithms.find_by_id(args.id)
        except NoSuchElement:
            print(f"error: {args.id!r} is neither a key type nor a signature algorithm", file=sys.stderr)
            return 2
        ladder = for_algorithm(chosen)
    for alg in ladder:
        mark = "*" if alg == chosen else " "
        print(f"{mark} {alg.name}\t{alg.oid}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("keypolicy")
    p.add_argument("--allow", default=None, help="key type policy, overrides configuration")
    p.add_argument("--default", default=None, help="default key type id, overrides configuration")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_allowed = sub.add_parser("allowed")
    p_allowed.set_defaults(func=cmd_allowed)

    p_default = sub.add_parser("default")
    p_default.set_defaults(func=cmd_default)

    p_identify = sub.add_parser("identify")
    p_identify.add_argument("file")
    p_identify.set_defaults(func=cmd_identify)

    p_sig = sub.add_parser("signatures")
    p_sig.add_argument("id")
    p_sig.set_defaults(func=cmd_signatures)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
