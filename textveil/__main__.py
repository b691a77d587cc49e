"""
Command-line front end:

  textveil demo [--scheme a|b] [TEXT]
  textveil encode --scheme a TEXT
  textveil decode --scheme b TEXT
  textveil -v ...          # DEBUG logging
"""

from __future__ import annotations

import argparse
import sys

from textveil.core.errors import UnknownSchemeError
from textveil.schemes import available_schemes, get_codec
from textveil.util.logger import set_log_level

DEMO_TEXT = "Raviteja123@123"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textveil", description="Reversible text obfuscation codecs.")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    scheme_help = f"codec to use: {', '.join(available_schemes())} (or a / b); defaults to settings"

    demo = sub.add_parser("demo", help="encode then decode a sample value")
    demo.add_argument("--scheme", default=None, help=scheme_help)
    demo.add_argument("text", nargs="?", default=DEMO_TEXT)

    for command in ("encode", "decode"):
        cmd = sub.add_parser(command, help=f"{command} TEXT")
        cmd.add_argument("--scheme", default=None, help=scheme_help)
        cmd.add_argument("text")
    return parser


def _demo(codec, text: str) -> int:
    print(f"Plain value is   --> {text}")
    encoded = codec.encode(text)
    print(f"Encoded value is --> {encoded.to_legacy()}")
    if not encoded.ok:
        return 1
    decoded = codec.decode(encoded.value)
    print(f"Decoded value is --> {decoded.to_legacy()}")
    return 0 if decoded.ok else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level("debug")

    try:
        codec = get_codec(args.scheme)
    except UnknownSchemeError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if args.command == "demo":
        return _demo(codec, args.text)

    result = codec.encode(args.text) if args.command == "encode" else codec.decode(args.text)
    if not result.ok:
        print(result.to_legacy(), file=sys.stderr)
        return 1
    print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
