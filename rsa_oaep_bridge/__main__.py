"""
Command-line host for the three operations.

    python -m rsa_oaep_bridge generate > keys.json
    python -m rsa_oaep_bridge encrypt --public-key pub.pem --text "hello"
    python -m rsa_oaep_bridge decrypt --private-key priv.pem --ciphertext <b64>

Key arguments take a file path, or "-" to read stdin. Output is the
operation's JSON result; exit status is 1 when it carries an error.
"""

import argparse
import json
import logging
import sys

from . import api
from .config import OAEPConfig


def _read_key(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="ascii", errors="replace") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsa_oaep_bridge",
        description="RSA key generation and RSA-OAEP (SHA-256) encryption",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_gen = sub.add_parser("generate", help="generate an RSA key pair")
    p_gen.add_argument("--bits", type=int, default=2048,
                       choices=OAEPConfig.SUPPORTED_KEY_SIZES,
                       help="modulus size (default 2048)")

    p_enc = sub.add_parser("encrypt", help="encrypt text under a public key")
    p_enc.add_argument("--public-key", required=True, help="armored public key file, or -")
    p_enc.add_argument("--text", required=True, help="plaintext (UTF-8)")

    p_dec = sub.add_parser("decrypt", help="decrypt base64 ciphertext with a private key")
    p_dec.add_argument("--private-key", required=True, help="armored private key file, or -")
    p_dec.add_argument("--ciphertext", required=True, help="base64 ciphertext")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.cmd == "generate":
            result = api.generate_keys(OAEPConfig(key_size=args.bits))
        elif args.cmd == "encrypt":
            result = api.encrypt(_read_key(args.public_key), args.text)
        else:
            result = api.decrypt(_read_key(args.private_key), args.ciphertext)
    except OSError as e:
        print(json.dumps({"error": f"Cannot read key: {e}"}))
        return 1

    print(json.dumps(result.to_dict()))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
