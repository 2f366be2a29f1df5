"""Command line demonstration of Schnorr signing and verification."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from schnorrsig.config import SchnorrSettings
from schnorrsig.constants import DEFAULT_BITS, DEMO_MESSAGE, HASH_NAME
from schnorrsig.errors import GenerationError
from schnorrsig.keys import KeyFactory

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--bits",
        type=int,
        default=DEFAULT_BITS,
        help=f"Size of the safe prime in bits (default: {DEFAULT_BITS})",
    )
    parser.add_argument(
        "--hash",
        dest="hash_name",
        default=HASH_NAME,
        help=f"hashlib algorithm used for challenges (default: {HASH_NAME})",
    )
    parser.add_argument(
        "--message",
        default=DEMO_MESSAGE.decode("utf-8"),
        help="Message Alice signs",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity written to stderr",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    namespace = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=namespace.log_level, format=LOG_FORMAT)

    try:
        settings = SchnorrSettings(bits=namespace.bits, hash_name=namespace.hash_name)
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1

    try:
        factory = KeyFactory(settings)
        alice = factory.generate_keys()
        bob = factory.generate_keys()
        signed = alice.sign(namespace.message.encode("utf-8"))
    except GenerationError as exc:
        print(f"Key generation failed: {exc}", file=sys.stderr)
        return 1

    payload = {
        "bits": factory.params.bits,
        "message": namespace.message,
        "challenge": hex(signed.challenge),
        "response": hex(signed.response),
        "verified": bob.verify(signed, alice.public_key),
        "wrong_key_verified": bob.verify(signed, bob.public_key),
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
