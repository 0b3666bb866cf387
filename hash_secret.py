#!/usr/bin/env python3
"""
Print a PBKDF2 hash of the album write secret.

The output (PBKDF2-HMAC-SHA256, format "salthex$hashhex") can be placed
in ALBUM_WRITE_SECRET_HASH so the plain secret does not have to live in
the service environment.  Nothing is written anywhere.

Usage:
    python hash_secret.py --secret "NewStrongSecret!234"

If --secret is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from album_store_api.app.core.security import hash_secret


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Hash the album store write secret.")
    ap.add_argument("--secret", help="Secret to hash. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    secret = args.secret or getpass.getpass("Enter write secret: ")
    if not secret:
        print("[!] Empty secret is not allowed.", file=sys.stderr)
        return 1

    print(hash_secret(secret))
    return 0


if __name__ == "__main__":
    sys.exit(main())
