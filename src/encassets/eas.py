#!/usr/bin/env python3
"""
Encrypted Assets (EAS) - publish a directory tree as password-protected blobs.

Every file under the source directory is encrypted into the output directory at
the same relative path with ".encrypted" appended. Re-running with an unchanged
source tree and password is a no-op: the existing output is decrypted and
compared first, and only a stale output tree is wiped and rebuilt.

Output layout:
  public/
    salt.txt                  # base64 of 16 random bytes, created once
    encrypted/
      <relative path>.encrypted  # binary: 12-byte IV || ciphertext || 16-byte tag

Commands:
  encrypt              Encrypt source -> output (skips when already up to date)
  decrypt <in> <out>   Decrypt one blob or a whole output tree
  verify               Exit 0 if output mirrors source, 2 if stale

Security choices:
  - AEAD: AES-256-GCM via cryptography.hazmat, fresh random IV per file
  - Key = scrypt(NFKC(password), salt), N=1024, r=8, p=1 -> 32 bytes

Callers must serialize runs that target the same output directory.
"""
from __future__ import annotations

import logging
import sys

from encassets.ui.cli import build_parser
from encassets.utils.errors import EncryptedAssetsError


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (EncryptedAssetsError, OSError) as e:
        print(f"[!] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
