import argparse

from encassets.utils.core import cmd_encrypt, cmd_decrypt, cmd_verify, PASSWORD_ENV

DEFAULT_SOURCE = "./assets"
DEFAULT_OUTPUT = "./public/encrypted"
DEFAULT_SALT = "./public/salt.txt"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Encrypt an asset directory for publishing (AES-256-GCM, scrypt)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    pw_help = f"Password (default: ${PASSWORD_ENV})"

    p_enc = sub.add_parser("encrypt", help="Encrypt source tree (no-op if output is up to date)")
    p_enc.add_argument("--source", default=DEFAULT_SOURCE, help="Plaintext asset directory")
    p_enc.add_argument("--output", default=DEFAULT_OUTPUT, help="Encrypted output directory")
    p_enc.add_argument("--salt", default=DEFAULT_SALT, help="Salt file (created if missing)")
    p_enc.add_argument("--password", help=pw_help)
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt one .encrypted file or a whole output tree")
    p_dec.add_argument("input", help="Encrypted file or directory")
    p_dec.add_argument("out", help="Output plaintext path or directory")
    p_dec.add_argument("--salt", default=DEFAULT_SALT, help="Existing salt file")
    p_dec.add_argument("--password", help=pw_help)
    p_dec.set_defaults(func=cmd_decrypt)

    p_ver = sub.add_parser("verify", help="Check that the output tree matches the source tree")
    p_ver.add_argument("--source", default=DEFAULT_SOURCE, help="Plaintext asset directory")
    p_ver.add_argument("--output", default=DEFAULT_OUTPUT, help="Encrypted output directory")
    p_ver.add_argument("--salt", default=DEFAULT_SALT, help="Existing salt file")
    p_ver.add_argument("--password", help=pw_help)
    p_ver.set_defaults(func=cmd_verify)

    return p
