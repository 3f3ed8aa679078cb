import argparse
import logging
import os
import shutil
import sys

from pathlib import Path
from typing import List

from encassets.crypto.aead import encrypt_file, decrypt_file
from encassets.crypto.hash import derive_key
from encassets.storage.salt import get_or_create_salt, load_salt
from encassets.storage.scanner import list_files
from encassets.utils.dataModels import CryptoParams, DEFAULT_PARAMS, EncryptionResult, ENCRYPTED_SUFFIX
from encassets.utils.helper import output_path, source_name, key_fingerprint
from encassets.utils.verify import verify_encrypted_assets

logger = logging.getLogger(__name__)

PASSWORD_ENV = "ENCASSETS_PASSWORD"


def _purge(output_dir: Path) -> None:
    if output_dir.is_dir() and not output_dir.is_symlink():
        shutil.rmtree(output_dir)
    else:
        output_dir.unlink()


def encrypt_assets(source_dir: Path | str, output_dir: Path | str, salt_file: Path | str, password: str,
                   params: CryptoParams = DEFAULT_PARAMS) -> EncryptionResult:
    """Encrypt every file under source_dir into output_dir as <path>.encrypted.

    If output_dir already holds a valid encrypted mirror for this key, nothing is
    written and the result is marked skipped. Otherwise output_dir is removed and
    rebuilt from scratch; there are no partial updates.
    """
    source_dir = Path(source_dir)
    output_dir = Path(output_dir)

    salt = get_or_create_salt(salt_file, params)
    key = derive_key(password, salt, params)
    logger.debug("Using key %s", key_fingerprint(key))

    if output_dir.exists() or output_dir.is_symlink():
        if verify_encrypted_assets(source_dir, output_dir, key, params):
            logger.info("Encrypted assets in %s are up to date", output_dir)
            return EncryptionResult(encrypted=[], skipped=True)
        logger.info("Encrypted assets in %s are stale, regenerating", output_dir)
        _purge(output_dir)

    source_files = list_files(source_dir)
    for rel in source_files:
        encrypted_path = output_path(output_dir, rel)
        encrypted_path.parent.mkdir(parents=True, exist_ok=True)
        plaintext = (source_dir / rel).read_bytes()
        encrypted_path.write_bytes(encrypt_file(plaintext, key, params))
        logger.debug("Encrypted %s -> %s", rel, encrypted_path)

    return EncryptionResult(encrypted=source_files, skipped=False)


def decrypt_assets(output_dir: Path | str, dest_dir: Path | str, salt_file: Path | str, password: str,
                   params: CryptoParams = DEFAULT_PARAMS) -> List[str]:
    """Restore every .encrypted blob under output_dir into dest_dir.

    The salt file must already exist. Returns the restored relative paths in
    sorted order.
    """
    output_dir = Path(output_dir)
    dest_dir = Path(dest_dir)
    key = derive_key(password, load_salt(Path(salt_file)), params)

    restored = []
    for rel in list_files(output_dir):
        if not rel.endswith(ENCRYPTED_SUFFIX):
            logger.warning("Ignoring %s: not an encrypted asset", rel)
            continue
        name = source_name(rel)
        target = dest_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(decrypt_file((output_dir / rel).read_bytes(), key, params))
        restored.append(name)
    return restored


def resolve_password(args: argparse.Namespace) -> str:
    password = args.password if args.password is not None else os.environ.get(PASSWORD_ENV)
    if not password:
        print(f"[!] No password given. Use --password or set {PASSWORD_ENV}.")
        sys.exit(1)
    return password


def cmd_encrypt(args: argparse.Namespace) -> None:
    password = resolve_password(args)
    result = encrypt_assets(args.source, args.output, args.salt, password)
    if result.skipped:
        print("[=] Encrypted assets already up to date, skipping.")
        return
    for rel in result.encrypted:
        print(f"[+] Encrypted: {rel}")
    print(f"[+] Encryption complete ({len(result.encrypted)} files) -> {args.output}")


def cmd_decrypt(args: argparse.Namespace) -> None:
    password = resolve_password(args)
    src = Path(args.input)
    out = Path(args.out)

    if src.is_dir():
        restored = decrypt_assets(src, out, args.salt, password)
        for rel in restored:
            print(f"[+] Decrypted: {rel}")
        print(f"[+] Restored {len(restored)} files -> {out}")
        return

    key = derive_key(password, load_salt(Path(args.salt)))
    plaintext = decrypt_file(src.read_bytes(), key)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(plaintext)
    print(f"[+] Decrypted {src.name} -> {out}")


def cmd_verify(args: argparse.Namespace) -> None:
    password = resolve_password(args)
    key = derive_key(password, load_salt(Path(args.salt)))
    if verify_encrypted_assets(args.source, args.output, key):
        print(f"[+] {args.output} is up to date")
        return
    print(f"[!] {args.output} is stale or missing")
    sys.exit(2)
