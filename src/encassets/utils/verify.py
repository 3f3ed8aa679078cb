import logging

from pathlib import Path

from encassets.crypto.aead import decrypt_file
from encassets.storage.scanner import list_files
from encassets.utils.dataModels import CryptoParams, DEFAULT_PARAMS
from encassets.utils.errors import AuthenticationError
from encassets.utils.helper import output_path, source_name

logger = logging.getLogger(__name__)


def verify_encrypted_assets(source_dir: Path | str, output_dir: Path | str, key: bytes,
                            params: CryptoParams = DEFAULT_PARAMS) -> bool:
    """Check that output_dir is an exact encrypted mirror of source_dir under `key`.

    Returns False on the first structural mismatch, unreadable file, failed
    authentication or content difference; nothing after it is checked.
    """
    source_dir = Path(source_dir)
    output_dir = Path(output_dir)
    if output_dir.exists() and not output_dir.is_dir():
        logger.debug("Output %s is not a directory", output_dir)
        return False

    source_files = list_files(source_dir)
    encrypted_files = [source_name(f) for f in list_files(output_dir)]

    if len(source_files) != len(encrypted_files):
        logger.info("File count changed: %d source, %d encrypted", len(source_files), len(encrypted_files))
        return False
    for src, enc in zip(source_files, encrypted_files):
        if src != enc:
            logger.info("File set changed: %s vs %s", src, enc)
            return False

    for rel in source_files:
        try:
            source_content = (source_dir / rel).read_bytes()
            encrypted_content = output_path(output_dir, rel).read_bytes()
            decrypted_content = decrypt_file(encrypted_content, key, params)
        except (OSError, AuthenticationError) as exc:
            logger.info("Cannot verify %s: %s", rel, exc)
            return False
        if decrypted_content != source_content:
            logger.info("Content changed: %s", rel)
            return False

    return True
