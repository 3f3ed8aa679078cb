from pathlib import Path

from cryptography.hazmat.primitives import hashes

from encassets.utils.dataModels import ENCRYPTED_SUFFIX


def encrypted_name(rel_path: str) -> str:
    return rel_path + ENCRYPTED_SUFFIX


def source_name(rel_path: str) -> str:
    """Strip a trailing ENCRYPTED_SUFFIX; other paths are returned unchanged."""
    if rel_path.endswith(ENCRYPTED_SUFFIX):
        return rel_path[:-len(ENCRYPTED_SUFFIX)]
    return rel_path


def output_path(output_dir: Path, rel_path: str) -> Path:
    return Path(output_dir) / encrypted_name(rel_path)


def key_fingerprint(key: bytes) -> str:
    """Short SHA-256 prefix, safe to log in place of the key itself."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(key)
    return digest.finalize().hex()[:12]
