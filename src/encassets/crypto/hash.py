import logging
import unicodedata

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from encassets.utils.dataModels import CryptoParams, DEFAULT_PARAMS
from encassets.utils.errors import DerivationError

logger = logging.getLogger(__name__)


def normalize_password(password: str) -> bytes:
    """NFKC-normalize so differently composed but identical-looking passwords match."""
    return unicodedata.normalize("NFKC", password).encode("utf-8")


def derive_key(password: str, salt: bytes, params: CryptoParams = DEFAULT_PARAMS) -> bytes:
    """Key = scrypt(NFKC(password), salt) -> params.key_length bytes"""
    secret = normalize_password(password)
    try:
        kdf = Scrypt(
            salt=salt,
            length=params.key_length,
            n=params.scrypt_n,
            r=params.scrypt_r,
            p=params.scrypt_p,
        )
        key = kdf.derive(secret)
    except (ValueError, UnsupportedAlgorithm, MemoryError) as exc:
        raise DerivationError(f"scrypt key derivation failed: {exc}") from exc
    logger.debug("Derived %d-byte key (n=%d, r=%d, p=%d)", len(key), params.scrypt_n, params.scrypt_r, params.scrypt_p)
    return key
