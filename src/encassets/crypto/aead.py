import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from encassets.utils.dataModels import CryptoParams, DEFAULT_PARAMS
from encassets.utils.errors import AuthenticationError


def encrypt_file(plaintext: bytes, key: bytes, params: CryptoParams = DEFAULT_PARAMS) -> bytes:
    """Encrypt a whole file in memory -> iv || ciphertext || tag"""
    iv = os.urandom(params.iv_size)
    aesgcm = AESGCM(key)
    # AESGCM returns ciphertext with the tag appended
    ct_and_tag = aesgcm.encrypt(iv, plaintext, None)
    return iv + ct_and_tag


def decrypt_file(blob: bytes, key: bytes, params: CryptoParams = DEFAULT_PARAMS) -> bytes:
    if len(blob) < params.min_blob_size:
        raise AuthenticationError(f"Encrypted blob is too short ({len(blob)} bytes)")
    iv = blob[:params.iv_size]
    tag = blob[len(blob) - params.tag_size:]
    ct = blob[params.iv_size:len(blob) - params.tag_size]
    aesgcm = AESGCM(key)
    try:
        return aesgcm.decrypt(iv, ct + tag, None)
    except InvalidTag as exc:
        raise AuthenticationError("Authentication failed: wrong key or corrupted blob") from exc
