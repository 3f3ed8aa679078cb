from dataclasses import dataclass, field
from typing import List

ENCRYPTED_SUFFIX = ".encrypted"


@dataclass(frozen=True)
class CryptoParams:
    """Fixed cryptographic parameters shared by key derivation and the file codec.

    Changing any of these makes previously published ciphertexts unreadable.
    """
    salt_size: int = 16
    key_length: int = 32  # AES-256
    scrypt_n: int = 1024
    scrypt_r: int = 8
    scrypt_p: int = 1
    iv_size: int = 12
    tag_size: int = 16  # AES-GCM always emits a 16-byte tag

    def __post_init__(self):
        if self.tag_size != 16:
            raise ValueError(f"tag_size must be 16 for AES-GCM, got {self.tag_size}")

    @property
    def min_blob_size(self) -> int:
        return self.iv_size + self.tag_size


DEFAULT_PARAMS = CryptoParams()


@dataclass
class EncryptionResult:
    encrypted: List[str] = field(default_factory=list)
    skipped: bool = False

    def to_dict(self) -> dict:
        return {"encrypted": list(self.encrypted), "skipped": self.skipped}
