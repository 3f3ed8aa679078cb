class EncryptedAssetsError(Exception):
    """Base class for errors raised by encassets."""


class AuthenticationError(EncryptedAssetsError):
    """An encrypted blob failed tag verification or is truncated."""


class DerivationError(EncryptedAssetsError):
    """The scrypt primitive rejected the key derivation request."""


class SaltError(EncryptedAssetsError):
    """The salt file exists but does not hold base64 text."""
