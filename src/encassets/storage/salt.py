import base64
import logging
import os

from pathlib import Path

from encassets.utils.dataModels import CryptoParams, DEFAULT_PARAMS
from encassets.utils.errors import SaltError

logger = logging.getLogger(__name__)


def save_salt(path: Path, salt: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="ascii") as f:
        f.write(base64.b64encode(salt).decode("ascii"))
    os.replace(tmp, path)


def load_salt(path: Path) -> bytes:
    try:
        return base64.b64decode(path.read_text(encoding="ascii"))
    except ValueError as exc:
        raise SaltError(f"Malformed salt file {path}: {exc}") from exc


def get_or_create_salt(path: Path | str, params: CryptoParams = DEFAULT_PARAMS) -> bytes:
    """Return the installation salt stored at `path`, creating it on first use.

    An existing file is never rewritten, so the same password keeps deriving the
    same key until the salt file is deleted.
    """
    path = Path(path)
    if path.is_file():
        logger.debug("Loading salt from %s", path)
        return load_salt(path)

    salt = os.urandom(params.salt_size)
    save_salt(path, salt)
    logger.info("Created new salt at %s", path)
    return salt
