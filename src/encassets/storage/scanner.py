from pathlib import Path
from typing import List


def _walk(directory: Path, base: Path, files: List[str]) -> None:
    for entry in directory.iterdir():
        if entry.is_dir():
            _walk(entry, base, files)
        else:
            files.append(entry.relative_to(base).as_posix())


def list_files(root: Path | str) -> List[str]:
    """Sorted POSIX paths of every non-directory entry under `root`, relative to it.

    A missing root yields an empty list. Any other OSError (permissions, root is a
    regular file, ...) propagates.
    """
    root = Path(root)
    files: List[str] = []
    try:
        _walk(root, root, files)
    except FileNotFoundError:
        if root.exists():
            raise
        return []
    return sorted(files)
