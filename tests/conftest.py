import pytest

from encassets.crypto.hash import derive_key


@pytest.fixture
def key():
    return derive_key("test-password", b"0123456789abcdef")


@pytest.fixture
def asset_tree(tmp_path):
    source = tmp_path / "source"
    (source / "sub").mkdir(parents=True)
    (source / "a.txt").write_bytes(b"root file")
    (source / "sub" / "b.txt").write_bytes(b"nested file")
    return {
        "source": source,
        "output": tmp_path / "output",
        "salt": tmp_path / "public" / "salt.txt",
    }
