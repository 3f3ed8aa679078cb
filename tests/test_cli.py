import pytest

from encassets.eas import main
from encassets.utils.core import PASSWORD_ENV


def _args(tree, cmd="encrypt"):
    return [cmd, "--source", str(tree["source"]), "--output", str(tree["output"]), "--salt", str(tree["salt"])]


def test_encrypt_then_skip(asset_tree, capsys):
    main(_args(asset_tree) + ["--password", "pw"])
    out = capsys.readouterr().out
    assert "[+] Encrypted: a.txt" in out
    assert "[+] Encrypted: sub/b.txt" in out

    main(_args(asset_tree) + ["--password", "pw"])
    assert "already up to date" in capsys.readouterr().out


def test_password_from_env(asset_tree, monkeypatch, capsys):
    monkeypatch.setenv(PASSWORD_ENV, "pw")
    main(_args(asset_tree))
    assert "Encryption complete" in capsys.readouterr().out


def test_missing_password_exits(asset_tree, monkeypatch):
    monkeypatch.delenv(PASSWORD_ENV, raising=False)
    with pytest.raises(SystemExit) as exc:
        main(_args(asset_tree))
    assert exc.value.code == 1


def test_verify_exit_codes(asset_tree):
    main(_args(asset_tree) + ["--password", "pw"])
    main(_args(asset_tree, "verify") + ["--password", "pw"])

    (asset_tree["source"] / "a.txt").write_bytes(b"changed")
    with pytest.raises(SystemExit) as exc:
        main(_args(asset_tree, "verify") + ["--password", "pw"])
    assert exc.value.code == 2


def test_decrypt_single_file(asset_tree, tmp_path):
    main(_args(asset_tree) + ["--password", "pw"])
    out = tmp_path / "plain" / "a.txt"
    main(["decrypt", str(asset_tree["output"] / "a.txt.encrypted"), str(out),
          "--salt", str(asset_tree["salt"]), "--password", "pw"])
    assert out.read_bytes() == b"root file"


def test_decrypt_wrong_password_reports_error(asset_tree, tmp_path, capsys):
    main(_args(asset_tree) + ["--password", "pw"])
    with pytest.raises(SystemExit) as exc:
        main(["decrypt", str(asset_tree["output"]), str(tmp_path / "plain"),
              "--salt", str(asset_tree["salt"]), "--password", "nope"])
    assert exc.value.code == 1
    assert "[!] Authentication failed" in capsys.readouterr().out


def test_malformed_salt_reports_error(asset_tree, capsys):
    asset_tree["salt"].parent.mkdir(parents=True)
    asset_tree["salt"].write_text("abc")
    with pytest.raises(SystemExit) as exc:
        main(_args(asset_tree) + ["--password", "pw"])
    assert exc.value.code == 1
    assert "[!] Malformed salt file" in capsys.readouterr().out
    assert not asset_tree["output"].exists()
