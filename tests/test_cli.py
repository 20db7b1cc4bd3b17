import pytest

from sdesmodes.bits import to_hex
from sdesmodes.cli import main, read_token
from sdesmodes.modes import CBC
from sdesmodes.sdes import SDES

KEY = "1010000010"
PLAINTEXT = "0111001010110001"
IV = "11001010"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    (data / "key").write_text(KEY + "\n")
    (data / "plainText").write_text(PLAINTEXT + "\n")
    (data / "iv").write_text(IV + "\n")
    monkeypatch.chdir(tmp_path)
    return data


def test_read_token_first_word(tmp_path):
    path = tmp_path / "f"
    path.write_text("  0101 1111\n")
    assert read_token(path) == "0101"


def test_read_token_missing_file(tmp_path):
    assert read_token(tmp_path / "absent") == ""


def test_read_token_blank_file(tmp_path):
    path = tmp_path / "blank"
    path.write_text("\n\n")
    assert read_token(path) == ""


def test_no_mode(workdir, capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Please specify --ecb or --cbc\n"


def test_both_modes(workdir, capsys):
    assert main(["--ecb", "--cbc"]) == 1
    assert capsys.readouterr().out == "Please specify only one of --ecb or --cbc\n"


def test_ecb_output(workdir, capsys):
    assert main(["--ecb"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Encrypted text with ECB: 01110111")
    encrypted = out.split(": ")[1].split(" -- ")[0]
    assert out == f"Encrypted text with ECB: {encrypted} -- {to_hex(encrypted)}\n"


def test_cbc_output(workdir, capsys):
    assert main(["--cbc"]) == 0
    expected = CBC(SDES(KEY), IV).encrypt(PLAINTEXT)
    assert capsys.readouterr().out == (
        f"Encrypted text with CBC: {expected} -- {to_hex(expected)}\n"
    )


def test_ecb_works_without_iv_file(workdir, capsys):
    (workdir / "iv").unlink()
    assert main(["--ecb", "--unknown"]) == 0
    assert "Encrypted text with ECB:" in capsys.readouterr().out


def test_debug_output(workdir, capsys):
    assert main(["--cbc", "--debug"]) == 0
    out = capsys.readouterr().out
    assert f"Key: {KEY}\n" in out
    assert f"Plaintext: {PLAINTEXT}\n" in out
    assert f"IV: {IV}\n" in out
    assert "subkey1:" in out


def test_bad_key_raises(workdir):
    (workdir / "key").write_text("101\n")
    with pytest.raises(ValueError):
        main(["--ecb"])


def test_partial_block_raises(workdir):
    (workdir / "plainText").write_text("0101\n")
    with pytest.raises(ValueError):
        main(["--ecb"])