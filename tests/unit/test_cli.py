"""
로컬 유닛 테스트 - 알파벳 프리셋 및 커맨드라인 도구 검증
"""

import pytest

from basex import Encoding, InvalidAlphabet
from basex import alphabets
from basex.cli import decode_to_hex, encode_hex, main


@pytest.fixture(autouse=True)
def _no_env_alphabet(monkeypatch):
    monkeypatch.delenv("BASEX_ALPHABET", raising=False)


def test_presets_are_valid():
    for name, alphabet in alphabets.ALPHABETS.items():
        enc = alphabets.get(name)
        assert enc.alphabet == alphabet
        assert enc.base == int(name[len("base"):])


def test_get_is_shared_and_case_insensitive():
    assert alphabets.get("base58") is alphabets.get(" Base58 ")


def test_get_unknown_name():
    with pytest.raises(KeyError, match="unknown alphabet"):
        alphabets.get("base99")


def test_resolve_name_or_literal():
    assert alphabets.resolve("BASE62") is alphabets.get("base62")
    assert alphabets.resolve("xyz") == Encoding("xyz")
    with pytest.raises(InvalidAlphabet):
        alphabets.resolve("xx")


def test_encode_hex_and_decode_to_hex():
    assert encode_hex("000001", "base16") == "001"
    assert decode_to_hex("001", "base16") == "000001"
    assert encode_hex("61", "base58") == "2g"


def test_main_encode_default_alphabet(capsys):
    assert main(["encode", "61"]) == 0
    assert capsys.readouterr().out == "2g\n"


def test_main_alphabet_from_env(monkeypatch, capsys):
    monkeypatch.setenv("BASEX_ALPHABET", "base16")
    assert main(["encode", "00ff"]) == 0
    assert capsys.readouterr().out == "0ff\n"


def test_main_flag_overrides_env(monkeypatch, capsys):
    monkeypatch.setenv("BASEX_ALPHABET", "base16")
    assert main(["-a", "base2", "decode", "101"]) == 0
    assert capsys.readouterr().out == "05\n"


def test_main_verbose_literal_alphabet(capsys):
    assert main(["-a", "0123456789abcdef", "-v", "encode", "00ff"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ['  [base16 인코딩] 2 bytes → "0ff"', "0ff"]


def test_main_invalid_character(capsys):
    assert main(["-a", "01", "decode", "012"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("오류: ")
    assert "'2'" in captured.err


def test_main_invalid_hex(capsys):
    assert main(["encode", "zz"]) == 1
    assert capsys.readouterr().err.startswith("오류: ")


def test_main_invalid_alphabet(capsys):
    assert main(["-a", "a", "encode", "ff"]) == 1
    assert "at least 2 characters" in capsys.readouterr().err


def test_main_requires_command():
    with pytest.raises(SystemExit):
        main([])
