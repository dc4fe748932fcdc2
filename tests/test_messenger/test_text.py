"""Tests for mis-encoded text repair."""

from archive_clients.messenger.text import decode_string, normalize


def _mojibake(text: str) -> str:
    return text.encode("utf-8").decode("latin-1")


def test_decode_recovers_accented_name():
    assert decode_string("JosÃ©") == "José"


def test_decode_emoji_and_cjk():
    assert decode_string(_mojibake("❤ 你好")) == "❤ 你好"


def test_decode_ascii_unchanged():
    assert decode_string("Hello world") == "Hello world"


def test_decode_empty_and_none():
    assert decode_string("") == ""
    assert decode_string(None) == ""


def test_decode_invalid_utf8_does_not_raise():
    # A lone continuation byte is not valid UTF-8
    assert decode_string("a\u00a9b") == "a\ufffdb"


def test_decode_keeps_already_correct_text():
    assert decode_string("你好") == "你好"


def test_decode_twice_garbles_latin_text():
    once = decode_string(_mojibake("José"))
    assert once == "José"
    assert decode_string(once) != "José"


def test_normalize_alias():
    assert normalize is decode_string


def test_decode_non_string_does_not_raise():
    assert decode_string(42) == "42"
    assert decode_string(0) == ""
