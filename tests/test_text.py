import logging

import pytest

from scenekit3d.text import decode_utf8, encode_utf8, log, ordering_name


def test_empty_inputs():
    assert decode_utf8(b"") == ""
    assert encode_utf8("") == b""


@pytest.mark.parametrize("text", ["hello", "テストシーン", "mixed ascii と 日本語", "emoji \U0001F600"])
def test_round_trip(text):
    assert decode_utf8(encode_utf8(text)) == text


def test_encode_matches_utf8():
    assert encode_utf8("é") == b"\xc3\xa9"


def test_invalid_bytes_are_replaced():
    result = decode_utf8(b"ab\xffcd")
    assert result == "ab\ufffdcd"


def test_unencodable_surrogate_is_replaced():
    result = encode_utf8("a\ud800b")
    assert result.startswith(b"a")
    assert result.endswith(b"b")
    assert b"\xed\xa0\x80" not in result


@pytest.mark.parametrize(
    "order, name",
    [(0, "equal"), (1, "greater"), (5, "greater"), (-1, "less"), (-7, "less")],
)
def test_ordering_name(order, name):
    assert ordering_name(order) == name


def test_log_writes_message(caplog):
    with caplog.at_level(logging.DEBUG, logger="scenekit3d"):
        log("loaded scene")
    assert "loaded scene" in caplog.messages