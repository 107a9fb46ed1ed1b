import base64
import hashlib

import pytest

from jsonnetkit.strings import (
    base64_decode,
    base64_decode_bytes,
    base64_encode,
    char,
    codepoint,
    decode_utf8,
    encode_utf8,
    md5,
    split_limit,
    str_replace,
    substr,
)
from jsonnetkit.values import JsonnetError


def test_substr_whole_and_pieces():
    text = "héllo wörld"
    assert substr(text, 0, len(text)) == text
    for cut in range(len(text) + 1):
        assert substr(text, 0, cut) + substr(text, cut, len(text)) == text


def test_substr_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_errors():
    with pytest.raises(JsonnetError, match="substr first parameter should be a string, got number"):
        substr(1, 0, 1)
    with pytest.raises(JsonnetError, match="substr second parameter should be a number, got string"):
        substr("abc", "0", 1)
    with pytest.raises(JsonnetError, match="substr second parameter should be an integer"):
        substr("abc", 1.5, 1)
    with pytest.raises(JsonnetError, match="substr second parameter should be greater than zero"):
        substr("abc", -1, 1)
    with pytest.raises(JsonnetError, match="substr third parameter should be a number, got null"):
        substr("abc", 0, None)
    with pytest.raises(JsonnetError, match="substr third parameter should be an integer"):
        substr("abc", 0, 0.5)
    with pytest.raises(JsonnetError, match="substr third parameter should be greater than zero, got -2"):
        substr("abc", 0, -2)


def test_split_limit_round_trip():
    text = "a-b--c-"
    assert "-".join(split_limit(text, "-", -1)) == text
    assert split_limit(text, "-", 0) == [text]


def test_split_limit_limits_splits():
    assert split_limit("a-b-c", "-", 1) == ["a", "b-c"]
    for limit in range(4):
        assert len(split_limit("a-b-c-d-e", "-", limit)) == limit + 1


def test_split_limit_errors():
    with pytest.raises(JsonnetError, match="should have length 1"):
        split_limit("abc", "ab", -1)
    with pytest.raises(JsonnetError, match="should have length 1"):
        split_limit("abc", "é", -1)
    with pytest.raises(JsonnetError, match="-1 or non-negative"):
        split_limit("abc", "b", -2)


def test_str_replace():
    assert str_replace("aXbX", "X", "") == "ab"
    assert str_replace("hello", "l", "l") == "hello"
    assert str_replace("abc", "z", "y") == "abc"
    with pytest.raises(JsonnetError, match="'from' string must not be zero length."):
        str_replace("abc", "", "x")


@pytest.mark.parametrize("point", [0, 65, 233, 0x20AC, 0x1F600, 0x10FFFF])
def test_char_codepoint_round_trip(point):
    assert codepoint(char(point)) == point


def test_char_truncates_fraction():
    assert char(65.7) == char(65)


def test_char_errors():
    with pytest.raises(JsonnetError, match=r"Invalid unicode codepoint, got 1\.114112e\+06"):
        char(0x110000)
    with pytest.raises(JsonnetError, match="Codepoints must be >= 0, got -1"):
        char(-1)


def test_codepoint_wrong_length():
    with pytest.raises(JsonnetError, match="codepoint takes a string of length 1, got length 2"):
        codepoint("ab")


def test_md5():
    assert md5("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5("héllo") == hashlib.md5("héllo".encode("utf-8")).hexdigest()


def test_base64_encode_known_value():
    assert base64_encode("foobar") == "Zm9vYmFy"
    assert base64_encode([102, 111, 111]) == base64_encode("foo")


@pytest.mark.parametrize("text", ["", "a", "ab", "abc", "hello world"])
def test_base64_string_round_trip(text):
    assert base64_decode(base64_encode(text)) == text


def test_base64_bytes_round_trip():
    data = [0, 1, 127, 128, 255]
    assert base64_decode_bytes(base64_encode(data)) == data


def test_base64_matches_stdlib():
    assert base64_encode("ÿ") == base64.b64encode("ÿ".encode("utf-8")).decode("ascii")


def test_base64_encode_errors():
    with pytest.raises(JsonnetError, match=r"\(must be 0 <= X <= 255\), got 256"):
        base64_encode([256])
    with pytest.raises(JsonnetError, match=r"got 256"):
        base64_encode("Ā")
    with pytest.raises(JsonnetError, match="non-integer value in the array, got number"):
        base64_encode([1.5])
    with pytest.raises(JsonnetError, match="non-integer value in the array, got string"):
        base64_encode(["a"])
    with pytest.raises(JsonnetError, match="strings / arrays of single bytes, got null"):
        base64_encode(None)


def test_base64_decode_errors():
    with pytest.raises(JsonnetError, match=r"Wrong length found \(3\)"):
        base64_decode("abc")
    with pytest.raises(JsonnetError, match="failed to decode"):
        base64_decode("!!!!")
    with pytest.raises(JsonnetError, match="base64DecodeBytes requires a string, got number"):
        base64_decode(5)
    with pytest.raises(JsonnetError, match="base64DecodeBytes requires a string, got array"):
        base64_decode_bytes([])


def test_utf8_round_trip():
    text = "héllo € 😀"
    encoded = encode_utf8(text)
    assert len(encoded) == len(text.encode("utf-8"))
    assert all(0 <= byte <= 255 for byte in encoded)
    assert decode_utf8(encoded) == text


def test_decode_utf8_errors():
    with pytest.raises(JsonnetError, match=r"Bytes must be integers in range \[0, 255\], got 256"):
        decode_utf8([256])
    with pytest.raises(JsonnetError, match="expected array"):
        decode_utf8("abc")