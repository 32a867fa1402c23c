import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from purehash.sha1 import Sha1, sha1, sha1_f, sha1_k


def hex_words(text):
    return tuple(int(text[i:i + 8], 16) for i in range(0, len(text), 8))


@pytest.mark.parametrize(
    "src, repeat, expected",
    [
        (b"", 1, "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
        (b"abc", 1, "a9993e364706816aba3e25717850c26c9cd0d89d"),
        (
            b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            1,
            "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
        ),
        (
            b"0123456701234567012345670123456701234567012345670123456701234567",
            10,
            "DEA356A2CDDD90C7A7ECEDC5EBB563934F460452",
        ),
    ],
)
def test_source_vectors(src, repeat, expected):
    h = Sha1()
    for _ in range(repeat):
        h.update(src)
    assert h.words() == hex_words(expected)
    assert h.hexdigest() == expected.lower()


def test_million_a():
    h = Sha1()
    chunk = b"a" * 1000
    for _ in range(1000):
        h.update(chunk)
    assert h.words() == hex_words("34AA973CD4C4DAA4F61EEB2BDBAD27316534016F")


def test_constructor_data_and_helper():
    assert sha1(b"abc").hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert Sha1(b"abc").digest() == bytes.fromhex("a9993e364706816aba3e25717850c26c9cd0d89d")


def test_digest_is_repeatable_and_extendable():
    h = Sha1(b"ab")
    first = h.hexdigest()
    assert h.hexdigest() == first
    h.update(b"c")
    assert h.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_copy_is_independent():
    h = Sha1(b"ab")
    other = h.copy()
    other.update(b"c")
    assert other.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert h.hexdigest() == hashlib.sha1(b"ab").hexdigest()


def test_rejects_text():
    with pytest.raises(TypeError):
        Sha1().update("abc")


@given(st.binary(max_size=300), st.integers(min_value=0, max_value=300))
def test_matches_hashlib_when_split(data, cut):
    h = Sha1()
    h.update(data[:cut])
    h.update(data[cut:])
    assert h.digest() == hashlib.sha1(data).digest()


def test_round_function_and_constants():
    assert sha1_f(0, 0xFFFFFFFF, 0x12345678, 0x9ABCDEF0) == 0x12345678
    assert sha1_f(19, 0, 0x12345678, 0x9ABCDEF0) == 0x9ABCDEF0
    assert sha1_f(20, 0xF0, 0x0F, 0xFF) == 0
    assert sha1_f(45, 0xFF, 0x0F, 0) == 0x0F
    assert sha1_f(79, 1, 2, 4) == 7
    assert [sha1_k(t) for t in (0, 20, 40, 60)] == [
        0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6,
    ]


@pytest.mark.parametrize("t", [-1, 80])
def test_step_out_of_range(t):
    with pytest.raises(ValueError):
        sha1_f(t, 1, 2, 3)
    with pytest.raises(ValueError):
        sha1_k(t)