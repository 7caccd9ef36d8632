import pytest

from libft.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"\x41" * 4)


def test_memset_zero_count_is_noop():
    buf = bytearray(b"abc")
    memset(buf, ord("z"), 0)
    assert buf == bytearray(b"abc")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 4) is buf
    assert buf == bytearray(b"\x00\x00\x00\x00ef")


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd..")


def test_memcpy_same_object_unchanged():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) == bytearray(b"same")


def test_memcpy_bounds():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"ababcdeh")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"cdefgfgh")


def test_memmove_non_overlapping_matches_slice_copy():
    original = b"0123456789"
    buf = bytearray(original)
    memmove(buf, 6, 1, 3)
    assert buf[6:9] == original[1:4]
    assert buf[:6] == original[:6]


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abc")
    assert memmove(buf, 1, 1, 2) == bytearray(b"abc")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_count():
    assert memchr(b"abcdef", ord("e"), 3) is None
    assert memchr(b"abc", ord("a"), 0) is None


def test_memchr_truncates_value():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == data.index(0x41)


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 5)


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_sign_and_value():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert buf == bytearray(12)


def test_calloc_zero_size():
    assert calloc(0, 10) == bytearray()
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)