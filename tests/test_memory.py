import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    original = b"Hi Madrid"
    buf = bytearray(original)
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == original[2:]


def test_memset_fills_prefix():
    original = b"Hi Madrid"
    buf = bytearray(original)
    result = memset(buf, ord("X"), 5)
    assert result is buf
    assert buf[:5] == b"X" * 5
    assert buf[5:] == original[5:]


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_calloc_zeroed():
    buf = calloc(5, 4)
    assert len(buf) == 20
    assert buf == bytes(20)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_found_and_missing():
    data = b"Hola Mundo!"
    assert memchr(data, ord("M"), 11) == 5
    assert memchr(data, ord("z"), 11) is None


def test_memchr_limited_by_n():
    data = b"Hola Mundo!"
    assert memchr(data, ord("M"), 5) is None


def test_memcmp_equal_prefix():
    assert memcmp(b"Hola Mundo", b"Hola Mundo!", 10) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_memcmp_out_of_range_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    src = b"Hola Mundo"
    dest = bytearray(20)
    result = memcpy(dest, src, 5)
    assert result is dest
    assert dest[:5] == src[:5]
    assert dest[5:] == bytes(15)


def test_memcpy_zero_is_noop():
    dest = bytearray(b"keep")
    memcpy(dest, b"zzzz", 0)
    assert dest == b"keep"


def test_memmove_overlapping_forward():
    buf = bytearray(b"Hola Mundo!")
    view = memoryview(buf)
    dest = view[5:]
    result = memmove(dest, view, 5)
    assert result is dest
    assert bytes(result) == b"Hola !"
    assert buf == b"Hola Hola !"


def test_memmove_overlapping_backward():
    original = b"0123456789"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[2:], 8)
    assert result is view
    assert bytes(result) == b"2345678989"
    assert buf[:8] == original[2:]
    assert buf[8:] == original[8:]


def test_memmove_too_long_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(2), b"abc", 3)