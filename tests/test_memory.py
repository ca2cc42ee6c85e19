import pytest

from fdfview.memory import compare, copy, fill, find_byte, move, zero, zeroed


def test_fill_sets_prefix_only():
    buffer = bytearray(b"abcdef")
    result = fill(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_fill_uses_low_byte():
    buffer = bytearray(4)
    fill(buffer, 0x1FF, 4)
    assert buffer == bytearray([0xFF] * 4)


def test_zero_clears_prefix():
    buffer = bytearray(b"hello")
    zero(buffer, 2)
    assert buffer == bytearray(b"\0\0llo")


def test_zeroed_size_and_content():
    buffer = zeroed(3, 4)
    assert len(buffer) == 3 * 4
    assert not any(buffer)


def test_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        zeroed(-1, 2)


def test_copy_round_trip():
    source = b"payload"
    dest = bytearray(len(source))
    copy(dest, source, len(source))
    assert bytes(dest) == source


def test_copy_partial_keeps_tail():
    dest = bytearray(b"......")
    copy(dest, b"abc", 2)
    assert dest == bytearray(b"ab....")


def test_copy_count_too_large():
    with pytest.raises(ValueError):
        copy(bytearray(2), b"abcd", 3)


def test_move_forward_overlap():
    buffer = bytearray(b"abcdef")
    move(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_move_backward_overlap():
    buffer = bytearray(b"abcdef")
    move(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move(bytearray(4), 2, 0, 3)


def test_find_byte_finds_first():
    buffer = b"banana"
    index = find_byte(buffer, ord("n"), len(buffer))
    assert buffer[index] == ord("n")
    assert ord("n") not in buffer[:index]


def test_find_byte_respects_count():
    buffer = b"banana"
    assert find_byte(buffer, ord("n"), 2) is None


def test_find_byte_wraps_value():
    buffer = bytes([0, 255, 7])
    assert find_byte(buffer, -1, 3) == buffer.index(255)


def test_compare_equal_is_zero():
    assert compare(b"same", b"same", 4) == 0


def test_compare_sign_and_magnitude():
    first, second = b"abcx", b"abca"
    assert compare(first, second, 4) == first[3] - second[3]
    assert compare(second, first, 4) == -compare(first, second, 4)


def test_compare_ignores_bytes_past_count():
    assert compare(b"abX", b"abY", 2) == 0


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        fill(bytearray(3), 0, -1)