"""
Tests for the bit accumulator and the raster cursor.
"""
from src.services.image_lsb_stream.core.bitset import BitAccumulator, byte_to_bits
from src.services.image_lsb_stream.core.cursor import Cursor


def test_byte_to_bits_msb_first():
    assert byte_to_bits(0b10110001) == [1, 0, 1, 1, 0, 0, 0, 1]
    assert byte_to_bits(0) == [0] * 8
    assert byte_to_bits(0xFF) == [1] * 8


def test_accumulator_reports_full_group():
    acc = BitAccumulator(2)
    assert len(acc) == 6
    results = [acc.push(bit) for bit in [1, 0, 1, 1, 0, 1]]
    assert results == [False] * 5 + [True]
    assert acc.channel_runs() == [[1, 0], [1, 1], [0, 1]]


def test_accumulator_pad_zeroes_tail():
    acc = BitAccumulator(1)
    for bit in [1, 1, 1]:
        acc.push(bit)
    acc.reset()
    acc.push(1)
    assert acc.has_pending()
    acc.pad()
    assert acc.bits == [1, 0, 0]


def test_accumulator_resize_clears_state():
    acc = BitAccumulator(1)
    acc.push(1)
    acc.resize(4)
    assert acc.bits_per_channel == 4
    assert len(acc) == 12
    assert acc.position == 0
    assert not acc.has_pending()


def test_cursor_visits_pixels_in_row_major_order():
    cursor = Cursor(3, 2)
    visited = []
    while not cursor.exhausted:
        visited.append(cursor.position)
        cursor.advance()

    assert visited == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert cursor.position == (0, 2)
    assert len(set(visited)) == len(visited)


def test_cursor_single_column():
    cursor = Cursor(1, 3)
    cursor.advance()
    assert cursor.position == (0, 1)
    cursor.advance()
    cursor.advance()
    assert cursor.exhausted
