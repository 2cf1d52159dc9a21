"""
Tests for bits-per-channel capacity planning.
"""
import pytest

from src.services.image_lsb_stream.core.capacity import (
    capacity_bytes,
    max_payload_length,
    plan_bits_per_channel,
)
from src.services.image_lsb_stream.core.errors import ErrorKind, InsufficientCapacityError


def test_capacity_bytes_floors():
    assert capacity_bytes(100, 1) == 12
    assert capacity_bytes(100, 2) == 25
    assert capacity_bytes(7, 1) == 0


def test_plan_picks_first_fitting_depth():
    # 10x10 image, 8 byte header, 5 byte payload: depth 1 holds 12 < 13
    assert plan_bits_per_channel(100, 5, 8, 4) == 2


def test_plan_uses_depth_one_when_it_fits():
    assert plan_bits_per_channel(1000, 10, 13, 8) == 1


def test_plan_exact_fit_at_max_depth():
    # 16 pixels at depth 8 hold exactly 16 bytes
    assert plan_bits_per_channel(16, 3, 13, 8) == 8


def test_plan_fails_beyond_max_depth():
    with pytest.raises(InsufficientCapacityError) as exc_info:
        plan_bits_per_channel(100, 30, 8, 2)

    err = exc_info.value
    assert err.kind is ErrorKind.INSUFFICIENT_CAPACITY
    assert err.required == 38
    assert err.available == 25


def test_plan_boundary_at_depth_one():
    # 200 pixels -> 25 bytes at depth 1
    assert plan_bits_per_channel(200, 12, 13, 1) == 1
    with pytest.raises(InsufficientCapacityError):
        plan_bits_per_channel(200, 13, 13, 1)


def test_plan_is_monotonic_in_payload_length():
    depths = [plan_bits_per_channel(256, n, 13, 8) for n in range(0, 243)]
    assert depths == sorted(depths)
    assert depths[0] == 1
    assert depths[-1] == 8


@pytest.mark.parametrize("depth", range(1, 9))
def test_max_payload_never_decreases_with_pixel_count(depth):
    sizes = [max_payload_length(pixels, depth, 13) for pixels in range(0, 500, 7)]
    assert sizes == sorted(sizes)


def test_max_payload_is_zero_when_header_does_not_fit():
    assert max_payload_length(10, 1, 13) == 0
