import numpy as np
import pytest

from heatoverlay.heatmap.heat_buffer import HeatBuffer, create_heat_buffer, stamp
from heatoverlay.heatmap.stamp import generate_radial_stamp
from heatoverlay.heatmap.errors import InvalidArgument


def test_create_fills_baseline():
    heat = create_heat_buffer(5, 3, baseline=7)
    assert heat.shape == (3, 5)
    assert (heat.values == 7).all()


@pytest.mark.parametrize("width, height, baseline", [(0, 3, 0), (3, 0, 0), (3, 3, -1), (3, 3, 256)])
def test_create_rejects_bad_arguments(width, height, baseline):
    with pytest.raises(InvalidArgument):
        create_heat_buffer(width, height, baseline)


def test_values_view_is_read_only():
    heat = create_heat_buffer(4, 4)
    with pytest.raises(ValueError):
        heat.values[0, 0] = 1


def test_single_stamp_blends_toward_dot():
    heat = create_heat_buffer(4, 4)
    dot = generate_radial_stamp(3)
    stamp(heat, 2, 2, dot, 1.0)
    assert heat.values[2, 2] == 255
    # Cells outside the dot are untouched
    assert heat.values[0, 0] == 0
    assert heat.values[0, 3] == 0


def test_partial_blend_alpha():
    heat = create_heat_buffer(3, 3)
    dot = generate_radial_stamp(3)
    stamp(heat, 1, 1, dot, 0.75)
    # 0 + (255 - 0) * 0.75 = 191.25, floored
    assert heat.values[1, 1] == 191


def test_clipped_at_edges():
    heat = create_heat_buffer(10, 10)
    dot = generate_radial_stamp(9)
    stamp(heat, 0, 0, dot, 1.0)
    assert heat.values[0, 0] == 255
    stamp(heat, 9, 9, dot, 1.0)
    assert heat.values[9, 9] == 255


def test_fully_outside_is_noop():
    heat = create_heat_buffer(10, 10)
    dot = generate_radial_stamp(5)
    for x, y in [(-20, 5), (5, -20), (40, 5), (5, 40), (-100, -100)]:
        stamp(heat, x, y, dot, 1.0)
    assert (heat.values == 0).all()


def test_never_decreases():
    rng = np.random.default_rng(1234)
    heat = create_heat_buffer(40, 30)
    dot = generate_radial_stamp(15)
    previous = heat.values.copy()
    for _ in range(200):
        x, y = rng.integers(-10, 50), rng.integers(-10, 40)
        stamp(heat, x, y, dot, rng.uniform(0.05, 1.0))
        current = heat.values.copy()
        assert (current >= previous).all()
        previous = current


def test_dimmer_dot_does_not_lower_heat():
    heat = HeatBuffer(5, 5, baseline=200)
    dot = generate_radial_stamp(5)
    stamp(heat, 2, 2, dot, 1.0)
    # The dot's rim is far dimmer than 200
    assert (heat.values >= 200).all()
    assert heat.values[2, 2] == 255


def test_saturates_at_dot_maximum():
    heat = create_heat_buffer(9, 9)
    dot = generate_radial_stamp(9)
    for _ in range(20):
        stamp(heat, 4, 4, dot, 1.0)
        assert heat.values[4, 4] == 255
    assert heat.peak() == 255


def test_repeated_partial_stamps_approach_but_never_reach_full():
    heat = create_heat_buffer(5, 5)
    dot = generate_radial_stamp(5)
    values = []
    for _ in range(50):
        stamp(heat, 2, 2, dot, 0.5)
        values.append(int(heat.values[2, 2]))
    assert values == sorted(values)
    assert values[-1] < 255
    assert values[-1] >= 250


def test_zero_blend_alpha_is_noop():
    heat = create_heat_buffer(5, 5)
    stamp(heat, 2, 2, generate_radial_stamp(5), 0.0)
    assert heat.peak() == 0


def test_rejects_malformed_dot():
    heat = create_heat_buffer(5, 5)
    with pytest.raises(InvalidArgument):
        stamp(heat, 2, 2, np.zeros((3, 3), dtype=np.uint8), 1.0)
