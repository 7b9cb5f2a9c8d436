import math

import pytest

from sclgui.spring import Spring, Spring2D, fast_round


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make(start=0.0):
    clock = FakeClock()
    return Spring(start, clock), clock


def position_after(damper, target, t):
    spring, clock = make(0.0)
    spring.with_damper(damper).set_target(target)
    clock.now = t
    return spring.position()


def test_fast_round_keeps_representable_values():
    assert fast_round(1.25) == 1.25
    assert fast_round(-3.5) == -3.5
    assert fast_round(0.0) == 0.0


@pytest.mark.parametrize("value", [0.1, 12.345, -7.77, 1000.001])
def test_fast_round_stays_close(value):
    assert abs(fast_round(value) - value) < 1e-6


def test_new_spring_rests_at_start():
    spring, _ = make(3.0)
    assert spring.position() == 3.0
    assert spring.velocity() == 0.0
    assert spring.target() == 3.0
    assert spring.arrived()


def test_set_target_starts_from_current_position():
    spring, _ = make(0.0)
    spring.set_target(10.0)
    assert spring.target() == 10.0
    assert spring.position() == 0.0
    assert not spring.arrived()


def test_spring_settles_on_target():
    spring, clock = make(0.0)
    spring.set_target(10.0)
    clock.now = 100.0
    assert spring.arrived()
    assert spring.position() == pytest.approx(10.0)


def test_very_long_time_does_not_overflow():
    spring, clock = make(0.0)
    spring.set_target(10.0)
    clock.now = 10000.0
    assert spring.position() == 10.0
    assert spring.arrived()


def test_underdamped_spring_overshoots():
    samples = [position_after(0.2, 10.0, i * 0.25) for i in range(1, 41)]
    assert max(samples) > 10.0


def test_critically_damped_spring_rises_without_overshoot():
    samples = [position_after(1.0, 10.0, i * 0.25) for i in range(1, 41)]
    assert all(p <= 10.0 for p in samples)
    assert samples == sorted(samples)


def test_zero_speed_never_moves():
    spring, clock = make(0.0)
    spring.set_speed(0.0)
    spring.set_target(5.0)
    clock.now = 10.0
    assert spring.position() == 0.0
    assert spring.velocity() == 0.0
    assert spring.acceleration() == 0.0


def test_set_velocity_is_reported_immediately():
    spring, clock = make(0.0)
    spring.set_velocity(4.0)
    assert spring.velocity() == pytest.approx(4.0)
    clock.now = 0.1
    assert spring.position() > 0.0


def test_set_position_moves_spring_but_keeps_target():
    spring, _ = make(0.0)
    spring.set_position(7.0)
    assert spring.position() == 7.0
    assert spring.target() == 0.0
    assert not spring.arrived()


def test_builders_return_same_spring():
    spring, _ = make(1.0)
    assert spring.with_damper(1.5) is spring
    assert spring.with_velocity(2.0) is spring
    assert spring.velocity() == pytest.approx(2.0)


def test_acceleration_at_rest_at_origin_is_zero():
    spring, _ = make(0.0)
    spring.set_damper(1.0)
    assert spring.acceleration() == 0.0


def test_spring2d_starts_at_rest():
    spring = Spring2D((1.0, 2.0), FakeClock())
    assert spring.position() == (1.0, 2.0)
    assert spring.target() == (1.0, 2.0)
    assert spring.arrived()


def test_spring2d_speed_combines_axes():
    spring = Spring2D((0.0, 0.0), FakeClock())
    assert spring.speed() == pytest.approx(math.hypot(1.0, 1.0))
    spring.set_speed(3.0)
    assert spring.speed() == pytest.approx(math.hypot(3.0, 3.0))


def test_spring2d_damper():
    spring = Spring2D((0.0, 0.0), FakeClock())
    spring.set_damper(0.5)
    assert spring.damper() == 0.5


def test_spring2d_moves_to_target():
    clock = FakeClock()
    spring = Spring2D((0.0, 0.0), clock)
    spring.set_target((4.0, 5.0))
    assert spring.target() == (4.0, 5.0)
    assert not spring.arrived()
    clock.now = 100.0
    assert spring.arrived()
    assert spring.position() == pytest.approx((4.0, 5.0))


def test_spring2d_set_position_and_velocity():
    spring = Spring2D((0.0, 0.0), FakeClock())
    spring.set_position((7.0, 8.0))
    assert spring.position() == (7.0, 8.0)
    spring.set_velocity((2.0, 0.0))
    assert spring.velocity() == pytest.approx((2.0, 0.0))


def test_spring2d_position_rounded():
    spring = Spring2D((1.5, 2.5), FakeClock())
    assert spring.position_rounded() == (1.5, 2.5)