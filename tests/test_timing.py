import pytest

from povdisplay.timing import HallTimingSource, TimingSource


class FakeHall:
    def __init__(self, pending, period_us, trigger_ms):
        self.pending = pending
        self.period_us = period_us
        self.trigger_ms = trigger_ms

    def consume_new_rotation(self):
        was = self.pending
        self.pending = False
        return was

    def rotation_period_us(self):
        return self.period_us

    def last_trigger_ms(self):
        return self.trigger_ms


def test_timing_source_is_abstract():
    with pytest.raises(TypeError):
        TimingSource()


def test_hall_source_delegates_period_and_trigger():
    source = HallTimingSource(FakeHall(False, 100000, 2000))
    assert source.rotation_period_us() == 100000
    assert source.last_trigger_ms() == 2000


def test_hall_source_consumes_rotation_once():
    source = HallTimingSource(FakeHall(True, 100000, 2000))
    assert source.consume_new_rotation() is True
    assert source.consume_new_rotation() is False


def test_hall_source_reflects_sensor_updates():
    hall = FakeHall(False, 100000, 2000)
    source = HallTimingSource(hall)
    hall.period_us = 50000
    hall.pending = True
    assert source.rotation_period_us() == 50000
    assert source.consume_new_rotation() is True