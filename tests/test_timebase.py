import pytest

from scopekit.timebase import (
    FREE_RUNNING,
    SAMPLE_PERIODS,
    Timebase,
    TriggerSource,
    timer_load,
)


def test_slowest_setting_load():
    assert timer_load(0) == 600000


def test_fastest_setting_load():
    assert timer_load(FREE_RUNNING - 1) == 300


def test_loads_strictly_decrease():
    loads = [timer_load(s) for s in range(len(SAMPLE_PERIODS))]
    assert all(a > b for a, b in zip(loads, loads[1:]))


def test_load_scales_with_clock():
    assert timer_load(0, 60_000_000) * 2 == timer_load(0, 120_000_000)


@pytest.mark.parametrize("setting", [-1, FREE_RUNNING, FREE_RUNNING + 1])
def test_timer_load_rejects_bad_setting(setting):
    with pytest.raises(ValueError):
        timer_load(setting)


def test_initial_state_is_free_running():
    tb = Timebase()
    assert tb.setting == FREE_RUNNING
    assert tb.trigger is TriggerSource.ALWAYS
    assert tb.load == timer_load(FREE_RUNNING - 1)


def test_select_timer_setting():
    tb = Timebase()
    tb.select(3)
    assert tb.trigger is TriggerSource.TIMER
    assert tb.load == timer_load(3)
    assert tb.timer_enabled
    assert tb.setting == 3


def test_select_free_running_keeps_load():
    tb = Timebase()
    tb.select(2)
    tb.select(FREE_RUNNING)
    assert tb.trigger is TriggerSource.ALWAYS
    assert tb.load == timer_load(2)
    assert tb.sequence_enabled


def test_select_uses_own_clock():
    tb = Timebase(clock=60_000_000)
    tb.select(0)
    assert tb.load == timer_load(0, 60_000_000)


@pytest.mark.parametrize("setting", [-1, FREE_RUNNING + 1])
def test_select_rejects_bad_setting(setting):
    tb = Timebase()
    with pytest.raises(ValueError):
        tb.select(setting)
    assert tb.setting == FREE_RUNNING


def test_rejects_non_positive_clock():
    with pytest.raises(ValueError):
        Timebase(clock=0)