import pytest

from frostgui.colors import strip_color, translate_color_codes
from frostgui.scheduler import TaskScheduler
from frostgui.world import Location


def test_translate_color_codes():
    assert translate_color_codes("&b&lFrost&RCraft") == "§b§lFrost§rCraft"
    assert translate_color_codes("Tom & Jerry &z") == "Tom & Jerry &z"
    assert translate_color_codes("ends with &") == "ends with &"


def test_strip_color():
    assert strip_color("§b§lFrost§rCraft & co") == "FrostCraft & co"


def test_location_parse_and_rounding():
    location = Location.parse("world, 10.4, 64.5, -3")

    assert location == Location("world", 10.4, 64.5, -3.0)
    assert location.below(0.5).y == 64.0
    assert location.rounded() == "world, 10, 64, -3"


@pytest.mark.parametrize("value", ["world,1,2", ",1,2,3", "world,a,2,3"])
def test_location_parse_rejects_bad_values(value):
    with pytest.raises(ValueError):
        Location.parse(value)


def test_task_runs_after_delay_then_every_period():
    scheduler = TaskScheduler()
    runs = []
    scheduler.run_task_timer(lambda: runs.append(scheduler.current_tick), delay=2, period=3)

    for _ in range(10):
        scheduler.tick()

    assert runs == [2, 5, 8]


def test_cancelled_task_stops():
    scheduler = TaskScheduler()
    runs = []
    task = scheduler.run_task_timer(lambda: runs.append(1), delay=0, period=1)

    scheduler.tick()
    task.cancel()
    scheduler.tick()

    assert runs == [1]
    assert scheduler.tasks == []


def test_failing_task_does_not_stop_others():
    scheduler = TaskScheduler()
    runs = []

    def broken():
        raise RuntimeError("boom")

    scheduler.run_task_timer(broken, delay=0, period=1)
    scheduler.run_task_timer(lambda: runs.append(1), delay=0, period=1)
    scheduler.tick()
    scheduler.tick()

    assert runs == [1, 1]


def test_period_must_be_positive():
    with pytest.raises(ValueError):
        TaskScheduler().run_task_timer(lambda: None, delay=0, period=0)


def test_cancel_all():
    scheduler = TaskScheduler()
    runs = []
    scheduler.run_task_timer(lambda: runs.append(1), delay=0, period=1)

    scheduler.cancel_all()
    scheduler.tick()

    assert runs == []
