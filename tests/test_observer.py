import pytest

from patterndemos.observer import (
    Car,
    LeftObserver,
    MiddleObserver,
    Observer,
    RightObserver,
    main,
)


class _Recorder(Observer):
    def __init__(self, car, log, tag):
        self.log = log
        self.tag = tag
        super().__init__(car)

    def update(self):
        self.log.append((self.tag, self.car.position))


def _watched_car():
    car = Car()
    LeftObserver(car)
    RightObserver(car)
    MiddleObserver(car)
    return car


def test_observer_attaches_itself_on_creation():
    car = Car()
    observer = LeftObserver(car)
    assert car.observers == (observer,)
    assert observer.car is car


def test_position_is_stored():
    car = Car()
    car.position = 5
    assert car.position == 5


def test_left_position_reported(capsys):
    car = _watched_car()
    car.position = -1
    assert capsys.readouterr().out == "left side\n"


def test_middle_position_reported(capsys):
    car = _watched_car()
    car.position = 0
    assert capsys.readouterr().out == "In middle\n"


def test_right_position_reported(capsys):
    car = _watched_car()
    car.position = 1
    assert capsys.readouterr().out == "right side\n"


def test_notify_calls_observers_in_attach_order():
    car = Car()
    log = []
    _Recorder(car, log, "first")
    _Recorder(car, log, "second")
    car.position = 3
    assert [observer.tag for observer in car.observers] == ["first", "second"]
    assert car.position == 3
    assert log == [("first", 3), ("second", 3)]


def test_detached_observer_is_not_notified():
    car = Car()
    log = []
    kept = _Recorder(car, log, "kept")
    dropped = _Recorder(car, log, "dropped")
    car.detach(dropped)
    car.position = 2
    assert log == [("kept", 2)]
    assert car.observers == (kept,)


def test_detach_unknown_observer_raises():
    car = Car()
    other = LeftObserver(Car())
    with pytest.raises(ValueError):
        car.detach(other)


def test_main_steers_car(capsys):
    assert main(["l", "c", "r", "b", "l"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("left side\nIn middle\nright side\n")
    assert out.startswith("Hit left or Right to go left or right")


def test_main_warns_on_unknown_key(capsys):
    main(["x", "b"])
    assert capsys.readouterr().out.endswith("Drive carrefully")