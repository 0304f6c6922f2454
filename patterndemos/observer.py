"""Observer: watchers report where a car is whenever it moves."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Iterable, Iterator


class Car:
    """A car whose position changes are announced to attached observers."""

    def __init__(self, position: int = 0) -> None:
        self._position = position
        self._observers: list[Observer] = []

    @property
    def position(self) -> int:
        """The car's position: negative is left, zero middle, positive right."""
        return self._position

    @position.setter
    def position(self, new_position: int) -> None:
        self._position = new_position
        self.notify()

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The attached observers, in the order they were attached."""
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Start notifying an observer of position changes."""
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Stop notifying an observer; raise ValueError if it is not attached."""
        try:
            self._observers.remove(observer)
        except ValueError:
            raise ValueError("observer is not attached to this car") from None

    def notify(self) -> None:
        """Tell every attached observer that the car has changed."""
        for observer in list(self._observers):
            observer.update()


class Observer(ABC):
    """Watches a car; attaches itself to the car when created."""

    def __init__(self, car: Car) -> None:
        self._car = car
        car.attach(self)

    @property
    def car(self) -> Car:
        """The car being watched."""
        return self._car

    @abstractmethod
    def update(self) -> None:
        """React to a change of the watched car."""


class LeftObserver(Observer):
    def update(self) -> None:
        if self.car.position < 0:
            print("left side")


class MiddleObserver(Observer):
    def update(self) -> None:
        if self.car.position == 0:
            print("In middle")


class RightObserver(Observer):
    def update(self) -> None:
        if self.car.position > 0:
            print("right side")


_MOVES = {"l": -1, "c": 0, "r": 1}


def _keys(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from (char for char in line if not char.isspace())


def main(argv: list[str] | None = None) -> int:
    """Steer a watched car with l, c and r keys until b or end of input."""
    car = Car()
    LeftObserver(car)
    RightObserver(car)
    MiddleObserver(car)
    print("Hit left or Right to go left or right", end="")
    keys = _keys(argv) if argv else _keys(sys.stdin)
    for key in keys:
        if key == "b":
            break
        if key in _MOVES:
            car.position = _MOVES[key]
        else:
            print("Drive carrefully", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())