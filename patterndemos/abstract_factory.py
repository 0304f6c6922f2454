"""Abstract factory: car factories that build matching tires and bodies."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Tire:
    """A tire with a name and a pressure rating."""

    name: str
    pressure: int


@dataclass
class Body:
    """A car body with a name and a strength rating."""

    name: str = ""
    strength: int = 0


class SimpleTire(Tire):
    def __init__(self) -> None:
        super().__init__("SimpleTire", 75)


class LuxuryTire(Tire):
    def __init__(self) -> None:
        super().__init__("LuxuryTire", 100)


class SimpleBody(Body):
    def __init__(self) -> None:
        super().__init__("SimpleBody", 75)


class LuxuryBody(Body):
    def __init__(self) -> None:
        super().__init__("LuxuryBody", 100)


@dataclass
class Car:
    """A named car assembled from a tire and a body."""

    name: str
    tire: Tire | None = None
    body: Body | None = None

    def details(self) -> str:
        """Return the printable description of the car."""
        if self.tire is None or self.body is None:
            raise ValueError(f"car {self.name!r} is not fully assembled")
        return (
            f"\nCar {self.name}\n"
            f"Tire {self.tire.name}Pressure {self.tire.pressure}\n"
            f"Body {self.body.name}Strength {self.body.strength}\n\n"
        )

    def print_details(self) -> None:
        """Write the car description to standard output."""
        sys.stdout.write(self.details())


class CarFactory(ABC):
    """Builds a whole car from a family of matching parts."""

    car_name: str = ""

    @abstractmethod
    def build_tire(self) -> Tire:
        """Make a tire of this factory's family."""

    @abstractmethod
    def build_body(self) -> Body:
        """Make a body of this factory's family."""

    def build_whole_car(self) -> Car:
        """Assemble a car from this factory's tire and body."""
        return Car(self.car_name, tire=self.build_tire(), body=self.build_body())


class SimpleCarFactory(CarFactory):
    car_name = "SimlpleCar"

    def build_tire(self) -> Tire:
        return SimpleTire()

    def build_body(self) -> Body:
        return SimpleBody()


class LuxuryCarFactory(CarFactory):
    car_name = "LuxuryCar"

    def build_tire(self) -> Tire:
        return LuxuryTire()

    def build_body(self) -> Body:
        return LuxuryBody()


def factory_for(kind: str) -> CarFactory:
    """Return the simple factory for "Simple", the luxury factory otherwise."""
    if kind == "Simple":
        return SimpleCarFactory()
    return LuxuryCarFactory()


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Ask for a car type, build that car and print it."""
    print("Type Luxury or Simple", end="")
    words = iter(argv) if argv else _words(sys.stdin)
    kind = next(words, "")
    factory_for(kind).build_whole_car().print_details()
    return 0


if __name__ == "__main__":
    sys.exit(main())