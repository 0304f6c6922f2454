"""Factory method: make toys by numeric type code."""

from __future__ import annotations

import sys
from abc import ABC
from typing import Iterable, Iterator


class Toy(ABC):
    """A toy that is made in steps and then labelled with a name and price."""

    label: str = ""
    label_price: float = 0.0

    def __init__(self) -> None:
        self.name = ""
        self.price = 0.0

    def prepare_parts(self) -> str:
        """Prepare the parts; return the step's message."""
        message = f"Preparing {self.label} Parts"
        print(message)
        return message

    def combine_parts(self) -> str:
        """Combine the parts; return the step's message."""
        message = f"Combining {self.label} Parts"
        print(message)
        return message

    def assemble_parts(self) -> str:
        """Assemble the parts; return the step's message."""
        message = f"Assembling {self.label} Parts"
        print(message)
        return message

    def apply_label(self) -> str:
        """Give the toy its name and price; return the step's message."""
        message = f"Applying {self.label} Label"
        print(message)
        self.name = self.label
        self.price = self.label_price
        return message

    def show_product(self) -> str:
        """Print the toy's name and price and return the text printed."""
        text = f"Name {self.name}\nPrice {self.price:g}"
        print(text)
        return text


class Car(Toy):
    label = "Car"
    label_price = 10.0


class Bike(Toy):
    label = "Bike"
    label_price = 20.0


class Plane(Toy):
    label = "Plane"
    label_price = 30.0


_TOYS: dict[int, type[Toy]] = {1: Car, 2: Bike, 3: Plane}


def create_toy(toy_type: int) -> Toy:
    """Make and label the toy for a type code: 1 car, 2 bike, 3 plane."""
    try:
        toy = _TOYS[toy_type]()
    except KeyError:
        raise ValueError("Invalid toy type please re-enter type") from None
    toy.prepare_parts()
    toy.combine_parts()
    toy.apply_label()
    toy.assemble_parts()
    return toy


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read type codes until zero, bad input or end of input, making each toy."""
    words = iter(argv) if argv else _words(sys.stdin)
    while True:
        print("\nEnter type or zero for exit ")
        try:
            toy_type = int(next(words))
        except (StopIteration, ValueError):
            break
        if toy_type == 0:
            break
        try:
            toy = create_toy(toy_type)
        except ValueError as error:
            print(error)
            continue
        toy.show_product()
    print("Exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())