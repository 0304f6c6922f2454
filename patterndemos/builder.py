"""Builder: a director assembles planes step by step through builders."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Plane:
    """A plane of some type with a body and an engine."""

    plane_type: str
    body: str = ""
    engine: str = ""

    def show(self) -> list[str]:
        """Print the plane's parts and return the lines printed."""
        lines = [
            f"Engine{self.engine}",
            f"Body{self.body}",
            f"Plane{self.plane_type}",
        ]
        print("\n".join(lines))
        return lines


class PlaneBuilder(ABC):
    """Builds a plane one part at a time."""

    def __init__(self) -> None:
        self._plane: Plane | None = None

    @property
    def plane(self) -> Plane:
        """The plane under construction."""
        if self._plane is None:
            raise RuntimeError("no plane has been started; call get_parts_done first")
        return self._plane

    @abstractmethod
    def get_parts_done(self) -> None:
        """Start a new plane."""

    @abstractmethod
    def build_body(self) -> None:
        """Fit the body to the current plane."""

    @abstractmethod
    def build_engine(self) -> None:
        """Fit the engine to the current plane."""


class JetBuilder(PlaneBuilder):
    def get_parts_done(self) -> None:
        self._plane = Plane("Jet Plane")

    def build_engine(self) -> None:
        self.plane.engine = "Jet Engine"

    def build_body(self) -> None:
        self.plane.body = "Jet Body"


class PropellerBuilder(PlaneBuilder):
    def get_parts_done(self) -> None:
        self._plane = Plane("Propeller Plane")

    def build_engine(self) -> None:
        self.plane.engine = "Propeller Engine"

    def build_body(self) -> None:
        self.plane.body = "Propeller Body"


class Director:
    """Runs a builder through the steps that make a plane."""

    def create_plane(self, builder: PlaneBuilder) -> Plane:
        builder.get_parts_done()
        builder.build_body()
        builder.build_engine()
        return builder.plane


def main(argv: list[str] | None = None) -> int:
    """Build a jet and a propeller plane and show both."""
    director = Director()
    jet = director.create_plane(JetBuilder())
    propeller = director.create_plane(PropellerBuilder())
    jet.show()
    propeller.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())