"""Prototype: bullets are made by cloning registered prototypes."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass
from enum import Enum


class BulletType(Enum):
    SIMPLE = 0
    GOOD = 1


@dataclass
class Bullet:
    """A bullet with its ballistic ratings and the direction it was fired in."""

    bullet_name: str
    speed: float
    fire_power: float
    damage_power: float
    direction: float = 0.0

    def clone(self) -> Bullet:
        """Return an independent copy of this bullet, of the same kind."""
        return copy.copy(self)

    def fire(self, direction: float) -> None:
        """Fire the bullet in a direction and print its ratings."""
        self.direction = direction
        print(f"Bullet Name{self.bullet_name}")
        print(f"Speed{self.speed:g}")
        print(f"Fire Power{self.fire_power:g}")
        print(f"Damage Power{self.damage_power:g}")
        print(f"Direction {self.direction:g}")


class SimpleBullet(Bullet):
    pass


class GoodBullet(Bullet):
    pass


class BulletFactory:
    """Holds one prototype per bullet type and hands out clones of it."""

    def __init__(self) -> None:
        self._prototypes: dict[BulletType, Bullet] = {
            BulletType.SIMPLE: SimpleBullet("SimpleBullet", 50, 75, 75),
            BulletType.GOOD: GoodBullet("GoodBullet", 50, 100, 100),
        }

    def create_bullet(self, bullet_type: BulletType) -> Bullet:
        """Return a fresh clone of the prototype for a bullet type."""
        return self._prototypes[BulletType(bullet_type)].clone()


def main(argv: list[str] | None = None) -> int:
    """Fire a simple bullet and then a good one."""
    factory = BulletFactory()
    bullet = factory.create_bullet(BulletType.SIMPLE)
    bullet.fire(90.0)
    bullet = factory.create_bullet(BulletType.GOOD)
    bullet.fire(100.0)
    return 0


if __name__ == "__main__":
    sys.exit(main())