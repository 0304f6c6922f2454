"""Strategy: mobs attack through interchangeable attack behaviours."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class AttackBehaviour(ABC):
    """A way of attacking one mob with another."""

    @abstractmethod
    def perform_attack(self, attacker: Mob, attacked: Mob) -> None:
        """Carry out the attack."""


class FireAttack(AttackBehaviour):
    def perform_attack(self, attacker: Mob, attacked: Mob) -> None:
        print(f"{attacker.name} scorches {attacked.name}")


class MaceAttack(AttackBehaviour):
    def perform_attack(self, attacker: Mob, attacked: Mob) -> None:
        print(f"{attacker.name} crushes {attacked.name}")


class SwordAttack(AttackBehaviour):
    def perform_attack(self, attacker: Mob, attacked: Mob) -> None:
        print(f"{attacker.name} slashes {attacked.name}")


class Mob:
    """A creature with hit points and an optional attack behaviour."""

    def __init__(
        self, name: str, hp: int, behaviour: AttackBehaviour | None = None
    ) -> None:
        self.name = name
        self.hp = hp
        self.behaviour = behaviour

    def attack(self, attacked: Mob) -> None:
        """Attack another mob using the current behaviour, or a plain hit."""
        if self.behaviour is not None:
            self.behaviour.perform_attack(self, attacked)
        else:
            print(f"{self.name}hits{attacked.name}", end="")


class Client(Mob):
    """A player-controlled mob."""


def main(argv: list[str] | None = None) -> int:
    """Stage a short fight between an orc, a dragon and a player."""
    orc = Mob("Orc", 200, MaceAttack())
    dragon = Mob("Lord Nagafen", 200, FireAttack())
    player = Client("Bink", 450, SwordAttack())
    orc.attack(player)
    dragon.attack(player)
    player.attack(dragon)
    return 0


if __name__ == "__main__":
    sys.exit(main())