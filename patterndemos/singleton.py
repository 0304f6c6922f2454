"""Singleton: one shared set of game settings."""

from __future__ import annotations

import sys
from typing import ClassVar


class GameSetting:
    """The game's display settings; obtain the one instance with get_instance."""

    _instance: ClassVar[GameSetting | None] = None
    _creating: ClassVar[bool] = False

    def __init__(self) -> None:
        if not GameSetting._creating:
            raise TypeError("use GameSetting.get_instance() to obtain the settings")
        self.width = 768
        self.height = 1300
        self.brightness = 75

    @classmethod
    def get_instance(cls) -> GameSetting:
        """Return the shared settings, creating them on first use."""
        if GameSetting._instance is None:
            GameSetting._creating = True
            try:
                GameSetting._instance = GameSetting()
            finally:
                GameSetting._creating = False
        return GameSetting._instance

    def display_setting(self) -> None:
        """Print the current settings."""
        print(f"brightness{self.brightness}")
        print(f"height{self.height}")
        print(f"width{self.width}")


def main(argv: list[str] | None = None) -> int:
    """Print the shared game settings."""
    GameSetting.get_instance().display_setting()
    return 0


if __name__ == "__main__":
    sys.exit(main())