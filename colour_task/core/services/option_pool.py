"""Service for managing the pool of single-use colour options."""

from __future__ import annotations

import colorsys

from colour_task.constants.task_constants import OPTION_BRIGHTNESS, OPTION_SATURATION
from colour_task.core.errors import InvalidOption
from colour_task.core.models import ColourOption


def build_colour_options(count: int) -> list[ColourOption]:
    """Create ``count`` options with evenly spaced hues."""
    if count <= 0:
        raise ValueError("Option pool must contain at least one colour.")

    options: list[ColourOption] = []
    for idx in range(count):
        hue = (idx * (360 / count)) % 360
        red, green, blue = colorsys.hsv_to_rgb(
            hue / 360, OPTION_SATURATION / 100, OPTION_BRIGHTNESS / 100
        )
        colour = "#{:02x}{:02x}{:02x}".format(
            round(red * 255), round(green * 255), round(blue * 255)
        )
        options.append(ColourOption(id=idx, name=f"Colour {idx + 1}", colour=colour))
    return options


class OptionPool:
    """Tracks which colours are still available for selection."""

    def __init__(self, options: list[ColourOption]) -> None:
        if not options:
            raise ValueError("Option pool must contain at least one colour.")
        self._options = options

    @classmethod
    def with_count(cls, count: int) -> OptionPool:
        return cls(build_colour_options(count))

    def options(self) -> list[ColourOption]:
        """Return the options in display order."""
        return list(self._options)

    def get(self, option_id: int) -> ColourOption:
        if not 0 <= option_id < len(self._options):
            raise InvalidOption(f"Colour option {option_id} does not exist")
        return self._options[option_id]

    def ensure_available(self, option_id: int) -> ColourOption:
        option = self.get(option_id)
        if option.consumed:
            raise InvalidOption(f"Colour option {option_id} has already been used")
        return option

    def mark_consumed(self, option_id: int) -> None:
        self.ensure_available(option_id).consumed = True

    def remaining_count(self) -> int:
        return sum(1 for option in self._options if not option.consumed)

    def consumed_count(self) -> int:
        return len(self._options) - self.remaining_count()

    def is_exhausted(self) -> bool:
        return self.remaining_count() == 0

    def reset(self) -> None:
        """Make every colour available again."""
        for option in self._options:
            option.consumed = False

    def __len__(self) -> int:
        return len(self._options)
