"""Card, Color and Value types."""

from dataclasses import dataclass, replace
from enum import Enum


class Color(str, Enum):
    """Card colors. NONE is reserved for unresolved wild cards."""

    RED = "red"
    PINK = "pink"
    PURPLE = "purple"
    YELLOW = "yellow"
    NONE = "none"


# Fixed order, also used to break ties when picking a color
CONCRETE_COLORS = (Color.RED, Color.PINK, Color.PURPLE, Color.YELLOW)


class Value(str, Enum):
    """Card values."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    BLOCK = "block"
    DRAW_FOUR = "draw_four"
    COLOR_CHANGE = "color_change"


NUMBER_VALUES = (
    Value.ONE, Value.TWO, Value.THREE, Value.FOUR, Value.FIVE,
    Value.SIX, Value.SEVEN, Value.EIGHT, Value.NINE,
)
SPECIAL_VALUES = (Value.REVERSE, Value.DRAW_TWO, Value.BLOCK)
WILD_VALUES = (Value.DRAW_FOUR, Value.COLOR_CHANGE)


@dataclass(frozen=True)
class Card:
    """A single card.

    Colored cards keep their color for life. Wild cards (draw_four,
    color_change) start with Color.NONE and are resolved to a concrete
    color via with_color() when played.
    """

    color: Color
    value: Value

    def __post_init__(self) -> None:
        if self.value not in WILD_VALUES and self.color is Color.NONE:
            raise ValueError(f"Non-wild card {self.value.value} must have a color")

    @property
    def is_wild(self) -> bool:
        return self.value in WILD_VALUES

    def can_play_on(self, reference: "Card") -> bool:
        """Return True if this card may be played on top of reference."""
        if self.is_wild:
            return True
        return self.color == reference.color or self.value == reference.value

    def with_color(self, color: Color) -> "Card":
        """Return this wild card resolved to a concrete color."""
        if not self.is_wild:
            raise ValueError(f"Only wild cards can change color, not {self}")
        if color not in CONCRETE_COLORS:
            raise ValueError(f"Invalid replacement color: {color!r}")
        return replace(self, color=color)

    def __str__(self) -> str:
        if self.color is Color.NONE:
            return self.value.value
        return f"{self.color.value}_{self.value.value}"
