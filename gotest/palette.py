"""Named colors and the outcome palette."""

from enum import StrEnum

from colorama import Fore
from pydantic import Field

from gotest.models.base import Model
from gotest.models.summary import Outcome


class Color(StrEnum):
    """Foreground colors that can be named in ``GOTEST_PALETTE``."""

    BLACK = "black"
    HIBLACK = "hiblack"
    RED = "red"
    HIRED = "hired"
    GREEN = "green"
    HIGREEN = "higreen"
    YELLOW = "yellow"
    HIYELLOW = "hiyellow"
    BLUE = "blue"
    HIBLUE = "hiblue"
    MAGENTA = "magenta"
    HIMAGENTA = "himagenta"
    CYAN = "cyan"
    HICYAN = "hicyan"
    WHITE = "white"
    HIWHITE = "hiwhite"

    @property
    def ansi(self) -> str:
        """Escape sequence selecting this color."""
        return ANSI_SEQUENCES[self]

    @classmethod
    def lookup(cls, name: str) -> "Color | None":
        """Return the color called ``name``, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


ANSI_SEQUENCES = {
    Color.BLACK: Fore.BLACK,
    Color.HIBLACK: Fore.LIGHTBLACK_EX,
    Color.RED: Fore.RED,
    Color.HIRED: Fore.LIGHTRED_EX,
    Color.GREEN: Fore.GREEN,
    Color.HIGREEN: Fore.LIGHTGREEN_EX,
    Color.YELLOW: Fore.YELLOW,
    Color.HIYELLOW: Fore.LIGHTYELLOW_EX,
    Color.BLUE: Fore.BLUE,
    Color.HIBLUE: Fore.LIGHTBLUE_EX,
    Color.MAGENTA: Fore.MAGENTA,
    Color.HIMAGENTA: Fore.LIGHTMAGENTA_EX,
    Color.CYAN: Fore.CYAN,
    Color.HICYAN: Fore.LIGHTCYAN_EX,
    Color.WHITE: Fore.WHITE,
    Color.HIWHITE: Fore.LIGHTWHITE_EX,
}


class Palette(Model):
    """Colors used for classified lines."""

    passed: Color = Field(default=Color.GREEN, description="Color of passing lines")
    skipped: Color = Field(default=Color.YELLOW, description="Color of skipped lines")
    failed: Color = Field(default=Color.HIRED, description="Color of failing lines")

    @classmethod
    def parse(cls, value: str) -> "Palette":
        """Build a palette from a ``"<fail>,<pass>"`` pair.

        Anything other than exactly two tokens yields the default palette.
        Unknown color names leave the corresponding default in place.
        """
        if not value:
            return cls()
        tokens = value.split(",")
        if len(tokens) != 2:
            return cls()

        overrides: dict[str, Color] = {}
        if (fail := Color.lookup(tokens[0])) is not None:
            overrides["failed"] = fail
        if (passed := Color.lookup(tokens[1])) is not None:
            overrides["passed"] = passed
        return cls(**overrides)

    def color_for(self, outcome: Outcome) -> Color | None:
        """Return the color for ``outcome``; uncategorized lines have none."""
        match outcome:
            case Outcome.PASS:
                return self.passed
            case Outcome.SKIP:
                return self.skipped
            case Outcome.FAIL:
                return self.failed
            case _:
                return None
