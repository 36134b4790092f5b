"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 128


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits applied while parsing.

    `max_depth` bounds how many objects/arrays may be nested; None disables
    the check and leaves only the interpreter's recursion limit.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None")

    @staticmethod
    def unlimited() -> "ParserOptions":
        return ParserOptions(max_depth=None)
