"""Value objects describing how a value is formatted and masked."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence, Tuple, Union

from .exceptions import create_validation_error

MASK_CHAR = "*"
DEFAULT_PATTERN_SEPARATOR = "#"


def _check_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise create_validation_error(
            f"{name} must be a non-negative integer", name, "non-negative int", value
        )


def _check_characters(name: str, characters: Sequence[str]) -> None:
    for char in characters:
        if not isinstance(char, str) or len(char) != 1:
            raise create_validation_error(
                f"{name} entries must be single characters", name, "single character", char
            )


def _as_char_tuple(value: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        # "@." is shorthand for ("@", ".")
        return tuple(value)
    return tuple(value)


@dataclass(frozen=True)
class FormatOptions:
    """
    Options controlling how a value is pre-filtered before a pattern is applied.

    Conflicting flags cancel each other: when both ``only_numbers`` and
    ``only_letters`` are set no classification happens, and the same holds
    for ``uppercase`` and ``lowercase``.

    Examples:
        >>> FormatOptions(only_numbers=True)
        >>> FormatOptions(uppercase=True, pattern_separator="@")
    """

    only_numbers: bool = False
    only_letters: bool = False
    uppercase: bool = False
    lowercase: bool = False
    pattern_separator: str = DEFAULT_PATTERN_SEPARATOR

    def __post_init__(self) -> None:
        if not isinstance(self.pattern_separator, str) or len(self.pattern_separator) != 1:
            raise create_validation_error(
                "pattern_separator must be a single character string",
                "pattern_separator",
                "single character",
                self.pattern_separator,
            )

    @property
    def numbers_only(self) -> bool:
        """True when only the numeric classifier should run."""
        return self.only_numbers and not self.only_letters

    @property
    def letters_only(self) -> bool:
        """True when only the letters classifier should run."""
        return self.only_letters and not self.only_numbers

    @property
    def to_upper(self) -> bool:
        return self.uppercase and not self.lowercase

    @property
    def to_lower(self) -> bool:
        return self.lowercase and not self.uppercase

    def with_options(self, **changes: Any) -> "FormatOptions":
        """Create new options with some flags changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class SecretSpan:
    """
    Visible span of a masked value.

    Attributes:
        start: Characters counted from the left edge
        end: Characters counted from the right edge
        is_visible: True hides the middle and shows the edges, False hides
            the edges and shows the middle
        escape_start: Extra characters added to ``start`` before masking
        escape_end: Extra characters added to ``end`` before masking
        special_characters: Characters kept visible inside the hidden middle

    Examples:
        >>> # Show the first 3 and last 2 characters
        >>> SecretSpan(start=3, end=2)

        >>> # Hide the first 3 and last 2 characters instead
        >>> SecretSpan(start=3, end=2, is_visible=False)
    """

    start: int
    end: int
    is_visible: bool = True
    escape_start: Optional[int] = None
    escape_end: Optional[int] = None
    special_characters: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_count("start", self.start)
        _check_count("end", self.end)
        if self.escape_start is not None:
            _check_count("escape_start", self.escape_start)
        if self.escape_end is not None:
            _check_count("escape_end", self.escape_end)

        specials = _as_char_tuple(self.special_characters)
        _check_characters("special_characters", specials)
        object.__setattr__(self, "special_characters", specials)

    @property
    def effective_start(self) -> int:
        """Start count including the escape margin."""
        return self.start + (self.escape_start or 0)

    @property
    def effective_end(self) -> int:
        """End count including the escape margin."""
        return self.end + (self.escape_end or 0)

    def with_parameters(self, **changes: Any) -> "SecretSpan":
        """Create a new span with updated parameters."""
        return replace(self, **changes)


@dataclass(frozen=True)
class SpecialSecretSpan:
    """
    Visible span for segmented masking, e.g. emails.

    ``start`` and ``end`` hold one count per segment; segments beyond the
    sequence length reuse the last entry. ``special_characters`` are the
    delimiters the value is split on.

    Examples:
        >>> SpecialSecretSpan(start=(2, 1), end=0, special_characters=("@", "."))
    """

    start: Union[int, Tuple[int, ...]]
    end: Union[int, Tuple[int, ...]]
    special_characters: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        starts = self._normalize("start", self.start)
        ends = self._normalize("end", self.end)
        object.__setattr__(self, "start", starts)
        object.__setattr__(self, "end", ends)

        specials = _as_char_tuple(self.special_characters)
        _check_characters("special_characters", specials)
        object.__setattr__(self, "special_characters", specials)

    @staticmethod
    def _normalize(name: str, value: Any) -> Tuple[int, ...]:
        counts = (value,) if isinstance(value, int) else tuple(value)
        if not counts:
            raise create_validation_error(
                f"{name} must contain at least one count", name, "non-empty sequence", value
            )
        for count in counts:
            _check_count(name, count)
        return counts

    def start_for(self, index: int) -> int:
        """Visible start count for the segment at ``index``."""
        starts = self.start  # normalized to a tuple in __post_init__
        return starts[min(index, len(starts) - 1)]  # type: ignore[index,arg-type]

    def end_for(self, index: int) -> int:
        """Visible end count for the segment at ``index``."""
        ends = self.end
        return ends[min(index, len(ends) - 1)]  # type: ignore[index,arg-type]

    def delimiter_for(self, boundary: int) -> str:
        """Delimiter inserted at the given segment boundary, cycling."""
        return self.special_characters[boundary % len(self.special_characters)]
