"""Template engine: fills separator slots of a pattern with value characters."""

from typing import Optional

from .classifier import classify
from .types import DEFAULT_PATTERN_SEPARATOR, FormatOptions


def count_slots(pattern: str, separator: str = DEFAULT_PATTERN_SEPARATOR) -> int:
    """Number of positions in ``pattern`` that consume a value character."""
    return pattern.count(separator)


def apply_pattern(
    value: str,
    pattern: str,
    options: Optional[FormatOptions] = None,
    secret_mode: bool = False,
) -> str:
    """
    Apply a positional pattern to a value.

    Every occurrence of the separator symbol in ``pattern`` is replaced with
    the next character of the (classified) value; all other pattern
    characters are copied literally. Once the value runs out, separator
    positions emit nothing. Surplus value characters are dropped.

    Args:
        value: Raw value to format
        pattern: Pattern such as ``"###.###.###-##"``
        options: Classification and separator options
        secret_mode: Keep ``*`` when classifying an already masked value

    Returns:
        Formatted value, or ``""`` when ``value`` is empty

    Examples:
        >>> apply_pattern("12345678", "#####-###", FormatOptions(only_numbers=True))
        '12345-678'
    """
    if not value:
        return ""

    options = options or FormatOptions()
    chars = classify(value, options, secret_mode)
    separator = options.pattern_separator

    result = []
    cursor = 0
    for symbol in pattern:
        if symbol == separator:
            if cursor < len(chars):
                result.append(chars[cursor])
                cursor += 1
        else:
            result.append(symbol)
    return "".join(result)
