"""Secret engine: partial masking of formatted or raw values.

Two policies are supported by :func:`mask`:

* hidden middle (``SecretSpan.is_visible=True``): the edges stay visible and
  everything in between is replaced by ``*``, except special characters;
* hidden edges (``is_visible=False``): the middle stays visible and the
  edges are replaced by ``*``.

:func:`mask_segmented` masks each delimiter-separated segment on its own,
which is what multi-part identifiers such as emails need.
"""

import re
from typing import List, Set

from .types import MASK_CHAR, SecretSpan, SpecialSecretSpan


def special_character_indexes(value: str, special_characters) -> Set[int]:
    """Indexes of every occurrence of the special characters in ``value``."""
    indexes: Set[int] = set()
    for char in special_characters:
        indexes.update(match.start() for match in re.finditer(re.escape(char), value))
    return indexes


def _mask_hidden_middle(value: str, start: int, end: int, special_characters) -> str:
    length = len(value)
    # No room left between the visible edges
    if start + end >= length:
        return value

    keep = special_character_indexes(value, special_characters)
    middle = "".join(
        value[index] if index in keep else MASK_CHAR for index in range(start, length - end)
    )
    return value[:start] + middle + value[length - end :]


def _mask_hidden_edges(value: str, start: int, end: int) -> str:
    length = len(value)
    if start + end >= length:
        return MASK_CHAR * length
    return MASK_CHAR * start + value[start : length - end] + MASK_CHAR * end


def mask(value: str, span: SecretSpan) -> str:
    """
    Mask ``value`` according to ``span``.

    Escape margins are added to the visible counts first. When the visible
    edges cover the whole value, hidden-middle masking returns the value
    unchanged and hidden-edges masking stars out every character. Output
    length always equals input length.

    Examples:
        >>> mask("123456", SecretSpan(start=2, end=0))
        '12****'
        >>> mask("123456", SecretSpan(start=2, end=2, is_visible=False))
        '**34**'
    """
    start = span.effective_start
    end = span.effective_end

    if span.is_visible:
        return _mask_hidden_middle(value, start, end, span.special_characters)
    return _mask_hidden_edges(value, start, end)


def _mask_segment(segment: str, start: int, end: int) -> str:
    if start + end >= len(segment):
        return segment
    hidden = len(segment) - start - end
    return segment[:start] + MASK_CHAR * hidden + segment[len(segment) - end :]


def split_segments(value: str, special_characters) -> List[str]:
    """Split ``value`` on any of the delimiter characters."""
    if not special_characters:
        return [value]
    delimiters = "".join(re.escape(char) for char in special_characters)
    return re.split(f"[{delimiters}]", value)


def mask_segmented(value: str, span: SpecialSecretSpan) -> str:
    """
    Mask every delimiter-separated segment except the last one.

    Segment ``i`` keeps ``span.start_for(i)`` leading and ``span.end_for(i)``
    trailing characters. The segments are joined back with the delimiters in
    the order they were given, cycling when there are more boundaries than
    delimiters.

    Examples:
        >>> span = SpecialSecretSpan(start=(2, 1), end=0, special_characters=("@", "."))
        >>> mask_segmented("example@example.com", span)
        'ex*****@e******.com'
    """
    segments = split_segments(value, span.special_characters)
    if len(segments) == 1:
        return value

    last = len(segments) - 1
    masked = [
        segment if index == last else _mask_segment(segment, span.start_for(index), span.end_for(index))
        for index, segment in enumerate(segments)
    ]

    parts = [masked[0]]
    for boundary, segment in enumerate(masked[1:]):
        parts.append(span.delimiter_for(boundary))
        parts.append(segment)
    return "".join(parts)
