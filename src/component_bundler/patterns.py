"""
Pattern Resolution
==================

Expands an ordered list of glob patterns into a de-duplicated, ordered list
of matching files. A pattern starting with ``!`` is an exclusion: it removes
its matches from whatever earlier patterns collected, and has no effect on
patterns that come after it.

Examples:
    >>> resolve_patterns(["*.js", "!a.js"], "/project")     # {a.js, b.js} on disk
    ['b.js']
    >>> resolve_patterns(["!a.js", "*.js"], "/project")
    ['a.js', 'b.js']
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Sequence

from component_bundler.errors import PatternSyntaxError

logger = logging.getLogger(__name__)

EXCLUSION_MARKER = "!"


def split_pattern(pattern: str) -> tuple[bool, str]:
    """Return ``(is_exclusion, glob)`` for a pattern."""
    if pattern.startswith(EXCLUSION_MARKER):
        return True, pattern[len(EXCLUSION_MARKER):]
    return False, pattern


def validate_pattern(pattern: str) -> None:
    """Raise PatternSyntaxError for patterns glob would misread or ignore.

    Rejects empty patterns, a bare exclusion marker and unterminated
    ``[...]`` character classes.
    """
    if not isinstance(pattern, str):
        raise PatternSyntaxError(f"pattern must be a string, got {type(pattern).__name__}")
    _, body = split_pattern(pattern)
    if not body:
        raise PatternSyntaxError(f"empty glob in pattern {pattern!r}", pattern=pattern)

    i = 0
    while i < len(body):
        if body[i] == "[":
            j = i + 1
            if j < len(body) and body[j] in "!^":
                j += 1
            # A leading "]" is a literal member of the class.
            if j < len(body) and body[j] == "]":
                j += 1
            while j < len(body) and body[j] != "]":
                j += 1
            if j >= len(body):
                raise PatternSyntaxError(
                    f"unterminated character class at offset {i} in pattern {pattern!r}",
                    pattern=pattern,
                )
            i = j
        i += 1


def _match(body: str, cwd: str) -> list[str]:
    matches = glob.glob(body, root_dir=cwd, recursive=True)
    files = [match for match in matches if os.path.isfile(os.path.join(cwd, match))]
    return sorted(files)


def resolve_patterns(patterns: Sequence[str], cwd: str) -> list[str]:
    """
    Resolve ``patterns`` against ``cwd`` in order.

    Args:
        patterns: Glob patterns, ``!``-prefixed ones being exclusions
        cwd: Directory the globs are evaluated in

    Returns:
        Matching file paths, relative to ``cwd`` unless a pattern was absolute

    Raises:
        PatternSyntaxError: If any pattern is malformed. Every pattern is
            checked before the filesystem is touched.
    """
    if len(patterns) == 0:
        return []

    for pattern in patterns:
        validate_pattern(pattern)

    result: dict[str, None] = {}
    for pattern in patterns:
        exclusion, body = split_pattern(pattern)
        matches = _match(body, cwd)
        if exclusion:
            excluded = set(matches)
            result = {path: None for path in result if path not in excluded}
        else:
            result.update(dict.fromkeys(matches))
        logger.debug("Pattern %s matched %d file(s)", pattern, len(matches))

    return list(result)
