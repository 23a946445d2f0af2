"""Concatenate transformed fragments into one isolated module."""

from __future__ import annotations

from collections.abc import Sequence

ENVELOPE_HEAD = "(function(){ 'use strict';\n"
ENVELOPE_TAIL = "\n})();"


def wrap(body: str) -> str:
    return f"{ENVELOPE_HEAD}{body}{ENVELOPE_TAIL}"


def concat(fragments: Sequence[str]) -> str:
    if isinstance(fragments, str):
        raise TypeError("fragments must be a sequence of str, not a single str")
    for index, fragment in enumerate(fragments):
        if not isinstance(fragment, str):
            raise TypeError(f"fragment {index} must be str, got {type(fragment).__name__}")
    return "\n".join(fragments)


def assemble(fragments: Sequence[str]) -> str:
    """Join ``fragments`` with newlines and wrap the result in the module envelope once."""
    return wrap(concat(fragments))
