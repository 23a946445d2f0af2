"""Per-extension content transforms.

A pipeline is an ordered list of rules. Each rule pairs a regular expression,
searched in the record's path, with a function that rewrites the record. Every
matching rule runs, in declaration order; a record no rule matches passes
through unchanged as plain script.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from component_bundler.errors import TransformError
from component_bundler.services import TextServices, default_services
from component_bundler.types import FileRecord

logger = logging.getLogger(__name__)

RecordFn = Callable[[FileRecord], FileRecord]


@dataclass(frozen=True, slots=True)
class TransformRule:
    pattern: str
    transform: RecordFn
    name: str = ""
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def matches(self, path: str) -> bool:
        return self._regex.search(path) is not None


def style_rule(services: TextServices) -> TransformRule:
    def process(record: FileRecord) -> FileRecord:
        minified = services.minify_style(record.contents)
        record.contents = services.wrap_style_module(record.path, minified)
        return record

    return TransformRule(r"\.css$", process, name="style")


def preprocessed_style_rule(services: TextServices) -> TransformRule:
    def process(record: FileRecord) -> FileRecord:
        compiled = services.compile_style(record.contents)
        record.contents = services.wrap_style_module(record.path, compiled)
        return record

    return TransformRule(r"\.scss$", process, name="preprocessed-style")


def markup_rule(services: TextServices) -> TransformRule:
    def process(record: FileRecord) -> FileRecord:
        minified = services.minify_markup(record.contents)
        record.contents = services.wrap_template_module(record.path, minified)
        return record

    return TransformRule(r"\.html$", process, name="markup")


def default_rules(services: TextServices | None = None) -> tuple[TransformRule, ...]:
    services = services or default_services()
    return (
        style_rule(services),
        preprocessed_style_rule(services),
        markup_rule(services),
    )


class TransformPipeline:
    def __init__(self, rules: Sequence[TransformRule]) -> None:
        self._rules: tuple[TransformRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[TransformRule, ...]:
        return self._rules

    def extend(self, *rules: TransformRule) -> TransformPipeline:
        """Return a new pipeline running ``rules`` after the current ones."""
        return TransformPipeline((*self._rules, *rules))

    def apply(self, record: FileRecord) -> FileRecord:
        for rule in self._rules:
            if not rule.matches(record.path):
                continue
            logger.debug("Applying %s transform to %s", rule.name or rule.pattern, record.path)
            result = rule.transform(record)
            if not isinstance(result, FileRecord):
                raise TransformError(
                    f"transform {rule.name or rule.pattern!r} returned "
                    f"{type(result).__name__} for {record.path}, expected FileRecord"
                )
            record = result
        return record

    def apply_all(self, records: Iterable[FileRecord]) -> list[FileRecord]:
        return [self.apply(record) for record in records]


def identifier_from_path(strip_prefix: str, prepend_prefix: str = "") -> Callable[[str], str]:
    """Default module identifier: drop ``strip_prefix``, then prepend ``prepend_prefix``."""

    def derive(path: str) -> str:
        return prepend_prefix + path.removeprefix(strip_prefix)

    return derive
