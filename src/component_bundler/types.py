"""Types shared by the build pipeline."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from component_bundler.transforms import TransformRule


@dataclass(slots=True)
class FileRecord:
    """One source file flowing through a single build.

    ``path`` is the module identifier transforms register the file under;
    ``source`` is the absolute path the contents were read from.
    """

    path: str
    contents: str
    source: str = ""


IdentifierFn = Callable[[str], str]
PathFilter = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class BuildOptions:
    cwd: str
    patterns: Sequence[str]
    strip_prefix: str | None = None
    prepend_prefix: str = ""
    identifier_from_path: IdentifierFn | None = None
    rules: Sequence[TransformRule] | None = None
    component_name: str | None = None
    cache_dir: str | None = None
    encoding: str | None = None
    path_filter: PathFilter | None = None


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """BuildOptions with every default applied."""

    cwd: str
    patterns: tuple[str, ...]
    identifier_from_path: IdentifierFn
    rules: tuple[TransformRule, ...]
    component_name: str
    cache_dir: str
    encoding: str
    hash_algorithm: str
    digest_length: int
    path_filter: PathFilter | None = None


@dataclass(frozen=True, slots=True)
class BuildResult:
    artifact: str
    paths: list[str]
    rebuilt: bool
