"""Component builder: resolve, check cache, read, transform, assemble, persist."""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Sequence

from component_bundler import storage
from component_bundler.assembler import assemble
from component_bundler.cache import artifact_path, is_stale
from component_bundler.config import Settings, get_settings, validate_settings
from component_bundler.errors import InvalidConfigurationError
from component_bundler.logging import build_context
from component_bundler.patterns import resolve_patterns
from component_bundler.services import default_services
from component_bundler.transforms import TransformPipeline, default_rules, identifier_from_path
from component_bundler.types import BuildOptions, BuildResult, FileRecord, ResolvedOptions

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("*.js", "*.css", "*.scss", "*.html", "!*spec.js*")


def _validate(options: BuildOptions) -> None:
    if not isinstance(options.cwd, str) or not options.cwd:
        raise InvalidConfigurationError("cwd is required")
    if not os.path.isabs(options.cwd):
        raise InvalidConfigurationError(f"cwd must be an absolute path, got {options.cwd!r}")
    if options.patterns is None or isinstance(options.patterns, str):
        raise InvalidConfigurationError("patterns must be a list of glob strings")
    if len(options.patterns) == 0:
        raise InvalidConfigurationError("patterns must not be empty")
    if options.component_name is not None:
        name = options.component_name
        if not name.strip() or os.sep in name or (os.altsep and os.altsep in name):
            raise InvalidConfigurationError(f"invalid component name: {name!r}")
    if options.encoding is not None:
        try:
            codecs.lookup(options.encoding)
        except LookupError as exc:
            raise InvalidConfigurationError(f"unknown encoding: {options.encoding}") from exc


def resolve_options(options: BuildOptions, settings: Settings | None = None) -> ResolvedOptions:
    """Validate ``options`` and fill every unset field from ``settings``.

    Raises:
        InvalidConfigurationError: Before any filesystem access, if the
            options or settings are unusable.
    """
    _validate(options)
    settings = settings or get_settings()
    validate_settings(settings)

    cwd = os.path.normpath(options.cwd)
    strip_prefix = options.strip_prefix
    if strip_prefix is None:
        strip_prefix = os.path.join(cwd, "")
    derive = options.identifier_from_path or identifier_from_path(
        strip_prefix, options.prepend_prefix
    )

    if options.rules is not None:
        rules = tuple(options.rules)
    else:
        include_paths = [os.path.join(cwd, path) for path in settings.include_paths()]
        rules = default_rules(default_services(include_paths))

    return ResolvedOptions(
        cwd=cwd,
        patterns=tuple(options.patterns),
        identifier_from_path=derive,
        rules=rules,
        component_name=options.component_name or settings.component_name,
        cache_dir=os.path.abspath(options.cache_dir or settings.cache_dir),
        encoding=options.encoding or settings.encoding,
        hash_algorithm=settings.hash_algorithm,
        digest_length=settings.digest_length,
        path_filter=options.path_filter,
    )


def resolve_paths(resolved: ResolvedOptions) -> list[str]:
    """Absolute paths of the component's files, in pattern order."""
    paths = [
        os.path.normpath(os.path.join(resolved.cwd, match))
        for match in resolve_patterns(resolved.patterns, resolved.cwd)
    ]
    if resolved.path_filter is not None:
        paths = [path for path in paths if resolved.path_filter(path)]
    return paths


def read_records(resolved: ResolvedOptions, paths: Sequence[str]) -> list[FileRecord]:
    return [
        FileRecord(
            path=resolved.identifier_from_path(path),
            contents=storage.read_text(path, resolved.encoding),
            source=path,
        )
        for path in paths
        if path
    ]


def render(resolved: ResolvedOptions, paths: Sequence[str]) -> str:
    records = read_records(resolved, paths)
    records = TransformPipeline(resolved.rules).apply_all(records)
    return assemble([record.contents for record in records])


def build_contents(options: BuildOptions, paths: Sequence[str] | None = None) -> str:
    """Return the assembled module text without consulting or writing the cache."""
    resolved = resolve_options(options)
    if paths is None:
        paths = resolve_paths(resolved)
    return render(resolved, paths)


def build_component(options: BuildOptions) -> BuildResult:
    resolved = resolve_options(options)
    with build_context(component=resolved.component_name, cwd=resolved.cwd):
        paths = resolve_paths(resolved)
        artifact = artifact_path(
            resolved.component_name,
            paths,
            cache_dir=resolved.cache_dir,
            algorithm=resolved.hash_algorithm,
            digest_length=resolved.digest_length,
        )
        if not is_stale(artifact, paths):
            return BuildResult(artifact=artifact, paths=paths, rebuilt=False)

        contents = render(resolved, paths)
        storage.write_text(artifact, contents, resolved.encoding)
        logger.info("Built %s from %d file(s)", artifact, len(paths))
        return BuildResult(artifact=artifact, paths=paths, rebuilt=True)


def build(options: BuildOptions) -> str:
    """Build the component if its sources changed and return the artifact's absolute path."""
    return build_component(options).artifact
