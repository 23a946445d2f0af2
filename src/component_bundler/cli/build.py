"""CLI helpers that turn command-line input into builds."""

from __future__ import annotations

import os
from collections.abc import Sequence

import click

from component_bundler.builder import (
    DEFAULT_PATTERNS,
    build_component,
    build_contents,
    resolve_options,
    resolve_paths,
)
from component_bundler.errors import BundlerError
from component_bundler.types import BuildOptions


def make_options(
    *,
    cwd: str | None,
    patterns: Sequence[str],
    strip_prefix: str | None = None,
    prepend_prefix: str = "",
    name: str | None = None,
    cache_dir: str | None = None,
    encoding: str | None = None,
) -> BuildOptions:
    return BuildOptions(
        cwd=os.path.abspath(cwd or os.getcwd()),
        patterns=tuple(patterns) or DEFAULT_PATTERNS,
        strip_prefix=strip_prefix,
        prepend_prefix=prepend_prefix,
        component_name=name,
        cache_dir=cache_dir,
        encoding=encoding,
    )


def run_build(options: BuildOptions, *, verbose: bool = False) -> None:
    try:
        result = build_component(options)
    except BundlerError as exc:
        raise click.ClickException(str(exc)) from exc
    if verbose:
        state = "rebuilt" if result.rebuilt else "cached"
        click.echo(f"{state}: {len(result.paths)} file(s)", err=True)
    click.echo(result.artifact)


def run_contents(options: BuildOptions) -> None:
    try:
        contents = build_contents(options)
    except BundlerError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(contents)


def run_resolve(options: BuildOptions) -> None:
    try:
        paths = resolve_paths(resolve_options(options))
    except BundlerError as exc:
        raise click.ClickException(str(exc)) from exc
    for path in paths:
        click.echo(path)
