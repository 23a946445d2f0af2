"""Click CLI group: build, contents, and resolve commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from component_bundler.config import get_settings
from component_bundler.logging import configure_logging


def _component_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.option(
            "--cwd",
            type=click.Path(file_okay=False, path_type=str),
            default=None,
            help="Directory the patterns are resolved in (default: current directory).",
        ),
        click.option(
            "--pattern",
            "patterns",
            multiple=True,
            help="Glob pattern, repeatable; prefix with ! to exclude.",
        ),
        click.option("--strip-prefix", type=str, default=None, help="Prefix removed from ids."),
        click.option("--prepend-prefix", type=str, default="", help="Prefix added to ids."),
        click.option("--name", type=str, default=None, help="Component name for the artifact."),
        click.option(
            "--cache-dir",
            type=click.Path(file_okay=False, path_type=str),
            default=None,
            help="Artifact directory (default: BUNDLER_CACHE_DIR).",
        ),
        click.option("--encoding", type=str, default=None, help="Source and artifact encoding."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Component bundler CLI."""
    configure_logging(log_level or get_settings().log_level)


@cli.command()
@_component_options
@click.option("--verbose", is_flag=True, help="Report whether the artifact was rebuilt.")
def build(
    cwd: str | None,
    patterns: tuple[str, ...],
    strip_prefix: str | None,
    prepend_prefix: str,
    name: str | None,
    cache_dir: str | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Build the component if needed and print the artifact path."""
    from component_bundler.cli.build import make_options, run_build

    options = make_options(
        cwd=cwd,
        patterns=patterns,
        strip_prefix=strip_prefix,
        prepend_prefix=prepend_prefix,
        name=name,
        cache_dir=cache_dir,
        encoding=encoding,
    )
    run_build(options, verbose=verbose)


@cli.command()
@_component_options
def contents(
    cwd: str | None,
    patterns: tuple[str, ...],
    strip_prefix: str | None,
    prepend_prefix: str,
    name: str | None,
    cache_dir: str | None,
    encoding: str | None,
) -> None:
    """Print the assembled module without touching the cache."""
    from component_bundler.cli.build import make_options, run_contents

    options = make_options(
        cwd=cwd,
        patterns=patterns,
        strip_prefix=strip_prefix,
        prepend_prefix=prepend_prefix,
        name=name,
        cache_dir=cache_dir,
        encoding=encoding,
    )
    run_contents(options)


@cli.command()
@_component_options
def resolve(
    cwd: str | None,
    patterns: tuple[str, ...],
    strip_prefix: str | None,
    prepend_prefix: str,
    name: str | None,
    cache_dir: str | None,
    encoding: str | None,
) -> None:
    """Print the files the patterns resolve to, one per line."""
    from component_bundler.cli.build import make_options, run_resolve

    options = make_options(
        cwd=cwd,
        patterns=patterns,
        strip_prefix=strip_prefix,
        prepend_prefix=prepend_prefix,
        name=name,
        cache_dir=cache_dir,
        encoding=encoding,
    )
    run_resolve(options)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
