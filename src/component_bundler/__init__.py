"""Build-time component bundler with an mtime-based artifact cache."""

from component_bundler.builder import build, build_component, build_contents
from component_bundler.errors import (
    BundlerError,
    InvalidConfigurationError,
    PatternSyntaxError,
    StorageReadError,
    StorageWriteError,
    TransformError,
)
from component_bundler.transforms import TransformPipeline, TransformRule
from component_bundler.types import BuildOptions, BuildResult, FileRecord

__version__ = "0.1.0"

__all__ = [
    "BuildOptions",
    "BuildResult",
    "BundlerError",
    "FileRecord",
    "InvalidConfigurationError",
    "PatternSyntaxError",
    "StorageReadError",
    "StorageWriteError",
    "TransformError",
    "TransformPipeline",
    "TransformRule",
    "build",
    "build_component",
    "build_contents",
]
