"""Artifact naming and modification-time staleness checks.

The artifact name depends only on the component name and the list of
resolved paths, never on file contents. Whether it must be rebuilt is judged
purely by comparing modification times: a source newer than the artifact
forces a full rebuild. Rewrites that leave a source's mtime unchanged are not
detected.
"""

from __future__ import annotations

import hashlib
import logging
import os
from collections.abc import Sequence

from component_bundler import storage
from component_bundler.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

ARTIFACT_EXTENSION = ".js"


def cache_key(component_name: str, resolved_paths: Sequence[str]) -> str:
    return component_name + "".join(resolved_paths)


def digest(key: str, *, algorithm: str = "md5", length: int = 8, encoding: str = "utf-8") -> str:
    try:
        hasher = hashlib.new(algorithm)
    except ValueError as exc:
        raise InvalidConfigurationError(f"unsupported hash algorithm: {algorithm}") from exc
    hasher.update(key.encode(encoding))
    if hasher.digest_size == 0:
        raise InvalidConfigurationError(f"hash algorithm {algorithm} has no fixed digest size")
    hexdigest = hasher.hexdigest()
    if not 1 <= length <= len(hexdigest):
        raise InvalidConfigurationError(
            f"digest length must be between 1 and {len(hexdigest)}, got {length}"
        )
    return hexdigest[:length]


def artifact_path(
    component_name: str,
    resolved_paths: Sequence[str],
    *,
    cache_dir: str,
    algorithm: str = "md5",
    digest_length: int = 8,
    extension: str = ARTIFACT_EXTENSION,
) -> str:
    """Return the absolute artifact path for a component's resolved file set."""
    suffix = digest(
        cache_key(component_name, resolved_paths), algorithm=algorithm, length=digest_length
    )
    filename = f"{component_name}-{suffix}{extension}"
    return os.path.abspath(os.path.join(cache_dir, filename))


def is_stale(artifact: str, resolved_paths: Sequence[str]) -> bool:
    """True if ``artifact`` is missing or any source was modified after it."""
    if not storage.exists(artifact):
        logger.info("Cache miss for %s: artifact missing", artifact)
        return True

    artifact_mtime = storage.mtime_ns(artifact)
    for path in resolved_paths:
        if storage.mtime_ns(path) > artifact_mtime:
            logger.info("Cache miss for %s: %s is newer", artifact, path)
            return True

    logger.info("Cache hit for %s", artifact)
    return False
