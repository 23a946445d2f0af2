"""File storage helpers: encoded reads, atomic writes, existence and mtime checks."""

from __future__ import annotations

import logging
import os
import tempfile

from component_bundler.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
_BOM = "\ufeff"


def read_text(path: str, encoding: str | None = None) -> str:
    """Read a file, decode it and strip any leading byte-order mark."""
    logger.info("Reading %s...", path)
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        error = StorageReadError.from_os_error(path, exc)
        logger.error(error.message)
        raise error from exc
    try:
        contents = raw.decode(encoding or DEFAULT_ENCODING)
    except UnicodeDecodeError as exc:
        error = StorageReadError(path, code="EILSEQ", detail=str(exc))
        logger.error(error.message)
        raise error from exc
    if contents.startswith(_BOM):
        contents = contents[1:]
    return contents


def mkdir(dirpath: str) -> None:
    """Like mkdir -p."""
    if not dirpath or os.path.isdir(dirpath):
        return
    try:
        os.makedirs(dirpath, exist_ok=True)
    except OSError as exc:
        error = StorageWriteError.from_os_error(dirpath, exc)
        logger.error("Unable to create directory %s (Error code: %s).", dirpath, error.code)
        raise error from exc


def _file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text(path: str, contents: str, encoding: str | None = None) -> bool:
    """Write ``contents`` to ``path``, creating parent directories first.

    The text lands in a sibling temporary file that is renamed over ``path``
    once fully written, so ``path`` is either the old file or the new one.
    The file gets the permissions a plain ``open()`` would give it under the
    current umask.
    """
    logger.info("Writing %s...", path)
    directory = os.path.dirname(path)
    mkdir(directory)
    try:
        data = contents.encode(encoding or DEFAULT_ENCODING)
    except UnicodeEncodeError as exc:
        error = StorageWriteError(path, code="EILSEQ", detail=str(exc))
        logger.error(error.message)
        raise error from exc

    tmp_path = ""
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=directory or os.curdir, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp_path, _file_mode())
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        error = StorageWriteError.from_os_error(path, exc)
        logger.error(error.message)
        raise error from exc
    return True


def exists(path: str) -> bool:
    return os.path.exists(path)


def mtime_ns(path: str) -> int:
    try:
        return os.stat(path).st_mtime_ns
    except OSError as exc:
        raise StorageReadError.from_os_error(path, exc) from exc
