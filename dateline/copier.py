"""
Mirror the source tree into the destination.

Everything is copied except the reserved `posts` and `templates` directories
and any path with a hidden (dot-prefixed) segment. Failures don't stop the
walk; they are collected and raised together once it finishes.
"""
import errno
import logging
import os
import shutil
import stat
from pathlib import Path

from .errors import AggregateCopyError

logger = logging.getLogger(__name__)

RESERVED_DIRS = frozenset({"posts", "templates"})


def is_reserved_dir(rel_path, is_dir: bool) -> bool:
    return is_dir and Path(rel_path).name in RESERVED_DIRS


def is_hidden_path(rel_path) -> bool:
    return any(part.startswith(".") for part in Path(rel_path).parts)


def should_skip(rel_path, is_dir: bool) -> bool:
    """True if `rel_path` (relative to the source root) must not be copied."""
    return is_reserved_dir(rel_path, is_dir) or is_hidden_path(rel_path)


def copy_tree(source_root, dest_root, skip=should_skip) -> None:
    """
    Copy `source_root` into `dest_root`, preserving permission bits.

    `skip(rel_path, is_dir)` is asked about every entry before it is copied;
    a skipped directory is not descended into. Raises AggregateCopyError
    listing every entry that failed.
    """
    source_root = Path(source_root)
    dest_root = Path(dest_root)
    failures = []

    def fail(path, exc):
        logger.error(f"Failed to copy {path}: {exc}")
        failures.append((Path(path), exc))

    try:
        if not stat.S_ISDIR(source_root.stat().st_mode):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(source_root))
        dest_root.mkdir(parents=True, exist_ok=True)
        shutil.copymode(source_root, dest_root)
    except OSError as exc:
        fail(source_root, exc)
        raise AggregateCopyError(failures) from exc

    # dest may live inside source (the default "_site" does)
    dest_resolved = dest_root.resolve()

    def walk_error(exc):
        fail(exc.filename or source_root, exc)

    for dirpath, dirnames, filenames in os.walk(source_root, onerror=walk_error):
        current = Path(dirpath)

        descend = []
        for name in sorted(dirnames):
            src = current / name
            rel = src.relative_to(source_root)
            if skip(rel, True):
                logger.debug(f"Skipping {rel}")
                continue
            if src.resolve() == dest_resolved:
                continue
            dst = dest_root / rel
            try:
                dst.mkdir(exist_ok=True)
                shutil.copymode(src, dst)
            except OSError as exc:
                fail(src, exc)
                continue
            descend.append(name)
        dirnames[:] = descend

        for name in sorted(filenames):
            src = current / name
            rel = src.relative_to(source_root)
            if skip(rel, False):
                logger.debug(f"Skipping {rel}")
                continue
            dst = dest_root / rel
            try:
                shutil.copy2(src, dst)
            except OSError as exc:
                fail(src, exc)
                continue
            logger.debug(f"Copied {dst}")

    if failures:
        raise AggregateCopyError(failures)
