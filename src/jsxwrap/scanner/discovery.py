"""Source file discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_source_files(
    root: Path,
    source_globs: tuple[str, ...],
    exclude_dirs: tuple[str, ...],
    max_file_mb: int,
) -> list[Path]:
    """Discover source files under ``root`` matching any of ``source_globs``.

    A single file passed as ``root`` is returned as-is. Files inside any
    directory named in ``exclude_dirs`` and files larger than ``max_file_mb``
    are skipped.
    """
    if root.is_file():
        return [root.resolve()]

    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()
    excluded = frozenset(exclude_dirs)

    for pattern in source_globs:
        for path in root.glob(pattern):
            if not path.is_file() or _is_excluded(path, root, excluded):
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.debug("Skipping %s: larger than %d MB", path, max_file_mb)
                    continue
            except OSError:
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: _stable_path_key(path, resolved_root))


def discover_all(
    paths: Iterable[Path],
    source_globs: tuple[str, ...],
    exclude_dirs: tuple[str, ...],
    max_file_mb: int,
) -> list[Path]:
    """Discover files under several roots, keeping the first occurrence of each."""
    seen: set[Path] = set()
    ordered: list[Path] = []
    for root in paths:
        if not root.exists():
            logger.warning("Path does not exist: %s", root)
            continue
        for path in discover_source_files(root, source_globs, exclude_dirs, max_file_mb):
            if path not in seen:
                seen.add(path)
                ordered.append(path)
    return ordered


def _is_excluded(path: Path, root: Path, excluded: frozenset[str]) -> bool:
    try:
        parts = path.relative_to(root).parts[:-1]
    except ValueError:
        parts = path.parts[:-1]
    return any(part in excluded for part in parts)


def _stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
