import logging
import os
from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path

from pythcheck.errors import DiscoveryError
from pythcheck.models import Policy

logger = logging.getLogger(__name__)

PYTHON_SUFFIXES = frozenset({".py"})


def is_python_file(path: Path) -> bool:
    return path.suffix.lower() in PYTHON_SUFFIXES


def is_hidden(parts: Sequence[str]) -> bool:
    return any(part.startswith(".") and part not in (".", "..") for part in parts)


def is_test_dir(name: str, policy: Policy) -> bool:
    return name in policy.test_dir_names


def is_test_file(name: str, policy: Policy) -> bool:
    return any(fnmatch(name, pattern) for pattern in policy.test_file_patterns)


def is_test_path(parts: Sequence[str], policy: Policy) -> bool:
    """Directory rule on every segment but the last, filename rule on the last."""
    if not parts:
        return False
    *directories, filename = parts
    return any(is_test_dir(part, policy) for part in directories) or is_test_file(filename, policy)


def is_excluded(parts: Sequence[str], policy: Policy) -> bool:
    if policy.ignore_hidden and is_hidden(parts):
        return True
    return policy.ignore_tests and is_test_path(parts, policy)


def discover(root: Path, policy: Policy) -> list[Path]:
    """Resolve PATH into the ordered list of files to check.

    Segments are matched relative to ``root``. The root itself is matched on its own
    name, so a hidden directory root yields nothing under ``ignore_hidden``.
    """
    if not root.exists():
        raise DiscoveryError(f"Path does not exist: {root}")

    if root.is_file():
        return [] if is_excluded((root.name,), policy) else [root]

    if not root.is_dir():
        raise DiscoveryError(f"Not a file or directory: {root}")

    if policy.ignore_hidden and is_hidden((root.name,)):
        logger.debug("Skipping hidden directory %s", root)
        return []

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        rel_parts = current.relative_to(root).parts

        kept_dirs = []
        for name in sorted(dirnames):
            parts = (*rel_parts, name)
            if policy.ignore_hidden and is_hidden(parts):
                logger.debug("Skipping hidden directory %s", current / name)
            elif policy.ignore_tests and is_test_dir(name, policy):
                logger.debug("Skipping test directory %s", current / name)
            else:
                kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for name in sorted(filenames):
            path = current / name
            if not is_python_file(path):
                continue
            if is_excluded((*rel_parts, name), policy):
                logger.debug("Skipping %s", path)
                continue
            files.append(path)

    logger.debug("Discovered %d file(s) under %s", len(files), root)
    return files
