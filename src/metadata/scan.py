"""Dependency directory scanner.

Walks the fetched-dependencies directory, reads each dependency's metadata
file and folds the extracted fields into one result.
"""

from __future__ import annotations

import glob
import logging
import os
import re
from typing import Iterator, List, Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from metadata.aggregate import fold_entries
from metadata.extractor import extract_fields
from metadata.models import AggregateResult, MetaEntry

logger = logging.getLogger(__name__)

_REPEATED_SLASHES = re.compile(r"/+")


def normalize_base_path(path: str) -> str:
    """Ensure a single trailing slash and collapse repeated slashes."""
    return _REPEATED_SLASHES.sub("/", path + "/")


def discover_dependency_dirs(base_path: str, dep: str = Constants.DEFAULT_DEP) -> List[str]:
    """Expand ``dep`` under ``base_path`` and keep directories, in sorted order.

    Only ``dep`` is treated as a pattern; glob characters in ``base_path`` match
    literally.

    Args:
        base_path: Directory holding one subdirectory per dependency.
        dep: Dependency name or glob pattern; ``*`` selects all.

    Returns:
        Sorted list of matching directory paths.
    """
    pattern = glob.escape(normalize_base_path(base_path)) + dep
    matches = sorted(p for p in glob.glob(pattern) if os.path.isdir(p))
    if is_debug_enabled(logger):
        logger.debug(
            "Expanded dependency pattern %s",
            pattern,
            extra=extra_context(event="decision", component="scan", action="discover", count=len(matches)),
        )
    return matches


def dependency_name(dep_dir: str, marker: str = Constants.CONTAINER_MARKER) -> str:
    """Derive a dependency's display name from its directory path.

    Everything up to and including the last ``<marker>/`` segment is removed.
    Paths without the marker fall back to the directory basename.
    """
    path = dep_dir.rstrip("/")
    leading = re.compile(r".*(?:^|/)" + re.escape(marker) + "/")
    if leading.match(path):
        return leading.sub("", path, count=1)
    return os.path.basename(path)


def read_metadata(dep_dir: str, dep_name: str, filename: str = Constants.METADATA_FILE) -> str:
    """Read a dependency's metadata file.

    A missing or unreadable file is logged and yields an empty document so the
    dependency simply contributes no fields.
    """
    path = os.path.join(dep_dir, filename)
    try:
        with open(path, "r", encoding="utf-8") as file:
            return file.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error getting meta data for %s. Reason: %s", dep_name, e)
        return ""


def iter_entries(dep_dirs: List[str], filename: str = Constants.METADATA_FILE,
                 marker: str = Constants.CONTAINER_MARKER) -> Iterator[MetaEntry]:
    """Yield ``(dependency_name, (field, value))`` for every directory, in order."""
    for dep_dir in dep_dirs:
        dep_name = dependency_name(dep_dir, marker)
        content = read_metadata(dep_dir, dep_name, filename)
        for pair in extract_fields(content):
            yield (dep_name, pair.as_tuple())


def extract_meta_data(path: str = Constants.DEFAULT_PATH, dep: str = Constants.DEFAULT_DEP,
                      meta_dep: Optional[AggregateResult] = None,
                      filename: str = Constants.METADATA_FILE,
                      marker: str = Constants.CONTAINER_MARKER) -> AggregateResult:
    """Extract metadata for every dependency under ``path`` matching ``dep``.

    Args:
        path: Base directory of fetched dependencies.
        dep: Dependency name filter (glob); ``*`` for all.
        meta_dep: Existing result to keep accumulating into.
        filename: Metadata file expected inside each dependency directory.
        marker: Container directory name stripped from dependency paths.

    Returns:
        Mapping of dependency name to its extracted fields.
    """
    dep_dirs = discover_dependency_dirs(path, dep)
    logger.info("Found %d dependency directories under %s", len(dep_dirs), path)
    return fold_entries(iter_entries(dep_dirs, filename, marker), meta_dep)
