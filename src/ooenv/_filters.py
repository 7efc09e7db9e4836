"""
Filters for the directories of generated Java classes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

_logger = logging.getLogger(__name__)

# Metadata folders of version control systems, never Java packages.
VCS_DIRS = frozenset({"CVS", "RCS", "SCCS", ".svn", ".git", ".hg", ".bzr", "_darcs"})

_PACKAGE_SEGMENT = re.compile(r"[a-z_][a-z0-9_]*")


class PackageNameFilter(object):
    """
    Accepts directory names which can be a segment of a Java package name.

    Package names should be lower case, so a directory such as "CVS" inside
    a package directory is not a package but version control metadata.
    The check is case-sensitive.
    """

    def accept(self, directory: Path | str, name: str) -> bool:
        """
        Return true iff name is acceptable as a package directory.

        :param directory: The parent directory containing the entry.
        :param name: The name of the entry.
        """
        if name in VCS_DIRS:
            return False
        return _PACKAGE_SEGMENT.fullmatch(name) is not None

    def __call__(self, directory: Path | str, name: str) -> bool:
        return self.accept(directory, name)


def find_package_dirs(directory: Path | str) -> Iterator[Path]:
    """
    Yield the sub-directories of a class folder which look like packages.

    :param directory: The folder to be searched, e.g. target/classes.
    :return: The accepted sub-directories, sorted by name.
    """
    directory = Path(directory)
    accept = PackageNameFilter()
    for entry in sorted(directory.iterdir()):
        if not entry.is_dir():
            continue
        if accept(directory, entry.name):
            yield entry
        else:
            _logger.debug("Skipping %s: not a package directory", entry)
