"""Directory and file exclusion policy applied during traversal."""

import os
from pathlib import Path
from typing import Optional, Union

from precheck.utils.config import ScanConfig

PathLike = Union[str, "os.PathLike[str]"]


class PathFilter:
    """
    Decides which directories to prune and which files to read.

    Directory rules look at path components and the path string; file rules
    look at size and extension. Neither raises on filesystem errors.
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        """
        Initialize the filter.

        Args:
            config: Scan policy; defaults to the built-in ScanConfig
        """
        self.config = config or ScanConfig()
        self._skip_dir_names = frozenset(self.config.skip_dir_names)
        self._skip_extensions = frozenset(self.config.skip_extensions)

    def should_skip_dir(self, path: PathLike) -> bool:
        """Return True if ``path`` (directory or file) is excluded by name."""
        path = Path(path)
        if any(part in self._skip_dir_names for part in path.parts):
            return True

        path_str = str(path)
        if any(marker in path_str for marker in self.config.skip_path_substrings):
            return True
        return path_str.endswith(tuple(self.config.skip_suffixes))

    def should_scan_file(self, path: PathLike) -> bool:
        """Return True if the file passes the size and extension gates."""
        path = Path(path)
        try:
            if path.stat().st_size > self.config.max_file_size:
                return False
        except OSError:
            # Unknown size; the read step decides
            pass

        extension = path.suffix[1:].lower()
        if extension and extension in self._skip_extensions:
            return False
        return True

    @staticmethod
    def is_binary(data: bytes) -> bool:
        """Null bytes mark content as binary."""
        return b"\x00" in data


_default_filter = PathFilter()


def should_skip_dir(path: PathLike) -> bool:
    """Directory exclusion with the default policy."""
    return _default_filter.should_skip_dir(path)


def should_scan_file(path: PathLike) -> bool:
    """File eligibility with the default policy."""
    return _default_filter.should_scan_file(path)


def is_binary(data: bytes) -> bool:
    """Binary-content heuristic."""
    return PathFilter.is_binary(data)
