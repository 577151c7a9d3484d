"""Secret scanner engine for detecting exposed secrets on disk."""

import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Union

from precheck.core.exceptions import FileReadError, TraversalError
from precheck.core.masking import mask_secret
from precheck.core.models import Finding, ScanReport
from precheck.core.path_filter import PathFilter
from precheck.core.patterns import get_patterns
from precheck.utils.config import ScanConfig
from precheck.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

COMMENT_PREFIXES = ("#", "//")


def _split_lines(content: str) -> List[str]:
    """Split on newlines, dropping one trailing carriage return per line."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_ignored_line(line: str) -> bool:
    trimmed = line.strip()
    return not trimmed or trimmed.startswith(COMMENT_PREFIXES)


def read_file_bytes(path: PathLike) -> bytes:
    """Read a file's raw bytes, raising FileReadError on any OS failure."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", details={"path": str(path)}) from e


def decode_content(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing malformed sequences."""
    return data.decode("utf-8", errors="replace")


class SecretScanner:
    """
    Scans files and directory trees for exposed secrets.

    The scanner holds only its file-selection policy; every call is
    independent of the previous ones. The signature catalogue is shared
    across all instances.
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        """
        Initialize the secret scanner.

        Args:
            config: File-selection policy (defaults match the built-in limits)
        """
        self.config = config or ScanConfig()
        self.path_filter = PathFilter(self.config)

    def scan_content(self, content: str, filename: str) -> List[Finding]:
        """
        Scan already-loaded text for secrets.

        Blank lines and lines starting with ``#`` or ``//`` are skipped.
        Each signature reports at most its leftmost match per line.

        Args:
            content: Text to scan
            filename: Value reported as ``Finding.file``

        Returns:
            Findings in line order, then catalogue order
        """
        findings: List[Finding] = []
        patterns = get_patterns()

        for line_number, line in enumerate(_split_lines(content), 1):
            if _is_ignored_line(line):
                continue

            for pattern in patterns:
                matched = pattern.search(line)
                if matched is None:
                    continue
                findings.append(
                    Finding(
                        file=filename,
                        line=line_number,
                        pattern=pattern.name,
                        matched=mask_secret(matched),
                    )
                )

        return findings

    def scan_file(self, path: PathLike) -> List[Finding]:
        """Scan one file through the same gates as a directory scan."""
        if not self.path_filter.should_scan_file(path):
            return []
        content = self._load_text(Path(path))
        if content is None:
            return []
        return self.scan_content(content, str(path))

    def scan_directory(self, root: PathLike) -> List[Finding]:
        """
        Scan every eligible file under ``root``.

        Args:
            root: Directory (or single file) to scan

        Returns:
            All findings, in traversal order

        Raises:
            TraversalError: If the root does not exist or cannot be listed
        """
        return self.scan(root).findings

    def scan(self, root: PathLike) -> ScanReport:
        """Scan ``root`` and return the findings together with counters."""
        report = ScanReport(root=str(root), started_at=datetime.now(timezone.utc))

        for file_path in self._iter_files(Path(root)):
            if not self.path_filter.should_scan_file(file_path):
                logger.debug(f"Skipping {file_path}: size or extension")
                report.files_skipped += 1
                continue

            content = self._load_text(file_path, report)
            if content is None:
                continue

            report.findings.extend(self.scan_content(content, str(file_path)))
            report.files_scanned += 1

        report.completed_at = datetime.now(timezone.utc)
        logger.info(
            f"Scanned {report.files_scanned} files under {root}: "
            f"{report.total_findings} findings, {report.files_skipped} skipped, "
            f"{report.read_errors} unreadable"
        )
        return report

    def _load_text(self, path: Path, report: Optional[ScanReport] = None) -> Optional[str]:
        """Read and decode a file; None when unreadable or binary."""
        try:
            data = read_file_bytes(path)
        except FileReadError as e:
            logger.debug(e.message)
            if report is not None:
                report.read_errors += 1
            return None

        if self.path_filter.is_binary(data):
            logger.debug(f"Skipping {path}: binary content")
            if report is not None:
                report.files_skipped += 1
            return None

        return decode_content(data)

    def _iter_files(self, root: Path) -> Iterator[Path]:
        """Yield regular files under ``root`` depth-first, in name order."""
        try:
            root_stat = root.stat()
        except OSError as e:
            raise TraversalError(f"Cannot access {root}: {e}", details={"path": str(root)}) from e

        if stat.S_ISREG(root_stat.st_mode):
            yield root
            return
        if not stat.S_ISDIR(root_stat.st_mode):
            raise TraversalError(f"Not a file or directory: {root}", details={"path": str(root)})

        try:
            with os.scandir(root):
                pass
        except OSError as e:
            raise TraversalError(f"Cannot list {root}: {e}", details={"path": str(root)}) from e

        def on_error(error: OSError) -> None:
            logger.debug(f"Cannot list {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            relative_dir = Path(os.path.relpath(dirpath, root))

            kept = []
            for name in sorted(dirnames):
                if self.path_filter.should_skip_dir(relative_dir / name):
                    logger.debug(f"Pruning {os.path.join(dirpath, name)}")
                    continue
                kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                if self.path_filter.should_skip_dir(relative_dir / name):
                    continue
                file_path = Path(dirpath) / name
                try:
                    mode = os.lstat(file_path).st_mode
                except OSError:
                    continue
                # Symlinks, sockets and FIFOs are never read
                if stat.S_ISREG(mode):
                    yield file_path


_default_scanner: Optional[SecretScanner] = None


def _get_default_scanner() -> SecretScanner:
    global _default_scanner
    if _default_scanner is None:
        _default_scanner = SecretScanner()
    return _default_scanner


def scan_content(content: str, filename: str) -> List[Finding]:
    """Scan a text blob with the default policy."""
    return _get_default_scanner().scan_content(content, filename)


def scan_directory(root: PathLike) -> List[Finding]:
    """Scan a directory tree with the default policy."""
    return _get_default_scanner().scan_directory(root)
