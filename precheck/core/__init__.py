"""Core package for precheck."""

from precheck.core.exceptions import (
    FileReadError,
    PatternCompilationError,
    PrecheckError,
    TraversalError,
)
from precheck.core.masking import mask_secret
from precheck.core.models import Finding, ScanReport
from precheck.core.path_filter import PathFilter, should_scan_file, should_skip_dir
from precheck.core.patterns import SecretPattern, get_patterns
from precheck.core.scanner import SecretScanner, scan_content, scan_directory

__all__ = [
    "SecretScanner",
    "SecretPattern",
    "PathFilter",
    "Finding",
    "ScanReport",
    "PrecheckError",
    "TraversalError",
    "FileReadError",
    "PatternCompilationError",
    "get_patterns",
    "mask_secret",
    "scan_content",
    "scan_directory",
    "should_scan_file",
    "should_skip_dir",
]
