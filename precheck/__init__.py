"""precheck - filesystem secret scanner."""

__version__ = "0.1.0"
__author__ = "Precheck Team"

from precheck.core.models import Finding, ScanReport
from precheck.core.scanner import SecretScanner, scan_content, scan_directory
from precheck.core.exceptions import TraversalError

__all__ = [
    "Finding",
    "ScanReport",
    "SecretScanner",
    "TraversalError",
    "scan_content",
    "scan_directory",
    "__version__",
]
