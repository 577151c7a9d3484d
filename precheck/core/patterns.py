"""Built-in secret signature catalogue.

The catalogue is a fixed, ordered table of ``(regex, name)`` pairs. It is
compiled once, on first use, and shared read-only by every scan. Order
matters: findings on a single line are reported in catalogue order.
"""

import re
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from precheck.core.exceptions import PatternCompilationError

# (pattern, flags, signature name)
BUILTIN_PATTERNS: Tuple[Tuple[str, int, str], ...] = (
    (r"AKIA[0-9A-Z]{16}", 0, "AWS Access Key"),
    (r"ABIA[0-9A-Z]{16}", 0, "AWS Access Key"),
    (r"ACCA[0-9A-Z]{16}", 0, "AWS Access Key"),
    (r"""password\s*[:=]\s*['"][^'"]{4,}['"]""", re.IGNORECASE, "Hardcoded Password"),
    (r"""api[_-]?key\s*[:=]\s*['"][^'"]{8,}['"]""", re.IGNORECASE, "API Key"),
    (r"""secret\s*[:=]\s*['"][^'"]{4,}['"]""", re.IGNORECASE, "Hardcoded Secret"),
    (r"-----BEGIN (?:RSA|DSA|EC|OPENSSH|PGP) PRIVATE KEY-----", 0, "Private Key"),
    (r"ghp_[a-zA-Z0-9]{36}", 0, "GitHub Personal Access Token"),
    (r"gho_[a-zA-Z0-9]{36}", 0, "GitHub OAuth Token"),
    (r"sk-[a-zA-Z0-9]{48}", 0, "OpenAI API Key"),
    (r"xox[baprs]-[0-9]{10,13}-[0-9]{10,13}-[a-zA-Z0-9]{24}", 0, "Slack Token"),
)


@dataclass(frozen=True)
class SecretPattern:
    """A compiled signature: the matcher and its human-readable name."""

    name: str
    regex: re.Pattern

    @classmethod
    def compile(cls, pattern: str, name: str, flags: int = 0) -> "SecretPattern":
        """Compile a signature, raising PatternCompilationError on a bad regex."""
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise PatternCompilationError(
                f"Invalid built-in pattern for {name!r}: {e}",
                details={"pattern": pattern, "name": name},
            ) from e
        return cls(name=name, regex=compiled)

    def search(self, line: str) -> Optional[str]:
        """Return the leftmost match in ``line``, or None."""
        match = self.regex.search(line)
        return match.group(0) if match else None


_catalogue: Optional[Tuple[SecretPattern, ...]] = None
_catalogue_lock = threading.Lock()


def _build_catalogue() -> Tuple[SecretPattern, ...]:
    return tuple(
        SecretPattern.compile(pattern, name, flags)
        for pattern, flags, name in BUILTIN_PATTERNS
    )


def get_patterns() -> Tuple[SecretPattern, ...]:
    """Return the shared catalogue, compiling it on first call."""
    global _catalogue
    if _catalogue is None:
        with _catalogue_lock:
            if _catalogue is None:
                # Assigned only after every entry compiled
                _catalogue = _build_catalogue()
    return _catalogue


def pattern_names() -> List[str]:
    """Distinct signature names in catalogue order."""
    names: List[str] = []
    for pattern in get_patterns():
        if pattern.name not in names:
            names.append(pattern.name)
    return names
