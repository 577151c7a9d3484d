"""
Configuration management for precheck
Holds the traversal and file-selection policy used by the scanner
"""
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from precheck.core.exceptions import ConfigurationError

MAX_FILE_SIZE_BYTES = 2 * 1024 * 1024

SKIP_DIR_NAMES: Tuple[str, ...] = ("test", "tests", "__tests__", "spec", "fixtures")

SKIP_PATH_SUBSTRINGS: Tuple[str, ...] = (
    ".git",
    "node_modules",
    "_build",
    "deps",
    "target",
    ".elixir_ls",
)

SKIP_SUFFIXES: Tuple[str, ...] = (".beam", ".pyc")

SKIP_EXTENSIONS: Tuple[str, ...] = (
    "beam", "so", "dylib", "dll", "a", "o", "class", "jar", "war",
    "png", "jpg", "jpeg", "gif", "pdf", "zip", "tar", "gz", "7z",
    "mp4", "mp3", "woff", "woff2", "ttf",
)

MAX_FILE_SIZE_ENV = "PRECHECK_MAX_FILE_SIZE"


@dataclass(frozen=True)
class ScanConfig:
    """Scanner file-selection policy"""
    max_file_size: int = MAX_FILE_SIZE_BYTES
    skip_dir_names: Tuple[str, ...] = field(default=SKIP_DIR_NAMES)
    skip_path_substrings: Tuple[str, ...] = field(default=SKIP_PATH_SUBSTRINGS)
    skip_suffixes: Tuple[str, ...] = field(default=SKIP_SUFFIXES)
    skip_extensions: Tuple[str, ...] = field(default=SKIP_EXTENSIONS)

    def __post_init__(self) -> None:
        if isinstance(self.max_file_size, bool) or not isinstance(self.max_file_size, int):
            raise ConfigurationError(
                f"max_file_size must be an integer, got {self.max_file_size!r}"
            )
        if self.max_file_size < 0:
            raise ConfigurationError("max_file_size must not be negative")
        # Extensions compare case-insensitively and without a leading dot
        object.__setattr__(
            self,
            "skip_extensions",
            tuple(ext.lower().lstrip(".") for ext in self.skip_extensions),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScanConfig':
        """Create from dictionary"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "max_file_size":
                kwargs[key] = value
                continue
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise ConfigurationError(f"{key} must be a list of strings")
            if not all(isinstance(item, str) for item in value):
                raise ConfigurationError(f"{key} must be a list of strings")
            kwargs[key] = tuple(value)
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> 'ScanConfig':
        """
        Load configuration from a YAML file

        Args:
            path: Path to a YAML mapping of ScanConfig fields

        Returns:
            ScanConfig with file values over the defaults
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file {path}: {e}")

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, base: Optional['ScanConfig'] = None) -> 'ScanConfig':
        """Apply environment overrides on top of ``base`` (or the defaults)"""
        base = base or cls()
        raw = os.getenv(MAX_FILE_SIZE_ENV)
        if not raw:
            return base
        try:
            max_file_size = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"{MAX_FILE_SIZE_ENV} must be an integer, got {raw!r}"
            )
        data = base.to_dict()
        data["max_file_size"] = max_file_size
        return cls.from_dict(data)


def load_config(config_path: Optional[Path] = None) -> ScanConfig:
    """Load the scan configuration: file (if given), then environment"""
    config = ScanConfig.from_yaml(config_path) if config_path else ScanConfig()
    return ScanConfig.from_env(config)
