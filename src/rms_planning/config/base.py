"""
Base configuration system for the RMS planning library.

Configuration objects validate themselves, convert to plain dictionaries and
round-trip through YAML or JSON files. The file format follows the file
suffix unless a format is given explicitly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
import json
import logging

import yaml

from ..exceptions import ConfigurationError


class ConfigFormat(Enum):
    """Supported configuration file formats."""
    YAML = "yaml"
    JSON = "json"

    @classmethod
    def from_path(cls, path: Path) -> 'ConfigFormat':
        """Format matching the suffix of ``path``."""
        suffix = path.suffix.lower()
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        if suffix == ".json":
            return cls.JSON
        raise ConfigurationError(
            f"Unsupported configuration file suffix: {path.suffix or '(none)'}"
        )

    def dump(self, data: Dict[str, Any], stream) -> None:
        if self is ConfigFormat.YAML:
            yaml.safe_dump(data, stream, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, stream, indent=2)

    def load(self, stream) -> Any:
        if self is ConfigFormat.YAML:
            return yaml.safe_load(stream)
        return json.load(stream)


class ValidationLevel(Enum):
    """How ``validate_and_log`` reacts to an invalid configuration."""
    STRICT = "strict"          # Raise ConfigurationError
    WARN = "warn"              # Log errors and continue
    PERMISSIVE = "permissive"  # Continue silently


@dataclass
class ConfigValidationResult:
    """Errors and warnings collected while validating a configuration."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def extend(self, other: 'ConfigValidationResult', prefix: str = "") -> None:
        """Fold another result into this one, prefixing its messages."""
        for error in other.errors:
            self.add_error(f"{prefix}{error}")
        for warning in other.warnings:
            self.add_warning(f"{prefix}{warning}")


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into sections."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class BaseConfig(ABC):
    """Abstract base class for file-backed planning configuration."""

    def __init__(self, validation_level: ValidationLevel = ValidationLevel.STRICT):
        self.validation_level = validation_level
        self._logger = logging.getLogger(f"rms_planning.config.{self.__class__.__name__}")

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        """Validate the configuration."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseConfig':
        """Create configuration from dictionary."""
        pass

    def save_to_file(
        self,
        file_path: Union[str, Path],
        format: Optional[ConfigFormat] = None
    ) -> Path:
        """Write the configuration, in the suffix's format by default."""
        file_path = Path(file_path)
        format = format or ConfigFormat.from_path(file_path)

        with open(file_path, 'w') as f:
            format.dump(self.to_dict(), f)

        self._logger.debug(f"Saved {format.value} configuration to {file_path}")
        return file_path

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> 'BaseConfig':
        """Read a configuration written by ``save_to_file`` or by hand."""
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        format = ConfigFormat.from_path(file_path)
        with open(file_path, 'r') as f:
            data = format.load(f)

        # An empty file means all defaults
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must contain a mapping, "
                f"got {type(data).__name__}"
            )
        return cls.from_dict(data)

    def merge(self, other: 'BaseConfig') -> 'BaseConfig':
        """New configuration with ``other`` laid over this one."""
        return self.__class__.from_dict(deep_merge(self.to_dict(), other.to_dict()))
