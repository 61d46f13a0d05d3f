"""
Main planning configuration class that integrates all configuration components.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import logging
import os

from .base import BaseConfig, ConfigValidationResult, ValidationLevel
from ..exceptions import ConfigurationError


PEAK_STRATEGIES = ("critical_dates", "sweep_line")


@dataclass
class AggregationConfig:
    """Configuration for peak-demand aggregation."""
    strategy: str = "critical_dates"
    display_precision: int = 1

    def validate(self) -> ConfigValidationResult:
        """Validate aggregation configuration."""
        result = ConfigValidationResult(is_valid=True)

        if self.strategy not in PEAK_STRATEGIES:
            result.add_error(f"Invalid peak strategy: {self.strategy}")

        if self.display_precision < 0:
            result.add_error(f"Display precision must be >= 0, got {self.display_precision}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "display_precision": self.display_precision
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AggregationConfig':
        return cls(
            strategy=data.get("strategy", "critical_dates"),
            display_precision=data.get("display_precision", 1)
        )


@dataclass
class TimelineConfig:
    """Configuration for day-by-day availability projection."""
    window_days: int = 14
    shortage_threshold: int = 0

    def validate(self) -> ConfigValidationResult:
        """Validate timeline configuration."""
        result = ConfigValidationResult(is_valid=True)

        if self.window_days <= 0:
            result.add_error(f"Window must be > 0 days, got {self.window_days}")

        if self.window_days > 366:
            result.add_warning(f"Window of {self.window_days} days exceeds one year")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "window_days": self.window_days,
            "shortage_threshold": self.shortage_threshold
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimelineConfig':
        return cls(
            window_days=data.get("window_days", 14),
            shortage_threshold=data.get("shortage_threshold", 0)
        )


@dataclass
class ValidationConfig:
    """Caller-side scenario validation rules."""
    enabled: bool = False
    require_positive_quantity: bool = True
    reject_inverted_ranges: bool = True
    max_duration_days: Optional[int] = None

    def validate(self) -> ConfigValidationResult:
        """Validate validation configuration."""
        result = ConfigValidationResult(is_valid=True)

        if self.max_duration_days is not None and self.max_duration_days <= 0:
            result.add_error(f"Max duration must be > 0 days, got {self.max_duration_days}")

        if not self.enabled and not self.reject_inverted_ranges:
            result.add_warning("Inverted date ranges will be treated as zero-impact scenarios")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "require_positive_quantity": self.require_positive_quantity,
            "reject_inverted_ranges": self.reject_inverted_ranges,
            "max_duration_days": self.max_duration_days
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationConfig':
        return cls(
            enabled=data.get("enabled", False),
            require_positive_quantity=data.get("require_positive_quantity", True),
            reject_inverted_ranges=data.get("reject_inverted_ranges", True),
            max_duration_days=data.get("max_duration_days")
        )


@dataclass
class MonitoringConfig:
    """Configuration for logging."""
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> ConfigValidationResult:
        """Validate monitoring configuration."""
        result = ConfigValidationResult(is_valid=True)

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            result.add_error(f"Invalid log level: {self.log_level}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "log_file": self.log_file
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MonitoringConfig':
        return cls(
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file")
        )


@dataclass
class PlanningConfig(BaseConfig):
    """Main planning configuration class."""

    name: str = "RMS Planning"
    description: str = ""

    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    timeline: TimelineConfig = field(default_factory=TimelineConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    validation_level: ValidationLevel = ValidationLevel.STRICT
    config_version: str = "1.0"

    def __post_init__(self):
        """Initialize after dataclass creation."""
        super().__init__(self.validation_level)
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging based on monitoring configuration."""
        logger = logging.getLogger("rms_planning")
        level = getattr(logging, self.monitoring.log_level, None)
        if isinstance(level, int):
            logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # Console handler
        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # File handler if specified, once per path
        if self.monitoring.log_file:
            log_path = os.path.abspath(self.monitoring.log_file)
            for handler in logger.handlers:
                if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                    return
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    def validate(self) -> ConfigValidationResult:
        """Validate the entire planning configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.name:
            result.add_error("Configuration name cannot be empty")

        components = [
            ("aggregation", self.aggregation),
            ("timeline", self.timeline),
            ("validation", self.validation),
            ("monitoring", self.monitoring)
        ]

        # Prefix errors and warnings with component name
        for component_name, component in components:
            result.extend(component.validate(), prefix=f"{component_name}: ")

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "aggregation": self.aggregation.to_dict(),
            "timeline": self.timeline.to_dict(),
            "validation": self.validation.to_dict(),
            "monitoring": self.monitoring.to_dict(),
            "validation_level": self.validation_level.value,
            "config_version": self.config_version
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlanningConfig':
        """Create configuration from dictionary."""
        try:
            validation_level = ValidationLevel(data.get("validation_level", "strict"))
        except ValueError:
            raise ConfigurationError(
                f"Invalid validation level: {data.get('validation_level')}"
            )

        return cls(
            name=data.get("name", "RMS Planning"),
            description=data.get("description", ""),
            aggregation=AggregationConfig.from_dict(data.get("aggregation") or {}),
            timeline=TimelineConfig.from_dict(data.get("timeline") or {}),
            validation=ValidationConfig.from_dict(data.get("validation") or {}),
            monitoring=MonitoringConfig.from_dict(data.get("monitoring") or {}),
            validation_level=validation_level,
            config_version=data.get("config_version", "1.0")
        )

    def validate_and_log(self) -> bool:
        """Validate configuration and log results.

        Under ``ValidationLevel.STRICT`` an invalid configuration raises
        ``ConfigurationError`` after the errors are logged; ``PERMISSIVE``
        skips logging of errors entirely.
        """
        result = self.validate()

        logger = logging.getLogger("rms_planning.config")

        if result.is_valid:
            logger.info("Configuration validation passed")
        elif self.validation_level != ValidationLevel.PERMISSIVE:
            logger.error("Configuration validation failed")
            for error in result.errors:
                logger.error(f"Validation error: {error}")

        for warning in result.warnings:
            logger.warning(f"Validation warning: {warning}")

        if not result.is_valid and self.validation_level == ValidationLevel.STRICT:
            raise ConfigurationError("; ".join(result.errors))

        return result.is_valid
