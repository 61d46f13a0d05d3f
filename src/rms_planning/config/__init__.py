"""
Configuration package for the RMS planning library.
Provides hierarchical and validatable configuration management.
"""

from .base import (
    BaseConfig,
    ConfigFormat,
    ValidationLevel,
    ConfigValidationResult
)

from .planning_config import (
    PEAK_STRATEGIES,
    AggregationConfig,
    TimelineConfig,
    ValidationConfig,
    MonitoringConfig,
    PlanningConfig
)

__all__ = [
    # Base configuration classes
    "BaseConfig",
    "ConfigFormat",
    "ValidationLevel",
    "ConfigValidationResult",

    # Component configurations
    "PEAK_STRATEGIES",
    "AggregationConfig",
    "TimelineConfig",
    "ValidationConfig",
    "MonitoringConfig",

    # Main configuration class
    "PlanningConfig"
]
