"""Validation utilities for planning inputs."""

from typing import Any, Optional, Union, Type, Tuple

from .exceptions import ValidationError, ValidationTypeError, ValidationRangeError

class Validator:
    """Base validator class."""

    @staticmethod
    def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]]) -> None:
        """Validate value type."""
        # bool is an int subclass, never a valid quantity
        if isinstance(value, bool) or not isinstance(value, expected_type):
            names = (
                "/".join(t.__name__ for t in expected_type)
                if isinstance(expected_type, tuple) else expected_type.__name__
            )
            raise ValidationTypeError(
                f"Expected type {names}, got {type(value).__name__}"
            )

    @staticmethod
    def validate_range(
        value: Union[int, float],
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None
    ) -> None:
        """Validate numeric range."""
        if min_value is not None and value < min_value:
            raise ValidationRangeError(f"Value {value} is below minimum {min_value}")

        if max_value is not None and value > max_value:
            raise ValidationRangeError(f"Value {value} exceeds maximum {max_value}")

class ScenarioValidator(Validator):
    """Caller-side business validation for scenarios.

    The aggregator itself accepts any scenario; this validator is applied by
    callers (or a session with validation enabled) before a scenario joins
    the working set.
    """

    def __init__(self, config=None):
        if config is None:
            from .config import ValidationConfig
            config = ValidationConfig()
        self.config = config

    def validate(self, scenario) -> None:
        """Validate a scenario, raising on the first violation."""
        Validator.validate_type(scenario.quantity, int)

        if self.config.require_positive_quantity:
            Validator.validate_range(scenario.quantity, min_value=1)

        if self.config.reject_inverted_ranges and scenario.end < scenario.start:
            raise ValidationRangeError(
                f"End date {scenario.end.isoformat()} is before start date "
                f"{scenario.start.isoformat()}"
            )

        if self.config.max_duration_days is not None:
            Validator.validate_range(
                scenario.duration_days, max_value=self.config.max_duration_days
            )

    def is_valid(self, scenario) -> bool:
        """Check a scenario without raising."""
        try:
            self.validate(scenario)
        except ValidationError:
            return False
        return True

class PoolValidator(Validator):
    """Validator for resource pool snapshots."""

    @staticmethod
    def validate_pool(pool) -> None:
        """Validate capacities are non-negative and available <= total."""
        Validator.validate_type(pool.total_capacity, int)
        Validator.validate_type(pool.available_capacity, int)
        Validator.validate_range(pool.total_capacity, min_value=0)
        Validator.validate_range(
            pool.available_capacity, min_value=0, max_value=pool.total_capacity
        )
