"""Custom exceptions for the RMS planning library."""

class PlanningError(Exception):
    """Base exception for planning errors."""
    pass

class ValidationError(PlanningError):
    """Base exception for validation errors."""
    pass

class ValidationTypeError(ValidationError):
    """Exception raised for type validation errors."""
    pass

class ValidationRangeError(ValidationError):
    """Exception raised for range validation errors."""
    pass

class ConfigurationError(PlanningError):
    """Exception raised for configuration errors."""
    pass

class ScenarioError(PlanningError):
    """Exception raised for scenario-related errors."""
    pass

class ScenarioNotFoundError(ScenarioError):
    """Exception raised when a scenario is not in the working set."""
    pass

class SnapshotError(PlanningError):
    """Exception raised for missing or malformed resource snapshots."""
    pass
