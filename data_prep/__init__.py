"""
Data preparation — loading seasonality files and validating form inputs.
"""

from .loader import load_seasonality_csv
from .validators import ClampedInputs, ValidationResult, clamp_inputs, validate_parameters

__all__ = [
    "load_seasonality_csv",
    "ClampedInputs",
    "ValidationResult",
    "clamp_inputs",
    "validate_parameters",
]
