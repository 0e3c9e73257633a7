"""
Core domain models base module for the road network system.

This module provides validation helpers shared by the node and edge models.
"""

import math


# Common validation functions
def validate_coordinate(name: str, value: float, limit: float) -> None:
    """Validate that a latitude or longitude is finite and within +/- limit degrees."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise TypeError(f"{name} must be a number")
    if math.isnan(value) or not -limit <= value <= limit:
        raise ValueError(f"{name} value {value} must be between {-limit} and {limit}")


def validate_weight(weight: float) -> None:
    """Validate that an edge weight is a finite non-negative number."""
    if not isinstance(weight, (int, float)) or isinstance(weight, bool):
        raise TypeError("weight must be a number")
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError("weight must be a finite number")
    if weight < 0:
        raise ValueError("weight must be non-negative")
