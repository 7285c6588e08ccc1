"""Enums for model fields."""

from enum import Enum


class Priority(str, Enum):
    """Todo priority levels, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
