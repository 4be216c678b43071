"""Profile-driven classification of flat traversal output into records."""

from .classifier import (
    ClassifierState,
    DomainProfile,
    FieldRule,
    RecordClassifier,
    classify,
    classify_values,
    node_value,
    role_contains,
    role_in,
    title_or_value,
    value_or_title,
)

__all__ = [
    "ClassifierState",
    "DomainProfile",
    "FieldRule",
    "RecordClassifier",
    "classify",
    "classify_values",
    "node_value",
    "role_contains",
    "role_in",
    "title_or_value",
    "value_or_title",
]
