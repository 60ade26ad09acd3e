from .data_validator import has_errors, validate, validate_file
from .validation_issue import Severity, ValidationIssue

__all__ = ["has_errors", "validate", "validate_file", "Severity", "ValidationIssue"]
