"""
Custom Exception Hierarchy for the ILO Wizard

Exception Hierarchy:
    WizardError (base)
    ├── FieldError
    │   ├── UnknownFieldError
    │   └── InvalidFieldValueError
    ├── StepOutOfRangeError
    ├── EnhancementError
    │   ├── EnhancementRequestError
    │   └── EnhancementResponseError
    └── PromptTemplateError
"""

from typing import Optional


class WizardError(Exception):
    """Base exception for all wizard errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Field Errors

class FieldError(WizardError):
    """Base exception for ILO field updates."""
    pass


class UnknownFieldError(FieldError):
    """Raised when a field path does not name an ILO leaf."""

    def __init__(self, field_path: str):
        super().__init__(f"Unknown ILO field: '{field_path}'")
        self.field_path = field_path


class InvalidFieldValueError(FieldError):
    """Raised when a value is outside a field's allowed set."""

    def __init__(self, field_path: str, value: str, allowed: list[str]):
        message = f"Invalid value {value!r} for '{field_path}'. Allowed: {', '.join(allowed)}"
        super().__init__(message)
        self.field_path = field_path
        self.value = value
        self.allowed = allowed


# Navigation Errors

class StepOutOfRangeError(WizardError):
    """Raised when jumping to a step index that does not exist."""

    def __init__(self, step: int, last_step: int):
        super().__init__(f"Step {step} is outside 0..{last_step}")
        self.step = step
        self.last_step = last_step


# Enhancement Errors

class EnhancementError(WizardError):
    """Base exception for enhancement round-trip failures."""
    pass


class EnhancementRequestError(EnhancementError):
    """Raised when the enhancement request fails in transport or with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code


class EnhancementResponseError(EnhancementError):
    """Raised when a success response does not carry enhancement text."""
    pass


# Prompt Errors

class PromptTemplateError(WizardError):
    """Raised when prompt template rendering fails."""

    def __init__(self, template_name: str, missing_vars: list[str]):
        message = f"Prompt template '{template_name}' missing variables: {', '.join(missing_vars)}"
        super().__init__(message)
        self.template_name = template_name
        self.missing_vars = missing_vars
