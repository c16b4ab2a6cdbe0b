from textkit.validation.validator import ValidationError, validate, validate_theme_file

__all__ = ["validate", "validate_theme_file", "ValidationError"]
