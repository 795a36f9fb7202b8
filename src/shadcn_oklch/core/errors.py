"""
Error types for shadcn-oklch option loading.

The colour pipeline itself never raises: unparsable values fall back to
their original text. Only reading options from disk can fail.
"""


class ShadcnOklchError(Exception):
    """Base exception for all shadcn-oklch errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ThemeConfigError(ShadcnOklchError):
    """
    Raised when a plugin options file cannot be loaded.

    Examples:
    - File missing when defaults are not allowed
    - Invalid YAML or TOML syntax
    - Options that fail schema validation
    - Unsupported file extension
    """

    pass
