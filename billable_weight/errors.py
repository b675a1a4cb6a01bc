"""Validation error raised when a package value falls outside its bounds."""


class InvalidArgument(ValueError):
    """
    Raised when a package field is invalid.

    Attributes:
        field: Name of the failing field ("width", "height", "length",
               "weight", "divisor" or "columns")
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Invalid package {field}")
