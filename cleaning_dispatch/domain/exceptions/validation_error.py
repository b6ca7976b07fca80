"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(
            f"Field '{field_name}' has invalid format, expected: {expected_format}"
        )


class InvalidInputError(ValidationError):
    """Raised when a value is outside its allowed domain."""

    def __init__(self, field_name: str, value, allowed: str):
        self.field_name = field_name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Field '{field_name}' has invalid value {value!r}, allowed: {allowed}"
        )


class AssignmentCountMismatchError(ValidationError):
    """Raised when the selected employees do not match the requested count."""

    def __init__(self, request_id: str, expected: int, selected: int):
        self.request_id = request_id
        self.expected = expected
        self.selected = selected
        super().__init__(
            f"Request {request_id} needs {expected} employee(s), {selected} selected"
        )


class DuplicateRecordError(ValidationError):
    """Raised when a write conflicts with a unique or foreign key constraint."""

    def __init__(self, operation: str, detail: str = None):
        self.operation = operation
        self.detail = detail
        message = f"Operation '{operation}' conflicts with existing data"
        if detail:
            message += f": {detail}"
        super().__init__(message)
