"""data-validator exception hierarchy.

Both error kinds carry the fully rendered report as their message, plus the
report lines for consumers that want the structured form.

Usage:
    from data_validator.exceptions import SchemaError, ValidationError

    try:
        validator.validate(collection)
    except ValidationError as e:
        print(e)
"""


class DataValidatorError(Exception):
    """Base exception for all data-validator errors.

    Carries the individual report lines alongside the rendered message.
    """

    def __init__(self, message: str, *, errors: list[str] | None = None):
        self.errors = list(errors) if errors is not None else [message]
        super().__init__(message)


class SchemaError(DataValidatorError):
    """The schema document is unparsable or malformed."""

    pass


class ValidationError(DataValidatorError):
    """A record collection is unparsable or violates the schema."""

    pass
