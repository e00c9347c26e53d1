"""Helper exceptions with contextual error messages."""


class HelperError(Exception):
    """Base exception for all helper errors."""

    def __init__(self, message: str, helper: str | None = None):
        self.helper = helper
        super().__init__(f"{message}\n\n  Helper: {helper}" if helper else message)


class OptionsError(HelperError):
    """An option value could not be coerced to its declared type."""

    def __init__(
        self,
        message: str,
        helper: str | None = None,
        invalid: dict[str, str] | None = None,
        accepted: dict | None = None,
        original_error: Exception | None = None,
    ):
        self.invalid = invalid or {}
        self.accepted = accepted or {}
        self.original_error = original_error

        full_message = message
        if helper:
            full_message += f"\n\n  Helper: {helper}"

        for name, reason in self.invalid.items():
            full_message += f"\n    - {name}: {reason}"

        if helper and self.accepted:
            full_message += f"\n\n  {helper} accepts:"
            for name, field in self.accepted.items():
                type_name = getattr(field.annotation, "__name__", None) or str(field.annotation)
                full_message += f"\n    - {name}: {type_name} = {field.default!r}"

        Exception.__init__(self, full_message)
        self.helper = helper


class UnknownHelperError(HelperError, KeyError):
    """Requested a helper name that is not registered."""

    def __str__(self):
        # KeyError would repr() the message
        return Exception.__str__(self)
