class MissingRequiredFieldError(Exception):
    """Raised when a required configuration field is empty or missing."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required configuration field: '{field}'")


class AccountResolutionError(Exception):
    """Raised when the AWS account id or region cannot be resolved from the session."""
