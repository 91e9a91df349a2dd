"""Errors raised by the award calculations."""


class InvalidInputError(ValueError):
    """Raised when the estimator is called with values outside its domain."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
