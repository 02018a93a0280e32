"""Exceptions raised by the instrumentpy core."""


class UnsupportedMutationError(TypeError):
    """Raised when code tries to mutate a frozen snapshot collection."""


class IncompleteSpanDataError(ValueError):
    """Raised by SpanDataBuilder.build() when required fields were never set.

    Attributes:
        missing: Names of the builder fields that were not set.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required span fields: {', '.join(missing)}")
