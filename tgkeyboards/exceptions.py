"""Exception hierarchy for keyboard builders."""


class KeyboardError(Exception):
    """Base error for all keyboard builder failures."""


class ConfigurationError(KeyboardError):
    """Settings could not be loaded or validated."""


class MarkupError(KeyboardError):
    """Builder is in a state that cannot produce the requested markup."""


class IndexOutOfBoundsError(MarkupError, IndexError):
    """Row index cannot be resolved to an existing row."""

    def __init__(self, index: int, row_count: int, message: str = "") -> None:
        self.index = index
        self.row_count = row_count
        super().__init__(
            message or f"Row index {index} is out of bounds for {row_count} rows"
        )


class EmptyGridError(IndexOutOfBoundsError):
    """Row index resolution was attempted on a keyboard without rows."""

    def __init__(self, index: int) -> None:
        super().__init__(
            index, 0, f"Cannot resolve row index {index}: keyboard has no rows"
        )


class EntryTypeError(MarkupError, TypeError):
    """A whole row was passed where a single button entry was expected."""
