"""
Errors and warnings raised by morandipal.
"""


class UnknownPaletteError(ValueError):
    """Requested palette name is not registered."""

    def __init__(self, name, available):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Palette '{name}' not found. Available palettes: {', '.join(self.available)}"
        )


class EmptyPaletteError(ValueError):
    """A literal colour list with no colours was supplied."""


class InvalidGroupCountError(ValueError):
    """Group count is negative or not an integer."""


class TruncationWarning(UserWarning):
    """More colours were requested than the palette holds."""
