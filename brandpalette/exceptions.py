# brandpalette/exceptions.py


class PaletteError(Exception):
    """Base class for palette engine failures."""


class InvalidColorError(PaletteError, ValueError):
    """
    Raised when a malformed hex string reaches the color math.
    Generated hexes are always well-formed, so this means a defect upstream,
    not bad user input.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")
