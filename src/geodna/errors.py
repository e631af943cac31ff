"""
Exceptions raised by the GeoDNA codec.
"""

from typing import Optional


class InvalidCodeError(ValueError):
    """
    Raised when a string cannot be decoded as a GeoDNA code.

    Attributes:
        code: The offending code string
        character: The character that could not be mapped, if any
    """

    def __init__(self, code: str, character: Optional[str] = None):
        self.code = code
        self.character = character
        if character is None:
            message = f"Invalid GeoDNA code {code!r}: missing hemisphere marker"
        else:
            message = f"Invalid GeoDNA code {code!r}: couldn't map {character!r}"
        super().__init__(message)
