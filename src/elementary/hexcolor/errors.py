"""Hex color decoder error types."""

from __future__ import annotations


class HexColorDecoderError(Exception):
    """Raised when a hex color string cannot be validated or decoded.

    Subclasses form a closed set; each carries the original (unstripped)
    input so the message can quote it back to the user.
    """

    code = "decoding_error"

    def __init__(self, hex: str, *details: object) -> None:
        self.hex = hex
        super().__init__(hex, *details)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidCharacters(HexColorDecoderError):
    """The hex contains characters outside ``0-9a-fA-F``."""

    code = "invalid_characters"

    def __init__(self, hex: str, characters: list[str]) -> None:
        self.characters = list(characters)
        super().__init__(hex, tuple(characters))

    @property
    def message(self) -> str:
        joined = ", ".join(self.characters)
        return f'The hex "{self.hex}" contains invalid characters: {joined}'


class InvalidLength(HexColorDecoderError):
    """The hex (without its ``#``) is neither 6 nor 8 characters long."""

    code = "invalid_length"

    @property
    def message(self) -> str:
        return f'The hex "{self.hex}" must be exactly 6 or 8 characters long'


class DecodingFailed(HexColorDecoderError):
    """The validated hex could not be read as an integer."""

    code = "decoding_failed"

    @property
    def message(self) -> str:
        return f'The hex "{self.hex}" could not be decoded'
