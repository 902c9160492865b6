from elementary.hexcolor.decoder import WHITE, ColorComponents, decode, decode_or_default
from elementary.hexcolor.errors import (
    DecodingFailed,
    HexColorDecoderError,
    InvalidCharacters,
    InvalidLength,
)

__all__ = [
    "decode",
    "decode_or_default",
    "ColorComponents",
    "WHITE",
    "HexColorDecoderError",
    "InvalidCharacters",
    "InvalidLength",
    "DecodingFailed",
]
