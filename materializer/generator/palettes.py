# materializer/generator/palettes.py
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from materializer.errors import InvalidStyle


class Style(str, Enum):
    AURORA = "aurora"
    EMBER = "ember"
    LAGOON = "lagoon"


@dataclass(frozen=True)
class Palette:
    bg0: str       # page background, gradient start
    bg1: str       # page background, gradient end
    ink: str       # body text
    panel: str     # translucent card fill
    accent_a: str
    accent_b: str
    muted: str     # secondary text


PALETTES = MappingProxyType({
    Style.AURORA: Palette(
        bg0="#0b1026",
        bg1="#1b2a5c",
        ink="#eef2ff",
        panel="rgba(255, 255, 255, 0.08)",
        accent_a="#7cf3d4",
        accent_b="#a78bfa",
        muted="#9aa5c7",
    ),
    Style.EMBER: Palette(
        bg0="#1a0b0b",
        bg1="#4a1d12",
        ink="#fff4ec",
        panel="rgba(255, 236, 220, 0.09)",
        accent_a="#ff9f43",
        accent_b="#ff5e7e",
        muted="#d9b3a3",
    ),
    Style.LAGOON: Palette(
        bg0="#031b1f",
        bg1="#0b4d55",
        ink="#e9fffb",
        panel="rgba(220, 255, 250, 0.08)",
        accent_a="#4fd1c5",
        accent_b="#f6e05e",
        muted="#94c9c3",
    ),
})


def resolve_style(style) -> Style:
    if isinstance(style, Style):
        return style
    try:
        return Style(style)
    except ValueError:
        raise InvalidStyle(style) from None


def get_palette(style) -> Palette:
    return PALETTES[resolve_style(style)]
