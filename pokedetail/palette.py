from typing import Mapping

# Base colour per canonical type, as "#rrggbb"
TYPE_COLORS: dict[str, str] = {
    "normal": "#a8a77a",
    "fire": "#ee8130",
    "water": "#6390f0",
    "electric": "#f7d02c",
    "grass": "#7ac74c",
    "ice": "#96d9d6",
    "fighting": "#c22e28",
    "poison": "#a33ea1",
    "ground": "#e2bf65",
    "flying": "#a98ff3",
    "psychic": "#f95587",
    "bug": "#a6b91a",
    "rock": "#b6a136",
    "ghost": "#735797",
    "dragon": "#6f35fc",
    "dark": "#705746",
    "steel": "#b7b7ce",
    "fairy": "#d685ad",
}

DEFAULT_TYPE = "normal"

# Mix ratios toward white; higher is lighter
PAGE_MIX = 0.86
HERO_MIX = 0.72
CHIP_MIX = 0.6
BADGE_MIX = 0.65


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parses '#rrggbb' (leading '#' optional) into an RGB triple."""
    value = hex_color.strip().lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex colour: {hex_color!r}")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        raise ValueError(f"Invalid hex colour: {hex_color!r}") from None


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def pastelize(hex_color: str, ratio: float) -> str:
    """
    Blends a colour toward white.
    Each channel becomes round(c + (255 - c) * ratio), rounding halves up,
    so ratio 0 returns the colour unchanged and ratio 1 returns white.
    """
    if not 0 <= ratio <= 1:
        raise ValueError(f"Mix ratio must be within [0, 1], got {ratio}")
    channels = hex_to_rgb(hex_color)
    mixed = tuple(int(c + (255 - c) * ratio + 0.5) for c in channels)
    return rgb_to_hex(mixed)


def base_color(type_name: str | None, palette: Mapping[str, str] | None = None) -> str:
    """Looks up a type's base colour, falling back to the 'normal' entry for unknown names."""
    palette = TYPE_COLORS if palette is None else palette
    key = (type_name or "").lower()
    if key in palette:
        return palette[key]
    return palette.get(DEFAULT_TYPE, TYPE_COLORS[DEFAULT_TYPE])
