"""Color conversion utilities.

This module provides the color math behind a dragon's resolved color:
subtractive CMY levels to RGB, hex strings, HSL analysis and naming a color
from what it actually looks like.

Design Note:
    These are pure functions with no genetics dependencies.
    They can be tested in isolation and used by any module.
"""

import math

# Top of the CMY axis scale (allele values run 0-3)
CMY_MAX_LEVEL = 3.0


def _round_channel(value: float) -> int:
    # Half up, so 127.5 -> 128 regardless of banker's rounding
    return int(math.floor(value + 0.5))


def cmy_to_rgb(c_level: float, m_level: float, y_level: float) -> tuple[int, int, int]:
    """Convert continuous CMY levels (0-3) to an RGB color tuple.

    Subtractive model: cyan removes red, magenta removes green and yellow
    removes blue.

    Args:
        c_level: Cyan level, 0.0 to 3.0 (halves appear for averaged alleles)
        m_level: Magenta level, 0.0 to 3.0
        y_level: Yellow level, 0.0 to 3.0

    Returns:
        Tuple of (R, G, B) values, each 0-255

    Example:
        >>> cmy_to_rgb(0, 0, 0)
        (255, 255, 255)
        >>> cmy_to_rgb(0, 3, 3)
        (255, 0, 0)
        >>> cmy_to_rgb(1.5, 1.5, 1.5)
        (128, 128, 128)
    """
    r = _round_channel(255 * (1 - c_level / CMY_MAX_LEVEL))
    g = _round_channel(255 * (1 - m_level / CMY_MAX_LEVEL))
    b = _round_channel(255 * (1 - y_level / CMY_MAX_LEVEL))
    return (r, g, b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format an RGB triple as a lowercase ``#rrggbb`` string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert RGB (0-255) to HSL.

    Returns:
        ``(hue, saturation, lightness)`` with hue in degrees [0, 360) and
        saturation/lightness in [0, 1]
    """
    rf, gf, bf = r / 255, g / 255, b / 255
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2

    if high == low:
        return (0.0, 0.0, lightness)

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == rf:
        hue = (gf - bf) / delta + (6 if gf < bf else 0)
    elif high == gf:
        hue = (bf - rf) / delta + 2
    else:
        hue = (rf - gf) / delta + 4

    return (hue / 6 * 360, saturation, lightness)


# Upper hue bound (exclusive, degrees) -> base name. Red also covers >= 350.
HUE_NAMES = (
    (10, "Red"),
    (30, "Vermilion"),
    (45, "Orange"),
    (55, "Gold"),
    (75, "Yellow"),
    (100, "Lime"),
    (140, "Green"),
    (165, "Teal"),
    (190, "Cyan"),
    (210, "Sky"),
    (245, "Blue"),
    (270, "Indigo"),
    (295, "Purple"),
    (320, "Magenta"),
    (340, "Rose"),
    (360, "Red"),
)


def _achromatic_name(lightness: float, silver_above: float) -> str:
    if lightness > silver_above:
        return "Silver"
    if lightness < 0.3:
        return "Charcoal"
    return "Grey"


def color_name_from_rgb(r: int, g: int, b: int) -> str:
    """Name a color from its RGB values using HSL hue analysis.

    Near-achromatic colors map to White, Black, Silver, Grey or Charcoal.
    Everything else gets a hue band name with an optional lightness
    qualifier (``Dark``, ``Deep`` or ``Pale``), e.g. ``"Deep Purple"``.
    """
    hue, saturation, lightness = rgb_to_hsl(r, g, b)

    if lightness > 0.92:
        return "White"
    if lightness < 0.08:
        return "Black"
    if saturation < 0.08:
        return _achromatic_name(lightness, 0.6)
    if saturation < 0.20:
        return _achromatic_name(lightness, 0.7)

    name = "Red"
    for upper, band_name in HUE_NAMES:
        if hue < upper:
            name = band_name
            break

    if lightness < 0.25:
        shade = "Dark"
    elif lightness < 0.40:
        shade = "Deep"
    elif lightness > 0.78:
        shade = "Pale"
    else:
        shade = ""

    return f"{shade} {name}" if shade else name
