"""Level classification and flavor text for triangle systems.

A triangle axis resolves to a continuous level in [0, 3]. Two independent
classifications are derived from it:

- ``high_low``: ``"H"`` at or above 1.5, else ``"L"`` (8-way base keys)
- ``classify_level``: tier 0-3 (None/Low/Mid/High) using 0.5/1.5/2.5
  (64-way tier keys)

The description helpers read the continuous levels directly, so two dragons
with the same tier key can still read differently.
"""

from typing import Sequence

HIGH_THRESHOLD = 1.5

LEVEL_NAMES = ("None", "Low", "Mid", "High")


def high_low(level: float) -> str:
    return "H" if level >= HIGH_THRESHOLD else "L"


def high_low_key(levels: Sequence[float]) -> str:
    """``"H-L-L"`` style key for three axis levels."""
    return "-".join(high_low(level) for level in levels)


def classify_level(level: float) -> int:
    """Classify a continuous axis level into tier 0 (None) through 3 (High)."""
    if level < 0.5:
        return 0
    if level < 1.5:
        return 1
    if level < 2.5:
        return 2
    return 3


def tier_key(levels: Sequence[float]) -> str:
    """``"0-3-1"`` style key for three axis levels."""
    return "-".join(str(classify_level(level)) for level in levels)


def level_name(level: float) -> str:
    """Human-readable tier: None, Low, Mid or High."""
    return LEVEL_NAMES[classify_level(level)]


def finish_description(opacity: float, shine: float, schiller: float) -> str:
    """Compose a finish description such as ``"Opaque, glossy sheen, vivid color-shift"``."""
    parts = []

    if opacity < 1.0:
        parts.append("Translucent")
    elif opacity < 2.0:
        parts.append("Semi-opaque")
    else:
        parts.append("Opaque")

    if shine < 1.0:
        parts.append("flat finish")
    elif shine < 2.0:
        parts.append("soft sheen")
    else:
        parts.append("glossy sheen")

    if schiller >= 2.0:
        parts.append("vivid color-shift")
    elif schiller >= 1.0:
        parts.append("subtle color-shift")
    elif schiller >= 0.5:
        parts.append("faint color-shift")
    else:
        parts.append("no color-shift")

    return ", ".join(parts)


# (strong, moderate, faint) wording per breath axis
_BREATH_WORDS = (
    ("intense heat", "warmth", "faint warmth"),
    ("biting cold", "chill", "faint chill"),
    ("crackling energy", "static charge", "faint tingle"),
)


def breath_description(fire: float, ice: float, lightning: float) -> str:
    """Prose description of a breath element's composition."""
    parts = []
    for level, (strong, moderate, faint) in zip((fire, ice, lightning), _BREATH_WORDS):
        if level >= 2.0:
            parts.append(strong)
        elif level >= 1.0:
            parts.append(moderate)
        elif level >= 0.5:
            parts.append(faint)

    if not parts:
        return "No elemental presence"
    return ", ".join(parts)


# High-axis count -> (below 1.8, 1.8-2.3 unqualified, below 2.7, 2.7 and up)
_INTENSITY_QUALIFIERS = {
    1: ("Flickering", "", "Fierce", "Raging"),
    2: ("Faint", "", "Surging", "Volatile"),
    3: ("Unstable", "", "Searing", "Cataclysmic"),
}


def _intensity_qualifier(high_levels: Sequence[float], levels: Sequence[float]) -> str:
    if not high_levels:
        # Null breath: judged on the average of all three axes
        average = sum(levels) / len(levels)
        if average < 0.3:
            return "Abyssal"
        if average < 0.7:
            return ""
        return "Fading"

    average = sum(high_levels) / len(high_levels)
    faint, plain, strong, extreme = _INTENSITY_QUALIFIERS[len(high_levels)]
    if average < 1.8:
        return faint
    if average < 2.3:
        return plain
    if average < 2.7:
        return strong
    return extreme


def breath_intensity_name(base_name: str, levels: Sequence[float]) -> str:
    """Qualify a breath base name by how strongly its High axes express.

    ``"Fire"`` becomes ``"Raging Fire"`` when the fire axis sits near 3 and
    ``"Flickering Fire"`` when it barely clears the threshold.
    """
    high_levels = [level for level in levels if level >= HIGH_THRESHOLD]
    qualifier = _intensity_qualifier(high_levels, levels)
    return f"{qualifier} {base_name}" if qualifier else base_name
