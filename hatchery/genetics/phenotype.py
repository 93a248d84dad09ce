"""Resolved phenotype data structures.

These are the read-only results of :class:`~hatchery.genetics.resolver.PhenotypeResolver`.
Rendering, almanac and quest code consume them; nothing in the genetics core
reads them back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResolvedTrait:
    """One non-triangle gene, resolved."""

    level: float  # raw average (linear) or higher allele (categorical)
    name: str
    rounded: int | None = None  # linear genes only

    @property
    def value(self) -> int:
        """The integer value used for the name lookup."""
        return self.rounded if self.rounded is not None else int(self.level)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"level": self.level, "name": self.name}
        if self.rounded is not None:
            data["rounded"] = self.rounded
        return data


@dataclass(frozen=True)
class TriangleResult:
    """Fields shared by every resolved triangle system.

    Attributes:
        levels: Continuous level of each axis, in axis order
        key: High/Low key such as ``"H-L-L"``
        name: Base name from the High/Low table
        tier_key: 0-3 tier key such as ``"0-3-1"``
    """

    levels: tuple[float, float, float]
    key: str
    name: str
    tier_key: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "levels": list(self.levels),
            "key": self.key,
            "name": self.name,
            "tier_key": self.tier_key,
        }


@dataclass(frozen=True)
class ResolvedColor(TriangleResult):
    """Resolved CMY color.

    ``display_name`` is derived from the computed RGB so it always matches the
    swatch; ``tier_name`` is the 64-entry table name for the tier key.
    """

    tier_name: str = ""
    rgb: tuple[int, int, int] = (255, 255, 255)
    hex: str = "#ffffff"
    display_name: str = ""
    cmy_breakdown: dict[str, str] = field(default_factory=dict)
    specialty_name: str | None = None
    specialty_category: str | None = None
    modifier_prefix: str | None = None

    # Compared by value but holds dicts, so instances are not hashable
    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "tier_name": self.tier_name,
                "rgb": {"r": self.rgb[0], "g": self.rgb[1], "b": self.rgb[2]},
                "hex": self.hex,
                "display_name": self.display_name,
                "cmy_breakdown": dict(self.cmy_breakdown),
                "specialty_name": self.specialty_name,
                "specialty_category": self.specialty_category,
                "modifier_prefix": self.modifier_prefix,
            }
        )
        return data


@dataclass(frozen=True)
class ResolvedFinish(TriangleResult):
    display_name: str = ""
    desc: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({"display_name": self.display_name, "desc": self.desc})
        return data


@dataclass(frozen=True)
class ResolvedBreathElement(TriangleResult):
    """Resolved breath element, including the Dark Energy variant."""

    display_color: str = ""
    display_name: str = ""
    intensity_name: str = ""
    breath_breakdown: dict[str, str] = field(default_factory=dict)
    desc: str = ""
    is_dark_energy: bool = False

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "display_color": self.display_color,
                "display_name": self.display_name,
                "intensity_name": self.intensity_name,
                "breath_breakdown": dict(self.breath_breakdown),
                "desc": self.desc,
                "is_dark_energy": self.is_dark_energy,
            }
        )
        return data


@dataclass(frozen=True)
class Phenotype:
    """A dragon's complete resolved trait set."""

    traits: dict[str, ResolvedTrait]
    color: ResolvedColor
    finish: ResolvedFinish
    breath_element: ResolvedBreathElement

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_dark_energy(self) -> bool:
        return self.breath_element.is_dark_energy

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "traits": {name: trait.to_dict() for name, trait in self.traits.items()},
            "color": self.color.to_dict(),
            "finish": self.finish.to_dict(),
            "breath_element": self.breath_element.to_dict(),
        }
