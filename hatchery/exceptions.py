"""Hatchery exception hierarchy.

Centralised base classes so callers can catch genetics failures narrowly
and configuration bugs surface separately from bad input data.
"""


class HatcheryError(Exception):
    """Root of all hatchery domain exceptions."""


class GeneticsError(HatcheryError):
    """Genotype structure, allele or phenotype access failure."""


class StructuralMismatchError(GeneticsError):
    """A genotype does not carry exactly the genes the catalog defines."""


class AlleleRangeError(GeneticsError):
    """An allele value lies outside its gene's legal range."""


class UnknownPathError(GeneticsError):
    """A phenotype path string does not name an addressable field."""


class ConfigurationError(HatcheryError):
    """Invalid or missing trait catalog configuration."""


class UnresolvableValueError(ConfigurationError):
    """A resolved trait value has no entry in its gene's phenotype map."""
