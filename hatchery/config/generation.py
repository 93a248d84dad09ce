"""Weights used when generating wild dragons.

These only affect random genotype generation, never breeding.

Triangle rarity is controlled in two stages: first pick how many of the three
axes are High (a tier, 0-3), then draw each axis' alleles from a distribution
biased toward High or Low. Weighting alleles directly cannot make both the
all-Low and the all-High outcomes rare at the same time.
"""

# Per-gene allele weights for non-triangle genes, indexed by (allele - min).
# Genes not listed use a uniform distribution.
RANDOM_ALLELE_WEIGHTS = {}

# { number of High axes: relative weight }
TRIANGLE_TIER_WEIGHTS = {
    # Color/breath: primaries (1 high) most common, secondaries (2 high)
    # uncommon, White/Black and Null/Plasma (0 or 3 high) rarest
    "color": {
        0: 0.04,  # White
        1: 0.55,  # Cyan/Magenta/Yellow (~18% each)
        2: 0.35,  # Blue/Green/Red (~12% each)
        3: 0.06,  # Black
    },
    "breath_element": {
        0: 0.04,  # Null
        1: 0.55,  # Fire/Ice/Lightning
        2: 0.35,  # Steam/Solar/Aurora
        3: 0.06,  # Plasma
    },
    # Finish: Mother of Pearl (3 high) is the standard dragon
    "finish": {
        0: 0.03,  # Seaglass
        1: 0.12,  # Velvet/Glass/Opalescent
        2: 0.35,  # Mirror/Gemstone/Iridescent
        3: 0.50,  # Mother of Pearl
    },
}

# Allele distributions for High- vs Low-biased axes over allele values 0-3.
# Aggressive so the H/L classification of a generated axis is reliable:
# ~90% of low pairs average < 1.5, ~98% of high pairs average >= 1.5.
LOW_ALLELE_WEIGHTS = (0.70, 0.22, 0.06, 0.02)
HIGH_ALLELE_WEIGHTS = (0.02, 0.06, 0.22, 0.70)
