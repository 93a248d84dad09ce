"""Breeding and expression tunables."""

# Per allele, per breeding event
MUTATION_RATE = 0.005

# Clutch size is drawn uniformly from this inclusive range
CLUTCH_SIZE_MIN = 2
CLUTCH_SIZE_MAX = 4

# How strongly heterozygous pairs on a recessive-extremes axis are pulled
# toward the neutral midpoint (0 = no pull, 1 = full pull at max spread)
RECESSIVE_PULL_STRENGTH = 0.5

# Chance that a Null (all-Low) breath element is the Dark Energy variant
DARK_ENERGY_CHANCE = 0.05
