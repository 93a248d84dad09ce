"""Gene definitions for the dragon genetics system.

All 23 genes, organised by body system. Each entry gives the legal allele
range, the inheritance rule used when resolving the phenotype, and for
non-triangle genes the map from resolved value to display name.

Systems:
- ``main``: linear (incomplete dominance) body, frame and breath genes
- ``triangle``: the nine axes of the color, finish and breath element systems
- ``sub``: horns, spines and tail; horn and spine style are categorical
"""

# =============================================================================
# MAIN SYSTEMS (linear, incomplete dominance)
# =============================================================================

MAIN_GENES = {
    # Body
    "body_size": {
        "min": 1,
        "max": 6,
        "inheritance": "linear",
        "phenotype_map": {1: "Bird", 2: "Dog", 3: "Cow", 4: "Standard", 5: "Large", 6: "Mega"},
        "label": "Size",
    },
    "body_type": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Serpentine", 2: "Normal", 3: "Bulky"},
        "label": "Body Type",
    },
    "body_scales": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Smooth", 2: "Textured", 3: "Armored"},
        "label": "Scales",
    },
    # Frame
    "frame_wings": {
        "min": 0,
        "max": 4,
        "inheritance": "linear",
        "phenotype_map": {0: "None", 1: "Vestigial", 2: "Pair", 3: "Quad", 4: "Six"},
        "label": "Wings",
    },
    "frame_limbs": {
        "min": 0,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {
            0: "Limbless",
            1: "Wyvern (2)",
            2: "Quadruped (4)",
            3: "Hexapod (6)",
        },
        "label": "Limbs",
    },
    "frame_bones": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Lightweight", 2: "Standard", 3: "Dense"},
        "label": "Bone Density",
    },
    # Breath (shape and range only - element is a triangle system)
    "breath_shape": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Single", 2: "Multi", 3: "AoE"},
        "label": "Breath Shape",
    },
    "breath_range": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Close", 2: "Medium", 3: "Far"},
        "label": "Breath Range",
    },
}

# =============================================================================
# TRIANGLE SYSTEMS (3 axes each, values 0-3)
# =============================================================================

TRIANGLE_GENES = {
    # Color (CMY)
    "color_cyan": {"min": 0, "max": 3, "inheritance": "linear", "label": "Cyan"},
    "color_magenta": {"min": 0, "max": 3, "inheritance": "linear", "label": "Magenta"},
    "color_yellow": {"min": 0, "max": 3, "inheritance": "linear", "label": "Yellow"},
    # Finish (Opacity / Shine / Schiller)
    "finish_opacity": {"min": 0, "max": 3, "inheritance": "linear", "label": "Opacity"},
    "finish_shine": {"min": 0, "max": 3, "inheritance": "linear", "label": "Shine"},
    "finish_schiller": {"min": 0, "max": 3, "inheritance": "linear", "label": "Schiller"},
    # Breath Element (Fire / Ice / Lightning)
    "breath_fire": {"min": 0, "max": 3, "inheritance": "linear", "label": "Fire"},
    "breath_ice": {"min": 0, "max": 3, "inheritance": "linear", "label": "Ice"},
    "breath_lightning": {"min": 0, "max": 3, "inheritance": "linear", "label": "Lightning"},
}

# =============================================================================
# SUB SYSTEMS
# =============================================================================

SUB_GENES = {
    # Horns
    "horn_style": {
        "min": 0,
        "max": 3,
        "inheritance": "categorical",
        "phenotype_map": {0: "None", 1: "Sleek", 2: "Gnarled", 3: "Knobbed"},
        "label": "Horn Style",
    },
    "horn_direction": {
        "min": 0,
        "max": 2,
        "inheritance": "categorical",
        "phenotype_map": {0: "Forward", 1: "Swept-back", 2: "Upward"},
        "label": "Horn Direction",
    },
    # Spines
    "spine_style": {
        "min": 0,
        "max": 3,
        "inheritance": "categorical",
        "phenotype_map": {0: "None", 1: "Ridge", 2: "Spikes", 3: "Sail"},
        "label": "Spine Style",
    },
    "spine_height": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Low", 2: "Medium", 3: "Tall"},
        "label": "Spine Height",
    },
    # Tail
    "tail_shape": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Whip", 2: "Normal", 3: "Heavy"},
        "label": "Tail Shape",
    },
    "tail_length": {
        "min": 1,
        "max": 3,
        "inheritance": "linear",
        "phenotype_map": {1: "Short", 2: "Medium", 3: "Long"},
        "label": "Tail Length",
    },
}

# Catalog order: main, triangle, sub
GENE_SYSTEMS = (
    ("main", MAIN_GENES),
    ("triangle", TRIANGLE_GENES),
    ("sub", SUB_GENES),
)
