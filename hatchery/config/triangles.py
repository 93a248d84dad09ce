"""Triangle systems and their name tables.

A triangle system groups three genes (axes). Each axis resolves to a
continuous level in [0, 3] which is classified two ways:

- High/Low (threshold 1.5) giving an 8-way key such as ``"H-L-L"``; this
  drives the base name and rarity classification.
- Four tiers (None/Low/Mid/High = 0-3, thresholds 0.5/1.5/2.5) giving a
  64-way key such as ``"0-3-1"``; this drives the fine display names and the
  cross-system specialty combos.
"""

TRIANGLE_SYSTEMS = {
    "color": {
        "axes": ("color_cyan", "color_magenta", "color_yellow"),
        "label": "Color",
    },
    "finish": {
        "axes": ("finish_opacity", "finish_shine", "finish_schiller"),
        "label": "Finish",
    },
    "breath_element": {
        "axes": ("breath_fire", "breath_ice", "breath_lightning"),
        "label": "Breath Element",
        # H and L are recessive: heterozygous pairs are pulled toward center
        "recessive_extremes": True,
    },
}

# =============================================================================
# HIGH/LOW BASE TABLES
# =============================================================================

COLOR_PHENOTYPES = {
    "L-L-L": {"name": "White"},
    "H-L-L": {"name": "Cyan"},
    "L-H-L": {"name": "Magenta"},
    "L-L-H": {"name": "Yellow"},
    "H-H-L": {"name": "Blue"},
    "H-L-H": {"name": "Green"},
    "L-H-H": {"name": "Red"},
    "H-H-H": {"name": "Black"},
}

FINISH_PHENOTYPES = {
    "L-L-L": {"name": "Seaglass", "desc": "Translucent, matte, no color-shift"},
    "H-L-L": {"name": "Velvet", "desc": "Opaque, soft matte texture"},
    "L-H-L": {"name": "Glass", "desc": "Translucent, glossy surface"},
    "L-L-H": {"name": "Opalescent", "desc": "Translucent, color-shifting"},
    "H-H-L": {"name": "Mirror", "desc": "Opaque, reflective sheen"},
    "H-L-H": {"name": "Gemstone", "desc": "Opaque, faceted color-shifting"},
    "L-H-H": {"name": "Iridescent", "desc": "Glossy, color-shifting"},
    "H-H-H": {"name": "Mother of Pearl", "desc": "Opaque, glossy, color-shifting"},
}

BREATH_ELEMENT_PHENOTYPES = {
    "L-L-L": {"name": "Null", "display_color": "#333333", "desc": "No breath weapon (rare dark beam)"},
    "H-L-L": {"name": "Fire", "display_color": "#FF4422", "desc": "Roaring flames, ember trails"},
    "L-H-L": {"name": "Ice", "display_color": "#4488FF", "desc": "Crystalline shards, frost clouds"},
    "L-L-H": {"name": "Lightning", "display_color": "#FFDD00", "desc": "Crackling arcs, branching bolts"},
    "H-H-L": {"name": "Steam", "display_color": "#9944FF", "desc": "Billowing scalding mist"},
    "H-L-H": {"name": "Solar", "display_color": "#FF8800", "desc": "Golden beams, corona flares"},
    "L-H-H": {"name": "Aurora", "display_color": "#44FF88", "desc": "Shimmering curtains, color waves"},
    "H-H-H": {"name": "Plasma", "display_color": "#FFFFFF", "desc": "White-hot, unstable energy"},
}

VOID_KEY = "L-L-L"

DARK_ENERGY_PHENOTYPE = {
    "name": "Dark Energy",
    "display_color": "#8800cc",
    "desc": "Rare antimatter breath - born from the void",
}

# =============================================================================
# 64-ENTRY TIER TABLES
# =============================================================================

# Key "C-M-Y"
COLOR_NAMES = {
    # Yellow: None
    "0-0-0": "White", "1-0-0": "Ice Blue", "2-0-0": "Aqua", "3-0-0": "Cyan",
    "0-1-0": "Sakura", "1-1-0": "Violet", "2-1-0": "Cornflower Blue", "3-1-0": "Cerulean",
    "0-2-0": "Fuchsia", "1-2-0": "Heliotrope", "2-2-0": "Periwinkle", "3-2-0": "Indigo",
    "0-3-0": "Magenta", "1-3-0": "Orchid", "2-3-0": "Purple", "3-3-0": "Blue",
    # Yellow: Low
    "0-0-1": "Butter Yellow", "1-0-1": "Celadon", "2-0-1": "Seafoam", "3-0-1": "Mint",
    "0-1-1": "Salmon", "1-1-1": "Grey", "2-1-1": "Viridian", "3-1-1": "Teal",
    "0-2-1": "Pink", "1-2-1": "Mauve", "2-2-1": "Iris", "3-2-1": "Cobalt",
    "0-3-1": "Hot Pink", "1-3-1": "Magnolia", "2-3-1": "Wisteria", "3-3-1": "Ultramarine",
    # Yellow: Mid
    "0-0-2": "Lemon Yellow", "1-0-2": "Pear Green", "2-0-2": "Lime Green", "3-0-2": "Spring Green",
    "0-1-2": "Carrot", "1-1-2": "Olive", "2-1-2": "Clover", "3-1-2": "Fern",
    "0-2-2": "Coral", "1-2-2": "Sienna", "2-2-2": "Slate", "3-2-2": "Deep Sea Green",
    "0-3-2": "Rose", "1-3-2": "Berry", "2-3-2": "Plum", "3-3-2": "Midnight Blue",
    # Yellow: High
    "0-0-3": "Yellow", "1-0-3": "Chartreuse", "2-0-3": "Neon Green", "3-0-3": "Green",
    "0-1-3": "Saffron", "1-1-3": "Citron", "2-1-3": "Kelly Green", "3-1-3": "Ivy Green",
    "0-2-3": "Orange", "1-2-3": "Umber", "2-2-3": "Moss Green", "3-2-3": "Forest Green",
    "0-3-3": "Red", "1-3-3": "Crimson", "2-3-3": "Maroon", "3-3-3": "Black",
}

# Key "O-Sh-Sc"
FINISH_NAMES = {
    # Opacity: None
    "0-0-0": "Phantom", "0-0-1": "Clear Matte Shifting",
    "0-0-2": "Clear Matte Shimmering", "0-0-3": "Opalescent",
    "0-1-0": "Clear Satin", "0-1-1": "Clear Satin Shifting",
    "0-1-2": "Spectral", "0-1-3": "Clear Satin Prismatic",
    "0-2-0": "Clear Lustrous", "0-2-1": "Clear Lustrous Shifting",
    "0-2-2": "Clear Lustrous Shimmering", "0-2-3": "Clear Lustrous Prismatic",
    "0-3-0": "Glass", "0-3-1": "Clear Polished Shifting",
    "0-3-2": "Clear Polished Shimmering", "0-3-3": "Iridescent",
    # Opacity: Low
    "1-0-0": "Seaglass", "1-0-1": "Translucent Matte Shifting",
    "1-0-2": "Translucent Matte Shimmering", "1-0-3": "Translucent Matte Prismatic",
    "1-1-0": "Translucent Satin", "1-1-1": "Translucent Satin Shifting",
    "1-1-2": "Translucent Satin Shimmering", "1-1-3": "Translucent Satin Prismatic",
    "1-2-0": "Translucent Lustrous", "1-2-1": "Translucent Lustrous Shifting",
    "1-2-2": "Translucent Lustrous Shimmering", "1-2-3": "Translucent Lustrous Prismatic",
    "1-3-0": "Crystal", "1-3-1": "Translucent Polished Shifting",
    "1-3-2": "Translucent Polished Shimmering", "1-3-3": "Translucent Polished Prismatic",
    # Opacity: Mid
    "2-0-0": "Frosted", "2-0-1": "Cloudy Matte Shifting",
    "2-0-2": "Cloudy Matte Shimmering", "2-0-3": "Cloudy Matte Prismatic",
    "2-1-0": "Cloudy Satin", "2-1-1": "Cloudy Satin Shifting",
    "2-1-2": "Cloudy Satin Shimmering", "2-1-3": "Cloudy Satin Prismatic",
    "2-2-0": "Cloudy Lustrous", "2-2-1": "Cloudy Lustrous Shifting",
    "2-2-2": "Cloudy Lustrous Shimmering", "2-2-3": "Cloudy Lustrous Prismatic",
    "2-3-0": "Cloudy Polished", "2-3-1": "Cloudy Polished Shifting",
    "2-3-2": "Cloudy Polished Shimmering", "2-3-3": "Cloudy Polished Prismatic",
    # Opacity: High
    "3-0-0": "Velvet", "3-0-1": "Opaque Matte Shifting",
    "3-0-2": "Opaque Matte Shimmering", "3-0-3": "Chromatic",
    "3-1-0": "Opaque Satin", "3-1-1": "Opaque Satin Shifting",
    "3-1-2": "Opaque Satin Shimmering", "3-1-3": "Opaque Satin Prismatic",
    "3-2-0": "Enamel", "3-2-1": "Opaque Lustrous Shifting",
    "3-2-2": "Opaque Lustrous Shimmering", "3-2-3": "Opaque Lustrous Prismatic",
    "3-3-0": "Mirror", "3-3-1": "Opaque Polished Shifting",
    "3-3-2": "Opaque Polished Shimmering", "3-3-3": "Mother of Pearl",
}

# Key "F-I-L"
ELEMENT_NAMES = {
    # Lightning: None
    "0-0-0": "Void", "0-1-0": "Chill", "0-2-0": "Frost", "0-3-0": "Ice",
    "1-0-0": "Ember", "1-1-0": "Warm Mist", "1-2-0": "Cool Steam", "1-3-0": "Fog",
    "2-0-0": "Flame", "2-1-0": "Scald", "2-2-0": "Steam", "2-3-0": "Cold Geyser",
    "3-0-0": "Fire", "3-1-0": "Hot Scald", "3-2-0": "Geyser", "3-3-0": "Torrential Steam",
    # Lightning: Low
    "0-0-1": "Static", "0-1-1": "Cold Static", "0-2-1": "Frost Spark", "0-3-1": "Frigid Static",
    "1-0-1": "Warm Static", "1-1-1": "Haze", "1-2-1": "Charged Mist", "1-3-1": "Cold Ionic",
    "2-0-1": "Heat Spark", "2-1-1": "Charged Steam", "2-2-1": "Storm Brew", "2-3-1": "Charged Fog",
    "3-0-1": "Sunfire", "3-1-1": "Flash Steam", "3-2-1": "Thundercloud", "3-3-1": "Maelstrom",
    # Lightning: Mid
    "0-0-2": "Spark", "0-1-2": "Ionic Chill", "0-2-2": "Ionic", "0-3-2": "Aurora Glow",
    "1-0-2": "Flare", "1-1-2": "Heat Haze", "1-2-2": "Charged Frost", "1-3-2": "Shimmer",
    "2-0-2": "Pulsar", "2-1-2": "Arc Steam", "2-2-2": "Surge", "2-3-2": "Radiant Fog",
    "3-0-2": "Solar", "3-1-2": "Solar Flare", "3-2-2": "Plasma Wisp", "3-3-2": "Corona",
    # Lightning: High
    "0-0-3": "Lightning", "0-1-3": "Crackling Chill", "0-2-3": "Tempest Ice", "0-3-3": "Aurora",
    "1-0-3": "Crackling Flare", "1-1-3": "Ion Storm", "1-2-3": "Aurora Storm", "1-3-3": "Radiance",
    "2-0-3": "Thunder Scorch", "2-1-3": "Plasma Arc", "2-2-3": "Fusion", "2-3-3": "Plasma Frost",
    "3-0-3": "Helios", "3-1-3": "Supernova", "3-2-3": "Cataclysm", "3-3-3": "Plasma",
}

# Non-compound names, highlighted by almanac-style consumers
COLOR_SPECIAL_NAMES = frozenset({
    "White", "Black", "Cyan", "Magenta", "Yellow", "Blue", "Green", "Red",
    "Grey", "Violet", "Orchid", "Purple", "Indigo", "Teal",
    "Coral", "Rose", "Pink", "Salmon", "Orange", "Saffron",
    "Mint", "Fern", "Olive", "Crimson", "Maroon",
})

FINISH_SPECIAL_NAMES = frozenset({
    "Phantom", "Opalescent", "Spectral", "Glass", "Iridescent",
    "Seaglass", "Crystal", "Frosted",
    "Velvet", "Chromatic", "Enamel", "Mirror", "Mother of Pearl",
})

ELEMENT_SPECIAL_NAMES = frozenset({
    "Void", "Ice", "Fire", "Lightning", "Plasma",
    "Ember", "Flame", "Chill", "Frost", "Static", "Spark",
    "Steam", "Fog", "Haze", "Solar", "Aurora",
    "Geyser", "Maelstrom", "Helios", "Supernova", "Cataclysm",
    "Corona", "Radiance", "Fusion", "Pulsar", "Flare", "Sunfire",
})

# =============================================================================
# CROSS-SYSTEM COMBOS
# =============================================================================

# "<color tier key>|<finish tier key>" -> specialty color name
SPECIALTY_COMBOS = {
    # Gemstones (Crystal = 1-3-0)
    "0-0-0|1-3-0": {"name": "Diamond", "category": "Gemstone"},
    "0-2-1|1-3-0": {"name": "Rose Quartz", "category": "Gemstone"},
    "0-0-2|1-3-0": {"name": "Citrine", "category": "Gemstone"},
    "0-1-3|1-3-0": {"name": "Topaz", "category": "Gemstone"},
    "0-2-3|1-3-0": {"name": "Amber", "category": "Gemstone"},
    "1-3-3|1-3-0": {"name": "Garnet", "category": "Gemstone"},
    "0-3-3|1-3-0": {"name": "Ruby", "category": "Gemstone"},
    "0-2-2|1-3-0": {"name": "Carnelian", "category": "Gemstone"},
    "0-3-1|1-3-0": {"name": "Tourmaline", "category": "Gemstone"},
    "2-3-1|1-3-0": {"name": "Amethyst", "category": "Gemstone"},
    "3-2-0|1-3-0": {"name": "Tanzanite", "category": "Gemstone"},
    "3-2-1|1-3-0": {"name": "Sapphire", "category": "Gemstone"},
    "2-2-0|1-3-0": {"name": "Lapis Lazuli", "category": "Gemstone"},
    "2-0-0|1-3-0": {"name": "Aquamarine", "category": "Gemstone"},
    "3-1-1|1-3-0": {"name": "Alexandrite", "category": "Gemstone"},
    "2-1-2|1-3-0": {"name": "Emerald", "category": "Gemstone"},
    "1-0-2|1-3-0": {"name": "Peridot", "category": "Gemstone"},
    "3-0-3|1-3-0": {"name": "Jade", "category": "Gemstone"},
    "3-3-3|1-3-0": {"name": "Onyx", "category": "Gemstone"},
    "2-2-1|1-3-0": {"name": "Iolite", "category": "Gemstone"},
    # Opals (Translucent Lustrous Prismatic = 1-2-3)
    "0-0-0|1-2-3": {"name": "White Opal", "category": "Opal"},
    "0-3-3|1-2-3": {"name": "Fire Opal", "category": "Opal"},
    "0-1-3|1-2-3": {"name": "Honey Opal", "category": "Opal"},
    "0-2-3|1-2-3": {"name": "Sunstone", "category": "Opal"},
    "2-0-0|1-2-3": {"name": "Water Opal", "category": "Opal"},
    "3-3-3|1-2-3": {"name": "Black Opal", "category": "Opal"},
    "0-2-1|1-2-3": {"name": "Pink Opal", "category": "Opal"},
    # Moonstones (Translucent Lustrous Shimmering = 1-2-2)
    "0-0-0|1-2-2": {"name": "Rainbow Moonstone", "category": "Moonstone"},
    "1-0-0|1-2-2": {"name": "Blue Moonstone", "category": "Moonstone"},
    "1-1-1|1-2-2": {"name": "Grey Moonstone", "category": "Moonstone"},
    "0-1-1|1-2-2": {"name": "Peach Moonstone", "category": "Moonstone"},
    "0-0-2|1-2-2": {"name": "Cat's Eye", "category": "Moonstone"},
    "3-2-1|1-2-2": {"name": "Star Sapphire", "category": "Moonstone"},
    "0-3-3|1-2-2": {"name": "Star Ruby", "category": "Moonstone"},
    # Pearls (Opaque Lustrous Shimmering = 3-2-2)
    "0-0-0|3-2-2": {"name": "Pearl", "category": "Pearl"},
    "3-3-3|3-2-2": {"name": "Black Pearl", "category": "Pearl"},
    "0-2-1|3-2-2": {"name": "Pink Pearl", "category": "Pearl"},
    "0-0-3|3-2-2": {"name": "Golden Pearl", "category": "Pearl"},
    "1-1-1|3-2-2": {"name": "Grey Pearl", "category": "Pearl"},
    "1-2-1|3-2-2": {"name": "Lavender Pearl", "category": "Pearl"},
    # Mother of Pearl (3-3-3)
    "3-2-1|3-3-3": {"name": "Labradorite", "category": "Gemstone"},
    # Cloudy Lustrous Prismatic (2-2-3)
    "0-3-3|2-2-3": {"name": "Fire Agate", "category": "Gemstone"},
    # Metals (Mirror = 3-3-0)
    "0-0-0|3-3-0": {"name": "Platinum", "category": "Metal"},
    "1-1-1|3-3-0": {"name": "Silver", "category": "Metal"},
    "2-2-2|3-3-0": {"name": "Pewter", "category": "Metal"},
    "3-3-0|3-3-0": {"name": "Steel", "category": "Metal"},
    "3-2-1|3-3-0": {"name": "Titanium", "category": "Metal"},
    "0-0-3|3-3-0": {"name": "Gold", "category": "Metal"},
    "0-1-3|3-3-0": {"name": "Brass", "category": "Metal"},
    "0-2-3|3-3-0": {"name": "Copper", "category": "Metal"},
    "0-1-1|3-3-0": {"name": "Rose Gold", "category": "Metal"},
    "0-1-2|3-3-0": {"name": "Bronze", "category": "Metal"},
    "2-3-3|3-3-0": {"name": "Iron", "category": "Metal"},
    "3-3-2|3-3-0": {"name": "Gunmetal", "category": "Metal"},
    "1-0-3|3-3-0": {"name": "Electrum", "category": "Metal"},
    "1-0-0|3-3-0": {"name": "Tin", "category": "Metal"},
    "1-1-0|3-3-0": {"name": "Rhodium", "category": "Metal"},
    # Stones (Velvet = 3-0-0)
    "0-0-0|3-0-0": {"name": "Marble", "category": "Stone"},
    "1-0-0|3-0-0": {"name": "Limestone", "category": "Stone"},
    "1-1-1|3-0-0": {"name": "Granite", "category": "Stone"},
    "2-2-2|3-0-0": {"name": "Slate", "category": "Stone"},
    "3-3-2|3-0-0": {"name": "Basalt", "category": "Stone"},
    "3-3-3|3-0-0": {"name": "Obsidian", "category": "Stone"},
    # Ghosts (Phantom = 0-0-0)
    "0-0-0|0-0-0": {"name": "Specter", "category": "Ghost"},
    "1-1-1|0-0-0": {"name": "Shade", "category": "Ghost"},
    "3-3-3|0-0-0": {"name": "Wraith", "category": "Ghost"},
    "1-0-0|0-0-0": {"name": "Haunt", "category": "Ghost"},
    "2-2-2|0-0-0": {"name": "Revenant", "category": "Ghost"},
    "2-0-1|0-0-0": {"name": "Spirit", "category": "Ghost"},
    "3-0-1|0-0-0": {"name": "Ghast", "category": "Ghost"},
}

# "<finish tier key>|<element H/L key>" -> prefix for the color name.
# Only consulted when no specialty combo matched.
ELEMENT_MODIFIERS = {
    "3-3-0|H-L-L": "Molten",  # Mirror + Fire
    "0-3-0|L-H-L": "Frozen",  # Glass + Ice
    "3-3-0|L-L-H": "Charged",  # Mirror + Lightning
    "3-0-0|H-L-L": "Volcanic",  # Velvet + Fire
    "2-0-0|L-H-L": "Permafrost",  # Frosted + Ice
    "0-3-0|L-L-H": "Storm",  # Glass + Lightning
    "1-3-0|H-H-L": "Boiling",  # Crystal + Steam
    "2-0-0|H-H-L": "Nimbus",  # Frosted + Steam
    "0-3-3|L-H-H": "Celestial",  # Iridescent + Aurora
    "3-3-0|H-L-H": "Radiant",  # Mirror + Solar
    "0-0-0|L-L-L": "Hollow",  # Phantom + Void
    "0-1-2|H-L-L": "Mirage",  # Spectral + Fire
    "1-0-0|L-H-L": "Rime",  # Seaglass + Ice
    "3-0-3|L-L-H": "Galvanic",  # Chromatic + Lightning
    "2-2-2|L-H-H": "Luminous",  # Cloudy Lustrous Shimmering + Aurora
    "3-2-2|H-H-L": "Tidal",  # Opaque Lustrous Shimmering + Steam
}
