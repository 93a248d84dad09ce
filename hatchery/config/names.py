"""Name fragments for wild and newly hatched dragons.

A name is one prefix followed by one suffix, e.g. ``Emberwing``.
"""

NAME_PREFIXES = (
    "Ash", "Blaze", "Cinder", "Drake", "Ember", "Fang", "Grim", "Hex",
    "Iron", "Jade", "Ky", "Luna", "Nyx", "Onyx", "Pyra", "Rune",
    "Shadow", "Thorn", "Umber", "Volt", "Wrath", "Zeph", "Dra", "Syl",
    "Gor", "Mal", "Vor", "Tar", "Sol", "Rav", "Mor", "Fel",
)

NAME_SUFFIXES = (
    "ax", "born", "claw", "don", "ex", "fyr", "gon", "hawk",
    "is", "jaw", "kor", "lyn", "mir", "nar", "os", "pyre",
    "rix", "storm", "tus", "us", "vex", "wing", "xis", "zar",
    "ra", "ka", "th", "rok", "nia", "sha", "ven", "dal",
)

SEXES = ("male", "female")
