"""Static game data for the hatchery.

The trait catalog is split across plain constant modules:

- ``genes``: the 23 gene definitions (ranges, inheritance, display names)
- ``triangles``: triangle systems and their name tables
- ``generation``: allele and tier weights used for wild dragons
- ``breeding``: mutation, clutch and expression tunables
- ``names``: name fragments and sexes for new dragons

``hatchery.genetics.catalog`` assembles these into a validated ``TraitCatalog``.
"""
