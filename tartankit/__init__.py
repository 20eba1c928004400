"""
tartankit: procedural tartan design.

Subpackages, leaves first:

- ``tartankit.colors``    RGB/LAB conversion, CIEDE2000, the tartan palette
- ``tartankit.sett``      threadcount notation, expansion, signatures, validation
- ``tartankit.weaves``    weave structures and warp/weft intersection resolution
- ``tartankit.generator`` seeded, constraint-driven tartan generation
"""

__version__ = "0.1.0"
