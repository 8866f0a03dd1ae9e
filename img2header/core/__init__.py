"""img2header.core — Foundation layer.

Contains the pixel/palette data model, the quantizer, colour maths,
identifier sanitization and the report builder.
This module has NO dependencies on img2header.dialects or img2header.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
