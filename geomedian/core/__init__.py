"""geomedian.core — Foundation layer.

Contains the pixel grid, the median algorithm, the cross marker, colour
helpers, configuration and the report builder.
This module has NO dependencies on geomedian.techniques or geomedian.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
