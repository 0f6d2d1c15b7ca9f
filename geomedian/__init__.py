"""geomedian — geographic median of a mask image."""

__version__ = '0.1.0'
