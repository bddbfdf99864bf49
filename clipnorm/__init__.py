"""SVG shapes → objectBoundingBox clipPath normalizer."""

__version__ = "0.1.0"
