"""EcoTrack: barcode scan to product information."""

__version__ = "0.1.0"
