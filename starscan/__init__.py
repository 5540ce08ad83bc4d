"""Grayscale image workbench: thresholded pixel counts, centroids and a command line."""

__version__ = "0.1.0"
__all__ = ["image", "process", "app"]