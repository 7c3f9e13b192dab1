"""Skyline queries over product catalogues: products, dominance, strategies and a command line."""

__version__ = "0.1.0"