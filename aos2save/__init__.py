"""Save-file formats, a terminal editor and a byte-diff tool for Acceleration of SUGURI 2."""

__version__ = "1.0.0"