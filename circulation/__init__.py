"""Library circulation rules: catalog additions, borrowing and returns."""

__version__ = "0.1.0"
