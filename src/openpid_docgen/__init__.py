"""Human-readable documentation for OpenPID device protocol specs."""

__version__ = "0.1.0"
