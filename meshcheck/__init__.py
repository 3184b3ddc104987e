"""meshcheck — static analysis for service-mesh gateway configuration."""

__version__ = "0.1.0"
