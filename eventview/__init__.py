"""Browse, filter and import system event logs and XML or CSV exports."""

__version__ = "0.1.0"
__all__ = ["__version__"]