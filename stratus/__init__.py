"""Attack technique registry, lifecycle runner and documentation helpers."""

__version__ = "0.1.0"