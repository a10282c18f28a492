"""ClearDir package initialisation."""

__version__ = "1.0.0"

__all__ = [
    "benchmarks",
    "core",
    "panel",
    "scanning",
    "shared",
]
