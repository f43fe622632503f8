"""Threaded airport simulation: runways, gates, fuel tankers and passenger boarding."""

__version__ = "0.1.0"
__all__ = ["airplane", "tanker", "model", "display", "airport"]