"""Pet shelter adoption service."""

__version__ = "1.0.0"
