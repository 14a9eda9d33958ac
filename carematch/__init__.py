"""Healthcare job match scoring and recommendations."""

__version__ = "0.1.0"
