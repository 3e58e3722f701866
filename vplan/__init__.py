"""Build-variant plan resolver for Android application builds."""

__version__ = "0.3.0"
