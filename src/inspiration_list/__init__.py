"""Inspiration List - voice-captured ideas, enriched and stored"""

__version__ = "0.1.0"
