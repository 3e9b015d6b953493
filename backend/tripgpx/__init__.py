"""
Trip GPX engine.

Parses GPX uploads for the trip marketplace and derives the distance,
elevation and time metadata stored on trips and stages.
"""

__version__ = "0.1.0"
