"""SOS: a two-player grid game where S-O-S lines score points."""

__version__ = "0.1.0"
