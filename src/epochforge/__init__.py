"""Epoch Forge: seeded civilization loadouts for multiplayer strategy matches."""

__version__ = "0.1.0"
