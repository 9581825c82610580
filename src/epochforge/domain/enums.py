"""Enumerations shared by the Epoch Forge domain."""

from __future__ import annotations

from enum import StrEnum

RANDOM_SENTINEL = "Random"


class GamePhase(StrEnum):
    """Portion of a match an item is strongest in."""

    EARLY = "Early"
    MID = "Mid"
    LATE = "Late"


class BoostCategory(StrEnum):
    """Catalog headings boosts are purchased under."""

    ECONOMY = "Civ – Economy"
    BUILDINGS = "Civ – Buildings, Walls & Towers"
    GENERAL = "Civ – General"
    CITIZENS = "Citizens & Fishing Boats"
    INFANTRY_RANGED = "Infantry – Ranged"
    INFANTRY_MELEE = "Infantry – Sword / Spear"
    CAVALRY_RANGED = "Cavalry – Ranged"
    CAVALRY_MELEE = "Cavalry – Melee"
    SIEGE = "Siege Weapons & Mobile AA"
    SHIPS = "Ships"
    TANKS = "Tanks"
    AIRCRAFT = "Aircraft"
    CYBER = "Cyber"
    RELIGION = "Religion"


class ItemType(StrEnum):
    BOOST = "boost"
    POWER = "power"


class Archetype(StrEnum):
    """Concrete player archetypes; an unresolved archetype is ``None``."""

    ECONOMIC = "Economic"
    AGGRESSIVE = "Aggressive"
    DEFENSIVE = "Defensive"
    NAVAL = "Naval"
    BALANCED = "Balanced"


class Difficulty(StrEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class PresetMode(StrEnum):
    """Ruleset presets; Tournament locks individual rerolls."""

    CASUAL = "Casual"
    TOURNAMENT = "Tournament"
    CHAOS = "Chaos"
    HISTORICAL = "Historical"


class PointUsageMode(StrEnum):
    """How the allocator spends the point budget."""

    EFFICIENT = "Efficient"
    EXACT = "Exact"
    LOOSE = "Loose"


class MapSize(StrEnum):
    TINY = "Tiny"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"


class Resources(StrEnum):
    LOW = "Low"
    STANDARD = "Standard"
    HIGH = "High"


class GameSpeed(StrEnum):
    SLOW = "Slow"
    STANDARD = "Standard"
    FAST = "Fast"


class MapCategory(StrEnum):
    LAND = "land"
    WATER = "water"
    MIXED = "mixed"
    SPACE = "space"


class MapType(StrEnum):
    """Playable map scripts."""

    CONTINENTAL = "Continental"
    MEDITERRANEAN = "Mediterranean"
    HIGHLANDS = "Highlands"
    PLAINS = "Plains"
    LARGE_ISLANDS = "Large Islands"
    SMALL_ISLANDS = "Small Islands"
    TOURNAMENT_ISLANDS = "Tournament Islands"
    PLANETS_EARTH = "Planets – Earth"
    PLANETS_LARGE = "Planets – Large"
    PLANETS_SMALL = "Planets – Small"
    PLANETS_MARS = "Planets – Mars"
    PLANETS_SATELLITE = "Planets – Satellite"
