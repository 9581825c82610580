"""Static game data: epochs, maps, headings, boosts, powers and synergies."""

from __future__ import annotations

from .enums import (
    BoostCategory,
    GamePhase,
    MapCategory,
    MapType,
    PointUsageMode,
    PresetMode,
)
from .models import (
    Boost,
    Catalog,
    CategoryHeading,
    CivPower,
    Epoch,
    MapInfo,
    SynergyRule,
)

EARLY = GamePhase.EARLY
MID = GamePhase.MID
LATE = GamePhase.LATE

C = BoostCategory

EPOCHS: tuple[Epoch, ...] = (
    Epoch(1, "Stone Age"),
    Epoch(2, "Tool Age"),
    Epoch(3, "Copper Age"),
    Epoch(4, "Bronze Age"),
    Epoch(5, "Dark Age"),
    Epoch(6, "Middle Ages"),
    Epoch(7, "Renaissance"),
    Epoch(8, "Imperial Age"),
    Epoch(9, "Enlightenment Age"),
    Epoch(10, "Industrial Age"),
    Epoch(11, "Atomic Age"),
    Epoch(12, "Information Age"),
    Epoch(13, "Nano Age"),
    Epoch(14, "Space Age"),
    Epoch(15, "Digital Age"),
)

SPACE_MIN_EPOCH = 14

MAPS: tuple[MapInfo, ...] = (
    MapInfo(
        MapType.CONTINENTAL,
        "Continental",
        "Large landmasses separated by oceans.",
        MapCategory.LAND,
        naval_support=False,
    ),
    MapInfo(
        MapType.MEDITERRANEAN,
        "Mediterranean",
        "Inland sea surrounded by land.",
        MapCategory.MIXED,
        naval_support=True,
    ),
    MapInfo(
        MapType.HIGHLANDS,
        "Highlands",
        "Mountainous terrain with chokepoints.",
        MapCategory.LAND,
        naval_support=False,
    ),
    MapInfo(
        MapType.PLAINS,
        "Plains",
        "Open flatlands ideal for cavalry.",
        MapCategory.LAND,
        naval_support=False,
    ),
    MapInfo(
        MapType.LARGE_ISLANDS,
        "Large Islands",
        "Multiple large islands.",
        MapCategory.MIXED,
        naval_support=True,
    ),
    MapInfo(
        MapType.SMALL_ISLANDS,
        "Small Islands",
        "Archipelago of small islands.",
        MapCategory.WATER,
        naval_support=True,
    ),
    MapInfo(
        MapType.TOURNAMENT_ISLANDS,
        "Tournament Islands",
        "Balanced islands for competitive play.",
        MapCategory.WATER,
        naval_support=True,
    ),
    MapInfo(
        MapType.PLANETS_EARTH,
        "Planets – Earth",
        "The homeworld.",
        MapCategory.SPACE,
        naval_support=False,
        min_epoch=SPACE_MIN_EPOCH,
    ),
    MapInfo(
        MapType.PLANETS_LARGE,
        "Planets – Large",
        "A massive alien world.",
        MapCategory.SPACE,
        naval_support=False,
        min_epoch=SPACE_MIN_EPOCH,
    ),
    MapInfo(
        MapType.PLANETS_SMALL,
        "Planets – Small",
        "A small rocky planetoid.",
        MapCategory.SPACE,
        naval_support=False,
        min_epoch=SPACE_MIN_EPOCH,
    ),
    MapInfo(
        MapType.PLANETS_MARS,
        "Planets – Mars",
        "The red planet.",
        MapCategory.SPACE,
        naval_support=False,
        min_epoch=SPACE_MIN_EPOCH,
    ),
    MapInfo(
        MapType.PLANETS_SATELLITE,
        "Planets – Satellite",
        "Orbital station warfare.",
        MapCategory.SPACE,
        naval_support=False,
        min_epoch=SPACE_MIN_EPOCH,
    ),
)

# Categories that can only be fielded on maps with naval support.
NAVAL_CATEGORIES: frozenset[BoostCategory] = frozenset({C.SHIPS})

HEADINGS: tuple[CategoryHeading, ...] = (
    CategoryHeading(C.ECONOMY, bonus_cost=6, min_epoch=1),
    CategoryHeading(C.BUILDINGS, bonus_cost=3, min_epoch=1),
    CategoryHeading(C.GENERAL, bonus_cost=0, min_epoch=1),
    CategoryHeading(C.CITIZENS, bonus_cost=2, min_epoch=1),
    CategoryHeading(C.INFANTRY_RANGED, bonus_cost=5, min_epoch=1),
    CategoryHeading(C.INFANTRY_MELEE, bonus_cost=3, min_epoch=1),
    CategoryHeading(C.CAVALRY_RANGED, bonus_cost=4, min_epoch=3),
    CategoryHeading(C.CAVALRY_MELEE, bonus_cost=4, min_epoch=3),
    CategoryHeading(C.SIEGE, bonus_cost=2, min_epoch=3),
    CategoryHeading(C.SHIPS, bonus_cost=4, min_epoch=2),
    CategoryHeading(C.TANKS, bonus_cost=5, min_epoch=10),
    CategoryHeading(C.AIRCRAFT, bonus_cost=5, min_epoch=10),
    CategoryHeading(C.CYBER, bonus_cost=6, min_epoch=13),
    CategoryHeading(C.RELIGION, bonus_cost=2, min_epoch=3),
)

BOOSTS: tuple[Boost, ...] = (
    # Civ – Economy
    Boost("20% Farming", 9, C.ECONOMY, (EARLY,)),
    Boost("20% Fishing", 9, C.ECONOMY, (EARLY,)),
    Boost("15% Gold Mining", 11, C.ECONOMY, (EARLY, MID)),
    Boost("20% Hunting & Foraging", 11, C.ECONOMY, (EARLY,)),
    Boost("15% Iron Mining", 11, C.ECONOMY, (MID, LATE)),
    Boost("20% Stone Mining", 9, C.ECONOMY, (EARLY, MID)),
    Boost("15% Wood Cutting", 13, C.ECONOMY, (EARLY,)),
    # Civ – Buildings, Walls & Towers
    Boost("20% Attack (Buildings)", 3, C.BUILDINGS, (EARLY,)),
    Boost("30% Build Time Decrease (Buildings)", 4, C.BUILDINGS, (EARLY,)),
    Boost("15% Cost Reduction (Buildings)", 11, C.BUILDINGS, (EARLY, MID)),
    Boost("50% Hit Points (Buildings)", 11, C.BUILDINGS, (MID,)),
    Boost("20% Range (Buildings)", 4, C.BUILDINGS, (MID,)),
    # Civ – General
    Boost("50% Conversion Resistance", 10, C.GENERAL, (MID, LATE)),
    Boost("20% Mountain Combat Bonus", 4, C.GENERAL, (MID,)),
    Boost("15% Population Cap", 9, C.GENERAL, (LATE,)),
    # Citizens & Fishing Boats
    Boost("30% Attack (Citizens)", 1, C.CITIZENS, (EARLY,)),
    Boost("10% Build Time Decrease (Citizens)", 20, C.CITIZENS, (EARLY,)),
    Boost("20% Cost Reduction (Citizens)", 25, C.CITIZENS, (EARLY,)),
    Boost("30% Hit Points (Citizens)", 3, C.CITIZENS, (EARLY,)),
    Boost("35% Range (Citizens)", 2, C.CITIZENS, (EARLY,)),
    Boost("20% Speed (Citizens)", 4, C.CITIZENS, (EARLY,)),
    # Infantry – Ranged
    Boost("20% Armor (Ranged Inf)", 3, C.INFANTRY_RANGED, (MID,)),
    Boost("20% Attack (Ranged Inf)", 5, C.INFANTRY_RANGED, (EARLY, MID)),
    Boost("30% Build Time (Ranged Inf)", 4, C.INFANTRY_RANGED, (EARLY,)),
    Boost("20% Cost Reduction (Ranged Inf)", 9, C.INFANTRY_RANGED, (EARLY,)),
    Boost("25% Hit Points (Ranged Inf)", 5, C.INFANTRY_RANGED, (MID,)),
    Boost("20% Range (Ranged Inf)", 6, C.INFANTRY_RANGED, (MID, LATE)),
    Boost("20% Speed (Ranged Inf)", 5, C.INFANTRY_RANGED, (MID,)),
    # Infantry – Sword / Spear
    Boost("20% Armor (Melee Inf)", 2, C.INFANTRY_MELEE, (MID,)),
    Boost("20% Attack (Melee Inf)", 3, C.INFANTRY_MELEE, (EARLY, MID)),
    Boost("30% Build Time (Melee Inf)", 2, C.INFANTRY_MELEE, (EARLY,)),
    Boost("20% Cost Reduction (Melee Inf)", 7, C.INFANTRY_MELEE, (EARLY,)),
    Boost("25% Hit Points (Melee Inf)", 3, C.INFANTRY_MELEE, (MID,)),
    Boost("20% Range (Melee Inf)", 3, C.INFANTRY_MELEE, (MID,)),
    Boost("20% Speed (Melee Inf)", 3, C.INFANTRY_MELEE, (MID,)),
    # Cavalry – Ranged
    Boost("20% Armor (Cav Ranged)", 2, C.CAVALRY_RANGED, (MID,)),
    Boost("20% Attack (Cav Ranged)", 4, C.CAVALRY_RANGED, (MID,)),
    Boost("30% Build Time (Cav Ranged)", 3, C.CAVALRY_RANGED, (MID,)),
    Boost("20% Cost Reduction (Cav Ranged)", 8, C.CAVALRY_RANGED, (MID,)),
    Boost("25% Hit Points (Cav Ranged)", 4, C.CAVALRY_RANGED, (MID,)),
    Boost("20% Range (Cav Ranged)", 5, C.CAVALRY_RANGED, (MID,)),
    Boost("20% Speed (Cav Ranged)", 4, C.CAVALRY_RANGED, (MID,)),
    # Siege Weapons & Mobile AA
    Boost("20% Area Effect (Siege)", 5, C.SIEGE, (LATE,)),
    Boost("20% Armor (Siege)", 1, C.SIEGE, (LATE,)),
    Boost("20% Attack (Siege)", 2, C.SIEGE, (LATE,)),
    Boost("30% Build Time (Siege)", 1, C.SIEGE, (MID,)),
    Boost("20% Cost Reduction (Siege)", 3, C.SIEGE, (MID,)),
    Boost("25% Hit Points (Siege)", 2, C.SIEGE, (LATE,)),
    Boost("20% Range (Siege)", 2, C.SIEGE, (LATE,)),
    Boost("25% Rate of Fire (Siege)", 2, C.SIEGE, (LATE,)),
    Boost("20% Speed (Siege)", 2, C.SIEGE, (LATE,)),
    # Tanks
    Boost("20% Armor (Tanks)", 3, C.TANKS, (LATE,)),
    Boost("20% Attack (Tanks)", 5, C.TANKS, (LATE,)),
    Boost("20% Cost Reduction (Tanks)", 9, C.TANKS, (LATE,)),
    Boost("25% Hit Points (Tanks)", 5, C.TANKS, (LATE,)),
    # Aircraft
    Boost("20% Attack (Bombers)", 5, C.AIRCRAFT, (LATE,)),
    Boost("20% Attack (Fighters)", 5, C.AIRCRAFT, (LATE,)),
    Boost("30% Build Time (Fighters)", 4, C.AIRCRAFT, (LATE,)),
    Boost("25% Hit Points (Bombers)", 5, C.AIRCRAFT, (LATE,)),
    # Ships
    Boost("20% Speed (Ships)", 4, C.SHIPS, (MID,)),
    Boost("20% Attack (Ships)", 5, C.SHIPS, (MID,)),
    Boost("20% Range (Ships)", 6, C.SHIPS, (MID,)),
    Boost("25% Hit Points (Ships)", 5, C.SHIPS, (MID,)),
    Boost("20% Cost Reduction (Ships)", 9, C.SHIPS, (EARLY,)),
    # Cyber
    Boost("20% Attack (Cyber)", 5, C.CYBER, (LATE,)),
    Boost("20% Hit Points (Cyber)", 5, C.CYBER, (LATE,)),
    # Religion
    Boost("20% Range (Priests)", 4, C.RELIGION, (MID,)),
    Boost("30% Hit Points (Priests)", 4, C.RELIGION, (MID,)),
    Boost("50% Conversion Area", 10, C.RELIGION, (MID,)),
)

POWERS: tuple[CivPower, ...] = (
    CivPower(
        "Expansionism",
        30,
        1,
        15,
        (EARLY,),
        "Grants a second starting settler and reduced colony costs.",
    ),
    CivPower(
        "Advanced Mining",
        25,
        1,
        15,
        (EARLY, MID),
        "Deep-crust extraction increases all ore income by 25%.",
    ),
    CivPower(
        "Just-In-Time Manufacturing",
        20,
        1,
        15,
        (MID,),
        "Global 30% reduction in all unit training times.",
    ),
    CivPower(
        "Market",
        20,
        10,
        15,
        (LATE,),
        "Enables global resource trading and 15% luxury tax income.",
    ),
    CivPower(
        "Missile Base",
        15,
        13,
        15,
        (LATE,),
        "Strategic long-range strike capability with high collateral damage.",
        conditional=True,
    ),
    CivPower(
        "Adaptation",
        15,
        3,
        15,
        (MID,),
        "Switches production focus instantly based on enemy unit types.",
        conditional=True,
    ),
    CivPower(
        "Slavery",
        10,
        1,
        15,
        (EARLY,),
        "Extreme labor efficiency at the cost of global stability.",
    ),
    CivPower(
        "Priest Tower",
        30,
        1,
        15,
        (MID,),
        "Radiates a conversion aura that periodically claims nearby units.",
        conditional=True,
    ),
    CivPower(
        "Pathfinding",
        25,
        1,
        15,
        (EARLY,),
        "All units ignore terrain penalties and move 15% faster.",
    ),
    CivPower(
        "SAS Commando",
        15,
        10,
        15,
        (LATE,),
        "Specialized elite infantry with stealth and sabotage abilities.",
        conditional=True,
    ),
)

SYNERGIES: tuple[SynergyRule, ...] = (
    SynergyRule(
        "Agrarian Empire",
        ("20% Farming", "Expansionism"),
        "Massive population boom enabled by cheap land and high food yields.",
    ),
    SynergyRule(
        "Iron Fortress",
        ("15% Iron Mining", "50% Hit Points (Buildings)"),
        "Indestructible structures fueled by massive iron reserves.",
    ),
    SynergyRule(
        "Hussar Rush",
        ("20% Speed (Cav Ranged)", "30% Build Time (Cav Ranged)"),
        "Lightning-fast raids that overwhelm opponents before they can react.",
    ),
    SynergyRule(
        "Siege Master",
        ("20% Area Effect (Siege)", "20% Range (Siege)"),
        "Demolish entire bases from a safe distance with devastating accuracy.",
    ),
    SynergyRule(
        "Naval Supremacy",
        ("20% Range (Ships)", "20% Attack (Ships)"),
        "Total control of the seas with superior firepower and reach.",
    ),
    SynergyRule(
        "Blitzkrieg",
        ("20% Attack (Tanks)", "20% Speed (Citizens)"),
        "Rapid industrial mobilization paired with overwhelming armored force.",
    ),
    SynergyRule(
        "Divine Protection",
        ("Priest Tower", "50% Conversion Resistance"),
        "A holy sanctuary that is almost impossible to subvert.",
    ),
    SynergyRule(
        "Resource Monopoly",
        ("Advanced Mining", "Slavery"),
        "Hyper-efficient extraction that outpaces any conventional economy.",
    ),
)

PRESET_DESCRIPTIONS: dict[PresetMode, str] = {
    PresetMode.CASUAL: "Focus on flavor and fun over rigid balance.",
    PresetMode.TOURNAMENT: "Strict balance rules and no individual rerolls.",
    PresetMode.CHAOS: "Highly varied power levels and strange combinations.",
    PresetMode.HISTORICAL: "Attempts to match real-world historical archetypes.",
}

POINT_MODE_DESCRIPTIONS: dict[PointUsageMode, str] = {
    PointUsageMode.EFFICIENT: "Squeezes maximum value from every point.",
    PointUsageMode.EXACT: "Targets exactly 100 points, even if suboptimal.",
    PointUsageMode.LOOSE: "Prioritizes flavor, potentially leaving points unspent.",
}

DEFAULT_NAMES: tuple[str, ...] = (
    "Taco",
    "Piert",
    "DjonLuc",
    "Justin",
    "Naldo",
    "Pash",
    "Kuban",
    "Player 8",
    "Player 9",
    "Player 10",
)

CATALOG = Catalog(
    epochs=EPOCHS,
    maps=MAPS,
    headings=HEADINGS,
    boosts=BOOSTS,
    powers=POWERS,
    synergies=SYNERGIES,
)
