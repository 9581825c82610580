"""Dataclasses describing the catalog, match configuration and loadouts.

Catalog entries are frozen and shared by every match.  Match configuration
objects are frozen as well: resolution produces a new
:class:`ResolvedMatchConfig` instead of mutating the input.  A
:class:`PlayerCiv` is the only mutable record and is owned by one match
session; a reroll replaces it wholesale.

Randomizable settings are modelled as a tagged variant (``Fixed`` or
``RandomFromPool``) and unresolved archetypes as ``None`` so that the
``"Random"`` sentinel never has to live inside the domain types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, NewType, TypeVar, Union

from .enums import (
    Archetype,
    BoostCategory,
    Difficulty,
    GamePhase,
    GameSpeed,
    ItemType,
    MapCategory,
    MapSize,
    MapType,
    PointUsageMode,
    PresetMode,
    Resources,
)

T = TypeVar("T")

# --- Strongly typed identifiers -------------------------------------------------

MatchID = NewType("MatchID", int)


# --- Static catalog -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Epoch:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class MapInfo:
    """Map script metadata used for eligibility and gating."""

    map_type: MapType
    label: str
    description: str
    category: MapCategory
    naval_support: bool
    min_epoch: int | None = None

    def available_at(self, end_epoch: int) -> bool:
        """Return whether a match ending at ``end_epoch`` may use this map."""

        return self.min_epoch is None or end_epoch >= self.min_epoch


@dataclass(frozen=True, slots=True)
class CategoryHeading:
    """Inflation step and minimum epoch for one boost category."""

    category: BoostCategory
    bonus_cost: int
    min_epoch: int


@dataclass(frozen=True, slots=True)
class Boost:
    name: str
    base_cost: int
    category: BoostCategory
    phases: tuple[GamePhase, ...]


@dataclass(frozen=True, slots=True)
class CivPower:
    """Flat-cost special ability gated by an epoch range."""

    name: str
    cost: int
    min_epoch: int
    max_epoch: int
    phases: tuple[GamePhase, ...]
    description: str = ""
    conditional: bool = False

    def overlaps(self, start_epoch: int, end_epoch: int) -> bool:
        return self.min_epoch <= end_epoch and self.max_epoch >= start_epoch


@dataclass(frozen=True, slots=True)
class SynergyRule:
    name: str
    items: tuple[str, ...]
    description: str


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable bundle of every static table the engine reads."""

    epochs: tuple[Epoch, ...]
    maps: tuple[MapInfo, ...]
    headings: tuple[CategoryHeading, ...]
    boosts: tuple[Boost, ...]
    powers: tuple[CivPower, ...]
    synergies: tuple[SynergyRule, ...]

    @property
    def min_epoch(self) -> int:
        return self.epochs[0].id

    @property
    def max_epoch(self) -> int:
        return self.epochs[-1].id

    def heading_for(self, category: BoostCategory) -> CategoryHeading:
        for heading in self.headings:
            if heading.category == category:
                return heading
        raise KeyError(f"No heading for category {category!r}")

    def map_info(self, map_type: MapType) -> MapInfo:
        for info in self.maps:
            if info.map_type == map_type:
                return info
        raise KeyError(f"Unknown map type {map_type!r}")

    def epoch_name(self, epoch_id: int) -> str:
        for epoch in self.epochs:
            if epoch.id == epoch_id:
                return epoch.name
        return str(epoch_id)

    def power_named(self, name: str) -> CivPower | None:
        for power in self.powers:
            if power.name == name:
                return power
        return None


# --- Match configuration --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Fixed(Generic[T]):
    """A setting pinned to one concrete value."""

    value: T


@dataclass(frozen=True, slots=True)
class RandomFromPool(Generic[T]):
    """A setting drawn uniformly from ``pool`` at resolution time."""

    pool: tuple[T, ...]


Setting = Union[Fixed[T], RandomFromPool[T]]


@dataclass(frozen=True, slots=True)
class EpochRange:
    """Inclusive bounds for a randomized end epoch."""

    minimum: int
    maximum: int


@dataclass(frozen=True, slots=True)
class PlayerSlot:
    name: str
    archetype: Archetype | None = None


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Possibly randomized match configuration as entered by the host."""

    seed: str
    players: tuple[PlayerSlot, ...]
    start_epoch: int = 1
    end_epoch: Fixed[int] | EpochRange = Fixed(15)
    map_type: Setting[MapType] = Fixed(MapType.CONTINENTAL)
    preset: Setting[PresetMode] = Fixed(PresetMode.CASUAL)
    point_usage: Setting[PointUsageMode] = Fixed(PointUsageMode.EFFICIENT)
    map_size: Setting[MapSize] = Fixed(MapSize.LARGE)
    resources: Setting[Resources] = Fixed(Resources.STANDARD)
    game_speed: Setting[GameSpeed] = Fixed(GameSpeed.STANDARD)


@dataclass(frozen=True, slots=True)
class ResolvedPlayer:
    name: str
    archetype: Archetype


@dataclass(frozen=True, slots=True)
class ResolvedMatchConfig:
    """Fully concrete configuration; every field holds a real value."""

    seed: str
    players: tuple[ResolvedPlayer, ...]
    start_epoch: int
    end_epoch: int
    map_type: MapType
    preset: PresetMode
    point_usage: PointUsageMode
    map_size: MapSize
    resources: Resources
    game_speed: GameSpeed

    @property
    def player_names(self) -> list[str]:
        return [player.name for player in self.players]

    @property
    def is_tournament(self) -> bool:
        return self.preset == PresetMode.TOURNAMENT


# --- Loadouts -------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeneratedItem:
    """One purchased catalog entry with the price actually charged."""

    name: str
    item_type: ItemType
    cost: int
    original_cost: int
    inflation_applied: int = 0
    category: BoostCategory | None = None
    phases: tuple[GamePhase, ...] = ()
    description: str | None = None
    trace: str = ""

    @property
    def cost_explanation(self) -> str | None:
        if self.inflation_applied <= 0:
            return None
        return f"Inflation Adjustment: +{self.inflation_applied}PT (Sector Saturation)"


@dataclass(frozen=True, slots=True)
class PhaseRatings:
    early: int = 0
    mid: int = 0
    late: int = 0

    def for_phase(self, phase: GamePhase) -> int:
        return {
            GamePhase.EARLY: self.early,
            GamePhase.MID: self.mid,
            GamePhase.LATE: self.late,
        }[phase]

    def values(self) -> tuple[int, int, int]:
        return (self.early, self.mid, self.late)


@dataclass(slots=True)
class PlayerCiv:
    """A single player's finished loadout."""

    id: str
    player_name: str
    index: int
    archetype: Archetype
    seed: str
    points_spent: int = 0
    items: list[GeneratedItem] = field(default_factory=list)
    ratings: PhaseRatings = field(default_factory=PhaseRatings)
    summary: str = ""
    reasoning: str = ""
    power_score: int = 0
    is_legendary: bool = False
    difficulty: Difficulty = Difficulty.BEGINNER
    primary_category: str = ""
    synergies: list[SynergyRule] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    reroll_used: bool = False
    is_valid: bool = False


@dataclass(slots=True)
class MatchResult:
    resolved: ResolvedMatchConfig
    civs: list[PlayerCiv]


@dataclass(slots=True)
class MatchSession:
    """Persisted record of one forged match."""

    id: MatchID
    share_code: str
    created_at: datetime
    resolved: ResolvedMatchConfig
    civs: list[PlayerCiv] = field(default_factory=list)
