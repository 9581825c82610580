"""Read models returned by the HTTP API for forged matches."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from epochforge.domain.enums import (
    Archetype,
    BoostCategory,
    Difficulty,
    GamePhase,
    GameSpeed,
    ItemType,
    MapSize,
    MapType,
    PointUsageMode,
    PresetMode,
    Resources,
)


class _ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class GeneratedItemRead(_ReadModel):
    name: str
    item_type: ItemType
    cost: int = Field(..., description="Points actually charged")
    original_cost: int
    inflation_applied: int
    category: BoostCategory | None
    phases: list[GamePhase]
    description: str | None
    trace: str
    cost_explanation: str | None


class SynergyRead(_ReadModel):
    name: str
    items: list[str]
    description: str


class PhaseRatingsRead(_ReadModel):
    early: int
    mid: int
    late: int


class PlayerCivRead(_ReadModel):
    id: str
    player_name: str
    index: int
    archetype: Archetype
    seed: str
    points_spent: int
    items: list[GeneratedItemRead]
    ratings: PhaseRatingsRead
    summary: str
    reasoning: str
    power_score: int
    is_legendary: bool
    difficulty: Difficulty
    primary_category: str
    synergies: list[SynergyRead]
    warnings: list[str]
    reroll_used: bool
    is_valid: bool


class ResolvedPlayerRead(_ReadModel):
    name: str
    archetype: Archetype


class ResolvedConfigRead(_ReadModel):
    seed: str
    players: list[ResolvedPlayerRead]
    start_epoch: int
    end_epoch: int
    map_type: MapType
    preset: PresetMode
    point_usage: PointUsageMode
    map_size: MapSize
    resources: Resources
    game_speed: GameSpeed


class MatchSummary(BaseModel):
    id: int
    seed: str
    header: str
    share_code: str
    created_at: datetime
    player_count: int


class MatchDetail(MatchSummary):
    resolved: ResolvedConfigRead
    civs: list[PlayerCivRead]
    top_scorers: list[int] = Field(
        default_factory=list, description="Indices of the players sharing the highest power score"
    )
