"""Request models describing a match configuration as entered by a host.

These mirror the setup screen: every randomizable setting carries a
``mode`` plus the fixed ``value`` and the ``allowed`` pool, and archetypes
may be the ``"Random"`` sentinel.  :meth:`MatchConfigRequest.to_domain`
converts them into the tagged domain variants.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from epochforge.domain.catalog import DEFAULT_NAMES
from epochforge.domain.enums import (
    RANDOM_SENTINEL,
    Archetype,
    GameSpeed,
    MapSize,
    MapType,
    PointUsageMode,
    PresetMode,
    Resources,
)
from epochforge.domain.errors import ConfigurationError
from epochforge.domain.models import (
    EpochRange,
    Fixed,
    MatchConfig,
    PlayerSlot,
    RandomFromPool,
    Setting,
)

T = TypeVar("T")

MAX_NAME_LENGTH = 40
MAX_SEED_LENGTH = 64


class RandomizableOption(BaseModel, Generic[T]):
    mode: Literal["fixed", "random"] = Field(default="fixed", description="Fixed value or random draw")
    value: T = Field(..., description="Selection used in fixed mode")
    allowed: list[T] = Field(default_factory=list, description="Pool drawn from in random mode")

    def to_setting(self) -> Setting[T]:
        if self.mode == "fixed":
            return Fixed(self.value)
        return RandomFromPool(tuple(self.allowed))


def _default_map() -> RandomizableOption[MapType]:
    return RandomizableOption[MapType](value=MapType.CONTINENTAL, allowed=list(MapType))


def _default_preset() -> RandomizableOption[PresetMode]:
    return RandomizableOption[PresetMode](value=PresetMode.CASUAL, allowed=list(PresetMode))


def _default_point_usage() -> RandomizableOption[PointUsageMode]:
    return RandomizableOption[PointUsageMode](
        value=PointUsageMode.EFFICIENT, allowed=list(PointUsageMode)
    )


def _default_map_size() -> RandomizableOption[MapSize]:
    return RandomizableOption[MapSize](value=MapSize.LARGE, allowed=list(MapSize))


def _default_resources() -> RandomizableOption[Resources]:
    return RandomizableOption[Resources](value=Resources.STANDARD, allowed=list(Resources))


def _default_game_speed() -> RandomizableOption[GameSpeed]:
    return RandomizableOption[GameSpeed](value=GameSpeed.STANDARD, allowed=list(GameSpeed))


class PlayerEntry(BaseModel):
    name: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="Display name of the player"
    )
    archetype: Archetype | Literal["Random"] = Field(
        default=RANDOM_SENTINEL, description="Play style bias, or Random to draw one"
    )


def _default_players() -> list[PlayerEntry]:
    return [PlayerEntry(name=name) for name in DEFAULT_NAMES[:2]]


class MatchConfigRequest(BaseModel):
    seed: str | None = Field(
        None,
        min_length=1,
        max_length=MAX_SEED_LENGTH,
        description="Match seed; generated when omitted",
    )
    players: list[PlayerEntry] = Field(default_factory=_default_players, min_length=1)
    start_epoch: int = Field(default=1, ge=1, le=15)
    end_epoch: int = Field(default=15, ge=1, le=15)
    end_epoch_random: bool = Field(default=False, description="Draw the end epoch from a range")
    end_epoch_min: int = Field(default=1, ge=1, le=15)
    end_epoch_max: int = Field(default=15, ge=1, le=15)
    map_type: RandomizableOption[MapType] = Field(default_factory=_default_map)
    preset: RandomizableOption[PresetMode] = Field(default_factory=_default_preset)
    point_usage: RandomizableOption[PointUsageMode] = Field(default_factory=_default_point_usage)
    map_size: RandomizableOption[MapSize] = Field(default_factory=_default_map_size)
    resources: RandomizableOption[Resources] = Field(default_factory=_default_resources)
    game_speed: RandomizableOption[GameSpeed] = Field(default_factory=_default_game_speed)

    def with_seed(self, seed: str) -> MatchConfigRequest:
        return self.model_copy(update={"seed": seed})

    def to_domain(self) -> MatchConfig:
        """Convert to the domain configuration; the seed must be set."""

        if not self.seed:
            raise ConfigurationError("A match seed is required")
        end_epoch: Fixed[int] | EpochRange
        if self.end_epoch_random:
            end_epoch = EpochRange(self.end_epoch_min, self.end_epoch_max)
        else:
            end_epoch = Fixed(self.end_epoch)
        return MatchConfig(
            seed=self.seed,
            players=tuple(
                PlayerSlot(
                    name=p.name,
                    archetype=None if p.archetype == RANDOM_SENTINEL else Archetype(p.archetype),
                )
                for p in self.players
            ),
            start_epoch=self.start_epoch,
            end_epoch=end_epoch,
            map_type=self.map_type.to_setting(),
            preset=self.preset.to_setting(),
            point_usage=self.point_usage.to_setting(),
            map_size=self.map_size.to_setting(),
            resources=self.resources.to_setting(),
            game_speed=self.game_speed.to_setting(),
        )
