"""Resolve a possibly randomized match configuration into concrete values."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from epochforge.domain.catalog import CATALOG
from epochforge.domain.enums import RANDOM_SENTINEL, Archetype, MapType
from epochforge.domain.errors import ConfigurationError, ResolutionIntegrityError
from epochforge.domain.models import (
    Catalog,
    EpochRange,
    Fixed,
    MatchConfig,
    RandomFromPool,
    ResolvedMatchConfig,
    ResolvedPlayer,
    Setting,
)
from epochforge.domain.rules_config import DEFAULT_RULES, RulesConfig
from epochforge.utils.rng import SeededRandom, resolution_seed

logger = logging.getLogger(__name__)

T = TypeVar("T")

ARCHETYPE_DOMAIN: tuple[Archetype, ...] = tuple(Archetype)

# Order in which randomizable settings consume the resolver's stream.
SETTING_FIELDS: tuple[str, ...] = (
    "map_type",
    "preset",
    "point_usage",
    "map_size",
    "resources",
    "game_speed",
)


def lowest_end_epoch(config: MatchConfig) -> int:
    end = config.end_epoch
    return end.minimum if isinstance(end, EpochRange) else end.value


def validate_match_config(
    config: MatchConfig,
    *,
    catalog: Catalog = CATALOG,
    rules: RulesConfig = DEFAULT_RULES,
) -> None:
    """Raise :class:`ConfigurationError` if ``config`` cannot be resolved."""

    if not config.players:
        raise ConfigurationError("At least one player is required")
    if len(config.players) > rules.max_players:
        raise ConfigurationError(
            f"At most {rules.max_players} players are supported, got {len(config.players)}"
        )
    for index, slot in enumerate(config.players):
        if not slot.name.strip():
            raise ConfigurationError(f"Player {index + 1} has an empty name")

    _validate_epochs(config, catalog)

    for name in SETTING_FIELDS:
        setting = getattr(config, name)
        if isinstance(setting, RandomFromPool) and not setting.pool:
            raise ConfigurationError(f"Allowed pool for {name} is empty")

    _validate_map_gating(config, catalog)


def _validate_epochs(config: MatchConfig, catalog: Catalog) -> None:
    bounds = (catalog.min_epoch, catalog.max_epoch)

    def check(label: str, value: int) -> None:
        if not bounds[0] <= value <= bounds[1]:
            raise ConfigurationError(f"{label} must be within {bounds[0]}..{bounds[1]}, got {value}")

    check("start_epoch", config.start_epoch)
    end = config.end_epoch
    if isinstance(end, EpochRange):
        check("end_epoch_min", end.minimum)
        check("end_epoch_max", end.maximum)
        if end.minimum > end.maximum:
            raise ConfigurationError(
                f"end_epoch_min ({end.minimum}) cannot exceed end_epoch_max ({end.maximum})"
            )
        if config.start_epoch > end.minimum:
            raise ConfigurationError(
                f"start_epoch ({config.start_epoch}) cannot exceed end_epoch_min ({end.minimum})"
            )
    else:
        check("end_epoch", end.value)
        if config.start_epoch > end.value:
            raise ConfigurationError(
                f"start_epoch ({config.start_epoch}) cannot exceed end_epoch ({end.value})"
            )


def _validate_map_gating(config: MatchConfig, catalog: Catalog) -> None:
    lowest = lowest_end_epoch(config)
    setting = config.map_type
    if isinstance(setting, Fixed):
        info = catalog.map_info(setting.value)
        if not info.available_at(lowest):
            raise ConfigurationError(
                f"{info.label} requires end epoch {info.min_epoch} or later, "
                f"but the match can end at epoch {lowest}"
            )
    elif not [m for m in setting.pool if catalog.map_info(m).available_at(lowest)]:
        raise ConfigurationError(
            f"No map in the allowed pool is available for a match ending at epoch {lowest}"
        )


def _dedupe(pool: Sequence[T]) -> tuple[T, ...]:
    return tuple(dict.fromkeys(pool))


def _resolve_setting(setting: Setting[T], rng: SeededRandom) -> T:
    if isinstance(setting, Fixed):
        return setting.value
    return rng.choice(_dedupe(setting.pool))


def resolve_match_config(
    config: MatchConfig,
    *,
    catalog: Catalog = CATALOG,
    rules: RulesConfig = DEFAULT_RULES,
) -> ResolvedMatchConfig:
    """Resolve every randomized field of ``config`` from its seed.

    Draw order: end epoch, then the six settings in ``SETTING_FIELDS`` order,
    then unset player archetypes in roster order.  Fixed values never consume
    a draw.

    Raises:
        ConfigurationError: If the configuration is invalid
        ResolutionIntegrityError: If a field is still unresolved afterwards
    """
    validate_match_config(config, catalog=catalog, rules=rules)
    rng = SeededRandom(resolution_seed(config.seed))

    end = config.end_epoch
    end_epoch = rng.randint(end.minimum, end.maximum) if isinstance(end, EpochRange) else end.value

    map_setting = config.map_type
    if isinstance(map_setting, RandomFromPool):
        reachable = [m for m in map_setting.pool if catalog.map_info(m).available_at(end_epoch)]
        map_setting = RandomFromPool(tuple(reachable))
    map_type: MapType = _resolve_setting(map_setting, rng)

    preset = _resolve_setting(config.preset, rng)
    point_usage = _resolve_setting(config.point_usage, rng)
    map_size = _resolve_setting(config.map_size, rng)
    resources = _resolve_setting(config.resources, rng)
    game_speed = _resolve_setting(config.game_speed, rng)

    players = tuple(
        ResolvedPlayer(
            name=slot.name,
            archetype=slot.archetype if slot.archetype is not None else rng.choice(ARCHETYPE_DOMAIN),
        )
        for slot in config.players
    )

    resolved = ResolvedMatchConfig(
        seed=config.seed,
        players=players,
        start_epoch=config.start_epoch,
        end_epoch=end_epoch,
        map_type=map_type,
        preset=preset,
        point_usage=point_usage,
        map_size=map_size,
        resources=resources,
        game_speed=game_speed,
    )
    assert_resolved(resolved)
    logger.debug(
        "resolved seed %s: %s, %s, %s, epochs %s-%s",
        config.seed,
        resolved.map_type,
        resolved.preset,
        resolved.point_usage,
        resolved.start_epoch,
        resolved.end_epoch,
    )
    return resolved


def find_unresolved_fields(resolved: ResolvedMatchConfig) -> list[str]:
    """Return the names of fields that are missing or equal the sentinel."""

    offending: list[str] = []

    def check(label: str, value: object, expected: type | None = None) -> None:
        if value is None or value == RANDOM_SENTINEL:
            offending.append(label)
        elif expected is not None and not isinstance(value, expected):
            offending.append(label)

    check("seed", resolved.seed or None, str)
    check("start_epoch", resolved.start_epoch, int)
    check("end_epoch", resolved.end_epoch, int)
    for name in SETTING_FIELDS:
        check(name, getattr(resolved, name), Enum)
    for index, player in enumerate(resolved.players):
        check(f"players[{index}].archetype", player.archetype, Archetype)
    return offending


def assert_resolved(resolved: ResolvedMatchConfig) -> None:
    """Raise :class:`ResolutionIntegrityError` if any field leaked through."""

    offending = find_unresolved_fields(resolved)
    if offending:
        logger.error("resolution integrity violation for seed %s: %s", resolved.seed, offending)
        raise ResolutionIntegrityError(offending)
