"""Tests for match configuration validation and resolution."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from epochforge.domain.enums import (
    Archetype,
    GameSpeed,
    MapSize,
    MapType,
    PointUsageMode,
    PresetMode,
    Resources,
)
from epochforge.domain.errors import ConfigurationError, ResolutionIntegrityError
from epochforge.domain.models import (
    EpochRange,
    Fixed,
    MatchConfig,
    PlayerSlot,
    RandomFromPool,
    ResolvedMatchConfig,
    ResolvedPlayer,
)
from epochforge.domain.resolver import (
    assert_resolved,
    find_unresolved_fields,
    resolve_match_config,
    validate_match_config,
)


def _config(**overrides) -> MatchConfig:
    values = {
        "seed": "EF-1234",
        "players": (PlayerSlot("Taco"), PlayerSlot("Piert")),
    }
    values.update(overrides)
    return MatchConfig(**values)


def _resolved(**overrides) -> ResolvedMatchConfig:
    values = {
        "seed": "EF-1234",
        "players": (ResolvedPlayer("Taco", Archetype.BALANCED),),
        "start_epoch": 1,
        "end_epoch": 15,
        "map_type": MapType.CONTINENTAL,
        "preset": PresetMode.CASUAL,
        "point_usage": PointUsageMode.EFFICIENT,
        "map_size": MapSize.LARGE,
        "resources": Resources.STANDARD,
        "game_speed": GameSpeed.STANDARD,
    }
    values.update(overrides)
    return ResolvedMatchConfig(**values)


class TestValidation:
    def test_default_config_is_valid(self):
        validate_match_config(_config())

    def test_empty_roster_rejected(self):
        with pytest.raises(ConfigurationError, match="At least one player"):
            validate_match_config(_config(players=()))

    def test_roster_over_limit_rejected(self):
        players = tuple(PlayerSlot(f"P{n}") for n in range(11))
        with pytest.raises(ConfigurationError, match="At most 10"):
            validate_match_config(_config(players=players))

    def test_blank_name_rejected(self):
        with pytest.raises(ConfigurationError, match="empty name"):
            validate_match_config(_config(players=(PlayerSlot("  "),)))

    def test_start_after_end_rejected(self):
        with pytest.raises(ConfigurationError, match="cannot exceed end_epoch"):
            validate_match_config(_config(start_epoch=10, end_epoch=Fixed(5)))

    def test_epoch_out_of_range_rejected(self):
        with pytest.raises(ConfigurationError, match="within 1..15"):
            validate_match_config(_config(end_epoch=Fixed(16)))

    def test_inverted_range_rejected(self):
        with pytest.raises(ConfigurationError, match="end_epoch_min"):
            validate_match_config(_config(end_epoch=EpochRange(12, 8)))

    def test_start_after_range_minimum_rejected(self):
        with pytest.raises(ConfigurationError, match="cannot exceed end_epoch_min"):
            validate_match_config(_config(start_epoch=9, end_epoch=EpochRange(8, 12)))

    def test_empty_pool_rejected(self):
        with pytest.raises(ConfigurationError, match="pool for preset is empty"):
            validate_match_config(_config(preset=RandomFromPool(())))

    def test_fixed_space_map_needs_late_end_epoch(self):
        config = _config(map_type=Fixed(MapType.PLANETS_MARS), end_epoch=Fixed(10))
        with pytest.raises(ConfigurationError, match="requires end epoch 14"):
            validate_match_config(config)

    def test_space_only_pool_unreachable_at_lowest_end(self):
        config = _config(
            map_type=RandomFromPool((MapType.PLANETS_EARTH, MapType.PLANETS_SMALL)),
            end_epoch=EpochRange(10, 15),
        )
        with pytest.raises(ConfigurationError, match="No map in the allowed pool"):
            validate_match_config(config)


class TestResolution:
    def test_fixed_values_pass_through(self):
        config = _config(
            players=(PlayerSlot("Taco", Archetype.NAVAL),),
            start_epoch=3,
            end_epoch=Fixed(9),
            map_type=Fixed(MapType.SMALL_ISLANDS),
            preset=Fixed(PresetMode.CHAOS),
            point_usage=Fixed(PointUsageMode.LOOSE),
        )
        resolved = resolve_match_config(config)
        assert resolved.players == (ResolvedPlayer("Taco", Archetype.NAVAL),)
        assert (resolved.start_epoch, resolved.end_epoch) == (3, 9)
        assert resolved.map_type == MapType.SMALL_ISLANDS
        assert resolved.preset == PresetMode.CHAOS
        assert resolved.point_usage == PointUsageMode.LOOSE
        assert resolved.map_size == MapSize.LARGE

    def test_random_archetypes_become_concrete(self):
        resolved = resolve_match_config(_config())
        assert all(isinstance(p.archetype, Archetype) for p in resolved.players)
        assert resolved.player_names == ["Taco", "Piert"]

    def test_same_seed_same_resolution(self):
        config = _config(
            map_type=RandomFromPool(tuple(MapType)),
            preset=RandomFromPool(tuple(PresetMode)),
            end_epoch=EpochRange(1, 15),
        )
        assert resolve_match_config(config) == resolve_match_config(config)

    def test_duplicate_pool_entries_do_not_bias_membership(self):
        pool = (MapType.HIGHLANDS, MapType.HIGHLANDS, MapType.PLAINS)
        resolved = resolve_match_config(_config(map_type=RandomFromPool(pool)))
        assert resolved.map_type in {MapType.HIGHLANDS, MapType.PLAINS}

    def test_island_pool_never_resolves_to_continental(self):
        pool = (MapType.SMALL_ISLANDS, MapType.LARGE_ISLANDS)
        for n in range(40):
            resolved = resolve_match_config(
                _config(seed=f"EF-{n}", map_type=RandomFromPool(pool))
            )
            assert resolved.map_type in pool

    def test_space_map_filtered_when_drawn_end_is_early(self):
        pool = (MapType.PLANETS_EARTH, MapType.CONTINENTAL)
        for n in range(40):
            resolved = resolve_match_config(
                _config(
                    seed=f"EF-{n}",
                    map_type=RandomFromPool(pool),
                    end_epoch=EpochRange(10, 15),
                )
            )
            assert 10 <= resolved.end_epoch <= 15
            if resolved.end_epoch < 14:
                assert resolved.map_type == MapType.CONTINENTAL


class TestIntegrity:
    def test_resolved_config_passes(self):
        resolved = _resolved()
        assert find_unresolved_fields(resolved) == []
        assert_resolved(resolved)

    def test_sentinel_and_missing_fields_are_named(self):
        resolved = _resolved(
            players=(ResolvedPlayer("Taco", None),),  # type: ignore[arg-type]
            map_type="Random",
        )
        with pytest.raises(ResolutionIntegrityError) as excinfo:
            assert_resolved(resolved)
        assert excinfo.value.fields == ("map_type", "players[0].archetype")


@settings(max_examples=50, deadline=None)
@given(
    seed=st.text(min_size=1, max_size=24),
    pool=st.lists(st.sampled_from(list(PresetMode)), min_size=1, max_size=4),
)
def test_random_preset_always_from_pool(seed, pool):
    resolved = resolve_match_config(_config(seed=seed, preset=RandomFromPool(tuple(pool))))
    assert resolved.preset in pool
    assert find_unresolved_fields(resolved) == []
