"""Tests for match orchestration and rerolls."""

from __future__ import annotations

import pytest

from epochforge.domain.enums import Archetype, BoostCategory, MapType, PresetMode
from epochforge.domain.errors import ConfigurationError, RerollLockedError
from epochforge.domain.forge import (
    forge_match,
    generate_player_civ,
    reroll_player,
    validate_player_civ,
)
from epochforge.domain.models import Fixed, MatchConfig, PlayerSlot
from epochforge.domain.scoring import REROLL_MARKER
from epochforge.utils.rng import player_seed, reroll_seed


def _config(**overrides) -> MatchConfig:
    values = {
        "seed": "EF-1234",
        "players": (PlayerSlot("Taco"), PlayerSlot("Piert")),
    }
    values.update(overrides)
    return MatchConfig(**values)


class TestForgeMatch:
    def test_default_scenario(self):
        result = forge_match(_config())
        assert [civ.player_name for civ in result.civs] == ["Taco", "Piert"]
        for index, civ in enumerate(result.civs):
            assert civ.index == index
            assert civ.is_valid
            assert civ.points_spent <= 100
            assert civ.seed == player_seed("EF-1234", civ.player_name, index)
            assert isinstance(civ.archetype, Archetype)
            assert all(item.category != BoostCategory.SHIPS for item in civ.items)
            assert 0 <= civ.power_score <= 100
            assert civ.is_legendary == (civ.power_score >= 85)
            assert civ.reroll_used is False

    def test_forge_is_deterministic(self):
        assert forge_match(_config()) == forge_match(_config())

    def test_different_seeds_differ(self):
        first = forge_match(_config(seed="EF-1"))
        second = forge_match(_config(seed="EF-2"))
        assert [c.items for c in first.civs] != [c.items for c in second.civs]

    def test_player_loadout_independent_of_roster_after_it(self):
        solo = forge_match(_config(players=(PlayerSlot("Taco", Archetype.ECONOMIC),)))
        duo = forge_match(
            _config(players=(PlayerSlot("Taco", Archetype.ECONOMIC), PlayerSlot("Piert")))
        )
        assert solo.civs[0] == duo.civs[0]

    def test_configuration_errors_abort(self):
        with pytest.raises(ConfigurationError):
            forge_match(_config(start_epoch=12, end_epoch=Fixed(4)))

    def test_empty_window_still_valid(self):
        result = forge_match(
            _config(start_epoch=1, end_epoch=Fixed(1), map_type=Fixed(MapType.SMALL_ISLANDS))
        )
        assert all(civ.is_valid for civ in result.civs)

    def test_generate_rejects_bad_index(self):
        resolved = forge_match(_config()).resolved
        with pytest.raises(IndexError):
            generate_player_civ(resolved, "Ghost", 5)


class TestValidation:
    def test_overspent_record_is_invalid(self):
        civ = forge_match(_config()).civs[0]
        civ.points_spent = 101
        assert validate_player_civ(civ) is False


class TestReroll:
    def test_reroll_replaces_only_target(self):
        result = forge_match(_config())
        before = [civ.items for civ in result.civs]

        updated = reroll_player(result.resolved, result.civs, "Taco", 0)

        assert updated is not result.civs
        assert updated[1] is result.civs[1]
        assert [civ.items for civ in result.civs] == before
        fresh = updated[0]
        assert fresh.reroll_used is True
        assert fresh.seed == reroll_seed("EF-1234", "Taco", 0)
        assert fresh.reasoning.endswith(REROLL_MARKER)
        assert fresh.archetype == result.civs[0].archetype
        assert fresh.is_valid

    def test_second_reroll_is_a_no_op(self):
        result = forge_match(_config())
        once = reroll_player(result.resolved, result.civs, "Piert", 1)
        twice = reroll_player(result.resolved, once, "Piert", 1)
        assert twice is once

    def test_reroll_is_reproducible(self):
        result = forge_match(_config())
        first = reroll_player(result.resolved, result.civs, "Taco", 0)
        second = reroll_player(result.resolved, result.civs, "Taco", 0)
        assert first[0] == second[0]

    def test_tournament_locks_rerolls(self):
        result = forge_match(_config(preset=Fixed(PresetMode.TOURNAMENT)))
        with pytest.raises(RerollLockedError):
            reroll_player(result.resolved, result.civs, "Taco", 0)

    def test_name_mismatch_rejected(self):
        result = forge_match(_config())
        with pytest.raises(ValueError, match="does not match"):
            reroll_player(result.resolved, result.civs, "Piert", 0)

    def test_index_out_of_range(self):
        result = forge_match(_config())
        with pytest.raises(IndexError):
            reroll_player(result.resolved, result.civs, "Taco", 2)
