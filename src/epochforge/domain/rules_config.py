"""Declarative tuning constants for allocation and scoring."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AllocationRules:
    """Budget, archetype bias and selection bounds."""

    budget: int = 100
    max_powers: int = 2
    archetype_weight: float = 3.0
    base_item_value: float = 10.0
    extra_phase_value: float = 0.25  # per phase tag beyond the first
    power_value_multiplier: float = 1.5
    value_jitter: float = 0.35  # +/- fraction applied per candidate
    exact_attempts: int = 200
    loose_min_target: int = 60
    loose_max_target: int = 95
    loose_max_draws: int = 60
    flavor_weight: float = 1.5  # items whose phases the epoch window reaches
    late_phase_start_epoch: int = 10
    early_phase_end_epoch: int = 5


@dataclass(frozen=True, slots=True)
class ScoringRules:
    """Power score composition, difficulty buckets and warning thresholds."""

    points_weight: float = 60.0
    power_bonus: float = 8.0
    power_bonus_cap: float = 20.0
    spread_weight: float = 20.0
    legendary_threshold: int = 85
    conditional_weight: int = 2
    beginner_max: int = 3
    intermediate_max: int = 6
    late_heavy_share: float = 0.5
    short_window_end_epoch: int = 8


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for the engine."""

    allocation: AllocationRules = AllocationRules()
    scoring: ScoringRules = ScoringRules()
    max_players: int = 10


DEFAULT_RULES = RulesConfig()
