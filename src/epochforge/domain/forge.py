"""Match orchestration: resolve once, then build every player's loadout."""

from __future__ import annotations

import logging
from dataclasses import replace

from epochforge.domain import scoring
from epochforge.domain.allocator import allocate_loadout
from epochforge.domain.catalog import CATALOG
from epochforge.domain.enums import RANDOM_SENTINEL, Archetype
from epochforge.domain.errors import RerollLockedError
from epochforge.domain.models import (
    Catalog,
    MatchConfig,
    MatchResult,
    PlayerCiv,
    ResolvedMatchConfig,
)
from epochforge.domain.resolver import resolve_match_config
from epochforge.domain.rules_config import DEFAULT_RULES, RulesConfig
from epochforge.utils.rng import SeededRandom, player_seed, reroll_seed

logger = logging.getLogger(__name__)


def forge_match(
    config: MatchConfig,
    *,
    catalog: Catalog = CATALOG,
    rules: RulesConfig = DEFAULT_RULES,
) -> MatchResult:
    """Resolve ``config`` and generate one loadout per player in roster order.

    Configuration and integrity errors propagate before any loadout is
    built; a player with nothing eligible simply gets an empty loadout.
    """
    resolved = resolve_match_config(config, catalog=catalog, rules=rules)
    civs = [
        generate_player_civ(resolved, player.name, index, catalog=catalog, rules=rules)
        for index, player in enumerate(resolved.players)
    ]
    logger.info(
        "forged match %s: %d players on %s (%s)",
        resolved.seed,
        len(civs),
        resolved.map_type,
        resolved.preset,
    )
    return MatchResult(resolved=resolved, civs=civs)


def generate_player_civ(
    resolved: ResolvedMatchConfig,
    player_name: str,
    index: int,
    *,
    seed: str | None = None,
    catalog: Catalog = CATALOG,
    rules: RulesConfig = DEFAULT_RULES,
) -> PlayerCiv:
    """Allocate and score a single player's loadout from its own stream."""

    if not 0 <= index < len(resolved.players):
        raise IndexError(f"player index {index} out of range")
    archetype = resolved.players[index].archetype
    effective_seed = seed if seed is not None else player_seed(resolved.seed, player_name, index)
    rng = SeededRandom(effective_seed)

    loadout = allocate_loadout(
        resolved, archetype, rng, catalog=catalog, rules=rules.allocation
    )
    items = loadout.items
    budget = rules.allocation.budget
    points = loadout.points_spent

    synergies = scoring.detect_synergies(items, catalog)
    ratings = scoring.phase_ratings(items, loadout.eligible, budget=budget)
    score = scoring.power_score(points, items, ratings, budget=budget, rules=rules.scoring)

    civ = PlayerCiv(
        id=f"{effective_seed}#{index}",
        player_name=player_name,
        index=index,
        archetype=archetype,
        seed=effective_seed,
        points_spent=points,
        items=items,
        ratings=ratings,
        summary=scoring.build_summary(archetype, items, synergies),
        reasoning=scoring.build_reasoning(resolved, archetype, items, budget=budget),
        power_score=score,
        is_legendary=scoring.is_legendary(score, rules.scoring),
        difficulty=scoring.classify_difficulty(items, catalog=catalog, rules=rules.scoring),
        primary_category=scoring.primary_category(items),
        synergies=synergies,
        warnings=scoring.collect_warnings(
            resolved, archetype, items, catalog=catalog, rules=rules.scoring
        ),
    )
    civ.is_valid = validate_player_civ(civ, budget=budget)
    if not civ.is_valid:
        logger.error("player %s (%d) failed final validation", player_name, index)
    return civ


def validate_player_civ(civ: PlayerCiv, *, budget: int = DEFAULT_RULES.allocation.budget) -> bool:
    """Check the budget invariants and that nothing unresolved leaked in."""

    if not isinstance(civ.archetype, Archetype):
        return False
    if civ.points_spent > budget or civ.points_spent != sum(i.cost for i in civ.items):
        return False
    if any(item.cost != item.original_cost + item.inflation_applied for item in civ.items):
        return False
    fields = [civ.player_name, civ.primary_category, *(item.name for item in civ.items)]
    return RANDOM_SENTINEL not in fields


def reroll_player(
    resolved: ResolvedMatchConfig,
    civs: list[PlayerCiv],
    player_name: str,
    index: int,
    *,
    catalog: Catalog = CATALOG,
    rules: RulesConfig = DEFAULT_RULES,
) -> list[PlayerCiv]:
    """Return a roster where only ``civs[index]`` has been regenerated.

    The replacement draws from the reroll seed of that player, is flagged
    ``reroll_used`` and carries a rerolled marker on its reasoning.  A
    second reroll of the same player returns ``civs`` unchanged.

    Raises:
        RerollLockedError: If the resolved preset is Tournament
        IndexError: If ``index`` is outside the roster
        ValueError: If ``player_name`` does not match the record at ``index``
    """
    if resolved.is_tournament:
        raise RerollLockedError("Rerolls are disabled for the Tournament preset")
    if not 0 <= index < len(civs):
        raise IndexError(f"player index {index} out of range")
    current = civs[index]
    if current.player_name != player_name:
        raise ValueError(
            f"player {player_name!r} does not match {current.player_name!r} at index {index}"
        )
    if current.reroll_used:
        logger.info("reroll already used for %s (%d); ignoring", player_name, index)
        return civs

    fresh = generate_player_civ(
        resolved,
        player_name,
        index,
        seed=reroll_seed(resolved.seed, player_name, index),
        catalog=catalog,
        rules=rules,
    )
    fresh = replace(fresh, reroll_used=True, reasoning=scoring.mark_rerolled(fresh.reasoning))
    logger.info("rerolled %s (%d) in match %s", player_name, index, resolved.seed)

    updated = list(civs)
    updated[index] = fresh
    return updated
