"""Synergies, ratings, power score, difficulty and narrative for a loadout."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from epochforge.domain.allocator import CatalogEntry
from epochforge.domain.catalog import CATALOG, NAVAL_CATEGORIES
from epochforge.domain.enums import (
    Archetype,
    Difficulty,
    GamePhase,
    ItemType,
    MapCategory,
)
from epochforge.domain.models import (
    Catalog,
    CivPower,
    GeneratedItem,
    PhaseRatings,
    ResolvedMatchConfig,
    SynergyRule,
)
from epochforge.domain.rules_config import DEFAULT_RULES, ScoringRules

POWERS_HEADING = "Civilization Powers"
REROLL_MARKER = " (Rerolled)"


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def detect_synergies(
    items: Iterable[GeneratedItem], catalog: Catalog = CATALOG
) -> list[SynergyRule]:
    """Return every rule whose item names are all present, in catalog order."""

    names = {item.name for item in items}
    return [rule for rule in catalog.synergies if set(rule.items) <= names]


def _entry_cost(entry: CatalogEntry) -> int:
    return entry.cost if isinstance(entry, CivPower) else entry.base_cost


def phase_ratings(
    items: Sequence[GeneratedItem],
    eligible: Sequence[CatalogEntry],
    *,
    budget: int = DEFAULT_RULES.allocation.budget,
) -> PhaseRatings:
    """Rate each phase 0-100 against the best spend the window allows."""

    def rate(phase: GamePhase) -> int:
        spent = sum(item.cost for item in items if phase in item.phases)
        ceiling = min(budget, sum(_entry_cost(e) for e in eligible if phase in e.phases))
        if ceiling <= 0:
            return 0
        return int(round(_clamp(100.0 * spent / ceiling)))

    return PhaseRatings(
        early=rate(GamePhase.EARLY),
        mid=rate(GamePhase.MID),
        late=rate(GamePhase.LATE),
    )


def power_score(
    points_spent: int,
    items: Sequence[GeneratedItem],
    ratings: PhaseRatings,
    *,
    budget: int = DEFAULT_RULES.allocation.budget,
    rules: ScoringRules = DEFAULT_RULES.scoring,
) -> int:
    """Composite 0-100 score: spend, power rarity and phase balance."""

    if points_spent <= 0 or budget <= 0:
        return 0
    spend = rules.points_weight * min(points_spent, budget) / budget
    powers = sum(1 for item in items if item.item_type == ItemType.POWER)
    rarity = min(rules.power_bonus_cap, rules.power_bonus * powers)
    values = ratings.values()
    spread = 0.0
    if max(values) > 0:
        spread = rules.spread_weight * (1.0 - (max(values) - min(values)) / 100.0)
    return int(round(_clamp(spend + rarity + spread)))


def is_legendary(score: int, rules: ScoringRules = DEFAULT_RULES.scoring) -> bool:
    return score >= rules.legendary_threshold


def classify_difficulty(
    items: Sequence[GeneratedItem],
    *,
    catalog: Catalog = CATALOG,
    rules: ScoringRules = DEFAULT_RULES.scoring,
) -> Difficulty:
    """Bucket structural complexity: categories touched and conditional powers."""

    categories = {item.category for item in items if item.category is not None}
    conditional = 0
    for item in items:
        if item.item_type != ItemType.POWER:
            continue
        power = catalog.power_named(item.name)
        if power is not None and power.conditional:
            conditional += 1

    complexity = len(categories) + rules.conditional_weight * conditional
    if complexity <= rules.beginner_max:
        return Difficulty.BEGINNER
    if complexity <= rules.intermediate_max:
        return Difficulty.INTERMEDIATE
    return Difficulty.ADVANCED


def primary_category(items: Sequence[GeneratedItem]) -> str:
    """Category with the highest charged spend; ties go to the earlier purchase."""

    totals: dict[str, int] = {}
    for item in items:
        key = str(item.category) if item.category is not None else POWERS_HEADING
        totals[key] = totals.get(key, 0) + item.cost
    if not totals:
        return ""
    return max(totals, key=lambda key: totals[key])


def build_summary(
    archetype: Archetype,
    items: Sequence[GeneratedItem],
    synergies: Sequence[SynergyRule],
) -> str:
    if not items:
        return f"{archetype} civilization with no eligible upgrades for this epoch window."
    dominant = primary_category(items) or POWERS_HEADING
    count = len(synergies)
    plural = "synergy" if count == 1 else "synergies"
    return f"{archetype} civilization focused on {dominant} with {count} {plural}."


def build_reasoning(
    resolved: ResolvedMatchConfig,
    archetype: Archetype,
    items: Sequence[GeneratedItem],
    *,
    budget: int = DEFAULT_RULES.allocation.budget,
) -> str:
    """Narrate, in purchase order, why each item was selected."""

    spent = sum(item.cost for item in items)
    opening = (
        f"{archetype} archetype under {resolved.point_usage} point logic on "
        f"{resolved.map_type}, epochs {resolved.start_epoch}-{resolved.end_epoch}."
    )
    if not items:
        return f"{opening} No catalog entry was eligible, so no points were spent."
    steps = [f"{n}. {item.name} ({item.cost} pts): {item.trace}" for n, item in enumerate(items, 1)]
    closing = f"Spent {spent} of {budget} points."
    return " ".join([opening, *steps, closing])


def mark_rerolled(reasoning: str) -> str:
    return reasoning + REROLL_MARKER


def collect_warnings(
    resolved: ResolvedMatchConfig,
    archetype: Archetype,
    items: Sequence[GeneratedItem],
    *,
    catalog: Catalog = CATALOG,
    rules: ScoringRules = DEFAULT_RULES.scoring,
) -> list[str]:
    """Non-fatal map and epoch advisories for a finished loadout."""

    info = catalog.map_info(resolved.map_type)
    warnings: list[str] = []

    if archetype == Archetype.NAVAL and not info.naval_support:
        warnings.append(f"Naval archetype on {info.label}: the map has no naval support.")
    if archetype == Archetype.AGGRESSIVE and info.category == MapCategory.WATER:
        warnings.append(f"Land-focused archetype on {info.label}, an all-water map.")
    if not info.naval_support and any(item.name == "20% Fishing" for item in items):
        warnings.append(f"Fishing boost has little value on {info.label} without naval support.")
    if not info.naval_support and any(item.category in NAVAL_CATEGORIES for item in items):
        warnings.append(f"Naval items purchased on {info.label}, which cannot field ships.")

    spent = sum(item.cost for item in items)
    late = sum(item.cost for item in items if GamePhase.LATE in item.phases)
    if (
        spent > 0
        and resolved.end_epoch < rules.short_window_end_epoch
        and late / spent > rules.late_heavy_share
    ):
        warnings.append(
            f"Heavy late-game investment ({late} of {spent} pts) in a match ending at "
            f"{catalog.epoch_name(resolved.end_epoch)}."
        )
    return warnings
