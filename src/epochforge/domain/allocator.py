"""Budget-constrained selection of boosts and civilization powers.

The allocator filters the catalog down to the entries a player may buy in
the resolved match, weights them by archetype affinity and era flavor, and
then spends the point budget according to the resolved point-usage mode.
Every loop is bounded by the number of candidates or by an explicit attempt
limit, so allocation always terminates, possibly with an empty loadout.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from epochforge.domain.catalog import CATALOG, NAVAL_CATEGORIES
from epochforge.domain.enums import (
    Archetype,
    BoostCategory,
    GamePhase,
    ItemType,
    PointUsageMode,
)
from epochforge.domain.models import (
    Boost,
    Catalog,
    CivPower,
    GeneratedItem,
    ResolvedMatchConfig,
)
from epochforge.domain.rules_config import DEFAULT_RULES, AllocationRules
from epochforge.utils.rng import SeededRandom

logger = logging.getLogger(__name__)

C = BoostCategory

ARCHETYPE_AFFINITY: dict[Archetype, frozenset[BoostCategory]] = {
    Archetype.ECONOMIC: frozenset({C.ECONOMY}),
    Archetype.AGGRESSIVE: frozenset(
        {
            C.INFANTRY_RANGED,
            C.INFANTRY_MELEE,
            C.CAVALRY_RANGED,
            C.CAVALRY_MELEE,
            C.SIEGE,
            C.TANKS,
        }
    ),
    Archetype.DEFENSIVE: frozenset({C.BUILDINGS}),
    Archetype.NAVAL: frozenset({C.SHIPS}),
    Archetype.BALANCED: frozenset(),
}

CatalogEntry = Boost | CivPower


# --- Eligibility ----------------------------------------------------------------


def is_boost_eligible(boost: Boost, resolved: ResolvedMatchConfig, catalog: Catalog) -> bool:
    heading = catalog.heading_for(boost.category)
    if heading.min_epoch > resolved.end_epoch:
        return False
    if boost.category in NAVAL_CATEGORIES:
        return catalog.map_info(resolved.map_type).naval_support
    return True


def is_power_eligible(power: CivPower, resolved: ResolvedMatchConfig) -> bool:
    return power.overlaps(resolved.start_epoch, resolved.end_epoch)


def eligible_items(
    resolved: ResolvedMatchConfig, catalog: Catalog = CATALOG
) -> list[CatalogEntry]:
    """Return boosts then powers a player may buy, in catalog order."""

    boosts: list[CatalogEntry] = [
        b for b in catalog.boosts if is_boost_eligible(b, resolved, catalog)
    ]
    powers: list[CatalogEntry] = [p for p in catalog.powers if is_power_eligible(p, resolved)]
    return boosts + powers


# --- Cost inflation -------------------------------------------------------------


def inflated_cost(
    boost: Boost, prior_purchases: int, catalog: Catalog = CATALOG
) -> tuple[int, int]:
    """Return ``(cost, inflation)`` for buying ``boost`` after N prior purchases."""

    inflation = prior_purchases * catalog.heading_for(boost.category).bonus_cost
    return boost.base_cost + inflation, inflation


# --- Candidates -----------------------------------------------------------------


def emphasized_phases(
    resolved: ResolvedMatchConfig, rules: AllocationRules = DEFAULT_RULES.allocation
) -> frozenset[GamePhase]:
    """Phases the epoch window gives room to play out."""

    phases: set[GamePhase] = set()
    if resolved.start_epoch <= rules.early_phase_end_epoch:
        phases.add(GamePhase.EARLY)
    if (
        resolved.start_epoch < rules.late_phase_start_epoch
        and resolved.end_epoch > rules.early_phase_end_epoch
    ):
        phases.add(GamePhase.MID)
    if resolved.end_epoch >= rules.late_phase_start_epoch:
        phases.add(GamePhase.LATE)
    return frozenset(phases)


@dataclass(slots=True)
class Candidate:
    """A catalog entry annotated with its selection weight for one player."""

    entry: CatalogEntry
    weight: float
    value: float
    eligibility: str
    rationale: str

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_power(self) -> bool:
        return isinstance(self.entry, CivPower)


def build_candidates(
    resolved: ResolvedMatchConfig,
    archetype: Archetype,
    rng: SeededRandom,
    *,
    catalog: Catalog = CATALOG,
    rules: AllocationRules = DEFAULT_RULES.allocation,
) -> list[Candidate]:
    """Weight every eligible entry; consumes one jitter draw per entry."""

    affinity = ARCHETYPE_AFFINITY[archetype]
    emphasized = emphasized_phases(resolved, rules)
    candidates: list[Candidate] = []

    for entry in eligible_items(resolved, catalog):
        jitter = rng.uniform(1.0 - rules.value_jitter, 1.0 + rules.value_jitter)
        notes: list[str] = []
        weight = jitter

        if isinstance(entry, Boost):
            heading = catalog.heading_for(entry.category)
            eligibility = f"{entry.category} opens at epoch {heading.min_epoch}"
            if entry.category in affinity:
                weight *= rules.archetype_weight
                notes.append(f"{archetype} affinity x{rules.archetype_weight:g}")
        else:
            eligibility = (
                f"power window {entry.min_epoch}-{entry.max_epoch} overlaps "
                f"{resolved.start_epoch}-{resolved.end_epoch}"
            )

        if emphasized.intersection(entry.phases):
            weight *= rules.flavor_weight
            notes.append("suits the era")

        value = rules.base_item_value * weight
        value *= 1.0 + rules.extra_phase_value * max(0, len(entry.phases) - 1)
        if isinstance(entry, CivPower):
            value *= rules.power_value_multiplier

        rationale = f"weight {weight:.2f}" + (f" ({', '.join(notes)})" if notes else "")
        candidates.append(
            Candidate(
                entry=entry,
                weight=weight,
                value=value,
                eligibility=eligibility,
                rationale=rationale,
            )
        )
    return candidates


# --- Purchase bookkeeping -------------------------------------------------------


@dataclass(slots=True)
class _Ledger:
    catalog: Catalog
    rules: AllocationRules
    spent: int = 0
    powers: int = 0
    counts: Counter[BoostCategory] = field(default_factory=Counter)
    items: list[GeneratedItem] = field(default_factory=list)

    def price(self, candidate: Candidate) -> tuple[int, int]:
        entry = candidate.entry
        if isinstance(entry, CivPower):
            return entry.cost, 0
        return inflated_cost(entry, self.counts[entry.category], self.catalog)

    def fits(self, candidate: Candidate) -> bool:
        if candidate.is_power and self.powers >= self.rules.max_powers:
            return False
        cost, _ = self.price(candidate)
        return self.spent + cost <= self.rules.budget

    def buy(self, candidate: Candidate, reason: str) -> GeneratedItem:
        entry = candidate.entry
        cost, inflation = self.price(candidate)
        if isinstance(entry, CivPower):
            pricing = "flat cost, never inflated"
        else:
            ordinal = self.counts[entry.category] + 1
            pricing = (
                "first purchase in category"
                if ordinal == 1
                else f"purchase #{ordinal} in category, +{inflation} inflation"
            )
        trace = f"Eligible: {candidate.eligibility}; {pricing}; {candidate.rationale}; {reason}"

        if isinstance(entry, CivPower):
            item = GeneratedItem(
                name=entry.name,
                item_type=ItemType.POWER,
                cost=cost,
                original_cost=entry.cost,
                phases=entry.phases,
                description=entry.description,
                trace=trace,
            )
            self.powers += 1
        else:
            item = GeneratedItem(
                name=entry.name,
                item_type=ItemType.BOOST,
                cost=cost,
                original_cost=entry.base_cost,
                inflation_applied=inflation,
                category=entry.category,
                phases=entry.phases,
                trace=trace,
            )
            self.counts[entry.category] += 1

        self.spent += cost
        self.items.append(item)
        return item


# --- Policies -------------------------------------------------------------------


def _select_efficient(candidates: list[Candidate], ledger: _Ledger) -> None:
    remaining = list(candidates)
    while remaining:
        best: Candidate | None = None
        best_ratio = 0.0
        for candidate in remaining:
            if not ledger.fits(candidate):
                continue
            cost, _ = ledger.price(candidate)
            ratio = candidate.value / max(cost, 1)
            if best is None or ratio > best_ratio:
                best, best_ratio = candidate, ratio
        if best is None:
            break
        ledger.buy(best, f"best value per point ({best_ratio:.2f})")
        remaining.remove(best)


def _select_exact(
    candidates: list[Candidate],
    rng: SeededRandom,
    catalog: Catalog,
    rules: AllocationRules,
) -> _Ledger:
    best = _Ledger(catalog, rules)
    if not candidates:
        return best
    weights = [c.weight for c in candidates]
    for attempt in range(1, rules.exact_attempts + 1):
        ledger = _Ledger(catalog, rules)
        for candidate in rng.weighted_order(candidates, weights):
            if ledger.fits(candidate):
                ledger.buy(candidate, f"packed toward {rules.budget} points (pass {attempt})")
        if ledger.spent > best.spent:
            best = ledger
        if best.spent == rules.budget:
            break
    return best


def _select_loose(
    candidates: list[Candidate], rng: SeededRandom, ledger: _Ledger, rules: AllocationRules
) -> None:
    target = rng.randint(rules.loose_min_target, rules.loose_max_target)
    remaining = list(candidates)
    draws = 0
    while ledger.spent < target and draws < rules.loose_max_draws:
        fitting = [c for c in remaining if ledger.fits(c)]
        if not fitting:
            break
        pick = rng.weighted_choice(fitting, [c.weight for c in fitting])
        draws += 1
        ledger.buy(pick, f"drawn for flavor toward a {target}-point target")
        remaining.remove(pick)


@dataclass(slots=True)
class Loadout:
    """Raw allocation result before scoring."""

    items: list[GeneratedItem]
    eligible: list[CatalogEntry]

    @property
    def points_spent(self) -> int:
        return sum(item.cost for item in self.items)


def allocate_loadout(
    resolved: ResolvedMatchConfig,
    archetype: Archetype,
    rng: SeededRandom,
    *,
    catalog: Catalog = CATALOG,
    rules: AllocationRules = DEFAULT_RULES.allocation,
) -> Loadout:
    """Select one player's items under the resolved point-usage mode."""

    candidates = build_candidates(resolved, archetype, rng, catalog=catalog, rules=rules)
    eligible = [c.entry for c in candidates]
    if not candidates:
        logger.warning(
            "no eligible items for epochs %s-%s on %s",
            resolved.start_epoch,
            resolved.end_epoch,
            resolved.map_type,
        )
        return Loadout(items=[], eligible=eligible)

    mode = resolved.point_usage
    if mode == PointUsageMode.EXACT:
        ledger = _select_exact(candidates, rng, catalog, rules)
    else:
        ledger = _Ledger(catalog, rules)
        if mode == PointUsageMode.LOOSE:
            _select_loose(candidates, rng, ledger, rules)
        else:
            _select_efficient(candidates, ledger)

    logger.debug(
        "allocated %d items (%d pts) for %s archetype using %s",
        len(ledger.items),
        ledger.spent,
        archetype,
        mode,
    )
    return Loadout(items=list(ledger.items), eligible=eligible)


def category_counts(items: Iterable[GeneratedItem]) -> Counter[BoostCategory]:
    return Counter(item.category for item in items if item.category is not None)
