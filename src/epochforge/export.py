"""Export documents and plain-text reports for forged matches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter

from epochforge.domain.catalog import CATALOG
from epochforge.domain.enums import ItemType
from epochforge.domain.models import Catalog, PlayerCiv, ResolvedMatchConfig
from epochforge.domain.rules_config import DEFAULT_RULES

RESOLVED_ADAPTER: TypeAdapter[ResolvedMatchConfig] = TypeAdapter(ResolvedMatchConfig)
CIVS_ADAPTER: TypeAdapter[list[PlayerCiv]] = TypeAdapter(list[PlayerCiv])

REPORT_RULE = "===================================="


def export_match(resolved: ResolvedMatchConfig, civs: Sequence[PlayerCiv]) -> dict[str, Any]:
    """Return the JSON-compatible ``{config, civs}`` export document."""

    return {
        "config": RESOLVED_ADAPTER.dump_python(resolved, mode="json"),
        "civs": CIVS_ADAPTER.dump_python(list(civs), mode="json"),
    }


def export_filename(seed: str) -> str:
    return f"epoch-forge-{seed}.json"


def content_disposition(filename: str) -> str:
    """Build an attachment header value that is safe for any filename.

    Non-ASCII characters, quotes and backslashes are replaced with ``_`` in
    the plain ``filename`` parameter; the exact name travels in the RFC 5987
    ``filename*`` parameter.
    """
    fallback = "".join(
        ch if ch.isascii() and ch.isprintable() and ch not in "\"\\" else "_" for ch in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def match_header(resolved: ResolvedMatchConfig, catalog: Catalog = CATALOG) -> str:
    label = catalog.map_info(resolved.map_type).label
    start = catalog.epoch_name(resolved.start_epoch)
    end = catalog.epoch_name(resolved.end_epoch)
    return f"{label} World · {resolved.preset} · {start} → {end}"


def civ_report(civ: PlayerCiv, *, budget: int = DEFAULT_RULES.allocation.budget) -> str:
    """Render the plain-text card a player copies into chat."""

    lines = [
        f"Tactical Data: {civ.player_name}",
        f"Spec: {civ.summary}",
        f"Power Level: {civ.power_score}" + (" (Legendary)" if civ.is_legendary else ""),
        REPORT_RULE,
    ]
    for number, item in enumerate(civ.items, 1):
        kind = " [Power]" if item.item_type == ItemType.POWER else ""
        lines.append(f"[{number:02d}] {item.name}{kind} (Cost: {item.cost})")
        if item.cost_explanation:
            lines.append(f"     {item.cost_explanation}")
    lines.append(REPORT_RULE)
    lines.append(f"Residual Points: {budget - civ.points_spent}")
    return "\n".join(lines)


def top_scorers(civs: Sequence[PlayerCiv]) -> list[int]:
    """Indices of every player tied for the highest power score."""

    if not civs:
        return []
    best = max(civ.power_score for civ in civs)
    return [civ.index for civ in civs if civ.power_score == best]
