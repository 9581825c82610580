"""Runtime primitives backing the Epoch Forge HTTP API."""

from __future__ import annotations

import logging
import secrets
from contextlib import suppress
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from pydantic import TypeAdapter

from epochforge import export
from epochforge.config import Settings, get_settings
from epochforge.domain import models as dm
from epochforge.domain.catalog import (
    CATALOG,
    DEFAULT_NAMES,
    POINT_MODE_DESCRIPTIONS,
    PRESET_DESCRIPTIONS,
)
from epochforge.domain.forge import forge_match, reroll_player
from epochforge.domain.rules_config import DEFAULT_RULES, RulesConfig
from epochforge.repository import JsonMatchRepository
from epochforge.schemas.match import MatchConfigRequest
from epochforge.sharecode import decode_share_code, encode_share_code

logger = logging.getLogger(__name__)

CATALOG_ADAPTER: TypeAdapter[dm.Catalog] = TypeAdapter(dm.Catalog)


def new_match_seed(prefix: str = "EF") -> str:
    """Return a fresh human-friendly seed such as ``EF-4821``."""

    return f"{prefix}-{secrets.randbelow(10000)}"


class MatchService:
    """Forge, load and mutate persisted match sessions."""

    def __init__(
        self,
        repository: JsonMatchRepository,
        *,
        rules: RulesConfig = DEFAULT_RULES,
        seed_prefix: str = "EF",
    ) -> None:
        self._repository = repository
        self._rules = rules
        self._seed_prefix = seed_prefix

    def list_matches(self) -> list[dm.MatchSession]:
        sessions: list[dm.MatchSession] = []
        for match_id in self._repository.list_matches():
            with suppress(FileNotFoundError):
                sessions.append(self._repository.load(match_id))
        return sessions

    def get_match(self, match_id: dm.MatchID) -> dm.MatchSession:
        """Load a single match or raise ``FileNotFoundError``."""

        return self._repository.load(match_id)

    def forge(self, request: MatchConfigRequest) -> dm.MatchSession:
        """Forge ``request`` (generating a seed if needed) and persist it."""

        if request.seed is None:
            request = request.with_seed(new_match_seed(self._seed_prefix))
        result = forge_match(request.to_domain(), rules=self._rules)
        session = dm.MatchSession(
            id=self._repository.next_identifier(),
            share_code=encode_share_code(request),
            created_at=datetime.now(UTC),
            resolved=result.resolved,
            civs=result.civs,
        )
        self._repository.save(session)
        logger.info("stored match %s with seed %s", int(session.id), request.seed)
        return session

    def forge_from_share_code(self, code: str) -> dm.MatchSession:
        return self.forge(decode_share_code(code))

    def reforge(self, match_id: dm.MatchID) -> dm.MatchSession:
        """Forge a new match with the same settings under a fresh seed."""

        session = self.get_match(match_id)
        request = decode_share_code(session.share_code)
        return self.forge(request.with_seed(new_match_seed(self._seed_prefix)))

    def reroll(self, match_id: dm.MatchID, index: int) -> dm.PlayerCiv:
        """Reroll one player; a second reroll returns the stored record."""

        session = self.get_match(match_id)
        if not 0 <= index < len(session.civs):
            raise IndexError(f"player index {index} out of range")
        name = session.civs[index].player_name
        civs = reroll_player(session.resolved, session.civs, name, index, rules=self._rules)
        if civs is not session.civs:
            self._repository.save(replace(session, civs=civs))
        return civs[index]

    def player(self, match_id: dm.MatchID, index: int) -> dm.PlayerCiv:
        session = self.get_match(match_id)
        if not 0 <= index < len(session.civs):
            raise IndexError(f"player index {index} out of range")
        return session.civs[index]

    def report(self, match_id: dm.MatchID, index: int) -> str:
        return export.civ_report(self.player(match_id, index), budget=self._rules.allocation.budget)

    def export_document(self, match_id: dm.MatchID) -> tuple[str, dict[str, Any]]:
        session = self.get_match(match_id)
        return (
            export.export_filename(session.resolved.seed),
            export.export_match(session.resolved, session.civs),
        )

    @staticmethod
    def to_summary_dict(session: dm.MatchSession) -> dict[str, object]:
        return {
            "id": int(session.id),
            "seed": session.resolved.seed,
            "header": export.match_header(session.resolved),
            "share_code": session.share_code,
            "created_at": session.created_at,
            "player_count": len(session.civs),
        }

    @staticmethod
    def to_detail_dict(session: dm.MatchSession) -> dict[str, object]:
        detail = MatchService.to_summary_dict(session)
        detail.update(
            {
                "resolved": session.resolved,
                "civs": session.civs,
                "top_scorers": export.top_scorers(session.civs),
            }
        )
        return detail


def catalog_document(catalog: dm.Catalog = CATALOG) -> dict[str, Any]:
    """Static tables plus the descriptive text shown on the setup screen."""

    document = CATALOG_ADAPTER.dump_python(catalog, mode="json")
    document["presets"] = {str(k): v for k, v in PRESET_DESCRIPTIONS.items()}
    document["point_usage_modes"] = {str(k): v for k, v in POINT_MODE_DESCRIPTIONS.items()}
    document["default_names"] = list(DEFAULT_NAMES)
    return document


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self, *, settings: Settings | None = None, rules: RulesConfig = DEFAULT_RULES
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = replace(rules, max_players=self.settings.max_players)
        self.repository = JsonMatchRepository(self.settings.data_dir)
        self.matches = MatchService(
            self.repository, rules=self.rules, seed_prefix=self.settings.seed_prefix
        )

    async def shutdown(self) -> None:
        logger.info("shutting down API state for %s", self.settings.data_dir)


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
