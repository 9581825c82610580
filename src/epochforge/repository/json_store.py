"""JSON-based repository for forged matches."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from epochforge.domain import models as dm

logger = logging.getLogger(__name__)


class JsonMatchRepository:
    """Persist match sessions as JSON snapshots on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[dm.MatchSession] = TypeAdapter(dm.MatchSession)

    def _path_for(self, match_id: dm.MatchID) -> Path:
        return self.base_path / f"match_{int(match_id)}.json"

    def save(self, session: dm.MatchSession) -> Path:
        """Serialize a match session to disk and return the snapshot path."""

        path = self._path_for(session.id)
        path.write_bytes(self._adapter.dump_json(session, indent=2))
        logger.debug("saved match %s to %s", int(session.id), path)
        return path

    def load(self, match_id: dm.MatchID) -> dm.MatchSession:
        """Load a saved match; raises ``FileNotFoundError`` if it is unknown."""

        return self._adapter.validate_json(self._path_for(match_id).read_bytes())

    def list_matches(self) -> list[dm.MatchID]:
        ids: list[dm.MatchID] = []
        for path in self.base_path.glob("match_*.json"):
            raw = path.name[len("match_") : -len(".json")]
            try:
                ids.append(dm.MatchID(int(raw)))
            except ValueError:
                logger.warning("ignoring malformed snapshot name %s", path.name)
        return sorted(ids, key=int)

    def next_identifier(self) -> dm.MatchID:
        existing = self.list_matches()
        return dm.MatchID(int(existing[-1]) + 1 if existing else 1)

    def delete(self, match_id: dm.MatchID) -> None:
        path = self._path_for(match_id)
        if path.exists():
            path.unlink()
