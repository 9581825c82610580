from .civ import (
    GeneratedItemRead,
    MatchDetail,
    MatchSummary,
    PhaseRatingsRead,
    PlayerCivRead,
    ResolvedConfigRead,
)
from .match import MatchConfigRequest, PlayerEntry, RandomizableOption

__all__ = [
    "GeneratedItemRead",
    "MatchConfigRequest",
    "MatchDetail",
    "MatchSummary",
    "PhaseRatingsRead",
    "PlayerCivRead",
    "PlayerEntry",
    "RandomizableOption",
    "ResolvedConfigRead",
]
