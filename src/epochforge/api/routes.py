"""HTTP routes for the Epoch Forge API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from epochforge.api.runtime import ApiState, catalog_document
from epochforge.domain import models as dm
from epochforge.domain.errors import (
    ConfigurationError,
    RerollLockedError,
    ResolutionIntegrityError,
)
from epochforge.export import content_disposition
from epochforge.schemas import MatchConfigRequest, MatchDetail, MatchSummary, PlayerCivRead
from epochforge.sharecode import decode_share_code

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]
PlayerIndex = Annotated[int, Path(ge=0)]

HTTP_422_UNPROCESSABLE = 422


def _match_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="match not found")


def _forge_failed(exc: Exception) -> HTTPException:
    if isinstance(exc, ResolutionIntegrityError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": str(exc), "fields": list(exc.fields)},
        )
    return HTTPException(status_code=HTTP_422_UNPROCESSABLE, detail=str(exc))


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "catalog_version": state.settings.catalog_version,
        "max_players": state.rules.max_players,
    }


@router.get("/catalog")
async def catalog() -> dict[str, object]:
    return catalog_document()


@router.get("/matches", response_model=list[MatchSummary])
async def list_matches(state: ApiStateDep) -> list[MatchSummary]:
    sessions = state.matches.list_matches()
    return [MatchSummary.model_validate(state.matches.to_summary_dict(s)) for s in sessions]


@router.post("/matches", response_model=MatchDetail, status_code=status.HTTP_201_CREATED)
async def create_match(payload: MatchConfigRequest, state: ApiStateDep) -> MatchDetail:
    try:
        session = state.matches.forge(payload)
    except (ConfigurationError, ResolutionIntegrityError) as exc:
        raise _forge_failed(exc) from exc
    return MatchDetail.model_validate(state.matches.to_detail_dict(session))


@router.get("/matches/{match_id}", response_model=MatchDetail)
async def get_match(match_id: int, state: ApiStateDep) -> MatchDetail:
    try:
        session = state.matches.get_match(dm.MatchID(match_id))
    except FileNotFoundError as exc:
        raise _match_not_found() from exc
    return MatchDetail.model_validate(state.matches.to_detail_dict(session))


@router.post("/matches/{match_id}/players/{index}/reroll", response_model=PlayerCivRead)
async def reroll_player(match_id: int, index: PlayerIndex, state: ApiStateDep) -> PlayerCivRead:
    try:
        civ = state.matches.reroll(dm.MatchID(match_id), index)
    except FileNotFoundError as exc:
        raise _match_not_found() from exc
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except RerollLockedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return PlayerCivRead.model_validate(civ)


@router.post(
    "/matches/{match_id}/reforge",
    response_model=MatchDetail,
    status_code=status.HTTP_201_CREATED,
)
async def reforge_match(match_id: int, state: ApiStateDep) -> MatchDetail:
    try:
        session = state.matches.reforge(dm.MatchID(match_id))
    except FileNotFoundError as exc:
        raise _match_not_found() from exc
    except (ConfigurationError, ResolutionIntegrityError) as exc:
        raise _forge_failed(exc) from exc
    return MatchDetail.model_validate(state.matches.to_detail_dict(session))


@router.get("/matches/{match_id}/export")
async def export_match(match_id: int, state: ApiStateDep) -> JSONResponse:
    try:
        filename, document = state.matches.export_document(dm.MatchID(match_id))
    except FileNotFoundError as exc:
        raise _match_not_found() from exc
    return JSONResponse(
        content=document,
        headers={"Content-Disposition": content_disposition(filename)},
    )


@router.get("/matches/{match_id}/players/{index}/report", response_class=PlainTextResponse)
async def player_report(match_id: int, index: PlayerIndex, state: ApiStateDep) -> str:
    try:
        return state.matches.report(dm.MatchID(match_id), index)
    except FileNotFoundError as exc:
        raise _match_not_found() from exc
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/share/{code}", response_model=MatchConfigRequest)
async def inspect_share_code(code: str) -> MatchConfigRequest:
    try:
        return decode_share_code(code)
    except ConfigurationError as exc:
        raise HTTPException(status_code=HTTP_422_UNPROCESSABLE, detail=str(exc)) from exc


@router.post("/share/{code}/forge", response_model=MatchDetail, status_code=status.HTTP_201_CREATED)
async def forge_shared(code: str, state: ApiStateDep) -> MatchDetail:
    try:
        session = state.matches.forge_from_share_code(code)
    except (ConfigurationError, ResolutionIntegrityError) as exc:
        raise _forge_failed(exc) from exc
    return MatchDetail.model_validate(state.matches.to_detail_dict(session))
