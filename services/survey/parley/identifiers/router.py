"""Identifiers router: preview identifiers before a survey is saved.

Nothing is reserved: an issued value is only unique at the time it is returned.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from parley.config import Settings
from parley.dependencies import get_app_settings
from parley.identifiers import controller
from parley.identifiers.schemas import CreatorAliasResponse, ShortCodeResponse
from parley.store import RecordStore
from parley.store.dependencies import get_store

router = APIRouter(prefix="/identifiers", tags=["Identifiers"])


@router.post("/short-code", response_model=ShortCodeResponse, summary="Issue an unused short code")
async def issue_short_code(
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ShortCodeResponse:
    return await controller.issue_short_code(store, settings)


@router.post(
    "/creator-alias",
    response_model=CreatorAliasResponse,
    summary="Issue an unused creator alias",
)
async def issue_creator_alias(
    language: str = Query(default="en", max_length=16),
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> CreatorAliasResponse:
    return await controller.issue_creator_alias(store, settings, language)
