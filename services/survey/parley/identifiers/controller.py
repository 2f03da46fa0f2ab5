"""Identifiers controller: issues fresh short codes and creator aliases."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from parley.config import Settings
from parley.exceptions import IdentifierSpaceExhaustedError
from parley.identifiers import service
from parley.identifiers.schemas import CreatorAliasResponse, ShortCodeResponse
from parley.store import RecordStore

logger = logging.getLogger(__name__)


def _handle_domain_error(exc: Exception) -> HTTPException:
    # Already logged at CRITICAL by the generator.
    if not isinstance(exc, IdentifierSpaceExhaustedError):
        logger.exception("Unexpected error in identifiers controller")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error.")


async def issue_short_code(store: RecordStore, settings: Settings) -> ShortCodeResponse:
    try:
        return ShortCodeResponse(short_code=await service.issue_short_code(store, settings))
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def issue_creator_alias(
    store: RecordStore,
    settings: Settings,
    language: str,
) -> CreatorAliasResponse:
    try:
        alias = await service.issue_creator_alias(store, language, settings)
        return CreatorAliasResponse(creator_name=alias)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc
