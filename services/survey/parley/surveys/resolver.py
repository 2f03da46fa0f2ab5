"""Turn a caller-supplied survey identifier into the canonical survey record.

The raw string never leaves this module: callers get a ``SurveyRecord`` and
must key every write by ``record.id``.
"""

from __future__ import annotations

import logging
from uuid import UUID

from parley.exceptions import MalformedIdentifierError, SurveyNotFoundError
from parley.identifiers.classifier import IdentifierKind, classify
from parley.store import Eq, IEq, Or, Predicate, RecordStore
from parley.surveys.schemas import SurveyRecord

logger = logging.getLogger(__name__)

SURVEYS = "surveys"


def lookup_predicate(raw: str, *, reject_ambiguous: bool = False) -> Predicate:
    """Pick the lookup for ``raw`` based on its shape."""
    kind = classify(raw)
    if kind is IdentifierKind.UUID:
        return Eq("id", UUID(raw))
    if kind is IdentifierKind.SHORT_CODE:
        return IEq("short_code", raw)
    if reject_ambiguous:
        logger.warning("Rejected survey identifier %r: neither UUID nor short code", raw)
        raise MalformedIdentifierError(raw)
    logger.warning("Survey identifier %r matches neither format; matching id or short code", raw)
    # One combined query, not two attempts in sequence.
    return Or(Eq("id", raw), IEq("short_code", raw))


async def resolve_survey(
    store: RecordStore,
    raw: str,
    *,
    reject_ambiguous: bool = False,
) -> SurveyRecord:
    """Resolve ``raw`` (UUID, short code, or anything else) to a survey.

    Raises:
        SurveyNotFoundError: nothing matched. Callers must not write anything.
        MalformedIdentifierError: ``raw`` is ambiguous and strict mode is on.
    """
    predicate = lookup_predicate(raw, reject_ambiguous=reject_ambiguous)
    row = await store.find_one(SURVEYS, predicate)
    if row is None:
        raise SurveyNotFoundError(raw)
    return SurveyRecord.model_validate(row)
