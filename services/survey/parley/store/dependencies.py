from collections.abc import AsyncGenerator

from fastapi import Request

from parley.database import get_session_factory
from parley.store.base import RecordStore
from parley.store.sql import SqlRecordStore
from shared.database.postgres import session_scope


async def get_store(request: Request) -> AsyncGenerator[RecordStore, None]:
    """One store per request; SQL-backed stores commit when the request succeeds."""
    store = getattr(request.app.state, "store", None)
    if store is not None:
        yield store
        return
    async with session_scope(get_session_factory()) as session:
        yield SqlRecordStore(session)
