"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bankpage.common.config import get_settings
from bankpage.service.pagination import PaginationService
from bankpage.store.bank_store import BankStore


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request from the pool created at startup."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_bank_store(db: AsyncSession = Depends(get_db)) -> BankStore:
    return BankStore(db, query_timeout=get_settings().query_timeout_seconds)


def get_pagination_service(store: BankStore = Depends(get_bank_store)) -> PaginationService:
    return PaginationService(store)
