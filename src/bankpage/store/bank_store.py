"""Single-row cursor lookups over the ``bank`` table."""

import asyncio
from datetime import datetime

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bankpage.common.errors import BankNotFoundError, StoreError
from bankpage.common.models import Bank, as_utc

logger = structlog.get_logger()

DEFAULT_QUERY_TIMEOUT = 5.0


class BankStore:
    def __init__(self, session: AsyncSession, query_timeout: float = DEFAULT_QUERY_TIMEOUT) -> None:
        self.session = session
        self.query_timeout = query_timeout

    async def find_next(self, cursor: datetime) -> Bank:
        """Return the bank with the smallest ``update_at`` strictly after ``cursor``."""
        cursor = as_utc(cursor)
        stmt = (
            select(Bank)
            .where(Bank.update_at > cursor)
            .order_by(Bank.update_at.asc(), Bank.id.asc())
            .limit(1)
        )
        return await self._fetch_one(stmt, cursor, direction="next")

    async def find_previous(self, cursor: datetime) -> Bank:
        """Return the bank with the largest ``update_at`` strictly before ``cursor``."""
        cursor = as_utc(cursor)
        stmt = (
            select(Bank)
            .where(Bank.update_at < cursor)
            .order_by(Bank.update_at.desc(), Bank.id.desc())
            .limit(1)
        )
        return await self._fetch_one(stmt, cursor, direction="previous")

    async def _fetch_one(self, stmt, cursor: datetime, direction: str) -> Bank:
        # CancelledError is not caught here: a dropped client must unwind
        # through the session context so the connection goes back to the pool.
        try:
            async with asyncio.timeout(self.query_timeout):
                result = await self.session.execute(stmt)
                bank: Bank | None = result.scalar_one_or_none()
        except TimeoutError as exc:
            logger.warning("bank_page_query_timeout", direction=direction, cursor=cursor.isoformat())
            raise StoreError(f"failed to get {direction} page bank: query timed out") from exc
        except (SQLAlchemyError, OSError) as exc:
            logger.error("bank_page_query_failed", direction=direction, cursor=cursor.isoformat(), exc_info=True)
            raise StoreError(f"failed to get {direction} page bank: {exc}") from exc

        if bank is None:
            logger.info("bank_page_not_found", direction=direction, cursor=cursor.isoformat())
            raise BankNotFoundError(f"no {direction} page found")

        logger.debug("bank_page_found", direction=direction, cursor=cursor.isoformat(), bank_id=bank.id)
        return bank

