"""Pagination service -- the store-agnostic contract consumed by the HTTP routes."""

from datetime import datetime

from bankpage.common.models import Bank
from bankpage.store.bank_store import BankStore


class PaginationService:
    """Stateless next/previous paging; every call takes a fresh cursor from the caller."""

    def __init__(self, store: BankStore) -> None:
        self.store = store

    async def next_page(self, cursor: datetime) -> Bank:
        return await self.store.find_next(cursor)

    async def previous_page(self, cursor: datetime) -> Bank:
        return await self.store.find_previous(cursor)
