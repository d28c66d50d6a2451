"""Bank paging endpoints -- next/previous record relative to an update_at cursor."""

from fastapi import APIRouter, Depends, Query

from bankpage.api.deps import get_pagination_service
from bankpage.api.pagination import CURSOR_PARAM, parse_cursor
from bankpage.common.models import BankResponse
from bankpage.service.pagination import PaginationService

router = APIRouter()


@router.get("/banks/next", response_model=BankResponse)
async def next_bank(
    current_update_at: str | None = Query(default=None, alias=CURSOR_PARAM),
    service: PaginationService = Depends(get_pagination_service),
):
    """Return the bank updated immediately after ``current_update_at``."""
    cursor = parse_cursor(current_update_at)
    bank = await service.next_page(cursor)
    return BankResponse.model_validate(bank)


@router.get("/banks/previous", response_model=BankResponse)
async def previous_bank(
    current_update_at: str | None = Query(default=None, alias=CURSOR_PARAM),
    service: PaginationService = Depends(get_pagination_service),
):
    """Return the bank updated immediately before ``current_update_at``."""
    cursor = parse_cursor(current_update_at)
    bank = await service.previous_page(cursor)
    return BankResponse.model_validate(bank)
