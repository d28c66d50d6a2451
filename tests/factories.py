"""Row builders shared across test modules."""

from datetime import UTC, datetime

from bankpage.common.models import Bank

JAN_1 = datetime(2024, 1, 1, tzinfo=UTC)
JAN_2 = datetime(2024, 1, 2, tzinfo=UTC)
JAN_3 = datetime(2024, 1, 3, tzinfo=UTC)


def make_bank(bank_id: int, update_at: datetime, **overrides) -> Bank:
    """Build a Bank row; only ``id`` and ``update_at`` matter for paging."""
    values = {
        "id": bank_id,
        "code": f"B{bank_id:03d}",
        "name": f"Bank {bank_id}",
        "currency": "USD",
        "url": f"https://bank{bank_id}.example.com",
        "create_at": JAN_1,
        "create_by": "seed",
        "update_at": update_at,
        "update_by": "seed",
    }
    values.update(overrides)
    return Bank(**values)
