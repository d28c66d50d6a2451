"""SQLAlchemy ORM models and Pydantic schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, field_serializer
from sqlalchemy import BigInteger, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ── SQLAlchemy ORM ──────────────────────────────────────────────────────


class Base(DeclarativeBase):
    pass


class Bank(Base):
    __tablename__ = "bank"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer(), "sqlite"), primary_key=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    create_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    create_by: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    update_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    update_by: Mapped[str] = mapped_column(String(200), nullable=False, default="")

    __table_args__ = (
        Index("idx_bank_update_at_id", "update_at", "id"),
        {"comment": "Bank registry, paged by update_at"},
    )


# ── Pydantic Schemas ────────────────────────────────────────────────────


def as_utc(value: datetime) -> datetime:
    """Convert to UTC; naive values are taken as UTC already.

    Offsets that push a value past year 1 or 9999 clamp to the UTC
    ``datetime.min`` / ``datetime.max``, which order the same way.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError:
        bound = datetime.min if value.year == datetime.min.year else datetime.max
        return bound.replace(tzinfo=UTC)


def to_rfc3339(value: datetime) -> str:
    """Render a timestamp as RFC3339, using ``Z`` for UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    rendered = value.isoformat()
    if rendered.endswith("+00:00"):
        rendered = rendered[:-6] + "Z"
    return rendered


class BankResponse(BaseModel):
    id: int
    code: str
    name: str
    currency: str
    url: str
    create_at: datetime
    create_by: str
    update_at: datetime
    update_by: str

    model_config = {"from_attributes": True}

    @field_serializer("create_at", "update_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_rfc3339(value)
