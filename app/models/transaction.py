from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Index, Integer, String

from app.database.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)

    # ISO "YYYY-MM-DD" text; month buckets and ordering compare it lexically
    date = Column(String, nullable=False)
    reference = Column(String, nullable=False)
    type = Column(String, nullable=False)
    account = Column(String, nullable=False)

    debit = Column(Float, nullable=False, default=0)
    credit = Column(Float, nullable=False, default=0)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_transactions_type_date", "type", "date"),
        Index("idx_transactions_date", "date"),
        # ids are never reused after a delete
        {"sqlite_autoincrement": True},
    )


__all__ = ["Transaction"]
