from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brostok.database import Base


class StockOperation(str, PyEnum):
    IN = "in"
    OUT = "out"
    ADJUST = "adjust"

    @property
    def label(self) -> str:
        return OPERATION_LABELS[self]


OPERATION_LABELS = {
    StockOperation.IN: "Masuk",
    StockOperation.OUT: "Keluar",
    StockOperation.ADJUST: "Penyesuaian",
}


class StockHistoryEntry(Base):
    """Audit record of one stock operation. Never updated after insert."""

    __tablename__ = "stock_history"

    # Insertion order; newest first is id descending
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    variant_id: Mapped[int] = mapped_column(Integer, ForeignKey("variants.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    quantity_change: Mapped[int] = mapped_column(Integer, nullable=False)  # signed delta
    operation: Mapped[str] = mapped_column(String, nullable=False, index=True)  # in, out, adjust
    note: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), index=True)

    variant: Mapped["Variant"] = relationship("Variant")  # noqa: F821

    @property
    def operation_label(self) -> str:
        return StockOperation(self.operation).label
