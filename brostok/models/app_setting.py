from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from brostok.database import Base


class AppSetting(Base):
    """Runtime-editable settings, one row per key."""

    __tablename__ = "app_settings"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(String, nullable=False)
