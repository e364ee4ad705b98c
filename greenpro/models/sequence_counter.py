"""SequenceCounter model: named, monotonically increasing integers."""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from greenpro.database.base import Base


class SequenceCounter(Base):
    __tablename__ = "sequence_counters"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False, server_default="0")

    def __repr__(self) -> str:
        return f"<SequenceCounter name={self.name} value={self.value}>"
