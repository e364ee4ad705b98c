"""Atomic named counters backed by the ``sequence_counters`` table.

Each increment is a single ``INSERT ... ON CONFLICT DO UPDATE ... RETURNING``
statement, so concurrent callers never observe the same value. Counters are
created on first use.
"""

from __future__ import annotations

import logging

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from greenpro.exceptions import SequenceAllocationException
from greenpro.models.sequence_counter import SequenceCounter
from greenpro.modules.sequence.constants import PLANT_SEQUENCE, PRODUCT_SEQUENCE

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _upsert_statement(dialect_name: str, name: str, step: int, seed: int):
    try:
        insert = _UPSERT_DIALECTS[dialect_name]
    except KeyError:
        raise SequenceAllocationException(
            f"Sequence counters are not supported on the '{dialect_name}' dialect"
        ) from None

    stmt = insert(SequenceCounter).values(name=name, value=seed + step)
    return stmt.on_conflict_do_update(
        index_elements=[SequenceCounter.name],
        set_={"value": SequenceCounter.value + step},
    ).returning(SequenceCounter.value)


class SequenceAllocator:
    """Hands out strictly increasing integers per counter name.

    ``next_value`` runs in its own short transaction and commits immediately:
    a value handed to a registration that later aborts is not reclaimed, so
    gaps are expected. ``advance`` runs inside the caller's transaction
    instead and is rolled back with it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def next_value(self, name: str) -> int:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    return await self.advance(session, name)
        except SequenceAllocationException:
            raise
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Sequence error for %s: %s", name, exc)
            raise SequenceAllocationException(
                f"Failed to get next sequence value for {name}: {exc}"
            ) from exc

    @staticmethod
    async def advance(session: AsyncSession, name: str, step: int = 1, seed: int = 0) -> int:
        """Add *step* to counter *name* and return the new value.

        A missing counter is created at ``seed + step``. The caller owns the
        transaction; the row stays locked until it commits or rolls back.
        """
        if step < 1:
            raise ValueError("step must be a positive integer")

        dialect_name = session.get_bind().dialect.name
        try:
            result = await session.execute(_upsert_statement(dialect_name, name, step, seed))
        except SQLAlchemyError as exc:
            logger.error("Sequence error for %s: %s", name, exc)
            raise SequenceAllocationException(
                f"Failed to advance sequence {name}: {exc}"
            ) from exc
        return result.scalar_one()

    async def product_id(self) -> int:
        return await self.next_value(PRODUCT_SEQUENCE)

    async def plant_id(self) -> int:
        return await self.next_value(PLANT_SEQUENCE)
