# expense_api/repository.py
# Persistence operations for expenses

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from . import schemas
from .errors import PersistenceError
from .models import expenses_table

logger = logging.getLogger(__name__)


class ExpenseRepository:
    """Runs one statement per call against the ``expenses`` table.

    The engine is passed in so tests can hand over an in-memory database.
    Every call checks a connection out of the pool and returns it before
    the method exits. Values are always sent as bound parameters.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list(self, category: Optional[str] = None) -> List[schemas.Expense]:
        stmt = select(
            expenses_table.c.id,
            expenses_table.c.amount,
            expenses_table.c.description,
            expenses_table.c.category,
            expenses_table.c.created_at,
        )
        if category:
            stmt = stmt.where(expenses_table.c.category == category)
        # id breaks ties between rows created within the same clock tick
        stmt = stmt.order_by(expenses_table.c.created_at.desc(), expenses_table.c.id.desc())

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
            return [schemas.Expense.model_validate(dict(row)) for row in rows]
        except (SQLAlchemyError, ValidationError) as exc:
            raise PersistenceError("list", exc) from exc

    def create(self, amount: int, description: str, category: str) -> None:
        stmt = insert(expenses_table).values(
            amount=amount, description=description, category=category
        )
        self._execute("create", stmt)

    def update(self, expense_id: int, amount: int, description: str, category: str) -> None:
        stmt = (
            update(expenses_table)
            .where(expenses_table.c.id == expense_id)
            .values(amount=amount, description=description, category=category)
        )
        rowcount = self._execute("update", stmt)
        if rowcount == 0:
            logger.debug("Update matched no expense with id %s", expense_id)

    def delete(self, expense_id: int) -> None:
        stmt = delete(expenses_table).where(expenses_table.c.id == expense_id)
        self._execute("delete", stmt)

    def _execute(self, operation: str, stmt) -> int:
        try:
            with self.engine.begin() as conn:
                return conn.execute(stmt).rowcount
        except SQLAlchemyError as exc:
            raise PersistenceError(operation, exc) from exc
