# expense_api/routers/expenses.py
# Expense CRUD endpoints

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from .. import schemas
from ..dependencies import get_repository
from ..repository import ExpenseRepository

router = APIRouter(prefix="/expenses", tags=["expenses"])

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = schemas.INT64_MIN
_INT64_MAX = schemas.INT64_MAX

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": schemas.ErrorResponse},
}


def parse_expense_id(raw: str) -> int:
    """Parse a path id the lenient way: anything that is not an integer becomes 0.

    Values outside the signed 64-bit range are clamped to its bounds.
    """
    if not _INT_PATTERN.fullmatch(raw):
        return 0
    try:
        value = int(raw)
    except ValueError:
        # longer than the interpreter's int string limit
        return _INT64_MIN if raw.startswith("-") else _INT64_MAX
    return max(_INT64_MIN, min(_INT64_MAX, value))


# ===== EXPENSE CRUD =====

@router.get("", response_model=List[schemas.Expense], responses=_ERROR_RESPONSES)
def list_expenses(
    category: Optional[str] = Query(None, description="Exact category to filter by"),
    repository: ExpenseRepository = Depends(get_repository),
):
    """List expenses, newest first."""
    return repository.list(category)


@router.post(
    "",
    response_model=schemas.Message,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_expense(
    expense: schemas.ExpenseIn,
    repository: ExpenseRepository = Depends(get_repository),
):
    repository.create(expense.amount, expense.description, expense.category)
    return {"message": "Expense created"}


@router.put("/{expense_id}", response_model=schemas.Message, responses=_ERROR_RESPONSES)
def update_expense(
    expense_id: str,
    expense: schemas.ExpenseIn,
    repository: ExpenseRepository = Depends(get_repository),
):
    """Overwrite amount, description and category. Unknown ids still succeed."""
    repository.update(
        parse_expense_id(expense_id), expense.amount, expense.description, expense.category
    )
    return {"message": "Expense updated"}


@router.delete("/{expense_id}", response_model=schemas.Message, responses=_ERROR_RESPONSES)
def delete_expense(
    expense_id: str,
    repository: ExpenseRepository = Depends(get_repository),
):
    repository.delete(parse_expense_id(expense_id))
    return {"message": "Expense deleted"}
