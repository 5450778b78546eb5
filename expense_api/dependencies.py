# expense_api/dependencies.py
# Shared FastAPI dependencies

from fastapi import Request

from .repository import ExpenseRepository


# ===== REPOSITORY DEPENDENCY =====
def get_repository(request: Request) -> ExpenseRepository:
    """Repository injected into the app at construction time."""
    return request.app.state.repository
