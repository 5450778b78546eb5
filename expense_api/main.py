# expense_api/main.py
# FastAPI app factory and core setup

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .errors import register_error_handlers
from .repository import ExpenseRepository
from .routers import expenses


def create_app(repository: ExpenseRepository, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around an already-connected repository."""
    app = FastAPI(
        title="Expense API",
        description="CRUD service for expenses",
        version="1.0.0",
    )
    app.state.repository = repository

    # --- CORS Middleware ---
    origins = list(settings.cors_origins) if settings else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # --- Include Routers ---
    app.include_router(expenses.router, prefix="/api")

    @app.get("/health", tags=["system"])
    def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "expense-api",
        }

    return app
