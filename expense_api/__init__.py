"""Expense API: a small FastAPI service for expense CRUD over PostgreSQL."""

__version__ = "1.0.0"
