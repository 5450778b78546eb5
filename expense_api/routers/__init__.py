# expense_api/routers/__init__.py
# Router package initialization

"""
API Routers for the Expense API.

- expenses: expense CRUD operations, mounted under /api
"""
