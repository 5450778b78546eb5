# expense_api/schemas.py
# Request and response schemas (Pydantic)

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ExpenseIn(BaseModel):
    """Body of POST and PUT requests. All three fields are required."""
    amount: StrictInt = Field(..., ge=INT64_MIN, le=INT64_MAX)
    description: StrictStr = Field(..., min_length=1)
    category: StrictStr = Field(..., min_length=1)

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, value: int) -> int:
        # zero counts as missing; negative amounts are allowed
        if value == 0:
            raise ValueError("amount is required and must not be zero")
        return value


class Expense(BaseModel):
    """An expense as stored and returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: int
    description: str
    category: str
    created_at: datetime


class Message(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
