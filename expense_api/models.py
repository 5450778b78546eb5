# expense_api/models.py
# Table mapping for the expenses table

from sqlalchemy import BigInteger, Column, DateTime, Integer, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# BIGINT on PostgreSQL; SQLite only autoincrements a plain INTEGER primary key.
_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(_ID_TYPE, primary_key=True, autoincrement=True)
    amount = Column(BigInteger, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False)

    # Assigned by the database, never by clients
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


expenses_table = Expense.__table__
