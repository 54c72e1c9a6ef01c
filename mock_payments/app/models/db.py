from __future__ import annotations
import time
from typing import Optional
from sqlmodel import Field, SQLModel


def epoch_millis() -> int:
    return int(time.time() * 1000)


class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"
    # AUTOINCREMENT keeps sqlite from handing out an id twice
    __table_args__ = {"sqlite_autoincrement": True}

    transaction_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str
    to_account_number: str
    from_account_number: str
    amount: str
    created_date: int = Field(default_factory=epoch_millis)
    status: bool
