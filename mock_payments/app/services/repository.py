from __future__ import annotations

from sqlmodel import Session, select

from ..models import TransactionModel


class TransactionRepository:
    """Thin data access layer around the SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(
        self,
        *,
        user_id: str,
        to_account_number: str,
        from_account_number: str,
        amount: str,
        status: bool,
        created_date: int,
    ) -> int:
        transaction = TransactionModel(
            user_id=user_id,
            to_account_number=to_account_number,
            from_account_number=from_account_number,
            amount=amount,
            status=status,
            created_date=created_date,
        )
        self.session.add(transaction)
        self.session.commit()
        return transaction.transaction_id

    def fetch_by_id(self, transaction_id: int) -> list[TransactionModel]:
        stmt = select(TransactionModel).where(
            TransactionModel.transaction_id == transaction_id
        )
        return list(self.session.exec(stmt))
