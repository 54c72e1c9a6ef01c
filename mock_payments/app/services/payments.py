from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.errors import PaymentValidationError, StorageUnavailableError
from ..models import PaymentRequest, PaymentResponse, TransactionRecord
from ..models.db import epoch_millis
from .classifier import Outcome, OutcomeClassifier
from .repository import TransactionRepository


logger = logging.getLogger(__name__)

MINIMUM_AMOUNT = Decimal(100)
MAX_ROWID = 2**63 - 1

INVALID_USER_MESSAGE = "Invalid user id. Must be a uuid v4"
SAME_ACCOUNT_MESSAGE = "Sender and receiver cannot be same"
INVALID_AMOUNT_MESSAGE = "Amount must be greater than 100"

SUCCESS_MESSAGE = "Transaction completed successfully"
FAILURE_MESSAGE = (
    "Could not complete transacation. Service could be unavailable temporarily"
)
SUSPICIOUS_MESSAGE = (
    "Suspicious transaction. Please validate the transaction status with txn Id"
)
FETCHED_MESSAGE = "Data fetched successfully"


@dataclass(frozen=True)
class ValidatedPayment:
    user_id: str
    to_account_number: str
    from_account_number: str
    amount: str


def _is_uuid4(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parsed = UUID(value)
    except ValueError:
        return False
    # UUID() also accepts braces, urn: prefixes and bare hex
    return str(parsed) == value.lower() and parsed.version == 4


def _parse_amount(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def _amount_text(value: Any) -> str:
    # whole-number floats (150.0, 1e6) are stored without the trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def validate_payment_request(payload: PaymentRequest) -> ValidatedPayment:
    """Run the payment checks in order and stop at the first that fails."""
    if not _is_uuid4(payload.user_id):
        raise PaymentValidationError(INVALID_USER_MESSAGE)

    to_account = payload.to_account_number
    from_account = payload.from_account_number
    if to_account is None or from_account is None or str(to_account) == str(from_account):
        raise PaymentValidationError(SAME_ACCOUNT_MESSAGE)

    amount = _parse_amount(payload.amount)
    if amount is None or amount <= MINIMUM_AMOUNT:
        raise PaymentValidationError(INVALID_AMOUNT_MESSAGE)

    return ValidatedPayment(
        user_id=payload.user_id,
        to_account_number=str(to_account),
        from_account_number=str(from_account),
        amount=_amount_text(payload.amount),
    )


class PaymentService:
    def __init__(
        self,
        session: Session,
        classifier: OutcomeClassifier,
        repository: Optional[TransactionRepository] = None,
        stringify_txn_detail: bool = True,
    ) -> None:
        self.session = session
        self.classifier = classifier
        self.repository = repository or TransactionRepository(session)
        self.stringify_txn_detail = stringify_txn_detail

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _encode_detail(self, detail: dict[str, Any]) -> str | dict[str, Any]:
        if self.stringify_txn_detail:
            return json.dumps(detail)
        return detail

    def _record(self, transaction) -> dict[str, Any]:
        return TransactionRecord.model_validate(transaction).model_dump()

    def _storage_failure(self, exc: SQLAlchemyError, action: str) -> StorageUnavailableError:
        self.session.rollback()
        logger.error("storage.unavailable", extra={"action": action, "error": str(exc)})
        return StorageUnavailableError("Transaction store is unavailable")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def make_payment(self, payload: PaymentRequest) -> PaymentResponse:
        try:
            payment = validate_payment_request(payload)
        except PaymentValidationError as exc:
            logger.info("payment.rejected", extra={"reason": str(exc)})
            raise

        outcome = self.classifier.draw()
        if outcome is Outcome.FAILURE:
            logger.info("payment.failed", extra={"user_id": payment.user_id})
            return PaymentResponse(
                status=int(Outcome.FAILURE),
                message=FAILURE_MESSAGE,
                txn_detail=self._encode_detail(
                    {
                        "txnDetails": None,
                        "status": int(Outcome.FAILURE),
                        "message": FAILURE_MESSAGE,
                    }
                ),
            )

        try:
            transaction_id = self.repository.insert(
                user_id=payment.user_id,
                to_account_number=payment.to_account_number,
                from_account_number=payment.from_account_number,
                amount=payment.amount,
                status=outcome is Outcome.SUCCESS,
                created_date=epoch_millis(),
            )
            rows = self.repository.fetch_by_id(transaction_id)
        except SQLAlchemyError as exc:
            raise self._storage_failure(exc, "insert") from exc

        detail: dict[str, Any] = self._record(rows[0]) if rows else {}
        detail["status"] = int(outcome)
        logger.info(
            "payment.recorded",
            extra={"transaction_id": transaction_id, "outcome": outcome.name},
        )
        return PaymentResponse(
            status=int(Outcome.SUCCESS),
            message=SUCCESS_MESSAGE if outcome is Outcome.SUCCESS else SUSPICIOUS_MESSAGE,
            txn_detail=self._encode_detail(detail),
        )

    def get_transaction_details(self, raw_id: str) -> dict[str, Any]:
        """Rows matching ``raw_id`` keyed by position, plus status and message.

        An unknown or non-integer id yields no rows rather than an error.
        """
        rows: list = []
        try:
            transaction_id: Optional[int] = int(raw_id)
        except ValueError:
            transaction_id = None

        if transaction_id is not None and 0 < transaction_id <= MAX_ROWID:
            try:
                rows = self.repository.fetch_by_id(transaction_id)
            except SQLAlchemyError as exc:
                raise self._storage_failure(exc, "fetch") from exc

        response: dict[str, Any] = {
            str(index): self._record(row) for index, row in enumerate(rows)
        }
        response["status"] = int(Outcome.SUCCESS)
        response["message"] = FETCHED_MESSAGE
        return response
