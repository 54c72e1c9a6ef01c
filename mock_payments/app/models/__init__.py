from .db import Transaction as TransactionModel
from .schemas import (
    CredentialsResponse,
    ErrorResponse,
    PaymentRequest,
    PaymentResponse,
    TransactionRecord,
)

__all__ = [
    "CredentialsResponse",
    "ErrorResponse",
    "PaymentRequest",
    "PaymentResponse",
    "TransactionRecord",
    "TransactionModel",
]
