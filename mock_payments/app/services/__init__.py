from .classifier import Outcome, OutcomeClassifier, weighted_choice
from .payments import PaymentService, validate_payment_request
from .repository import TransactionRepository

__all__ = [
    "Outcome",
    "OutcomeClassifier",
    "PaymentService",
    "TransactionRepository",
    "validate_payment_request",
    "weighted_choice",
]
