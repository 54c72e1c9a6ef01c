from fastapi import Depends
from sqlmodel import Session

from ..services import Outcome, OutcomeClassifier, PaymentService, TransactionRepository
from .config import Settings, get_settings
from .db import get_session

def get_classifier(settings: Settings = Depends(get_settings)) -> OutcomeClassifier:
    return OutcomeClassifier(
        {
            Outcome.SUCCESS: settings.success_weight,
            Outcome.FAILURE: settings.failure_weight,
            Outcome.SUSPICIOUS: settings.suspicious_weight,
        }
    )

def get_payment_service(
    session: Session = Depends(get_session),
    classifier: OutcomeClassifier = Depends(get_classifier),
    settings: Settings = Depends(get_settings),
) -> PaymentService:
    repository = TransactionRepository(session)
    return PaymentService(
        session,
        classifier,
        repository,
        stringify_txn_detail=settings.stringify_txn_detail,
    )
