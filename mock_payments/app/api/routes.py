from typing import Any

from fastapi import APIRouter, Body, Depends

from ..core.config import Settings, get_settings
from ..core.dependencies import get_payment_service
from ..core.security import require_basic_auth
from ..models import CredentialsResponse, PaymentRequest, PaymentResponse
from ..services import Outcome, PaymentService


router = APIRouter(tags=["payments"])

@router.post(
    "/make-payment",
    response_model=PaymentResponse,
    dependencies=[Depends(require_basic_auth)],
)
def make_payment(
    payload: PaymentRequest = Body(...),
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse:
    return service.make_payment(payload)

@router.get(
    "/get-transaction-details/{transaction_id}",
    response_model=dict[str, Any],
    dependencies=[Depends(require_basic_auth)],
)
def get_transaction_details(
    transaction_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    return service.get_transaction_details(transaction_id)

meta_router = APIRouter(tags=["meta"])

@meta_router.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "OK"}

@meta_router.post("/get-credentials", response_model=CredentialsResponse)
def get_credentials(settings: Settings = Depends(get_settings)) -> CredentialsResponse:
    # Intentionally unauthenticated: clients fetch the shared Basic credentials here.
    return CredentialsResponse(
        username=settings.auth_username,
        password=settings.auth_password,
    )

@meta_router.get("/docs")
def read_docs() -> dict[str, Any]:
    return {
        "endpoints": [
            {
                "path": "/make-payment",
                "method": "POST",
                "auth": "basic",
                "requestBody": {
                    "userId": "bed66608-7b7f-4772-b646-b89cb6d7dc6b //must be uuid",
                    "toAccountNumber": "1092340293840 //cannot be same",
                    "fromAccountNumber": "1092340293841 //cannot be same",
                    "amount": "101 //must be greater than 100",
                },
            },
            {"path": "/get-transaction-details/:id", "method": "GET", "auth": "basic"},
            {"path": "/get-credentials", "method": "POST"},
            {"path": "/health", "method": "GET"},
            {
                "statusCodes": [
                    {"SUCCESS_CODE": [int(Outcome.SUCCESS), 200]},
                    {"FAILURE_CODE": [int(Outcome.FAILURE), 200]},
                    {"SUSPICIOUS_CODE": [int(Outcome.SUSPICIOUS), 200]},
                    {"VALIDATION_ERROR": [400, 400]},
                    {"UNAUTHORIZED": [401, 401]},
                    {"STORAGE_UNAVAILABLE": [503, 503]},
                ],
            },
        ],
    }

__all__ = ["router", "meta_router"]
