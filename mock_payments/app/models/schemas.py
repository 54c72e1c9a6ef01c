from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    """Body of ``POST /make-payment``.

    Every field is optional at the parsing stage so that a missing value is
    reported by the payment checks with the same messages as a bad value.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[Any] = Field(default=None, alias="userId")
    to_account_number: Optional[Union[str, int]] = Field(
        default=None, alias="toAccountNumber"
    )
    from_account_number: Optional[Union[str, int]] = Field(
        default=None, alias="fromAccountNumber"
    )
    amount: Optional[Union[str, int, float]] = None


class TransactionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transaction_id: int
    user_id: str
    to_account_number: str
    from_account_number: str
    amount: str
    created_date: int
    status: bool


class PaymentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: int
    message: str
    txn_detail: Union[str, dict[str, Any]] = Field(alias="txnDetail")


class CredentialsResponse(BaseModel):
    username: str
    password: str


class ErrorResponse(BaseModel):
    status: int
    message: str
