"""Response bodies for the order endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class SubmitOrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: int
    payment_link: str = Field(alias="paymentLink")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
