from pydantic import BaseModel, Field, field_validator


class CustomerRequest(BaseModel):
    """Customer making the reservation"""

    name: str = Field(..., min_length=1, max_length=100)
    id: str = Field(..., min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class CreateReservationRequest(BaseModel):
    """Reservation request model"""

    customer: CustomerRequest
    sequence: int = Field(..., description="1-based position of the showing in the day")
    ticket_amount: int = Field(..., description="Number of tickets")
