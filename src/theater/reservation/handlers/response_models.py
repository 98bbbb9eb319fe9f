from pydantic import BaseModel


class ReservationData(BaseModel):
    """Reservation response data"""

    customer_id: str
    customer_name: str
    sequence_of_day: int
    movie_title: str
    start_time: str
    audience_count: int
    final_showing_price: str
    total_fee: str
    currency: str


class SuccessResponse(BaseModel):
    """Success response"""

    status: str = "success"
    data: ReservationData


class ErrorResponse(BaseModel):
    """Error response"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
