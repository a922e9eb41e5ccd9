"""
Schemas Pydantic para Reservation.
"""

from datetime import datetime

from pydantic import Field

from library_policy.models.enums import ReservationStatus
from library_policy.schemas.base import ValueRecord


class Reservation(ValueRecord):
    """Entrada na fila de reservas de um título."""
    id: str
    user_id: str
    book_id: str
    reserve_date: datetime | None = None
    queue_position: int = Field(1, ge=1)
    status: ReservationStatus = ReservationStatus.PENDING
