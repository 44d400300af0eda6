from sqlalchemy import String, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime

from airline_tickets.models.base import Base
from airline_tickets.models.enums import FlightDestination

DEFAULT_FLIGHT_STATUS = "pending"

# Shared by both city columns so Postgres gets a single enum type.
flight_destination_type = Enum(FlightDestination, name="flight_destination")

class Flight(Base):
    __tablename__ = "flights"

    flight_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    flight_from: Mapped[FlightDestination] = mapped_column(flight_destination_type, index=True)
    flight_to: Mapped[FlightDestination] = mapped_column(flight_destination_type, index=True)
    flight_date: Mapped[datetime] = mapped_column(DateTime)
    num_of_layovers: Mapped[int] = mapped_column(Integer, default=0)
    # Decremented by booking, which lives outside this service.
    num_of_seats: Mapped[int] = mapped_column(Integer)
    flight_status: Mapped[str] = mapped_column(String(32), default=DEFAULT_FLIGHT_STATUS)
