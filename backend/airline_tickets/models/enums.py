from enum import Enum

class FlightDestination(str, Enum):
    """Cities served by the airline. Stored by name in the flights table."""

    BEOGRAD = "BEOGRAD"
    NOVI_SAD = "NOVI_SAD"
    NIS = "NIS"
    KRALJEVO = "KRALJEVO"
    KRAGUJEVAC = "KRAGUJEVAC"
    SUBOTICA = "SUBOTICA"
