import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply the process-wide log format. Unknown level names fall back to INFO."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    # stdout, PaaS log collectors flag stderr lines as errors
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger("airline_tickets").setLevel(numeric)
