class RepositoryError(Exception):
    """Base for failures raised by a FlightRepository adapter."""

    pass


class StorageError(RepositoryError):
    """The underlying data store rejected or failed the operation."""

    pass


class UnknownError(RepositoryError):
    """Anything else that went wrong inside an adapter."""

    pass
