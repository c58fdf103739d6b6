"""Domain exceptions."""


class RecordNotFound(Exception):
    """A referenced record does not exist."""

    def __init__(self, entity: str, record_id: int | None = None):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class WelfareStoreError(Exception):
    """The session store could not be read during a welfare check."""


class BookingRejected(Exception):
    """A booking failed welfare validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Welfare validation failed")
