"""Exceptions raised by the age calculator core."""

import datetime


class InvalidRange(ValueError):
    """Raised when a birth instant lies after the instant it is measured against."""

    def __init__(self, birth: datetime.date, now: datetime.date) -> None:
        self.birth = birth
        self.now = now
        super().__init__(
            f"birth ({birth.isoformat()}) must not be after now ({now.isoformat()})."
        )
