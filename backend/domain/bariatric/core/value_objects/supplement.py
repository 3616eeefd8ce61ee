"""SupplementScheduleItem value object."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SupplementScheduleItem:
    """A supplement prescribed after bariatric surgery.

    Attributes:
        name: Supplement name
        dose: Dose per intake
        frequency: How often to take it
        timing: Times of day ("HH:MM"), in order
        start_day: Post-op day from which the supplement is due
        notes: Administration notes
    """

    name: str
    dose: str
    frequency: str
    timing: Tuple[str, ...]
    start_day: int
    notes: str

    def is_due(self, days_since_surgery: int) -> bool:
        """Whether the supplement is due on the given post-op day."""
        return days_since_surgery >= self.start_day
