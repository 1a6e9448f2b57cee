"""Session state holder that recomputes derived tip values on every write."""
import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from tipsplit.core import (
    ZERO,
    calculate_tip,
    calculate_total_per_person,
    parse_bill_amount,
    tip_percent_from_fraction,
)

logger = logging.getLogger(__name__)

MIN_SPLIT = 1
MAX_SPLIT = 100


@dataclass(frozen=True)
class TipSnapshot:
    bill_amount: Decimal
    is_valid_bill: bool
    tip_amount: Decimal
    total_per_person: Decimal
    split_count: int
    tip_percent: int


def _clamp_fraction(value) -> float:
    try:
        f = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(f):
        return 0.0
    return min(max(f, 0.0), 1.0)


class TipEngine:
    """Holds bill text, split count and tip fraction for one session.

    Every mutator recomputes the derived values (parse, validity, tip,
    total) before returning, so `snapshot()` always reflects all prior
    writes. Bad input never raises: unparseable bills degrade to zero and
    out-of-range split counts are ignored.
    """

    def __init__(self, bill_text: str = "", split_count: int = MIN_SPLIT, tip_fraction: float = 0.0):
        self.bill_text = ""
        self.split_count = MIN_SPLIT
        self.tip_fraction = 0.0
        self._listeners: List[Callable[[TipSnapshot], None]] = []
        self._snapshot = self._recompute()
        self.set_bill_text(bill_text)
        self.set_split_count(split_count)
        self.set_tip_fraction(tip_fraction)

    @classmethod
    def from_state(cls, state: Optional[Dict]) -> "TipEngine":
        """Rebuild an engine from a `state()` dict, e.g. one read back from a cookie."""
        state = state or {}
        return cls(
            bill_text=state.get("bill_text", ""),
            split_count=state.get("split_count", MIN_SPLIT),
            tip_fraction=state.get("tip_fraction", 0.0),
        )

    def state(self) -> Dict:
        return {
            "bill_text": self.bill_text,
            "split_count": self.split_count,
            "tip_fraction": self.tip_fraction,
        }

    def _recompute(self) -> TipSnapshot:
        bill_amount = parse_bill_amount(self.bill_text)
        is_valid = bill_amount > 0
        tip_percent = tip_percent_from_fraction(self.tip_fraction)
        if is_valid:
            tip_amount = calculate_tip(bill_amount, tip_percent)
            total = calculate_total_per_person(bill_amount, self.split_count, tip_percent)
            if not (tip_amount.is_finite() and total.is_finite()):
                logger.debug(f"Bill overflows the decimal range at {tip_percent}%; treating as invalid")
                is_valid = False
        if not is_valid:
            tip_amount = ZERO
            total = ZERO
        return TipSnapshot(
            bill_amount=bill_amount,
            is_valid_bill=is_valid,
            tip_amount=tip_amount,
            total_per_person=total,
            split_count=self.split_count,
            tip_percent=tip_percent,
        )

    def _changed(self) -> None:
        self._snapshot = self._recompute()
        logger.debug(f"Recomputed tip state: {self._snapshot}")
        for listener in list(self._listeners):
            listener(self._snapshot)

    def set_bill_text(self, text) -> None:
        text = "" if text is None else str(text)
        if text == self.bill_text:
            return
        self.bill_text = text
        self._changed()

    def set_split_count(self, n) -> bool:
        """Set the split count; values outside [1, 100] are ignored. Returns True if it changed.

        Accepts anything that is a whole number (`5`, `"5"`, `5.0`); other
        input is ignored like an out-of-range count.
        """
        try:
            count = int(n)
        except (TypeError, ValueError, OverflowError):
            logger.debug(f"Rejected non-numeric split count {n!r}")
            return False
        if isinstance(n, float) and count != n:
            logger.debug(f"Rejected fractional split count {n!r}")
            return False
        n = count
        if not MIN_SPLIT <= n <= MAX_SPLIT:
            logger.debug(f"Rejected split count {n}; keeping {self.split_count}")
            return False
        if n == self.split_count:
            return False
        self.split_count = n
        self._changed()
        return True

    def increment_split(self) -> bool:
        return self.set_split_count(self.split_count + 1)

    def decrement_split(self) -> bool:
        return self.set_split_count(self.split_count - 1)

    def set_tip_fraction(self, value) -> None:
        f = _clamp_fraction(value)
        if f == self.tip_fraction:
            return
        self.tip_fraction = f
        self._changed()

    def reset(self) -> None:
        self.bill_text = ""
        self.split_count = MIN_SPLIT
        self.tip_fraction = 0.0
        self._changed()

    def snapshot(self) -> TipSnapshot:
        return self._snapshot

    def subscribe(self, listener: Callable[[TipSnapshot], None]) -> Callable[[], None]:
        """Call `listener(snapshot)` after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Input events from the rendering layer
    on_bill_text_changed = set_bill_text
    on_split_increment = increment_split
    on_split_decrement = decrement_split
    on_tip_fraction_changed = set_tip_fraction
