"""Formatting of engine output for display."""
from dataclasses import asdict, dataclass
from typing import List

from tipsplit.core import ZERO, to_cents
from tipsplit.engine import TipSnapshot

DEFAULT_CURRENCY = "$"

# Intermediate slider positions between 0.0 and 1.0, giving stops every 10%
SLIDER_STEPS = 9


def slider_stops() -> List[float]:
    intervals = SLIDER_STEPS + 1
    return [i / intervals for i in range(intervals + 1)]


def format_money(value, symbol: str = DEFAULT_CURRENCY) -> str:
    amount = to_cents(value)
    return f"{symbol}{amount:.2f}"


def format_percent(tip_percent: int) -> str:
    return f"{tip_percent}%"


@dataclass(frozen=True)
class TipView:
    bill_amount: str
    tip_amount: str
    total_per_person: str
    split_count: str
    tip_percent: str
    show_details: bool

    def to_dict(self) -> dict:
        return asdict(self)


def build_view(snapshot: TipSnapshot, symbol: str = DEFAULT_CURRENCY) -> TipView:
    """Turn a snapshot into display strings.

    `show_details` is False until the bill is valid; the split, tip and
    slider rows are hidden until then. An invalid bill (negative, zero or
    too large to compute with) is shown as zero.
    """
    return TipView(
        bill_amount=format_money(snapshot.bill_amount if snapshot.is_valid_bill else ZERO, symbol),
        tip_amount=format_money(snapshot.tip_amount, symbol),
        total_per_person=format_money(snapshot.total_per_person, symbol),
        split_count=str(snapshot.split_count),
        tip_percent=format_percent(snapshot.tip_percent),
        show_details=snapshot.is_valid_bill,
    )
