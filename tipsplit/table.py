"""Tip reference table: per-person totals at every slider stop."""
import io
import logging
from decimal import Decimal
from typing import Iterable, Optional

import pandas as pd

from tipsplit.core import to_cents
from tipsplit.display import slider_stops
from tipsplit.engine import TipEngine

logger = logging.getLogger(__name__)

SHEET_NAME = "Tip Table"


def _cents(value: Decimal) -> float:
    return float(to_cents(value))


def tip_table(bill_text, split_count: int = 1, fractions: Optional[Iterable[float]] = None) -> pd.DataFrame:
    """Build a table of tip and per-person total for each tip fraction.

    Args:
        bill_text: Raw bill input, parsed the same way the engine parses it
        split_count: Number of people; out-of-range values keep the default of 1
        fractions: Tip fractions to tabulate. Defaults to the slider stops.

    Returns:
        DataFrame with columns ['Tip %', 'Tip Amount', 'Total Per Person'].
        An invalid bill yields zero amounts on every row.
    """
    engine = TipEngine(bill_text=bill_text, split_count=split_count)
    rows = []
    for fraction in (slider_stops() if fractions is None else fractions):
        engine.set_tip_fraction(fraction)
        snap = engine.snapshot()
        rows.append({
            "Tip %": snap.tip_percent,
            "Tip Amount": _cents(snap.tip_amount),
            "Total Per Person": _cents(snap.total_per_person),
        })

    df = pd.DataFrame(rows, columns=["Tip %", "Tip Amount", "Total Per Person"])
    logger.info(f"Built tip table with {len(df)} rows for split {engine.split_count}")
    return df


def tip_table_excel(df: pd.DataFrame) -> bytes:
    """Write the table to an in-memory .xlsx workbook and return its bytes."""
    output_io = io.BytesIO()
    with pd.ExcelWriter(output_io, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
    return output_io.getvalue()
