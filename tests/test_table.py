"""Tests for the tip reference table."""
import io
import pandas as pd

from tipsplit.table import SHEET_NAME, tip_table, tip_table_excel


def test_tip_table_covers_slider_stops():
    df = tip_table("200", 4)

    assert list(df.columns) == ["Tip %", "Tip Amount", "Total Per Person"]
    assert df["Tip %"].tolist() == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    row = df[df["Tip %"] == 20].iloc[0]
    assert row["Tip Amount"] == 40.0
    assert row["Total Per Person"] == 60.0


def test_tip_table_custom_fractions():
    df = tip_table("50", 2, fractions=[0.15, 0.18])
    assert df["Tip %"].tolist() == [15, 18]
    assert df["Total Per Person"].tolist() == [28.75, 29.5]


def test_tip_table_invalid_bill_is_all_zero():
    df = tip_table("abc", 3)
    assert len(df) == 11
    assert (df["Tip Amount"] == 0).all()
    assert (df["Total Per Person"] == 0).all()


def test_tip_table_out_of_range_split_uses_one():
    df = tip_table("100", 0, fractions=[0.1])
    assert df["Total Per Person"].tolist() == [110.0]


def test_tip_table_excel_round_trip():
    df = tip_table("80", 2)
    out_df = pd.read_excel(io.BytesIO(tip_table_excel(df)), sheet_name=SHEET_NAME)

    assert list(out_df.columns) == ["Tip %", "Tip Amount", "Total Per Person"]
    assert len(out_df) == 11
    assert out_df["Total Per Person"].iloc[-1] == 80.0
