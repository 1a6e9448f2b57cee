"""Tests for the command line interface."""
import io

from cli import main, run_interactive
from tipsplit.engine import TipEngine


def test_tip_command(capsys):
    assert main(["tip", "--bill", "50", "--split", "2", "--tip", "0.18"]) == 0
    out = capsys.readouterr().out
    assert "Total Per Person: $29.50" in out
    assert "Tip (18%): $9.00" in out
    assert "Split: 2" in out


def test_tip_command_invalid_bill(capsys):
    assert main(["tip", "--bill", "abc"]) == 0
    out = capsys.readouterr().out
    assert "Total Per Person: $0.00" in out
    assert "Split:" not in out


def test_tip_command_rejects_split_out_of_range(capsys):
    assert main(["tip", "--bill", "50", "--split", "0"]) == 2
    assert "between 1 and 100" in capsys.readouterr().err


def test_currency_option(capsys):
    main(["--currency", "€", "tip", "--bill", "10"])
    assert "€10.00" in capsys.readouterr().out


def test_interactive_session():
    out = io.StringIO()
    lines = ["bill 50", "+", "tip 0.18", "-", "-", "bogus", "show", "quit", "bill 99"]
    engine = TipEngine()

    run_interactive(engine, "$", lines, out)

    text = out.getvalue()
    assert "Unknown command: bogus" in text
    assert "Total Per Person: $29.50" in text
    # two decrements from 2 stop at 1; the line after quit is never read
    assert engine.state() == {"bill_text": "50", "split_count": 1, "tip_fraction": 0.18}
    assert text.rstrip().endswith("Tip (18%): $9.00")


def test_tip_command_huge_bill_does_not_crash(capsys):
    assert main(["tip", "--bill", "1e999999", "--tip", "0.5"]) == 0
    assert "Total Per Person: $0.00" in capsys.readouterr().out
