"""Tests for estimate display helpers."""

from datetime import date
from decimal import Decimal

from src.tax.calculator import TaxInput, compute_taxes
from src.tax.output import (
    format_currency,
    format_percent,
    quarterly_due_dates,
    quarterly_schedule,
    round_cents,
    summary_cards,
)


class TestFormatting:
    """Tests for currency and percent formatting."""

    def test_round_cents_half_up(self) -> None:
        """Half a cent rounds up."""
        assert round_cents(Decimal("8064.825")) == Decimal("8064.83")
        assert round_cents(Decimal("0.004")) == Decimal("0.00")

    def test_format_currency(self) -> None:
        """Amounts get a dollar sign, thousands separators and cents."""
        assert format_currency(Decimal("32259.3")) == "$32,259.30"
        assert format_currency(Decimal("0")) == "$0.00"
        assert format_currency(Decimal("1234567.891")) == "$1,234,567.89"

    def test_format_currency_negative(self) -> None:
        """Negative amounts put the sign before the dollar sign."""
        assert format_currency(Decimal("-1")) == "-$1.00"

    def test_format_percent(self) -> None:
        """Rates are shown as percentages without trailing zeros."""
        assert format_percent(Decimal("0.093")) == "9.3%"
        assert format_percent(Decimal("0.0699")) == "6.99%"
        assert format_percent(Decimal("0.11")) == "11%"
        assert format_percent(Decimal("0")) == "0%"


class TestQuarterlySchedule:
    """Tests for the installment schedule."""

    def test_due_dates(self) -> None:
        """Q4 falls in January of the following year."""
        assert quarterly_due_dates(2025) == (
            date(2025, 4, 15),
            date(2025, 6, 15),
            date(2025, 9, 15),
            date(2026, 1, 15),
        )

    def test_schedule_labels_and_amounts(self, california_input: TaxInput) -> None:
        """Each installment is labeled Q1-Q4 and formatted at the boundary."""
        result = compute_taxes(california_input)

        schedule = quarterly_schedule(result, 2025)

        assert [payment.label for payment in schedule] == ["Q1", "Q2", "Q3", "Q4"]
        assert all(payment.amount == Decimal("8064.825") for payment in schedule)
        assert all(payment.formatted_amount == "$8,064.83" for payment in schedule)
        assert schedule[3].due_date == date(2026, 1, 15)


class TestSummaryCards:
    """Tests for headline cards."""

    def test_cards(self, california_input: TaxInput) -> None:
        """Four cards in order, only the total highlighted."""
        result = compute_taxes(california_input)

        cards = summary_cards(result, 2025)

        assert [card.title for card in cards] == [
            "Self-Employment Tax",
            "Federal Income Tax",
            "State Income Tax",
            "Total Annual Tax",
        ]
        assert [card.highlight for card in cards] == [False, False, False, True]
        assert cards[0].formatted_amount == "$13,770.00"
        assert cards[1].description == "Based on 2025 tax brackets"
        assert cards[2].description == "Based on California tax rate (9.3%)"
        assert cards[3].formatted_amount == "$32,259.30"
        assert cards[3].amount == result.total_tax
