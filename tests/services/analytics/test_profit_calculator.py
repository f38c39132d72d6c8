import asyncio
from datetime import date, datetime
from decimal import Decimal

import pytest

from app.schemas.analytics import DateRange
from app.services.analytics.date_normalizer import MalformedTimestamp, resolve_date_range
from app.services.analytics.profit_calculator import (
    MalformedSaleRecord,
    ProfitCalculator,
    effective_cost_price,
    format_amount,
    impute_cost_price,
    to_sale_line
)

APRIL = resolve_date_range("04/01/2025", "04/30/2025")


def by_date(report):
    return {day.date: day for day in report}


@pytest.mark.parametrize("sale_price,expected", [
    ("0.50", "0.3450"),
    ("1.00", "0.6900"),
    ("1.01", "0.7575"),
    ("2.00", "1.5000"),
    ("2.01", "1.6080"),
    ("5.00", "4.0000"),
])
def test_impute_cost_price_tiers(sale_price, expected):
    """Imputed cost depends on which price tier the sale price falls in"""
    assert impute_cost_price(Decimal(sale_price)) == Decimal(expected)


def test_recorded_cost_price_is_used_as_is(sale_record):
    """A non-zero cost is never replaced, even when it exceeds the sale price"""
    line = to_sale_line(sale_record("04/01/2025, 10:00:00", "3.00", cost_price="4.50"))
    assert effective_cost_price(line) == Decimal("4.50")

    line = to_sale_line(sale_record("04/01/2025, 10:00:00", "3.00", cost_price="0.00"))
    assert effective_cost_price(line) == Decimal("2.40")


def test_format_amount_rounds_half_away_from_zero():
    assert format_amount(Decimal("2.345")) == "2.35"
    assert format_amount(Decimal("-2.345")) == "-2.35"
    assert format_amount(Decimal("0.005")) == "0.01"
    assert format_amount(Decimal("7")) == "7.00"
    assert format_amount(Decimal("-0.001")) == "0.00"


def test_daily_profit_example(sale_record):
    """Two lines on the first day, nothing on the second"""
    records = [
        sale_record("04/01/2025, 09:15:00", "10.00", cost_price="6.00", quantity=2),
        sale_record("04/01/2025, 18:40:12", "5.00", cost_price="0", quantity=1),
    ]
    date_range = resolve_date_range("04/01/2025", "04/02/2025")

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)
    days = by_date(report)

    assert days["2025-04-01"].gross_profit == "25.00"
    assert days["2025-04-01"].net_profit == "9.00"
    assert days["2025-04-02"].gross_profit == "0.00"
    assert days["2025-04-02"].net_profit == "0.00"

    # The rest of the start month is still reported
    assert len(report) == 30


def test_report_has_every_day_of_start_month(sale_record):
    records = [sale_record("02/14/2024, 12:00:00", "3.00", quantity=4)]
    date_range = resolve_date_range(today=date(2024, 2, 1))

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)

    assert [day.date for day in report] == [f"2024-02-{day:02d}" for day in range(1, 30)]
    assert by_date(report)["2024-02-14"].gross_profit == "12.00"


def test_lines_outside_range_are_skipped(sale_record):
    """Only lines between the first second and last second of the range count"""
    records = [
        sale_record("04/09/2025, 23:59:59", "100.00", cost_price="1.00"),
        sale_record("04/10/2025, 00:00:00", "2.00", cost_price="1.00", quantity=3),
        sale_record("04/12/2025, 23:59:59", "1.50", cost_price="1.00", quantity=2),
        sale_record("04/13/2025, 00:00:00", "100.00", cost_price="1.00"),
        sale_record("03/31/2025, 12:00:00", "100.00", cost_price="1.00"),
    ]
    date_range = resolve_date_range("04/10/2025", "04/12/2025")

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)

    total_gross = sum(Decimal(day.gross_profit) for day in report)
    assert total_gross == Decimal("9.00")
    assert by_date(report)["2025-04-10"].net_profit == "3.00"
    assert by_date(report)["2025-04-12"].net_profit == "1.00"
    assert by_date(report)["2025-04-09"].gross_profit == "0.00"
    assert "2025-03-31" not in by_date(report)


def test_accumulates_before_rounding(sale_record):
    """Per-line amounts are summed unrounded; rounding happens once per day"""
    # Each line nets 0.15 - 0.1035 = 0.0465
    records = [sale_record("04/03/2025, 1{}:00:00".format(i), "0.15") for i in range(3)]

    report = ProfitCalculator.aggregate_daily_profit(records, APRIL)

    assert by_date(report)["2025-04-03"].net_profit == "0.14"


def test_trailing_month_days_only_appear_with_sales(sale_record):
    """Days after the start month get a bucket only when something sold"""
    records = [
        sale_record("02/01/2025, 08:00:00", "2.50", quantity=2),
        sale_record("01/30/2025, 08:00:00", "1.00", cost_price="0.50"),
    ]
    date_range = resolve_date_range("01/30/2025", "02/02/2025")

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)
    dates = [day.date for day in report]

    assert len(report) == 32
    assert dates[:31] == [f"2025-01-{day:02d}" for day in range(1, 32)]
    assert dates[31] == "2025-02-01"
    assert "2025-02-02" not in dates
    assert report[31].gross_profit == "5.00"
    assert report[31].net_profit == "1.00"


def test_on_demand_buckets_keep_first_seen_order(sale_record):
    records = [
        sale_record("03/05/2025, 08:00:00", "1.00"),
        sale_record("02/20/2025, 08:00:00", "1.00"),
        sale_record("03/05/2025, 09:00:00", "1.00"),
    ]
    date_range = DateRange(start=datetime(2025, 1, 1), end=datetime(2025, 3, 31, 23, 59, 59))

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)

    assert [day.date for day in report[31:]] == ["2025-03-05", "2025-02-20"]
    assert report[31].gross_profit == "2.00"


def test_inverted_range_reports_zero_days(sale_record):
    records = [sale_record("04/07/2025, 12:00:00", "9.99", quantity=5)]
    date_range = resolve_date_range("04/10/2025", "04/05/2025")

    report = ProfitCalculator.aggregate_daily_profit(records, date_range)

    assert len(report) == 30
    assert all(day.gross_profit == "0.00" for day in report)


def test_compute_profit_report_uses_source(make_source, sale_record):
    source = make_source(sale_lines=[
        sale_record("06/04/2025, 10:59:36", "1.25", quantity=4),
    ])

    report = asyncio.run(ProfitCalculator.compute_profit_report(source, today=date(2025, 6, 20)))

    assert len(report) == 30
    assert by_date(report)["2025-06-04"].gross_profit == "5.00"
    assert by_date(report)["2025-06-04"].net_profit == "1.25"


def test_compute_profit_report_is_idempotent(make_source, sale_record):
    source = make_source(sale_lines=[
        sale_record("06/04/2025, 10:59:36", "1.25", quantity=4),
        sale_record("06/05/2025, 11:00:00", "3.10", cost_price="2.00"),
    ])

    first = asyncio.run(ProfitCalculator.compute_profit_report(source, "06/01/2025", "06/30/2025"))
    second = asyncio.run(ProfitCalculator.compute_profit_report(source, "06/01/2025", "06/30/2025"))

    assert first == second


def test_compute_profit_report_fails_on_malformed_sale_date(make_source, sale_record):
    source = make_source(sale_lines=[sale_record("2025-06-04T10:59:36", "1.00")])

    with pytest.raises(MalformedSaleRecord):
        asyncio.run(ProfitCalculator.compute_profit_report(source, "06/01/2025", "06/30/2025"))


def test_malformed_bound_is_not_reported_as_stored_data(make_source, sale_record):
    source = make_source(sale_lines=[sale_record("06/04/2025, 10:59:36", "1.00")])

    with pytest.raises(MalformedTimestamp) as excinfo:
        asyncio.run(ProfitCalculator.compute_profit_report(source, "2025-06-01", None))
    assert not isinstance(excinfo.value, MalformedSaleRecord)
