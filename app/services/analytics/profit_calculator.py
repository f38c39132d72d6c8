import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from app.schemas.analytics import DailyBucket, DailyProfit, DateRange, SaleLine, SaleLineRecord
from app.services.analytics.date_normalizer import MalformedTimestamp, parse_sale_timestamp, resolve_date_range
from app.services.analytics.month_calendar import build_month_skeleton
from app.services.analytics.sources import SalesDataSource

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal('0.01')

# (upper bound on sale price, share of the sale price assumed to be cost)
COST_RATIO_TIERS = (
    (Decimal('1.00'), Decimal('0.69')),
    (Decimal('2.00'), Decimal('0.75')),
)
DEFAULT_COST_RATIO = Decimal('0.80')


class MalformedSaleRecord(MalformedTimestamp):
    """A stored sale line whose sale date cannot be parsed."""


def impute_cost_price(sale_price: Decimal) -> Decimal:
    """Estimate a purchase price for a product whose cost was never recorded."""
    for ceiling, ratio in COST_RATIO_TIERS:
        if sale_price <= ceiling:
            return sale_price * ratio
    return sale_price * DEFAULT_COST_RATIO


def effective_cost_price(line: SaleLine) -> Decimal:
    """Recorded cost price, or the imputed one when it is zero."""
    if line.unit_cost_price == 0:
        return impute_cost_price(line.unit_sale_price)
    return line.unit_cost_price


def to_sale_line(record: SaleLineRecord) -> SaleLine:
    return SaleLine(
        product_id=record.product_id,
        quantity=record.quantity,
        unit_sale_price=record.sale_price,
        unit_cost_price=record.cost_price,
        sale_timestamp=parse_sale_timestamp(record.sale_date)
    )


def format_amount(value: Decimal) -> str:
    rounded = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = rounded.copy_abs()
    return str(rounded)


class ProfitCalculator:
    """Daily gross and net profit over a date window."""

    @staticmethod
    def aggregate_daily_profit(
        records: Iterable[SaleLineRecord],
        date_range: DateRange
    ) -> List[DailyProfit]:
        """Accumulate sale lines into one bucket per calendar day.

        Args:
            records: All sale lines known to the store, in any order
            date_range: Inclusive window; lines outside it are skipped

        Returns:
            Every day of the start month in order, followed by any other days
            in the window that had sales, in the order they were first seen.
            Totals are rounded to two decimals only here, at output.
        """
        buckets = build_month_skeleton(date_range.start)
        seen = kept = 0

        for record in records:
            seen += 1
            try:
                line = to_sale_line(record)
            except MalformedTimestamp as e:
                raise MalformedSaleRecord(f"Sale line for product {record.product_id}: {e}") from e
            if not date_range.contains(line.sale_timestamp):
                continue
            kept += 1

            cost_price = effective_cost_price(line)
            key = line.sale_timestamp.date().isoformat()
            bucket = buckets.get(key)
            if bucket is None:
                bucket = buckets[key] = DailyBucket(date=key)

            bucket.gross_profit += line.unit_sale_price * line.quantity
            bucket.net_profit += (line.unit_sale_price - cost_price) * line.quantity

        logger.debug(f"Aggregated {kept} of {seen} sale lines into {len(buckets)} daily buckets")

        return [
            DailyProfit(
                date=bucket.date,
                gross_profit=format_amount(bucket.gross_profit),
                net_profit=format_amount(bucket.net_profit)
            ) for bucket in buckets.values()
        ]

    @staticmethod
    async def compute_profit_report(
        source: SalesDataSource,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[DailyProfit]:
        """Profit calendar for "MM/DD/YYYY" bounds, defaulting to the current month.

        Raises:
            MalformedTimestamp: if a bound cannot be parsed
            MalformedSaleRecord: if a stored sale date cannot be parsed
        """
        date_range = resolve_date_range(start_date, end_date, today=today)
        logger.debug(f"Computing profit report from {date_range.start} to {date_range.end}")

        records = await source.fetch_sale_lines()
        return ProfitCalculator.aggregate_daily_profit(records, date_range)
