import decimal
import strawberry

Numeric = strawberry.scalar(
    decimal.Decimal,
    name="Numeric",
    description="Decimal number",
    serialize=lambda v: str(v),
    parse_value=lambda v: decimal.Decimal(v),
)
