from decimal import Decimal, ROUND_HALF_UP, localcontext

from schema.quote import QuoteIn, QuoteOut
from util.enum import ShippingMode

RATE_PER_KG = {
    ShippingMode.air: Decimal("1.8"),
    ShippingMode.sea: Decimal("0.5"),
}
RATE_MULTIPLIER = 10
MINIMUM_ESTIMATE = 50


def estimate(weight: float, mode: ShippingMode) -> int:
    """Price estimate for a shipment, rounded half-up to a whole amount.

    ``weight`` must already be validated as positive and finite; any such
    weight, however large, yields an exact integer.
    """
    with localcontext() as ctx:
        raw = RATE_PER_KG[ShippingMode(mode)] * Decimal(str(weight)) * RATE_MULTIPLIER
        # quantize needs every integer digit to fit in the context precision
        ctx.prec = max(ctx.prec, raw.adjusted() + 2)
        rounded = raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(MINIMUM_ESTIMATE, int(rounded))


class QuoteOp:

    @staticmethod
    def quote(quote_data: QuoteIn, currency: str) -> QuoteOut:
        return QuoteOut(
            estimate=estimate(quote_data.weight, quote_data.mode),
            currency=currency,
        )
