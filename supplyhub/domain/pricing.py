# supplyhub/domain/pricing.py
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, Tuple

from supplyhub.domain.schemas import CartTotals
from supplyhub.utils.settings import COMMISSION_RATE

CENT = Decimal("0.01")
RATE = Decimal(COMMISSION_RATE)


def commission_for(subtotal: Decimal) -> Decimal:
    return (subtotal * RATE).quantize(CENT, rounding=ROUND_HALF_EVEN)


def compute_totals(lines: Iterable[Tuple[float, int]]) -> CartTotals:
    """
    Totals for (unit price, quantity) pairs.

    subtotal = sum(price * quantity)
    commission = round(subtotal * 3%, 2), half-cents go to even
    total = subtotal + commission
    """
    subtotal = sum(
        (Decimal(str(price)) * quantity for price, quantity in lines),
        Decimal("0.00"),
    ).quantize(CENT, rounding=ROUND_HALF_EVEN)
    commission = commission_for(subtotal)
    return CartTotals(
        subtotal=subtotal,
        commission=commission,
        total=subtotal + commission,
    )
