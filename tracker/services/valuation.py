from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

ZERO = Decimal("0")
HUNDRED = Decimal("100")
RATIO_PRECISION = Decimal("0.0001")


@dataclass(frozen=True)
class Valuation:
    total_cost: Decimal
    current_value: Decimal
    gain_loss: Decimal
    gain_loss_pct: Decimal


@dataclass(frozen=True)
class Aggregate:
    count: int
    total_cost: Decimal
    total_value: Decimal
    total_gain_loss: Decimal
    total_gain_loss_pct: Decimal


def gain_loss_percentage(gain_loss: Decimal, total_cost: Decimal) -> Decimal:
    # Ratio is rounded to 4 places before scaling to a percentage.
    if total_cost <= ZERO:
        return ZERO
    ratio = (gain_loss / total_cost).quantize(RATIO_PRECISION, rounding=ROUND_HALF_UP)
    return ratio * HUNDRED


def valuate(shares: Decimal, purchase_price: Decimal, current_price: Decimal) -> Valuation:
    total_cost = shares * purchase_price
    current_value = shares * current_price
    gain_loss = current_value - total_cost
    return Valuation(
        total_cost=total_cost,
        current_value=current_value,
        gain_loss=gain_loss,
        gain_loss_pct=gain_loss_percentage(gain_loss, total_cost),
    )


def aggregate(holdings: Iterable, prices: Optional[Mapping[str, Decimal]] = None) -> Aggregate:
    """Sum holdings into portfolio totals.

    ``holdings`` are objects with ``symbol``, ``shares`` and ``purchase_price``.
    A holding with no entry in ``prices`` is valued at its purchase price.
    """
    count = 0
    total_cost = ZERO
    total_value = ZERO

    for holding in holdings:
        current_price = holding.purchase_price
        if prices is not None:
            current_price = prices.get(holding.symbol, holding.purchase_price)

        valuation = valuate(holding.shares, holding.purchase_price, current_price)
        total_cost += valuation.total_cost
        total_value += valuation.current_value
        count += 1

    total_gain_loss = total_value - total_cost
    return Aggregate(
        count=count,
        total_cost=total_cost,
        total_value=total_value,
        total_gain_loss=total_gain_loss,
        total_gain_loss_pct=gain_loss_percentage(total_gain_loss, total_cost),
    )
