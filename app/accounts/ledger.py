"""
Tax, total and balance arithmetic for transactions and debts.

All money is handled as Decimal and rounded to 2 places with ROUND_HALF_UP,
which rounds halves away from zero (1.005 -> 1.01, -1.005 -> -1.01).
Floats are converted through str() so 0.1 stays 0.1 and not its binary
approximation.
"""
from collections import OrderedDict
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple, Union

from app.exceptions import InvalidInput

Number = Union[Decimal, float, int, str]

CENTS = Decimal("0.01")

TRANSACTION_TYPES = ("income", "expense")
DEBT_KINDS = ("advance", "repay")


def to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return Decimal("0")
    result = value if isinstance(value, Decimal) else Decimal(str(value))
    if not result.is_finite():
        raise InvalidInput(details="amounts must be finite numbers")
    return result


def round2(value: Number) -> Decimal:
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_tax(base: Number, rate_percent: Optional[Number]) -> Decimal:
    """round2(base * rate / 100); a missing or zero rate gives 0.00."""
    rate = to_decimal(rate_percent)
    if not rate:
        return round2(0)
    return round2(to_decimal(base) * rate / Decimal("100"))


def tax_rate_for(tx_type: str, settings) -> Optional[float]:
    if tx_type == "income":
        return settings.tax_income
    if tx_type == "expense":
        return settings.tax_expense
    raise InvalidInput(details=f"type must be one of {', '.join(TRANSACTION_TYPES)}")


def compute_transaction_totals(base: Number, tx_type: str, settings) -> Tuple[Decimal, Decimal]:
    """
    Return (tax, total) for a transaction.

    ``settings`` is anything carrying ``tax_income`` and ``tax_expense``
    percentages, normally the owner's current UserSettings row.
    """
    rate = tax_rate_for(tx_type, settings)
    tax = compute_tax(base, rate)
    total = round2(to_decimal(base) + tax)
    return tax, total


def compute_debt_delta(amount: Number, kind: str) -> Decimal:
    magnitude = to_decimal(amount)
    if kind == "advance":
        return magnitude
    if kind == "repay":
        return -magnitude
    raise InvalidInput(details=f"kind must be one of {', '.join(DEBT_KINDS)}")


def running_balances(debts: Iterable) -> list[Decimal]:
    """Cumulative sum of ``delta`` over debts already in chronological order."""
    balance = Decimal("0")
    result = []
    for debt in debts:
        balance += to_decimal(debt.delta)
        result.append(round2(balance))
    return result


def employee_balances(debts: Iterable) -> "OrderedDict[str, Decimal]":
    balances: "OrderedDict[str, Decimal]" = OrderedDict()
    for debt in debts:
        balances[debt.employee] = balances.get(debt.employee, Decimal("0")) + to_decimal(debt.delta)
    return OrderedDict((name, round2(total)) for name, total in balances.items())
