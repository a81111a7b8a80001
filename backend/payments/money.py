"""
Monetary helpers for bills, receipts and sales figures.

Key Principles:
1. NEVER use float for money
2. Prices arrive from JSON snapshots as strings; coerce through to_decimal()
3. Sums are exact Decimals; quantize only for display and storage
4. Use ROUND_HALF_EVEN (banker's rounding) to prevent systematic bias
"""

from decimal import Decimal, ROUND_HALF_EVEN, InvalidOperation, getcontext
from typing import Iterable, Union

# High precision for intermediate calculations
getcontext().prec = 28

ZERO = Decimal("0")

Amount = Union[Decimal, str, int, float]

# Currency minor unit exponents (how many decimal places)
CURRENCY_EXPONENT = {
    "THB": 2,  # Thai Baht (satang)
    "USD": 2,
    "EUR": 2,
    "GBP": 2,
    "SGD": 2,
    "MYR": 2,
    "JPY": 0,
    "KRW": 0,
    "VND": 0,
}


def currency_exponent(currency: str) -> int:
    """
    Get the number of decimal places for a currency.

    Examples:
        >>> currency_exponent("THB")
        2
        >>> currency_exponent("JPY")
        0
    """
    return CURRENCY_EXPONENT.get(currency.upper(), 2)


def quantize_decimal(currency: str) -> Decimal:
    """
    Get the quantization decimal for a currency.

    Examples:
        >>> quantize_decimal("THB")
        Decimal('0.01')
        >>> quantize_decimal("JPY")
        Decimal('1')
    """
    return Decimal(10) ** -currency_exponent(currency)


def to_decimal(amount: Amount) -> Decimal:
    """
    Coerce a stored or user-supplied amount to Decimal without rounding.

    Floats are converted through str() so 0.1 stays 0.1.

    Raises:
        ValueError: if the value is not a number
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError(f"Not a monetary amount: {amount!r}")
    if isinstance(amount, float):
        amount = str(amount)
    try:
        return Decimal(amount)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Not a monetary amount: {amount!r}")


def quantize(currency: str, amount: Amount) -> Decimal:
    """
    Round to currency decimals using banker's rounding (ROUND_HALF_EVEN).

    Examples:
        >>> quantize("THB", "10.127")
        Decimal('10.13')
        >>> quantize("THB", "10.125")
        Decimal('10.12')
    """
    return to_decimal(amount).quantize(quantize_decimal(currency), rounding=ROUND_HALF_EVEN)


def line_amount(price: Amount, quantity: int) -> Decimal:
    """price x quantity, exact."""
    return to_decimal(price) * quantity


def money_sum(amounts: Iterable[Amount]) -> Decimal:
    """Exact sum of amounts; an empty iterable sums to ZERO."""
    total = ZERO
    for amount in amounts:
        total += to_decimal(amount)
    return total


def format_amount(currency: str, amount: Amount) -> str:
    """
    Format an amount with the currency's decimal places and thousands separators.

    Examples:
        >>> format_amount("THB", "1205")
        '1,205.00'
    """
    exponent = currency_exponent(currency)
    return f"{quantize(currency, amount):,.{exponent}f}"


def format_money(currency: str, amount: Amount, symbol: str = None) -> str:
    """
    Format an amount the way receipts show it: number first, symbol after.

    Examples:
        >>> format_money("THB", "205", "฿")
        '205.00 ฿'
        >>> format_money("USD", "3.5")
        '3.50 USD'
    """
    return f"{format_amount(currency, amount)} {symbol or currency.upper()}"
