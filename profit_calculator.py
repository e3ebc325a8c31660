import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP

INVALID_INPUT_MESSAGE = "Please enter valid numbers for all fields."

CENTS = Decimal("0.01")
# wide enough to quantize any finite float to cents
WIDE_CONTEXT = Context(prec=400)

# amounts are limited to the signed 64-bit range
AMOUNT_MIN = -(2**63)
AMOUNT_MAX = 2**63 - 1
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(ValueError):
    """Raised when a form field cannot be parsed as a number."""

    def __init__(self, message=INVALID_INPUT_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single profit calculation.

    Attributes
    ----------
    ebt : int
        Earnings before tax in cents.
    profit : float
        Profit after tax in cents. May be fractional.
    profit_ratio : float
        Profit divided by revenue, as a decimal fraction.
    """

    ebt: int
    profit: float
    profit_ratio: float


def calculate_profit(revenue, expenses, tax_rate):
    """Return EBT, after-tax profit and profit ratio.

    Parameters
    ----------
    revenue : int
        Revenue in cents.
    expenses : int
        Expenses in cents.
    tax_rate : float
        Tax rate in percent (``19.5`` for 19.5%). Values outside 0-100 are
        applied as given.

    Returns
    -------
    CalculationResult
        The profit ratio is ``0.0`` when ``revenue`` is zero.
    """
    ebt = revenue - expenses
    profit = ebt * (1 - tax_rate / 100)
    ratio = profit / revenue if revenue != 0 else 0.0
    return CalculationResult(ebt=ebt, profit=profit, profit_ratio=ratio)


def format_currency(value):
    """Format a major-unit amount as ``[-]1,234,567.89``.

    Rounds half away from zero to two decimals. The shortest decimal repr of
    ``value`` is rounded rather than its binary expansion, so ``99.999``
    becomes ``"100.00"`` and ``1.005`` becomes ``"1.01"``. Non-finite values
    render as ``"inf"``, ``"-inf"`` or ``"nan"``.
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    rounded = Decimal(repr(value)).quantize(
        CENTS, rounding=ROUND_HALF_UP, context=WIDE_CONTEXT
    )
    sign = "-" if rounded < 0 else ""
    return f"{sign}{rounded.copy_abs():,.2f}"


def format_summary(result):
    """Render a calculation result as the three-line display message."""
    return (
        f"EBT: {result.ebt:.0f} cents ({format_currency(result.ebt / 100)} euros)\n"
        f"Profit: {result.profit:.0f} cents ({format_currency(result.profit / 100)} euros)\n"
        f"Profit Ratio: {result.profit_ratio * 100:.2f}%"
    )


def parse_inputs(revenue_text, expenses_text, tax_rate_text):
    """Parse the raw form fields into ``(revenue, expenses, tax_rate)``.

    Revenue and expenses must be plain ASCII integers within the signed
    64-bit range.

    Raises
    ------
    InvalidInputError
        If any field is not a number, an amount is out of range, or the tax
        rate is not finite.
    """
    try:
        revenue = _parse_amount(revenue_text)
        expenses = _parse_amount(expenses_text)
        tax_rate = float(tax_rate_text.strip())
    except ValueError as err:
        raise InvalidInputError() from err
    if not math.isfinite(tax_rate):
        raise InvalidInputError()
    return revenue, expenses, tax_rate


def _parse_amount(text):
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    amount = int(text)
    if not AMOUNT_MIN <= amount <= AMOUNT_MAX:
        raise ValueError(f"amount out of range: {text}")
    return amount
