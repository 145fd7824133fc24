"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from storefront.domain.exceptions import IncompleteRecordError, ValidationError

ZERO = Decimal("0")


def to_decimal(value: object) -> Decimal:
    """Coerce a raw document number into a finite Decimal.

    Floats go through ``str()`` first so ``10.005`` stays ``10.005``
    instead of its binary approximation.  ``NaN`` and ``Infinity`` (which
    JSON documents can carry) count as missing data.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise IncompleteRecordError(f"Expected a number, got {value!r}")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise IncompleteRecordError(f"Expected a number, got {value!r}") from exc
    if not number.is_finite():
        raise IncompleteRecordError(f"Expected a finite number, got {value!r}")
    return number


def to_fixed(value: Decimal | int | float, places: int = 2) -> str:
    """Format *value* with exactly *places* decimals, rounding half-up."""
    number = to_decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return str(number.quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        return Money(self.amount - other.amount)

    def floor_at_zero(self) -> Money:
        """Clamp negative amounts (e.g. oversized discounts) to zero."""
        return Money(max(ZERO, self.amount))

    # --- Display --------------------------------------------------------------

    def to_fixed(self, places: int = 2) -> str:
        return to_fixed(self.amount, places)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(to_decimal(amount))
        except IncompleteRecordError as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
