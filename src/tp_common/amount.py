"""Fixed-point money type with 4 fractional digits.

All balances are ints scaled by 10_000. No float, no Decimal.
The scaled value is bounded to the signed 64-bit range, so the largest
representable amount is 922,337,203,685,477.5807.
"""

from dataclasses import dataclass

from src.tp_common.errors import AmountOverflowError, InvalidAmountFormatError

SCALE: int = 10_000
FRACTION_DIGITS: int = 4
MIN_SCALED: int = -(2**63)
MAX_SCALED: int = 2**63 - 1
# 922337203685477 is the largest whole part in range
MAX_WHOLE_DIGITS: int = 15


def _check_range(scaled: int) -> int:
    if not (MIN_SCALED <= scaled <= MAX_SCALED):
        raise AmountOverflowError(scaled)
    return scaled


def _is_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def _whole_scaled(whole: str, text: str) -> int:
    significant = whole.lstrip("0")
    if len(significant) > MAX_WHOLE_DIGITS:
        raise InvalidAmountFormatError(f"Amount out of range: {text.strip()}")
    return int(significant or "0") * SCALE


@dataclass(frozen=True, order=True)
class Amount:
    scaled: int

    @classmethod
    def zero(cls) -> "Amount":
        return cls(0)

    @classmethod
    def from_scaled(cls, scaled: int) -> "Amount":
        return cls(_check_range(scaled))

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """Parse '123.45' -> Amount(1234500).

        Accepts an optional leading '-', and at most 4 digits after a single '.'.
        Surrounding spaces and tabs are ignored. Never rounds or truncates.
        """
        value = text.strip()
        if not value:
            raise InvalidAmountFormatError("Empty string")

        negative = value.startswith("-")
        if negative:
            value = value[1:]

        whole, dot, fraction = value.partition(".")
        if not dot:
            if not _is_digits(whole):
                raise InvalidAmountFormatError(f"Invalid number: {value}")
            scaled = _whole_scaled(whole, text)
        else:
            if "." in fraction:
                raise InvalidAmountFormatError(f"Invalid number: {value}")
            if whole and not _is_digits(whole):
                raise InvalidAmountFormatError(f"Invalid whole number: {whole}")
            if len(fraction) > FRACTION_DIGITS:
                raise InvalidAmountFormatError(
                    f"Too many decimal places: {len(fraction)} (max {FRACTION_DIGITS})"
                )
            if not _is_digits(fraction):
                raise InvalidAmountFormatError(f"Invalid decimal: {fraction}")
            padded = fraction.ljust(FRACTION_DIGITS, "0")
            scaled = _whole_scaled(whole, text) + int(padded)

        if negative:
            scaled = -scaled
        if not (MIN_SCALED <= scaled <= MAX_SCALED):
            raise InvalidAmountFormatError(f"Amount out of range: {text.strip()}")
        return cls(scaled)

    def is_positive(self) -> bool:
        return self.scaled > 0

    def to_float(self) -> float:
        """Display approximation only; never feed the result back into a balance."""
        return self.scaled / SCALE

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(_check_range(self.scaled + other.scaled))

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(_check_range(self.scaled - other.scaled))

    def __neg__(self) -> "Amount":
        return Amount(_check_range(-self.scaled))

    def __str__(self) -> str:
        """Render with exactly 4 decimals: 1234500 -> '123.4500', -5 -> '-0.0005'."""
        if self.scaled < 0:
            abs_scaled = -self.scaled
            return f"-{abs_scaled // SCALE}.{abs_scaled % SCALE:04d}"
        return f"{self.scaled // SCALE}.{self.scaled % SCALE:04d}"
