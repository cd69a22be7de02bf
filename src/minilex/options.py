"""
Tokenizer Configuration
=======================

Options that change how literals are produced. Configuration can come from:
- Default values (defined here)
- Environment variables, via TokenizerOptions.from_env()
- Command-line flags of the mltok tool

Integer literals are fixed-width signed integers. A literal never carries
a sign, so only the upper bound can be exceeded; what happens then is
chosen by OverflowPolicy:

| Policy   | 2147483648 with 32 bits   |
|----------|---------------------------|
| error    | IntegerOverflowError      |
| saturate | 2147483647                |
| wrap     | -2147483648               |
"""

from dataclasses import dataclass
from enum import Enum
import os


MIN_INT_BITS = 8
MAX_INT_BITS = 64

# Digits folded per step when wrapping; well under the int/str conversion limit
_WRAP_CHUNK_DIGITS = 1000


class OverflowPolicy(Enum):
    """What to do with an integer literal too large for int_bits."""

    ERROR = "error"
    SATURATE = "saturate"
    WRAP = "wrap"


@dataclass
class TokenizerOptions:
    """
    Tokenizer configuration options.

    Attributes:
        int_bits: Width of the signed integer type for INT literals
        overflow: Policy applied when an INT literal exceeds int_bits
    """
    int_bits: int = 32
    overflow: OverflowPolicy = OverflowPolicy.ERROR

    def __post_init__(self):
        if not MIN_INT_BITS <= self.int_bits <= MAX_INT_BITS:
            raise ValueError(
                f"int_bits must be between {MIN_INT_BITS} and {MAX_INT_BITS}, "
                f"got {self.int_bits}"
            )
        if isinstance(self.overflow, str):
            self.overflow = OverflowPolicy(self.overflow.lower())

    @property
    def int_max(self) -> int:
        """Largest representable INT value."""
        return 2 ** (self.int_bits - 1) - 1

    def fit_integer(self, value: int) -> int:
        """
        Apply the overflow policy to a non-negative integer.

        Returns:
            The value, unchanged if it fits

        Raises:
            OverflowError: If the value does not fit and the policy is ERROR
        """
        if value <= self.int_max:
            return value

        if self.overflow is OverflowPolicy.SATURATE:
            return self.int_max

        if self.overflow is OverflowPolicy.WRAP:
            modulus = 2 ** self.int_bits
            value %= modulus
            if value > self.int_max:
                value -= modulus
            return value

        raise OverflowError(f"{value} exceeds {self.int_bits}-bit signed range")

    def fit_digits(self, digits: str) -> int:
        """
        Apply the overflow policy to a string of decimal digits.

        The overflow decision is made before converting, so literals longer
        than Python's int/str conversion limit (sys.get_int_max_str_digits)
        follow the policy like any other oversized literal.

        Raises:
            OverflowError: If the value does not fit and the policy is ERROR
        """
        digits = digits.lstrip("0") or "0"

        if self.overflow is OverflowPolicy.WRAP:
            modulus = 2 ** self.int_bits
            value = 0
            for start in range(0, len(digits), _WRAP_CHUNK_DIGITS):
                chunk = digits[start:start + _WRAP_CHUNK_DIGITS]
                value = (value * 10 ** len(chunk) + int(chunk)) % modulus
            return self.fit_integer(value)

        if len(digits) > len(str(self.int_max)):
            if self.overflow is OverflowPolicy.SATURATE:
                return self.int_max
            raise OverflowError(f"{len(digits)}-digit literal exceeds {self.int_bits}-bit signed range")

        return self.fit_integer(int(digits))

    @classmethod
    def from_env(cls) -> "TokenizerOptions":
        """
        Create TokenizerOptions from environment variables.

        Environment variables (all optional):
            MINILEX_INT_BITS: Integer literal width (8-64)
            MINILEX_OVERFLOW: Overflow policy ("error", "saturate", "wrap")

        Invalid values are ignored and the default is kept.
        """
        options = cls()

        if int_bits := os.environ.get("MINILEX_INT_BITS"):
            try:
                bits = int(int_bits)
            except ValueError:
                bits = None
            if bits is not None and MIN_INT_BITS <= bits <= MAX_INT_BITS:
                options.int_bits = bits

        if overflow := os.environ.get("MINILEX_OVERFLOW"):
            try:
                options.overflow = OverflowPolicy(overflow.lower())
            except ValueError:
                pass  # Ignore invalid values

        return options
