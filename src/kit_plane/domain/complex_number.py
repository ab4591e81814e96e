from __future__ import annotations

import math
import operator
import struct
from dataclasses import dataclass
from numbers import Integral
from typing import Iterator

import numpy as np

# canonical quiet NaN, all NaN payloads hash and compare as this one
_NAN_BITS = 0x7FF8000000000000


def _float_bits(value: float) -> int:
    if math.isnan(value):
        return _NAN_BITS
    return struct.unpack("<q", struct.pack("<d", value))[0]


def ieee_divide(num: float, den: float) -> float:
    """Float division that yields inf/nan on a zero denominator instead of raising."""
    with np.errstate(all="ignore"):
        return float(np.float64(num) / np.float64(den))


@dataclass(frozen=True, eq=False)
class ComplexNumber:
    """
    Immutable complex number re + im*i.

    Every operation returns a new value. Arithmetic never raises: invalid
    operations such as dividing by zero give non-finite components, as
    float64 arithmetic does.

    Equality compares the bit patterns of both components, so all NaNs are
    equal to each other and 0.0 differs from -0.0. Use is_close() for
    tolerance based comparisons.
    """

    re: float
    im: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # --- factories ------------------------------------------------------------
    @classmethod
    def zero(cls) -> ComplexNumber:
        return ZERO

    @classmethod
    def one(cls) -> ComplexNumber:
        return ONE

    @classmethod
    def imaginary_unit(cls) -> ComplexNumber:
        """The number whose square is -1."""
        return I

    @classmethod
    def from_real(cls, re: float) -> ComplexNumber:
        return cls(re, 0.0)

    @classmethod
    def rotation(cls, radians: float) -> ComplexNumber:
        """
        Unit number for a counter-clockwise rotation by `radians`.
        Multiplying a value by the result rotates it by that angle.
        """
        with np.errstate(all="ignore"):
            return cls(float(np.cos(radians)), float(np.sin(radians)))

    @classmethod
    def from_polar(cls, r: float, radians: float) -> ComplexNumber:
        return cls.rotation(radians).scale(r)

    @classmethod
    def from_complex(cls, z: complex) -> ComplexNumber:
        z = complex(z)
        return cls(z.real, z.imag)

    # --- arithmetic -----------------------------------------------------------
    def add(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.re + other.re, self.im + other.im)

    def subtract(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.re - other.re, self.im - other.im)

    def negate(self) -> ComplexNumber:
        return ComplexNumber(-self.re, -self.im)

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.re, -self.im)

    def multiply(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def modulus2(self) -> float:
        """Squared modulus, cheaper than modulus() for escape tests."""
        return self.re * self.re + self.im * self.im

    def modulus(self) -> float:
        return math.sqrt(self.modulus2())

    def argument(self) -> float:
        return math.atan2(self.im, self.re)

    def inverse(self) -> ComplexNumber:
        m = self.modulus2()
        return ComplexNumber(ieee_divide(self.re, m), ieee_divide(-self.im, m))

    def divide(self, other: ComplexNumber) -> ComplexNumber:
        return self.multiply(other.inverse())

    def pow(self, p: int) -> ComplexNumber:
        """
        Raise to a non-negative integer power by repeated squaring,
        O(log p) multiplications.
        """
        p = operator.index(p)
        if p < 0:
            raise ValueError(f"exponent must be non-negative, got {p}")
        if p == 0:
            return ONE
        if p % 2 == 0:
            return self.multiply(self).pow(p // 2)
        return self.multiply(self.pow(p - 1))

    def scale(self, factor: float) -> ComplexNumber:
        return ComplexNumber(factor * self.re, factor * self.im)

    def is_close(
        self, other: ComplexNumber, rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        return math.isclose(
            self.re, other.re, rel_tol=rel_tol, abs_tol=abs_tol
        ) and math.isclose(self.im, other.im, rel_tol=rel_tol, abs_tol=abs_tol)

    # --- operators ------------------------------------------------------------
    # Only ComplexNumber operands, scalars go through scale()/from_real().
    def __add__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, p: object) -> ComplexNumber:
        if not isinstance(p, Integral):
            return NotImplemented
        return self.pow(p)

    def __neg__(self) -> ComplexNumber:
        return self.negate()

    def __abs__(self) -> float:
        return self.modulus()

    # --- value semantics ------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return _float_bits(self.re) == _float_bits(other.re) and _float_bits(
            self.im
        ) == _float_bits(other.im)

    def __hash__(self) -> int:
        return hash((_float_bits(self.re), _float_bits(self.im)))

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __iter__(self) -> Iterator[float]:
        yield self.re
        yield self.im

    def __str__(self) -> str:
        return f"{self.re:g}{self.im:+g}i"


ZERO = ComplexNumber(0.0, 0.0)
ONE = ComplexNumber(1.0, 0.0)
I = ComplexNumber(0.0, 1.0)
