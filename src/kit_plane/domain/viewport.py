import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import numpy as np

from kit_plane.domain.complex_number import ComplexNumber, ieee_divide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """
    Rectangle of the complex plane to display, given by its center, its width
    and the aspect ratio (display width / display height) of the screen.
    """

    center_re: float = field(compare=False)
    center_im: float = field(compare=False)
    width: float = field(compare=False)
    aspect_ratio: float = field(compare=False)

    # equality and hash go through the derived vectors, compared bitwise
    center: ComplexNumber = field(init=False, repr=False)
    width_vector: ComplexNumber = field(init=False, repr=False)
    height_vector: ComplexNumber = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.aspect_ratio == 0:
            logger.warning(
                "Viewport with zero aspect ratio, height vector is not finite"
            )
        if not self.width > 0:
            logger.debug("Viewport with non-positive width %r", self.width)

        object.__setattr__(
            self, "center", ComplexNumber(self.center_re, self.center_im)
        )
        object.__setattr__(self, "width_vector", ComplexNumber.from_real(self.width))
        object.__setattr__(
            self,
            "height_vector",
            ComplexNumber(0.0, ieee_divide(self.width, self.aspect_ratio)),
        )

    @property
    def height(self) -> float:
        return self.height_vector.im

    def to_complex(self, tx: float, ty: float) -> ComplexNumber:
        """
        Convert a position relative to the rectangle into a point of the plane.

        tx: 0 is the left edge, 1 the right edge, 0.5 the center.
        ty: vertical offset measured in heights from the center line.
        Values outside [0, 1] are extrapolated, not clamped.
        """
        return self.center.add(self.width_vector.scale(tx - 0.5)).add(
            self.height_vector.scale(ty)
        )

    def screen_to_complex(self, x: int, y: int, width: int, height: int) -> ComplexNumber:
        """
        Convert pixel coordinates (bottom-left origin) to a complex-plane coordinate.
        Pixel row y = 0 maps to the center line, as ty = 0 does in to_complex().
        """
        return self.to_complex(x / width, y / height)

    def to_complex_grid(self, width: int, height: int) -> np.ndarray:
        """
        Height x width array (complex128) of the points under each sample,
        with tx and ty running over [0, 1] inclusive. Row 0 is ty = 0.
        """
        tx = np.linspace(start=0.0, stop=1.0, num=width, dtype=np.float64)
        ty = np.linspace(start=0.0, stop=1.0, num=height, dtype=np.float64)
        TX, TY = np.meshgrid(tx - 0.5, ty)

        w, h = self.width_vector, self.height_vector
        grid = np.empty((height, width), dtype=np.complex128)
        with np.errstate(all="ignore"):
            grid.real = self.center.re + w.re * TX + h.re * TY
            grid.imag = self.center.im + w.im * TX + h.im * TY
        return grid


# High-level view of the Mandelbrot set.
CAMERA0 = Viewport(-1.0, 0.0, 5, 4.0 / 3.0)

# Detail regions.
CAMERA1 = Viewport(0.001643721971153, 0.822467633298876, 0.0000003, 4.0 / 3.0)
CAMERA2 = Viewport(-0.743643887037151, 0.13182590420533, 0.00003, 4.0 / 3.0)
CAMERA3 = Viewport(-0.82, -0.19, 0.038, 4.0 / 3.0)

PRESETS: Mapping[str, Viewport] = MappingProxyType(
    {
        "camera0": CAMERA0,
        "camera1": CAMERA1,
        "camera2": CAMERA2,
        "camera3": CAMERA3,
    }
)
