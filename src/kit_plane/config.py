from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Mapping, Union

from pydantic import BaseModel, ConfigDict, field_validator

from kit_plane.domain.viewport import PRESETS, Viewport

logger = logging.getLogger(__name__)


class PresetName(str, Enum):
    CAMERA0 = "camera0"
    CAMERA1 = "camera1"
    CAMERA2 = "camera2"
    CAMERA3 = "camera3"


class ViewportConfig(BaseModel):
    """User supplied viewport parameters. Defaults match the overview preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    center_re: float = -1.0
    center_im: float = 0.0
    width: float = 5.0
    aspect_ratio: float = 4.0 / 3.0

    @field_validator("center_re", "center_im", "width", "aspect_ratio")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

    @field_validator("aspect_ratio")
    @classmethod
    def _non_zero_aspect(cls, value: float) -> float:
        if value == 0:
            raise ValueError("aspect ratio must be non-zero")
        return value

    @classmethod
    def from_viewport(cls, viewport: Viewport) -> ViewportConfig:
        return cls(
            center_re=viewport.center_re,
            center_im=viewport.center_im,
            width=viewport.width,
            aspect_ratio=viewport.aspect_ratio,
        )

    def build(self) -> Viewport:
        return Viewport(
            center_re=self.center_re,
            center_im=self.center_im,
            width=self.width,
            aspect_ratio=self.aspect_ratio,
        )


ViewportSource = Union[str, PresetName, Mapping[str, float], ViewportConfig]


def load_viewport(source: ViewportSource) -> Viewport:
    """
    Resolve a preset name, a mapping of ViewportConfig fields or a
    ViewportConfig into a Viewport.
    """
    if isinstance(source, ViewportConfig):
        return source.build()

    if isinstance(source, PresetName):
        key = source.value
    elif isinstance(source, str):
        key = source.lower()
    else:
        config = ViewportConfig.model_validate(dict(source))
        logger.debug("Viewport from config %s", config)
        return config.build()

    try:
        viewport = PRESETS[key]
    except KeyError:
        raise KeyError(f"unknown viewport preset {source!r}") from None

    logger.debug("Viewport preset %s", key)
    return viewport
