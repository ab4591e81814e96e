"""
Tests for viewport configuration.
"""

import pytest
from pydantic import ValidationError

from kit_plane.config import PresetName, ViewportConfig, load_viewport
from kit_plane.domain.viewport import CAMERA0, CAMERA1, CAMERA2, CAMERA3, PRESETS, Viewport


class TestViewportConfig:
    def test_defaults_match_overview(self):
        assert ViewportConfig().build() == CAMERA0

    def test_round_trip_from_viewport(self):
        assert ViewportConfig.from_viewport(CAMERA3).build() == CAMERA3

    def test_zero_aspect_ratio_rejected(self):
        with pytest.raises(ValidationError):
            ViewportConfig(aspect_ratio=0)

    @pytest.mark.parametrize("field", ["center_re", "center_im", "width", "aspect_ratio"])
    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ViewportConfig(**{field: value})

    def test_frozen(self):
        config = ViewportConfig()
        with pytest.raises(ValidationError):
            config.width = 1.0


class TestLoadViewport:
    def test_preset_name(self):
        assert load_viewport("camera1") is CAMERA1

    def test_preset_name_case_insensitive(self):
        assert load_viewport("CAMERA1") is CAMERA1

    def test_preset_enum(self):
        assert load_viewport(PresetName.CAMERA2) is CAMERA2

    def test_every_enum_member_resolves(self):
        for name in PresetName:
            assert load_viewport(name) is PRESETS[name.value]

    def test_mapping(self):
        vp = load_viewport(
            {"center_re": 0, "center_im": 0, "width": 2, "aspect_ratio": 1}
        )
        assert vp == Viewport(0, 0, 2, 1)

    def test_invalid_mapping(self):
        with pytest.raises(ValidationError):
            load_viewport({"aspect_ratio": 0})

    def test_misspelled_field_rejected(self):
        with pytest.raises(ValidationError):
            load_viewport(
                {"center_re": 0, "center_im": 0, "widht": 2, "aspect_ratio": 1}
            )

    def test_config(self):
        assert load_viewport(ViewportConfig(width=1.0)).width == 1.0

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            load_viewport("camera9")
