"""Tests for easing resolution and presets."""

import logging
import math

import pytest
from tick_tweener import PRESETS, Easing, bezier, preset, resolve_easing

PRESET_NAMES = sorted(PRESETS)


class TestPresetCatalog:
    """The fixed preset catalog."""

    def test_catalog_has_fourteen_entries(self):
        """linear, the four CSS curves, and nine polynomial variants."""
        assert len(PRESETS) == 14
        for family in ("quad", "cubic", "quart"):
            for kind in ("in", "out", "in-out"):
                assert f"ease-{kind}-{family}" in PRESETS

    def test_linear_is_identity(self):
        """linear applies no shaping."""
        linear = preset("linear")
        for t in (0.0, 0.25, 0.5, 0.75, 1.0):
            assert linear.apply(t) == t

    @pytest.mark.parametrize("name", PRESET_NAMES)
    def test_endpoints(self, name):
        """Every preset maps 0 to 0 and 1 to 1."""
        curve = preset(name)
        assert curve.apply(0.0) == pytest.approx(0.0, abs=1e-9)
        assert curve.apply(1.0) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("name", PRESET_NAMES)
    def test_monotonic(self, name):
        """Every preset is non-decreasing on [0, 1]."""
        curve = preset(name)
        values = [curve.apply(i / 200) for i in range(201)]
        for a, b in zip(values, values[1:]):
            assert b >= a - 1e-9

    def test_lookup_is_case_insensitive(self):
        """Names are matched ignoring case and surrounding whitespace."""
        assert preset("EASE-IN") is preset("ease-in")
        assert preset("  Ease-Out-Cubic ") is preset("ease-out-cubic")

    def test_repeated_lookup_reuses_curve(self):
        """A preset is built once and shared between callers."""
        assert preset("ease") is preset("ease")


class TestUnknownPreset:
    """Unknown names fall back instead of failing."""

    def test_falls_back_to_ease_in_out(self):
        """An unknown name resolves to ease-in-out."""
        curve = preset("wobble")
        assert curve is preset("ease-in-out")

    def test_logs_warning(self, caplog):
        """The fallback is reported as a warning."""
        with caplog.at_level(logging.WARNING, logger="tick_tweener.easing"):
            resolve_easing("wobble")
        assert "Unknown easing preset 'wobble'" in caplog.text


    def test_non_string_name_raises(self):
        """Preset lookup takes names only."""
        with pytest.raises(TypeError, match="string"):
            preset(42)  # type: ignore[arg-type]


class TestResolveEasing:
    """resolve_easing dispatch over spec kinds."""

    def test_none_is_default(self):
        """None resolves to ease-in-out."""
        assert resolve_easing(None).name == "ease-in-out"

    def test_easing_passes_through(self):
        """An already-resolved Easing is returned unchanged."""
        curve = bezier(0.1, 0.2, 0.3, 0.4)
        assert resolve_easing(curve) is curve

    def test_function_used_unchanged(self):
        """A callable becomes the evaluator as is."""

        def step(t: float) -> float:
            return 0.0 if t < 1.0 else 1.0

        curve = resolve_easing(step)
        assert curve.fn is step
        assert curve.function is step
        assert curve.name is None

    def test_control_points(self):
        """Four numbers build a cubic-bezier curve."""
        curve = resolve_easing([0, 0, 1, 1])
        assert curve.name == "cubic-bezier(0.0, 0.0, 1.0, 1.0)"
        assert curve.apply(0.5) == pytest.approx(0.5, abs=1e-4)

    def test_control_points_match_preset(self):
        """Control points equal to a preset produce the same curve values."""
        curve = resolve_easing((0.42, 0.0, 0.58, 1.0))
        reference = preset("ease-in-out")
        for t in (0.1, 0.3, 0.6, 0.8):
            assert curve.apply(t) == pytest.approx(reference.apply(t))

    @pytest.mark.parametrize(
        "points",
        [(0.1, 0.2, 0.3), (0.1, 0.2, 0.3, 0.4, 0.5), ("a", 0, 1, 1), (1.5, 0, 0.5, 1)],
    )
    def test_malformed_points_fall_back(self, points, caplog):
        """Bad control points log a warning and use ease-in-out."""
        with caplog.at_level(logging.WARNING, logger="tick_tweener.easing"):
            curve = resolve_easing(points)
        assert curve is preset("ease-in-out")
        assert "falling back to ease-in-out" in caplog.text

    @pytest.mark.parametrize(
        "points", [(0.42, math.nan, 0.58, 1.0), (0.42, math.inf, 0.58, 1.0), (math.nan, 0, 0.5, 1)]
    )
    def test_non_finite_points_fall_back(self, points, caplog):
        """NaN or infinite control points never reach the solver."""
        with caplog.at_level(logging.WARNING, logger="tick_tweener.easing"):
            curve = resolve_easing(points)
        assert curve is preset("ease-in-out")
        assert "falling back to ease-in-out" in caplog.text
        assert not math.isnan(curve.apply(0.5))

    def test_non_callable_raises(self):
        """Anything that is not a name, points, or a function fails fast."""
        with pytest.raises(TypeError):
            resolve_easing(42)


class TestApply:
    """Easing.apply clamping."""

    def test_input_is_clamped(self):
        """Progress outside [0, 1] is clamped before evaluation."""
        linear = preset("linear")
        assert linear.apply(1.5) == 1.0
        assert linear.apply(-0.2) == 0.0

    def test_output_is_not_clamped(self):
        """Overshooting curves are passed through."""
        back = Easing(lambda t: t * 1.5)
        assert back.apply(1.0) == 1.5
        assert back.apply(3.0) == 1.5

    def test_easing_is_immutable(self):
        """Resolved curves cannot be reassigned."""
        curve = preset("ease")
        with pytest.raises(AttributeError):
            curve.name = "other"  # type: ignore[misc]
