"""Tests for easing functions."""

import pytest

from cue_tween import EASINGS, back_out, cubic_out, linear

SAMPLES = [i / 100 for i in range(101)]


class TestLinearEasing:
    """Test linear easing function."""

    def test_linear_endpoints(self):
        """Linear easing maps 0 to 0 and 1 to 1."""
        assert linear(0.0) == 0.0
        assert linear(1.0) == 1.0

    def test_linear_at_half(self):
        """Linear easing should return 0.5 at t=0.5."""
        assert linear(0.5) == 0.5


class TestCubicOut:
    """Test cubic-out easing function."""

    def test_cubic_out_endpoints(self):
        """Cubic-out starts at 0 and lands on 1."""
        assert cubic_out(0.0) == 0.0
        assert cubic_out(1.0) == 1.0

    def test_cubic_out_at_half(self):
        """Cubic-out at 0.5 is 1 - 0.125."""
        assert cubic_out(0.5) == pytest.approx(0.875)

    def test_cubic_out_never_overshoots(self):
        """Cubic-out stays within [0, 1] over the unit interval."""
        for t in SAMPLES:
            assert 0.0 <= cubic_out(t) <= 1.0, f"cubic_out({t}) out of range"

    def test_cubic_out_is_monotonic(self):
        """Cubic-out never decreases."""
        values = [cubic_out(t) for t in SAMPLES]
        assert values == sorted(values)


class TestBackOut:
    """Test back-out easing function."""

    def test_back_out_endpoints(self):
        """Back-out starts at (approximately) 0 and lands on 1."""
        assert back_out(0.0) == pytest.approx(0.0, abs=1e-12)
        assert back_out(1.0) == 1.0

    def test_back_out_overshoots(self):
        """Back-out exceeds 1.0 strictly somewhere inside (0, 1)."""
        assert any(back_out(t) > 1.0 for t in SAMPLES[1:-1])

    def test_back_out_overshoot_window(self):
        """The overshoot shows up late in the curve, before settling."""
        for t in (0.8, 0.85, 0.9, 0.95):
            assert back_out(t) > 1.0

    def test_back_out_peak_is_slight(self):
        """The pop is about ten percent past the target."""
        peak = max(back_out(t) for t in SAMPLES)
        assert 1.05 < peak < 1.15


class TestEasingsDict:
    """Test EASINGS registry."""

    def test_easings_contains_builtins(self):
        """EASINGS exposes every built-in curve by name."""
        assert set(EASINGS) == {"linear", "cubic_out", "back_out"}

    def test_easings_map_one_to_one(self):
        """All easing functions should map 1 to 1."""
        for name, func in EASINGS.items():
            assert func(1.0) == pytest.approx(1.0), f"{name}(1) != 1"
