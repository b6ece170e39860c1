"""Tests for the forward pass, loss and gradient."""

import numpy as np
import pytest

from sinefit import Window
from sinefit.functional import activations
from sinefit.functional import (
    center_window,
    evaluate,
    evaluate_batch,
    get_function,
    register_function,
    sample_window,
    sse_gradient,
    sse_gradients,
    sse_loss,
    tanh,
)


class TestWindows:
    """Index windows."""

    def test_legacy_center_window(self):
        """Legacy skips the first and last center."""
        assert list(range(10))[center_window(10)] == list(range(1, 9))

    def test_legacy_sample_window(self):
        """Legacy skips the last sample."""
        assert list(range(10))[sample_window(10)] == list(range(9))

    def test_full_windows(self):
        """Full keeps everything."""
        assert list(range(10))[center_window(10, Window.FULL)] == list(range(10))
        assert list(range(10))[sample_window(10, "full")] == list(range(10))


class TestEvaluate:
    """Tests for evaluate and evaluate_batch."""

    def test_matches_manual_sum(self, small_problem):
        """evaluate sums over j = 1 .. len(centers) - 2."""
        ts, grid, weights = small_problem
        x = 0.37
        expected = sum(
            weights[j] * np.tanh(x - grid.centers[j]) for j in range(1, len(grid) - 1)
        )
        assert evaluate(weights, grid.centers, tanh, x) == pytest.approx(expected)

    def test_full_window_uses_all_centers(self, small_problem):
        """Full window includes the boundary centers."""
        ts, grid, weights = small_problem
        x = 0.5
        expected = sum(weights[j] * np.tanh(x - grid.centers[j]) for j in range(len(grid)))
        assert evaluate(weights, grid.centers, tanh, x, Window.FULL) == pytest.approx(expected)

    def test_batch_matches_scalar(self, small_problem):
        """evaluate_batch agrees with evaluate per input."""
        ts, grid, weights = small_problem
        out = evaluate_batch(weights, grid.centers, tanh, ts.inputs)
        expected = [evaluate(weights, grid.centers, tanh, x) for x in ts.inputs]
        np.testing.assert_allclose(out, expected, rtol=1e-12)

    def test_batch_writes_into_buffer(self, small_problem):
        """A preallocated buffer is filled in place and returned."""
        ts, grid, weights = small_problem
        buf = np.full(len(ts), np.nan)
        out = evaluate_batch(weights, grid.centers, tanh, ts.inputs, out=buf)
        assert out is buf
        assert np.all(np.isfinite(buf))

    def test_batch_buffer_shape_mismatch(self, small_problem):
        """Wrong-sized buffer is rejected."""
        ts, grid, weights = small_problem
        with pytest.raises(ValueError, match="output buffer"):
            evaluate_batch(weights, grid.centers, tanh, ts.inputs, out=np.zeros(3))

    def test_two_centers_give_zero(self):
        """With n=2 there is one center and the legacy sum is empty."""
        assert evaluate(np.array([0.7]), np.array([0.0]), tanh, 0.5) == 0.0
        out = evaluate_batch(np.array([0.7]), np.array([0.0]), tanh, np.array([0.5, 1.0]))
        np.testing.assert_array_equal(out, [0.0, 0.0])

    def test_boundary_centers_never_read(self, recording_activation):
        """Boundary weights and centers do not reach the activation."""
        centers = np.array([100.0, 0.2, 0.4, 0.6, -100.0])
        weights = np.array([np.nan, 1.0, 2.0, 3.0, np.nan])
        inputs = np.linspace(0.1, 1.0, 7)

        out = evaluate_batch(weights, centers, recording_activation, inputs)
        single = evaluate(weights, centers, recording_activation, 0.3)

        assert np.all(np.isfinite(out))
        assert np.isfinite(single)
        # arguments are x - c with x in [0, 1] and interior c in [0, 1]
        assert np.all(np.abs(recording_activation.arguments()) <= 1.0)


class TestLoss:
    """Tests for sse_loss."""

    def test_sum_not_mean(self):
        """Loss is the plain sum of squared differences."""
        assert sse_loss(np.array([1.0, 2.0]), np.array([0.0, 0.0])) == pytest.approx(5.0)

    def test_zero_on_match(self):
        """Loss is zero iff outputs equal targets."""
        y = np.array([0.1, 0.2, 0.3])
        assert sse_loss(y, y) == 0.0
        assert sse_loss(y, y + 1e-6) > 0.0

    def test_non_negative(self, rng):
        """Loss is never negative."""
        for _ in range(20):
            a = rng.normal(size=10) * 100
            b = rng.normal(size=10) * 100
            assert sse_loss(a, b) >= 0.0

    def test_targets_beyond_outputs_ignored(self):
        """Only the first len(outputs) targets are read."""
        assert sse_loss(np.array([1.0]), np.array([1.0, np.nan])) == 0.0


class TestGradient:
    """Tests for sse_gradient and sse_gradients."""

    def test_matches_formula(self, small_problem):
        """sse_gradient = 2 * sum (out - y) * phi(x - c)."""
        ts, grid, weights = small_problem
        m = len(ts) - 1
        outputs = evaluate_batch(weights, grid.centers, tanh, ts.inputs[:m])
        c = grid.centers[2]
        expected = 2 * sum(
            (outputs[i] - ts.targets[i]) * np.tanh(ts.inputs[i] - c) for i in range(m)
        )
        got = sse_gradient(outputs, ts.targets, ts.inputs, tanh, c)
        assert got == pytest.approx(expected)

    def test_vectorized_matches_per_center(self, small_problem):
        """sse_gradients agrees with sse_gradient center by center."""
        ts, grid, weights = small_problem
        m = len(ts) - 1
        outputs = evaluate_batch(weights, grid.centers, tanh, ts.inputs[:m])
        grads = sse_gradients(outputs, ts.targets, ts.inputs, tanh, grid.centers)
        expected = [sse_gradient(outputs, ts.targets, ts.inputs, tanh, c) for c in grid.centers]
        np.testing.assert_allclose(grads, expected, rtol=1e-12)

    def test_matches_finite_difference(self, small_problem):
        """Gradient of interior weights equals the numerical derivative of the loss."""
        ts, grid, weights = small_problem
        m = len(ts) - 1
        x, y = ts.inputs[:m], ts.targets[:m]
        w = np.array(weights)

        def loss_at(w):
            return sse_loss(evaluate_batch(w, grid.centers, tanh, x), y)

        outputs = evaluate_batch(w, grid.centers, tanh, x)
        grads = sse_gradients(outputs, y, x, tanh, grid.centers)

        h = 1e-6
        for j in range(1, len(grid) - 1):
            wp, wm = w.copy(), w.copy()
            wp[j] += h
            wm[j] -= h
            numeric = (loss_at(wp) - loss_at(wm)) / (2 * h)
            assert grads[j] == pytest.approx(numeric, rel=1e-5, abs=1e-8)

    def test_writes_into_buffer(self, small_problem):
        """Gradient buffer is reused."""
        ts, grid, weights = small_problem
        outputs = np.zeros(len(ts) - 1)
        buf = np.empty(len(grid))
        assert sse_gradients(outputs, ts.targets, ts.inputs, tanh, grid.centers, out=buf) is buf

    def test_buffer_shape_mismatch(self, small_problem):
        """Wrong-sized gradient buffer is rejected."""
        ts, grid, _ = small_problem
        with pytest.raises(ValueError, match="gradient buffer"):
            sse_gradients(np.zeros(3), ts.targets, ts.inputs, tanh, grid.centers, out=np.zeros(2))


class TestRegistry:
    """Tests for the function registry."""

    def test_builtin_names(self):
        """tanh and sine are registered."""
        assert get_function("tanh") is tanh
        assert get_function("sine")(0.0) == 0.0

    def test_register(self, monkeypatch):
        """Custom functions become selectable."""
        monkeypatch.setattr(activations, "_FUNCTIONS", dict(activations._FUNCTIONS))
        register_function("identity", lambda x: x)
        assert get_function("identity")(3.0) == 3.0

    def test_register_not_callable(self, monkeypatch):
        """Non-callables are rejected."""
        monkeypatch.setattr(activations, "_FUNCTIONS", dict(activations._FUNCTIONS))
        with pytest.raises(TypeError):
            register_function("bad", 3)
        assert "bad" not in activations._FUNCTIONS
