"""Full training loop: shifted-tanh network fitted to sin(x)."""

import logging

import numpy as np
import sinefit.optim as optim
from sinefit.data import generate, make_rng
from sinefit.functional import evaluate_batch, sine, sse_gradients, sse_loss, tanh

logging.basicConfig(level=logging.INFO)

k, n = 20, 20
max_iter = 20000
eps = 1e-3

rng, seed = make_rng(42)
training_set, grid, weights = generate(k, n, rng, sine)

# Evaluate every sample but the last
x = training_set.inputs[: k - 1]
y = training_set.targets[: k - 1]
outputs = np.zeros(k - 1)

weights.zero_grad()
optimizer = optim.GradientDescent([weights], lr=0.01)
scheduler = optim.HalveOnIncrease(optimizer, factor=2.0)

for it in range(max_iter):
    # Forward
    evaluate_batch(weights, grid.centers, tanh, x, out=outputs)
    loss = sse_loss(outputs, y)
    if loss < eps:
        break

    # Backward
    sse_gradients(outputs, y, x, tanh, grid.centers, out=weights.grad)

    # Update
    optimizer.step()
    scheduler.step(loss)

    if it % 2000 == 0:
        print(f"Iter {it:5d}/{max_iter}  loss={loss:.6f}  lr={optimizer.lr:.2e}")

print(f"Finished at iteration {it} with loss={loss:.6f}")
