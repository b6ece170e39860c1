"""
Training loop

Drives forward evaluation, loss, gradient, weight update and learning-rate
control until the loss drops below ``eps`` or the iteration budget runs out.

Usage:
    from sinefit import TrainingConfig, train

    result = train(TrainingConfig(seed=7))
    print(result.status, result.loss, result.iteration)
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from ..config import TrainingConfig, Window
from ..data.samples import CenterGrid, TrainingSet, generate, make_rng
from ..functional.activations import ScalarFunction, get_function
from ..functional.loss import sse_gradients, sse_loss
from ..functional.network import evaluate_batch, sample_window
from ..nn.parameter import Parameter
from ..optim.lr_scheduler import HalveOnIncrease
from ..optim.sgd import GradientDescent

logger = logging.getLogger(__name__)


class TrainingStatus(str, Enum):
    """Where the loop stands."""

    RUNNING = "running"
    CONVERGED_EARLY = "converged_early"
    BUDGET_EXHAUSTED = "budget_exhausted"

    @property
    def terminal(self) -> bool:
        return self is not TrainingStatus.RUNNING


@dataclass
class TrainingState:
    """
    Mutable state of one run, owned by a single Trainer.

    ``outputs`` and ``weights.grad`` are allocated once and overwritten in
    place every iteration. The learning rate lives in the optimizer's
    parameter group and the previous loss in the scheduler; the
    properties below read them from there.
    """

    weights: Parameter
    optimizer: GradientDescent
    scheduler: HalveOnIncrease
    outputs: np.ndarray
    loss: float = math.nan
    iteration: int = 0
    status: TrainingStatus = TrainingStatus.RUNNING
    loss_history: list[float] = field(default_factory=list)
    lr_history: list[float] = field(default_factory=list)

    @property
    def learning_rate(self) -> float:
        return self.optimizer.lr

    @property
    def previous_loss(self) -> float:
        """Loss the learning-rate controller compares the next loss against."""
        return self.scheduler.previous_loss


@dataclass
class TrainingResult:
    """Terminal output of a run, handed to reporting."""

    status: TrainingStatus
    weights: np.ndarray
    outputs: np.ndarray
    targets: np.ndarray
    inputs: np.ndarray
    centers: np.ndarray
    loss: float
    learning_rate: float
    iteration: int
    seed: int | None = None
    loss_history: list[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.status is TrainingStatus.CONVERGED_EARLY


class Trainer:
    """
    Batch gradient-descent trainer for the shifted-activation network.

    Args:
        training_set: Fixed (input, target) samples
        grid: Center grid
        weights: Initial weights, one per center. A Parameter is updated in
            place; any other array is copied into a new Parameter first
        activation: Elementwise activation function
        max_iter: Iteration budget
        eta: Initial learning rate
        eps: Early-stop threshold on the loss
        decay: Learning-rate divisor applied when the loss grows
        window: Index window for the forward pass and loss/gradient sums
        log_every: Emit a debug line every N iterations
    """

    def __init__(
        self,
        training_set: TrainingSet,
        grid: CenterGrid,
        weights: np.ndarray,
        activation: ScalarFunction,
        max_iter: int = 20000,
        eta: float = 0.01,
        eps: float = 0.001,
        decay: float = 2.0,
        window: Window = Window.LEGACY,
        log_every: int = 1000,
    ):
        if len(weights) != len(grid):
            raise ValueError(
                f"weights has {len(weights)} entries, expected one per center ({len(grid)})"
            )
        if max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {max_iter}")

        self.training_set = training_set
        self.grid = grid
        self.activation = activation
        self.max_iter = max_iter
        self.eps = eps
        self.window = Window(window)
        self.log_every = log_every
        self.seed: int | None = None

        sl = sample_window(len(training_set), self.window)
        self.inputs = training_set.inputs[sl]
        self.targets = training_set.targets[sl]

        if not isinstance(weights, Parameter):
            weights = Parameter(weights)
        optimizer = GradientDescent([weights], lr=eta)
        optimizer.zero_grad()
        self.state = TrainingState(
            weights=weights,
            optimizer=optimizer,
            scheduler=HalveOnIncrease(optimizer, factor=decay, initial_loss=0.0),
            outputs=np.zeros(self.inputs.shape[0], dtype=np.float64),
        )
        self.state.lr_history.append(optimizer.lr)

    @classmethod
    def from_config(cls, config: TrainingConfig) -> "Trainer":
        """Validate ``config``, generate the samples and build a trainer."""
        config.validate()
        rng, seed = make_rng(config.seed)
        training_set, grid, weights = generate(
            config.k, config.n, rng, get_function(config.target)
        )
        trainer = cls(
            training_set,
            grid,
            weights,
            get_function(config.activation),
            max_iter=config.max_iter,
            eta=config.eta,
            eps=config.eps,
            decay=config.decay,
            window=config.window,
            log_every=config.log_every,
        )
        trainer.seed = seed
        return trainer

    def step(self) -> TrainingStatus:
        """
        Run one iteration and return the resulting status.

        If the loss of the current weights is already below ``eps`` the
        weight update is skipped, so the weights stay those that produced
        the reported outputs.
        """
        state = self.state
        if state.status.terminal:
            return state.status

        weights = state.weights
        evaluate_batch(
            weights,
            self.grid.centers,
            self.activation,
            self.inputs,
            out=state.outputs,
            window=self.window,
        )
        loss = sse_loss(state.outputs, self.targets)
        state.loss = loss
        state.loss_history.append(loss)
        if not math.isfinite(loss):
            logger.warning("Non-finite loss at iteration %d: %r", state.iteration, loss)

        converged = loss < self.eps
        if not converged:
            sse_gradients(
                state.outputs,
                self.targets,
                self.inputs,
                self.activation,
                self.grid.centers,
                out=weights.grad,
            )
            state.optimizer.step()

        state.scheduler.step(loss, epoch=state.iteration)
        state.lr_history.append(state.optimizer.lr)

        if state.iteration % self.log_every == 0:
            logger.debug(
                "iter=%d loss=%.6g lr=%.6g", state.iteration, loss, state.optimizer.lr
            )

        if converged:
            state.status = TrainingStatus.CONVERGED_EARLY
            return state.status

        state.iteration += 1
        if state.iteration == self.max_iter:
            state.status = TrainingStatus.BUDGET_EXHAUSTED
        return state.status

    def run(self) -> TrainingResult:
        """Step until a terminal state and return the result."""
        logger.info(
            "Training %d centers on %d samples (max_iter=%d, eta=%g, eps=%g, window=%s)",
            len(self.grid),
            len(self.training_set),
            self.max_iter,
            self.state.learning_rate,
            self.eps,
            self.window.value,
        )
        while not self.step().terminal:
            pass

        result = self.result()
        logger.info(
            "Finished: status=%s iteration=%d loss=%.6g lr=%.6g",
            result.status.value,
            result.iteration,
            result.loss,
            result.learning_rate,
        )
        return result

    def result(self) -> TrainingResult:
        """Snapshot of the current state."""
        state = self.state
        return TrainingResult(
            status=state.status,
            weights=np.array(state.weights),
            outputs=state.outputs.copy(),
            targets=np.array(self.targets),
            inputs=np.array(self.inputs),
            centers=np.array(self.grid.centers),
            loss=state.loss,
            learning_rate=state.learning_rate,
            iteration=state.iteration,
            seed=self.seed,
            loss_history=list(state.loss_history),
        )


def train(config: TrainingConfig | None = None) -> TrainingResult:
    """
    Fit the network described by ``config``.

    Args:
        config: Run configuration (default: TrainingConfig())

    Returns:
        TrainingResult of the finished run
    """
    if config is None:
        config = TrainingConfig()
    return Trainer.from_config(config).run()
