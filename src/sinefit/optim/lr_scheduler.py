"""
Learning Rate Schedulers

Loss-driven learning-rate control.
"""

import logging

logger = logging.getLogger(__name__)


class HalveOnIncrease:
    """
    Divide the learning rate by ``factor`` whenever the loss grows.

    Each ``step(loss)`` compares against the previous loss. The previous loss
    starts at ``initial_loss`` (0.0), so the first step decays the rate
    whenever the first loss is positive. The rate never grows.
    """

    def __init__(self, optimizer, factor=2.0, initial_loss=0.0):
        """
        Initialize the scheduler.

        Args:
            optimizer: Wrapped optimizer
            factor: Divisor applied on a loss increase (default: 2.0)
            initial_loss: Loss the first step is compared against (default: 0.0)
        """
        if factor <= 1.0:
            raise ValueError("Factor should be > 1.0.")
        if not isinstance(optimizer.param_groups, list):
            raise TypeError(f"{type(optimizer).__name__} is not an Optimizer")
        self.optimizer = optimizer
        self.factor = factor
        self.previous_loss = float(initial_loss)
        self.num_decays = 0
        self.last_epoch = 0
        self._last_lr = [group["lr"] for group in optimizer.param_groups]

    def step(self, metrics, epoch=None):
        """
        Perform a scheduler step.

        Args:
            metrics: Loss of the current iteration
            epoch: Optional epoch number

        Returns:
            True if the learning rate was decayed
        """
        current = float(metrics)
        if epoch is None:
            epoch = self.last_epoch + 1
        self.last_epoch = epoch

        decayed = current > self.previous_loss
        if decayed:
            self._reduce_lr(epoch)
        self.previous_loss = current
        self._last_lr = [group["lr"] for group in self.optimizer.param_groups]
        return decayed

    def _reduce_lr(self, epoch):
        """Divide every group's learning rate by the factor."""
        for param_group in self.optimizer.param_groups:
            old_lr = param_group["lr"]
            param_group["lr"] = old_lr / self.factor
            logger.debug("Epoch %d: lr %.6g -> %.6g", epoch, old_lr, param_group["lr"])
        self.num_decays += 1

    def get_last_lr(self):
        """Return last computed learning rate by current scheduler."""
        return self._last_lr

