"""Loss functions measure the difference between what the network output and what we wanted."""

import numpy as np

from mlperceptron import tensor


class Loss():
    def loss(self, predictions: tensor.Tensor, targets: tensor.Tensor) -> float:
        """From predictions and targets, figure out how wrong we are

        Returns:
            float: wrongness
        """
        raise NotImplementedError

    def grad(self, predictions: tensor.Tensor, targets: tensor.Tensor) -> tensor.Tensor:
        """The gradient of the loss with respect to the predictions"""
        raise NotImplementedError


class SquaredError(Loss):
    """Sum of squared errors over the output units of one pattern.

    The gradient is the plain difference, which is the derivative of half the
    squared error. The training loop applies that 0.5 itself when it adds the
    pattern error to the epoch total.
    """

    def loss(self, predictions: tensor.Tensor, targets: tensor.Tensor) -> float:
        return float(np.sum((predictions - targets)**2))

    def grad(self, predictions: tensor.Tensor, targets: tensor.Tensor) -> tensor.Tensor:
        return predictions - targets


def mean_squared_error(total_error: float, sample_count: int) -> float:
    """Normalize an epoch's accumulated (half) squared error by the number of samples"""
    return total_error / sample_count
