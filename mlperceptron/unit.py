"""A single neuron. It only holds numbers; the layer that owns it does the math."""

import numpy as np

from mlperceptron import errors, tensor

DEFAULT_LOW = -0.5
DEFAULT_HIGH = 0.5


class Unit():
    def __init__(self, weight_count: int, bias: float = 1.0,
                 low: float | None = None, high: float | None = None):
        """Create a new unit with random weights

        Args:
            weight_count (int): one weight per input, i.e. the size of the preceding layer
            bias (float, optional): starting bias. Defaults to 1.0.
            low (float, optional): lower bound (inclusive) for the random weights. Defaults to -0.5.
            high (float, optional): upper bound (exclusive) for the random weights. Defaults to 0.5.

        Raises:
            errors.InvalidRange: low is greater than high
        """
        if low is None or high is None:
            low, high = DEFAULT_LOW, DEFAULT_HIGH
        if low > high:
            raise errors.InvalidRange(low, high)

        self.weights: tensor.Tensor = np.random.uniform(low, high, size=weight_count)
        self.bias = float(bias)
        self.activation = 0.0            # last output
        self.activation_derivative = 0.0 # f'(activation)
        self.propagated_error = 0.0      # delta from the last backward pass

    @property
    def size(self) -> int:
        return len(self.weights)

    def __repr__(self) -> str:
        return (f'Unit(weights={self.weights.tolist()}, bias={self.bias}, '
                f'activation={self.activation})')
