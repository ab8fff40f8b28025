"""Layer of units that all see the same inputs.
Keeps track of the ability to run (feed forward) and train (backprop + weight update)."""

from typing import Callable, Sequence

import numpy as np

from mlperceptron import activation, errors, loss, tensor
from mlperceptron.unit import Unit


class Layer():
    def __init__(self,
                 input_size: int,
                 unit_count: int,
                 activation_fn: Callable[[float], float],
                 activation_derivative_fn: Callable[[float], float],
                 low: float | None = None,
                 high: float | None = None,
                 bias: float = 1.0):
        """Create a new fully connected layer

        Args:
            input_size (int): size of the preceding layer, or the pattern length for the first layer
            unit_count (int): number of units in this layer
            activation_fn (Callable[[float], float]): applied to weighted sum + bias
            activation_derivative_fn (Callable[[float], float]): derivative, given the activation value
            low (float, optional): lower bound for the random weights. Defaults to -0.5.
            high (float, optional): upper bound for the random weights. Defaults to 0.5.
            bias (float, optional): starting bias of every unit. Defaults to 1.0.
        """
        self.input_size = input_size
        self.activation_fn = activation_fn
        self.activation_derivative_fn = activation_derivative_fn
        self.units = [Unit(input_size, bias, low, high) for _ in range(unit_count)]
        self.error = loss.SquaredError()

    @classmethod
    def with_activation(cls, input_size: int, unit_count: int,
                        fn: activation.ActivationFunction | str = activation.SIGMOID,
                        **kwargs) -> 'Layer':
        """Build a layer from an entry of the activation table (or its name)"""
        if isinstance(fn, str):
            fn = activation.get_activation(fn)
        return cls(input_size, unit_count, fn.function, fn.derivative, **kwargs)

    def __len__(self) -> int:
        return len(self.units)

    @property
    def activations(self) -> tensor.Tensor:
        return np.array([u.activation for u in self.units], dtype=float)

    @property
    def activation_derivatives(self) -> tensor.Tensor:
        return np.array([u.activation_derivative for u in self.units], dtype=float)

    @property
    def propagated_errors(self) -> tensor.Tensor:
        return np.array([u.propagated_error for u in self.units], dtype=float)

    @property
    def weights(self) -> tensor.Tensor:
        """Weight matrix, one row per unit"""
        return np.array([u.weights for u in self.units], dtype=float).reshape(len(self.units), self.input_size)

    @property
    def biases(self) -> tensor.Tensor:
        return np.array([u.bias for u in self.units], dtype=float)

    # forward

    def feed_forward(self, preceding_layer: 'Layer'):
        """Compute every unit's activation from the preceding layer's activations"""
        self._check_width('preceding layer', len(preceding_layer))
        self._feed(preceding_layer.activations)

    def feed_forward_from_input(self, pattern: Sequence[float]):
        """Compute every unit's activation straight from an input pattern (first layer only)"""
        pattern = tensor.as_tensor(pattern)
        self._check_width('input pattern', len(pattern))
        self._feed(pattern)

    def _feed(self, inputs: tensor.Tensor):
        """y = f(w @ x + b), then keep f'(y) around for the backward pass"""
        for unit in self.units:
            unit.activation = float(self.activation_fn(float(unit.weights @ inputs) + unit.bias))
            unit.activation_derivative = float(self.activation_derivative_fn(unit.activation))

    # backward

    def backpropagate_error(self, following_layer: 'Layer'):
        """Pull the error of the following layer back through its weights.

        For unit n of this layer:

        delta[n] = f'(y[n]) * sum_k w_k[n] * delta_k

        where k runs over the following layer's units and w_k[n] is the weight
        unit k gives to unit n. The following layer must still hold the weights
        it used on the forward pass, so no layer may be updated before every
        delta has been computed.
        """
        if following_layer.input_size != len(self):
            raise errors.ShapeMismatch('following layer input', len(self), following_layer.input_size)

        for n, unit in enumerate(self.units):
            downstream = sum(k.weights[n] * k.propagated_error for k in following_layer.units)
            unit.propagated_error = float(unit.activation_derivative * downstream)

    def backpropagate_output_error(self, targets: Sequence[float]) -> float:
        """Compute the deltas of the output layer from the desired outputs

        Args:
            targets (Sequence[float]): desired activation of every unit

        Returns:
            float: sum of squared errors for this pattern (not halved, not averaged)
        """
        targets = tensor.as_tensor(targets)
        if len(targets) != len(self):
            raise errors.ShapeMismatch('target vector', len(self), len(targets))

        outputs = self.activations
        output_errors = self.error.grad(outputs, targets)
        for unit, output_error in zip(self.units, output_errors):
            unit.propagated_error = float(output_error * unit.activation_derivative)

        return self.error.loss(outputs, targets)

    # weight update

    def update_weights(self, preceding_layer: 'Layer', learning_rate: float):
        """Gradient descent step using the preceding layer's activations as inputs"""
        self._check_width('preceding layer', len(preceding_layer))
        self._update(preceding_layer.activations, learning_rate)

    def update_weights_from_input(self, pattern: Sequence[float], learning_rate: float):
        """Gradient descent step for the first layer, using the raw pattern as inputs"""
        pattern = tensor.as_tensor(pattern)
        self._check_width('input pattern', len(pattern))
        self._update(pattern, learning_rate)

    def _update(self, inputs: tensor.Tensor, learning_rate: float):
        # w -= lr * x * delta, b -= lr * delta
        for unit in self.units:
            unit.weights -= learning_rate * inputs * unit.propagated_error
            unit.bias -= learning_rate * unit.propagated_error

    def _check_width(self, what: str, width: int):
        if width != self.input_size:
            raise errors.ShapeMismatch(what, self.input_size, width)

    def __repr__(self) -> str:
        name = getattr(self.activation_fn, '__name__', repr(self.activation_fn))
        return f'Layer(input_size={self.input_size}, units={len(self)}, activation={name})'
