"""Activation functions and their derivatives.

Every derivative here is written in terms of the activation *value* the
function produced, not the weighted sum that went into it. A layer computes
y = f(x) once and then asks for f'(y), so the sum never has to be kept around.
"""

import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class ActivationFunction():
    name: str
    function: Callable[[float], float]
    derivative: Callable[[float], float]

    def __call__(self, z: float) -> float:
        return self.function(z)


def step(z: float) -> float:
    """Heaviside step: 1 for non-negative input, 0 otherwise"""
    return 1.0 if z >= 0 else 0.0


def step_derivative(value: float) -> float:
    # the true derivative is 0 almost everywhere, which would never train
    return 1.0


def sigmoid(z: float) -> float:
    """Logistic function 1 / (1 + e^-z), arranged so exp() never overflows"""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


def sigmoid_derivative(value: float) -> float:
    return value * (1.0 - value)


def hyperbolic_tangent(z: float) -> float:
    return math.tanh(z)


def hyperbolic_tangent_derivative(value: float) -> float:
    return 1.0 - value**2


STEP = ActivationFunction('step', step, step_derivative)
SIGMOID = ActivationFunction('sigmoid', sigmoid, sigmoid_derivative)
HYPERBOLIC_TANGENT = ActivationFunction('hyperbolic_tangent', hyperbolic_tangent,
                                        hyperbolic_tangent_derivative)

ACTIVATIONS = {f.name: f for f in (STEP, SIGMOID, HYPERBOLIC_TANGENT)}


def get_activation(name: str) -> ActivationFunction:
    """Look up an activation function by name

    Args:
        name (str): one of 'step', 'sigmoid' or 'hyperbolic_tangent'

    Returns:
        ActivationFunction: the function/derivative pair

    Raises:
        KeyError: the name is not in the table
    """
    try:
        return ACTIVATIONS[name]
    except KeyError:
        raise KeyError(f'unknown activation {name!r}, expected one of {sorted(ACTIVATIONS)}') from None
