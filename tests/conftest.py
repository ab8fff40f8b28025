import numpy as np
import pytest

from mlperceptron import activation
from mlperceptron.layer import Layer
from mlperceptron.network import Network


@pytest.fixture(autouse=True)
def seeded_rng():
    """Weights come from the global numpy generator; pin it so runs repeat."""
    np.random.seed(1234)


def identity(z):
    return z


def identity_derivative(value):
    return 1.0


@pytest.fixture
def linear_network():
    """2-1-1 network with linear units and hand-picked weights"""
    net = Network()
    hidden = net.add_layer(Layer(2, 1, identity, identity_derivative))
    out = net.add_layer(Layer(1, 1, identity, identity_derivative))
    hidden.units[0].weights[:] = [0.5, -0.5]
    hidden.units[0].bias = 0.1
    out.units[0].weights[:] = [2.0]
    out.units[0].bias = 0.5
    return net


@pytest.fixture
def sigmoid_network():
    """2-2-1 network with sigmoid units and random weights"""
    net = Network()
    net.add_layer(Layer.with_activation(2, 2, activation.SIGMOID))
    net.add_layer(Layer.with_activation(2, 1, activation.SIGMOID))
    return net
