"""An optimizer updates the weights of the layers once the deltas are known."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from mlperceptron import network


class Optimizer():
    def __init__(self, neural_network: 'network.Network', learning_rate: float = 0.3):
        self.net = neural_network
        self.lr = learning_rate

    def step(self, pattern: Sequence[float]):
        raise NotImplementedError


class SGD(Optimizer):
    def step(self, pattern: Sequence[float]):
        """Apply one gradient descent step for the pattern that was just backpropagated.

        Layers are updated first to last: the first layer learns from the raw
        pattern, every other layer from the activations of the layer before it.
        """
        layers = self.net.layers
        layers[0].update_weights_from_input(pattern, self.lr)
        for c in range(1, len(layers)):
            layers[c].update_weights(layers[c - 1], self.lr)
