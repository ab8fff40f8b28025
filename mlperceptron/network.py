"""A network is an ordered collection of layers. Every unit of one layer feeds every unit
of the next, so this is a fully connected multilayer perceptron."""

import logging
import math
from typing import Iterable, Sequence

from mlperceptron import config, errors, loss, optimizer, tensor
from mlperceptron.layer import Layer
from mlperceptron.sample import TrainingSample

logger = logging.getLogger(__name__)


class Network():
    def __init__(self):
        self.layers: list[Layer] = []

    def add_layer(self, layer: Layer) -> Layer:
        """Append a layer after the current last one.

        Widths are not compared here; a badly chained network is reported by
        feed_forward or train.
        """
        self.layers.append(layer)
        return layer

    def __len__(self) -> int:
        return len(self.layers)

    @property
    def output_layer(self) -> Layer:
        if not self.layers:
            raise errors.NetworkError('network has no layers')
        return self.layers[-1]

    @property
    def outputs(self) -> tensor.Tensor:
        """Activations of the last layer after the most recent feed forward"""
        return self.output_layer.activations

    def feed_forward(self, pattern: Sequence[float]):
        """Forward pass through the whole network. Read the result from the output layer."""
        pattern = tensor.as_tensor(pattern)
        self._check_shapes(pattern)
        self._forward(pattern)

    def predict(self, pattern: Sequence[float]) -> tensor.Tensor:
        """Feed a pattern forward and return the output activations"""
        self.feed_forward(pattern)
        return self.outputs

    def _forward(self, pattern: tensor.Tensor):
        self.layers[0].feed_forward_from_input(pattern)
        for c in range(1, len(self.layers)):
            self.layers[c].feed_forward(self.layers[c - 1])

    def _backward(self, target: tensor.Tensor) -> float:
        """Compute every delta, output layer first. Returns the pattern's squared error."""
        pattern_error = self.layers[-1].backpropagate_output_error(target)
        for c in range(len(self.layers) - 2, -1, -1):
            self.layers[c].backpropagate_error(self.layers[c + 1])
        return pattern_error

    def _check_shapes(self, pattern: tensor.Tensor, target: tensor.Tensor | None = None):
        if not self.layers:
            raise errors.NetworkError('network has no layers')
        if len(pattern) != self.layers[0].input_size:
            raise errors.ShapeMismatch('input pattern', self.layers[0].input_size, len(pattern))
        for c in range(1, len(self.layers)):
            if self.layers[c].input_size != len(self.layers[c - 1]):
                raise errors.ShapeMismatch(f'input of layer {c}', len(self.layers[c - 1]),
                                           self.layers[c].input_size)
        if target is not None and len(target) != len(self.layers[-1]):
            raise errors.ShapeMismatch('target vector', len(self.layers[-1]), len(target))

    def train(self,
              samples: Iterable[TrainingSample | tuple[Sequence[float], Sequence[float]]],
              learning_rate: float,
              target_error: float,
              max_epochs: int | None = None,
              log: logging.Logger | None = None,
              log_every: int = 1) -> int:
        """Train the network with backpropagation until the mean squared error
        of an epoch is no greater than target_error.

        Every epoch presents the samples in order. For each one the pattern is
        fed forward, the deltas are computed from the output layer back to the
        first, and only then are the weights updated from the first layer on.

        Args:
            samples: TrainingSample objects or (input, target) pairs
            learning_rate (float): step size of the weight updates
            target_error (float): stop once an epoch's mean squared error is at or below this
            max_epochs (int, optional): give up after this many epochs. Defaults to None (no limit).
            log (logging.Logger, optional): where progress goes. Defaults to this module's logger.
            log_every (int, optional): log every n epochs, 0 for never. Defaults to 1.

        Returns:
            int: number of epochs run

        Raises:
            errors.NetworkError: no layers or no samples
            errors.ShapeMismatch: a sample does not fit the network
            errors.NonConvergence: max_epochs was hit, or the error stopped being finite
        """
        samples = [s if isinstance(s, TrainingSample) else TrainingSample(*s) for s in samples]
        if not samples:
            raise errors.NetworkError('cannot train on an empty sample set')
        for s in samples:
            self._check_shapes(s.input, s.target)

        log = log or logger
        optim = optimizer.SGD(self, learning_rate)
        log.debug('Training %d layers on %d samples, learning rate %s, target error %s',
                  len(self.layers), len(samples), learning_rate, target_error)

        epochs = 0
        while True:
            global_error = 0.0
            for s in samples:
                self._forward(s.input)
                global_error += 0.5 * self._backward(s.target)
                optim.step(s.input)

            mse = loss.mean_squared_error(global_error, len(samples))
            epochs += 1
            if log_every and epochs % log_every == 0:
                log.info('Epoch %d has loss %f', epochs, mse)

            if not math.isfinite(mse):
                raise errors.NonConvergence(epochs, mse, 'error is not finite')
            if mse <= target_error:
                log.debug('Converged after %d epochs with loss %f', epochs, mse)
                return epochs
            if max_epochs is not None and epochs >= max_epochs:
                raise errors.NonConvergence(epochs, mse)

    def train_with_config(self, samples: Iterable[TrainingSample], cfg: config.TrainingConfig,
                          log: logging.Logger | None = None) -> int:
        """Same as train, with the knobs taken from a TrainingConfig"""
        if not cfg.is_valid():
            raise ValueError(f'invalid training configuration: {cfg}')
        return self.train(samples, cfg.learning_rate, cfg.target_error,
                          max_epochs=cfg.max_epochs, log=log, log_every=cfg.log_every)

    def __repr__(self) -> str:
        return f'Network({self.layers})'
