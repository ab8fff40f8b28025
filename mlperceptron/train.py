"""Train a small 2-2-1 perceptron on the two-input truth tables and show what it learned"""

import logging

import numpy as np

from mlperceptron import activation, config, sample
from mlperceptron.layer import Layer
from mlperceptron.network import Network


def build_network(inputs: int = 2, hidden: int = 2, outputs: int = 1,
                  fn: activation.ActivationFunction = activation.SIGMOID) -> Network:
    """Two layers of units: a hidden layer and the output layer"""
    net = Network()
    net.add_layer(Layer.with_activation(inputs, hidden, fn))
    net.add_layer(Layer.with_activation(hidden, outputs, fn))
    return net


def train_table(name: str, samples: list[sample.TrainingSample],
                cfg: config.TrainingConfig = config.TrainingConfig()) -> Network:
    """Train a fresh network on a truth table and print its answers"""
    net = build_network()
    epochs = net.train_with_config(samples, cfg)
    print(f'\nResults of training ({name}) after {epochs} epochs:')
    for s in samples:
        print(f'{s.input.tolist()} -> {net.predict(s.input)[0]:.4f}')
    return net


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    np.random.seed(0)

    cfg = config.TrainingConfig(learning_rate=0.3, target_error=0.001,
                                max_epochs=200000, log_every=1000)
    for name, table in [('XOR', sample.XOR), ('AND', sample.AND), ('OR', sample.OR)]:
        train_table(name, table, cfg)
