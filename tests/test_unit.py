import numpy as np
import pytest

from mlperceptron import errors
from mlperceptron.unit import Unit


class TestUnit:
    def test_defaults(self):
        unit = Unit(5)
        assert unit.size == 5
        assert unit.bias == 1.0
        assert unit.activation == 0.0
        assert unit.activation_derivative == 0.0
        assert unit.propagated_error == 0.0
        assert np.all(unit.weights >= -0.5)
        assert np.all(unit.weights < 0.5)

    def test_custom_range(self):
        unit = Unit(200, bias=0.25, low=2.0, high=3.0)
        assert unit.bias == 0.25
        assert np.all(unit.weights >= 2.0)
        assert np.all(unit.weights < 3.0)

    def test_one_bound_falls_back_to_defaults(self):
        unit = Unit(200, low=10.0)
        assert np.all(unit.weights < 0.5)

    def test_weights_are_independent(self):
        unit = Unit(50)
        assert len(set(unit.weights.tolist())) == 50

    def test_zero_weights(self):
        unit = Unit(0)
        assert unit.size == 0
        assert unit.weights.shape == (0,)

    def test_empty_range(self):
        unit = Unit(3, low=0.2, high=0.2)
        assert unit.weights.tolist() == [0.2, 0.2, 0.2]

    def test_invalid_range(self):
        with pytest.raises(errors.InvalidRange) as excinfo:
            Unit(3, low=1.0, high=-1.0)
        assert excinfo.value.low == 1.0
        assert excinfo.value.high == -1.0
        assert isinstance(excinfo.value, ValueError)
