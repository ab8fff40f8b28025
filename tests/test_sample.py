import numpy as np

from mlperceptron import config, sample


class TestTrainingSample:
    def test_coerces_to_float_tensors(self):
        s = sample.TrainingSample([1, 0], (1,))
        assert isinstance(s.input, np.ndarray)
        assert s.input.dtype == float
        assert s.target.tolist() == [1.0]

    def test_is_valid(self):
        assert sample.TrainingSample([0.5], [1]).is_valid()
        assert not sample.TrainingSample([], [1]).is_valid()
        assert not sample.TrainingSample([1], []).is_valid()

    def test_repr(self):
        assert repr(sample.TrainingSample([1, 0], [1])) == 'TrainingSample([1.0, 0.0] -> [1.0])'

    def test_from_pairs_keeps_order(self):
        samples = sample.samples_from_pairs([([0, 0], [0]), ([1, 1], [1])])
        assert [s.input.tolist() for s in samples] == [[0.0, 0.0], [1.0, 1.0]]


class TestTruthTables:
    def test_xor(self):
        table = {tuple(s.input): s.target[0] for s in sample.XOR}
        assert table == {(0, 0): 0, (0, 1): 1, (1, 0): 1, (1, 1): 0}

    def test_and(self):
        table = {tuple(s.input): s.target[0] for s in sample.AND}
        assert table == {(0, 0): 0, (0, 1): 0, (1, 0): 0, (1, 1): 1}

    def test_or(self):
        table = {tuple(s.input): s.target[0] for s in sample.OR}
        assert table == {(0, 0): 0, (0, 1): 1, (1, 0): 1, (1, 1): 1}


class TestTrainingConfig:
    def test_defaults(self):
        cfg = config.TrainingConfig()
        assert cfg.learning_rate == 0.3
        assert cfg.target_error == 0.001
        assert cfg.max_epochs is None
        assert cfg.is_valid()

    def test_invalid(self):
        assert not config.TrainingConfig(learning_rate=-1).is_valid()
        assert not config.TrainingConfig(target_error=-0.1).is_valid()
        assert not config.TrainingConfig(max_epochs=0).is_valid()
        assert not config.TrainingConfig(log_every=-1).is_valid()
