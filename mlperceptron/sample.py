"""Training data: input patterns paired with the outputs we want for them."""

from dataclasses import dataclass
from typing import Iterable, Sequence

from mlperceptron import tensor


@dataclass(frozen=True, eq=False)
class TrainingSample():
    input: tensor.Tensor
    target: tensor.Tensor

    def __post_init__(self):
        # frozen, so go around __setattr__ to store the coerced copies
        object.__setattr__(self, 'input', tensor.as_tensor(self.input))
        object.__setattr__(self, 'target', tensor.as_tensor(self.target))

    def is_valid(self):
        if len(self.input) == 0 or len(self.target) == 0:
            return False
        return True

    def __repr__(self) -> str:
        return f'TrainingSample({self.input.tolist()} -> {self.target.tolist()})'


def samples_from_pairs(pairs: Iterable[tuple[Sequence[float], Sequence[float]]]) -> list[TrainingSample]:
    """Turn (input, target) pairs into a list of samples

    Args:
        pairs (Iterable[tuple[Sequence[float], Sequence[float]]]): e.g. [([0, 1], [1]), ...]

    Returns:
        list[TrainingSample]: one sample per pair, in the same order
    """
    return [TrainingSample(x, y) for x, y in pairs]


# two-input truth tables, handy for checking that a network learns at all
XOR = samples_from_pairs([([1, 0], [1]),
                          ([0, 1], [1]),
                          ([1, 1], [0]),
                          ([0, 0], [0])])

AND = samples_from_pairs([([0, 0], [0]),
                          ([0, 1], [0]),
                          ([1, 0], [0]),
                          ([1, 1], [1])])

OR = samples_from_pairs([([1, 0], [1]),
                         ([0, 1], [1]),
                         ([0, 0], [0]),
                         ([1, 1], [1])])
