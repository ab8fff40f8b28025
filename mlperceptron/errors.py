"""Things that can go wrong while building or training a network."""


class NetworkError(Exception):
    """Base class for every error raised by mlperceptron"""


class ShapeMismatch(NetworkError, ValueError):
    def __init__(self, what: str, expected: int, actual: int):
        """A vector or layer does not have the width its neighbour expects

        Args:
            what (str): short description of the offending value
            expected (int): width the receiving layer was built for
            actual (int): width that was actually supplied
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f'{what}: expected {expected} values, got {actual}')


class InvalidRange(NetworkError, ValueError):
    def __init__(self, low: float, high: float):
        self.low = low
        self.high = high
        super().__init__(f'invalid weight range [{low}, {high}): low is greater than high')


class NonConvergence(NetworkError, RuntimeError):
    def __init__(self, epochs: int, error: float, reason: str = 'epoch limit reached'):
        """Training stopped before the target error was reached

        Args:
            epochs (int): epochs run before giving up
            error (float): mean squared error of the last epoch
            reason (str, optional): why training stopped. Defaults to 'epoch limit reached'.
        """
        self.epochs = epochs
        self.error = error
        super().__init__(f'no convergence after {epochs} epochs ({reason}), last error {error}')
