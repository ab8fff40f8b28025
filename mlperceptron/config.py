"""Knobs for a training run."""

from dataclasses import dataclass


@dataclass
class TrainingConfig():
    learning_rate: float = 0.3
    target_error: float = 0.001
    max_epochs: int | None = None # None trains until the target error is reached
    log_every: int = 1            # log progress every n epochs, 0 turns it off

    def is_valid(self):
        if self.learning_rate <= 0:
            return False
        if self.target_error < 0:
            return False
        if self.max_epochs is not None and self.max_epochs < 1:
            return False
        if self.log_every < 0:
            return False
        return True
