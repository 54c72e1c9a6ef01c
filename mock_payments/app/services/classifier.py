from __future__ import annotations

import random
from collections.abc import Mapping
from enum import IntEnum
from typing import Optional


class Outcome(IntEnum):
    """Result codes reported in the ``status`` field of every envelope."""

    SUCCESS = 100
    FAILURE = 101
    SUSPICIOUS = 102


def weighted_choice(
    weights: Mapping[Outcome, int],
    rng: Optional[random.Random] = None,
) -> Outcome:
    outcomes = list(weights)
    rng = rng or random.Random()
    return rng.choices(outcomes, weights=[weights[o] for o in outcomes], k=1)[0]


class OutcomeClassifier:
    """Draws one outcome per payment attempt; no state carries between draws."""

    def __init__(
        self,
        weights: Mapping[Outcome, int],
        rng: Optional[random.Random] = None,
    ) -> None:
        if not weights:
            raise ValueError("At least one outcome weight is required")
        if any(weight < 0 for weight in weights.values()):
            raise ValueError("Outcome weights cannot be negative")
        if sum(weights.values()) == 0:
            raise ValueError("Outcome weights must not all be zero")
        self.weights = {Outcome(outcome): weight for outcome, weight in weights.items()}
        self.rng = rng or random.Random()

    @classmethod
    def uniform(cls, rng: Optional[random.Random] = None) -> "OutcomeClassifier":
        return cls({outcome: 1 for outcome in Outcome}, rng=rng)

    @classmethod
    def always(cls, outcome: Outcome) -> "OutcomeClassifier":
        return cls({outcome: 1})

    def draw(self) -> Outcome:
        return weighted_choice(self.weights, self.rng)
