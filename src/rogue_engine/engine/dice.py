"""Random source for the floor simulation.

Every random decision in a turn (dazzle misses, wander triggers, wander
directions) is drawn from a DiceRoller handed to the floor, so a seeded or
scripted roller makes whole games reproducible.
"""

from __future__ import annotations

import random

from rogue_engine.core.logging import get_logger
from rogue_engine.models.enums import Direction


logger = get_logger(__name__)


class DiceRoller:
    """Seedable uniform random source.

    Each roller owns its own ``random.Random`` instance, so rollers never
    share state with each other or with the global generator.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> roller.one_in(4) in (True, False)
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        self._random = random.Random(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll_die(self, sides: int) -> int:
        """Roll a single die.

        Args:
            sides: Number of faces, at least 1.

        Returns:
            A uniform integer in ``[1, sides]``.
        """
        return self._random.randint(1, sides)

    def one_in(self, n: int) -> bool:
        """Succeed with probability ``1/n``."""
        return self.roll_die(n) == 1

    def chance(self, probability: float) -> bool:
        """Succeed with the given probability.

        Args:
            probability: Success chance in ``[0, 1]``.

        Returns:
            True on success.
        """
        return self._random.random() < probability

    def choose_direction(self) -> Direction:
        """Pick one of the four cardinal directions uniformly."""
        return self._random.choice(list(Direction))


__all__ = ["DiceRoller"]
