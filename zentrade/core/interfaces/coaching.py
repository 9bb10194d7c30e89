"""
Coaching service interfaces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from zentrade.core.constants import (
    COACHING_SYSTEM_INSTRUCTION,
    COACHING_TEMPERATURE,
    DEFAULT_COACHING_MODEL,
)


@dataclass(frozen=True)
class CoachingPrompt:
    """A single text-generation request."""

    contents: str
    system_instruction: str = COACHING_SYSTEM_INSTRUCTION
    temperature: float = COACHING_TEMPERATURE
    model: str = DEFAULT_COACHING_MODEL


class ICoachingClient(ABC):
    """Abstract interface for the external text-generation service."""

    @abstractmethod
    def generate(self, prompt: CoachingPrompt) -> str:
        """Return generated text for the prompt.

        Implementations raise CoachingError (or any exception) on failure.
        """
        pass
