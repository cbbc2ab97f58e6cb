from abc import ABC, abstractmethod

from app.logging.logger import Log


class BaseGenerationTrigger(ABC):
    """Contract for starting presentation generation from a final prompt."""

    @abstractmethod
    def start(self, prompt: str) -> None:
        """Hand the assembled prompt to the generation pipeline."""


class RecordingGenerationTrigger(BaseGenerationTrigger):
    """Trigger that keeps every prompt it receives.

    No generation happens. Useful for local development, tests, and as a
    template for wiring a real generation backend.
    """

    def __init__(self) -> None:
        self.prompts: list[str] = []

    def start(self, prompt: str) -> None:
        Log.info(f"Generation requested with {len(prompt)} chars of prompt text")
        self.prompts.append(prompt)
