from abc import ABC, abstractmethod


class BaseEvaluator(ABC):
    """Base class for all record evaluators."""

    def __init__(self, endpoint: str | None = None):
        # DoH resolver URL; None means the configured default
        self.endpoint = endpoint

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this evaluator."""

    @abstractmethod
    def evaluate(self, domain: str):
        """Query the records for ``domain`` and return a verdict."""
