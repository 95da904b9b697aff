"""
Base classes and data structures for prediction clients.

This module provides:
- PredictionRequest: Immutable request sent to the prediction service
- ClassificationResult: A single (label, score) pair returned by the service
- BasePredictionClient: Abstract base class for prediction service clients
- PredictionError and subclasses: Error taxonomy for a prediction run
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from config import TEXT_MIME_TYPE


@dataclass(frozen=True)
class PredictionRequest:
    """
    Request for a single text-classification prediction.

    Attributes:
        model_reference: Full resource name of the trained model
        content: Raw text to classify
        mime_type: Content type of the text (always text/plain)
    """
    model_reference: str
    content: str
    mime_type: str = TEXT_MIME_TYPE


@dataclass(frozen=True)
class ClassificationResult:
    """A class label and its confidence score (0.0 - 1.0)."""
    label: str
    score: float

    def to_dict(self) -> dict:
        return {'label': self.label, 'score': self.score}


class BasePredictionClient(ABC):
    """
    Abstract base class for prediction service clients.

    Implementations send one request per predict() call and return the
    classification results in the order the service returned them.

    Example:
        class FakeClient(BasePredictionClient):
            def predict(self, request):
                return [ClassificationResult('Positive', 0.92)]
    """

    @abstractmethod
    def predict(self, request: PredictionRequest) -> List[ClassificationResult]:
        """
        Send a prediction request.

        Args:
            request: The request to send

        Returns:
            Classification results in service order

        Raises:
            PredictionServiceError: If the remote call fails for any reason
        """
        pass


class PredictionError(Exception):
    """Base exception for prediction-related errors."""
    pass


class FileAccessError(PredictionError):
    """Raised when the input text file is missing, unreadable or not UTF-8."""
    pass


class PredictionServiceError(PredictionError):
    """Raised when the remote prediction call fails."""
    pass
