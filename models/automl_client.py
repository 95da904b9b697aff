"""
Google Cloud AutoML Natural Language prediction client.

Wraps automl_v1beta1.PredictionServiceClient behind BasePredictionClient.
"""

from typing import Any, List, Optional

from google.cloud import automl_v1beta1

from config import MODEL_REFERENCE_TEMPLATE
from models.base import (
    BasePredictionClient,
    ClassificationResult,
    PredictionRequest,
    PredictionServiceError,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def build_model_reference(project_id: str, region: str, model_id: str) -> str:
    """
    Build the full resource name of a trained model.

    Segments are inserted as given; an empty model id produces a reference
    ending in 'models/'. The service decides whether the reference is valid.

    Args:
        project_id: Project that owns the model
        region: Compute region name, e.g. "us-central1"
        model_id: Id of the trained model

    Returns:
        'projects/{project}/locations/{region}/models/{model}'
    """
    return MODEL_REFERENCE_TEMPLATE.format(
        project=project_id if project_id is not None else '',
        location=region if region is not None else '',
        model=model_id if model_id is not None else '',
    )


class AutoMLPredictionClient(BasePredictionClient):
    """AutoML Natural Language text classification client."""

    def __init__(self, client: Optional[Any] = None):
        """
        Args:
            client: Optional pre-built PredictionServiceClient. Created on
                first use when omitted, using application default credentials.
        """
        self.client = client

    def _get_client(self) -> automl_v1beta1.PredictionServiceClient:
        """Get or create the AutoML prediction service client."""
        if self.client is None:
            try:
                self.client = automl_v1beta1.PredictionServiceClient()
            except Exception as e:
                raise PredictionServiceError(f"Could not create AutoML prediction client: {e}")
        return self.client

    @staticmethod
    def build_payload(request: PredictionRequest) -> automl_v1beta1.ExamplePayload:
        """Wrap the request text in an ExamplePayload text snippet."""
        return automl_v1beta1.ExamplePayload(
            text_snippet=automl_v1beta1.TextSnippet(
                content=request.content,
                mime_type=request.mime_type,
            )
        )

    def predict(self, request: PredictionRequest) -> List[ClassificationResult]:
        """Call the AutoML predict endpoint once."""
        client = self._get_client()
        payload = self.build_payload(request)

        logger.debug(f"Sending prediction request to {request.model_reference}")
        try:
            # params carries additional domain-specific parameters; none are supported
            response = client.predict(
                name=request.model_reference,
                payload=payload,
                params={},
            )
        except Exception as e:
            raise PredictionServiceError(
                f"Error querying AutoML model '{request.model_reference}': {e}"
            )

        return [
            ClassificationResult(
                label=annotation.display_name,
                score=annotation.classification.score,
            )
            for annotation in response.payload
        ]
