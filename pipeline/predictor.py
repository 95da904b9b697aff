"""
Core Prediction Orchestrator

This module provides the Predictor class that runs one text-classification
request end to end: read file -> build request -> call service -> print.
"""

import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional, TextIO

from config import (
    DEFAULT_FILE_PATH,
    DEFAULT_MODEL_ID,
    DEFAULT_SCORE_THRESHOLD,
    ENV_PROJECT_ID,
    ENV_REGION_NAME,
    LABEL_LINE_PREFIX,
    RESULTS_HEADER,
    SCORE_LINE_PREFIX,
    TEXT_MIME_TYPE,
)
from models.automl_client import AutoMLPredictionClient, build_model_reference
from models.base import (
    BasePredictionClient,
    ClassificationResult,
    FileAccessError,
    PredictionRequest,
    PredictionServiceError,
)
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class PredictionConfig:
    """
    Configuration for a single prediction run.

    Every option resolves as: explicit value > environment variable >
    hard-coded default. Only project_id and region have environment sources.

    Attributes:
        project_id: Project that owns the model (env: PROJECT_ID)
        region: Compute region name (env: REGION_NAME)
        model_id: Id of the trained model
        file_path: Local text file to classify
        score_threshold: Accepted for compatibility; never applied to results
    """
    project_id: str = ''
    region: str = ''
    model_id: str = DEFAULT_MODEL_ID
    file_path: str = DEFAULT_FILE_PATH
    score_threshold: str = DEFAULT_SCORE_THRESHOLD

    @classmethod
    def from_sources(
        cls,
        project_id: Optional[str] = None,
        region: Optional[str] = None,
        model_id: Optional[str] = None,
        file_path: Optional[str] = None,
        score_threshold: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> 'PredictionConfig':
        """
        Resolve a config from explicit values and the environment.

        Args:
            project_id: Explicit project id, or None to fall back
            region: Explicit region, or None to fall back
            model_id: Explicit model id, or None for the default
            file_path: Explicit file path, or None for the default
            score_threshold: Explicit threshold, or None for the default
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Resolved PredictionConfig
        """
        env = os.environ if environ is None else environ

        def pick(explicit, env_name, default):
            if explicit is not None:
                return explicit
            if env_name and env.get(env_name) is not None:
                return env[env_name]
            return default

        return cls(
            project_id=pick(project_id, ENV_PROJECT_ID, ''),
            region=pick(region, ENV_REGION_NAME, ''),
            model_id=pick(model_id, None, DEFAULT_MODEL_ID),
            file_path=pick(file_path, None, DEFAULT_FILE_PATH),
            score_threshold=pick(score_threshold, None, DEFAULT_SCORE_THRESHOLD),
        )

    @property
    def model_reference(self) -> str:
        return build_model_reference(self.project_id, self.region, self.model_id)


@dataclass
class PredictionOutcome:
    """Result of one prediction run: either results or an error."""
    request: PredictionRequest
    results: Optional[List[ClassificationResult]] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.results is not None


def read_snippet(file_path: str) -> str:
    """
    Read a whole text file as UTF-8.

    Args:
        file_path: Path to the file

    Returns:
        File contents, unmodified

    Raises:
        FileAccessError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        # newline='' keeps line endings exactly as stored
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read text file '{file_path}': {e}")


def print_results(results: List[ClassificationResult], stream: Optional[TextIO] = None) -> None:
    """Print the header and one name/score line pair per result, in order."""
    out = stream or sys.stdout
    print(RESULTS_HEADER, file=out)
    for result in results:
        print(LABEL_LINE_PREFIX, result.label, file=out)
        print(SCORE_LINE_PREFIX, result.score, file=out)


class Predictor:
    """
    Runs a text-classification prediction against a remote model.

    Example:
        config = PredictionConfig.from_sources(model_id='TCN123')
        predictor = Predictor(config)
        outcome = predictor.predict()
        if outcome.succeeded:
            print(outcome.results[0].label)
    """

    def __init__(
        self,
        config: PredictionConfig,
        client: Optional[BasePredictionClient] = None,
        stream: Optional[TextIO] = None
    ):
        """
        Args:
            config: Prediction configuration
            client: Prediction client (AutoML client when omitted)
            stream: Where prediction lines are printed (stdout when omitted)
        """
        self.config = config
        self.client = client or AutoMLPredictionClient()
        self.stream = stream

    def build_request(self, file_path: Optional[str] = None) -> PredictionRequest:
        """Read the input file and wrap it in a PredictionRequest."""
        snippet = read_snippet(file_path or self.config.file_path)
        return PredictionRequest(
            model_reference=self.config.model_reference,
            content=snippet,
            mime_type=TEXT_MIME_TYPE,
        )

    def predict(self, file_path: Optional[str] = None) -> PredictionOutcome:
        """
        Classify the content of a local text file.

        File errors propagate as FileAccessError before any remote call.
        Remote errors are logged once and returned in the outcome.

        Args:
            file_path: Overrides config.file_path when given

        Returns:
            PredictionOutcome with results or the remote error
        """
        request = self.build_request(file_path)
        logger.debug(
            f"Score threshold {self.config.score_threshold} is accepted but not applied to results"
        )

        try:
            results = self.client.predict(request)
        except PredictionServiceError as e:
            logger.error(str(e))
            return PredictionOutcome(request=request, error=e)

        print_results(results, self.stream)
        logger.info(f"Received {len(results)} classification result(s) from {request.model_reference}")
        return PredictionOutcome(request=request, results=results)


def predict(
    project_id: str,
    region: str,
    model_id: str,
    file_path: str,
    score_threshold: str = DEFAULT_SCORE_THRESHOLD,
    client: Optional[BasePredictionClient] = None
) -> PredictionOutcome:
    """
    Classify a local text file with a trained AutoML Natural Language model.

    Args:
        project_id: Id of the project
        region: Region name
        model_id: Id of the model used for text classification
        file_path: Local text file path of the content to be classified
        score_threshold: Accepted but not applied
        client: Optional prediction client override

    Returns:
        PredictionOutcome
    """
    config = PredictionConfig(
        project_id=project_id,
        region=region,
        model_id=model_id,
        file_path=file_path,
        score_threshold=score_threshold,
    )
    return Predictor(config, client=client).predict()
