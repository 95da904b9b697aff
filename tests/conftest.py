import logging

import pytest

from config import LOGGER_NAME
from models.base import BasePredictionClient, ClassificationResult, PredictionServiceError


class FakePredictionClient(BasePredictionClient):
    """Records requests and replays canned results or an error."""

    def __init__(self, results=None, error=None):
        self.results = results or []
        self.error = error
        self.requests = []

    def predict(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return list(self.results)


@pytest.fixture
def positive_client():
    return FakePredictionClient(results=[ClassificationResult('Positive', 0.92)])


@pytest.fixture
def failing_client():
    return FakePredictionClient(error=PredictionServiceError('403 Permission denied on model'))


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / 'review.txt'
    path.write_text('I love this product', encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_client_cls():
    return FakePredictionClient
