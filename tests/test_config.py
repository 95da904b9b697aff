from config import DEFAULT_FILE_PATH, DEFAULT_SCORE_THRESHOLD
from pipeline.predictor import PredictionConfig


def test_explicit_values_win_over_environment():
    env = {'PROJECT_ID': 'env-project', 'REGION_NAME': 'europe-west1'}

    config = PredictionConfig.from_sources(project_id='flag-project', region='us-central1', environ=env)

    assert config.project_id == 'flag-project'
    assert config.region == 'us-central1'


def test_environment_used_when_flags_missing():
    env = {'PROJECT_ID': '1234567', 'REGION_NAME': 'us-central1'}

    config = PredictionConfig.from_sources(environ=env)

    assert config.project_id == '1234567'
    assert config.region == 'us-central1'


def test_hard_coded_defaults():
    config = PredictionConfig.from_sources(environ={})

    assert config.project_id == ''
    assert config.region == ''
    assert config.model_id == ''
    assert config.file_path == DEFAULT_FILE_PATH
    assert config.score_threshold == DEFAULT_SCORE_THRESHOLD == '0.5'


def test_model_reference_format():
    config = PredictionConfig(project_id='p1', region='us-central1', model_id='TCN9')

    assert config.model_reference == 'projects/p1/locations/us-central1/models/TCN9'
