import logging

import pytest

import main
from models.base import ClassificationResult, PredictionServiceError


@pytest.fixture
def cli(monkeypatch, tmp_path, fake_client_cls):
    """Runs main.main() from an empty working directory with the remote client replaced by a fake."""
    monkeypatch.chdir(tmp_path)
    for name in ('PROJECT_ID', 'REGION_NAME'):
        # set then delete so that values loaded from .env are removed on teardown
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    client = fake_client_cls(results=[ClassificationResult('Positive', 0.92)])
    monkeypatch.setattr('pipeline.predictor.AutoMLPredictionClient', lambda: client)

    def run(*argv):
        return main.main(list(argv))

    run.client = client
    return run


def test_predict_command(cli, text_file, capsys):
    code = cli('predict', '-z', '1234', '-c', 'us-central1', '-i', 'TCN1', '-f', str(text_file))

    assert code == 0
    out = capsys.readouterr().out
    assert 'Predicted class name:  Positive' in out
    assert 'Predicted class score:  0.92' in out
    assert cli.client.requests[0].model_reference == 'projects/1234/locations/us-central1/models/TCN1'


def test_long_option_names(cli, text_file):
    cli('predict', '--projectId', 'p', '--computeRegion', 'r', '--modelId', 'm',
        '--filePath', str(text_file), '--scoreThreshold', '0.7')

    assert cli.client.requests[0].model_reference == 'projects/p/locations/r/models/m'


def test_environment_defaults(cli, text_file, monkeypatch):
    monkeypatch.setenv('PROJECT_ID', 'env-project')
    monkeypatch.setenv('REGION_NAME', 'us-central1')

    cli('predict', '-i', 'TCN1', '-f', str(text_file))

    assert cli.client.requests[0].model_reference == \
        'projects/env-project/locations/us-central1/models/TCN1'


def test_missing_model_id_keeps_empty_segment(cli, text_file):
    cli('predict', '-z', 'p', '-c', 'r', '-f', str(text_file))

    assert cli.client.requests[0].model_reference == 'projects/p/locations/r/models/'


def test_missing_file_exits_with_error(cli, tmp_path, capsys):
    code = cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(tmp_path / 'nope.txt'))

    assert code == 1
    assert cli.client.requests == []
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Cannot read text file' in captured.err


def test_remote_failure_is_logged_and_exits_normally(cli, text_file, capsys):
    cli.client.error = PredictionServiceError('quota exceeded')

    code = cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(text_file))

    assert code == 0
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'quota exceeded' in captured.err


def test_output_file_written(cli, text_file, tmp_path):
    output = tmp_path / 'results.csv'

    cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(text_file), '-o', str(output))

    assert output.read_text(encoding='utf-8').splitlines()[0] == 'label,score'


def test_command_is_required(cli):
    with pytest.raises(SystemExit):
        cli()


def test_unknown_option_rejected(cli, text_file):
    with pytest.raises(SystemExit):
        cli('predict', '--bogus', 'x', '-f', str(text_file))


def test_log_level_applied(cli, text_file):
    cli('predict', '-i', 'm', '-f', str(text_file), '--log-level', 'DEBUG')

    assert logging.getLogger('automl_nl_predict').level == logging.DEBUG


def test_unsupported_output_extension_rejected_before_remote_call(cli, text_file, capsys):
    code = cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(text_file), '-o', 'out.txt')

    assert code == 1
    assert cli.client.requests == []
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "Unsupported output format '.txt'" in captured.err


def test_unwritable_output_logged_after_results(cli, text_file, tmp_path, capsys):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory', encoding='utf-8')

    code = cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(text_file),
               '-o', str(blocker / 'results.csv'))

    assert code == 1
    captured = capsys.readouterr()
    assert 'Predicted class name:  Positive' in captured.out
    assert 'Could not save results' in captured.err


def test_log_file_created_with_parent_directory(cli, text_file, tmp_path):
    log_path = tmp_path / 'logs' / 'sub' / 'run.log'

    cli('predict', '-z', 'p', '-c', 'r', '-i', 'm', '-f', str(text_file), '--log-file', str(log_path))

    content = log_path.read_text(encoding='utf-8')
    assert 'INFO' in content
    assert 'Received 1 classification result(s)' in content


def test_dotenv_in_working_directory_supplies_defaults(cli, text_file, tmp_path):
    (tmp_path / '.env').write_text('PROJECT_ID=dotenv-project\nREGION_NAME=europe-west4\n', encoding='utf-8')

    cli('predict', '-i', 'TCN1', '-f', str(text_file))

    assert cli.client.requests[0].model_reference == \
        'projects/dotenv-project/locations/europe-west4/models/TCN1'


def test_dotenv_does_not_override_environment(cli, text_file, tmp_path, monkeypatch):
    (tmp_path / '.env').write_text('PROJECT_ID=dotenv-project\n', encoding='utf-8')
    monkeypatch.setenv('PROJECT_ID', 'shell-project')

    cli('predict', '-c', 'r', '-i', 'm', '-f', str(text_file))

    assert cli.client.requests[0].model_reference == 'projects/shell-project/locations/r/models/m'
