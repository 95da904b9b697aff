"""
Command-line entry point for AutoML Natural Language text classification.

Usage:
    python main.py predict -i "modelId" -f "./resources/test.txt" -s "0.5"

Project id and region default to the PROJECT_ID and REGION_NAME environment
variables (also read from a .env file in or above the working directory).
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from config import (
    DEFAULT_FILE_PATH,
    DEFAULT_SCORE_THRESHOLD,
    ENV_PROJECT_ID,
    ENV_REGION_NAME,
    LOG_LEVELS,
    LOGGER_NAME,
)
from models.base import FileAccessError
from pipeline.predictor import PredictionConfig, Predictor
from utils.logger import get_logger, setup_logger
from utils.result_writer import output_format, save_results

logger = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the 'predict' command."""
    parser = argparse.ArgumentParser(
        description='Classify text content with a Google Cloud AutoML Natural Language model',
        epilog='Example: python main.py predict -i "modelId" -f "./resources/test.txt" -s "0.5"'
    )
    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True

    predict_parser = subparsers.add_parser('predict', help='classify the content')
    predict_parser.add_argument('--computeRegion', '-c', dest='compute_region', default=None,
                                help=f'region name e.g. "us-central1" (default: ${ENV_REGION_NAME})')
    predict_parser.add_argument('--filePath', '-f', dest='file_path', default=None,
                                help=f'local text file path of the content to be classified '
                                     f'(default: {DEFAULT_FILE_PATH})')
    predict_parser.add_argument('--modelId', '-i', dest='model_id', default=None,
                                help='Id of the model which will be used for text classification')
    predict_parser.add_argument('--projectId', '-z', dest='project_id', default=None,
                                help=f'The Project ID to use (default: ${ENV_PROJECT_ID})')
    predict_parser.add_argument('--scoreThreshold', '-s', dest='score_threshold', default=None,
                                help=f'A value from 0.0 to 1.0. Accepted for compatibility; '
                                     f'results are not filtered by it (default: {DEFAULT_SCORE_THRESHOLD})')
    predict_parser.add_argument('--output', '-o', default=None,
                                help='Optional .csv or .json file to save the results to')
    predict_parser.add_argument('--log-level', default='INFO', choices=LOG_LEVELS,
                                help='Logging level (default: INFO)')
    predict_parser.add_argument('--log-file', default=None,
                                help='Optional log file path')
    return parser


def run_predict(args: argparse.Namespace) -> int:
    """Run the 'predict' command and return the process exit code."""
    config = PredictionConfig.from_sources(
        project_id=args.project_id,
        region=args.compute_region,
        model_id=args.model_id,
        file_path=args.file_path,
        score_threshold=args.score_threshold,
    )
    logger.debug(f"Resolved configuration: {config}")

    # Reject a bad export path before the remote call is made
    if args.output:
        try:
            output_format(args.output)
        except ValueError as e:
            logger.error(str(e))
            return 1

    predictor = Predictor(config)
    try:
        outcome = predictor.predict()
    except FileAccessError as e:
        logger.error(str(e))
        return 1

    if outcome.succeeded and args.output:
        try:
            save_results(outcome.results, args.output)
        except (ValueError, OSError) as e:
            logger.error(f"Could not save results to '{args.output}': {e}")
            return 1

    # Remote failures are already logged; they do not change the exit code
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function for command line execution
    """
    # .env is looked up from the working directory upwards
    load_dotenv(find_dotenv(usecwd=True))

    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(
        name=LOGGER_NAME,
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
    )

    return run_predict(args)


if __name__ == "__main__":
    sys.exit(main())
