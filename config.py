"""
Configuration module for the AutoML Natural Language prediction sample.

This module centralizes all configuration constants and default values
used throughout the application.

IMPORTANT: This module should ONLY import from the standard library and typing.
Do not import from project modules to avoid circular dependencies.
All project modules can safely import from this config.
"""

import logging

# =============================================================================
# Environment Variables
# =============================================================================

ENV_PROJECT_ID = 'PROJECT_ID'
ENV_REGION_NAME = 'REGION_NAME'

# =============================================================================
# CLI Defaults
# =============================================================================

DEFAULT_FILE_PATH = './resources/test.txt'
DEFAULT_SCORE_THRESHOLD = '0.5'  # Accepted on the command line, not applied to results
DEFAULT_MODEL_ID = ''

# =============================================================================
# Prediction Service
# =============================================================================

TEXT_MIME_TYPE = 'text/plain'
MODEL_REFERENCE_TEMPLATE = 'projects/{project}/locations/{location}/models/{model}'

# =============================================================================
# Output Configuration
# =============================================================================

OUTPUT_FORMATS = ['csv', 'json']
RESULTS_HEADER = 'Prediction results:'
LABEL_LINE_PREFIX = 'Predicted class name: '
SCORE_LINE_PREFIX = 'Predicted class score: '

# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME = 'automl_nl_predict'
DEFAULT_LOG_LEVEL = logging.INFO
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

__all__ = [
    'ENV_PROJECT_ID',
    'ENV_REGION_NAME',
    'DEFAULT_FILE_PATH',
    'DEFAULT_SCORE_THRESHOLD',
    'DEFAULT_MODEL_ID',
    'TEXT_MIME_TYPE',
    'MODEL_REFERENCE_TEMPLATE',
    'OUTPUT_FORMATS',
    'RESULTS_HEADER',
    'LABEL_LINE_PREFIX',
    'SCORE_LINE_PREFIX',
    'LOGGER_NAME',
    'DEFAULT_LOG_LEVEL',
    'LOG_LEVELS',
]
