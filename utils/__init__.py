"""
AutoML Natural Language Predict - Utility Modules

This package contains:
- logger: Logging utilities
- result_writer: CSV/JSON export of classification results

Modules should be imported directly (e.g. `from utils.logger import get_logger`).
"""

__version__ = '1.0.0'
