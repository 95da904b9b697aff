"""
Prediction client implementations and interfaces.

This package contains:
- base: BasePredictionClient abstract class, request/result dataclasses, errors
- automl_client: Google Cloud AutoML Natural Language client
"""

__version__ = '1.0.0'
