"""
Prediction pipeline components.

This package contains:
- predictor: PredictionConfig, Predictor and the predict() entry point
"""

__version__ = '1.0.0'
