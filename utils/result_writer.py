"""
Export classification results to CSV or JSON.
"""

from pathlib import Path
from typing import List

import pandas as pd

from config import OUTPUT_FORMATS
from models.base import ClassificationResult
from utils.logger import get_logger

logger = get_logger(__name__)


def results_to_dataframe(results: List[ClassificationResult]) -> pd.DataFrame:
    """One row per result, in service order, with 'label' and 'score' columns."""
    return pd.DataFrame([r.to_dict() for r in results], columns=['label', 'score'])


def output_format(output_path: str) -> str:
    """
    Return the export format for a path, taken from its extension.

    Raises:
        ValueError: If the extension is not a supported output format
    """
    suffix = Path(output_path).suffix
    fmt = suffix.lstrip('.').lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format '{suffix}'. Use one of: {OUTPUT_FORMATS}")
    return fmt


def save_results(results: List[ClassificationResult], output_path: str) -> str:
    """
    Save results to a file; format is taken from the extension.

    Args:
        results: Classification results
        output_path: Destination ending in .csv or .json

    Returns:
        The output path

    Raises:
        ValueError: If the extension is not a supported output format
    """
    fmt = output_format(output_path)
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    results_df = results_to_dataframe(results)

    if fmt == 'csv':
        results_df.to_csv(path, index=False, encoding='utf-8')
    else:
        results_df.to_json(path, orient='records', indent=2, force_ascii=False)

    logger.info(f"Saved {len(results_df)} result(s) to {path}")
    return str(path)
