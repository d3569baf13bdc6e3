"""File I/O utilities for Category Cloud."""

import os
import pandas as pd
from pathlib import Path
from typing import List, Union


def ensure_directory_exists(directory: str) -> None:
    """Ensure that a directory exists, creating it if necessary."""
    if directory:
        os.makedirs(directory, exist_ok=True)


def read_csv_with_fallback(csv_path: Union[str, Path]) -> pd.DataFrame:
    """Read a CSV trying UTF-8 first and falling back to common legacy encodings.

    Args:
        csv_path: Path to the CSV file

    Returns:
        DataFrame with the file contents
    """
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    encodings: List[str] = ['utf-8', 'latin-1']
    last_error = None
    for encoding in encodings:
        try:
            return pd.read_csv(csv_path, encoding=encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
            continue
    raise last_error


def save_html(content: str, output_path: Union[str, Path]) -> str:
    """Save HTML content to a file.

    Args:
        content: HTML content to save
        output_path: Path to save the HTML file

    Returns:
        Path to the saved file
    """
    output_path = str(output_path)
    ensure_directory_exists(os.path.dirname(output_path))
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(content)
    return output_path
