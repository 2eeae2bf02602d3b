"""
File utility functions for the name generator.
"""

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Union

from random_names.core import InvalidConfigError

if TYPE_CHECKING:
    from random_names.core import Generator

logger = logging.getLogger("NameGenerator")


def ensure_directory(directory: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path to ensure exists

    Returns:
        Path object for the directory
    """
    if isinstance(directory, str):
        directory = Path(directory)

    os.makedirs(directory, exist_ok=True)
    return directory


def load_word_list(file_path: Union[str, Path]) -> List[str]:
    """
    Load a word list, one word per line.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        file_path: Path to the word list file

    Returns:
        List of words in file order
    """
    if isinstance(file_path, str):
        file_path = Path(file_path)

    words = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word)

    logger.debug(f"Loaded {len(words)} words from {file_path}")
    return words


def load_config(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load generator settings from a JSON file.

    Args:
        file_path: Path to the JSON config file

    Returns:
        The settings mapping, ready for ``Generator.from_dict``

    Raises:
        InvalidConfigError: If the file is not a JSON object
    """
    if isinstance(file_path, str):
        file_path = Path(file_path)

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"invalid JSON in {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(f"{file_path} must contain a JSON object")
    return data


def save_config(generator: "Generator", file_path: Union[str, Path]) -> Path:
    """
    Save a generator's settings to a JSON file.

    Args:
        generator: Generator whose configuration to save
        file_path: Path to save the JSON file to

    Returns:
        Path the settings were written to
    """
    if isinstance(file_path, str):
        file_path = Path(file_path)

    # Ensure parent directory exists
    ensure_directory(file_path.parent)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(generator.to_dict(), f, indent=2)

    return file_path
