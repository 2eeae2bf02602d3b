"""
Utility functions for the name generator
"""

from .file_utils import ensure_directory, load_config, load_word_list, save_config
from .name_generator import generate_names, generate_unique_name

__all__ = [
    "ensure_directory",
    "load_config",
    "load_word_list",
    "save_config",
    "generate_names",
    "generate_unique_name",
]
