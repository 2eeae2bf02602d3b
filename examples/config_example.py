"""
Configuration example for the name generator.

Generators can be described as JSON, saved to disk and loaded back. The
random source is never part of the saved settings.
"""

import random
from pathlib import Path

from random_names import Generator
from random_names.utils import load_config, save_config

CONFIG = """
{
    "casing": "CamelCase",
    "naming": {"ZeroPaddedNumbered": [2, "_"]},
    "length": {"Truncate": 20}
}
"""

# Load from a JSON string, with a seeded random source for repeatable output
generator = Generator.from_json(CONFIG, rng=random.Random(42))
print(f"My new name is: {next(generator)}")

# Save the settings and load them back
config_path = save_config(generator, Path("./configs/camel.json"))
print(f"Settings saved to: {config_path}")

restored = Generator.from_dict(load_config(config_path))
print(f"Restored casing: {restored.casing.style.value}")
print(f"Restored name: {next(restored)}")
