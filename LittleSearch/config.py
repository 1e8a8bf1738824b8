import copy
import json
import os

DEFAULT_CONFIG = {
    "preprocessing": {
        "punctuation": ".,?:;!",
    },
    "search": {
        "max_results": 5,
    },
}


def load_config(config_path=None):
    """
    Load configuration from a JSON file, falling back to defaults.

    Args:
        config_path: Path to a config JSON file. When omitted, config.json
            next to the package is used if it exists.

    Returns:
        dict: Configuration with every section filled in
    """
    if config_path is None:
        config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")
        if not os.path.exists(config_path):
            return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Warning: Could not load config file: {e}. Using default settings.")
        return copy.deepcopy(DEFAULT_CONFIG)

    return merge_config(user_config)


def merge_config(user_config):
    """Overlay a (possibly partial) config dict on the defaults, section by section"""
    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in (user_config or {}).items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config
