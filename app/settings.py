from constants import *
import copy
import yaml
import os

import logging

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def _write_settings(settings):
    os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
    with open(CONFIG_FILE, "w") as yaml_file:
        yaml.dump(settings, yaml_file)


def load_settings(force=False):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    if os.path.exists(CONFIG_FILE):
        logger.debug(f"Reading configuration file: {CONFIG_FILE}")
        with open(CONFIG_FILE, "r") as yaml_file:
            settings = yaml.safe_load(yaml_file) or {}

        # Deep merge with defaults so sections added later are present
        merged_settings = copy.deepcopy(DEFAULT_SETTINGS)
        for section, values in settings.items():
            if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
                merged_settings[section].update(values)
            else:
                merged_settings[section] = values
        settings = merged_settings

    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        _write_settings(settings)

    _cached_settings = settings
    return settings


def verify_settings(section, data):
    success = True
    errors = []
    if section == "write":
        if "required_tag" in data and not isinstance(data["required_tag"], bool):
            success = False
            errors.append({"path": "write/required_tag", "error": "required_tag must be a boolean."})
    return success, errors


def set_write_settings(data):
    success, errors = verify_settings("write", data)
    if not success:
        return success, errors
    settings = load_settings()
    settings["write"].update(data)
    _write_settings(settings)
    reload_conf()
    return success, errors


def reload_conf():
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True)
