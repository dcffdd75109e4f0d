"""Site-wide write settings consulted by request handlers."""

import logging

import yaml

from settings import load_settings

logger = logging.getLogger("main")


def get_tag_required():
    """Whether questions must carry at least one tag; read errors count as False"""
    try:
        return bool(load_settings()["write"]["required_tag"])
    except (OSError, yaml.YAMLError, KeyError, TypeError) as e:
        logger.error(f"Failed to read write settings: {e}")
        return False
