"""Name list loading and reminder text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from pingbot.errors import InputError

LOGGER = logging.getLogger(__name__)

REMINDER_PREFIX = "ping for lunch"


def load_names(path: Path | str) -> list[str]:
    """Read the ``names`` list from a YAML file."""

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Error while reading names file: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise InputError(f"Error while parsing names file {path}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise InputError(f"Names file {path} must be a mapping with a 'names' key")
    names = data.get("names")
    if names is None:
        LOGGER.warning("Names file %s has no 'names' key", path)
        return []
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise InputError(f"'names' in {path} must be a list of strings")
    return names


def build_reminder_text(names: Iterable[str]) -> str:
    """Return ``"ping for lunch @a @b"`` for the given names."""

    return " ".join([REMINDER_PREFIX, *(f"@{name}" for name in names)])
