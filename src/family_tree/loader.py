"""Load the initial family tree from a JSON seed file."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from src.family_tree.models import Person

logger = logging.getLogger(__name__)

_members_adapter = TypeAdapter(list[Person])


class SeedDataError(ValueError):
    """Seed file could not be parsed into a family tree."""


def parse_members(document) -> list[Person]:
    """Validate a seed document (`{"children": [...]}` or a bare list)."""
    if isinstance(document, dict):
        document = document.get("children", [])
    try:
        return _members_adapter.validate_python(document)
    except ValidationError as e:
        raise SeedDataError(f"Invalid family data: {e}") from e


def load_members(path: Union[str, Path]) -> list[Person]:
    """Read and validate the seed file at `path`."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SeedDataError(f"{path} is not valid JSON: {e}") from e

    members = parse_members(document)
    logger.debug("Loaded %d root members from %s", len(members), path)
    return members
