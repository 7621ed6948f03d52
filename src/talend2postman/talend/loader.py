"""Talend API Tester export loader.

Reads an exported JSON file into a Document model.
"""

import json
import logging
from pathlib import Path

from talend2postman.errors import InputNotFoundError, ParseError

from .base import Document

logger = logging.getLogger(__name__)


def load_document(file_path: Path) -> Document:
    """Load and validate a Talend export file.

    Raises InputNotFoundError if the path does not exist and ParseError
    if it cannot be read or is not JSON.
    """
    if not file_path.exists():
        raise InputNotFoundError(f"input file does not exist: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"could not parse input JSON {file_path}: {e}") from e

    logger.debug("Read %d characters from %s", len(text), file_path)
    return parse_document(data)


def parse_document(data: object) -> Document:
    """Build a Document from already-decoded JSON data.

    Anything other than a JSON object has no entities and converts to
    zero collections.
    """
    if not isinstance(data, dict):
        logger.warning("Input root is a JSON %s, not an object; no entities found", type(data).__name__)
        return Document()
    return Document.model_validate(data)
