"""Serialize converted collections to a Postman JSON file."""

import json
import logging
from pathlib import Path

from talend2postman.errors import WriteError

from .base import Collection

logger = logging.getLogger(__name__)


def render_collections(collections: list[Collection], indent: int = 2) -> str:
    """Render collections as pretty-printed JSON.

    A single collection is written as a bare object; zero or several are
    written as an array.
    """
    if len(collections) == 1:
        data = collections[0].to_json_dict()
    else:
        data = [c.to_json_dict() for c in collections]
    return json.dumps(data, indent=indent, ensure_ascii=False)


def write_collections(collections: list[Collection], file_path: Path, indent: int = 2) -> None:
    text = render_collections(collections, indent=indent)
    try:
        file_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"could not write output file {file_path}: {e}") from e
    logger.info("Wrote %d collection(s) to %s", len(collections), file_path)
