"""
JSON file storage for the roster document.

The whole roster lives in one JSON file of the form
``{"students": [...]}``.  ``load_roster`` reads and validates it on
every call and ``save_roster`` rewrites it completely; nothing is
cached between requests.  A missing file is an empty roster.

There is no locking: two workers or processes that load, modify and
save the document at the same time can overwrite each other's changes.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .config import settings
from .exceptions import StorageError
from ..schemas.student import RosterDocument

logger = logging.getLogger(__name__)


def get_data_path() -> Path:
    """Compute the path to the roster JSON file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return Path(data_file)
    base_dir = Path(__file__).resolve().parent.parent.parent  # student_points_api/
    return (base_dir / data_file).resolve()


def ensure_data_dir() -> None:
    """Create the directory holding the data file if it does not exist."""
    data_dir = get_data_path().parent
    if not data_dir.exists():
        data_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created data directory %s", data_dir)


def load_roster() -> RosterDocument:
    """Read the roster document from disk.

    Returns an empty document when the file does not exist.  Raises
    :class:`StorageError` when the file cannot be read or does not
    hold a valid roster.
    """
    path = get_data_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return RosterDocument()
    except OSError as exc:
        logger.exception("Failed to read roster file %s", path)
        raise StorageError("Failed to read roster data") from exc
    try:
        return RosterDocument.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.exception("Roster file %s is malformed", path)
        raise StorageError("Failed to read roster data") from exc


def save_roster(roster: RosterDocument) -> None:
    """Write the full roster document back to disk.

    The document is serialized before the file is opened, so a
    serialization error leaves the previous file in place.
    """
    path = get_data_path()
    payload = json.dumps(roster.model_dump(by_alias=True), indent=2, ensure_ascii=False)
    try:
        path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        logger.exception("Failed to write roster file %s", path)
        raise StorageError("Failed to save roster data") from exc
    logger.debug("Saved %d students to %s", len(roster.students), path)
