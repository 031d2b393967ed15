# backend/utils/storage.py
import copy
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from services.errors import StoreReadFailure, StoreWriteFailure

logger = logging.getLogger(__name__)


def read_json_file(path: Path, default=None):
    if not path.exists():
        return default
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_file(path: Path, content: Any):
    """
    Replace `path` with `content` serialized as JSON.
    Written to a temp file beside the target, then swapped in with os.replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(content, fh, indent=2, ensure_ascii=False)
            fh.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class DoctorStore(ABC):
    """Whole-collection store: everything is loaded and saved as one unit."""

    def __init__(self):
        # held by the create path around load -> append -> save
        self.lock = threading.Lock()

    @abstractmethod
    def load_all(self) -> List[dict]:
        ...

    @abstractmethod
    def save_all(self, records: List[dict]) -> None:
        ...


class JsonFileDoctorStore(DoctorStore):
    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)

    def load_all(self) -> List[dict]:
        try:
            data = read_json_file(self.path)
        except (OSError, ValueError) as e:
            logger.error("Error reading doctors file %s: %s", self.path, e)
            raise StoreReadFailure(f"Could not read doctor data: {e}") from e

        if data is None:
            # never written yet
            return []
        if isinstance(data, dict):
            data = data.get("doctors")
        if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
            logger.error("Doctors file %s does not hold a list of doctor objects", self.path)
            raise StoreReadFailure("Could not read doctor data: unexpected file layout")
        return data

    def save_all(self, records: List[dict]) -> None:
        try:
            write_json_file(self.path, {"doctors": list(records)})
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing doctors file %s: %s", self.path, e)
            raise StoreWriteFailure(f"Could not save doctor data: {e}") from e
        logger.debug("Saved %d doctors to %s", len(records), self.path)


class InMemoryDoctorStore(DoctorStore):
    def __init__(self, records: Optional[List[dict]] = None):
        super().__init__()
        self._records = copy.deepcopy(records) if records else []

    def load_all(self) -> List[dict]:
        return copy.deepcopy(self._records)

    def save_all(self, records: List[dict]) -> None:
        self._records = copy.deepcopy(list(records))
