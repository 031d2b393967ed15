# backend/services/errors.py
from typing import Dict, List


class DirectoryError(Exception):
    """Base class for every failure raised by the doctor directory."""


class StoreError(DirectoryError):
    pass


class StoreReadFailure(StoreError):
    """Backing store exists but could not be read or parsed."""


class StoreWriteFailure(StoreError):
    """Backing store could not be replaced with the new collection."""


class MalformedPayload(DirectoryError):
    """Request body is not a JSON object at all (reported before field validation)."""


class FieldValidationFailure(DirectoryError):
    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("Invalid doctor data: " + ", ".join(sorted(errors)))
