# backend/services/doctor_service.py
import logging
import secrets
import string
import time
from typing import Any, Dict, Iterable

from services.errors import FieldValidationFailure, MalformedPayload
from services.query_service import DoctorQuery, distinct_values, run_query
from services.validation_service import normalized_doctor, validate_doctor_payload
from utils.storage import DoctorStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_doctor_id(existing_ids: Iterable[str] = ()) -> str:
    """
    Ids look like doc1718000000000-x7k2q (epoch millis + 5 random base36 chars).
    Unique in practice, not guaranteed; a clash with an existing id is simply re-rolled.
    """
    taken = set(existing_ids)
    while True:
        suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(5))
        doc_id = f"doc{int(time.time() * 1000)}-{suffix}"
        if doc_id not in taken:
            return doc_id


def list_doctors(store: DoctorStore, query: DoctorQuery) -> Dict[str, Any]:
    docs = store.load_all()
    result = run_query(docs, query)
    return {
        "doctors": result.records,
        "currentPage": result.current_page,
        "totalPages": result.total_pages,
        "totalDoctors": result.total_items,
    }


def create_doctor(store: DoctorStore, payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise MalformedPayload("Doctor payload must be a JSON object")

    doctor, errors = validate_doctor_payload(payload)
    if errors:
        raise FieldValidationFailure(errors)

    record = normalized_doctor(doctor)
    # load -> append -> save must not interleave with another create
    with store.lock:
        docs = store.load_all()
        new_doctor = {**record, "id": generate_doctor_id(d.get("id") for d in docs)}
        docs.append(new_doctor)
        store.save_all(docs)

    logger.info("Created doctor %s (%s)", new_doctor["id"], new_doctor["name"])
    return new_doctor


def get_facets(store: DoctorStore) -> Dict[str, list]:
    docs = store.load_all()
    return {
        "specializations": distinct_values(docs, "specialization"),
        "locations": distinct_values(docs, "location"),
    }
