# backend/services/query_service.py
"""
Filter / sort / paginate pipeline behind GET /api/doctors.

Everything here is a pure function over a list of doctor dicts; nothing
touches the store and the input list is never mutated.
"""
import logging
import math
import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, List, Mapping, Optional

logger = logging.getLogger(__name__)

WEEKDAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 6
DEFAULT_SORT_BY = "name"
DEFAULT_SORT_ORDER = "asc"

# accepted sortBy value -> record key
SORT_FIELDS = {
    "name": "name",
    "specialization": "specialization",
    "location": "location",
    "experience": "experience",
    "experienceYears": "experience",
    "consultationFee": "consultationFee",
    "fee": "consultationFee",
    "rating": "rating",
    "reviews": "reviews",
    "reviewCount": "reviews",
    "clinicName": "clinicName",
    "gender": "gender",
}


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def _parse_int(value: Optional[str]) -> Optional[int]:
    # leading integer, so "5.5" -> 5 and "12abc" -> 12
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else None


def _parse_number(value: Optional[str]) -> Optional[float]:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass
class DoctorQuery:
    specialization: Optional[str] = None
    location: Optional[str] = None
    availability: List[str] = field(default_factory=list)
    gender: Optional[str] = None
    min_experience: Optional[int] = None
    max_fee: Optional[float] = None
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "DoctorQuery":
        """
        Build a query from raw query-string values. Bad values never raise:
        unusable filters are dropped, and sort/page/limit fall back to their defaults.
        """
        availability = _clean(params.get("availability"))
        days = [d.strip().lower() for d in availability.split(",")] if availability else []

        sort_by = _clean(params.get("sortBy"))
        sort_order = (_clean(params.get("sortOrder")) or "").lower()

        page = _parse_int(params.get("page"))
        limit = _parse_int(params.get("limit"))

        return cls(
            specialization=_clean(params.get("specialization")),
            location=_clean(params.get("location")),
            availability=[d for d in days if d],
            gender=_clean(params.get("gender")),
            min_experience=_parse_int(params.get("minExperience")),
            max_fee=_parse_number(params.get("maxFee")),
            sort_by=sort_by if sort_by in SORT_FIELDS else DEFAULT_SORT_BY,
            sort_order=sort_order if sort_order in ("asc", "desc") else DEFAULT_SORT_ORDER,
            page=page if page is not None and page >= 1 else DEFAULT_PAGE,
            limit=limit if limit is not None and limit > 0 else DEFAULT_LIMIT,
        )


@dataclass
class PagedResult:
    records: List[dict]
    current_page: int
    total_pages: int
    total_items: int


def _contains(haystack: Any, needle: str) -> bool:
    return isinstance(haystack, str) and needle.lower() in haystack.lower()


def _matches(doc: dict, query: DoctorQuery) -> bool:
    if query.specialization and not _contains(doc.get("specialization"), query.specialization):
        return False
    if query.location and not _contains(doc.get("location"), query.location):
        return False
    if query.availability:
        # every requested day must be present, not just one of them
        available = set(doc.get("availability") or [])
        if not set(query.availability) <= available:
            return False
    if query.gender and doc.get("gender") != query.gender:
        return False
    if query.min_experience is not None:
        exp = doc.get("experience")
        if not isinstance(exp, (int, float)) or exp < query.min_experience:
            return False
    if query.max_fee is not None:
        fee = doc.get("consultationFee")
        if not isinstance(fee, (int, float)) or fee > query.max_fee:
            return False
    return True


def filter_doctors(doctors: List[dict], query: DoctorQuery) -> List[dict]:
    return [d for d in doctors if _matches(d, query)]


def _sort_value(doc: dict, key: str):
    value = doc.get(key)
    if isinstance(value, str):
        return value.lower()
    return value


def _compare(a, b) -> int:
    # missing or mutually incomparable values are treated as equal
    if a is None or b is None:
        return 0
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0
    return 0


def sort_doctors(doctors: List[dict], sort_by: str = DEFAULT_SORT_BY, sort_order: str = DEFAULT_SORT_ORDER) -> List[dict]:
    key = SORT_FIELDS.get(sort_by, SORT_FIELDS[DEFAULT_SORT_BY])
    sign = -1 if sort_order == "desc" else 1

    def cmp(x, y):
        return sign * _compare(_sort_value(x, key), _sort_value(y, key))

    # sorted() is stable, so equal keys keep their filtered order in both directions
    return sorted(doctors, key=cmp_to_key(cmp))


def paginate(doctors: List[dict], page: int, limit: int) -> List[dict]:
    start = (page - 1) * limit
    return doctors[start:start + limit]


def run_query(doctors: List[dict], query: DoctorQuery) -> PagedResult:
    logger.debug("Running doctor query %s over %d records", query, len(doctors))
    filtered = filter_doctors(doctors, query)
    ordered = sort_doctors(filtered, query.sort_by, query.sort_order)
    total = len(ordered)
    return PagedResult(
        records=paginate(ordered, query.page, query.limit),
        current_page=query.page,
        total_pages=math.ceil(total / query.limit),
        total_items=total,
    )


def distinct_values(doctors: List[dict], field_name: str) -> List[Any]:
    """Sorted distinct non-empty values of one field, used for the filter facets."""
    seen = {d.get(field_name) for d in doctors if d.get(field_name) not in (None, "")}
    try:
        return sorted(seen)
    except TypeError:
        return sorted(seen, key=str)
