# backend/services/validation_service.py
"""
Validation of POST /api/doctors payloads.

The whole payload is validated in one go and every field's problems are
reported, keyed by the camelCase field name the client sent.
"""
import math
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

Weekday = Literal["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
Gender = Literal["male", "female", "other"]
# ints stay ints so a stored record matches what was submitted
Number = Union[StrictInt, StrictFloat]

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "specialization": "Specialization is required",
    "experience": "Experience is required",
    "languages": "At least one language is required",
    "location": "Location is required",
    "availability": "At least one availability day is required",
    "consultationFee": "Consultation fee is required",
    "imageUrl": "Image URL is required",
}

# one message per field instead of one per int/float union branch
NUMBER_MESSAGES = {
    "consultationFee": "Consultation fee must be a number",
    "rating": "Rating must be a number",
}

_url_adapter = TypeAdapter(AnyUrl)


class DoctorCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)

    name: StrictStr
    specialization: StrictStr
    experience: StrictInt
    languages: List[StrictStr]
    location: StrictStr
    availability: List[Weekday]
    consultation_fee: Number
    image_url: StrictStr
    clinic_name: Optional[StrictStr] = None
    rating: Optional[Number] = None
    reviews: Optional[StrictInt] = None
    gender: Optional[Gender] = None
    qualifications: Optional[StrictStr] = None

    @field_validator("name", "specialization", "location")
    @classmethod
    def _not_empty(cls, v: str, info):
        if not v:
            raise ValueError(REQUIRED_MESSAGES[to_camel(info.field_name)])
        return v

    @field_validator("experience")
    @classmethod
    def _experience_non_negative(cls, v: int):
        if v < 0:
            raise ValueError("Experience must be non-negative")
        return v

    @field_validator("languages", "availability")
    @classmethod
    def _at_least_one(cls, v: list, info):
        if not v:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("consultation_fee")
    @classmethod
    def _fee_non_negative(cls, v):
        if not math.isfinite(v):
            raise ValueError(NUMBER_MESSAGES["consultationFee"])
        if v < 0:
            raise ValueError("Consultation fee must be non-negative")
        return v

    @field_validator("image_url")
    @classmethod
    def _valid_url(cls, v: str):
        try:
            _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("Image URL must be a valid URL")
        # keep the string exactly as given; AnyUrl would normalize it
        return v

    @field_validator("rating")
    @classmethod
    def _rating_range(cls, v):
        if v is not None and not math.isfinite(v):
            raise ValueError(NUMBER_MESSAGES["rating"])
        if v is not None and not 0 <= v <= 5:
            raise ValueError("Rating must be between 0 and 5")
        return v

    @field_validator("reviews")
    @classmethod
    def _reviews_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("Reviews must be non-negative")
        return v


def _message(err: Dict[str, Any]) -> str:
    field_name = str(err["loc"][0]) if err.get("loc") else "payload"
    if err["type"] == "missing":
        return REQUIRED_MESSAGES.get(field_name, "Field is required")
    if err["type"] == "value_error" and "error" in err.get("ctx", {}):
        return str(err["ctx"]["error"])
    if field_name in NUMBER_MESSAGES:
        return NUMBER_MESSAGES[field_name]
    return err["msg"]


def collect_field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field_name = str(err["loc"][0]) if err.get("loc") else "payload"
        msg = _message(err)
        messages = errors.setdefault(field_name, [])
        if msg not in messages:
            messages.append(msg)
    return errors


def validate_doctor_payload(payload: Dict[str, Any]) -> Tuple[Optional[DoctorCreate], Dict[str, List[str]]]:
    """Returns (model, {}) when valid, (None, field errors) otherwise."""
    try:
        return DoctorCreate.model_validate(payload), {}
    except ValidationError as e:
        return None, collect_field_errors(e)


def normalized_doctor(doctor: DoctorCreate) -> Dict[str, Any]:
    return doctor.model_dump(by_alias=True, exclude_none=True)
