# backend/routes/doctors_api.py
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from services.doctor_service import create_doctor, get_facets, list_doctors
from services.errors import FieldValidationFailure, MalformedPayload, StoreError
from services.query_service import DoctorQuery
from utils.storage import DoctorStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_doctor_store(request: Request) -> DoctorStore:
    return request.app.state.doctor_store


@router.get("/doctors")
def get_doctors(
    specialization: Optional[str] = Query(None, description="Case-insensitive substring of the specialization"),
    location: Optional[str] = Query(None, description="Case-insensitive substring of the location"),
    availability: Optional[str] = Query(None, description="Comma-separated days, e.g. mon,tue (all must match)"),
    gender: Optional[str] = Query(None, description="male | female | other"),
    min_experience: Optional[str] = Query(None, alias="minExperience"),
    max_fee: Optional[str] = Query(None, alias="maxFee"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DoctorStore = Depends(get_doctor_store),
):
    """
    Returns one page of doctors plus pagination metadata.
    Params are taken as raw strings so bad values fall back to defaults instead of a 422.
    """
    query = DoctorQuery.from_params({
        "specialization": specialization,
        "location": location,
        "availability": availability,
        "gender": gender,
        "minExperience": min_experience,
        "maxFee": max_fee,
        "sortBy": sort_by,
        "sortOrder": sort_order,
        "page": page,
        "limit": limit,
    })
    try:
        return list_doctors(store, query)
    except StoreError as e:
        logger.error("GET /api/doctors failed: %s", e)
        return JSONResponse(status_code=500, content={"message": "Failed to fetch doctors", "error": str(e)})


@router.get("/doctors/facets")
def get_doctor_facets(store: DoctorStore = Depends(get_doctor_store)):
    """Distinct specializations and locations, for populating the filter choices."""
    try:
        return get_facets(store)
    except StoreError as e:
        logger.error("GET /api/doctors/facets failed: %s", e)
        return JSONResponse(status_code=500, content={"message": "Failed to fetch doctor facets", "error": str(e)})


@router.post("/doctors", status_code=201)
async def post_doctor(request: Request, store: DoctorStore = Depends(get_doctor_store)):
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(status_code=400, content={"message": "Invalid JSON payload"})

    try:
        return await run_in_threadpool(create_doctor, store, payload)
    except MalformedPayload:
        return JSONResponse(status_code=400, content={"message": "Invalid JSON payload"})
    except FieldValidationFailure as e:
        return JSONResponse(status_code=400, content={"message": "Invalid doctor data", "errors": e.errors})
    except StoreError as e:
        logger.error("POST /api/doctors failed: %s", e)
        return JSONResponse(status_code=500, content={"message": "Failed to add doctor", "error": str(e)})
