# backend/services/seed_service.py
"""
Sample data for a fresh install.

    doctor-directory-seed            # only writes when the store is empty
    doctor-directory-seed --force    # replaces whatever is there
"""
import argparse
import logging
from typing import List

from services.doctor_service import generate_doctor_id
from services.errors import FieldValidationFailure
from services.validation_service import normalized_doctor, validate_doctor_payload
from utils.config import configure_logging, get_settings
from utils.storage import DoctorStore, JsonFileDoctorStore

logger = logging.getLogger(__name__)

SAMPLE_DOCTORS = [
    {
        "name": "Dr. Aditi Mehra",
        "specialization": "General Physician",
        "experience": 12,
        "languages": ["English", "Hindi"],
        "location": "Koramangala, Bangalore",
        "availability": ["mon", "tue", "wed", "thu", "fri"],
        "consultationFee": 600,
        "imageUrl": "https://picsum.photos/seed/aditi/200/200",
        "clinicName": "Apollo Clinic",
        "rating": 4.7,
        "reviews": 312,
        "gender": "female",
        "qualifications": "MBBS, MD (Internal Medicine)",
    },
    {
        "name": "Dr. R.K. Gupta",
        "specialization": "Internal Medicine",
        "experience": 25,
        "languages": ["English", "Hindi", "Punjabi"],
        "location": "Saket, Delhi",
        "availability": ["mon", "wed", "fri"],
        "consultationFee": 1000,
        "imageUrl": "https://picsum.photos/seed/rkgupta/200/200",
        "clinicName": "Max Healthcare",
        "rating": 4.9,
        "reviews": 1204,
        "gender": "male",
        "qualifications": "MBBS, MD",
    },
    {
        "name": "Dr. Meena Sharma",
        "specialization": "General Physician",
        "experience": 8,
        "languages": ["English", "Hindi", "Marathi"],
        "location": "Andheri, Mumbai",
        "availability": ["tue", "thu", "sat"],
        "consultationFee": 500,
        "imageUrl": "https://picsum.photos/seed/meena/200/200",
        "rating": 4.4,
        "reviews": 87,
        "gender": "female",
        "qualifications": "MBBS",
    },
    {
        "name": "Dr. Rohan Kapoor",
        "specialization": "Internal Medicine",
        "experience": 15,
        "languages": ["English", "Hindi"],
        "location": "Indiranagar, Bangalore",
        "availability": ["mon", "tue", "thu", "sat", "sun"],
        "consultationFee": 800,
        "imageUrl": "https://picsum.photos/seed/rohan/200/200",
        "clinicName": "Manipal Clinic",
        "rating": 4.6,
        "reviews": 420,
        "gender": "male",
        "qualifications": "MBBS, MD (General Medicine)",
    },
    {
        "name": "Dr. Lakshmi Narayanan",
        "specialization": "General Physician",
        "experience": 20,
        "languages": ["English", "Tamil", "Telugu"],
        "location": "T. Nagar, Chennai",
        "availability": ["mon", "tue", "wed", "thu", "fri", "sat"],
        "consultationFee": 700,
        "imageUrl": "https://picsum.photos/seed/lakshmi/200/200",
        "clinicName": "Fortis Clinic",
        "rating": 4.8,
        "reviews": 655,
        "gender": "female",
        "qualifications": "MBBS, DNB",
    },
    {
        "name": "Dr. Arjun Menon",
        "specialization": "Diabetology",
        "experience": 6,
        "languages": ["English", "Malayalam"],
        "location": "Whitefield, Bangalore",
        "availability": ["wed", "fri", "sat"],
        "consultationFee": 450,
        "imageUrl": "https://picsum.photos/seed/arjun/200/200",
        "gender": "male",
        "qualifications": "MBBS, Diploma in Diabetology",
    },
    {
        "name": "Dr. Nisha Bansal",
        "specialization": "General Physician",
        "experience": 3,
        "languages": ["English", "Hindi"],
        "location": "Gurgaon, Haryana",
        "availability": ["sat", "sun"],
        "consultationFee": 300,
        "imageUrl": "https://picsum.photos/seed/nisha/200/200",
        "rating": 4.1,
        "reviews": 24,
        "gender": "female",
        "qualifications": "MBBS",
    },
]


def build_sample_doctors() -> List[dict]:
    docs: List[dict] = []
    for raw in SAMPLE_DOCTORS:
        doctor, errors = validate_doctor_payload(raw)
        if errors:
            raise FieldValidationFailure(errors)
        record = normalized_doctor(doctor)
        record["id"] = generate_doctor_id(d["id"] for d in docs)
        docs.append(record)
    return docs


def seed_doctors(store: DoctorStore, force: bool = False) -> int:
    with store.lock:
        existing = store.load_all()
        if existing and not force:
            logger.info("Store already holds %d doctors; skipping seed", len(existing))
            return 0
        docs = build_sample_doctors()
        store.save_all(docs)
    logger.info("Seeded %d doctors", len(docs))
    return len(docs)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the doctor directory with sample doctors.")
    parser.add_argument("--force", action="store_true", help="overwrite an existing, non-empty store")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    count = seed_doctors(JsonFileDoctorStore(settings.doctors_path), force=args.force)
    print(f"Seeded {count} doctors into {settings.doctors_path}")
    return count


if __name__ == "__main__":
    main()
