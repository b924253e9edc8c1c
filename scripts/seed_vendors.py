import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wedding_api.config import get_settings
from wedding_api.domain.models.vendor import Vendor
from wedding_api.infrastructure.database import Database

DEMO_VENDORS = [
    {"business_name": "Lensa Cinta Studio", "category": "Photographer"},
    {"business_name": "Bingkai Video Works", "category": "Videographer"},
    {"business_name": "Dapur Kenduri Catering", "category": "Catering"},
    {"business_name": "Seri Andaman Bridal", "category": "Makeup"},
    {"business_name": "Taman Dewan Hall", "category": "Venue"},
]


def seed():
    database = Database(get_settings().DATABASE_URL)
    database.create_all()
    db = database.session()
    try:
        existing = {name for (name,) in db.query(Vendor.business_name).all()}
        added = 0
        for data in DEMO_VENDORS:
            if data["business_name"] in existing:
                continue
            db.add(Vendor(is_approved=True, **data))
            added += 1
        db.commit()
        print(f"Seeded {added} vendor(s), {len(DEMO_VENDORS) - added} already present.")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    seed()
