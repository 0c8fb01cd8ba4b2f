import logging
import math
from datetime import date

from models.store import get_store, new_id

logger = logging.getLogger(__name__)


class Location:
    def __init__(self, lat, lng):
        self.lat = lat
        self.lng = lng

    def to_dict(self):
        return {"lat": self.lat, "lng": self.lng}

    @staticmethod
    def parse(lat, lng):
        """Build a Location from raw form values, or None if they are unusable."""
        try:
            lat = float(lat)
            lng = float(lng)
        except (TypeError, ValueError):
            return None
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return None
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            return None
        return Location(lat, lng)


class ViolationReport:
    def __init__(self, id, reported_price, description, location, status, timestamp,
                 product_code=None, product_name=None, official_price=None,
                 ai_analysis=None, shop_name=None):
        self.id = id
        self.product_code = product_code
        self.product_name = product_name
        self.official_price = official_price
        self.reported_price = reported_price
        self.shop_name = shop_name
        self.location = location
        self.description = description
        self.ai_analysis = ai_analysis
        self.status = status
        self.timestamp = timestamp

    @property
    def price_increase_percent(self):
        if not self.official_price:
            return None
        return round((self.reported_price - self.official_price) * 100.0 / self.official_price, 1)

    def to_dict(self):
        return {
            "id": self.id,
            "product_code": self.product_code,
            "product_name": self.product_name,
            "official_price": self.official_price,
            "reported_price": self.reported_price,
            "shop_name": self.shop_name,
            "location": self.location.to_dict() if self.location else None,
            "description": self.description,
            "ai_analysis": self.ai_analysis,
            "status": self.status,
            "timestamp": self.timestamp,
        }

    @staticmethod
    def get_all():
        return list(get_store().reports)

    @staticmethod
    def create(reported_price, description, location=None, product_code=None,
               product_name=None, official_price=None, ai_analysis=None):
        report = ViolationReport(
            id=new_id(),
            product_code=product_code,
            product_name=product_name,
            official_price=official_price,
            reported_price=reported_price,
            description=description,
            location=location,
            ai_analysis=ai_analysis,
            status="pending",
            timestamp=date.today().isoformat(),
        )
        store = get_store()
        with store.lock:
            store.reports.insert(0, report)
        logger.info("Recorded violation report %s for product %s", report.id, product_code)
        return report


def marker_positions(reports):
    """Fixed-pattern (top%, left%) placement of report markers on the map image."""
    return [
        (report, 30 + (i * 12) % 60, 20 + (i * 18) % 70)
        for i, report in enumerate(reports)
    ]
