import logging
from datetime import date

from models.store import get_store, new_id

logger = logging.getLogger(__name__)


class Product:
    def __init__(self, id, code, name_ar, name_en, price, unit, last_updated, category):
        self.id = id
        self.code = code
        self.name_ar = name_ar
        self.name_en = name_en
        self.price = price
        self.unit = unit
        self.last_updated = last_updated
        self.category = category

    def name_for(self, lang):
        return self.name_ar if lang == "ar" else self.name_en

    def to_dict(self):
        return {
            "id": self.id,
            "code": self.code,
            "name_ar": self.name_ar,
            "name_en": self.name_en,
            "price": self.price,
            "unit": self.unit,
            "last_updated": self.last_updated,
            "category": self.category,
        }

    @staticmethod
    def from_dict(data):
        return Product(
            id=str(data["id"]),
            code=data["code"],
            name_ar=data.get("name_ar", ""),
            name_en=data.get("name_en", ""),
            price=data.get("price", 0),
            unit=data.get("unit", "Unit"),
            last_updated=data.get("last_updated", ""),
            category=data.get("category", "General"),
        )

    @staticmethod
    def get_all():
        return list(get_store().products)

    @staticmethod
    def get_by_code(code):
        for product in get_store().products:
            if product.code == code:
                return product
        return None

    @staticmethod
    def create(code, name_ar="", name_en="", price=0):
        product = Product(
            id=new_id(),
            code=code,
            name_ar=name_ar,
            name_en=name_en,
            price=price,
            unit="Unit",
            last_updated=date.today().isoformat(),
            category="General",
        )
        store = get_store()
        with store.lock:
            store.products.append(product)
        logger.info("Created product %s at %s", code, price)
        return product

    @staticmethod
    def delete(product_id):
        store = get_store()
        with store.lock:
            before = len(store.products)
            store.products = [p for p in store.products if p.id != product_id]
            removed = len(store.products) < before
        if removed:
            logger.info("Deleted product %s", product_id)
        return removed
