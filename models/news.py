import logging
from datetime import date

from flask import current_app

from models.store import get_store, new_id
from translations import translate

logger = logging.getLogger(__name__)

DYNAMIC_KEY = "dynamic"


class NewsItem:
    def __init__(self, id, date, image, title_key, desc_key,
                 title_ar=None, title_en=None, desc_ar=None, desc_en=None):
        self.id = id
        self.date = date
        self.image = image
        self.title_key = title_key
        self.desc_key = desc_key
        self.title_ar = title_ar
        self.title_en = title_en
        self.desc_ar = desc_ar
        self.desc_en = desc_en

    def title_for(self, lang):
        """Literal title in ``lang`` if set, else the translation-table entry."""
        literal = self.title_ar if lang == "ar" else self.title_en
        return literal or translate(self.title_key, lang)

    def desc_for(self, lang):
        literal = self.desc_ar if lang == "ar" else self.desc_en
        return literal or translate(self.desc_key, lang)

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "image": self.image,
            "title_key": self.title_key,
            "desc_key": self.desc_key,
            "title_ar": self.title_ar,
            "title_en": self.title_en,
            "desc_ar": self.desc_ar,
            "desc_en": self.desc_en,
        }

    @staticmethod
    def from_dict(data):
        return NewsItem(
            id=str(data["id"]),
            date=data.get("date", ""),
            image=data.get("image", ""),
            title_key=data.get("title_key", DYNAMIC_KEY),
            desc_key=data.get("desc_key", DYNAMIC_KEY),
            title_ar=data.get("title_ar"),
            title_en=data.get("title_en"),
            desc_ar=data.get("desc_ar"),
            desc_en=data.get("desc_en"),
        )

    @staticmethod
    def get_all():
        return list(get_store().news)

    @staticmethod
    def create(title_ar="", title_en="", desc_ar="", desc_en=""):
        item = NewsItem(
            id=new_id(),
            date=date.today().isoformat(),
            image=current_app.config["NEWS_PLACEHOLDER_IMAGE"],
            title_key=DYNAMIC_KEY,
            desc_key=DYNAMIC_KEY,
            title_ar=title_ar,
            title_en=title_en,
            desc_ar=desc_ar,
            desc_en=desc_en,
        )
        store = get_store()
        with store.lock:
            store.news.insert(0, item)
        logger.info("Published news item %s", item.id)
        return item

    @staticmethod
    def delete(news_id):
        store = get_store()
        with store.lock:
            before = len(store.news)
            store.news = [n for n in store.news if n.id != news_id]
            removed = len(store.news) < before
        if removed:
            logger.info("Deleted news item %s", news_id)
        return removed
