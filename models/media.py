from models.store import get_store


class MediaItem:
    def __init__(self, id, type, url, caption_ar, caption_en, date):
        self.id = id
        self.type = type
        self.url = url
        self.caption_ar = caption_ar
        self.caption_en = caption_en
        self.date = date

    @property
    def is_video(self):
        return self.type == "video"

    def caption_for(self, lang):
        return self.caption_ar if lang == "ar" else self.caption_en

    @staticmethod
    def from_dict(data):
        return MediaItem(
            id=str(data["id"]),
            type=data.get("type", "image"),
            url=data["url"],
            caption_ar=data.get("caption_ar", ""),
            caption_en=data.get("caption_en", ""),
            date=data.get("date", ""),
        )

    @staticmethod
    def get_all():
        return list(get_store().media)
