import logging

from icons import Icon
from models.store import get_store

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "mission_ar", "mission_en", "vision_ar", "vision_en", "about_ar", "about_en",
    "phone", "email", "address_ar", "address_en",
)

INDICATORS = {
    "up": Icon.UP,
    "down": Icon.DOWN,
    "stable": Icon.STABLE,
}


class OrganizationProfile:
    def __init__(self, **fields):
        for name in PROFILE_FIELDS:
            setattr(self, name, fields.get(name, ""))

    def localized(self, field, lang):
        return getattr(self, f"{field}_{lang}")

    def to_dict(self):
        return {name: getattr(self, name) for name in PROFILE_FIELDS}

    @staticmethod
    def from_dict(data):
        return OrganizationProfile(**{k: v for k, v in data.items() if k in PROFILE_FIELDS})

    @staticmethod
    def get():
        return get_store().profile

    @staticmethod
    def update(**kwargs):
        fields = {k: v for k, v in kwargs.items() if k in PROFILE_FIELDS}
        if not fields:
            return
        store = get_store()
        with store.lock:
            data = store.profile.to_dict()
            data.update(fields)
            store.profile = OrganizationProfile.from_dict(data)
        logger.info("Updated organization profile: %s", ", ".join(sorted(fields)))


class Partner:
    def __init__(self, id, name_ar, name_en, logo):
        self.id = id
        self.name_ar = name_ar
        self.name_en = name_en
        self.logo = logo

    def name_for(self, lang):
        return self.name_ar if lang == "ar" else self.name_en

    @staticmethod
    def from_dict(data):
        return Partner(id=str(data["id"]), name_ar=data["name_ar"],
                       name_en=data["name_en"], logo=data.get("logo", ""))

    @staticmethod
    def get_all():
        return list(get_store().partners)


class CurrencyRate:
    def __init__(self, currency, buy, sell, indicator):
        if indicator not in INDICATORS:
            raise ValueError(f"Unknown rate indicator: {indicator}")
        self.currency = currency
        self.buy = buy
        self.sell = sell
        self.indicator = indicator

    @property
    def icon(self):
        return INDICATORS[self.indicator]

    @staticmethod
    def from_dict(data):
        return CurrencyRate(currency=data["currency"], buy=data["buy"],
                            sell=data["sell"], indicator=data.get("indicator", "stable"))

    @staticmethod
    def get_all():
        return list(get_store().currency_rates)


class CrmStats:
    def __init__(self, total_donors, active_projects, total_donations, last_sync):
        self.total_donors = total_donors
        self.active_projects = active_projects
        self.total_donations = total_donations
        self.last_sync = last_sync

    @staticmethod
    def from_dict(data):
        return CrmStats(**data)

    @staticmethod
    def get():
        return get_store().crm_stats
