import threading
import uuid

from flask import current_app

import seed_data

STORE_KEY = "cpa_store"


def new_id():
    return uuid.uuid4().hex


class AppStore:
    """In-memory application state shared by every request of one app.

    Collections live for the lifetime of the process. Model classes read and
    mutate them through ``get_store()``; mutations hold ``lock``.
    """

    def __init__(self):
        # Imported here to avoid a cycle: the models import get_store
        from models.user import User
        from models.product import Product
        from models.news import NewsItem
        from models.job import JobOpportunity
        from models.media import MediaItem
        from models.organization import (OrganizationProfile, Partner,
                                         CurrencyRate, CrmStats)

        self.lock = threading.RLock()
        self.users = [User.from_dict(d) for d in seed_data.INITIAL_USERS]
        self.products = [Product.from_dict(d) for d in seed_data.INITIAL_PRODUCTS]
        self.news = [NewsItem.from_dict(d) for d in seed_data.NEWS_DATA]
        self.jobs = [JobOpportunity.from_dict(d) for d in seed_data.INITIAL_JOBS]
        self.media = [MediaItem.from_dict(d) for d in seed_data.INITIAL_MEDIA]
        self.reports = []
        self.profile = OrganizationProfile.from_dict(seed_data.INITIAL_PROFILE)
        self.partners = [Partner.from_dict(d) for d in seed_data.PARTNERS_DATA]
        self.currency_rates = [CurrencyRate.from_dict(d) for d in seed_data.CURRENCY_RATES]
        self.crm_stats = CrmStats.from_dict(seed_data.CRM_STATS)


def get_store():
    return current_app.extensions[STORE_KEY]


def init_app(app):
    app.extensions[STORE_KEY] = AppStore()
