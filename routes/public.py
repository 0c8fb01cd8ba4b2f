import logging

from flask import Blueprint, render_template, redirect, request, url_for

import seed_data
from forms.report_forms import ReportForm
from models.job import JobOpportunity
from models.media import MediaItem
from models.news import NewsItem
from models.organization import CurrencyRate, Partner
from models.product import Product
from models.report import Location, ViolationReport
from services.ai_analysis import get_analyzer
from translations import get_language, set_language, toggle_language

logger = logging.getLogger(__name__)

public_bp = Blueprint("public", __name__)


def _back():
    return redirect(request.referrer or url_for("public.home"))


@public_bp.route("/language/toggle")
def language_toggle():
    toggle_language()
    return _back()


@public_bp.route("/set-language/<lang>")
def language_set(lang):
    set_language(lang)
    return _back()


@public_bp.route("/")
def home():
    return render_template(
        "public/home.html",
        slides=seed_data.SLIDES,
        services=seed_data.SERVICES_DATA,
        stats=seed_data.DASHBOARD_STATS,
        news=NewsItem.get_all(),
        partners=Partner.get_all(),
        rates=CurrencyRate.get_all(),
    )


@public_bp.route("/about")
def about():
    return render_template("public/about.html")


@public_bp.route("/news")
def news():
    return render_template("public/news.html", news=NewsItem.get_all())


@public_bp.route("/prices")
def prices():
    return render_template("public/prices.html", products=Product.get_all())


@public_bp.route("/careers")
def careers():
    return render_template("public/careers.html", jobs=JobOpportunity.get_all())


@public_bp.route("/media")
def media():
    return render_template("public/media.html", media=MediaItem.get_all())


@public_bp.route("/report", methods=["GET", "POST"])
def report():
    lang = get_language()
    form = ReportForm()
    form.set_product_choices(Product.get_all(), lang)

    if form.validate_on_submit():
        product = Product.get_by_code(form.product_code.data)
        reported_price = form.reported_price.data
        if reported_price.is_integer():
            reported_price = int(reported_price)
        official_price = product.price if product else 0
        display_name = product.name_for(lang) if product else "Unknown"

        analysis = get_analyzer().analyze(
            display_name, reported_price, official_price, form.description.data
        )
        if analysis.is_fallback:
            logger.warning("Report stored with fallback analysis")

        location = Location.parse(form.latitude.data, form.longitude.data)
        violation = ViolationReport.create(
            reported_price=reported_price,
            description=form.description.data,
            location=location,
            product_code=form.product_code.data,
            product_name=product.name_ar if product else "Unknown",
            official_price=product.price if product else None,
            ai_analysis=analysis.text,
        )
        return render_template("public/report_success.html", report=violation,
                               analysis=analysis)

    return render_template("public/report.html", form=form)
