from enum import Enum

from flask import Blueprint, render_template, redirect, url_for, flash, abort, current_app

from forms.admin_forms import (UserAddForm, ProductAddForm, NewsAddForm, JobAddForm,
                               ProfileForm, DeleteForm)
from guards import check_access
from icons import Icon
from models.job import JobOpportunity
from models.news import NewsItem
from models.organization import CrmStats, OrganizationProfile
from models.product import Product
from models.report import ViolationReport, marker_positions
from models.user import User
from translations import get_translator, get_language

admin_bp = Blueprint("admin", __name__)


class AdminTab(Enum):
    DASHBOARD = "dashboard"
    USERS = "users"
    CONTENT = "content"
    PRODUCTS = "products"
    REPORTS = "reports"
    HR = "hr"
    CRM = "crm"
    SETTINGS = "settings"


# Template and sidebar icon per tab; every member must be present
TAB_VIEWS = {
    AdminTab.DASHBOARD: ("admin/dashboard.html", Icon.DASHBOARD),
    AdminTab.USERS: ("admin/users.html", Icon.USERS),
    AdminTab.CONTENT: ("admin/content.html", Icon.NEWS),
    AdminTab.PRODUCTS: ("admin/products.html", Icon.PRODUCTS),
    AdminTab.REPORTS: ("admin/reports.html", Icon.MAP),
    AdminTab.HR: ("admin/hr.html", Icon.BRIEFCASE),
    AdminTab.CRM: ("admin/crm.html", Icon.HEART),
    AdminTab.SETTINGS: ("admin/settings.html", Icon.SETTINGS),
}

if set(TAB_VIEWS) != set(AdminTab):
    raise RuntimeError("TAB_VIEWS must map every AdminTab")


@admin_bp.before_request
def require_admin_role():
    return check_access(current_app.config["ADMIN_ROLES"])


def _tab_context(tab):
    """Data each tab needs to render."""
    if tab is AdminTab.DASHBOARD:
        return {
            "report_count": len(ViolationReport.get_all()),
            "product_count": len(Product.get_all()),
            "job_count": len(JobOpportunity.get_all()),
            "crm": CrmStats.get(),
        }
    if tab is AdminTab.USERS:
        return {"users": User.get_all(), "form": UserAddForm()}
    if tab is AdminTab.CONTENT:
        return {"news": NewsItem.get_all(), "form": NewsAddForm()}
    if tab is AdminTab.PRODUCTS:
        return {"products": Product.get_all(), "form": ProductAddForm()}
    if tab is AdminTab.REPORTS:
        reports = ViolationReport.get_all()
        return {"reports": reports, "markers": marker_positions(reports),
                "map_image": current_app.config["REPORTS_MAP_IMAGE"]}
    if tab is AdminTab.HR:
        return {"jobs": JobOpportunity.get_all(), "form": JobAddForm()}
    if tab is AdminTab.CRM:
        return {"crm": CrmStats.get()}
    if tab is AdminTab.SETTINGS:
        return {"form": ProfileForm(data=OrganizationProfile.get().to_dict())}
    raise ValueError(f"Unhandled admin tab: {tab}")


def render_tab(tab, **overrides):
    template, _icon = TAB_VIEWS[tab]
    context = _tab_context(tab)
    context.update(overrides)
    return render_template(template, active_tab=tab, tabs=TAB_VIEWS,
                           delete_form=DeleteForm(), **context)


@admin_bp.route("/")
def dashboard():
    return render_tab(AdminTab.DASHBOARD)


@admin_bp.route("/<slug>")
def tab(slug):
    try:
        selected = AdminTab(slug)
    except ValueError:
        abort(404)
    if selected is AdminTab.DASHBOARD:
        return redirect(url_for("admin.dashboard"))
    return render_tab(selected)


# ── Users ─────────────────────────────────────────────

@admin_bp.route("/users/add", methods=["POST"])
def user_add():
    t = get_translator(get_language())
    form = UserAddForm()
    if form.validate_on_submit():
        User.create(username=form.username.data.strip(), name=form.name.data.strip(),
                    role=form.role.data)
        flash(t("flash_user_created", username=form.username.data.strip()), "success")
        return redirect(url_for("admin.tab", slug=AdminTab.USERS.value))
    flash(t("flash_form_invalid"), "danger")
    return render_tab(AdminTab.USERS, form=form), 400


@admin_bp.route("/users/<user_id>/delete", methods=["POST"])
def user_delete(user_id):
    t = get_translator(get_language())
    if not DeleteForm().validate_on_submit():
        abort(400)
    user = User.get_by_id(user_id)
    if user is None:
        abort(404)
    if User.delete(user_id):
        flash(t("flash_user_deleted"), "success")
    else:
        flash(t("flash_user_protected"), "warning")
    return redirect(url_for("admin.tab", slug=AdminTab.USERS.value))


# ── News content ──────────────────────────────────────

@admin_bp.route("/content/add", methods=["POST"])
def news_add():
    t = get_translator(get_language())
    form = NewsAddForm()
    if form.validate_on_submit():
        NewsItem.create(
            title_ar=form.title_ar.data or "",
            title_en=form.title_en.data or "",
            desc_ar=form.desc_ar.data or "",
            desc_en=form.desc_en.data or "",
        )
        flash(t("flash_news_published"), "success")
        return redirect(url_for("admin.tab", slug=AdminTab.CONTENT.value))
    flash(t("flash_form_invalid"), "danger")
    return render_tab(AdminTab.CONTENT, form=form), 400


@admin_bp.route("/content/<news_id>/delete", methods=["POST"])
def news_delete(news_id):
    t = get_translator(get_language())
    if not DeleteForm().validate_on_submit():
        abort(400)
    if not NewsItem.delete(news_id):
        abort(404)
    flash(t("flash_news_deleted"), "success")
    return redirect(url_for("admin.tab", slug=AdminTab.CONTENT.value))


# ── Products ──────────────────────────────────────────

@admin_bp.route("/products/add", methods=["POST"])
def product_add():
    t = get_translator(get_language())
    form = ProductAddForm()
    if form.validate_on_submit():
        price = form.price.data if form.price.data is not None else 0
        if float(price).is_integer():
            price = int(price)
        code = form.code.data.strip()
        Product.create(code=code, name_ar=form.name_ar.data or "",
                       name_en=form.name_en.data or "", price=price)
        flash(t("flash_product_created", code=code), "success")
        return redirect(url_for("admin.tab", slug=AdminTab.PRODUCTS.value))
    flash(t("flash_form_invalid"), "danger")
    return render_tab(AdminTab.PRODUCTS, form=form), 400


@admin_bp.route("/products/<product_id>/delete", methods=["POST"])
def product_delete(product_id):
    t = get_translator(get_language())
    if not DeleteForm().validate_on_submit():
        abort(400)
    if not Product.delete(product_id):
        abort(404)
    flash(t("flash_product_deleted"), "success")
    return redirect(url_for("admin.tab", slug=AdminTab.PRODUCTS.value))


# ── HR / jobs ─────────────────────────────────────────

@admin_bp.route("/hr/add", methods=["POST"])
def job_add():
    t = get_translator(get_language())
    form = JobAddForm()
    if form.validate_on_submit():
        JobOpportunity.create(title_ar=form.title_ar.data or "",
                              title_en=form.title_en.data or "",
                              job_type=form.job_type.data)
        flash(t("flash_job_posted"), "success")
        return redirect(url_for("admin.tab", slug=AdminTab.HR.value))
    flash(t("flash_form_invalid"), "danger")
    return render_tab(AdminTab.HR, form=form), 400


@admin_bp.route("/hr/<job_id>/delete", methods=["POST"])
def job_delete(job_id):
    t = get_translator(get_language())
    if not DeleteForm().validate_on_submit():
        abort(400)
    if not JobOpportunity.delete(job_id):
        abort(404)
    flash(t("flash_job_deleted"), "success")
    return redirect(url_for("admin.tab", slug=AdminTab.HR.value))


# ── Settings ──────────────────────────────────────────

@admin_bp.route("/settings/save", methods=["POST"])
def settings_save():
    t = get_translator(get_language())
    form = ProfileForm()
    if form.validate_on_submit():
        OrganizationProfile.update(**{name: field.data for name, field in form._fields.items()
                                      if name not in ("submit", "csrf_token")})
        flash(t("flash_profile_updated"), "success")
        return redirect(url_for("admin.tab", slug=AdminTab.SETTINGS.value))
    flash(t("flash_form_invalid"), "danger")
    return render_tab(AdminTab.SETTINGS, form=form), 400
