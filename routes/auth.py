from flask import Blueprint, render_template, redirect, url_for, flash
from flask_login import current_user

from auth_context import authenticate, sign_in, sign_out
from forms.auth_forms import LoginForm
from translations import get_translator, get_language

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("admin.dashboard"))

    t = get_translator(get_language())
    form = LoginForm()
    error = None
    if form.validate_on_submit():
        user = authenticate(form.username.data.strip(), form.password.data)
        if user is not None:
            sign_in(user)
            return redirect(url_for("admin.dashboard"))
        error = t("flash_invalid_credentials")
    return render_template("auth/login.html", form=form, error=error)


@auth_bp.route("/logout")
def logout():
    t = get_translator(get_language())
    if current_user.is_authenticated:
        sign_out()
        flash(t("flash_logged_out"), "info")
    return redirect(url_for("public.home"))
