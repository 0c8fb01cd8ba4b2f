from flask import current_app, redirect, url_for
from flask_login import current_user


def check_access(roles=()):
    """Return a redirect response if the current user may not proceed, else None."""
    if not current_user.is_authenticated:
        return current_app.login_manager.unauthorized()
    if roles and current_user.role not in roles:
        return redirect(url_for("public.home"))
    return None
