import json
import logging

from flask import current_app, session
from flask_login import current_user, login_user, logout_user
from werkzeug.security import check_password_hash

from models.user import User

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "cpa_user"


def authenticate(username, password):
    """Resolve a login attempt to a user record, or None.

    The configured admin credential grants the admin record. Any existing
    donor is granted by username alone while DONOR_PASSWORDLESS_LOGIN is on.
    """
    config = current_app.config
    if username == config["ADMIN_USERNAME"] and check_password_hash(
            config["ADMIN_PASSWORD_HASH"], password or ""):
        return User.get_by_username(config["ADMIN_USERNAME"])

    user = User.get_by_username(username)
    if user is not None and user.role == "donor" and config["DONOR_PASSWORDLESS_LOGIN"]:
        logger.warning("Donor %s signed in without password verification", username)
        return user

    logger.warning("Failed sign-in attempt for %r", username)
    return None


def sign_in(user):
    login_user(user)
    session[SESSION_USER_KEY] = json.dumps(user.to_dict())
    logger.info("User %s signed in (role=%s)", user.username, user.role)


def sign_out():
    username = getattr(current_user, "username", None)
    logout_user()
    session.pop(SESSION_USER_KEY, None)
    logger.info("User %s signed out", username)


def restore_user(raw):
    """Rebuild the signed-in user from its stored JSON; bad data means signed out."""
    if not raw:
        return None
    try:
        return User.from_dict(json.loads(raw))
    except (TypeError, ValueError, KeyError, AttributeError):
        logger.info("Discarding malformed stored session user")
        return None


def init_app(login_manager):
    @login_manager.request_loader
    def load_user_from_session(request):
        return restore_user(session.get(SESSION_USER_KEY))
