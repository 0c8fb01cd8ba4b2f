import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from flask import Flask, render_template
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
from werkzeug.security import generate_password_hash

import auth_context
from config import Config
from icons import icon_class
from models.organization import OrganizationProfile
from models.store import init_app as init_store_app
from services.ai_analysis import init_app as init_analyzer_app
from translations import get_translator, get_language, text_direction


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Only the hash of the admin password is kept in config
    app.config["ADMIN_PASSWORD_HASH"] = generate_password_hash(app.config.pop("ADMIN_PASSWORD"))

    # Extensions
    csrf = CSRFProtect(app)
    login_manager = LoginManager(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = "flash_login_required"
    login_manager.login_message_category = "warning"
    login_manager.localize_callback = lambda key: get_translator(get_language())(key)
    auth_context.init_app(login_manager)

    # Application state and AI collaborator
    init_store_app(app)
    init_analyzer_app(app)

    # Template context - language, direction and translations available everywhere
    @app.context_processor
    def inject_globals():
        lang = get_language()
        return {
            "t": get_translator(lang),
            "lang": lang,
            "dir": text_direction(lang),
            "profile": OrganizationProfile.get(),
            "icon_class": icon_class,
            "slide_interval_ms": app.config["SLIDE_INTERVAL_MS"],
        }

    # Blueprints
    from routes.public import public_bp
    from routes.auth import auth_bp
    from routes.admin import admin_bp
    from routes.api import api_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(api_bp, url_prefix="/api")

    # Exempt API from CSRF
    csrf.exempt(api_bp)

    # Error handlers
    @app.errorhandler(403)
    def forbidden(e):
        return render_template("errors/403.html"), 403

    @app.errorhandler(404)
    def not_found(e):
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def server_error(e):
        return render_template("errors/500.html"), 500

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, use_reloader=False)
