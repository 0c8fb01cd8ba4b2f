import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")

    # Fixed admin credential; donors sign in by username only
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "Raidan@772662106")
    DONOR_PASSWORDLESS_LOGIN = _env_flag("DONOR_PASSWORDLESS_LOGIN", True)

    # Generative AI collaborator for violation reports
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

    DEFAULT_LANGUAGE = "ar"
    SLIDE_INTERVAL_MS = 6000
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    ADMIN_ROLES = ("admin", "donor")
    NEWS_PLACEHOLDER_IMAGE = (
        "https://images.unsplash.com/photo-1504711434969-e33886168f5c"
        "?auto=format&fit=crop&w=800&q=80"
    )
    REPORTS_MAP_IMAGE = (
        "https://images.unsplash.com/photo-1524661135-423995f22d0b"
        "?auto=format&fit=crop&w=1600&q=80"
    )
