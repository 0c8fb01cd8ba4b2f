from enum import Enum


class Icon(Enum):
    # Public services
    SEARCH = "search"
    BALANCE = "balance"
    BULLHORN = "bullhorn"
    # Currency indicators
    UP = "up"
    DOWN = "down"
    STABLE = "stable"
    # Admin tabs
    DASHBOARD = "dashboard"
    USERS = "users"
    NEWS = "news"
    PRODUCTS = "products"
    MAP = "map"
    BRIEFCASE = "briefcase"
    HEART = "heart"
    SETTINGS = "settings"


# Bootstrap Icons class per icon; every member must be present
ICON_CLASSES = {
    Icon.SEARCH: "bi-search",
    Icon.BALANCE: "bi-graph-up-arrow",
    Icon.BULLHORN: "bi-exclamation-octagon",
    Icon.UP: "bi-arrow-up-right text-danger",
    Icon.DOWN: "bi-arrow-down-right text-success",
    Icon.STABLE: "bi-dash text-secondary",
    Icon.DASHBOARD: "bi-speedometer2",
    Icon.USERS: "bi-people",
    Icon.NEWS: "bi-newspaper",
    Icon.PRODUCTS: "bi-box-seam",
    Icon.MAP: "bi-map",
    Icon.BRIEFCASE: "bi-briefcase",
    Icon.HEART: "bi-heart",
    Icon.SETTINGS: "bi-gear",
}

missing = set(Icon) - set(ICON_CLASSES)
if missing:
    raise RuntimeError(f"Icons without a CSS class: {sorted(i.name for i in missing)}")
del missing


def icon_class(icon):
    return ICON_CLASSES[icon]
