from flask import Blueprint, jsonify, current_app
from flask_login import current_user

from models.product import Product
from models.report import ViolationReport

api_bp = Blueprint("api", __name__)


def _auth_error(roles=()):
    if not current_user.is_authenticated:
        return jsonify({"error": "Authentication required"}), 401
    if roles and current_user.role not in roles:
        return jsonify({"error": "Insufficient role"}), 403
    return None


@api_bp.route("/products")
def list_products():
    products = Product.get_all()
    return jsonify({
        "products": [p.to_dict() for p in products],
        "total": len(products),
    })


@api_bp.route("/reports")
def list_reports():
    error = _auth_error(current_app.config["ADMIN_ROLES"])
    if error is not None:
        return error
    reports = ViolationReport.get_all()
    return jsonify({
        "reports": [r.to_dict() for r in reports],
        "total": len(reports),
    })


@api_bp.route("/me")
def me():
    error = _auth_error()
    if error is not None:
        return error
    return jsonify(current_user.to_dict())
