import logging
from typing import Optional

from flask import Flask, jsonify, request

from risk_register import __version__
from risk_register.config import AppConfig
from risk_register.models import RiskItem
from risk_register.services.classification import (
    classify_quadrants,
    dashboard_snapshot,
    filter_items,
)
from risk_register.services.matrix import matrix_points
from risk_register.services.reports import build_report, report_catalogue
from risk_register.services.storage import SlotStorage, SqlSlotStorage
from risk_register.services.store import CollectionStore
from risk_register.utils.constants import JITTER_SOURCES
from risk_register.utils.db import init_db
from risk_register.utils.errors import ItemNotFoundError, RegisterError
from risk_register.utils.logging_config import attach_request_id, configure_logging, ensure_request_id

logger = logging.getLogger(__name__)


def parse_int_param(name: str) -> Optional[int]:
    value = request.args.get(name)
    if not value or value == "All":
        return None
    try:
        return int(value)
    except ValueError:
        raise RegisterError(f"{name} must be an integer", status_code=400)


def parse_str_param(name: str) -> Optional[str]:
    value = request.args.get(name)
    if not value or value == "All":
        return None
    return value


def create_app(config: Optional[AppConfig] = None, storage: Optional[SlotStorage] = None) -> Flask:
    config = config or AppConfig.from_env()
    configure_logging(config.log_level)
    app = Flask(__name__)
    if storage is None:
        storage = SqlSlotStorage(init_db(config))
    store = CollectionStore(storage, config)
    store.load()
    app.extensions["risk_register.store"] = store

    @app.before_request
    def before_request():
        ensure_request_id()

    app.after_request(attach_request_id)

    @app.errorhandler(RegisterError)
    def handle_register_error(exc: RegisterError):
        logger.warning("Request rejected", extra={"error": str(exc), "status_code": exc.status_code})
        return jsonify(exc.to_dict()), exc.status_code

    def require_item(item_id: str) -> RiskItem:
        item = store.get(item_id)
        if item is None:
            raise ItemNotFoundError(f"Item {item_id} not found")
        return item

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "items": len(store.items), "version": store.version})

    @app.route("/version")
    def version():
        return jsonify({"version": __version__})

    @app.route("/items", methods=["GET"])
    def list_items():
        items = filter_items(
            store.items,
            priority=parse_int_param("priority"),
            area=parse_str_param("area"),
            status=parse_str_param("status"),
        )
        return jsonify([i.to_dict() for i in items])

    @app.route("/items/<item_id>", methods=["GET"])
    def get_item(item_id: str):
        return jsonify(require_item(item_id).to_dict())

    @app.route("/items/<item_id>", methods=["PUT"])
    def update_item(item_id: str):
        require_item(item_id)
        data = request.get_json(force=True)
        if isinstance(data, dict) and data.get("id", item_id) != item_id:
            raise RegisterError("Item id in body does not match URL", status_code=400)
        if isinstance(data, dict):
            data = {**data, "id": item_id}
        item = RiskItem.from_dict(data)
        store.upsert(item)
        return jsonify(item.to_dict())

    @app.route("/items/<item_id>/advance", methods=["POST"])
    def advance_item(item_id: str):
        return jsonify(store.advance_status(item_id).to_dict())

    @app.route("/dashboard")
    def dashboard():
        return jsonify(dashboard_snapshot(store.items, config))

    @app.route("/matrix")
    def matrix():
        jitter_source = request.args.get("jitter", config.jitter_source)
        if jitter_source not in JITTER_SOURCES:
            raise RegisterError(f"jitter must be one of {', '.join(JITTER_SOURCES)}", status_code=400)
        return jsonify([p.to_dict() for p in matrix_points(store.items, jitter_source)])

    @app.route("/quadrants")
    def quadrants():
        buckets = classify_quadrants(store.items, config.quick_win_threshold)
        return jsonify({name: [i.to_dict() for i in members] for name, members in buckets.items()})

    @app.route("/reports")
    def reports():
        return jsonify({"reports": report_catalogue()})

    @app.route("/reports/<report_type>")
    def report(report_type: str):
        return jsonify(build_report(report_type, store.items, config))

    return app
