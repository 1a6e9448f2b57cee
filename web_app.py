from flask import Flask, request, render_template, send_file, session, jsonify
import io
import os
import logging

import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from tipsplit.display import build_view, slider_stops
from tipsplit.engine import TipEngine
from tipsplit.table import tip_table, tip_table_excel

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-for-local-testing-only")

CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "$")

# Optional Basic Auth: set BASIC_AUTH_USERNAME and BASIC_AUTH_PASSWORD in env to enable
BASIC_AUTH_USERNAME = os.environ.get("BASIC_AUTH_USERNAME")
BASIC_AUTH_PASSWORD = os.environ.get("BASIC_AUTH_PASSWORD")

# Initialize Sentry if DSN provided
SENTRY_DSN = os.environ.get("SENTRY_DSN")
if SENTRY_DSN:
    sentry_sdk.init(dsn=SENTRY_DSN, integrations=[FlaskIntegration()])

SESSION_KEY = "tip_state"


def _check_basic_auth():
    """Return True if auth is not enabled or if provided credentials match env vars."""
    if not (BASIC_AUTH_USERNAME and BASIC_AUTH_PASSWORD):
        return True
    auth = request.authorization
    if not auth:
        return False
    return auth.username == BASIC_AUTH_USERNAME and auth.password == BASIC_AUTH_PASSWORD


@app.before_request
def require_basic_auth():
    # Protect all routes except the health check when BASIC_AUTH_* are set
    if request.endpoint == "health":
        return None
    if not _check_basic_auth():
        return "Unauthorized", 401, {"WWW-Authenticate": 'Basic realm="Login Required"'}
    return None


def _load_engine() -> TipEngine:
    return TipEngine.from_state(session.get(SESSION_KEY))


def _save_engine(engine: TipEngine) -> None:
    session[SESSION_KEY] = engine.state()


def _payload(engine: TipEngine) -> dict:
    return {
        "state": engine.state(),
        "view": build_view(engine.snapshot(), CURRENCY_SYMBOL).to_dict(),
    }


def _apply_form_action(engine: TipEngine, form) -> None:
    action = form.get("action", "")
    if action == "bill":
        # Bill text is trimmed when the user submits it
        engine.on_bill_text_changed(form.get("bill_text", "").strip())
    elif action == "increment":
        engine.on_split_increment()
    elif action == "decrement":
        engine.on_split_decrement()
    elif action == "tip":
        engine.on_tip_fraction_changed(form.get("tip_fraction", "0"))
    elif action == "reset":
        engine.reset()
    else:
        logger.warning(f"Ignoring unknown form action: {action!r}")


@app.route("/health", methods=["GET"])
def health():
    return jsonify(status="ok"), 200


@app.route("/", methods=["GET", "POST"])
def index():
    engine = _load_engine()
    if request.method == "POST":
        _apply_form_action(engine, request.form)
        _save_engine(engine)

    return render_template(
        "index.html",
        state=engine.state(),
        view=build_view(engine.snapshot(), CURRENCY_SYMBOL),
        stops=slider_stops(),
    )


API_EVENTS = {
    "bill_text_changed": lambda engine, value: engine.on_bill_text_changed(value),
    "split_increment": lambda engine, value: engine.on_split_increment(),
    "split_decrement": lambda engine, value: engine.on_split_decrement(),
    "tip_fraction_changed": lambda engine, value: engine.on_tip_fraction_changed(value),
    "reset": lambda engine, value: engine.reset(),
}


@app.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(_payload(_load_engine())), 200


@app.route("/api/events", methods=["POST"])
def api_events():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        logger.warning("Rejected event request without a JSON object body")
        return jsonify(error="No JSON data provided"), 400

    event = body.get("event")
    handler = API_EVENTS.get(event)
    if handler is None:
        logger.warning(f"Rejected unknown event: {event!r}")
        return jsonify(error=f"Unknown event: {event}", events=sorted(API_EVENTS)), 400

    engine = _load_engine()
    handler(engine, body.get("value"))
    _save_engine(engine)
    return jsonify(_payload(engine)), 200


@app.route("/table.xlsx", methods=["GET"])
def table_download():
    # Unhandled errors here reach Sentry through FlaskIntegration
    engine = _load_engine()
    df = tip_table(engine.bill_text, engine.split_count)
    output_io = io.BytesIO(tip_table_excel(df))

    return send_file(
        output_io,
        as_attachment=True,
        download_name="Tip_Table.xlsx",
        mimetype=("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
    )


if __name__ == "__main__":
    # Use PORT environment variable for cloud servers; default to 5000 for local dev
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_ENV") == "development"
    app.run(host="0.0.0.0", port=port, debug=debug)
