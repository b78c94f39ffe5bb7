from flask import Flask, abort, jsonify, request

from auth import resolve_api_key
from config import get_settings
from linear.tracker import LinearTracker
from pipeline import build_snapshot
from snapshot import render_body

app = Flask(__name__)

# Settings are resolved once at startup and handed to the pipeline explicitly.
settings = get_settings()
app.config["RESPONSE_SHAPE"] = settings["response_shape"]
app.config["CACHE_MAX_AGE"] = settings["cache_max_age"]
app.config["MAX_WORKERS"] = settings["max_workers"]
app.config["LINEAR_API_KEY"] = settings["fallback_api_key"]
# Keep the snapshot in the order the pipeline built it.
app.json.sort_keys = False


def make_tracker(api_key: str):
    return LinearTracker(api_key)


@app.errorhandler(405)
def method_not_allowed(_error):
    return jsonify({"error": "Method not allowed"}), 405


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/linear-issues", methods=["GET"], provide_automatic_options=False)
def linear_issues():
    """Return the open cycle work of the user owning the supplied API key."""
    # Flask routes HEAD to GET handlers; only GET may reach Linear.
    if request.method != "GET":
        abort(405)
    api_key = resolve_api_key(request.headers, app.config.get("LINEAR_API_KEY"))
    if not api_key:
        return (
            jsonify(
                {
                    "error": "Linear API key required",
                    "message": (
                        "Please provide your Linear API key in the "
                        "X-Linear-API-Key header or Authorization header"
                    ),
                }
            ),
            401,
        )

    try:
        snapshot = build_snapshot(
            make_tracker(api_key), max_workers=app.config["MAX_WORKERS"]
        )
    except Exception as e:
        app.logger.exception("Error fetching Linear issues: %s", e)
        return (
            jsonify({"error": "Failed to fetch Linear issues", "details": str(e)}),
            500,
        )

    response = jsonify(render_body(snapshot, app.config["RESPONSE_SHAPE"]))
    response.headers["Cache-Control"] = (
        f"s-maxage={app.config['CACHE_MAX_AGE']}, stale-while-revalidate"
    )
    return response


if __name__ == "__main__":
    app.run()
