from flask import request, jsonify, current_app
from authcheck.api import api_bp
from authcheck.auth import require_admin
from authcheck.exceptions import EvaluationError, InvalidAddressError
from authcheck.models.report import MAX_SCORE


def _client_ip() -> str:
    ip = request.headers.get("CF-Connecting-IP")
    if ip:
        return ip
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


@api_bp.route("/health", methods=["GET"])
def health():
    config = current_app.config
    return jsonify({
        "status": "ok",
        "doh_endpoint": config.get("DOH_ENDPOINT"),
        "log_endpoint_configured": bool(config.get("LOG_ENDPOINT")),
    })


@api_bp.route("/check", methods=["POST"])
def check():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object"}), 400
    address = data.get("address") or data.get("email") or data.get("domain")
    if address is not None and not isinstance(address, str):
        return jsonify({"success": False, "error": "Please enter a valid domain name"}), 400

    from authcheck.evaluators import run_check
    from authcheck.utils.usage_reporter import dispatch_report

    try:
        report = run_check(address, endpoint=current_app.config.get("DOH_ENDPOINT"))
    except InvalidAddressError as e:
        return jsonify({"success": False, "error": str(e)}), 400
    except EvaluationError as e:
        return jsonify({"success": False, "error": f"Error checking DNS records: {e}"}), 502

    dispatch_report(current_app.config.get("LOG_ENDPOINT"), report)
    return jsonify(report.to_dict())


@api_bp.route("/log", methods=["POST"])
def log_check():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    email = data.get("email")
    domain = data.get("domain")
    results = data.get("results")

    for value in (email, domain):
        if value is not None and not isinstance(value, str):
            return jsonify({"error": "Invalid address"}), 400

    if email and not domain and "@" in email:
        domain = email.rpartition("@")[2]
    if not domain or not isinstance(results, dict):
        return jsonify({"error": "Missing required fields"}), 400

    score = data.get("score")
    if score is not None and (
        isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= MAX_SCORE
    ):
        return jsonify({"error": "Invalid score"}), 400

    store = current_app.extensions["usage_log"]
    store.record_check(
        domain=domain.strip().lower(),
        email=email,
        results=results,
        score=score,
        ip_address=_client_ip(),
        user_agent=request.headers.get("User-Agent", "unknown"),
    )
    return jsonify({"success": True})


@api_bp.route("/stats", methods=["GET"])
@require_admin
def stats():
    store = current_app.extensions["usage_log"]
    return jsonify(store.get_stats())
