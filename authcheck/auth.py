import jwt
from functools import wraps
from flask import request, jsonify, current_app

ADMIN_AUDIENCE = "authcheck-admin"


def verify_admin_token(token, secret):
    """Verify an HS256 admin token and return the decoded claims."""
    decoded = jwt.decode(
        token,
        secret,
        algorithms=["HS256"],
        audience=ADMIN_AUDIENCE,
    )
    if not decoded.get("sub"):
        raise ValueError("Invalid token: missing subject")
    return decoded


def require_admin(f):
    """Decorator that requires a valid admin bearer token in the Authorization header."""
    @wraps(f)
    def decorated(*args, **kwargs):
        secret = current_app.config.get("ADMIN_JWT_SECRET")
        if not secret:
            return jsonify({"error": "Admin access is not configured"}), 401

        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": "Authorization required"}), 401

        token = auth_header[7:]
        try:
            request.admin_claims = verify_admin_token(token, secret)
        except (jwt.PyJWTError, ValueError) as e:
            return jsonify({"error": f"Invalid token: {str(e)}"}), 401

        return f(*args, **kwargs)
    return decorated
