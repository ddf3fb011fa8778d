from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from sitebuilder.extensions import db
from sitebuilder.models.user import User

def owner_required(fn):
    """
    Resolve the caller identity from the JWT into g.current_user_id.

    Fails closed: a missing token, an unknown user or a disabled account is
    treated as unauthenticated.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        user_id = get_jwt_identity()

        user = db.session.get(User, user_id) if user_id else None
        if not user or not user.is_active:
            return jsonify({"success": False, "error": "Unauthorized", "message": "Unauthenticated"}), 401

        g.current_user_id = user.id
        return fn(*args, **kwargs)
    return wrapper
