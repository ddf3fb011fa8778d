from flask import current_app, jsonify
from sqlalchemy import text
from sitebuilder.extensions import db
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning("Health check database query failed: %s", exc)
        database = "unavailable"

    return jsonify({
        "status": "ok",
        "service": "sitebuilder-sections",
        "database": database,
    })
