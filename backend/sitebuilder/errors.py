from flask import current_app, jsonify
from sitebuilder.domain.exceptions import SectionError, StorageError
from sitebuilder.domain.invariants.exceptions import InvariantViolation


def _error_response(error_name, message, status_code, **extra):
    response = jsonify({
        "success": False,
        "error": error_name,
        "message": message,
        **extra,
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        current_app.logger.error("Invariant violated: %s", error)
        return _error_response("InvariantViolation", str(error), 400)

    @app.errorhandler(StorageError)
    def handle_storage_error(error):
        current_app.logger.warning(
            "Storage error (retryable=%s): %s", error.retryable, error.message
        )
        return _error_response(
            "StorageError", error.message, error.status_code, retryable=error.retryable
        )

    @app.errorhandler(SectionError)
    def handle_section_error(error):
        return _error_response(error.__class__.__name__, error.message, error.status_code)
