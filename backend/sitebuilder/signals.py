"""
Cache invalidation signal for the rendering layer.

Delivery is fire-and-forget: a failing receiver is logged and never fails the
mutation that triggered it.
"""
from blinker import Namespace
from flask import current_app

_signals = Namespace()

# sender: the Flask app; kwargs: page_id, site_id
page_changed = _signals.signal("page-changed")


def emit_page_changed(*, page_id, site_id):
    app = current_app._get_current_object()
    try:
        page_changed.send(app, page_id=page_id, site_id=site_id)
    except Exception:
        app.logger.exception("Cache invalidation failed for page %s", page_id)
