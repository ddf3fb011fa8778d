from sitebuilder.extensions import db
from sitebuilder.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    actor_id: str,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """Queue an audit row in the current transaction; it commits with the change."""
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
