from sitebuilder.extensions import db

class OwnerMixin:
    """Denormalized owner used by the ownership guard."""

    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
