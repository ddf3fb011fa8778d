from sitebuilder.extensions import db
from .base import BaseModel
from .owner_mixin import OwnerMixin

class Page(BaseModel, OwnerMixin):
    __tablename__ = "pages"

    site_id = db.Column(
        db.String(36),
        db.ForeignKey("sites.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(50), default="draft", index=True)
    is_home = db.Column(db.Boolean, default=False, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_page_slug_per_site"),
    )

    site = db.relationship("Site", back_populates="pages")

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.position",
        cascade="all, delete-orphan"
    )
