from sitebuilder.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "sections"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False
    )
    owner_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    block_type = db.Column(db.String(50), nullable=False)  # see blocks.registry.BLOCK_TYPES
    primitive = db.Column(db.String(50), nullable=True)
    preset = db.Column(db.String(50), nullable=True)
    content = db.Column(db.JSON, nullable=False, default=dict)
    position = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default="published")  # draft | published
    anchor_id = db.Column(db.String(50), nullable=True)

    page = db.relationship("Page", back_populates="sections")

    # Not unique: shifts move rows through each other's positions mid-transaction.
    # Density is asserted by domain.invariants.section before every commit.
    __table_args__ = (
        db.Index("idx_section_page_position", "page_id", "position"),
        db.Index("idx_section_page_anchor", "page_id", "anchor_id"),
        db.Index("idx_section_primitive_preset", "primitive", "preset"),
    )
