from sitebuilder.extensions import db
from .base import BaseModel
from .owner_mixin import OwnerMixin

class Site(BaseModel, OwnerMixin):
    __tablename__ = "sites"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)

    # Site-level header/footer shared by every page; pages override style fields only
    header_content = db.Column(db.JSON(none_as_null=True), nullable=True)
    footer_content = db.Column(db.JSON(none_as_null=True), nullable=True)

    pages = db.relationship(
        "Page",
        back_populates="site",
        order_by="Page.display_order",
        cascade="all, delete-orphan"
    )
