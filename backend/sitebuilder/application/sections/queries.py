from typing import List, Optional
from sqlalchemy import select
from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.section import Section
from .guards import load_owned_page, load_owned_section


def get_sections_by_page(*, owner_id: str, page_id: str) -> List[Section]:
    """All sections of an owned page, ordered by position."""
    load_owned_page(page_id, owner_id)

    return db.session.execute(
        select(Section)
        .where(Section.page_id == page_id)
        .order_by(Section.position.asc())
    ).scalars().all()


def get_section_by_id(*, owner_id: str, section_id: str) -> Section:
    return load_owned_section(section_id, owner_id)


def get_published_sections_by_page(page_id: str) -> List[Section]:
    """Public read for the renderer; no ownership check."""
    return db.session.execute(
        select(Section)
        .where(Section.page_id == page_id, Section.status == "published")
        .order_by(Section.position.asc())
    ).scalars().all()


def get_published_page(page_id: str) -> Optional[Page]:
    return db.session.execute(
        select(Page).where(Page.id == page_id, Page.status == "published")
    ).scalar_one_or_none()
