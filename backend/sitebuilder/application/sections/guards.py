"""
Ownership guard shared by every Section Store operation.

Each operation calls exactly one of these first and works only with the
handle it returns. A missing row and a row owned by someone else both raise
NotFound, so callers cannot probe for ids they do not own.
"""
from sqlalchemy import select
from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.section import Section
from sitebuilder.domain.exceptions import NotFound


def _page_query(page_id, owner_id):
    return select(Page).where(Page.id == page_id, Page.user_id == owner_id)


def load_owned_page(page_id, owner_id, *, for_update=False) -> Page:
    """
    Fetch a page owned by `owner_id`.

    With for_update the page row is locked until the transaction ends, which
    serializes every position-changing operation on that page.
    """
    stmt = _page_query(page_id, owner_id)
    if for_update:
        stmt = stmt.with_for_update().execution_options(populate_existing=True)

    page = db.session.execute(stmt).scalar_one_or_none()
    if page is None:
        raise NotFound("Page not found")
    return page


def load_owned_section(section_id, owner_id, *, for_update=False) -> Section:
    """
    Fetch a section whose page is owned by `owner_id`.

    With for_update the owning page is locked first and the section re-read
    under that lock, so its position cannot be stale.
    """
    stmt = (
        select(Section)
        .join(Page, Section.page_id == Page.id)
        .where(
            Section.id == section_id,
            Section.owner_id == owner_id,
            Page.user_id == owner_id,
        )
    )

    section = db.session.execute(stmt).scalar_one_or_none()
    if section is None:
        raise NotFound("Section not found")

    if for_update:
        load_owned_page(section.page_id, owner_id, for_update=True)
        section = db.session.execute(
            stmt.execution_options(populate_existing=True)
        ).scalar_one_or_none()
        if section is None:
            # deleted by a concurrent request while we waited for the lock
            raise NotFound("Section not found")

    return section
