from sqlalchemy import select, update, func
from sitebuilder.extensions import db
from sitebuilder.models.base import utcnow
from sitebuilder.models.section import Section
from sitebuilder.domain.invariants.section import assert_dense_positions


def shift_positions(page_id, *, delta, start=None, end=None):
    """
    Add `delta` to the position of every section on the page whose position
    lies in [start, end] (either bound may be omitted).
    """
    conditions = [Section.page_id == page_id]
    if start is not None:
        conditions.append(Section.position >= start)
    if end is not None:
        conditions.append(Section.position <= end)

    db.session.execute(
        update(Section)
        .where(*conditions)
        .values(position=Section.position + delta, updated_at=utcnow())
        .execution_options(synchronize_session="fetch")
    )


def section_count(page_id):
    return db.session.execute(
        select(func.count(Section.id)).where(Section.page_id == page_id)
    ).scalar_one()


def next_position(page_id):
    """max(position) + 1, or 0 for an empty page."""
    max_position = db.session.execute(
        select(func.max(Section.position)).where(Section.page_id == page_id)
    ).scalar()
    return 0 if max_position is None else max_position + 1


def assert_page_order(page_id):
    """Flush pending changes, then check the page's positions are {0..N-1}."""
    db.session.flush()
    positions = db.session.execute(
        select(Section.position).where(Section.page_id == page_id)
    ).scalars().all()
    assert_dense_positions(positions)
