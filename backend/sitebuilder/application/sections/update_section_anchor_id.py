from typing import Optional
from sqlalchemy import select
from sitebuilder.extensions import db
from sitebuilder.models.base import utcnow
from sitebuilder.models.section import Section
from sitebuilder.domain.exceptions import Conflict
from sitebuilder.domain.invariants.anchor import clean_anchor_id
from sitebuilder.domain.invariants.section import assert_unique_anchors
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def update_section_anchor_id(
    *,
    owner_id: str,
    section_id: str,
    anchor_id: Optional[str],
) -> Optional[str]:
    """
    Set or clear a section's in-page anchor and return the stored value.

    Blank input clears the anchor. A malformed id is rejected before any
    storage access; an id already used by another section on the same page
    raises Conflict.
    """
    anchor_id = clean_anchor_id(anchor_id)

    with transactional():
        # page lock makes the uniqueness check and the write atomic
        section = load_owned_section(section_id, owner_id, for_update=True)

        if anchor_id is not None:
            taken = db.session.execute(
                select(Section.id).where(
                    Section.page_id == section.page_id,
                    Section.anchor_id == anchor_id,
                    Section.id != section.id,
                )
            ).first()
            if taken is not None:
                raise Conflict(f"Anchor id {anchor_id!r} is already used on this page")

        previous = section.anchor_id
        section.anchor_id = anchor_id
        section.updated_at = utcnow()
        db.session.flush()
        assert_unique_anchors(
            db.session.execute(
                select(Section.anchor_id).where(Section.page_id == section.page_id)
            ).scalars().all()
        )

        page_id, site_id = section.page_id, section.page.site_id

        log_action(
            actor_id=owner_id,
            action="section.anchor",
            entity_type="section",
            entity_id=section_id,
            payload={"from": previous, "to": anchor_id},
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
    return anchor_id
