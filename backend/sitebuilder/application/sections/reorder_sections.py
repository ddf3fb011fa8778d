from typing import List
from sqlalchemy import select
from sitebuilder.extensions import db
from sitebuilder.models.base import utcnow
from sitebuilder.models.section import Section
from sitebuilder.domain.exceptions import InvalidArgument
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.order import assert_page_order
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_page


def reorder_sections(*, owner_id: str, page_id: str, section_ids: List[str]) -> None:
    """
    Rewrite the whole order of a page in one transaction.

    `section_ids` must name every section of the page exactly once; the
    section at index i ends up at position i.
    """
    if not isinstance(section_ids, list) or not all(isinstance(i, str) for i in section_ids):
        raise InvalidArgument("section_ids must be a list of ids")
    if len(set(section_ids)) != len(section_ids):
        raise InvalidArgument("section_ids contains duplicates")

    with transactional():
        page = load_owned_page(page_id, owner_id, for_update=True)

        sections = db.session.execute(
            select(Section).where(Section.page_id == page.id)
        ).scalars().all()
        by_id = {section.id: section for section in sections}

        if set(section_ids) != set(by_id):
            raise InvalidArgument("section_ids must list every section of the page exactly once")

        now = utcnow()
        for index, section_id in enumerate(section_ids):
            section = by_id[section_id]
            if section.position != index:
                section.position = index
                section.updated_at = now

        assert_page_order(page.id)

        site_id = page.site_id

        log_action(
            actor_id=owner_id,
            action="section.reorder",
            entity_type="page",
            entity_id=page_id,
            payload={"section_ids": list(section_ids)},
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
