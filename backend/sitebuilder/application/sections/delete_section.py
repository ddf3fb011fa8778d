from sitebuilder.extensions import db
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.order import assert_page_order, shift_positions
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def delete_section(*, owner_id: str, section_id: str) -> None:
    """
    Remove a section and close the gap it leaves.

    Every section after the deleted one moves down by one, in the same
    transaction as the delete.
    """
    with transactional():
        section = load_owned_section(section_id, owner_id, for_update=True)

        page_id = section.page_id
        site_id = section.page.site_id
        position = section.position
        block_type = section.block_type

        db.session.delete(section)
        db.session.flush()

        shift_positions(page_id, delta=-1, start=position + 1)
        assert_page_order(page_id)

        log_action(
            actor_id=owner_id,
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            payload={
                "page_id": page_id,
                "block_type": block_type,
                "position": position,
            },
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
