import copy
from sitebuilder.extensions import db
from sitebuilder.models.section import Section
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.order import assert_page_order, shift_positions
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def duplicate_section(*, owner_id: str, section_id: str) -> str:
    """
    Clone a section directly below the original and return the clone's id.

    The clone gets a deep copy of the content, the same block type, status,
    primitive and preset. The anchor id is not copied, it must stay unique.
    """
    with transactional():
        original = load_owned_section(section_id, owner_id, for_update=True)

        page_id = original.page_id
        site_id = original.page.site_id
        target_position = original.position + 1

        shift_positions(page_id, delta=1, start=target_position)

        clone = Section()
        clone.page_id = page_id
        clone.owner_id = owner_id
        clone.block_type = original.block_type
        clone.primitive = original.primitive
        clone.preset = original.preset
        clone.content = copy.deepcopy(original.content)
        clone.status = original.status
        clone.position = target_position

        db.session.add(clone)
        db.session.flush()

        assert_page_order(page_id)

        clone_id = clone.id

        log_action(
            actor_id=owner_id,
            action="section.duplicate",
            entity_type="section",
            entity_id=clone_id,
            payload={
                "page_id": page_id,
                "source_id": section_id,
                "position": target_position,
            },
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
    return clone_id
