from typing import Any
from sitebuilder.models.base import utcnow
from sitebuilder.domain.exceptions import InvalidArgument
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.order import assert_page_order, section_count, shift_positions
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def move_section(*, owner_id: str, section_id: str, new_position: Any) -> None:
    """
    Move one section to `new_position`, shifting only the sections between
    its old and new slot.

    Moving forward (old < new): sections in (old, new] move down by one.
    Moving backward (new < old): sections in [new, old) move up by one.
    """
    if isinstance(new_position, bool) or not isinstance(new_position, int):
        raise InvalidArgument("Position must be an integer")

    with transactional():
        section = load_owned_section(section_id, owner_id, for_update=True)

        page_id = section.page_id
        site_id = section.page.site_id
        old_position = section.position
        size = section_count(page_id)

        if new_position < 0 or new_position >= size:
            raise InvalidArgument(
                f"Position {new_position} is out of range [0, {size - 1}]"
            )

        if new_position == old_position:
            return

        if old_position < new_position:
            shift_positions(page_id, delta=-1, start=old_position + 1, end=new_position)
        else:
            shift_positions(page_id, delta=1, start=new_position, end=old_position - 1)

        section.position = new_position
        section.updated_at = utcnow()

        assert_page_order(page_id)

        log_action(
            actor_id=owner_id,
            action="section.move",
            entity_type="section",
            entity_id=section_id,
            payload={"from": old_position, "to": new_position},
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
