from typing import Any, Dict
from sitebuilder.models.base import utcnow
from sitebuilder.blocks.registry import compute_primitive_and_preset
from sitebuilder.domain.exceptions import InvalidArgument
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def update_section(
    *,
    owner_id: str,
    section_id: str,
    content: Dict[str, Any],
) -> None:
    """
    Replace a section's content verbatim (the autosave entry point).

    Touches exactly one row. Primitive and preset follow the new content.
    Concurrent saves of the same section are last-write-wins; no merge is
    attempted.
    """
    if not isinstance(content, dict):
        raise InvalidArgument("Content must be an object")

    with transactional():
        section = load_owned_section(section_id, owner_id)

        section.content = content
        section.primitive, section.preset = compute_primitive_and_preset(
            section.block_type, content
        )
        page_id, site_id = section.page_id, section.page.site_id
        section.updated_at = utcnow()

        log_action(
            actor_id=owner_id,
            action="section.update",
            entity_type="section",
            entity_id=section.id,
            payload={"fields": ["content"]},
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
