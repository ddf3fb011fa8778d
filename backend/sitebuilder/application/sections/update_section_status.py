from sitebuilder.models.base import utcnow
from sitebuilder.domain.lifecycle.section import assert_section_status
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def update_section_status(*, owner_id: str, section_id: str, status: str) -> None:
    """Switch a section between draft and published. Position is untouched."""
    assert_section_status(status)

    with transactional():
        section = load_owned_section(section_id, owner_id)

        previous = section.status
        section.status = status
        section.updated_at = utcnow()
        page_id, site_id = section.page_id, section.page.site_id

        log_action(
            actor_id=owner_id,
            action="section.status",
            entity_type="section",
            entity_id=section_id,
            payload={"from": previous, "to": status},
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
