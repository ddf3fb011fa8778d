from sitebuilder.models.base import utcnow
from sitebuilder.blocks.migration import ConversionResult, convert
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_section


def convert_section(*, owner_id: str, section_id: str) -> ConversionResult:
    """
    Replace a deprecated section with its unified successor, in place.

    Position, status and anchor id are kept; block type, primitive, preset and
    content are rewritten from the conversion result.
    """
    with transactional():
        section = load_owned_section(section_id, owner_id)

        source_type = section.block_type
        result = convert(source_type, section.content or {})

        section.block_type = result.block_type
        section.primitive = result.block_type
        section.preset = result.preset
        section.content = result.content
        section.updated_at = utcnow()
        page_id, site_id = section.page_id, section.page.site_id

        log_action(
            actor_id=owner_id,
            action="section.convert",
            entity_type="section",
            entity_id=section_id,
            payload={
                "from": source_type,
                "to": result.block_type,
                "preset": result.preset,
            },
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
    return result
