from typing import Any, Dict, Optional
from sqlalchemy import select
from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.section import Section
from sitebuilder.models.site import Site
from sitebuilder.blocks.registry import (
    HEADER_BLOCK_TYPE,
    assert_block_type,
    compute_primitive_and_preset,
    default_content,
)
from sitebuilder.domain.exceptions import InvalidArgument
from sitebuilder.domain.lifecycle.section import DEFAULT_SECTION_STATUS
from sitebuilder.signals import emit_page_changed
from sitebuilder.utils.audit import log_action
from sitebuilder.utils.order import assert_page_order, next_position, section_count, shift_positions
from sitebuilder.utils.transaction import transactional
from .guards import load_owned_page


def header_content_for_site(site_id: str, owner_id: str) -> Dict[str, Any]:
    """
    Default header populated from the site's real name and page list.

    Falls back to the registry default when the site cannot be read.
    """
    site = db.session.execute(
        select(Site).where(Site.id == site_id, Site.user_id == owner_id)
    ).scalar_one_or_none()
    if site is None:
        return default_content(HEADER_BLOCK_TYPE)

    site_pages = db.session.execute(
        select(Page)
        .where(Page.site_id == site.id, Page.user_id == owner_id)
        .order_by(Page.display_order.asc(), Page.created_at.asc())
    ).scalars().all()

    links = [
        {
            "label": page.title,
            "url": f"/sites/{site.slug}" if page.is_home else f"/sites/{site.slug}/{page.slug}",
        }
        for page in site_pages
    ]

    return {
        "siteName": site.name,
        "logoUrl": "",
        "links": links,
        "showCta": True,
        "ctaText": "",
        "ctaUrl": "",
        "layout": "left",
        "sticky": True,
        "showLogoText": True,
    }


def _validate_insert_position(position: Any, size: int) -> int:
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidArgument("Position must be an integer")
    if position < 0 or position > size:
        raise InvalidArgument(f"Position {position} is out of range [0, {size}]")
    return position


def add_section(
    *,
    owner_id: str,
    page_id: str,
    block_type: str,
    position: Optional[int] = None,
    template_content: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Insert a new section, appended or at `position`.

    Sections at or after `position` move up by one before the insert, so the
    new row never collides. Content resolution order:
    - template_content when given
    - for headers, a default built from the site's name and pages
    - the registry default for block_type
    """
    assert_block_type(block_type)
    if template_content is not None and not isinstance(template_content, dict):
        raise InvalidArgument("Template content must be an object")

    with transactional():
        page = load_owned_page(page_id, owner_id, for_update=True)

        if position is None:
            target_position = next_position(page.id)
        else:
            target_position = _validate_insert_position(position, section_count(page.id))
            shift_positions(page.id, delta=1, start=target_position)

        if template_content is not None:
            content = template_content
        elif block_type == HEADER_BLOCK_TYPE:
            content = header_content_for_site(page.site_id, owner_id)
        else:
            content = default_content(block_type)

        primitive, preset = compute_primitive_and_preset(block_type, content)

        section = Section()
        section.page_id = page.id
        section.owner_id = owner_id
        section.block_type = block_type
        section.primitive = primitive
        section.preset = preset
        section.content = content
        section.position = target_position
        section.status = DEFAULT_SECTION_STATUS

        db.session.add(section)
        db.session.flush()  # ensures section.id is available

        assert_page_order(page.id)

        section_id, site_id = section.id, page.site_id

        log_action(
            actor_id=owner_id,
            action="section.create",
            entity_type="section",
            entity_id=section_id,
            payload={
                "page_id": page_id,
                "block_type": block_type,
                "position": target_position,
            },
        )

    emit_page_changed(page_id=page_id, site_id=site_id)
    return section_id
