"""
Specialized Block Resolver.

Site-level header/footer content is authoritative for shared fields (name,
logo, navigation, copyright, links). A page-level header/footer section may
override style fields, each group gated by its own boolean override flag.
"""
import copy
from typing import Any, Dict, Iterable, NamedTuple, Optional

from .registry import FOOTER_BLOCK_TYPE, HEADER_BLOCK_TYPE

Content = Dict[str, Any]

STYLING_FIELDS = (
    "enableStyling",
    "backgroundColor",
    "backgroundImage",
    "overlayColor",
    "overlayOpacity",
    "showBorder",
    "borderWidth",
    "borderColor",
    "textColorMode",
    "textSize",
)

HEADER_CTA_FIELDS = ("showCta", "ctaText", "ctaUrl")
HEADER_SOCIAL_FIELDS = ("showSocialLinks", "socialLinksPosition", "socialLinksSize")
FOOTER_SOCIAL_FIELDS = HEADER_SOCIAL_FIELDS + ("socialLinksAlignment",)


class ResolvedChrome(NamedTuple):
    header: Optional[Content]
    footer: Optional[Content]


def _pick(site: Content, page: Content, flag: str, fields: Iterable[str]) -> Content:
    source = page if page.get(flag) else site
    return {name: copy.deepcopy(source.get(name)) for name in fields}


def _pick_with_default(site: Content, page: Content, flag: str, name: str, default: Any) -> Any:
    if page.get(flag):
        return page.get(name)
    value = site.get(name)
    return default if value is None else value


def merge_header_content(
    site_header: Optional[Content],
    page_header: Optional[Content],
) -> Optional[Content]:
    if page_header is None:
        return copy.deepcopy(site_header)
    if site_header is None:
        return copy.deepcopy(page_header)

    return {
        # Content always from site settings
        "siteName": site_header.get("siteName"),
        "logoUrl": site_header.get("logoUrl"),
        "links": copy.deepcopy(site_header.get("links")),
        **_pick(site_header, page_header, "overrideCta", HEADER_CTA_FIELDS),
        "layout": _pick_with_default(site_header, page_header, "overrideLayout", "layout", "left"),
        "sticky": _pick_with_default(site_header, page_header, "overrideSticky", "sticky", True),
        "showLogoText": _pick_with_default(
            site_header, page_header, "overrideShowLogoText", "showLogoText", True
        ),
        "logoSize": (page_header if page_header.get("overrideLogoSize") else site_header).get("logoSize"),
        **_pick(site_header, page_header, "overrideStyling", STYLING_FIELDS),
        **_pick(site_header, page_header, "overrideSocialLinks", HEADER_SOCIAL_FIELDS),
    }


def merge_footer_content(
    site_footer: Optional[Content],
    page_footer: Optional[Content],
) -> Optional[Content]:
    if page_footer is None:
        return copy.deepcopy(site_footer)
    if site_footer is None:
        return copy.deepcopy(page_footer)

    return {
        "copyright": site_footer.get("copyright"),
        "links": copy.deepcopy(site_footer.get("links")),
        "layout": _pick_with_default(site_footer, page_footer, "overrideLayout", "layout", "simple"),
        **_pick(site_footer, page_footer, "overrideStyling", STYLING_FIELDS),
        **_pick(site_footer, page_footer, "overrideSocialLinks", FOOTER_SOCIAL_FIELDS),
    }


def find_block(sections: Iterable[Any], block_type: str) -> Optional[Content]:
    """Content of the first section of `block_type`, in position order."""
    ordered = sorted(sections, key=lambda s: s.position)
    for section in ordered:
        if section.block_type == block_type:
            return section.content
    return None


def resolve_header_footer(
    sections: Iterable[Any],
    site_header: Optional[Content],
    site_footer: Optional[Content],
) -> ResolvedChrome:
    """
    Header and footer to render for a page.

    Only the first header and first footer section count; any later ones are
    ignored. Nothing passed in is modified.
    """
    sections = list(sections)
    return ResolvedChrome(
        header=merge_header_content(site_header, find_block(sections, HEADER_BLOCK_TYPE)),
        footer=merge_footer_content(site_footer, find_block(sections, FOOTER_BLOCK_TYPE)),
    )
