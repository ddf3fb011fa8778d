"""
Content Migration Engine.

One-directional, pure conversion of a deprecated block's content into the
content of its unified successor (see registry.CONVERSION_TARGETS).

Rules every converter follows:
- fields present in both shapes are copied 1:1 under the successor's names
- successor-only styling fields get their neutral value
- list items that need a stable id and lack one get a fresh one
- the input payload is never mutated; nested values are deep-copied
"""
import copy
import logging
import uuid
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Set

from sitebuilder.domain.exceptions import InvalidArgument
from .registry import (
    CONVERSION_TARGETS,
    ConversionTarget,
    validate_content,
)

logger = logging.getLogger(__name__)

Content = Dict[str, Any]

# Box/background/overlay styling shared by most legacy blocks and their successors
STYLING_FIELDS = (
    "showBorder",
    "borderWidth",
    "borderRadius",
    "borderColor",
    "boxBackgroundColor",
    "boxBackgroundOpacity",
    "useThemeBackground",
    "backgroundImage",
    "overlayColor",
    "overlayOpacity",
    "textSize",
)

CARD_STYLING_FIELDS = ("showCardBackground", "cardBackgroundColor")


class ConversionResult(NamedTuple):
    block_type: str
    preset: str
    content: Content


def generate_item_id() -> str:
    return f"item-{uuid.uuid4().hex[:12]}"


def _carry(source: Content, fields: Iterable[str]) -> Content:
    """Copy the fields that are present in `source`, and only those."""
    return {name: copy.deepcopy(source[name]) for name in fields if name in source}


def _styling(source: Content, fields: Iterable[str] = STYLING_FIELDS) -> Content:
    return {
        "enableStyling": source.get("enableStyling", False),
        "textColorMode": source.get("textColorMode", "auto"),
        **_carry(source, fields),
    }


def _with_unique_ids(items: List[Content], seen: Optional[Set[str]] = None) -> List[Content]:
    """Keep usable ids, give every other item a fresh one. Never reuse an id."""
    seen = set() if seen is None else seen
    result = []
    for item in items:
        item = copy.deepcopy(item)
        item_id = item.get("id")
        if not isinstance(item_id, str) or not item_id or item_id in seen:
            item_id = generate_item_id()
            while item_id in seen:
                item_id = generate_item_id()
            item["id"] = item_id
        seen.add(item_id)
        result.append(item)
    return result


# -------------------------------------------------
# hero_primitive successors
# -------------------------------------------------
def _hero_buttons(content: Content) -> List[Content]:
    if "buttons" in content and content["buttons"] is not None:
        return _with_unique_ids(content["buttons"])

    # Older heroes carried a single CTA instead of a button list
    if content.get("showCta", True) and content.get("ctaText"):
        return [{
            "id": generate_item_id(),
            "text": content["ctaText"],
            "url": content.get("ctaUrl") or "#",
            "variant": "primary",
        }]
    return []


def convert_hero(content: Content) -> Content:
    converted = {
        "layout": "full",
        "heading": content["heading"],
        "subheading": content["subheading"],
        "textAlignment": "center",
        "buttons": _hero_buttons(content),
        "titleMode": content.get("titleMode", "static"),
        "bodyText": content.get("bodyText", ""),
        "bodyTextAlignment": content.get("bodyTextAlignment", "center"),
        "heroBackgroundImage": content.get("backgroundImage", ""),
        "image": content.get("image", ""),
        "imageAlt": content.get("imageAlt", ""),
        "imagePosition": content.get("imagePosition", "top"),
        "imageMobileStack": content.get("imageMobileStack", "above"),
        "imageRounding": content.get("imageRounding", "none"),
        "imageBorderWidth": content.get("imageBorderWidth", "none"),
        "imageBorderColor": content.get("imageBorderColor", ""),
        "imageShadow": content.get("imageShadow", "none"),
        "imageSize": content.get("imageSize", 200),
        "enableStyling": False,
        "textColorMode": "auto",
    }
    converted.update(_carry(content, ("rotatingTitle",)))
    return converted


def convert_cta(content: Content) -> Content:
    return {
        "layout": "cta",
        "heading": content["heading"],
        "subheading": content["description"],
        "textAlignment": "center",
        "buttons": [
            {
                "id": generate_item_id(),
                "text": content["buttonText"],
                "url": content["buttonUrl"],
                "variant": "primary",
            },
        ],
        **_styling(content),
    }


def convert_heading(content: Content) -> Content:
    return {
        "layout": "title-only",
        "heading": content["title"],
        "subheading": content.get("subtitle") or "",
        "textAlignment": content.get("alignment", "center"),
        "headingLevel": content.get("level", 1),
        "textColorMode": content.get("textColorMode", "auto"),
        "enableStyling": False,
    }


# -------------------------------------------------
# cards successors
# -------------------------------------------------
FEATURE_ITEM_FIELDS = (
    "id",
    "icon",
    "title",
    "subtitle",
    "description",
    "showButton",
    "buttonText",
    "buttonUrl",
    "buttonVariant",
)
TESTIMONIAL_ITEM_FIELDS = ("id", "quote", "author", "role", "avatar")
PRODUCT_ITEM_FIELDS = ("id", "image", "title", "description", "links", "featuredLinkIndex")


def _card_items(items: List[Content], fields: Iterable[str]) -> List[Content]:
    fields = tuple(fields)
    return _with_unique_ids([_carry(item, fields) for item in items])


def _cards(template: str, content: Content, items: List[Content], **extra: Any) -> Content:
    return {
        "template": template,
        "sectionTitle": content.get("sectionTitle") or "",
        "sectionSubtitle": content.get("sectionSubtitle") or "",
        "items": items,
        "columns": 3,
        "gap": "medium",
        **extra,
        **_styling(content, STYLING_FIELDS + CARD_STYLING_FIELDS),
    }


def convert_features(content: Content) -> Content:
    return _cards("feature", content, _card_items(content["features"], FEATURE_ITEM_FIELDS))


def convert_testimonials(content: Content) -> Content:
    converted = _cards(
        "testimonial",
        content,
        _card_items(content["testimonials"], TESTIMONIAL_ITEM_FIELDS),
    )
    # Legacy testimonials had no section header
    converted["sectionTitle"] = ""
    converted["sectionSubtitle"] = ""
    return converted


def convert_product_grid(content: Content) -> Content:
    return _cards(
        "product",
        content,
        _card_items(content["items"], PRODUCT_ITEM_FIELDS),
        columns=content.get("columns", 3),
        gap=content.get("gap", "medium"),
        **_carry(content, ("iconStyle", "showItemTitles", "showItemDescriptions", "cardBackgroundOpacity")),
    )


# -------------------------------------------------
# media successors
# -------------------------------------------------
def convert_image(content: Content) -> Content:
    return {
        "mode": "single",
        "src": content["src"],
        "alt": content["alt"],
        **_carry(content, ("caption", "imageWidth", "textWidth", "layout", "description")),
        **_styling(content),
    }


def convert_gallery(content: Content) -> Content:
    border_radius = content.get("borderRadius", "medium")
    return {
        "mode": "gallery",
        "images": copy.deepcopy(content["images"]),
        "galleryAspectRatio": content.get("aspectRatio", "1:1"),
        "galleryLayout": content.get("layout", "grid"),
        "columns": content.get("columns", "auto"),
        "gap": content.get("gap", "medium"),
        "lightbox": content.get("lightbox", False),
        "autoRotate": content.get("autoRotate", False),
        "autoRotateInterval": content.get("autoRotateInterval", 5),
        "enableStyling": False,
        "textColorMode": "auto",
        "borderWidth": content.get("borderWidth", "medium"),
        # media has no pill radius; full is the nearest
        "borderRadius": "full" if border_radius == "pill" else border_radius,
        **_carry(content, ("showBorder", "borderColor")),
    }


def convert_embed(content: Content) -> Content:
    converted = {
        "mode": "embed",
        "embedCode": content["embedCode"],
        "embedSrc": content["src"],
        "embedAspectRatio": content.get("aspectRatio", "16:9"),
        "embedSourceType": content.get("sourceType", "embed"),
        "enableStyling": False,
        "textColorMode": "auto",
    }
    if "customHeight" in content:
        converted["customHeight"] = content["customHeight"]
    if "title" in content:
        converted["embedTitle"] = content["title"]
    converted.update(_carry(content, ("documentId", "documentSlug")))
    return converted


# -------------------------------------------------
# blog successors
# -------------------------------------------------
def convert_blog_featured(content: Content) -> Content:
    converted = {
        "mode": "featured",
        "postId": content["postId"],
        "showAuthor": content.get("showAuthor", True),
        "imageFit": content.get("imageFit", "cover"),
        "enableStyling": False,
        "textColorMode": "auto",
        **_carry(content, (
            "showFullContent",
            "contentLimit",
            "showReadMore",
            "showCategory",
            "overlayColor",
            "overlayOpacity",
        )),
    }
    if "layout" in content:
        converted["featuredLayout"] = content["layout"]
    return converted


def convert_blog_grid(content: Content) -> Content:
    return {
        "mode": "grid",
        "gridLayout": "grid",
        "sectionTitle": content.get("sectionTitle") or "",
        "sectionSubtitle": content.get("sectionSubtitle") or "",
        "postCount": content["postCount"],
        "showExcerpt": content["showExcerpt"],
        "showAuthor": content.get("showAuthor", True),
        **_carry(content, (
            "pageFilter",
            "imageBackgroundMode",
            "imageBackgroundColor",
            "cardBorderMode",
            "cardBorderColor",
        )),
        **_styling(content, STYLING_FIELDS + CARD_STYLING_FIELDS),
    }


CONVERTERS: Dict[str, Callable[[Content], Content]] = {
    "hero": convert_hero,
    "cta": convert_cta,
    "heading": convert_heading,
    "features": convert_features,
    "testimonials": convert_testimonials,
    "product_grid": convert_product_grid,
    "image": convert_image,
    "gallery": convert_gallery,
    "embed": convert_embed,
    "blog_featured": convert_blog_featured,
    "blog_grid": convert_blog_grid,
}


# -------------------------------------------------
# Public API
# -------------------------------------------------
def is_convertible(block_type: str) -> bool:
    return block_type in CONVERSION_TARGETS


def conversion_target(block_type: str) -> ConversionTarget:
    if not is_convertible(block_type):
        raise InvalidArgument(f"Block type {block_type!r} cannot be converted")
    return CONVERSION_TARGETS[block_type]


def convert(block_type: str, content: Content) -> ConversionResult:
    """
    Convert a legacy payload into its successor's payload.

    Raises InvalidArgument when `block_type` is not convertible or `content`
    is not a minimally valid payload for it.
    """
    target = conversion_target(block_type)
    validate_content(block_type, content)

    converted = CONVERTERS[block_type](content)
    validate_content(target.target_type, converted)

    logger.debug(
        "Converted %s content to %s (%s)", block_type, target.target_type, target.preset
    )
    return ConversionResult(target.target_type, target.preset, converted)
