"""
Content Schema Registry.

Static mapping from the closed set of block-type tags to:
- a content-shape descriptor (what a stored payload must look like)
- a default-content generator
- an optional conversion target for deprecated types

Nothing here touches storage.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

from sitebuilder.domain.exceptions import InvalidArgument
from .defaults import SECTION_DEFAULTS

BLOCK_TYPES: Tuple[str, ...] = (
    "header",
    "heading",
    "hero",
    "hero_primitive",
    "richtext",
    "text",
    "markdown",
    "image",
    "gallery",
    "features",
    "cta",
    "testimonials",
    "contact",
    "footer",
    "blog_featured",
    "blog_grid",
    "blog",
    "embed",
    "social_links",
    "product_grid",
    "article",
    "cards",
    "media",
    "accordion",
)

# Unified primitives after consolidation; each may carry several presets
PRIMITIVES: Tuple[str, ...] = (
    "header",
    "footer",
    "contact",
    "social_links",
    "richtext",
    "hero_primitive",
    "cards",
    "media",
    "blog",
    "accordion",
)

HEADER_BLOCK_TYPE = "header"
FOOTER_BLOCK_TYPE = "footer"


# -------------------------------------------------
# Content shapes
# -------------------------------------------------
STR = (str,)
BOOL = (bool,)
NUM = (int, float)
LIST = (list,)
DICT = (dict,)
NULLABLE_STR = (str, type(None))
COLUMNS = (int, str)  # 2 | 3 | 4 | "auto"

_STYLING_FIELDS: Dict[str, tuple] = {
    "enableStyling": BOOL,
    "textColorMode": STR,
    "showBorder": BOOL,
    "borderWidth": STR,
    "borderRadius": STR,
    "borderColor": STR,
    "boxBackgroundColor": STR,
    "boxBackgroundOpacity": NUM,
    "useThemeBackground": BOOL,
    "backgroundImage": STR,
    "overlayColor": STR,
    "overlayOpacity": NUM,
    "textSize": STR,
}


def _matches(value: Any, types: tuple) -> bool:
    # bool is an int subclass; only accept it where BOOL was asked for
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


@dataclass(frozen=True)
class ContentShape:
    """
    Describes the JSON payload stored for one block type.

    Unknown keys are allowed: stored content is opaque beyond these fields.
    """
    required: Mapping[str, tuple] = field(default_factory=dict)
    optional: Mapping[str, tuple] = field(default_factory=dict)
    object_lists: Tuple[str, ...] = ()

    def problems(self, content: Any) -> List[str]:
        if not isinstance(content, dict):
            return ["content must be an object"]

        found: List[str] = []
        for name, types in self.required.items():
            if name not in content:
                found.append(f"missing field '{name}'")
            elif not _matches(content[name], types):
                found.append(f"field '{name}' has wrong type")

        for name, types in {**_STYLING_FIELDS, **self.optional}.items():
            if name in self.required:
                continue
            value = content.get(name)
            if value is not None and not _matches(value, types):
                found.append(f"field '{name}' has wrong type")

        for name in self.object_lists:
            value = content.get(name)
            if isinstance(value, list) and not all(isinstance(item, dict) for item in value):
                found.append(f"every entry of '{name}' must be an object")

        return found


_OVERRIDE_FLAGS = {
    flag: BOOL
    for flag in (
        "overrideLayout",
        "overrideSticky",
        "overrideShowLogoText",
        "overrideCta",
        "overrideLogoSize",
        "overrideStyling",
        "overrideSocialLinks",
    )
}

CONTENT_SHAPES: Dict[str, ContentShape] = {
    "header": ContentShape(
        required={"siteName": STR, "links": LIST},
        optional={
            "logoUrl": STR, "showCta": BOOL, "ctaText": STR, "ctaUrl": STR,
            "layout": STR, "sticky": BOOL, "showLogoText": BOOL, "logoSize": NUM,
            "showSocialLinks": BOOL, **_OVERRIDE_FLAGS,
        },
        object_lists=("links",),
    ),
    "heading": ContentShape(
        required={"title": STR},
        optional={"subtitle": STR, "level": NUM, "alignment": STR},
    ),
    "hero": ContentShape(
        required={"heading": STR, "subheading": STR},
        optional={
            "buttons": LIST, "showCta": BOOL, "ctaText": STR, "ctaUrl": STR,
            "titleMode": STR, "rotatingTitle": DICT, "bodyText": STR,
            "image": STR, "imageAlt": STR, "imageSize": NUM,
        },
        object_lists=("buttons",),
    ),
    "hero_primitive": ContentShape(
        required={"layout": STR, "heading": STR},
        optional={
            "subheading": STR, "textAlignment": STR, "buttons": LIST,
            "headingLevel": NUM, "titleMode": STR, "rotatingTitle": DICT,
            "heroBackgroundImage": STR, "imageSize": NUM,
        },
        object_lists=("buttons",),
    ),
    "richtext": ContentShape(
        required={"mode": STR},
        optional={"body": STR, "markdown": STR},
    ),
    "text": ContentShape(required={"body": STR}),
    "markdown": ContentShape(required={"markdown": STR}),
    "image": ContentShape(
        required={"src": STR, "alt": STR},
        optional={
            "caption": STR, "imageWidth": NUM, "textWidth": NUM,
            "layout": STR, "description": STR,
        },
    ),
    "gallery": ContentShape(
        required={"images": LIST},
        optional={
            "aspectRatio": STR, "layout": STR, "columns": COLUMNS, "gap": STR,
            "lightbox": BOOL, "autoRotate": BOOL, "autoRotateInterval": NUM,
        },
        object_lists=("images",),
    ),
    "features": ContentShape(
        required={"features": LIST},
        optional={"sectionTitle": STR, "sectionSubtitle": STR, "showCardBackground": BOOL},
        object_lists=("features",),
    ),
    "cta": ContentShape(
        required={
            "heading": STR, "description": STR, "buttonText": STR, "buttonUrl": STR,
        },
    ),
    "testimonials": ContentShape(
        required={"testimonials": LIST},
        optional={"showCardBackground": BOOL},
        object_lists=("testimonials",),
    ),
    "contact": ContentShape(
        required={"heading": STR, "description": STR},
        optional={"variant": STR, "showFormBackground": BOOL},
    ),
    "footer": ContentShape(
        required={"copyright": STR, "links": LIST},
        optional={
            "layout": STR, "showSocialLinks": BOOL,
            "overrideLayout": BOOL, "overrideStyling": BOOL, "overrideSocialLinks": BOOL,
        },
        object_lists=("links",),
    ),
    "blog_featured": ContentShape(
        required={"postId": NULLABLE_STR},
        optional={
            "layout": STR, "showFullContent": BOOL, "contentLimit": NUM,
            "showReadMore": BOOL, "showCategory": BOOL, "showAuthor": BOOL,
            "imageFit": STR,
        },
    ),
    "blog_grid": ContentShape(
        required={"postCount": NUM, "showExcerpt": BOOL},
        optional={
            "sectionTitle": STR, "sectionSubtitle": STR, "showAuthor": BOOL,
            "pageFilter": STR,
        },
    ),
    "blog": ContentShape(
        required={"mode": STR},
        optional={"postId": NULLABLE_STR, "postCount": NUM, "featuredLayout": STR, "gridLayout": STR},
    ),
    "embed": ContentShape(
        required={"embedCode": STR, "src": STR},
        optional={"aspectRatio": STR, "customHeight": NUM, "title": STR, "sourceType": STR},
    ),
    "social_links": ContentShape(
        optional={"title": STR, "subtitle": STR, "alignment": STR, "size": STR, "iconStyle": STR},
    ),
    "product_grid": ContentShape(
        required={"items": LIST},
        optional={
            "sectionTitle": STR, "sectionSubtitle": STR, "columns": COLUMNS,
            "gap": STR, "iconStyle": STR, "showItemTitles": BOOL,
            "showItemDescriptions": BOOL,
        },
        object_lists=("items",),
    ),
    "article": ContentShape(required={"body": STR}),
    "cards": ContentShape(
        required={"template": STR, "items": LIST},
        optional={"columns": COLUMNS, "gap": STR, "sectionTitle": STR, "sectionSubtitle": STR},
        object_lists=("items",),
    ),
    "media": ContentShape(
        required={"mode": STR},
        optional={"src": STR, "alt": STR, "images": LIST, "embedCode": STR, "embedSrc": STR},
        object_lists=("images",),
    ),
    "accordion": ContentShape(
        required={"mode": STR},
        optional={"faqItems": LIST, "modules": LIST, "customItems": LIST},
        object_lists=("faqItems",),
    ),
}


# -------------------------------------------------
# Display information
# -------------------------------------------------
class BlockTypeInfo(NamedTuple):
    type: str
    label: str
    description: str


BLOCK_TYPE_INFO: Dict[str, BlockTypeInfo] = {
    info.type: info
    for info in (
        BlockTypeInfo("header", "Header", "Site navigation with logo and links"),
        BlockTypeInfo("heading", "Heading", "Page title or section heading with optional subtitle"),
        BlockTypeInfo("hero", "Hero", "Large header section with heading, subheading, and CTA"),
        BlockTypeInfo("hero_primitive", "Hero (Flexible)", "Hero, call to action or title in one flexible block"),
        BlockTypeInfo("richtext", "Rich Text", "Visual, markdown or article content"),
        BlockTypeInfo("text", "Text", "Rich text content block"),
        BlockTypeInfo("markdown", "Markdown", "Write content in Markdown with live preview"),
        BlockTypeInfo("image", "Image", "Single image with caption"),
        BlockTypeInfo("gallery", "Gallery", "Grid of multiple images"),
        BlockTypeInfo("features", "Features", "Feature cards with icons"),
        BlockTypeInfo("cta", "Call to Action", "Conversion-focused section with button"),
        BlockTypeInfo("testimonials", "Testimonials", "Customer quotes and reviews"),
        BlockTypeInfo("contact", "Contact Form", "Contact form with configurable fields"),
        BlockTypeInfo("footer", "Footer", "Page footer with links and copyright"),
        BlockTypeInfo("blog_featured", "Featured Post", "Display a single blog post as a hero section"),
        BlockTypeInfo("blog_grid", "Post Grid", "Grid of recent blog posts"),
        BlockTypeInfo("blog", "Blog", "Featured post or post grid"),
        BlockTypeInfo("embed", "Embed", "Embed YouTube, Google Maps, and other content"),
        BlockTypeInfo("social_links", "Social Links", "Display social media links with icons"),
        BlockTypeInfo("product_grid", "Product Grid", "Display products or items with action links"),
        BlockTypeInfo("article", "Article", "Rich content with inline images and text wrapping"),
        BlockTypeInfo("cards", "Cards", "Feature, testimonial or product cards"),
        BlockTypeInfo("media", "Media", "Single image, gallery or embed"),
        BlockTypeInfo("accordion", "Accordion", "FAQ, curriculum or custom collapsible items"),
    )
}


# -------------------------------------------------
# Conversion targets for deprecated types
# -------------------------------------------------
class ConversionTarget(NamedTuple):
    target_type: str
    preset: str
    label: str


CONVERSION_TARGETS: Dict[str, ConversionTarget] = {
    "hero": ConversionTarget("hero_primitive", "full", "Hero (Flexible)"),
    "cta": ConversionTarget("hero_primitive", "cta", "Hero (Flexible)"),
    "heading": ConversionTarget("hero_primitive", "title-only", "Hero (Flexible)"),
    "features": ConversionTarget("cards", "feature", "Cards"),
    "testimonials": ConversionTarget("cards", "testimonial", "Cards"),
    "product_grid": ConversionTarget("cards", "product", "Cards"),
    "image": ConversionTarget("media", "single", "Media"),
    "gallery": ConversionTarget("media", "gallery", "Media"),
    "embed": ConversionTarget("media", "embed", "Media"),
    "blog_featured": ConversionTarget("blog", "featured", "Blog"),
    "blog_grid": ConversionTarget("blog", "grid", "Blog"),
}


# -------------------------------------------------
# Primitive / preset classification
# -------------------------------------------------
class PrimitiveInfo(NamedTuple):
    primitive: str
    preset: Optional[str]


_STATIC_PRIMITIVES: Dict[str, PrimitiveInfo] = {
    "text": PrimitiveInfo("richtext", "visual"),
    "markdown": PrimitiveInfo("richtext", "markdown"),
    "article": PrimitiveInfo("richtext", "article"),
    **{
        legacy: PrimitiveInfo(target.target_type, target.preset)
        for legacy, target in CONVERSION_TARGETS.items()
    },
    "header": PrimitiveInfo("header", None),
    "footer": PrimitiveInfo("footer", None),
    "contact": PrimitiveInfo("contact", None),
    "social_links": PrimitiveInfo("social_links", None),
}

# Unified primitives carry their preset inside the content
_PRESET_DISCRIMINATORS: Dict[str, Tuple[str, str]] = {
    "richtext": ("mode", "visual"),
    "hero_primitive": ("layout", "full"),
    "cards": ("template", "feature"),
    "media": ("mode", "single"),
    "blog": ("mode", "featured"),
    "accordion": ("mode", "faq"),
}


def compute_primitive_and_preset(block_type: str, content: Any) -> PrimitiveInfo:
    if block_type in _STATIC_PRIMITIVES:
        return _STATIC_PRIMITIVES[block_type]

    if block_type in _PRESET_DISCRIMINATORS:
        key, fallback = _PRESET_DISCRIMINATORS[block_type]
        preset = content.get(key) if isinstance(content, dict) else None
        return PrimitiveInfo(block_type, preset or fallback)

    return PrimitiveInfo(block_type, None)


# -------------------------------------------------
# Public API
# -------------------------------------------------
def is_block_type(block_type: Any) -> bool:
    return isinstance(block_type, str) and block_type in CONTENT_SHAPES


def assert_block_type(block_type: Any) -> None:
    if not is_block_type(block_type):
        raise InvalidArgument(f"Unknown block type: {block_type!r}")


def default_content(block_type: str) -> Dict[str, Any]:
    """Fresh default payload for a new section of `block_type`."""
    assert_block_type(block_type)
    return copy.deepcopy(SECTION_DEFAULTS[block_type])


def block_type_catalog() -> List[Dict[str, Any]]:
    """
    Display information for every block type, in registry order.

    Types that are not a unified primitive are flagged deprecated; those with a
    conversion target name it.
    """
    catalog = []
    for block_type in BLOCK_TYPES:
        info = BLOCK_TYPE_INFO[block_type]
        target = CONVERSION_TARGETS.get(block_type)
        catalog.append({
            "type": info.type,
            "label": info.label,
            "description": info.description,
            "deprecated": block_type not in PRIMITIVES,
            "converts_to": target.target_type if target else None,
        })
    return catalog


def content_problems(block_type: str, content: Any) -> List[str]:
    assert_block_type(block_type)
    return CONTENT_SHAPES[block_type].problems(content)


def validate_content(block_type: str, content: Any) -> None:
    problems = content_problems(block_type, content)
    if problems:
        raise InvalidArgument(
            f"Invalid {block_type} content: " + "; ".join(problems)
        )
