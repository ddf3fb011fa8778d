import copy

import pytest

from sitebuilder.blocks.migration import (
    convert,
    conversion_target,
    is_convertible,
)
from sitebuilder.blocks.registry import CONVERSION_TARGETS, content_problems, default_content
from sitebuilder.domain.exceptions import InvalidArgument


def _ids(items):
    return [item["id"] for item in items]


@pytest.mark.parametrize("block_type", sorted(CONVERSION_TARGETS))
def test_every_legacy_default_converts_to_a_valid_successor(block_type):
    content = default_content(block_type)
    before = copy.deepcopy(content)

    result = convert(block_type, content)

    target = CONVERSION_TARGETS[block_type]
    assert result.block_type == target.target_type
    assert result.preset == target.preset
    assert content_problems(result.block_type, result.content) == []
    assert content == before


def test_non_convertible_types_are_rejected():
    assert not is_convertible("text")
    with pytest.raises(InvalidArgument):
        conversion_target("text")
    with pytest.raises(InvalidArgument):
        convert("hero_primitive", default_content("hero_primitive"))


def test_invalid_legacy_payload_is_rejected():
    with pytest.raises(InvalidArgument):
        convert("cta", {"heading": "Only a heading"})


def test_cta_fields_are_preserved():
    result = convert("cta", {
        "heading": "Ready?",
        "description": "Join today",
        "buttonText": "Sign up",
        "buttonUrl": "/signup",
        "borderRadius": "large",
    })

    content = result.content
    assert content["layout"] == "cta"
    assert content["heading"] == "Ready?"
    assert content["subheading"] == "Join today"
    assert content["borderRadius"] == "large"
    assert content["textAlignment"] == "center"
    assert content["enableStyling"] is False
    assert content["textColorMode"] == "auto"

    (button,) = content["buttons"]
    assert button["text"] == "Sign up"
    assert button["url"] == "/signup"
    assert button["variant"] == "primary"
    assert button["id"].startswith("item-")


def test_heading_maps_title_and_level():
    result = convert("heading", {"title": "About", "level": 2, "alignment": "left"})
    assert result.content["heading"] == "About"
    assert result.content["subheading"] == ""
    assert result.content["headingLevel"] == 2
    assert result.content["textAlignment"] == "left"


def test_hero_single_cta_becomes_a_button():
    result = convert("hero", {
        "heading": "Hi",
        "subheading": "There",
        "showCta": True,
        "ctaText": "Start",
        "ctaUrl": "/start",
    })
    (button,) = result.content["buttons"]
    assert (button["text"], button["url"]) == ("Start", "/start")


def test_hero_buttons_keep_existing_ids():
    result = convert("hero", {
        "heading": "Hi",
        "subheading": "There",
        "buttons": [{"id": "keep-me", "text": "A", "url": "#"}, {"text": "B", "url": "#"}],
    })
    ids = _ids(result.content["buttons"])
    assert ids[0] == "keep-me"
    assert ids[1].startswith("item-")


def test_card_items_get_unique_ids():
    features = [
        {"id": "dup", "title": "One"},
        {"id": "dup", "title": "Two"},
        {"title": "Three"},
    ]
    result = convert("features", {"features": features})

    ids = _ids(result.content["items"])
    assert ids[0] == "dup"
    assert len(set(ids)) == 3
    assert "id" not in features[2]


def test_output_shares_no_nested_objects_with_input():
    content = {
        "testimonials": [{"quote": "Great", "author": "Sam", "role": "CEO"}],
    }
    result = convert("testimonials", content)

    result.content["items"][0]["quote"] = "Changed"
    assert content["testimonials"][0]["quote"] == "Great"
    assert result.content["sectionTitle"] == ""
    assert result.content["template"] == "testimonial"


def test_gallery_pill_radius_becomes_full():
    result = convert("gallery", {
        "images": [{"src": "a.png", "alt": "a"}],
        "borderRadius": "pill",
        "borderWidth": "thick",
        "aspectRatio": "4:3",
    })
    content = result.content
    assert content["borderRadius"] == "full"
    assert content["borderWidth"] == "thick"
    assert content["galleryAspectRatio"] == "4:3"
    assert content["images"] == [{"src": "a.png", "alt": "a"}]


def test_embed_renames_source_fields():
    result = convert("embed", {
        "embedCode": "<iframe></iframe>",
        "src": "https://example.com/v",
        "title": "Video",
    })
    assert result.content["embedSrc"] == "https://example.com/v"
    assert result.content["embedTitle"] == "Video"
    assert result.content["embedAspectRatio"] == "16:9"


def test_blog_featured_layout_is_renamed():
    result = convert("blog_featured", {"postId": None, "layout": "split"})
    assert result.content["featuredLayout"] == "split"
    assert result.content["mode"] == "featured"


def test_hero_cta_without_url_links_to_placeholder():
    result = convert("hero", {
        "heading": "Hi",
        "subheading": "There",
        "ctaText": "Start",
        "ctaUrl": None,
    })
    (button,) = result.content["buttons"]
    assert button["url"] == "#"
