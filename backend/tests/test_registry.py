import pytest

from sitebuilder.blocks.registry import (
    BLOCK_TYPE_INFO,
    BLOCK_TYPES,
    CONTENT_SHAPES,
    CONVERSION_TARGETS,
    PRIMITIVES,
    block_type_catalog,
    compute_primitive_and_preset,
    content_problems,
    default_content,
    is_block_type,
    validate_content,
)
from sitebuilder.blocks.defaults import SECTION_DEFAULTS
from sitebuilder.domain.exceptions import InvalidArgument


def test_every_block_type_is_described():
    assert set(BLOCK_TYPES) == set(CONTENT_SHAPES) == set(SECTION_DEFAULTS) == set(BLOCK_TYPE_INFO)


@pytest.mark.parametrize("block_type", BLOCK_TYPES)
def test_defaults_satisfy_their_shape(block_type):
    assert content_problems(block_type, default_content(block_type)) == []


def test_default_content_is_a_fresh_copy():
    first = default_content("features")
    first["features"].append({"title": "extra"})
    assert default_content("features") == SECTION_DEFAULTS["features"]
    assert len(default_content("features")["features"]) == 3


def test_unknown_block_type_is_rejected():
    assert not is_block_type("carousel")
    assert not is_block_type(None)
    with pytest.raises(InvalidArgument):
        default_content("carousel")


def test_validate_content_lists_every_problem():
    with pytest.raises(InvalidArgument) as excinfo:
        validate_content("cta", {"heading": 3})

    message = excinfo.value.message
    assert "field 'heading' has wrong type" in message
    assert "missing field 'description'" in message
    assert "missing field 'buttonUrl'" in message


def test_bool_is_not_accepted_as_number():
    problems = content_problems("blog_grid", {"postCount": True, "showExcerpt": True})
    assert problems == ["field 'postCount' has wrong type"]


def test_styling_fields_are_type_checked():
    content = default_content("text")
    content["overlayOpacity"] = "half"
    assert content_problems("text", content) == ["field 'overlayOpacity' has wrong type"]


def test_non_object_list_entries_are_reported():
    problems = content_problems("gallery", {"images": ["a.png"]})
    assert problems == ["every entry of 'images' must be an object"]


def test_conversion_targets_point_at_primitives():
    for legacy, target in CONVERSION_TARGETS.items():
        assert legacy in BLOCK_TYPES
        assert target.target_type in PRIMITIVES
    assert len(CONVERSION_TARGETS) == 11


@pytest.mark.parametrize(
    "block_type, content, expected",
    [
        ("text", {}, ("richtext", "visual")),
        ("cta", {}, ("hero_primitive", "cta")),
        ("header", {}, ("header", None)),
        ("media", {"mode": "gallery"}, ("media", "gallery")),
        ("media", {}, ("media", "single")),
        ("cards", {"template": "product"}, ("cards", "product")),
        ("hero_primitive", {"layout": "split"}, ("hero_primitive", "split")),
    ],
)
def test_primitive_and_preset(block_type, content, expected):
    assert tuple(compute_primitive_and_preset(block_type, content)) == expected


def test_catalog_flags_deprecated_types():
    catalog = {entry["type"]: entry for entry in block_type_catalog()}

    assert list(catalog) == list(BLOCK_TYPES)
    assert catalog["hero"]["deprecated"] is True
    assert catalog["hero"]["converts_to"] == "hero_primitive"
    assert catalog["text"]["deprecated"] is True
    assert catalog["text"]["converts_to"] is None
    assert catalog["cards"]["deprecated"] is False
    assert catalog["cards"]["label"] == "Cards"
