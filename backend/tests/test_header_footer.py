import copy
from types import SimpleNamespace

from sitebuilder.blocks.header_footer import (
    merge_footer_content,
    merge_header_content,
    resolve_header_footer,
)

SITE_HEADER = {
    "siteName": "Acme",
    "logoUrl": "/logo.png",
    "links": [{"label": "Home", "url": "/"}],
    "showCta": True,
    "ctaText": "Buy",
    "ctaUrl": "/buy",
    "layout": "center",
    "sticky": False,
    "backgroundColor": "#fff",
}

PAGE_HEADER = {
    "siteName": "Stale name",
    "logoUrl": "/stale.png",
    "links": [],
    "showCta": False,
    "ctaText": "Page CTA",
    "ctaUrl": "/page",
    "layout": "right",
    "sticky": True,
    "backgroundColor": "#000",
}


def _section(block_type, position, content):
    return SimpleNamespace(block_type=block_type, position=position, content=content)


def test_site_content_always_wins():
    merged = merge_header_content(SITE_HEADER, {**PAGE_HEADER, "overrideCta": True})
    assert merged["siteName"] == "Acme"
    assert merged["logoUrl"] == "/logo.png"
    assert merged["links"] == [{"label": "Home", "url": "/"}]


def test_style_groups_follow_their_flags():
    merged = merge_header_content(SITE_HEADER, PAGE_HEADER)
    assert (merged["showCta"], merged["ctaText"]) == (True, "Buy")
    assert merged["layout"] == "center"
    assert merged["sticky"] is False
    assert merged["backgroundColor"] == "#fff"

    merged = merge_header_content(SITE_HEADER, {
        **PAGE_HEADER,
        "overrideCta": True,
        "overrideLayout": True,
        "overrideSticky": True,
        "overrideStyling": True,
    })
    assert (merged["showCta"], merged["ctaText"], merged["ctaUrl"]) == (False, "Page CTA", "/page")
    assert merged["layout"] == "right"
    assert merged["sticky"] is True
    assert merged["backgroundColor"] == "#000"


def test_header_defaults_when_site_values_missing():
    merged = merge_header_content({"siteName": "Acme", "links": []}, {"layout": "right"})
    assert merged["layout"] == "left"
    assert merged["sticky"] is True
    assert merged["showLogoText"] is True


def test_one_sided_merge_returns_a_copy():
    merged = merge_header_content(SITE_HEADER, None)
    assert merged == SITE_HEADER
    merged["links"].append({"label": "x", "url": "/x"})
    assert len(SITE_HEADER["links"]) == 1

    assert merge_header_content(None, PAGE_HEADER) == PAGE_HEADER
    assert merge_header_content(None, None) is None


def test_footer_merge():
    site = {"copyright": "Acme", "links": [{"label": "Privacy", "url": "/p"}], "layout": "columns"}
    page = {"copyright": "Old", "links": [], "layout": "minimal", "overrideLayout": True}

    merged = merge_footer_content(site, page)
    assert merged["copyright"] == "Acme"
    assert merged["links"] == site["links"]
    assert merged["layout"] == "minimal"

    merged = merge_footer_content({"copyright": "Acme", "links": []}, {"layout": "minimal"})
    assert merged["layout"] == "simple"


def test_first_header_by_position_is_used():
    later = _section("header", 3, {**PAGE_HEADER, "overrideLayout": True, "layout": "later"})
    first = _section("header", 1, {**PAGE_HEADER, "overrideLayout": True, "layout": "first"})
    footer = _section("footer", 2, {"copyright": "x", "links": []})

    chrome = resolve_header_footer([later, footer, first], SITE_HEADER, None)
    assert chrome.header["layout"] == "first"
    assert chrome.footer == {"copyright": "x", "links": []}


def test_inputs_are_not_mutated():
    site = copy.deepcopy(SITE_HEADER)
    page = copy.deepcopy(PAGE_HEADER)
    resolve_header_footer([_section("header", 0, page)], site, None)
    assert site == SITE_HEADER
    assert page == PAGE_HEADER
