import pytest
from flask_jwt_extended import create_access_token

from sitebuilder import create_app
from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.site import Site
from sitebuilder.models.user import User
from sitebuilder.application.sections.add_section import add_section

SITE_HEADER = {
    "siteName": "Acme",
    "logoUrl": "/logo.png",
    "links": [{"label": "Home", "url": "/sites/acme"}],
    "showCta": True,
    "ctaText": "Buy",
    "ctaUrl": "/buy",
    "layout": "center",
    "sticky": False,
    "showLogoText": True,
    "backgroundColor": "#ffffff",
}

SITE_FOOTER = {
    "copyright": "Acme Inc.",
    "links": [{"label": "Privacy", "url": "/privacy"}],
    "layout": "columns",
}


def _user(email):
    user = User()
    user.email = email
    user.is_active = True
    db.session.add(user)
    db.session.flush()
    return user


def _site(owner, name, slug, **columns):
    site = Site()
    site.user_id = owner.id
    site.name = name
    site.slug = slug
    for key, value in columns.items():
        setattr(site, key, value)
    db.session.add(site)
    db.session.flush()
    return site


def _page(owner, site, title, slug, *, is_home=False, display_order=0, status="published"):
    page = Page()
    page.user_id = owner.id
    page.site_id = site.id
    page.title = title
    page.slug = slug
    page.is_home = is_home
    page.display_order = display_order
    page.status = status
    db.session.add(page)
    db.session.flush()
    return page


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seed(app):
    """Two owners; the first has a site with two pages, the second one page."""
    owner = _user("owner@example.com")
    stranger = _user("stranger@example.com")

    site = _site(owner, "Acme", "acme", header_content=SITE_HEADER, footer_content=SITE_FOOTER)
    home = _page(owner, site, "Home", "home", is_home=True, display_order=0)
    about = _page(owner, site, "About", "about", display_order=1)

    other_site = _site(stranger, "Other", "other")
    other_page = _page(stranger, other_site, "Other", "other")

    db.session.commit()

    return {
        "owner_id": owner.id,
        "stranger_id": stranger.id,
        "site_id": site.id,
        "page_id": home.id,
        "about_page_id": about.id,
        "other_page_id": other_page.id,
    }


@pytest.fixture
def make_sections(seed):
    """Append `count` text sections to the home page; returns their ids in order."""
    def _make(count, page_id=None, owner_id=None):
        return [
            add_section(
                owner_id=owner_id or seed["owner_id"],
                page_id=page_id or seed["page_id"],
                block_type="text",
            )
            for _ in range(count)
        ]
    return _make


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(seed):
    token = create_access_token(identity=seed["owner_id"])
    return {"Authorization": f"Bearer {token}"}
