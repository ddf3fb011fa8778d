import logging

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import OperationalError

from sitebuilder.extensions import db
from sitebuilder.application.sections.update_section_status import update_section_status


def _create(client, headers, page_id, **body):
    return client.post(f"/api/v1/pages/{page_id}/sections", json=body, headers=headers)


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_health_reports_database_failure(client, monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("gone away"))

    monkeypatch.setattr(db.session, "execute", broken)

    with caplog.at_level(logging.WARNING):
        response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json()["database"] == "unavailable"
    assert "Health check database query failed" in caplog.text


def test_requires_token(client, seed):
    response = client.get(f"/api/v1/pages/{seed['page_id']}/sections")
    assert response.status_code == 401


def test_create_list_and_move(client, seed, auth_headers):
    page_id = seed["page_id"]
    first = _create(client, auth_headers, page_id, block_type="text")
    second = _create(client, auth_headers, page_id, block_type="cta", position=0)

    assert first.status_code == 201
    assert second.status_code == 201
    second_id = second.get_json()["section"]["id"]

    response = client.post(f"/api/v1/sections/{second_id}/move", json={"position": 1}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {"success": True}

    listed = client.get(f"/api/v1/pages/{page_id}/sections", headers=auth_headers).get_json()
    assert [s["block_type"] for s in listed["sections"]] == ["text", "cta"]
    assert [s["position"] for s in listed["sections"]] == [0, 1]


def test_error_body_shape(client, seed, auth_headers):
    response = _create(client, auth_headers, seed["page_id"], block_type="carousel")
    assert response.status_code == 400
    body = response.get_json()
    assert body["success"] is False
    assert body["error"] == "InvalidArgument"
    assert "carousel" in body["message"]


def test_foreign_page_is_404(client, seed, auth_headers):
    response = _create(client, auth_headers, seed["other_page_id"], block_type="text")
    assert response.status_code == 404
    assert response.get_json()["error"] == "NotFound"


def test_stranger_cannot_touch_sections(client, seed, auth_headers):
    section_id = _create(client, auth_headers, seed["page_id"], block_type="text").get_json()["section"]["id"]

    stranger = {"Authorization": f"Bearer {create_access_token(identity=seed['stranger_id'])}"}
    response = client.delete(f"/api/v1/sections/{section_id}", headers=stranger)
    assert response.status_code == 404


def test_anchor_conflict_is_409(client, seed, auth_headers):
    ids = [
        _create(client, auth_headers, seed["page_id"], block_type="text").get_json()["section"]["id"]
        for _ in range(2)
    ]
    ok = client.put(f"/api/v1/sections/{ids[0]}/anchor", json={"anchor_id": "faq"}, headers=auth_headers)
    assert ok.get_json() == {"success": True, "anchor_id": "faq"}

    conflict = client.put(f"/api/v1/sections/{ids[1]}/anchor", json={"anchor_id": "faq"}, headers=auth_headers)
    assert conflict.status_code == 409
    assert conflict.get_json()["error"] == "Conflict"

    bad = client.put(f"/api/v1/sections/{ids[1]}/anchor", json={"anchor_id": "9lives"}, headers=auth_headers)
    assert bad.status_code == 400
    assert bad.get_json()["error"] == "InvalidFormat"


def test_duplicate_and_convert(client, seed, auth_headers):
    section_id = _create(client, auth_headers, seed["page_id"], block_type="features").get_json()["section"]["id"]

    clone = client.post(f"/api/v1/sections/{section_id}/duplicate", headers=auth_headers)
    assert clone.status_code == 201
    assert clone.get_json()["section"]["position"] == 1

    converted = client.post(f"/api/v1/sections/{section_id}/convert", headers=auth_headers).get_json()
    assert converted["block_type"] == "cards"
    assert converted["preset"] == "feature"


def test_block_type_catalog(client):
    body = client.get("/api/v1/block-types").get_json()
    by_type = {entry["type"]: entry for entry in body["block_types"]}

    assert by_type["gallery"]["label"] == "Gallery"
    assert by_type["gallery"]["converts_to"] == "media"
    assert by_type["media"]["deprecated"] is False


def test_conversion_target_lookup(client):
    body = client.get("/api/v1/block-types/gallery/conversion").get_json()
    assert body == {"success": True, "target_type": "media", "preset": "gallery", "label": "Media"}

    assert client.get("/api/v1/block-types/media/conversion").status_code == 400


def test_public_page_merges_header(client, seed, auth_headers):
    page_id = seed["page_id"]
    header_id = _create(
        client,
        auth_headers,
        page_id,
        block_type="header",
        content={"siteName": "Stale", "links": [], "layout": "right", "overrideLayout": True},
    ).get_json()["section"]["id"]
    draft_id = _create(client, auth_headers, page_id, block_type="text").get_json()["section"]["id"]
    update_section_status(owner_id=seed["owner_id"], section_id=draft_id, status="draft")

    response = client.get(f"/api/v1/public/pages/{page_id}")
    assert response.status_code == 200
    body = response.get_json()

    assert body["header"]["siteName"] == "Acme"
    assert body["header"]["layout"] == "right"
    assert body["footer"]["copyright"] == "Acme Inc."
    assert [s["id"] for s in body["sections"]] == [header_id]


def test_openapi_is_served(client):
    response = client.get("/openapi/sections.yaml")
    assert response.status_code == 200
    assert b"openapi: 3.0.3" in response.data
    response.close()
