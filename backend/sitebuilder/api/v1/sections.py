from flask import g, request, jsonify
from sitebuilder.application.sections.add_section import add_section
from sitebuilder.application.sections.convert_section import convert_section
from sitebuilder.application.sections.delete_section import delete_section
from sitebuilder.application.sections.duplicate_section import duplicate_section
from sitebuilder.application.sections.move_section import move_section
from sitebuilder.application.sections.queries import (
    get_published_page,
    get_published_sections_by_page,
    get_section_by_id,
    get_sections_by_page,
)
from sitebuilder.application.sections.reorder_sections import reorder_sections
from sitebuilder.application.sections.update_section import update_section
from sitebuilder.application.sections.update_section_anchor_id import update_section_anchor_id
from sitebuilder.application.sections.update_section_status import update_section_status
from sitebuilder.blocks.header_footer import resolve_header_footer
from sitebuilder.blocks.migration import conversion_target
from sitebuilder.blocks.registry import block_type_catalog
from sitebuilder.domain.exceptions import InvalidArgument, NotFound
from sitebuilder.normalizers.section import normalize_section
from sitebuilder.utils.decorators import owner_required
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data


# ------------------------
# Sections (owner)
# ------------------------
@v1_bp.route("/pages/<page_id>/sections", methods=["GET"])
@owner_required
def list_sections(page_id):
    sections = get_sections_by_page(owner_id=g.current_user_id, page_id=page_id)
    return jsonify({
        "success": True,
        "sections": [normalize_section(s, admin=True) for s in sections],
    })


@v1_bp.route("/pages/<page_id>/sections", methods=["POST"])
@owner_required
def create_section(page_id):
    data = _json_body()

    block_type = data.get("block_type")
    if not block_type:
        raise InvalidArgument("block_type is required")

    section_id = add_section(
        owner_id=g.current_user_id,
        page_id=page_id,
        block_type=block_type,
        position=data.get("position"),
        template_content=data.get("content"),
    )
    section = get_section_by_id(owner_id=g.current_user_id, section_id=section_id)

    return jsonify({"success": True, "section": normalize_section(section, admin=True)}), 201


@v1_bp.route("/sections/<section_id>", methods=["GET"])
@owner_required
def get_section(section_id):
    section = get_section_by_id(owner_id=g.current_user_id, section_id=section_id)
    return jsonify({"success": True, "section": normalize_section(section, admin=True)})


@v1_bp.route("/sections/<section_id>", methods=["PUT"])
@owner_required
def save_section(section_id):
    data = _json_body()
    if "content" not in data:
        raise InvalidArgument("content is required")

    update_section(owner_id=g.current_user_id, section_id=section_id, content=data["content"])
    return jsonify({"success": True})


@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
@owner_required
def remove_section(section_id):
    delete_section(owner_id=g.current_user_id, section_id=section_id)
    return jsonify({"success": True})


@v1_bp.route("/sections/<section_id>/duplicate", methods=["POST"])
@owner_required
def copy_section(section_id):
    new_id = duplicate_section(owner_id=g.current_user_id, section_id=section_id)
    section = get_section_by_id(owner_id=g.current_user_id, section_id=new_id)
    return jsonify({"success": True, "section": normalize_section(section, admin=True)}), 201


@v1_bp.route("/pages/<page_id>/sections/reorder", methods=["POST"])
@owner_required
def reorder_page_sections(page_id):
    data = _json_body()
    reorder_sections(
        owner_id=g.current_user_id,
        page_id=page_id,
        section_ids=data.get("section_ids"),
    )
    return jsonify({"success": True})


@v1_bp.route("/sections/<section_id>/move", methods=["POST"])
@owner_required
def move_page_section(section_id):
    data = _json_body()
    if "position" not in data:
        raise InvalidArgument("position is required")

    move_section(owner_id=g.current_user_id, section_id=section_id, new_position=data["position"])
    return jsonify({"success": True})


@v1_bp.route("/sections/<section_id>/status", methods=["PUT"])
@owner_required
def set_section_status(section_id):
    data = _json_body()
    update_section_status(
        owner_id=g.current_user_id,
        section_id=section_id,
        status=data.get("status"),
    )
    return jsonify({"success": True})


@v1_bp.route("/sections/<section_id>/anchor", methods=["PUT"])
@owner_required
def set_section_anchor(section_id):
    data = _json_body()
    anchor_id = update_section_anchor_id(
        owner_id=g.current_user_id,
        section_id=section_id,
        anchor_id=data.get("anchor_id"),
    )
    return jsonify({"success": True, "anchor_id": anchor_id})


@v1_bp.route("/sections/<section_id>/convert", methods=["POST"])
@owner_required
def convert_legacy_section(section_id):
    result = convert_section(owner_id=g.current_user_id, section_id=section_id)
    return jsonify({
        "success": True,
        "block_type": result.block_type,
        "preset": result.preset,
        "content": result.content,
    })


@v1_bp.route("/block-types", methods=["GET"])
def list_block_types():
    return jsonify({"success": True, "block_types": block_type_catalog()})


@v1_bp.route("/block-types/<block_type>/conversion", methods=["GET"])
def get_conversion_target(block_type):
    target = conversion_target(block_type)
    return jsonify({
        "success": True,
        "target_type": target.target_type,
        "preset": target.preset,
        "label": target.label,
    })


# ------------------------
# Public read
# ------------------------
@v1_bp.route("/public/pages/<page_id>", methods=["GET"])
def get_public_page(page_id):
    page = get_published_page(page_id)
    if page is None:
        raise NotFound("Page not found")

    sections = get_published_sections_by_page(page.id)
    chrome = resolve_header_footer(
        sections,
        page.site.header_content,
        page.site.footer_content,
    )

    return jsonify({
        "success": True,
        "page": {"id": page.id, "title": page.title, "slug": page.slug},
        "header": chrome.header,
        "footer": chrome.footer,
        "sections": [normalize_section(s) for s in sections],
    })
