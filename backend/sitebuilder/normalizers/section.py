def normalize_section(section, admin=False):
    data = {
        "id": section.id,
        "page_id": section.page_id,
        "block_type": section.block_type,
        "primitive": section.primitive,
        "preset": section.preset,
        "position": section.position,
        "status": section.status,
        "anchor_id": section.anchor_id,
        "content": section.content or {},
    }

    if admin:
        data["owner_id"] = section.owner_id
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    return data
