from ..exceptions import InvalidArgument

SECTION_STATUSES = ("draft", "published")
DEFAULT_SECTION_STATUS = "published"

def assert_section_status(status: str) -> None:
    """
    Guards section status values.
    Sections flip freely between draft and published.
    """
    if status not in SECTION_STATUSES:
        raise InvalidArgument(
            f"Invalid section status: {status!r} (expected one of {', '.join(SECTION_STATUSES)})"
        )
