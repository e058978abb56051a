def parse_tags(raw: str | None) -> list[str]:
    """
    Split a comma separated tag list ("a,b") from a query string.

    Blank items are dropped and duplicates removed.
    """
    if not raw:
        return []
    tags = [tag.strip() for tag in raw.split(",")]
    return list(dict.fromkeys(tag for tag in tags if tag))
