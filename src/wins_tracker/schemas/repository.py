"""Repository identifier parsing."""


def parse_repo_string(full_name: str) -> tuple[str, str]:
    """Split an ``owner/name`` identifier.

    Args:
        full_name: Repository identifier such as ``octo-org/api``

    Returns:
        Tuple of (owner, name)

    Raises:
        ValueError: Unless the identifier is exactly two non-empty parts
    """
    parts = full_name.strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Invalid repository format: {full_name!r} (expected owner/name)")
    return parts[0], parts[1]
