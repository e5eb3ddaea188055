from typing import Optional


def parse_id(raw: str) -> Optional[int]:
    """Positive integer id from a path segment, None if it is not one."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None
