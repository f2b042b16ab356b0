"""Record identifiers shared by every collection."""

import secrets

ENTITY_ID_PATTERN = r"^[0-9a-fA-F]{24}$"


def generate_entity_id() -> str:
    """Generate a new 24-character lowercase hex identifier."""
    return secrets.token_hex(12)
