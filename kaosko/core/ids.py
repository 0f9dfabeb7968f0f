import uuid

GUID_BYTES = 16

def guid_from_bytes(raw: bytes) -> uuid.UUID:
    # mixed-endian GUID layout, no version/variant bits applied
    if len(raw) != GUID_BYTES:
        raise ValueError(f"expected {GUID_BYTES} bytes, got {len(raw)}")
    return uuid.UUID(bytes_le=bytes(raw))
