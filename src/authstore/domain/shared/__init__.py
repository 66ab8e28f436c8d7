from authstore.domain.shared.time import (
    ensure_tz_aware,
    from_storage_timestamp,
    to_storage_timestamp,
)

__all__ = [
    "ensure_tz_aware",
    "from_storage_timestamp",
    "to_storage_timestamp",
]
