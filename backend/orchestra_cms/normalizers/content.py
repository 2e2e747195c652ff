def normalize_record_meta(record):
    """Concurrency fields every editable document carries."""
    return {
        "id": record.id,
        "version": record.version or 0,
        "updated_at": record.updated_at.isoformat() if record.updated_at else None,
    }
