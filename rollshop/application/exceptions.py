class NoRollsRecognizedError(ValueError):
    """Raised when a pasted chat log contains no recognizable roll lines."""
    pass


class InvalidSlotCountError(ValueError):
    """Raised when a roll is run with a non-positive slot count."""
    pass


class MissingAnnouncementFieldsError(ValueError):
    """Raised when an announcement is requested without staff or service."""
    pass


class RecordImportError(ValueError):
    """Raised when a backup payload is malformed or holds no records."""
    pass


class RecordStoreError(RuntimeError):
    """Raised when a record store backend fails (network errors, bad payloads)."""
    pass
