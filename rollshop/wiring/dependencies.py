import logging
from zoneinfo import ZoneInfo

from rollshop.application.ports.record_store import RecordStorePort
from rollshop.application.use_cases.announcement import GenerateAnnouncementUseCase
from rollshop.application.use_cases.backup import ExportRecordsUseCase, ImportRecordsUseCase
from rollshop.application.use_cases.run_roll import RunRollUseCase
from rollshop.core.config import settings
from rollshop.infrastructure.store.json_store import JsonRecordStore
from rollshop.infrastructure.store.memory_store import MemoryRecordStore
from rollshop.infrastructure.store.mirrored_store import MirroredRecordStore
from rollshop.infrastructure.store.remote_store import RemoteRecordStore


_record_store: RecordStorePort | None = None


def _build_record_store() -> RecordStorePort:
    logger = logging.getLogger(__name__)
    provider = settings.STORE_PROVIDER.lower()
    logger.info("STORE_PROVIDER=%s", provider)

    if provider == "memory":
        return MemoryRecordStore()
    if provider == "remote":
        if settings.REMOTE_DATABASE_URL:
            return MirroredRecordStore(
                primary=RemoteRecordStore(),
                backup=JsonRecordStore(settings.RECORDS_FILE),
            )
        logger.warning("REMOTE_DATABASE_URL missing, using local JSON store")
    return JsonRecordStore(settings.RECORDS_FILE)


def get_record_store() -> RecordStorePort:
    global _record_store
    if _record_store is None:
        _record_store = _build_record_store()
    return _record_store


def get_business_timezone() -> ZoneInfo:
    try:
        return ZoneInfo(settings.BUSINESS_TIMEZONE)
    except Exception:
        logging.getLogger(__name__).warning(
            "Unknown BUSINESS_TIMEZONE, using UTC", extra={"reason": settings.BUSINESS_TIMEZONE}
        )
        return ZoneInfo("UTC")


def get_run_roll_use_case() -> RunRollUseCase:
    return RunRollUseCase(store=get_record_store(), default_language=settings.DEFAULT_LANGUAGE)


def get_announcement_use_case() -> GenerateAnnouncementUseCase:
    return GenerateAnnouncementUseCase(default_language=settings.DEFAULT_LANGUAGE)


def get_export_records_use_case() -> ExportRecordsUseCase:
    return ExportRecordsUseCase(store=get_record_store())


def get_import_records_use_case() -> ImportRecordsUseCase:
    return ImportRecordsUseCase(store=get_record_store())
