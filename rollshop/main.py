import logging

from fastapi import FastAPI

from rollshop.api.v1.records import router as records_router
from rollshop.api.v1.rolls import router as rolls_router
from rollshop.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("record_id", "staff_id", "service", "record_count", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Roll-Point Raffle Manager", version="1.0.0")

app.include_router(rolls_router, prefix="/api/v1", tags=["rolls"])
app.include_router(records_router, prefix="/api/v1", tags=["records"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
