import logging

from fastapi import FastAPI

from rental.api.v1.auth import router as auth_router
from rental.api.v1.cars import router as cars_router
from rental.api.v1.sessions import router as sessions_router
from rental.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "car_id", "booking_id", "reference_code", "state", "reason", "error"):
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

app = FastAPI(title="Tubo Car Rental", version="1.0.0")

app.include_router(cars_router, prefix="/api/v1", tags=["cars"])
app.include_router(sessions_router, prefix="/api/v1", tags=["booking"])
app.include_router(auth_router, prefix="/api/v1", tags=["auth"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
