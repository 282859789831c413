import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quote_engine.api.v1.chefs import router as chefs_router
from quote_engine.api.v1.quotes import router as quotes_router
from quote_engine.core.config import settings
from quote_engine.wiring.dependencies import close_adapters

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service_type", "add_on", "chef_id", "address", "attempt", "status", "reason", "error"):
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


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_adapters()


app = FastAPI(title="Chef Quote & Ranking Engine", version="1.0.0", lifespan=lifespan)

app.include_router(quotes_router, prefix="/api/v1", tags=["quotes"])
app.include_router(chefs_router, prefix="/api/v1", tags=["chefs"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
