"""Weather dashboard: FastAPI backend serving forecasts, outfits, alerts and chat.

Usage:
    uvicorn skywatch.dashboard:create_app --factory
    python -m skywatch.dashboard
"""

import threading
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from skywatch.alerts.dispatcher import NotificationPlatform, UnsupportedPlatform
from skywatch.assistant import LoadResult, LoadStatus, build_assistant
from skywatch.chat.responder import ChatResponder
from skywatch.config.loader import load_config
from skywatch.config.schema import AppConfig
from skywatch.ingest.open_meteo_client import OpenMeteoClient
from skywatch.models.alert import Toast
from skywatch.models.outfit import NoLocationSelected
from skywatch.storage.database import open_database

DB_PATH = Path("data") / "skywatch.db"
CONFIG_PATH = Path("ops") / "configs" / "default.yaml"


class ToastQueue:
    """Collects toasts until the frontend polls for them."""

    def __init__(self) -> None:
        self._pending: list[Toast] = []

    def show(self, toast: Toast) -> None:
        self._pending.append(toast)

    def drain(self) -> list[Toast]:
        pending, self._pending = self._pending, []
        return pending


class ChatRequest(BaseModel):
    message: str


def _toast_json(t: Toast) -> dict:
    return {
        "title": t.title,
        "body": t.body,
        "actions": [{"label": a.label, "primary": a.primary} for a in t.actions],
        "ttl_seconds": t.ttl_seconds,
    }


def _load_json(result: LoadResult) -> dict:
    forecast = result.forecast
    return {
        "location": asdict(result.location) if result.location else None,
        "snapshot": asdict(result.snapshot) if result.snapshot else None,
        "current": asdict(forecast.current) if forecast else None,
        "daily": asdict(forecast.daily) if forecast else None,
        "alerts": [
            {"type": d.alert_type.value, "title": d.title, "body": d.body, "outcome": o.value}
            for d, o in result.alerts
        ],
    }


def create_app(
    config: AppConfig | None = None,
    db_path: str | Path = DB_PATH,
    platform: NotificationPlatform | None = None,
    client: OpenMeteoClient | None = None,
) -> FastAPI:
    config = config or load_config(CONFIG_PATH)
    conn = open_database(db_path, check_same_thread=False)
    toasts = ToastQueue()
    assistant = build_assistant(
        config, conn, platform or UnsupportedPlatform(), toasts, client=client
    )
    chat = ChatResponder(assistant)
    # Dedup check-and-mark and snapshot swaps must not interleave across requests
    lock = threading.Lock()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        conn.close()

    app = FastAPI(title="Skywatch Dashboard", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.assistant = assistant
    app.state.toasts = toasts
    app.state.lock = lock

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/search")
    def search(q: str):
        return [asdict(loc) for loc in assistant.fetcher.search_cities(q)]

    @app.post("/api/load")
    def load(city: str):
        with lock:
            result = assistant.load_city(city)
        if result.status == LoadStatus.NOT_FOUND:
            raise HTTPException(404, result.message)
        if result.status == LoadStatus.UNAVAILABLE:
            raise HTTPException(503, result.message)
        return _load_json(result)

    @app.get("/api/weather")
    def weather():
        snapshot = assistant.snapshot
        if snapshot is None:
            raise HTTPException(404, "No location selected")
        return asdict(snapshot)

    @app.get("/api/outfit")
    def outfit():
        with lock:
            presentation = assistant.request_outfit()
        if isinstance(presentation, NoLocationSelected):
            return {"available": False, "message": presentation.message}
        return {
            "available": True,
            "summary": presentation.summary_text,
            "conditions": presentation.conditions,
            "items": presentation.display_items,
        }

    @app.get("/api/climate")
    def climate():
        return [
            {**asdict(m), "data_source": m.data_source} for m in assistant.load_climate()
        ]

    @app.post("/api/chat")
    def chat_message(req: ChatRequest):
        with lock:
            reply = chat.respond(req.message)
        return {"text": reply.text, "items": reply.items}

    # ── Alert controls ──────────────────────────────────────────────

    def _settings_json() -> dict:
        s = assistant.dispatcher.settings()
        return {
            "alerts_enabled": s.alerts_enabled,
            "alerts_prompted_once": s.alerts_prompted_once,
            "permission": s.permission.value,
        }

    @app.get("/api/alerts")
    def alert_settings():
        with lock:
            return _settings_json()

    @app.post("/api/alerts/enable")
    def enable_alerts():
        with lock:
            native = assistant.dispatcher.request_enable()
            return {"native": native, **_settings_json()}

    @app.post("/api/alerts/disable")
    def disable_alerts():
        with lock:
            assistant.dispatcher.disable()
            return _settings_json()

    @app.post("/api/alerts/prompt")
    def prompt_alerts():
        with lock:
            shown = assistant.dispatcher.maybe_prompt_once()
        return {"shown": shown}

    @app.get("/api/toasts")
    def pending_toasts():
        return [_toast_json(t) for t in toasts.drain()]

    @app.get("/api/health")
    def health():
        return {
            "status": "ok",
            "location": assistant.snapshot.location_name if assistant.snapshot else None,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8777)
