"""HTTP-Einstiegspunkt fuer Multicast-Downlinks ueber ChirpStack."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException

from chirpstack.server import ChirpStackServer
from orchestrator.pipeline import MulticastPipeline, NodeConfig


def create_pipeline() -> MulticastPipeline:
    """Erzeugt die Pipeline aus der Umgebungskonfiguration."""

    return MulticastPipeline(ChirpStackServer.from_settings(), NodeConfig.from_settings())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    pipeline = create_pipeline()
    app.state.pipeline = pipeline
    try:
        yield
    finally:
        await pipeline.close()


app = FastAPI(title="ChirpStack Multicast API", lifespan=lifespan)


@app.post("/enqueue")
async def enqueue(message: dict[str, Any]) -> dict[str, Any]:
    """Reiht die Nutzdaten der Nachricht ein und liefert die Ergebnisnachricht."""

    pipeline: MulticastPipeline = app.state.pipeline
    if not pipeline.ready:
        detail = pipeline.config_error.message if pipeline.config_error else "Pipeline nicht bereit"
        raise HTTPException(status_code=503, detail=detail)
    result = await pipeline.handle(message)
    return dict(result or {})


@app.get("/status")
async def get_pipeline_status() -> dict[str, str]:
    """Liefert den aktuellen Inhalt der Statusanzeige."""

    pipeline: MulticastPipeline = app.state.pipeline
    return pipeline.status.current.model_dump(mode="json")
