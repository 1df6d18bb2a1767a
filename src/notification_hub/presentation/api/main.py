from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from notification_hub.presentation.api.routes.weather import router as weather_router
from notification_hub.presentation.dependencies import registry

app = FastAPI(title="Notification Hub", version="0.1.0")
app.include_router(weather_router)


@app.get("/health", tags=["health"])  # type: ignore[misc]
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
