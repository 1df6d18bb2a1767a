from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.domain.errors import InvalidReadingError
from notification_hub.presentation.dependencies import WeatherApp, build_weather_app, hub_metrics

router = APIRouter(prefix="/v1", tags=["weather"])

# Process-wide station; tests swap it through app.dependency_overrides.
_weather = build_weather_app(metrics=hub_metrics)


def get_weather() -> WeatherApp:
    return _weather


@router.post("/weather/readings")
def publish_reading(body: dict[str, Any], weather: WeatherApp = Depends(get_weather)) -> dict[str, Any]:
    try:
        reading = WeatherReading(
            temperature=body["temperature"],
            humidity=body["humidity"],
            pressure=body["pressure"],
        )
    except KeyError as e:
        raise HTTPException(status_code=422, detail=f"Missing field {e.args[0]!r}") from e
    except InvalidReadingError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    try:
        report = weather.station.publish(reading)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Delivery aborted: {e}") from e

    return {
        "attempted": report.attempted,
        "delivered": report.delivered,
        "failures": [{"handle": str(f.handle), "error": repr(f.error)} for f in report.failures],
    }


@router.get("/weather/displays")
def displays(weather: WeatherApp = Depends(get_weather)) -> dict[str, list[str]]:
    return {"displays": weather.render()}


@router.get("/hub")
def hub_info(weather: WeatherApp = Depends(get_weather)) -> dict[str, Any]:
    hub = weather.station.hub
    return {"name": hub.name, "listeners": len(hub), "policy": hub.policy.value}
