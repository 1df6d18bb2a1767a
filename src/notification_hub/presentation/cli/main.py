import typer

from notification_hub.config import settings
from notification_hub.domain.errors import InvalidReadingError
from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.infrastructure.logging_setup import configure_logging
from notification_hub.presentation.dependencies import WeatherApp, build_weather_app

app = typer.Typer(help="Weather station notification hub CLI")

DEMO_READINGS = [
    (80.0, 65.0, 30.4),
    (82.0, 70.0, 29.2),
    (78.0, 90.0, 29.2),
]


class FaultyListener:
    def __call__(self, reading: WeatherReading) -> None:
        raise RuntimeError(f"faulty listener rejected {reading}")


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", "-l")) -> None:
    configure_logging(log_level)


def _publish(weather: WeatherApp, temperature: float, humidity: float, pressure: float) -> None:
    try:
        report = weather.station.set_measurements(temperature, humidity, pressure)
    except InvalidReadingError as e:
        typer.echo(f"Invalid reading: {e}", err=True)
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"Delivery aborted: {e}", err=True)
        raise typer.Exit(code=1)
    for line in weather.render():
        typer.echo(line)
    for failure in report.failures:
        typer.echo(f"Listener {failure.handle} failed: {failure.error}", err=True)


@app.command()
def demo(
    policy: str = typer.Option(settings.failure_policy.value, "--policy", "-p"),
    faulty: bool = typer.Option(False, "--faulty-listener", "-f"),
) -> None:
    """Feed the three lesson readings through a station with all displays."""
    weather = build_weather_app(policy)
    if faulty:
        hub = weather.station.hub
        # Faulty listener goes first so an abort skips every display.
        for display in weather.displays:
            display.unsubscribe(hub)
        faulty_handle = hub.attach(FaultyListener())
        for display in weather.displays:
            display.subscribe(hub)
        typer.echo(f"Attached faulty listener as {faulty_handle}")
    for temperature, humidity, pressure in DEMO_READINGS:
        _publish(weather, temperature, humidity, pressure)


@app.command()
def publish(temperature: float, humidity: float, pressure: float) -> None:
    """Publish a single reading and print every display."""
    _publish(build_weather_app(), temperature, humidity, pressure)


if __name__ == "__main__":
    app()
