"""Current weather for a city: request URLs, response parsing and report text."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from deskdemos.news import Signal

WEATHER_ENDPOINT = "http://api.openweathermap.org/data/2.5/weather"
ICON_ENDPOINT = "http://openweathermap.org/img/w"

CITIES: tuple[tuple[str, str], ...] = (
    ("Beijing", "Beijing,cn"),
    ("Shanghai", "Shanghai,cn"),
    ("Nanjing", "Nanjing,cn"),
)
"""Label shown to the user and query value sent to the service, per city."""


class RemoteRequest(Enum):
    """Kind of request a reply belongs to."""

    FETCH_WEATHER_INFO = "weather_info"
    FETCH_WEATHER_ICON = "weather_icon"


class WeatherError(Exception):
    """Raised when weather data cannot be fetched or parsed."""


@dataclass
class WeatherDetail:
    """One weather condition: a description and the name of its icon."""

    desc: str = ""
    icon: str = ""


@dataclass
class WeatherInfo:
    """Conditions reported for one city at one moment."""

    city_name: str = ""
    id: int = 0
    date_time: datetime | None = None
    temperature: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    details: list[WeatherDetail] = field(default_factory=list)


def weather_url(city: str, app_id: str) -> str:
    """URL asking for the current weather of city, in metric units."""
    return f"{WEATHER_ENDPOINT}?q={city}&mode=json&units=metric&lang=zh_cn&APPID={app_id}"


def icon_url(icon: str) -> str:
    return f"{ICON_ENDPOINT}/{icon}.png"


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def parse_weather(payload: str | bytes) -> WeatherInfo | None:
    """Build a WeatherInfo from a service reply.

    Returns None when the reply is valid JSON but not a non-empty object;
    raises WeatherError when it is not JSON at all.
    """
    try:
        document = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as exc:
        raise WeatherError(str(exc)) from exc
    if not isinstance(document, dict) or not document:
        return None

    main = document.get("main")
    if not isinstance(main, dict):
        main = {}
    conditions = document.get("weather")
    if not isinstance(conditions, list):
        conditions = []

    details = []
    for condition in conditions:
        if not isinstance(condition, dict):
            condition = {}
        details.append(
            WeatherDetail(
                desc=_to_str(condition.get("description")),
                icon=_to_str(condition.get("icon")),
            )
        )

    return WeatherInfo(
        city_name=_to_str(document.get("name")),
        date_time=datetime.fromtimestamp(_to_int(document.get("dt")), tz=timezone.utc),
        temperature=_to_float(main.get("temp")),
        pressure=_to_float(main.get("pressure")),
        humidity=_to_float(main.get("humidity")),
        details=details,
    )


def _number(value: float) -> str:
    return f"{value:g}"


def format_detail(detail: WeatherDetail) -> str:
    return f'(Description: "{detail.desc}"; Icon: "{detail.icon}")'


def format_info(info: WeatherInfo) -> str:
    """Multi-line report of everything a WeatherInfo holds."""
    when = info.date_time.strftime("%A, %B %d, %Y %H:%M:%S %Z") if info.date_time else ""
    details = "".join(
        f'( Description: "{detail.desc}", Icon: "{detail.icon}"), ' for detail in info.details
    )
    return (
        f'(id: {info.id}; City name: "{info.city_name}"; Date time: "{when}": \n'
        f"Temperature: {_number(info.temperature)}, "
        f"Pressure: {_number(info.pressure)}, "
        f"Humidity: {_number(info.humidity)}\n"
        f"Details: [{details}] )"
    )


def _http_get(url: str) -> bytes:
    with urllib.request.urlopen(url) as response:
        return response.read()


class WeatherClient:
    """Fetches weather reports and icons, announcing each reply on `finished`.

    `finished` is emitted with the request kind and the raw reply body.
    """

    def __init__(self, app_id: str = "placeholder", fetch: Callable[[str], bytes] | None = None) -> None:
        self.app_id = app_id
        self._fetch = fetch or _http_get
        self.finished = Signal()

    def _get(self, url: str, kind: RemoteRequest) -> bytes:
        try:
            body = self._fetch(url)
        except (OSError, urllib.error.URLError) as exc:
            raise WeatherError(f"request to {url} failed: {exc}") from exc
        self.finished.emit(kind, body)
        return body

    def fetch_weather(self, city: str) -> WeatherInfo | None:
        body = self._get(weather_url(city, self.app_id), RemoteRequest.FETCH_WEATHER_INFO)
        return parse_weather(body)

    def fetch_icon(self, icon: str) -> bytes:
        return self._get(icon_url(icon), RemoteRequest.FETCH_WEATHER_ICON)