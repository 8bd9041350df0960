from datetime import date

import httpx
import pytest

from todo_expert.clients.weather import WeatherClient
from todo_expert.core.exceptions import WeatherUnavailable

URL = "https://weather.test/weather.json"


def _client(handler) -> WeatherClient:
    return WeatherClient(
        url=URL,
        http_client_factory=lambda: httpx.Client(transport=httpx.MockTransport(handler)),
        today_fn=lambda: date(2024, 3, 5),
    )


def test_returns_weather_of_today():
    def handler(request):
        return httpx.Response(200, json=[
            {"date": "03-04", "weather": "Rainy"},
            {"date": "03-05", "weather": "Sunny"},
        ])

    assert _client(handler).get_today_weather() == "Sunny"


def test_no_entry_for_today():
    def handler(request):
        return httpx.Response(200, json=[{"date": "01-01", "weather": "Snowy"}])

    with pytest.raises(WeatherUnavailable):
        _client(handler).get_today_weather()


@pytest.mark.parametrize("response", [httpx.Response(500), httpx.Response(200, json=[])])
def test_bad_response(response):
    with pytest.raises(WeatherUnavailable):
        _client(lambda request: response).get_today_weather()


def test_network_error():
    def handler(request):
        raise httpx.ConnectTimeout("timeout", request=request)

    with pytest.raises(WeatherUnavailable):
        _client(handler).get_today_weather()
