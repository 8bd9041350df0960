"""
➡️ But : Récupérer la météo du jour auprès de l'API externe.

L'API renvoie une liste [{"date": "MM-DD", "weather": "..."}] ; on sélectionne l'entrée du jour.
Toute défaillance (réseau, timeout, statut, données absentes) devient WeatherUnavailable.
"""

import logging
from datetime import date
from typing import Callable, Optional

import httpx

from todo_expert.core.exceptions import WeatherUnavailable

logger = logging.getLogger(__name__)


class WeatherClient:
    def __init__(
        self,
        *,
        url: str,
        timeout: float = 3.0,
        http_client_factory: Optional[Callable[[], httpx.Client]] = None,
        today_fn: Callable[[], date] = date.today,
    ):
        self.url = url
        self.timeout = timeout
        self._client_factory = http_client_factory or (lambda: httpx.Client(timeout=self.timeout))
        self.today_fn = today_fn

    def get_today_weather(self) -> str:
        try:
            with self._client_factory() as client:
                response = client.get(self.url)
        except httpx.HTTPError as e:
            logger.warning("Weather API call failed: %s", e)
            raise WeatherUnavailable(f"날씨 데이터를 가져오는데 실패했습니다. {e}") from e

        if response.status_code != httpx.codes.OK:
            raise WeatherUnavailable(
                f"날씨 데이터를 가져오는데 실패했습니다. 상태 코드: {response.status_code}"
            )

        try:
            entries = response.json()
        except ValueError as e:
            raise WeatherUnavailable("날씨 데이터가 없습니다.") from e
        if not entries or not isinstance(entries, list):
            raise WeatherUnavailable("날씨 데이터가 없습니다.")

        today = self.today_fn().strftime("%m-%d")
        for entry in entries:
            if isinstance(entry, dict) and entry.get("date") == today and entry.get("weather"):
                return str(entry["weather"])

        raise WeatherUnavailable("오늘에 해당하는 날씨 데이터를 찾을 수 없습니다.")
