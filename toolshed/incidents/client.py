import httpx

from toolshed.incidents.exceptions import IncidentFetchError
from toolshed.incidents.models import ReportPeriod
from toolshed.logging.logger import Log


class IncidentLogClient:
    """Fetches the incident log HTML page for one month."""

    def __init__(
        self,
        *,
        url_template: str,
        timeout_seconds: int,
        user_agent: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url_template = url_template
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._transport = transport

    def build_url(self, period: ReportPeriod) -> str:
        return self._url_template.format(year=period.year, month=period.month)

    def fetch(self, period: ReportPeriod) -> str:
        """Return the page body. No retries.

        Raises:
            IncidentFetchError: on any transport error or non-2xx status.
        """
        url = self.build_url(period)
        Log.info(f"Fetching incident log for {period.month}/{period.year}: {url}")
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                headers={"User-Agent": self._user_agent},
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise IncidentFetchError(
                f"Incident log request returned {exc.response.status_code}: {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise IncidentFetchError(f"Incident log request failed: {exc}") from exc

        Log.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.text
