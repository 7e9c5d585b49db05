from pathlib import Path

from toolshed.config.settings import Settings
from toolshed.incidents.client import IncidentLogClient
from toolshed.incidents.models import ReportPeriod
from toolshed.incidents.parser import parse_incident_table
from toolshed.incidents.writer import write_incident_report
from toolshed.logging.logger import Log


class IncidentScraper:
    """Pipeline: fetch -> parse -> write. Nothing is written unless parsing succeeds."""

    def __init__(
        self,
        client: IncidentLogClient,
        output_dir: Path,
        strict: bool = False,
    ) -> None:
        self._client = client
        self._output_dir = output_dir
        self._strict = strict

    def scrape(self, period: ReportPeriod) -> Path:
        html = self._client.fetch(period)
        records = parse_incident_table(html, strict=self._strict)
        Log.info(f"Parsed {len(records)} incident records for {period.month}/{period.year}")
        path = write_incident_report(records, period, self._output_dir)
        Log.info(f"Wrote {path}")
        return path


def build_scraper(
    settings: Settings,
    output_dir: Path | None = None,
    strict: bool | None = None,
) -> IncidentScraper:
    client = IncidentLogClient(
        url_template=settings.incidents_url_template,
        timeout_seconds=settings.incidents_timeout_seconds,
        user_agent=settings.incidents_user_agent,
    )
    return IncidentScraper(
        client=client,
        output_dir=output_dir if output_dir is not None else Path("."),
        strict=settings.incidents_strict_pairing if strict is None else strict,
    )
