"""Rebuild incident records from the two-rows-per-record log table."""

from bs4 import BeautifulSoup
from bs4.element import Tag

from toolshed.incidents.exceptions import IncidentParseError
from toolshed.incidents.models import RECORD_FIELDS, IncidentRecord
from toolshed.logging.logger import Log


def parse_incident_table(html: str, *, strict: bool = False) -> dict[str, IncidentRecord]:
    """Parse the first table of an incident log page.

    The first row is a header. Every following pair of rows is one record.
    A trailing unpaired row is dropped with a warning, or raises in strict mode.
    Repeated report ids keep the last record.

    Raises:
        IncidentParseError: if there is no table, a record has too few cells,
            or (strict only) the data row count is odd.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")
    if not isinstance(table, Tag):
        raise IncidentParseError("No table found in incident log page")

    rows = table.find_all("tr")[1:]
    if len(rows) % 2:
        message = f"Incident table has an unpaired trailing row ({len(rows)} data rows)"
        if strict:
            raise IncidentParseError(message)
        Log.warning(f"{message}; dropping it")

    records: dict[str, IncidentRecord] = {}
    for first, second in zip(rows[0::2], rows[1::2]):
        record = _record_from_rows(first, second)
        if record.report_id in records:
            Log.debug(f"Duplicate report id {record.report_id}; keeping the later record")
        records[record.report_id] = record
    return records


def _record_from_rows(first: Tag, second: Tag) -> IncidentRecord:
    cells = [
        cell.get_text().strip()
        for cell in [*first.find_all("td"), *second.find_all("td")]
    ]
    if len(cells) < len(RECORD_FIELDS):
        raise IncidentParseError(
            f"Incident record has {len(cells)} cells, expected {len(RECORD_FIELDS)}: {cells}"
        )
    return IncidentRecord(**dict(zip(RECORD_FIELDS, cells)))
