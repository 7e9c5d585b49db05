import json
from pathlib import Path

from toolshed.incidents.exceptions import IncidentWriteError
from toolshed.incidents.models import IncidentRecord, ReportPeriod


def write_incident_report(
    records: dict[str, IncidentRecord],
    period: ReportPeriod,
    output_dir: Path,
) -> Path:
    """Write ``<month>-<year>.json`` into ``output_dir``, replacing any existing file.

    Raises:
        IncidentWriteError: if the file cannot be written.
    """
    payload = {report_id: record.to_dict() for report_id, record in records.items()}
    path = output_dir / period.filename
    try:
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise IncidentWriteError(f"Could not write '{path}': {exc}") from exc
    return path
