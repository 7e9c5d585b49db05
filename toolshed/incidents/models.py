from dataclasses import asdict, dataclass
from datetime import date

from toolshed.incidents.exceptions import InvalidPeriodError

# Table cell index -> field name for one logical record.
RECORD_FIELDS = (
    "report_id",
    "occurred_date",
    "report_date",
    "type",
    "disposition",
    "location",
)


@dataclass(frozen=True)
class IncidentRecord:
    """One logical incident record, rebuilt from a pair of table rows."""

    report_id: str
    occurred_date: str
    report_date: str
    type: str
    disposition: str
    location: str

    def to_dict(self) -> dict[str, str]:
        """Serializable fields, without the key."""
        data = asdict(self)
        del data["report_id"]
        return data


@dataclass(frozen=True)
class ReportPeriod:
    """A month of incident logs."""

    month: int
    year: int

    @classmethod
    def create(
        cls,
        month: int,
        year: int,
        *,
        min_year: int,
        current_year: int | None = None,
    ) -> "ReportPeriod":
        """Validate and build a period.

        Logs before ``min_year`` used a different page layout and are rejected.

        Raises:
            InvalidPeriodError: if month or year is out of range.
        """
        if current_year is None:
            current_year = date.today().year
        if not 1 <= month <= 12:
            raise InvalidPeriodError(f"month must be between 1 and 12, got {month}")
        if not min_year <= year <= current_year:
            raise InvalidPeriodError(
                f"year must be between {min_year} and {current_year}, got {year}"
            )
        return cls(month=month, year=year)

    @property
    def filename(self) -> str:
        return f"{self.month}-{self.year}.json"
