import pytest

from toolshed.incidents.exceptions import InvalidPeriodError
from toolshed.incidents.models import ReportPeriod


class TestReportPeriod:
    def test_valid_period(self) -> None:
        period = ReportPeriod.create(3, 2014, min_year=2011, current_year=2020)

        assert period == ReportPeriod(month=3, year=2014)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_rejects_bad_month(self, month: int) -> None:
        with pytest.raises(InvalidPeriodError, match="month"):
            ReportPeriod.create(month, 2014, min_year=2011, current_year=2020)

    @pytest.mark.parametrize("year", [2010, 2021])
    def test_rejects_year_outside_range(self, year: int) -> None:
        with pytest.raises(InvalidPeriodError, match="year"):
            ReportPeriod.create(1, year, min_year=2011, current_year=2020)

    def test_range_is_inclusive(self) -> None:
        assert ReportPeriod.create(1, 2011, min_year=2011, current_year=2020).year == 2011
        assert ReportPeriod.create(12, 2020, min_year=2011, current_year=2020).month == 12

    def test_current_year_defaults_to_today(self) -> None:
        with pytest.raises(InvalidPeriodError):
            ReportPeriod.create(1, 9999, min_year=2011)

    def test_filename(self) -> None:
        assert ReportPeriod(month=4, year=2013).filename == "4-2013.json"
