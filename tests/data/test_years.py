import pandas as pd
from pydantic import ValidationError
import pytest

pytestmark = pytest.mark.unit

from fars.data.years import YearResult, load_years, read_year_results
from tests.helpers.fake_fars import write_accident_file


def test_returns_one_table_per_year(fars_config):
    tables = load_years([2013, 2014], fars_config)
    assert isinstance(tables, list)
    assert len(tables) == 2
    assert all(isinstance(t, pd.DataFrame) for t in tables)


def test_tables_hold_month_and_year(fars_config, accident_frames):
    t2013, t2014 = load_years([2013, 2014], fars_config)

    assert list(t2013.columns) == ["MONTH", "year"]
    assert (t2013["year"] == 2013).all()
    assert (t2014["year"] == 2014).all()
    assert t2013["MONTH"].tolist() == accident_frames[2013]["MONTH"].tolist()


def test_order_follows_request(fars_config):
    tables = load_years([2014, 2013], fars_config)
    assert tables[0]["year"].iloc[0] == 2014
    assert tables[1]["year"].iloc[0] == 2013


def test_invalid_year_gives_none_and_warning(fars_config, caplog):
    with caplog.at_level("WARNING", logger="fars.data.years"):
        tables = load_years([2013, 2016, 2014], fars_config)

    assert len(tables) == 3
    assert tables[1] is None
    assert isinstance(tables[0], pd.DataFrame)
    assert isinstance(tables[2], pd.DataFrame)
    assert "invalid year: 2016" in caplog.text


def test_duplicates_loaded_independently(fars_config):
    tables = load_years([2013, 2013], fars_config)
    assert len(tables) == 2
    assert tables[0] is not tables[1]
    assert tables[0].equals(tables[1])


def test_malformed_year_is_skipped(fars_config, caplog):
    with caplog.at_level("WARNING", logger="fars.data.years"):
        tables = load_years(["abc", 2014], fars_config)

    assert tables[0] is None
    assert tables[1] is not None
    assert "invalid year: abc" in caplog.text


def test_unreadable_file_is_skipped(fars_config, data_dir):
    (data_dir / "accident_2015.csv.bz2").write_bytes(b"not bzip2 at all")
    tables = load_years([2015, 2013], fars_config)
    assert tables[0] is None
    assert tables[1] is not None


def test_truncated_file_is_skipped(fars_config, data_dir, caplog):
    whole = (data_dir / "accident_2013.csv.bz2").read_bytes()
    (data_dir / "accident_2015.csv.bz2").write_bytes(whole[: len(whole) // 2])

    with caplog.at_level("WARNING", logger="fars.data.years"):
        tables = load_years([2015, 2013], fars_config)

    assert tables[0] is None
    assert isinstance(tables[1], pd.DataFrame)
    assert "invalid year: 2015" in caplog.text


def test_schema_error_is_skipped(fars_config, data_dir, accident_frames):
    write_accident_file(data_dir, 2015, accident_frames[2014].drop(columns=["MONTH"]))
    assert load_years([2015], fars_config) == [None]


def test_single_year_accepted(fars_config):
    tables = load_years(2013, fars_config)
    assert len(tables) == 1
    assert list(tables[0].columns) == ["MONTH", "year"]


def test_float_year_is_truncated(fars_config):
    (table,) = load_years([2013.0], fars_config)
    assert table["year"].iloc[0] == 2013


def test_empty_request(fars_config):
    assert load_years([], fars_config) == []


class TestYearResults:

    def test_results_carry_reason(self, fars_config):
        results = read_year_results([2013, 2016], fars_config)

        assert [r.ok for r in results] == [True, False]
        assert results[0].error is None
        assert results[1].table is None
        assert "does not exist" in results[1].error

    def test_results_keep_requested_value(self, fars_config):
        results = read_year_results(["2013", 2014.0], fars_config)
        assert [r.year for r in results] == ["2013", 2014.0]
        assert all(r.ok for r in results)

    def test_result_is_frozen(self):
        result = YearResult(year=2013, error="boom")
        with pytest.raises(ValidationError):
            result.error = "changed"
