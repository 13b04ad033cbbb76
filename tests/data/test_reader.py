import pytest

pytestmark = pytest.mark.unit

from fars.contracts import FarsError, FarsFileNotFoundError, SchemaError, UnreadableFileError
from fars.data.reader import BUNDLED_DATA_DIR, build_filename, coerce_int, coerce_year, load_records
from tests.helpers.fake_fars import make_accidents, write_accident_file


class TestBuildFilename:

    def test_default_name_and_directory(self, internal_config):
        path = build_filename(2014, internal_config)
        assert path.name == "accident_2014.csv.bz2"
        assert path.parent == BUNDLED_DATA_DIR

    def test_configured_data_dir(self, make_config, temp_dir):
        config = make_config(DATA_DIR=str(temp_dir))
        assert build_filename(2013, config) == temp_dir / "accident_2013.csv.bz2"

    def test_custom_template(self, make_config):
        config = make_config(FILENAME_TEMPLATE="accident_{year}.csv")
        assert build_filename(2015, config).name == "accident_2015.csv"

    @pytest.mark.parametrize("year", [2013.7, "2013", "2013.2", " 2013 "])
    def test_year_is_truncated_to_int(self, year, internal_config):
        assert build_filename(year, internal_config).name == "accident_2013.csv.bz2"

    def test_works_without_config(self):
        assert build_filename(2014).name == "accident_2014.csv.bz2"

    def test_does_not_touch_filesystem(self, make_config, temp_dir):
        config = make_config(DATA_DIR=str(temp_dir / "nowhere"))
        path = build_filename(1999, config)
        assert not path.exists()


class TestCoerceYear:

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            coerce_year(True)

    def test_rejects_text(self):
        with pytest.raises(ValueError):
            coerce_year("twenty-fourteen")

    def test_rejects_nan_and_inf(self):
        with pytest.raises(ValueError):
            coerce_year(float("nan"))
        with pytest.raises(ValueError):
            coerce_year(float("inf"))

    def test_rejects_none(self):
        with pytest.raises(TypeError):
            coerce_year(None)

    @pytest.mark.parametrize("value", [22, 22.0, "22", "22.0", " 22 "])
    def test_coerce_int_matches_year_rule(self, value):
        assert coerce_int(value, "state") == 22

    def test_coerce_int_names_the_value(self):
        with pytest.raises(TypeError, match="state"):
            coerce_int(False, "state")


class TestLoadRecords:

    def test_reads_compressed_file(self, fars_config, accident_frames):
        df = load_records(build_filename(2014, fars_config), fars_config)
        assert len(df) == len(accident_frames[2014])
        assert list(df.columns) == list(accident_frames[2014].columns)

    def test_reads_plain_csv(self, make_config, temp_dir):
        path = write_accident_file(temp_dir, 2015, make_accidents(2015), suffix=".csv")
        df = load_records(path, make_config())
        assert len(df) == len(make_accidents(2015))

    def test_declared_dtypes(self, fars_config):
        df = load_records(build_filename(2013, fars_config), fars_config)
        assert str(df["MONTH"].dtype) == "int64"
        assert str(df["STATE"].dtype) == "int64"
        assert str(df["LONGITUD"].dtype) == "float64"
        assert str(df["LATITUDE"].dtype) == "float64"

    def test_keeps_all_rows_and_columns(self, fars_config, accident_frames):
        df = load_records(build_filename(2013, fars_config), fars_config)
        assert df.shape == accident_frames[2013].shape
        assert "FATALS" in df.columns

    def test_missing_file(self, fars_config):
        path = build_filename(2016, fars_config)
        with pytest.raises(FarsFileNotFoundError, match="does not exist"):
            load_records(path, fars_config)

    def test_missing_file_is_file_not_found(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_records(temp_dir / "accident_1900.csv.bz2")

    def test_truncated_file(self, fars_config, data_dir):
        whole = (data_dir / "accident_2014.csv.bz2").read_bytes()
        path = data_dir / "accident_2015.csv.bz2"
        path.write_bytes(whole[: len(whole) // 2])

        with pytest.raises(UnreadableFileError, match="could not be read"):
            load_records(path, fars_config)

    def test_unreadable_is_a_fars_error(self, temp_dir):
        path = temp_dir / "accident_2015.csv.bz2"
        path.write_bytes(b"not bzip2 at all")
        with pytest.raises(FarsError):
            load_records(path)

    def test_missing_required_column_rejected(self, make_config, temp_dir):
        df = make_accidents(2015).drop(columns=["LATITUDE"])
        path = write_accident_file(temp_dir, 2015, df)

        with pytest.raises(SchemaError, match="LATITUDE"):
            load_records(path, make_config())

    def test_missing_required_column_warns(self, param_config, temp_dir, caplog):
        from fars.schemas import resolve_config
        config = resolve_config(param_config, {"data": {"on_missing_columns": "warn"}})
        df = make_accidents(2015).drop(columns=["LONGITUD"])
        path = write_accident_file(temp_dir, 2015, df)

        with caplog.at_level("WARNING", logger="fars.data.reader"):
            out = load_records(path, config)

        assert "LONGITUD" not in out.columns
        assert "missing required columns: LONGITUD" in caplog.text

    def test_uncastable_column(self, make_config, temp_dir):
        df = make_accidents(2015)
        df["MONTH"] = df["MONTH"].astype(str)
        df.loc[0, "MONTH"] = "unknown"
        path = write_accident_file(temp_dir, 2015, df)

        with pytest.raises(SchemaError, match="MONTH"):
            load_records(path, make_config())


@pytest.mark.parametrize("year", [2013, 2014])
def test_filename_then_load_succeeds_for_present_years(year, fars_config):
    df = load_records(build_filename(year, fars_config), fars_config)
    assert (df["YEAR"] == year).all()


@pytest.mark.parametrize("year", [2012, 2015])
def test_filename_then_load_fails_for_absent_years(year, fars_config):
    with pytest.raises(FileNotFoundError):
        load_records(build_filename(year, fars_config), fars_config)
