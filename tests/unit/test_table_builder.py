from __future__ import annotations

from src.models.records import AdjustedRecord, EstimateRecord
from src.services.table_builder import BuildStats, build_adjusted_table, build_estimate_table, match_year

YEARS = ("2030", "2040", "2050")

COLUMNS = {
    "year": "Year",
    "country": "Country",
    "adjusted_incidence": "Metric",
    "adjusted_incidence_lower": "Low",
    "adjusted_incidence_upper": "High",
    "adjusted_daly": None,
    "adjusted_daly_lower": None,
    "adjusted_daly_upper": None,
}


def test_match_year_accepts_text_and_numbers():
    assert match_year("2030", YEARS) == "2030"
    assert match_year(" 2040 ", YEARS) == "2040"
    assert match_year(2050, YEARS) == "2050"
    assert match_year(2030.0, YEARS) == "2030"
    assert match_year("2030.0", YEARS) == "2030"


def test_match_year_rejects_other_values():
    for value in [None, "", "2035", 2031, "year 2030", "abc", True]:
        assert match_year(value, YEARS) is None


def test_last_write_wins_for_same_country_and_year():
    rows = [
        {"Country": "X", "Year": "2030", "Metric": "5"},
        {"Country": "X", "Year": "2030", "Metric": "9"},
    ]
    table = build_adjusted_table(rows, COLUMNS, YEARS)
    assert table["X"]["2030"].adjusted_incidence == 9


def test_rows_with_bad_year_or_empty_country_are_skipped():
    rows = [
        {"Country": "  ", "Year": 2030, "Metric": 1},
        {"Country": None, "Year": 2030, "Metric": 1},
        {"Country": "Y", "Year": 2035, "Metric": 1},
        {"Country": " Brazil ", "Year": 2040.0, "Metric": "1,234.5 (95% CI 1.0–2.0)", "Low": "—", "High": "n/a"},
    ]
    stats = BuildStats()
    table = build_adjusted_table(rows, COLUMNS, YEARS, stats)
    assert list(table) == ["Brazil"]
    assert table["Brazil"] == {
        "2040": AdjustedRecord(adjusted_incidence=1234.5, adjusted_incidence_ci=(None, None))
    }
    assert stats.total_rows == 4
    assert stats.skipped_rows == 3
    assert stats.used_rows == 1


def test_ci_bounds_are_independently_optional():
    rows = [{"Country": "Z", "Year": "2050", "Metric": 2, "Low": "<1.5", "High": ""}]
    record = build_adjusted_table(rows, COLUMNS, YEARS)["Z"]["2050"]
    assert record.adjusted_incidence_ci == (1.5, None)
    assert record.adjusted_daly is None
    assert record.adjusted_daly_ci == (None, None)


def test_unresolved_year_column_skips_every_row():
    columns = dict(COLUMNS, year=None)
    stats = BuildStats()
    assert build_adjusted_table([{"Country": "X", "Metric": 1}], columns, YEARS, stats) == {}
    assert stats.skipped_rows == 1


ESTIMATE_COLUMNS = {
    "country": "Country",
    "clp:2030": "CL/P Estimated 2030 (95% CI)",
    "daly:2030": "DALY Estimate 2030 (95% CI)",
    "clp:2040": None,
    "daly:2040": None,
}


def test_estimate_table_keeps_display_text_and_number():
    rows = [
        {
            "Country": "India",
            "CL/P Estimated 2030 (95% CI)": "35,112 (95% CI 30,000–40,000)",
            "DALY Estimate 2030 (95% CI)": 120000.0,
        }
    ]
    table = build_estimate_table(rows, ESTIMATE_COLUMNS, ("2030", "2040"))
    assert table["India"]["2030"] == EstimateRecord(
        clp_estimate="35,112 (95% CI 30,000–40,000)",
        daly_estimate="120000",
        clp_number=35112.0,
        daly_number=120000.0,
    )
    # unresolved columns still produce a record, all fields absent
    assert table["India"]["2040"] == EstimateRecord()


def test_estimate_table_repeated_country_replaces_record():
    rows = [
        {"Country": "Peru", "CL/P Estimated 2030 (95% CI)": "10"},
        {"Country": "Peru", "CL/P Estimated 2030 (95% CI)": "—"},
        {"Country": "", "CL/P Estimated 2030 (95% CI)": "3"},
    ]
    stats = BuildStats()
    table = build_estimate_table(rows, ESTIMATE_COLUMNS, ("2030",), stats)
    assert table["Peru"]["2030"].clp_number is None
    assert table["Peru"]["2030"].clp_estimate == "—"
    assert stats.skipped_rows == 1


def test_record_to_dict_shapes():
    adjusted = AdjustedRecord(adjusted_incidence=1.0, adjusted_incidence_ci=(0.5, None))
    assert adjusted.to_dict() == {
        "adjusted_incidence": 1.0,
        "adjusted_incidence_ci": [0.5, None],
        "adjusted_daly": None,
        "adjusted_daly_ci": [None, None],
    }
    assert set(EstimateRecord().to_dict()) == {"clp_estimate", "daly_estimate", "clp_number", "daly_number"}
