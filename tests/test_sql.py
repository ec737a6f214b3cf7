import pytest

from app.db.sql import JobFilter, compile_filter, compile_partial_update, rename_keys
from app.services.exceptions import BadRequestError, ErrorCategory


FAKE_REQUEST_BODY = {"colName1": 1, "colName2": 3, "colName3": "string"}
FAKE_RENAMES = {"colName1": "col_1_db_name"}


def test_partial_update_renames_and_numbers_columns():
    result = compile_partial_update(FAKE_REQUEST_BODY, FAKE_RENAMES)
    assert result.set_clause == '"col_1_db_name"=$1, "colName2"=$2, "colName3"=$3'
    assert result.values == [1, 3, "string"]


def test_partial_update_without_renames():
    result = compile_partial_update(FAKE_REQUEST_BODY, {})
    assert result.set_clause == '"colName1"=$1, "colName2"=$2, "colName3"=$3'
    assert result.values == [1, 3, "string"]


def test_partial_update_two_fields():
    set_clause, values = compile_partial_update({"a": 1, "b": 2}, {"a": "aa"})
    assert set_clause == '"aa"=$1, "b"=$2'
    assert values == [1, 2]


def test_partial_update_follows_key_order():
    set_clause, values = compile_partial_update({"b": "x", "a": "y"}, {})
    assert set_clause == '"b"=$1, "a"=$2'
    assert values == ["x", "y"]


def test_partial_update_keeps_none_values():
    set_clause, values = compile_partial_update({"salary": None, "equity": None}, {})
    assert set_clause == '"salary"=$1, "equity"=$2'
    assert values == [None, None]


@pytest.mark.parametrize("renames", [{}, FAKE_RENAMES, {"companyHandle": "company_handle"}])
def test_partial_update_rejects_empty_fields(renames):
    with pytest.raises(BadRequestError) as exc_info:
        compile_partial_update({}, renames)
    assert exc_info.value.category is ErrorCategory.VALIDATION
    assert exc_info.value.message == "No data"


def test_filter_empty_or_missing():
    assert compile_filter(None) == ("", [])
    assert compile_filter({}) == ("", [])


def test_filter_title_is_lowercased_substring():
    where_clause, values = compile_filter({"title": "Software Developer"})
    assert where_clause == "WHERE LOWER(\"title\") LIKE $1 ESCAPE '!'"
    assert values == ["%software developer%"]


def test_filter_title_wildcards_match_literally():
    _, values = compile_filter({"title": "100%_Remote!"})
    assert values == ["%100!%!_remote!!%"]


def test_filter_combines_with_and_in_key_order():
    where_clause, values = compile_filter({"minSalary": 150000, "title": "dev"})
    assert where_clause == "WHERE \"salary\" >= $1 AND LOWER(\"title\") LIKE $2 ESCAPE '!'"
    assert values == [150000, "%dev%"]


def test_filter_has_equity_is_strictly_positive():
    where_clause, values = compile_filter({"hasEquity": True})
    assert where_clause == 'WHERE "equity" > $1'
    assert values == [0]


def test_filter_has_equity_false_and_none_are_skipped():
    assert compile_filter({"hasEquity": False}) == ("", [])
    where_clause, values = compile_filter({"title": None, "hasEquity": False, "minSalary": 5})
    assert where_clause == 'WHERE "salary" >= $1'
    assert values == [5]


def test_filter_placeholders_can_start_later():
    where_clause, values = compile_filter({"title": "a", "minSalary": 1}, start=3)
    assert where_clause == "WHERE LOWER(\"title\") LIKE $3 ESCAPE '!' AND \"salary\" >= $4"
    assert values == ["%a%", 1]


def test_filter_values_are_never_inlined():
    hostile = "x'; DROP TABLE jobs; --"
    where_clause, values = compile_filter({"title": hostile})
    assert "DROP" not in where_clause
    assert values == [f"%{hostile.lower()}%"]


def test_filter_rejects_unknown_name():
    with pytest.raises(BadRequestError) as exc_info:
        compile_filter({"name": "c1"})
    assert exc_info.value.details["filter"] == "name"
    assert exc_info.value.details["allowed"] == ["title", "minSalary", "hasEquity"]


def test_job_filter_lookup():
    assert JobFilter.from_param("minSalary") is JobFilter.MIN_SALARY
    assert JobFilter.TITLE.normalize("ABC") == "%abc%"


def test_rename_keys():
    assert rename_keys({"companyHandle": "c1", "title": "t"}, {"companyHandle": "company_handle"}) == {
        "company_handle": "c1",
        "title": "t",
    }
