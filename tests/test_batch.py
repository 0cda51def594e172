"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_batch.py
@DateTime: 2026-10-19
@Docs: Tests for batch row validation (pure Python and Polars).
批量行校验测试（纯 Python 与 Polars）。
"""

import pytest

from fastapi_field_validators import business_id, number, text, validate_rows
from fastapi_field_validators.batch import ErrorCollector, validate_row
from fastapi_field_validators.exceptions import ValidationError


def _validators() -> dict:
    return {
        "name": text(True, max_length=10),
        "tax_id": business_id(True),
        "age": number(min=0),
    }


class TestErrorCollector:
    """Tests for ErrorCollector.
    ErrorCollector 测试。
    """

    def test_add_builds_item(self) -> None:
        collector = ErrorCollector()
        error = ValidationError(message="Required", key="required")
        collector.add(row_number=3, field="name", error=error, value=None)
        assert collector.errors == [{"row_number": 3, "field": "name", "message": "Required", "value": None, "type": "required"}]


class TestValidateRows:
    """Tests for validate_rows / validate_row.
    validate_rows / validate_row 测试。
    """

    def test_all_valid(self) -> None:
        rows = [{"name": " Alice ", "tax_id": "12345675", "age": "30"}]
        valid, errors = validate_rows(rows, _validators())
        assert errors == []
        assert valid == [{"name": "Alice", "tax_id": "12345675", "age": 30}]

    def test_errors_carry_row_field_and_type(self) -> None:
        rows = [
            {"name": "Bob", "tax_id": "12345672", "age": 5},
            {"name": "", "tax_id": "12345675", "age": -1},
        ]
        valid, errors = validate_rows(rows, _validators(), start_row=2)
        assert valid == []
        assert [(e["row_number"], e["field"], e["type"]) for e in errors] == [
            (2, "tax_id", "checksum"),
            (3, "name", "required"),
            (3, "age", "min"),
        ]
        assert errors[0]["value"] == "12345672"

    def test_missing_column_reads_none(self) -> None:
        valid, errors = validate_rows([{"name": "Carol"}], _validators())
        assert valid == []
        assert errors[0]["field"] == "tax_id"
        assert errors[0]["type"] == "required"

    def test_unvalidated_columns_copied(self) -> None:
        collector = ErrorCollector()
        row = {"name": "Dan", "tax_id": "12345675", "note": "keep"}
        cleaned = validate_row(row, _validators(), row_number=1, collector=collector)
        assert cleaned["note"] == "keep"
        assert cleaned["age"] is None
        assert collector.errors == []

    def test_failed_field_keeps_raw_value(self) -> None:
        collector = ErrorCollector()
        cleaned = validate_row({"name": "Eve", "tax_id": "x"}, _validators(), row_number=1, collector=collector)
        assert cleaned["tax_id"] == "x"


class TestValidateDataFrame:
    """Tests for the Polars backend.
    Polars 后端测试。
    """

    def test_keeps_valid_rows(self) -> None:
        pl = pytest.importorskip("polars")
        from fastapi_field_validators import validate_dataframe

        df = pl.DataFrame({"name": ["Alice", "Bob"], "tax_id": ["12345675", "12345672"], "age": [30, 40]})
        valid_df, errors = validate_dataframe(df, _validators())
        assert valid_df.height == 1
        assert valid_df["name"].to_list() == ["Alice"]
        assert valid_df["row_number"].to_list() == [1]
        assert errors == [
            {"row_number": 2, "field": "tax_id", "message": "Invalid Taiwan Business ID checksum", "value": "12345672", "type": "checksum"}
        ]

    def test_existing_row_number_column(self) -> None:
        pl = pytest.importorskip("polars")
        from fastapi_field_validators import validate_dataframe

        df = pl.DataFrame({"row_number": [10], "name": [""], "tax_id": ["12345675"], "age": [1]})
        valid_df, errors = validate_dataframe(df, _validators())
        assert valid_df.height == 0
        assert errors[0]["row_number"] == 10

    def test_empty_frame(self) -> None:
        pl = pytest.importorskip("polars")
        from fastapi_field_validators import validate_dataframe

        df = pl.DataFrame({"name": [], "tax_id": [], "age": []}, schema={"name": pl.Utf8, "tax_id": pl.Utf8, "age": pl.Int64})
        valid_df, errors = validate_dataframe(df, _validators(), start_row=2)
        assert valid_df.height == 0
        assert errors == []
