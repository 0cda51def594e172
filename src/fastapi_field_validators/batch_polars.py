"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batch_polars.py
@DateTime: 2026-10-19
@Docs: Polars-backed batch validation.
基于 Polars 的批量校验。
"""

from typing import Any

import polars as pl

from fastapi_field_validators.batch import ErrorCollector, ValidatorMap, validate_row

ROW_NUMBER = "row_number"


def validate_dataframe(
    df: pl.DataFrame,
    validators: ValidatorMap,
    *,
    start_row: int = 1,
) -> tuple[pl.DataFrame, list[dict[str, Any]]]:
    """
    Validate a DataFrame and keep the rows that pass.
    校验数据框并保留通过的行。

    A ``row_number`` column is used when present, otherwise one is added from ``start_row``.
    若存在 ``row_number`` 列则直接使用，否则从 ``start_row`` 开始生成。

    Args:
        df: Input DataFrame.
        df: 输入数据框。
        validators: Field to validator mapping.
        validators: 字段到校验器的映射。
        start_row: Number of the first row.
        start_row: 首行行号。

    Returns:
        tuple[pl.DataFrame, list[dict[str, Any]]]: (valid cleaned rows, errors).
        tuple[pl.DataFrame, list[dict[str, Any]]]: （通过校验的清洗行, 错误列表）。
    """
    if ROW_NUMBER not in df.columns:
        df = df.with_row_index(ROW_NUMBER, offset=start_row)
    collector = ErrorCollector()
    if df.is_empty():
        return df, collector.errors
    cleaned: list[dict[str, Any]] = []
    for row in df.to_dicts():
        row_number = int(row.get(ROW_NUMBER) or 0)
        before = len(collector.errors)
        out = validate_row(row, validators, row_number=row_number, collector=collector)
        if len(collector.errors) == before:
            cleaned.append(out)
    if not cleaned:
        return df.clear(), collector.errors
    return pl.DataFrame(cleaned, infer_schema_length=None), collector.errors
