"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batch.py
@DateTime: 2026-10-19
@Docs: Validate many rows with a field-to-validator mapping.
使用“字段 -> 校验器”映射批量校验多行数据。

Error items follow one shape / 错误项格式统一为:
    {"row_number": int, "field": str, "message": str, "value": Any, "type": str}

``type`` is the message key of the first failing rule (e.g. ``required``, ``checksum``).
``type`` 为首个失败规则的消息键（如 ``required``、``checksum``）。
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi_field_validators.core import FieldValidator
from fastapi_field_validators.exceptions import FieldValidatorError, ValidationError

logger = logging.getLogger(__name__)

type ValidatorMap = Mapping[str, FieldValidator[Any]]


@dataclass(slots=True)
class ErrorCollector:
    """Collect row-level validation errors.
    收集行级校验错误。
    """

    errors: list[dict[str, Any]] = field(default_factory=list)

    def add(self, *, row_number: int, field: str, error: ValidationError, value: Any | None = None) -> None:
        """Add one error item built from a ValidationError.
        根据 ValidationError 添加一个错误项。

        Args:
            row_number: Row number.
                行号。
            field: Field name.
                字段名。
            error: The raised validation error.
                抛出的校验错误。
            value: Raw cell value.
                原始单元格值。
        """
        self.errors.append(
            {
                "row_number": int(row_number),
                "field": field,
                "message": error.message,
                "value": value,
                "type": error.key,
            }
        )


def validate_row(
    row: Mapping[str, Any],
    validators: ValidatorMap,
    *,
    row_number: int,
    collector: ErrorCollector,
) -> dict[str, Any]:
    """
    Validate one row and return its cleaned copy.
    校验单行并返回清洗后的副本。

    Columns without a validator are copied unchanged; missing columns read as None.
    没有校验器的列原样复制；缺失的列按 None 读取。

    Args:
        row: Row mapping.
        row: 行映射。
        validators: Field to validator mapping.
        validators: 字段到校验器的映射。
        row_number: Row number used in error items.
        row_number: 错误项中使用的行号。
        collector: Error collector.
        collector: 错误收集器。

    Returns:
        dict[str, Any]: Cleaned row (failed fields keep their raw value).
        dict[str, Any]: 清洗后的行（失败字段保留原值）。
    """
    cleaned = dict(row)
    for name, validator in validators.items():
        raw = row.get(name)
        try:
            cleaned[name] = validator.parse(raw)
        except ValidationError as exc:
            collector.add(row_number=row_number, field=name, error=exc, value=raw)
    return cleaned


def validate_rows(
    rows: Iterable[Mapping[str, Any]],
    validators: ValidatorMap,
    *,
    start_row: int = 1,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """
    Validate rows with pure Python.
    使用纯 Python 批量校验行。

    Args:
        rows: Row mappings.
        rows: 行映射序列。
        validators: Field to validator mapping.
        validators: 字段到校验器的映射。
        start_row: Number of the first row.
        start_row: 首行行号。

    Returns:
        tuple[list[dict[str, Any]], list[dict[str, Any]]]: (valid cleaned rows, errors).
        tuple[list[dict[str, Any]], list[dict[str, Any]]]: （通过校验的清洗行, 错误列表）。
    """
    collector = ErrorCollector()
    valid: list[dict[str, Any]] = []
    for offset, row in enumerate(rows):
        before = len(collector.errors)
        cleaned = validate_row(row, validators, row_number=start_row + offset, collector=collector)
        if len(collector.errors) == before:
            valid.append(cleaned)
    if collector.errors:
        logger.debug("Batch validation found %d error(s)", len(collector.errors))
    return valid, collector.errors


def _load_backend() -> Any:
    try:
        from fastapi_field_validators import batch_polars

        return batch_polars
    except Exception as exc:  # pragma: no cover / 覆盖忽略
        raise FieldValidatorError(
            message="Missing optional dependencies for DataFrame validation. Install extras: polars / 缺少 DataFrame 校验可选依赖，请安装: polars",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def validate_dataframe(
    df: Any,
    validators: ValidatorMap,
    *,
    start_row: int = 1,
) -> tuple[Any, list[dict[str, Any]]]:
    """
    Validate a Polars DataFrame column by column.
    按列校验 Polars 数据框。

    Args:
        df: Input DataFrame.
        df: 输入数据框。
        validators: Field to validator mapping.
        validators: 字段到校验器的映射。
        start_row: Number of the first row.
        start_row: 首行行号。

    Returns:
        tuple[Any, list[dict[str, Any]]]: (DataFrame of valid cleaned rows, errors).
        tuple[Any, list[dict[str, Any]]]: （通过校验的清洗后数据框, 错误列表）。
    """
    backend = _load_backend()
    return backend.validate_dataframe(df, validators, start_row=start_row)
