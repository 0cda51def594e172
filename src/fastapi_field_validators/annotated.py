"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: annotated.py
@DateTime: 2026-10-19
@Docs: Use field validators inside pydantic models and FastAPI schemas.
在 pydantic 模型与 FastAPI 模型中使用字段校验器。

Examples:
    >>> from pydantic import BaseModel
    >>> from fastapi_field_validators import annotated, business_id
    >>> class Company(BaseModel):
    ...     tax_id: annotated(business_id(True), str)
    >>> Company(tax_id="12345675").tax_id
    '12345675'
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

from fastapi_field_validators.core import FieldValidator
from fastapi_field_validators.exceptions import ValidationError


def as_pydantic_validator(validator: FieldValidator[Any]) -> Callable[[Any], Any]:
    """
    Wrap ``validator.parse`` so failures surface as pydantic errors.
    包装 ``validator.parse``，使失败以 pydantic 错误形式抛出。

    The pydantic error type is ``field_<key>`` and its message is the localized text.
    pydantic 错误类型为 ``field_<key>``，消息为本地化文本。

    Args:
        validator: Field validator.
        validator: 字段校验器。

    Returns:
        Callable[[Any], Any]: Function usable with ``BeforeValidator``.
        Callable[[Any], Any]: 可用于 ``BeforeValidator`` 的函数。
    """

    def _run(value: Any) -> Any:
        try:
            return validator.parse(value)
        except ValidationError as exc:
            raise PydanticCustomError(
                f"field_{exc.key}",
                exc.message,
                {"key": exc.key, "kind": validator.kind},
            ) from exc

    return _run


def annotated(validator: FieldValidator[Any], annotation: Any = Any) -> Any:
    """
    Build an ``Annotated`` type that runs ``validator`` before pydantic validation.
    构建在 pydantic 校验前执行 ``validator`` 的 ``Annotated`` 类型。

    Args:
        validator: Field validator.
        validator: 字段校验器。
        annotation: Declared Python type of the parsed value.
        annotation: 解析结果声明的 Python 类型。

    Returns:
        Any: ``Annotated[annotation, BeforeValidator(...)]``.
        Any: ``Annotated[annotation, BeforeValidator(...)]``。
    """
    return Annotated[annotation, BeforeValidator(as_pydantic_validator(validator))]
