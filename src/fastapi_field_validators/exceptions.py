"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Field validator error hierarchy.
字段校验异常体系。
"""

from typing import Any


class FieldValidatorError(Exception):
    """
    Field Validator Errors.
    字段校验器异常。

    Errors raised by validator construction or parsing.
    校验器构建或解析过程中抛出的异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "field_validator_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class ValidationError(FieldValidatorError):
    """
    Validation error raised by ``parse``.
    ``parse`` 抛出的校验错误。

    The first failing rule becomes the single reported issue.
    第一个失败的规则成为唯一上报的问题。

    Attributes:
        issues: Issue list ``[{message, path, code}]`` in evaluation order.
        issues: 按评估顺序排列的问题列表 ``[{message, path, code}]``。
        key: Message key of the first issue.
        key: 第一个问题的消息键。
        params: Interpolation params of the first issue.
        params: 第一个问题的插值参数。
    """

    def __init__(
        self,
        *,
        message: str,
        key: str,
        params: dict[str, Any] | None = None,
        path: list[str | int] | None = None,
        status_code: int = 422,
    ) -> None:
        self.key = key
        self.params = dict(params or {})
        self.issues: list[dict[str, Any]] = [{"message": message, "path": list(path or []), "code": key}]
        super().__init__(
            message=message,
            status_code=status_code,
            details=self.issues,
            error_code="validation_error",
        )


class ConfigurationError(FieldValidatorError):
    """
    Invalid validator options.
    校验器选项无效。
    """
