"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: boolean.py
@DateTime: 2026-10-19
@Docs: Boolean field validator.
布尔字段校验器。
"""

from collections.abc import Sequence
from typing import Any

from fastapi_field_validators.core import FieldOptions, FieldValidator, Rule, check

DEFAULT_TRUTHY_VALUES: tuple[Any, ...] = (True, "true", 1, "1", "yes", "on")
DEFAULT_FALSY_VALUES: tuple[Any, ...] = (False, "false", 0, "0", "no", "off")


def _token_in(value: Any, tokens: Sequence[Any]) -> bool:
    # exact type match so that 1 != True and "TRUE" != "true"
    return any(type(value) is type(token) and value == token for token in tokens)


class BooleanOptions(FieldOptions):
    """
    Boolean options.
    布尔选项。

    Attributes:
        strict: Accept only native booleans.
        strict: 仅接受原生布尔值。
        truthy_values: Tokens mapped to True.
        truthy_values: 映射为 True 的标记。
        falsy_values: Tokens mapped to False.
        falsy_values: 映射为 False 的标记。
        should_be: Required final value.
        should_be: 要求的最终值。
    """

    strict: bool = False
    truthy_values: tuple[Any, ...] = DEFAULT_TRUTHY_VALUES
    falsy_values: tuple[Any, ...] = DEFAULT_FALSY_VALUES
    should_be: bool | None = None


class BooleanValidator(FieldValidator[BooleanOptions]):
    """Boolean validator.
    布尔校验器。
    """

    kind = "boolean"
    options_model = BooleanOptions

    def coerce(self, value: Any) -> bool:
        opts = self.options
        if opts.strict:
            if not isinstance(value, bool):
                raise self.error("invalid")
            result = value
        elif _token_in(value, opts.truthy_values):
            result = True
        elif _token_in(value, opts.falsy_values):
            result = False
        else:
            raise self.error("invalid")
        if opts.transform is not None:
            result = opts.transform(result)
        return result

    def build_rules(self) -> list[Rule]:
        should_be = self.options.should_be
        if should_be is True:
            return [lambda v: check(v is True, "shouldBeTrue")]
        if should_be is False:
            return [lambda v: check(v is False, "shouldBeFalse")]
        return []


def boolean(required: bool | None = None, /, **options: Any) -> BooleanValidator:
    """
    Create a boolean validator.
    创建布尔校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``BooleanOptions``.
        **options: 参见 ``BooleanOptions``。

    Returns:
        BooleanValidator: Validator instance.
        BooleanValidator: 校验器实例。

    Examples:
        >>> boolean().parse("on")
        True
    """
    return BooleanValidator.create(required, **options)
