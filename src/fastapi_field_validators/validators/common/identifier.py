"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: identifier.py
@DateTime: 2026-10-19
@Docs: Identifier (UUID, ObjectId, Snowflake, ...) field validator.
标识符（UUID、ObjectId、Snowflake 等）字段校验器。
"""

import re
from typing import Any

from fastapi_field_validators.algorithms.identifiers import IdType, detect_id_type, validate_id_type
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail
from fastapi_field_validators.normalization import stringify

_CASE_PRESERVING_TYPES = frozenset({IdType.UUID, IdType.OBJECT_ID})


class IdOptions(FieldOptions):
    """
    Identifier options.
    标识符选项。

    Attributes:
        type: Expected kind; ``auto`` accepts any known kind.
        type: 期望类型；``auto`` 接受任何已知类型。
        allowed_types: Accepted kinds; takes precedence over ``type``.
        allowed_types: 接受的类型列表；优先于 ``type``。
        custom_regex: Replaces kind detection entirely.
        custom_regex: 完全替代类型检测。
        case_sensitive: When False, content checks ignore case and the
            output is lower-cased (UUID/ObjectId keep their case).
        case_sensitive: 为 False 时内容检查忽略大小写，输出转为小写（UUID/ObjectId 保持原样）。
    """

    type: IdType = IdType.AUTO
    min_length: int | None = None
    max_length: int | None = None
    allowed_types: tuple[IdType, ...] = ()
    custom_regex: re.Pattern[str] | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    case_sensitive: bool = True


class IdValidator(FieldValidator[IdOptions]):
    """Identifier validator; ``numeric`` ids are returned as ``int``.
    标识符校验器；``numeric`` 类型返回 ``int``。
    """

    kind = "id"
    options_model = IdOptions
    default_required = True

    def normalize(self, value: Any) -> str:
        text = stringify(value)
        if self.options.transform is not None:
            text = self.options.transform(text)
        return text

    def _fold(self, value: str) -> str:
        return value if self.options.case_sensitive else value.lower()

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = []
        if opts.min_length is not None:
            rules.append(lambda v: check(len(v) >= opts.min_length, "minLength", minLength=opts.min_length))
        if opts.max_length is not None:
            rules.append(lambda v: check(len(v) <= opts.max_length, "maxLength", maxLength=opts.max_length))
        content_checks = any(x is not None for x in (opts.starts_with, opts.ends_with, opts.includes, opts.excludes))
        if opts.custom_regex is not None:
            pattern = opts.custom_regex
            rules.append(lambda v: check(pattern.search(v) is not None, "customFormat"))
        elif not content_checks or opts.type is not IdType.AUTO:
            rules.append(self._kind_ok)
        if opts.starts_with is not None:
            rules.append(lambda v: check(self._fold(v).startswith(self._fold(opts.starts_with)), "startsWith", startsWith=opts.starts_with))
        if opts.ends_with is not None:
            rules.append(lambda v: check(self._fold(v).endswith(self._fold(opts.ends_with)), "endsWith", endsWith=opts.ends_with))
        if opts.includes is not None:
            rules.append(lambda v: check(self._fold(opts.includes) in self._fold(v), "includes", includes=opts.includes))
        if opts.excludes is not None:
            rules.append(self._excludes_ok)
        return rules

    def _kind_ok(self, value: str) -> ConstraintResult:
        opts = self.options
        if opts.allowed_types:
            if any(validate_id_type(value, t) for t in opts.allowed_types):
                return PASS
            return fail("allowedTypes", allowedTypes=[t.value for t in opts.allowed_types])
        if opts.type is IdType.AUTO:
            return check(detect_id_type(value) is not None, "invalid")
        return check(validate_id_type(value, opts.type), opts.type.value)

    def _excludes_ok(self, value: str) -> ConstraintResult:
        excludes = self.options.excludes
        banned = [excludes] if isinstance(excludes, str) else list(excludes or ())
        folded = self._fold(value)
        for item in banned:
            if self._fold(item) in folded:
                return fail("excludes", excludes=item)
        return PASS

    def finalize(self, value: str) -> str | int:
        opts = self.options
        if opts.type is IdType.NUMERIC and value.isascii() and value.isdecimal():
            return int(value)
        if not opts.case_sensitive and opts.type not in _CASE_PRESERVING_TYPES:
            return value.lower()
        return value


def identifier(required: bool | None = None, /, **options: Any) -> IdValidator:
    """
    Create an identifier validator (required by default).
    创建标识符校验器（默认必填）。

    Examples:
        >>> identifier(type="numeric").parse("42")
        42
    """
    return IdValidator.create(required, **options)
