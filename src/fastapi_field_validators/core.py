"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: core.py
@DateTime: 2026-10-19
@Docs: Generic validation pipeline shared by every field validator.
所有字段校验器共享的通用校验流水线。

Pipeline / 流水线:
    normalize -> empty/default -> whitelist -> coerce -> rules (first failure) -> finalize
    规范化 -> 空值/默认值 -> 白名单 -> 类型转换 -> 规则（首个失败即终止）-> 输出
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar, Self

import pydantic
from pydantic import BaseModel, ConfigDict

from fastapi_field_validators.exceptions import ConfigurationError, ValidationError
from fastapi_field_validators.messages import resolve_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConstraintResult:
    """
    Outcome of one rule.
    单条规则的结果。

    Attributes:
        ok: Whether the rule passed.
        ok: 规则是否通过。
        key: Message key reported on failure.
        key: 失败时上报的消息键。
        params: Interpolation parameters for the message.
        params: 消息插值参数。
    """

    ok: bool
    key: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)


PASS = ConstraintResult(ok=True)

type Rule = Callable[[Any], ConstraintResult]


def fail(key: str, **params: Any) -> ConstraintResult:
    """Build a failing result.
    构建失败结果。
    """
    return ConstraintResult(ok=False, key=key, params=params)


def check(condition: bool, key: str, **params: Any) -> ConstraintResult:
    """Return PASS when the condition holds, else a failure for ``key``.
    条件成立时返回 PASS，否则返回 ``key`` 对应的失败结果。
    """
    return PASS if condition else fail(key, **params)


def first_failure(rules: Iterable[Rule], value: Any) -> ConstraintResult | None:
    """
    Run rules in order and stop at the first failure.
    按顺序执行规则，遇到首个失败即停止。

    Args:
        rules: Ordered rules.
        rules: 有序规则列表。
        value: Coerced value.
        value: 已转换的值。

    Returns:
        ConstraintResult | None: The first failure, or None if all pass.
        ConstraintResult | None: 首个失败结果；全部通过时返回 None。
    """
    for rule in rules:
        result = rule(value)
        if not result.ok:
            return result
    return None


class FieldOptions(BaseModel):
    """
    Options shared by every validator kind.
    所有校验器类型共享的选项。

    Attributes:
        required: Reject empty input when no default is set.
        required: 未设置默认值时拒绝空输入。
        default_value: Substituted for empty input and then validated.
        default_value: 空输入时替换使用的默认值（仍需校验）。
        transform: Caller transform, the last normalization step.
        transform: 调用方转换函数，规范化的最后一步。
        i18n: Message overrides ``{locale: {key: template}}``.
        i18n: 消息覆盖 ``{语言: {键: 模板}}``。
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    required: bool = False
    default_value: Any = None
    transform: Callable[[Any], Any] | None = None
    i18n: dict[str, dict[str, str]] | None = None


class WhitelistOptions(FieldOptions):
    """Options for kinds that accept a whitelist.
    支持白名单的校验器选项。
    """

    whitelist: tuple[str, ...] = ()
    whitelist_only: bool = False


class WhitelistMode(StrEnum):
    """How a kind treats its whitelist.
    校验器对白名单的处理方式。
    """

    NONE = "none"
    BYPASS = "bypass"
    EXCLUSIVE = "exclusive"


class FieldValidator[O: FieldOptions]:
    """
    Base validator running the shared pipeline.
    执行共享流水线的校验器基类。

    Subclasses set ``kind``/``options_model`` and override the hooks
    ``normalize``, ``coerce``, ``build_rules`` and ``finalize``.
    子类设置 ``kind``/``options_model`` 并覆盖钩子
    ``normalize``、``coerce``、``build_rules`` 与 ``finalize``。
    """

    kind: ClassVar[str] = ""
    options_model: ClassVar[type[FieldOptions]] = FieldOptions
    whitelist_mode: ClassVar[WhitelistMode] = WhitelistMode.NONE
    default_required: ClassVar[bool] = False

    def __init__(self, options: O) -> None:
        self.options = options
        self._rules: tuple[Rule, ...] = tuple(self.build_rules())

    @classmethod
    def create(cls, required: bool | None = None, /, **options: Any) -> Self:
        """
        Build a validator from keyword options.
        根据关键字选项构建校验器。

        Args:
            required: Whether empty input is rejected; kind default when None.
            required: 是否拒绝空输入；为 None 时使用类型默认值。
            **options: Kind-specific options.
            **options: 类型专属选项。

        Returns:
            Self: Validator instance.
            Self: 校验器实例。

        Raises:
            ConfigurationError: If options are unknown or malformed.
            ConfigurationError: 选项未知或格式错误时抛出。
        """
        if "required" in options:
            explicit = options.pop("required")
            required = explicit if required is None else required
        data = dict(options)
        data["required"] = cls.default_required if required is None else bool(required)
        try:
            parsed = cls.options_model(**data)
        except pydantic.ValidationError as exc:
            raise ConfigurationError(
                message=f"Invalid options for {cls.kind} validator / {cls.kind} 校验器选项无效",
                details=exc.errors(include_url=False, include_context=False),
                error_code="invalid_options",
            ) from exc
        return cls(parsed)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(required={self.options.required})"

    @property
    def whitelist(self) -> tuple[str, ...]:
        return tuple(getattr(self.options, "whitelist", ()) or ())

    @property
    def whitelist_only(self) -> bool:
        if self.whitelist_mode is WhitelistMode.EXCLUSIVE:
            return True
        return bool(getattr(self.options, "whitelist_only", False))

    def error(self, key: str, **params: Any) -> ValidationError:
        """
        Build a localized validation error.
        构建本地化校验错误。

        The message is resolved with the locale active right now.
        消息按当前生效的语言解析。
        """
        message = resolve_message(self.kind, key, params, overrides=self.options.i18n)
        return ValidationError(message=message, key=key, params=params)

    def parse(self, value: Any) -> Any:
        """
        Validate one value and return the normalized result.
        校验单个值并返回规范化结果。

        Args:
            value: Raw input.
            value: 原始输入。

        Returns:
            Any: Normalized value, or None for optional empty input.
            Any: 规范化后的值；可选字段的空输入返回 None。

        Raises:
            ValidationError: On the first failing rule.
            ValidationError: 首个失败规则时抛出。
        """
        candidate = None if self.is_empty(value) else self.normalize(value)
        if self.is_empty(candidate):
            return self._resolve_empty()
        return self.validate(candidate)

    def _resolve_empty(self) -> Any:
        opts = self.options
        if not opts.required and self.whitelist_mode is not WhitelistMode.NONE and "" in self.whitelist:
            return ""
        if opts.default_value is None:
            if opts.required:
                raise self.error("required")
            return None
        return self.validate(opts.default_value, from_default=True)

    def validate(self, value: Any, *, from_default: bool = False) -> Any:
        """
        Run whitelist, coercion and rules on a non-empty value.
        对非空值执行白名单、类型转换与规则校验。
        """
        whitelist = self.whitelist
        if self.whitelist_mode is not WhitelistMode.NONE and whitelist:
            if value in whitelist:
                return value
            if self.whitelist_only:
                if from_default:
                    return value
                raise self.error("notInWhitelist")
        coerced = self.coerce(value)
        failure = first_failure(self._rules, coerced)
        if failure is not None:
            raise self.error(failure.key, **failure.params)
        return self.finalize(coerced)

    def is_valid(self, value: Any) -> bool:
        """Return whether ``parse`` would succeed.
        返回 ``parse`` 是否会成功。
        """
        try:
            self.parse(value)
        except ValidationError:
            return False
        return True

    # Hooks / 钩子

    def is_empty(self, value: Any) -> bool:
        return value is None or value == ""

    def normalize(self, value: Any) -> Any:
        return value

    def coerce(self, value: Any) -> Any:
        return value

    def build_rules(self) -> Sequence[Rule]:
        return ()

    def finalize(self, value: Any) -> Any:
        return value


def text_rules(
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    starts_with: str | None = None,
    ends_with: str | None = None,
    includes: str | None = None,
    excludes: str | Sequence[str] | None = None,
    min_key: str = "minLength",
    max_key: str = "maxLength",
) -> list[Rule]:
    """
    Build the common length and membership rules.
    构建通用的长度与包含关系规则。

    Args:
        min_length: Minimum length.
        min_length: 最小长度。
        max_length: Maximum length.
        max_length: 最大长度。
        starts_with: Required prefix.
        starts_with: 必需前缀。
        ends_with: Required suffix.
        ends_with: 必需后缀。
        includes: Required substring.
        includes: 必须包含的子串。
        excludes: Forbidden substring(s).
        excludes: 禁止出现的子串。
        min_key: Message key (and param name) for the minimum.
        min_key: 最小长度使用的消息键（同时为参数名）。
        max_key: Message key (and param name) for the maximum.
        max_key: 最大长度使用的消息键（同时为参数名）。

    Returns:
        list[Rule]: Rules in length, prefix, suffix, includes, excludes order.
        list[Rule]: 按长度、前缀、后缀、包含、排除顺序排列的规则。
    """
    rules: list[Rule] = []
    if min_length is not None:
        rules.append(lambda v: check(len(v) >= min_length, min_key, **{min_key: min_length}))
    if max_length is not None:
        rules.append(lambda v: check(len(v) <= max_length, max_key, **{max_key: max_length}))
    if starts_with is not None:
        rules.append(lambda v: check(v.startswith(starts_with), "startsWith", startsWith=starts_with))
    if ends_with is not None:
        rules.append(lambda v: check(v.endswith(ends_with), "endsWith", endsWith=ends_with))
    if includes is not None:
        rules.append(lambda v: check(includes in v, "includes", includes=includes))
    if excludes is not None:
        rules.append(excludes_rule(excludes))
    return rules


def excludes_rule(excludes: str | Sequence[str], *, key: str = "excludes") -> Rule:
    """Reject values containing any forbidden substring.
    拒绝包含任一禁止子串的值。
    """
    banned = [excludes] if isinstance(excludes, str) else list(excludes)

    def _rule(value: str) -> ConstraintResult:
        for item in banned:
            if item in value:
                return fail(key, excludes=item)
        return PASS

    return _rule
