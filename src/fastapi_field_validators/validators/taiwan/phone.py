"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: phone.py
@DateTime: 2026-10-19
@Docs: Taiwan mobile, telephone and fax validators.
台湾手机、电话与传真号码校验器。

Whitelist handling / 白名单处理:
    - mobile: whitelisted values bypass the format check.
      手机：白名单值跳过格式检查。
    - tel / fax: a non-empty whitelist is exclusive.
      电话/传真：非空白名单为独占模式。
"""

from collections.abc import Callable
from typing import Any, ClassVar

from fastapi_field_validators.algorithms.taiwan_phone import validate_taiwan_fax, validate_taiwan_mobile, validate_taiwan_tel
from fastapi_field_validators.core import FieldValidator, Rule, WhitelistMode, WhitelistOptions, check
from fastapi_field_validators.normalization import normalize_text


class PhoneOptions(WhitelistOptions):
    """
    Phone options.
    电话号码选项。

    Attributes:
        whitelist: Values accepted verbatim (compared after ``transform``).
        whitelist: 原样接受的值（在 ``transform`` 之后比较）。
    """


class _PhoneValidator(FieldValidator[PhoneOptions]):
    options_model = PhoneOptions
    check_format: ClassVar[Callable[[str], bool]]

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        checker = type(self).check_format
        return [lambda v: check(checker(v), "invalid")]


class MobileValidator(_PhoneValidator):
    """Taiwan mobile validator (``09xxxxxxxx``).
    台湾手机号码校验器（``09xxxxxxxx``）。
    """

    kind = "mobile"
    whitelist_mode = WhitelistMode.BYPASS
    check_format = staticmethod(validate_taiwan_mobile)


class TelValidator(_PhoneValidator):
    """Taiwan landline validator.
    台湾市话号码校验器。
    """

    kind = "tel"
    whitelist_mode = WhitelistMode.EXCLUSIVE
    check_format = staticmethod(validate_taiwan_tel)


class FaxValidator(_PhoneValidator):
    """Taiwan fax validator.
    台湾传真号码校验器。
    """

    kind = "fax"
    whitelist_mode = WhitelistMode.EXCLUSIVE
    check_format = staticmethod(validate_taiwan_fax)


def tw_mobile(required: bool | None = None, /, **options: Any) -> MobileValidator:
    """
    Create a Taiwan mobile validator.
    创建台湾手机号码校验器。

    Examples:
        >>> tw_mobile().parse(" 0912345678 ")
        '0912345678'
    """
    return MobileValidator.create(required, **options)


def tw_tel(required: bool | None = None, /, **options: Any) -> TelValidator:
    """Create a Taiwan landline validator.
    创建台湾市话号码校验器。
    """
    return TelValidator.create(required, **options)


def tw_fax(required: bool | None = None, /, **options: Any) -> FaxValidator:
    """Create a Taiwan fax validator.
    创建台湾传真号码校验器。
    """
    return FaxValidator.create(required, **options)
