"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: ip.py
@DateTime: 2026-10-19
@Docs: IP address field validator.
IP 地址字段校验器。
"""

from typing import Any

from fastapi_field_validators.algorithms.network import IpVersion, validate_ipv4, validate_ipv6
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail
from fastapi_field_validators.normalization import normalize_text


class IpOptions(FieldOptions):
    """
    IP options.
    IP 选项。

    Attributes:
        version: ``v4``, ``v6`` or ``any``.
        version: ``v4``、``v6`` 或 ``any``。
        allow_cidr: Accept a ``/prefix`` suffix.
        allow_cidr: 是否接受 ``/前缀`` 后缀。
        whitelist: Exact values that are accepted; checked after the format.
        whitelist: 接受的精确值；在格式校验之后检查。
    """

    version: IpVersion = IpVersion.ANY
    allow_cidr: bool = False
    whitelist: tuple[str, ...] = ()


class IpValidator(FieldValidator[IpOptions]):
    """IP address validator.
    IP 地址校验器。
    """

    kind = "ip"
    options_model = IpOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        rules: list[Rule] = [self._address_ok]
        allowed = self.options.whitelist
        if allowed:
            rules.append(lambda v: check(v in allowed, "notInWhitelist"))
        return rules

    def _address_ok(self, value: str) -> ConstraintResult:
        address, slash, prefix = value.partition("/")
        if slash and not self.options.allow_cidr:
            return fail("invalid")
        is_v4 = validate_ipv4(address)
        is_v6 = validate_ipv6(address)
        match self.options.version:
            case IpVersion.V4 if not is_v4:
                return fail("notIPv4")
            case IpVersion.V6 if not is_v6:
                return fail("notIPv6")
            case IpVersion.ANY if not (is_v4 or is_v6):
                return fail("invalid")
        if slash:
            if not prefix.isascii() or not prefix.isdigit():
                return fail("invalid")
            if int(prefix) > (32 if is_v4 else 128):
                return fail("invalid")
        return PASS


def ip(required: bool | None = None, /, **options: Any) -> IpValidator:
    """
    Create an IP address validator.
    创建 IP 地址校验器。

    Examples:
        >>> ip(allow_cidr=True).parse("10.0.0.0/8")
        '10.0.0.0/8'
    """
    return IpValidator.create(required, **options)
