"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: email.py
@DateTime: 2026-10-19
@Docs: Email field validator.
电子邮件字段校验器。
"""

from typing import Any

from fastapi_field_validators.algorithms.network import (
    DISPOSABLE_EMAIL_DOMAINS,
    FREE_EMAIL_DOMAINS,
    email_domain,
    email_domain_in,
    validate_email,
)
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail, text_rules
from fastapi_field_validators.normalization import Casing, normalize_text


def _as_tuple(value: str | tuple[str, ...] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return (value,) if isinstance(value, str) else tuple(value)


class EmailOptions(FieldOptions):
    """
    Email options.
    电子邮件选项。

    Attributes:
        domain: Allowed domain(s).
        domain: 允许的域名。
        domain_blacklist: Rejected domains.
        domain_blacklist: 拒绝的域名。
        allow_subdomains: Subdomains of listed domains also match.
        allow_subdomains: 列出域名的子域名也视为匹配。
        business_only: Reject free mail providers.
        business_only: 拒绝免费邮箱服务商。
        no_disposable: Reject disposable mail providers.
        no_disposable: 拒绝一次性邮箱服务商。
        lowercase: Lower-case the address.
        lowercase: 是否转换为小写。
    """

    domain: str | tuple[str, ...] | None = None
    domain_blacklist: tuple[str, ...] = ()
    allow_subdomains: bool = True
    business_only: bool = False
    no_disposable: bool = False
    lowercase: bool = True
    min_length: int | None = None
    max_length: int | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None


class EmailValidator(FieldValidator[EmailOptions]):
    """Email validator.
    电子邮件校验器。
    """

    kind = "email"
    options_model = EmailOptions

    def normalize(self, value: Any) -> str:
        opts = self.options
        return normalize_text(value, casing=Casing.LOWER if opts.lowercase else Casing.NONE, transform=opts.transform)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = [lambda v: check(validate_email(v), "invalid")]
        rules.extend(
            text_rules(
                min_length=opts.min_length,
                max_length=opts.max_length,
                includes=opts.includes,
                excludes=opts.excludes,
            )
        )
        rules.append(lambda v: check(email_domain(v) is not None, "invalid"))
        if opts.business_only:
            rules.append(lambda v: check(not email_domain_in(email_domain(v), FREE_EMAIL_DOMAINS, False), "businessOnly"))
        if opts.domain_blacklist:
            rules.append(self._not_blacklisted)
        allowed = _as_tuple(opts.domain)
        if allowed:
            rules.append(lambda v: check(email_domain_in(email_domain(v), allowed, opts.allow_subdomains), "domain", domain=allowed))
        if opts.no_disposable:
            rules.append(lambda v: check(not email_domain_in(email_domain(v), DISPOSABLE_EMAIL_DOMAINS, True), "noDisposable"))
        return rules

    def _not_blacklisted(self, value: str) -> ConstraintResult:
        domain = email_domain(value) or ""
        if email_domain_in(domain, self.options.domain_blacklist, self.options.allow_subdomains):
            return fail("domainBlacklist", domain=domain)
        return PASS


def email(required: bool | None = None, /, **options: Any) -> EmailValidator:
    """
    Create an email validator.
    创建电子邮件校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``EmailOptions``.
        **options: 参见 ``EmailOptions``。

    Returns:
        EmailValidator: Validator instance.
        EmailValidator: 校验器实例。
    """
    return EmailValidator.create(required, **options)
