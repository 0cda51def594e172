"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: url.py
@DateTime: 2026-10-19
@Docs: URL field validator.
URL 字段校验器。

Check order / 检查顺序:
    parse -> length -> includes/excludes -> protocol -> domain allow/block
    -> port allow/block -> path -> query -> fragment -> localhost
"""

from dataclasses import dataclass
from typing import Any

from fastapi_field_validators.algorithms.network import ParsedUrl, first_matching_domain, is_local_host, parse_url
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail, text_rules
from fastapi_field_validators.normalization import normalize_text


@dataclass(frozen=True, slots=True)
class UrlValue:
    """Raw text plus parsed components.
    原始文本与解析后的组成部分。
    """

    text: str
    parts: ParsedUrl


class UrlOptions(FieldOptions):
    """
    URL options.
    URL 选项。

    Attributes:
        protocols: Allowed schemes (without ``:``).
        protocols: 允许的协议（不含 ``:``）。
        allowed_domains: Hostnames (and their subdomains) that are accepted.
        allowed_domains: 接受的主机名（含子域名）。
        blocked_domains: Hostnames (and their subdomains) that are rejected.
        blocked_domains: 拒绝的主机名（含子域名）。
        allowed_ports: Accepted ports; scheme defaults apply when omitted.
        allowed_ports: 接受的端口；未写端口时使用协议默认端口。
        blocked_ports: Rejected ports.
        blocked_ports: 拒绝的端口。
        path_starts_with: Required path prefix.
        path_starts_with: 必需的路径前缀。
        path_ends_with: Required path suffix.
        path_ends_with: 必需的路径后缀。
        must_have_query: Require a query string.
        must_have_query: 要求存在查询字符串。
        must_not_have_query: Forbid a query string.
        must_not_have_query: 禁止查询字符串。
        must_have_fragment: Require a fragment.
        must_have_fragment: 要求存在片段。
        must_not_have_fragment: Forbid a fragment.
        must_not_have_fragment: 禁止片段。
        allow_localhost: Accept localhost and private hosts.
        allow_localhost: 是否接受 localhost 与私有地址。
        block_localhost: Explicitly block localhost and private hosts.
        block_localhost: 显式阻止 localhost 与私有地址。
    """

    min_length: int | None = None
    max_length: int | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    protocols: tuple[str, ...] = ()
    allowed_domains: tuple[str, ...] = ()
    blocked_domains: tuple[str, ...] = ()
    allowed_ports: tuple[int, ...] = ()
    blocked_ports: tuple[int, ...] = ()
    path_starts_with: str | None = None
    path_ends_with: str | None = None
    must_have_query: bool = False
    must_not_have_query: bool = False
    must_have_fragment: bool = False
    must_not_have_fragment: bool = False
    allow_localhost: bool = True
    block_localhost: bool = False


def _on_text(rule: Rule) -> Rule:
    return lambda u: rule(u.text)


class UrlValidator(FieldValidator[UrlOptions]):
    """URL validator.
    URL 校验器。
    """

    kind = "url"
    options_model = UrlOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def coerce(self, value: Any) -> UrlValue:
        text = str(value)
        parts = parse_url(text)
        if parts is None:
            raise self.error("invalid")
        return UrlValue(text=text, parts=parts)

    def finalize(self, value: UrlValue) -> str:
        return value.text

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = [
            _on_text(r)
            for r in text_rules(
                min_length=opts.min_length,
                max_length=opts.max_length,
                includes=opts.includes,
                excludes=opts.excludes,
                min_key="min",
                max_key="max",
            )
        ]
        if opts.protocols:
            allowed = tuple(p.lower().rstrip(":") for p in opts.protocols)
            rules.append(lambda u: check(u.parts.scheme in allowed, "protocol", protocols=opts.protocols))
        if opts.allowed_domains:
            rules.append(
                lambda u: check(
                    first_matching_domain(u.parts.hostname, opts.allowed_domains) is not None,
                    "domain",
                    domains=opts.allowed_domains,
                )
            )
        if opts.blocked_domains:
            rules.append(self._domain_not_blocked)
        if opts.allowed_ports:
            rules.append(lambda u: check(u.parts.effective_port in opts.allowed_ports, "port", ports=opts.allowed_ports))
        if opts.blocked_ports:
            rules.append(
                lambda u: check(u.parts.effective_port not in opts.blocked_ports, "portBlacklist", port=u.parts.effective_port)
            )
        if opts.path_starts_with is not None:
            rules.append(lambda u: check(u.parts.path.startswith(opts.path_starts_with), "pathStartsWith", path=opts.path_starts_with))
        if opts.path_ends_with is not None:
            rules.append(lambda u: check(u.parts.path.endswith(opts.path_ends_with), "pathEndsWith", path=opts.path_ends_with))
        if opts.must_have_query:
            rules.append(lambda u: check(bool(u.parts.query), "hasQuery"))
        if opts.must_not_have_query:
            rules.append(lambda u: check(not u.parts.query, "noQuery"))
        if opts.must_have_fragment:
            rules.append(lambda u: check(bool(u.parts.fragment), "hasFragment"))
        if opts.must_not_have_fragment:
            rules.append(lambda u: check(not u.parts.fragment, "noFragment"))
        if opts.block_localhost:
            rules.append(lambda u: check(not is_local_host(u.parts.hostname), "noLocalhost"))
        if not opts.allow_localhost:
            rules.append(lambda u: check(not is_local_host(u.parts.hostname), "localhost"))
        return rules

    def _domain_not_blocked(self, value: UrlValue) -> ConstraintResult:
        blocked = first_matching_domain(value.parts.hostname, self.options.blocked_domains)
        return PASS if blocked is None else fail("domainBlacklist", domain=value.parts.hostname)


def url(required: bool | None = None, /, **options: Any) -> UrlValidator:
    """
    Create a URL validator.
    创建 URL 校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``UrlOptions``.
        **options: 参见 ``UrlOptions``。

    Returns:
        UrlValidator: Validator instance.
        UrlValidator: 校验器实例。

    Examples:
        >>> url(protocols=["https"]).parse("https://example.com/a")
        'https://example.com/a'
    """
    return UrlValidator.create(required, **options)
