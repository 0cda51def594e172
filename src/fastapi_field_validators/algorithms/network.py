"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: network.py
@DateTime: 2026-10-19
@Docs: URL, email and IP address grammars.
URL、电子邮件与 IP 地址语法。
"""

import ipaddress
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*\Z")
_HOST_RE = re.compile(r"^[A-Za-z0-9\-._~%!$&'()*+,;=]+\Z")
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss", "file"})


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """
    URL components used by rules.
    规则使用的 URL 组成部分。
    """

    scheme: str
    hostname: str
    port: int | None
    path: str
    query: str
    fragment: str

    @property
    def effective_port(self) -> int:
        """Explicit port, else 443 for https and 80 otherwise.
        显式端口；否则 https 为 443，其余为 80。
        """
        if self.port is not None:
            return self.port
        return 443 if self.scheme == "https" else 80


def parse_url(value: str) -> ParsedUrl | None:
    """
    Parse an absolute URL.
    解析绝对 URL。

    Args:
        value: URL string.
        value: URL 字符串。

    Returns:
        ParsedUrl | None: Components, or None when the URL is malformed.
        ParsedUrl | None: 组成部分；格式错误时返回 None。
    """
    if not value or any(c.isspace() for c in value):
        return None
    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME_RE.match(scheme) or not value.lower().startswith(f"{scheme}:"):
        return None
    hostname = (parts.hostname or "").lower()
    if scheme in _SPECIAL_SCHEMES and scheme != "file":
        if not hostname:
            return None
        if ":" in hostname:
            if not validate_ipv6(hostname):
                return None
        elif not _HOST_RE.match(hostname):
            return None
    elif not hostname and not parts.path:
        return None
    path = parts.path
    if scheme in _SPECIAL_SCHEMES and not path:
        path = "/"
    return ParsedUrl(
        scheme=scheme,
        hostname=hostname,
        port=port,
        path=path,
        query=parts.query,
        fragment=parts.fragment,
    )


def domain_matches(hostname: str, domain: str) -> bool:
    """Exact match or subdomain match.
    完全匹配或子域名匹配。
    """
    d = domain.lower()
    return hostname == d or hostname.endswith(f".{d}")


def first_matching_domain(hostname: str, domains: Iterable[str]) -> str | None:
    """Return the first domain that matches the hostname.
    返回第一个与主机名匹配的域名。
    """
    for domain in domains:
        if domain_matches(hostname, domain):
            return domain
    return None


def is_local_host(hostname: str) -> bool:
    """
    Detect localhost, loopback and private-range hosts.
    识别 localhost、回环地址与私有网段主机。
    """
    host = hostname.strip("[]").lower()
    if host == "localhost" or host.endswith(".localhost"):
        return True
    try:
        addr = ipaddress.ip_address(host)
    except ValueError:
        return False
    return addr.is_loopback or addr.is_private


# Same shape as common HTML5 / zod email checks.
EMAIL_RE = re.compile(r"^(?!\.)(?!.*\.\.)([A-Za-z0-9_'+\-.]*)[A-Za-z0-9_+\-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}\Z")

FREE_EMAIL_DOMAINS: tuple[str, ...] = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "icloud.com",
    "aol.com",
    "protonmail.com",
    "zoho.com",
)

DISPOSABLE_EMAIL_DOMAINS: tuple[str, ...] = (
    "10minutemail.com",
    "tempmail.org",
    "guerrillamail.com",
    "mailinator.com",
    "yopmail.com",
    "temp-mail.org",
    "throwaway.email",
    "getnada.com",
    "maildrop.cc",
)


def validate_email(value: str) -> bool:
    """Check the email address shape.
    校验电子邮件地址格式。
    """
    return bool(EMAIL_RE.match(value))


def email_domain(value: str) -> str | None:
    """Return the lower-cased domain part.
    返回小写的域名部分。
    """
    _, sep, domain = value.rpartition("@")
    return domain.lower() if sep and domain else None


def email_domain_in(domain: str, candidates: Iterable[str], allow_subdomains: bool = True) -> bool:
    """Match an email domain against a list.
    将邮箱域名与列表进行匹配。
    """
    for candidate in candidates:
        c = candidate.lower()
        if domain == c or (allow_subdomains and domain.endswith(f".{c}")):
            return True
    return False


class IpVersion(StrEnum):
    """IP versions.
    IP 版本。
    """

    V4 = "v4"
    V6 = "v6"
    ANY = "any"


def validate_ipv4(value: str) -> bool:
    """
    Dotted-quad IPv4 without leading zeros.
    不含前导零的点分十进制 IPv4。
    """
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def validate_ipv6(value: str) -> bool:
    """IPv6, including embedded IPv4 tails; scope ids are rejected.
    IPv6（含内嵌 IPv4 尾部）；拒绝作用域标识。
    """
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True
