"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validators_common.py
@DateTime: 2026-10-19
@Docs: Tests for the general-purpose validators.
通用校验器测试。
"""

import math
from typing import Any

import pytest
from fastapi import UploadFile

from fastapi_field_validators import (
    boolean,
    color,
    coordinate,
    credit_card,
    email,
    file,
    identifier,
    ip,
    number,
    password,
    text,
    url,
)
from fastapi_field_validators.exceptions import ValidationError
from fastapi_field_validators.validators.common import describe_file, file_extension, format_file_size


def _key(validator: Any, value: Any) -> str:
    """Helper: parse and return the failing message key.
    辅助：解析并返回失败的消息键。
    """
    with pytest.raises(ValidationError) as exc_info:
        validator.parse(value)
    return exc_info.value.key


def _message(validator: Any, value: Any) -> str:
    with pytest.raises(ValidationError) as exc_info:
        validator.parse(value)
    return exc_info.value.message


class TestBoolean:
    """Tests for boolean().
    boolean() 测试。
    """

    @pytest.mark.parametrize(("raw", "expected"), [(True, True), ("true", True), (1, True), ("yes", True), ("on", True), (False, False), ("0", False), ("off", False)])
    def test_default_tokens(self, raw: Any, expected: bool) -> None:
        assert boolean().parse(raw) is expected

    @pytest.mark.parametrize("raw", ["TRUE", "t", "y", 2, "maybe"])
    def test_unknown_tokens_rejected(self, raw: Any) -> None:
        """Matching is exact and case-sensitive / 精确且区分大小写匹配。"""
        assert _key(boolean(), raw) == "invalid"

    def test_strict_mode(self) -> None:
        assert boolean(strict=True).parse(False) is False
        assert _key(boolean(strict=True), "true") == "invalid"

    def test_custom_tokens(self) -> None:
        validator = boolean(truthy_values=["Y"], falsy_values=["N"])
        assert validator.parse("Y") is True
        assert validator.parse("N") is False
        assert _key(validator, "yes") == "invalid"

    def test_should_be(self) -> None:
        assert _key(boolean(should_be=False), True) == "shouldBeFalse"
        assert _message(boolean(should_be=True), "no") == "Must be True"

    def test_transform_runs_after_mapping(self) -> None:
        assert boolean(transform=lambda b: not b).parse("yes") is False


class TestNumber:
    """Tests for number().
    number() 测试。
    """

    def test_parses_strings(self) -> None:
        assert number().parse("42") == 42
        assert number().parse(" 3.5 ") == 3.5
        assert number(parse_commas=True).parse("1,234") == 1234

    def test_boundaries_inclusive(self) -> None:
        """Values at min/max pass, one past fails / 边界值通过，越界失败。"""
        validator = number(min=1, max=10)
        assert validator.parse(1) == 1
        assert validator.parse(10) == 10
        assert _key(validator, 0) == "min"
        assert _key(validator, 11) == "max"

    def test_min_message(self) -> None:
        assert _message(number(min=5), 4) == "Must be at least 5"

    def test_invalid_inputs(self) -> None:
        assert _key(number(), "abc") == "invalid"
        assert _key(number(), True) == "invalid"
        assert _key(number(), [1]) == "invalid"

    def test_whitespace_is_empty(self) -> None:
        assert number().parse("   ") is None
        assert _key(number(True), "   ") == "required"

    def test_integer_and_float(self) -> None:
        assert _key(number(type="integer"), 1.5) == "integer"
        assert number(type="float").parse("42.5") == 42.5
        assert _key(number(type="float"), 42) == "float"

    def test_finite(self) -> None:
        assert _key(number(), math.inf) == "finite"
        assert number(finite=False).parse(math.inf) == math.inf
        assert _key(number(), math.nan) == "invalid"

    def test_sign_rules(self) -> None:
        assert _key(number(positive=True), 0) == "positive"
        assert _key(number(negative=True), 0) == "negative"
        assert number(non_negative=True).parse(0) == 0
        assert _key(number(non_positive=True), 1) == "nonPositive"

    def test_multiple_of_exact(self) -> None:
        assert number(multiple_of=0.1).parse(0.3) == 0.3
        assert _key(number(multiple_of=5), 12) == "multipleOf"

    def test_precision(self) -> None:
        assert number(precision=2).parse(1.23) == 1.23
        assert _key(number(precision=2), 1.234) == "precision"

    def test_transform(self) -> None:
        assert number(transform=lambda n: n * 2, max=10).parse(5) == 10


class TestText:
    """Tests for text().
    text() 测试。
    """

    def test_length_bounds(self) -> None:
        validator = text(min_length=2, max_length=4)
        assert validator.parse("ab") == "ab"
        assert validator.parse("abcd") == "abcd"
        assert _key(validator, "a") == "minLength"
        assert _key(validator, "abcde") == "maxLength"

    def test_trim_and_casing(self) -> None:
        assert text().parse("  hi  ") == "hi"
        assert text(trim_mode="none").parse(" a ") == " a "
        assert text(trim_mode="trim_start").parse(" a ") == "a "
        assert text(casing="title").parse("hello world") == "Hello World"
        assert text(casing="lower").parse("ABC") == "abc"

    def test_stringifies_numbers(self) -> None:
        assert text().parse(12) == "12"
        assert text().parse(3.0) == "3"

    def test_membership(self) -> None:
        assert _key(text(starts_with="A"), "bA") == "startsWith"
        assert _key(text(ends_with="z"), "za") == "endsWith"
        assert _key(text(includes="@"), "abc") == "includes"
        assert _message(text(excludes=["bad", "worse"]), "so bad") == "Must not contain bad"

    def test_regex(self) -> None:
        assert text(regex=r"^\d+$").parse("123") == "123"
        assert _key(text(regex=r"^\d+$"), "12a") == "invalid"

    def test_not_empty(self) -> None:
        assert _key(text(not_empty=True, trim_mode="none"), "   ") == "notEmpty"

    def test_first_failure_only(self) -> None:
        """Only the first failing rule is reported / 只报告首个失败规则。"""
        with pytest.raises(ValidationError) as exc_info:
            text(min_length=5, includes="@").parse("ab")
        assert len(exc_info.value.issues) == 1
        assert exc_info.value.key == "minLength"


class TestEmail:
    """Tests for email().
    email() 测试。
    """

    def test_normalizes(self) -> None:
        assert email().parse(" John@Example.COM ") == "john@example.com"
        assert email(lowercase=False).parse("John@Example.com") == "John@Example.com"

    def test_invalid(self) -> None:
        assert _key(email(), "not-an-email") == "invalid"
        assert _key(email(), "a..b@example.com") == "invalid"

    def test_domain(self) -> None:
        assert email(domain="example.com").parse("a@sub.example.com") == "a@sub.example.com"
        assert _key(email(domain="example.com", allow_subdomains=False), "a@sub.example.com") == "domain"
        assert _message(email(domain=["a.com", "b.com"]), "x@c.com") == "Must be under the domain a.com, b.com"

    def test_blacklist(self) -> None:
        assert _message(email(domain_blacklist=["spam.com"]), "a@spam.com") == "Domain spam.com is not allowed"

    def test_business_and_disposable(self) -> None:
        assert _key(email(business_only=True), "a@gmail.com") == "businessOnly"
        assert _key(email(no_disposable=True), "a@mailinator.com") == "noDisposable"
        assert email(business_only=True).parse("a@company.com.tw") == "a@company.com.tw"


class TestUrl:
    """Tests for url().
    url() 测试。
    """

    def test_valid(self) -> None:
        assert url().parse("https://example.com/path?q=1") == "https://example.com/path?q=1"

    def test_invalid(self) -> None:
        assert _key(url(), "example") == "invalid"
        assert _key(url(), "http://exa mple.com") == "invalid"

    def test_protocols(self) -> None:
        assert _message(url(protocols=["https"]), "http://example.com") == "Protocol must be one of: https"

    def test_domains(self) -> None:
        validator = url(allowed_domains=["example.com"])
        assert validator.parse("https://api.example.com/x") == "https://api.example.com/x"
        assert _key(validator, "https://evil.com") == "domain"
        assert _key(url(blocked_domains=["evil.com"]), "https://www.evil.com") == "domainBlacklist"

    def test_ports(self) -> None:
        assert _key(url(blocked_ports=[8080]), "http://example.com:8080") == "portBlacklist"
        assert url(allowed_ports=[443]).parse("https://example.com") == "https://example.com"
        assert _key(url(allowed_ports=[443]), "http://example.com") == "port"

    def test_path_query_fragment(self) -> None:
        assert _key(url(path_starts_with="/api"), "https://e.com/v1") == "pathStartsWith"
        assert _key(url(path_ends_with=".json"), "https://e.com/a.xml") == "pathEndsWith"
        assert _key(url(must_have_query=True), "https://e.com/a") == "hasQuery"
        assert _key(url(must_not_have_query=True), "https://e.com/a?x=1") == "noQuery"
        assert _key(url(must_have_fragment=True), "https://e.com/a") == "hasFragment"
        assert _key(url(must_not_have_fragment=True), "https://e.com/a#top") == "noFragment"

    def test_localhost(self) -> None:
        assert url().parse("http://localhost:3000") == "http://localhost:3000"
        assert _key(url(allow_localhost=False), "http://localhost:3000") == "localhost"
        assert _key(url(block_localhost=True), "http://192.168.1.1") == "noLocalhost"

    def test_length_uses_min_max_keys(self) -> None:
        assert _key(url(max_length=10), "https://example.com") == "max"


class TestColor:
    """Tests for color().
    color() 测试。
    """

    def test_any(self) -> None:
        for value in ("#FFF", "rgb(1, 2, 3)", "hsla(1, 2%, 3%, 0.5)"):
            assert color().parse(value) == value

    def test_single_format_key(self) -> None:
        assert _key(color(format="hex"), "rgb(0,0,0)") == "notHex"
        assert _key(color(format="rgb"), "#000") == "notRgb"
        assert _key(color(format="hsl"), "#000") == "notHsl"

    def test_several_formats(self) -> None:
        validator = color(format=["hex", "rgb"])
        assert validator.parse("#000") == "#000"
        assert _key(validator, "hsl(0, 0%, 0%)") == "invalid"

    def test_alpha(self) -> None:
        assert _key(color(allow_alpha=False), "#00000080") == "invalid"


class TestCoordinate:
    """Tests for coordinate().
    coordinate() 测试。
    """

    def test_pair(self) -> None:
        assert coordinate().parse("25.0330,121.5654") == "25.0330,121.5654"
        assert _key(coordinate(), "91,0") == "invalidLatitude"
        assert _key(coordinate(), "0,181") == "invalidLongitude"
        assert _key(coordinate(), "abc") == "invalid"

    def test_single_axis(self) -> None:
        assert coordinate(type="latitude").parse("-90") == "-90"
        assert _key(coordinate(type="longitude"), "-180.5") == "invalidLongitude"

    def test_precision(self) -> None:
        assert _key(coordinate(precision=2), "25.033,121.56") == "invalid"


class TestIp:
    """Tests for ip().
    ip() 测试。
    """

    def test_versions(self) -> None:
        assert ip().parse("192.168.1.1") == "192.168.1.1"
        assert ip().parse("::1") == "::1"
        assert _key(ip(version="v4"), "::1") == "notIPv4"
        assert _key(ip(version="v6"), "1.2.3.4") == "notIPv6"
        assert _key(ip(), "999.1.1.1") == "invalid"

    def test_cidr(self) -> None:
        assert _key(ip(), "10.0.0.0/8") == "invalid"
        assert ip(allow_cidr=True).parse("10.0.0.0/8") == "10.0.0.0/8"
        assert _key(ip(allow_cidr=True), "10.0.0.0/33") == "invalid"
        assert ip(allow_cidr=True).parse("2001:db8::/64") == "2001:db8::/64"

    def test_whitelist_checked_last(self) -> None:
        validator = ip(whitelist=["10.0.0.1"])
        assert validator.parse("10.0.0.1") == "10.0.0.1"
        assert _key(validator, "10.0.0.2") == "notInWhitelist"
        assert _key(validator, "nope") == "invalid"


class TestCreditCard:
    """Tests for credit_card().
    credit_card() 测试。
    """

    def test_cleans_separators(self) -> None:
        assert credit_card().parse("4111 1111-1111 1111") == "4111111111111111"

    def test_luhn(self) -> None:
        assert _key(credit_card(), "4111111111111112") == "invalid"

    def test_non_ascii_digits(self) -> None:
        assert _key(credit_card(), "٤١١١١١١١١١١١١١١١") == "invalid"

    def test_card_type(self) -> None:
        assert credit_card(card_type="visa").parse("4111111111111111") == "4111111111111111"
        assert _key(credit_card(card_type="mastercard"), "4111111111111111") == "invalid"
        assert credit_card(card_type=["visa", "amex"]).parse("378282246310005") == "378282246310005"

    def test_whitelist(self) -> None:
        validator = credit_card(whitelist=["4111-1111-1111-1111"])
        assert validator.parse("4111111111111111") == "4111111111111111"
        assert _key(validator, "5555555555554444") == "notInWhitelist"


class TestPassword:
    """Tests for password().
    password() 测试。
    """

    def test_not_trimmed(self) -> None:
        assert password().parse("  pass  ") == "  pass  "

    def test_length(self) -> None:
        assert _message(password(min=8), "short") == "Must be at least 8 characters"
        assert _key(password(max=4), "toolong") == "max"

    def test_character_classes(self) -> None:
        assert _key(password(uppercase=True), "lower1") == "uppercase"
        assert _key(password(lowercase=True), "UPPER1") == "lowercase"
        assert _key(password(digits=True), "Letters") == "digits"
        assert _key(password(special=True), "Letters1") == "special"

    def test_patterns(self) -> None:
        assert _key(password(no_repeating=True), "aaa1") == "noRepeating"
        assert _key(password(no_sequential=True), "x123") == "noSequential"
        assert _key(password(no_common_words=True), "MyPassword1") == "noCommonWords"

    def test_min_strength(self) -> None:
        assert _message(password(min_strength="strong"), "abcdefgh") == "Password strength must be at least strong"
        assert password(min_strength="strong").parse("Tr0ub4dor&X") == "Tr0ub4dor&X"

    def test_regex(self) -> None:
        assert _key(password(regex=r"^\S+$"), "has space") == "invalid"


class TestIdentifier:
    """Tests for identifier().
    identifier() 测试。
    """

    def test_required_by_default(self) -> None:
        assert _key(identifier(), None) == "required"
        assert identifier(False).parse(None) is None

    def test_auto(self) -> None:
        assert identifier().parse("507f1f77bcf86cd799439011") == "507f1f77bcf86cd799439011"
        assert _key(identifier(), "a b") == "invalid"

    def test_numeric_returns_int(self) -> None:
        assert identifier(type="numeric").parse("00123") == 123
        assert identifier(type="numeric").parse(42) == 42

    def test_numeric_rejects_non_ascii_digits(self) -> None:
        assert _key(identifier(type="numeric"), "１２３") == "numeric"

    def test_specific_type_key(self) -> None:
        assert _message(identifier(type="uuid"), "not-a-uuid") == "Must be a valid UUID"

    def test_allowed_types(self) -> None:
        validator = identifier(allowed_types=["uuid", "objectId"])
        assert _message(validator, "123") == "Invalid ID format (allowed types: uuid, objectId)"

    def test_custom_regex(self) -> None:
        validator = identifier(custom_regex=r"^ORD-\d+$")
        assert validator.parse("ORD-1") == "ORD-1"
        assert _key(validator, "X") == "customFormat"

    def test_content_checks_skip_detection(self) -> None:
        assert identifier(starts_with="usr_").parse("usr_ab cd") == "usr_ab cd"

    def test_case_insensitive(self) -> None:
        validator = identifier(case_sensitive=False, starts_with="USR")
        assert validator.parse("usr_ABC") == "usr_abc"
        assert _key(identifier(case_sensitive=False, excludes="ADMIN"), "my-admin") == "excludes"

    def test_length(self) -> None:
        assert _key(identifier(min_length=5), "123") == "minLength"
        assert _key(identifier(max_length=2), "123") == "maxLength"


class TestFile:
    """Tests for file().
    file() 测试。
    """

    def test_returns_same_object(self, png_file: Any, pdf_upload: UploadFile) -> None:
        assert file().parse(png_file) is png_file
        assert file().parse(pdf_upload) is pdf_upload

    def test_not_a_file(self) -> None:
        assert _key(file(), "avatar.png") == "invalid"
        assert _key(file(), {"name": "a.png"}) == "invalid"

    def test_size(self, png_file: Any) -> None:
        assert _message(file(max_size=1024), png_file) == "File size must not exceed 1 KB"
        assert _message(file(min_size=4096), png_file) == "File size must be at least 4 KB"
        assert file(min_size=2048, max_size=2048).parse(png_file) is png_file

    def test_families(self, png_file: Any, pdf_upload: UploadFile) -> None:
        assert file(image_only=True).parse(png_file) is png_file
        assert _key(file(image_only=True), pdf_upload) == "imageOnly"
        assert file(document_only=True).parse(pdf_upload) is pdf_upload
        assert _key(file(archive_only=True), png_file) == "archiveOnly"

    def test_types(self, pdf_upload: UploadFile) -> None:
        assert _message(file(type_blacklist=["application/pdf"]), pdf_upload) == "File type application/pdf is not allowed"
        assert _key(file(type=["image/png"]), pdf_upload) == "type"

    def test_extensions(self, pdf_upload: UploadFile) -> None:
        """Extension match ignores case and the leading dot / 扩展名匹配忽略大小写与前导点。"""
        assert file(extension=["pdf"]).parse(pdf_upload) is pdf_upload
        assert _key(file(extension=".pdf", case_sensitive=True), pdf_upload) == "extension"
        assert _message(file(extension_blacklist=["PDF"]), pdf_upload) == "File extension .pdf is not allowed"

    def test_names(self, pdf_upload: UploadFile) -> None:
        assert file(name_pattern=r"^report").parse(pdf_upload) is pdf_upload
        assert _message(file(name_pattern=r"^invoice"), pdf_upload) == "File name must match pattern ^invoice"
        assert _key(file(name_blacklist=[r"\.PDF$"]), pdf_upload) == "nameBlacklist"

    def test_describe_upload(self, pdf_upload: UploadFile) -> None:
        info = describe_file(pdf_upload)
        assert info is not None
        assert info.name == "report.PDF"
        assert info.size == len(b"%PDF-1.4 test")
        assert info.content_type == "application/pdf"

    def test_helpers(self) -> None:
        assert format_file_size(512) == "512 B"
        assert format_file_size(1536) == "1.5 KB"
        assert format_file_size(1024 * 1024) == "1 MB"
        assert file_extension("archive.tar.gz") == ".gz"
        assert file_extension("README") == ""
