"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: taiwan_documents.py
@DateTime: 2026-10-19
@Docs: Taiwan bank account, uniform invoice, license plate and passport grammars.
台湾银行账号、统一发票、车牌与护照号码语法。
"""

import re
from dataclasses import dataclass
from enum import StrEnum

TAIWAN_BANK_CODES: dict[str, str] = {
    "004": "台灣銀行",
    "005": "土地銀行",
    "006": "合庫",
    "007": "第一銀行",
    "008": "華南",
    "009": "彰化",
    "011": "上海",
    "012": "台北富邦",
    "013": "國泰世華",
    "017": "兆豐",
    "021": "花旗",
    "048": "王道",
    "050": "台灣企銀",
    "052": "渣打",
    "053": "台中銀行",
    "054": "京城",
    "081": "滙豐",
    "103": "新光",
    "108": "陽信",
    "118": "板信",
    "147": "三信",
    "700": "中華郵政",
    "803": "聯邦",
    "805": "遠東",
    "806": "元大",
    "807": "永豐",
    "808": "玉山",
    "809": "凱基",
    "810": "星展",
    "812": "台新",
    "816": "安泰",
    "822": "中信",
}

_BANK_CODE_RE = re.compile(r"^\d{3}\Z", re.ASCII)
_ACCOUNT_NUMBER_RE = re.compile(r"^\d{10,16}\Z", re.ASCII)


@dataclass(frozen=True, slots=True)
class BankAccountParts:
    """Split bank account.
    拆分后的银行账号。

    Attributes:
        bank_code: 3-digit bank code, or None when absent.
            3 位银行代码；缺失时为 None。
        account_number: Account number part.
            账号部分。
    """

    bank_code: str | None
    account_number: str


def split_bank_account(value: str) -> BankAccountParts | None:
    """
    Split ``code-account`` or a bare account number.
    拆分 ``代码-账号`` 或纯账号。

    Returns:
        BankAccountParts | None: None when more than one dash is present.
        BankAccountParts | None: 出现多个连字符时返回 None。
    """
    if "-" not in value:
        return BankAccountParts(bank_code=None, account_number=value)
    parts = value.split("-")
    if len(parts) != 2:
        return None
    return BankAccountParts(bank_code=parts[0], account_number=parts[1])


def bank_code_ok(code: str, validate_bank_code: bool = True) -> bool:
    """Check the bank code shape and, optionally, the known-code table.
    校验银行代码格式，并可选校验已知代码表。
    """
    if not _BANK_CODE_RE.match(code):
        return False
    return not validate_bank_code or code in TAIWAN_BANK_CODES


def account_number_ok(number: str) -> bool:
    """Account numbers are 10-16 digits.
    账号为 10-16 位数字。
    """
    return bool(_ACCOUNT_NUMBER_RE.match(number))


def validate_taiwan_bank_account(value: str, validate_bank_code: bool = True) -> bool:
    """
    Validate ``[code-]account``.
    校验 ``[代码-]账号``。

    Args:
        value: Account string without whitespace.
        value: 不含空白的账号字符串。
        validate_bank_code: Require a known bank code.
        validate_bank_code: 是否要求为已知银行代码。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    parts = split_bank_account(value)
    if parts is None:
        return False
    if parts.bank_code is not None and not bank_code_ok(parts.bank_code, validate_bank_code):
        return False
    return account_number_ok(parts.account_number)


_INVOICE_RE = re.compile(r"^[A-Z]{2}\d{8}\Z", re.ASCII)


def validate_taiwan_invoice(value: str) -> bool:
    """Uniform invoice number: 2 letters + 8 digits (dashes ignored).
    统一发票号码：2 个字母 + 8 位数字（忽略连字符）。
    """
    return bool(_INVOICE_RE.match(value.replace("-", "")))


class PlateType(StrEnum):
    """License plate families.
    车牌类别。
    """

    CAR = "car"
    MOTORCYCLE = "motorcycle"
    ANY = "any"


CAR_PLATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[A-Z]{3}\d{4}\Z", re.ASCII),  # ABC-1234
    re.compile(r"^\d{4}[A-Z]{2}\Z", re.ASCII),  # 1234-AB
    re.compile(r"^[A-Z]{2}\d{4}\Z", re.ASCII),  # AB-1234
    re.compile(r"^[A-Z]\d{5}\Z", re.ASCII),  # A1-2345
)

MOTORCYCLE_PLATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[A-Z]{3}\d{4}\Z", re.ASCII),  # ABC-1234
    re.compile(r"^\d{3}[A-Z]{3}\Z", re.ASCII),  # 123-ABC
    re.compile(r"^[A-Z]{2}\d{4}\Z", re.ASCII),  # AB-1234
    re.compile(r"^\d{4}[A-Z]{2}\Z", re.ASCII),  # 1234-AB
)


def validate_taiwan_license_plate(value: str, plate_type: PlateType | str = PlateType.ANY) -> bool:
    """
    Validate a cleaned (upper-case, no separators) license plate.
    校验已清理（大写、无分隔符）的车牌号码。
    """
    kind = PlateType(plate_type)
    patterns: list[re.Pattern[str]] = []
    if kind in (PlateType.CAR, PlateType.ANY):
        patterns.extend(CAR_PLATE_PATTERNS)
    if kind in (PlateType.MOTORCYCLE, PlateType.ANY):
        patterns.extend(p for p in MOTORCYCLE_PLATE_PATTERNS if p.pattern not in {q.pattern for q in patterns})
    return any(p.match(value) for p in patterns)


class PassportType(StrEnum):
    """Passport categories, keyed by their leading digit.
    护照类别（按首位数字区分）。
    """

    DIPLOMATIC = "diplomatic"
    OFFICIAL = "official"
    ORDINARY = "ordinary"
    TRAVEL = "travel"
    ANY = "any"


PASSPORT_TYPE_DIGIT: dict[PassportType, str] = {
    PassportType.DIPLOMATIC: "0",
    PassportType.OFFICIAL: "1",
    PassportType.ORDINARY: "2",
    PassportType.TRAVEL: "3",
}

_PASSPORT_RE = re.compile(r"^[0-3]\d{8}\Z", re.ASCII)


def validate_taiwan_passport(value: str, passport_type: PassportType | str = PassportType.ANY) -> bool:
    """
    Validate a 9-digit passport number whose first digit is 0-3.
    校验首位为 0-3 的 9 位护照号码。
    """
    if not _PASSPORT_RE.match(value):
        return False
    kind = PassportType(passport_type)
    if kind is PassportType.ANY:
        return True
    return value[0] == PASSPORT_TYPE_DIGIT[kind]
