"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: identifiers.py
@DateTime: 2026-10-19
@Docs: Identifier families (UUID, ObjectId, Nano ID, Snowflake, CUID, ULID, ShortId).
标识符族（UUID、ObjectId、Nano ID、Snowflake、CUID、ULID、ShortId）。
"""

import re
from enum import StrEnum


class IdType(StrEnum):
    """Identifier kinds.
    标识符类型。
    """

    NUMERIC = "numeric"
    UUID = "uuid"
    OBJECT_ID = "objectId"
    NANOID = "nanoid"
    SNOWFLAKE = "snowflake"
    CUID = "cuid"
    ULID = "ulid"
    SHORTID = "shortid"
    AUTO = "auto"


ID_PATTERNS: dict[IdType, re.Pattern[str]] = {
    IdType.NUMERIC: re.compile(r"^\d+\Z", re.ASCII),
    IdType.UUID: re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}\Z", re.IGNORECASE),
    IdType.OBJECT_ID: re.compile(r"^[0-9a-f]{24}\Z", re.IGNORECASE),
    IdType.NANOID: re.compile(r"^[A-Za-z0-9_-]{21}\Z"),
    IdType.SNOWFLAKE: re.compile(r"^\d{19}\Z", re.ASCII),
    IdType.CUID: re.compile(r"^c[a-z0-9]{24}\Z"),
    IdType.ULID: re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}\Z"),
    IdType.SHORTID: re.compile(r"^[A-Za-z0-9_-]{7,14}\Z"),
}

# Most specific first; shortid is the catch-all.
DETECTION_ORDER: tuple[IdType, ...] = (
    IdType.UUID,
    IdType.OBJECT_ID,
    IdType.SNOWFLAKE,
    IdType.CUID,
    IdType.ULID,
    IdType.NANOID,
    IdType.NUMERIC,
    IdType.SHORTID,
)


def detect_id_type(value: str) -> IdType | None:
    """
    Detect the most specific identifier kind of a value.
    检测值最具体的标识符类型。

    Args:
        value: Identifier string.
        value: 标识符字符串。

    Returns:
        IdType | None: Detected kind, or None when nothing matches.
        IdType | None: 检测到的类型；均不匹配时返回 None。
    """
    for kind in DETECTION_ORDER:
        if ID_PATTERNS[kind].match(value):
            return kind
    return None


def validate_id_type(value: str, id_type: IdType | str) -> bool:
    """Check a value against one kind (``auto`` accepts any known kind).
    按指定类型校验值（``auto`` 接受任何已知类型）。
    """
    kind = IdType(id_type)
    if kind is IdType.AUTO:
        return detect_id_type(value) is not None
    return bool(ID_PATTERNS[kind].match(value))
