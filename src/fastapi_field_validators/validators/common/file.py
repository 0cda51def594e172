"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: file.py
@DateTime: 2026-10-19
@Docs: Uploaded file field validator.
上传文件字段校验器。

Accepted inputs / 接受的输入:
    - ``fastapi.UploadFile`` (``filename`` / ``size`` / ``content_type``)
    - any object exposing ``name``, ``size`` and ``type`` attributes
      任何具有 ``name``、``size``、``type`` 属性的对象

The file object itself is returned; it is never read or copied.
返回原文件对象本身；不会读取或复制内容。
"""

import os
import re
from dataclasses import dataclass
from typing import Any

from fastapi import UploadFile

from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail

IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp", "image/svg+xml", "image/bmp", "image/tiff")
DOCUMENT_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "text/plain",
    "text/csv",
)
VIDEO_TYPES = ("video/mp4", "video/mpeg", "video/quicktime", "video/x-msvideo", "video/x-ms-wmv", "video/webm", "video/ogg")
AUDIO_TYPES = ("audio/mpeg", "audio/wav", "audio/ogg", "audio/aac", "audio/webm", "audio/mp3", "audio/x-wav")
ARCHIVE_TYPES = ("application/zip", "application/x-rar-compressed", "application/x-7z-compressed", "application/x-tar", "application/gzip")

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_file_size(size: int) -> str:
    """
    Format a byte count with binary units.
    以二进制单位格式化字节数。

    Examples:
        >>> format_file_size(1536)
        '1.5 KB'
    """
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    rounded = round(value, 2)
    text = str(int(rounded)) if rounded.is_integer() else str(rounded)
    return f"{text} {_SIZE_UNITS[unit]}"


def file_extension(name: str, case_sensitive: bool = False) -> str:
    """Return the extension including the dot, or ``""``.
    返回含点号的扩展名；没有时返回 ``""``。
    """
    idx = name.rfind(".")
    ext = "" if idx == -1 else name[idx:]
    return ext if case_sensitive else ext.lower()


def normalize_extension(ext: str, case_sensitive: bool = False) -> str:
    """Ensure a leading dot and apply case folding.
    补齐前导点号并按需转换大小写。
    """
    dotted = ext if ext.startswith(".") else f".{ext}"
    return dotted if case_sensitive else dotted.lower()


def _upload_size(upload: UploadFile) -> int:
    if upload.size is not None:
        return int(upload.size)
    fh = upload.file
    pos = fh.tell()
    fh.seek(0, os.SEEK_END)
    size = fh.tell()
    fh.seek(pos)
    return size


@dataclass(frozen=True, slots=True)
class FileInfo:
    """
    Metadata read from a file-like object.
    从类文件对象读取的元数据。
    """

    source: Any
    name: str
    size: int
    content_type: str


def describe_file(value: Any) -> FileInfo | None:
    """
    Read name/size/type from a supported file object.
    从支持的文件对象读取名称、大小与类型。

    Returns:
        FileInfo | None: Metadata, or None when the object is not file-like.
        FileInfo | None: 元数据；非类文件对象时返回 None。
    """
    if isinstance(value, UploadFile):
        return FileInfo(source=value, name=value.filename or "", size=_upload_size(value), content_type=value.content_type or "")
    name = getattr(value, "name", None)
    size = getattr(value, "size", None)
    content_type = getattr(value, "type", None)
    if not isinstance(name, str) or not isinstance(size, int) or isinstance(size, bool) or not isinstance(content_type, str):
        return None
    return FileInfo(source=value, name=name, size=size, content_type=content_type)


class FileOptions(FieldOptions):
    """
    File options.
    文件选项。

    Attributes:
        min_size: Minimum size in bytes.
        min_size: 最小字节数。
        max_size: Maximum size in bytes.
        max_size: 最大字节数。
        type: Accepted MIME type(s).
        type: 接受的 MIME 类型。
        type_blacklist: Rejected MIME types.
        type_blacklist: 拒绝的 MIME 类型。
        extension: Accepted extension(s), with or without the dot.
        extension: 接受的扩展名（可含或不含点号）。
        extension_blacklist: Rejected extensions.
        extension_blacklist: 拒绝的扩展名。
        name_pattern: Pattern the file name must match.
        name_pattern: 文件名必须匹配的模式。
        name_blacklist: Patterns the file name must not match.
        name_blacklist: 文件名不得匹配的模式。
        case_sensitive: Compare extensions case-sensitively.
        case_sensitive: 扩展名比较是否区分大小写。
    """

    min_size: int | None = None
    max_size: int | None = None
    type: str | tuple[str, ...] | None = None
    type_blacklist: tuple[str, ...] = ()
    extension: str | tuple[str, ...] | None = None
    extension_blacklist: tuple[str, ...] = ()
    name_pattern: re.Pattern[str] | None = None
    name_blacklist: tuple[re.Pattern[str], ...] = ()
    image_only: bool = False
    document_only: bool = False
    video_only: bool = False
    audio_only: bool = False
    archive_only: bool = False
    case_sensitive: bool = False


def _as_tuple(value: str | tuple[str, ...] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return (value,) if isinstance(value, str) else tuple(value)


class FileValidator(FieldValidator[FileOptions]):
    """File validator.
    文件校验器。
    """

    kind = "file"
    options_model = FileOptions

    def coerce(self, value: Any) -> FileInfo:
        if self.options.transform is not None and describe_file(value) is not None:
            value = self.options.transform(value)
        info = describe_file(value)
        if info is None:
            raise self.error("invalid")
        return info

    def finalize(self, value: FileInfo) -> Any:
        return value.source

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = []
        if opts.min_size is not None:
            rules.append(lambda f: check(f.size >= opts.min_size, "minSize", minSize=format_file_size(opts.min_size)))
        if opts.max_size is not None:
            rules.append(lambda f: check(f.size <= opts.max_size, "maxSize", maxSize=format_file_size(opts.max_size)))
        for enabled, family, key in (
            (opts.image_only, IMAGE_TYPES, "imageOnly"),
            (opts.document_only, DOCUMENT_TYPES, "documentOnly"),
            (opts.video_only, VIDEO_TYPES, "videoOnly"),
            (opts.audio_only, AUDIO_TYPES, "audioOnly"),
            (opts.archive_only, ARCHIVE_TYPES, "archiveOnly"),
        ):
            if enabled:
                rules.append(lambda f, family=family, key=key: check(f.content_type in family, key))
        if opts.type_blacklist:
            rules.append(lambda f: check(f.content_type not in opts.type_blacklist, "typeBlacklist", type=f.content_type))
        allowed_types = _as_tuple(opts.type)
        if allowed_types:
            rules.append(lambda f: check(f.content_type in allowed_types, "type", type=allowed_types))
        if opts.extension_blacklist:
            rules.append(self._extension_not_blocked)
        allowed_exts = _as_tuple(opts.extension)
        if allowed_exts:
            normalized = {normalize_extension(e, opts.case_sensitive) for e in allowed_exts}
            rules.append(
                lambda f: check(file_extension(f.name, opts.case_sensitive) in normalized, "extension", extension=allowed_exts)
            )
        if opts.name_pattern is not None:
            pattern = opts.name_pattern
            rules.append(lambda f: check(pattern.search(f.name) is not None, "name", pattern=pattern))
        if opts.name_blacklist:
            rules.append(self._name_not_blocked)
        return rules

    def _extension_not_blocked(self, value: FileInfo) -> ConstraintResult:
        cs = self.options.case_sensitive
        ext = file_extension(value.name, cs)
        blocked = {normalize_extension(e, cs) for e in self.options.extension_blacklist}
        return fail("extensionBlacklist", extension=ext) if ext in blocked else PASS

    def _name_not_blocked(self, value: FileInfo) -> ConstraintResult:
        for pattern in self.options.name_blacklist:
            if pattern.search(value.name):
                return fail("nameBlacklist", pattern=pattern)
        return PASS


def file(required: bool | None = None, /, **options: Any) -> FileValidator:
    """
    Create a file validator.
    创建文件校验器。

    Examples:
        >>> validator = file(max_size=5 * 1024 * 1024, extension=[".png", ".jpg"])
    """
    return FileValidator.create(required, **options)
