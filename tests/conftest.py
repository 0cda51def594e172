"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the fastapi-field-validators test suite.
测试套件的公共 fixtures。
"""

import io
from collections.abc import Iterator
from dataclasses import dataclass

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from fastapi_field_validators.locale import reset_locale, set_locale


@dataclass
class FakeFile:
    """Plain file-like object with name/size/type.
    带 name/size/type 的普通类文件对象。
    """

    name: str
    size: int
    type: str


@pytest.fixture(autouse=True)
def english_locale() -> Iterator[None]:
    """Run every test in English and restore the default locale afterwards.
    每个测试使用英文运行，结束后恢复默认语言。
    """
    set_locale("en")
    yield
    reset_locale()


def make_upload_file(filename: str, content: bytes, content_type: str = "text/plain") -> UploadFile:
    """Create an UploadFile from bytes.
    从字节内容创建 UploadFile。

    Args:
        filename: File name / 文件名。
        content: File content bytes / 文件内容字节。
        content_type: MIME type / MIME 类型。

    Returns:
        UploadFile: Upload file / 上传文件。
    """
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        size=len(content),
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def png_file() -> FakeFile:
    """A 2 KB PNG described by a plain object.
    以普通对象描述的 2 KB PNG 文件。
    """
    return FakeFile(name="avatar.png", size=2048, type="image/png")


@pytest.fixture
def pdf_upload() -> UploadFile:
    """UploadFile holding a small PDF.
    包含小型 PDF 的 UploadFile。
    """
    return make_upload_file("report.PDF", b"%PDF-1.4 test", "application/pdf")
