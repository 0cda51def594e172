"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Field validator kinds.
字段校验器类型。

- common: general-purpose kinds / 通用类型
- taiwan: Taiwan identifiers and codes / 台湾证号与代码
"""
