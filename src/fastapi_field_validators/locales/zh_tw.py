"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: zh_tw.py
@DateTime: 2026-10-19
@Docs: Built-in Traditional Chinese (zh-TW) message templates.
内置繁体中文（zh-TW）消息模板。
"""

MESSAGES: dict[str, dict[str, str]] = {
    "boolean": {
        "required": "必填",
        "invalid": "必須為布林值",
        "shouldBeTrue": "必須為 True",
        "shouldBeFalse": "必須為 False",
    },
    "number": {
        "required": "必填",
        "invalid": "必須為有效的數字",
        "integer": "必須為整數",
        "float": "必須為小數",
        "finite": "必須為有限數字",
        "positive": "必須為正數",
        "negative": "必須為負數",
        "nonNegative": "不可為負數",
        "nonPositive": "不可為正數",
        "min": "不可小於 ${min}",
        "max": "不可大於 ${max}",
        "multipleOf": "必須為 ${multipleOf} 的倍數",
        "precision": "小數位數最多 ${precision} 位",
    },
    "text": {
        "required": "必填",
        "notEmpty": "不可為空白或僅含空格",
        "minLength": "長度至少 ${minLength} 字元",
        "maxLength": "長度最多 ${maxLength} 字元",
        "startsWith": "必須以「${startsWith}」開頭",
        "endsWith": "必須以「${endsWith}」結尾",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "invalid": "格式錯誤",
    },
    "email": {
        "required": "必填",
        "invalid": "無效的電子郵件格式",
        "minLength": "長度至少 ${minLength} 字元",
        "maxLength": "長度最多 ${maxLength} 字元",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "domain": "必須為 ${domain} 網域",
        "domainBlacklist": "不允許使用 ${domain} 網域",
        "businessOnly": "僅允許企業電子郵件",
        "noDisposable": "不允許使用一次性電子郵件",
    },
    "url": {
        "required": "必填",
        "invalid": "無效的 URL 格式",
        "min": "長度至少 ${min} 字元",
        "max": "長度最多 ${max} 字元",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "protocol": "協定必須為 ${protocols}",
        "domain": "網域必須為 ${domains}",
        "domainBlacklist": "不允許使用 ${domain} 網域",
        "port": "連接埠必須為 ${ports}",
        "portBlacklist": "不允許使用連接埠 ${port}",
        "pathStartsWith": "路徑必須以「${path}」開頭",
        "pathEndsWith": "路徑必須以「${path}」結尾",
        "hasQuery": "必須包含查詢參數",
        "noQuery": "不得包含查詢參數",
        "hasFragment": "必須包含片段識別",
        "noFragment": "不得包含片段識別",
        "localhost": "不允許使用本機網址",
        "noLocalhost": "已封鎖本機網址",
    },
    "color": {
        "required": "必填",
        "invalid": "無效的顏色格式",
        "notHex": "必須為有效的十六進位顏色",
        "notRgb": "必須為有效的 RGB 顏色",
        "notHsl": "必須為有效的 HSL 顏色",
    },
    "coordinate": {
        "required": "必填",
        "invalid": "無效的座標",
        "invalidLatitude": "緯度必須介於 -90 與 90 之間",
        "invalidLongitude": "經度必須介於 -180 與 180 之間",
    },
    "creditCard": {
        "required": "必填",
        "invalid": "無效的信用卡號碼",
        "notInWhitelist": "信用卡號碼不在允許清單中",
    },
    "date": {
        "required": "必填",
        "format": "必須為 ${format} 格式",
        "min": "日期不可早於 ${min}",
        "max": "日期不可晚於 ${max}",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "past": "日期必須為過去",
        "future": "日期必須為未來",
        "today": "日期必須為今天",
        "notToday": "日期不可為今天",
        "weekday": "日期必須為平日",
        "weekend": "日期必須為週末",
    },
    "datetime": {
        "required": "必填",
        "format": "必須為 ${format} 格式",
        "invalid": "無效的日期時間格式",
        "customRegex": "不符合指定的日期時間格式",
        "notInWhitelist": "日期時間不在允許清單中",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "hour": "小時必須介於 ${minHour} 與 ${maxHour} 之間",
        "minute": "分鐘必須以 ${minuteStep} 分鐘為間隔",
        "min": "日期時間必須晚於 ${min}",
        "max": "日期時間必須早於 ${max}",
        "past": "日期時間必須為過去",
        "future": "日期時間必須為未來",
        "today": "日期時間必須為今天",
        "notToday": "日期時間不可為今天",
        "weekday": "日期時間必須為平日",
        "weekend": "日期時間必須為週末",
    },
    "time": {
        "required": "必填",
        "format": "必須為 ${format} 格式",
        "invalid": "無效的時間",
        "customRegex": "不符合指定的時間格式",
        "notInWhitelist": "時間不在允許清單中",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "hour": "小時必須介於 ${minHour} 與 ${maxHour} 之間",
        "minute": "分鐘必須以 ${minuteStep} 分鐘為間隔",
        "second": "秒數必須以 ${secondStep} 秒為間隔",
        "min": "時間必須晚於 ${min}",
        "max": "時間必須早於 ${max}",
    },
    "file": {
        "required": "必填",
        "invalid": "必須為有效的檔案",
        "minSize": "檔案大小至少 ${minSize}",
        "maxSize": "檔案大小不可超過 ${maxSize}",
        "type": "檔案類型必須為：${type}",
        "typeBlacklist": "不允許的檔案類型 ${type}",
        "extension": "副檔名必須為：${extension}",
        "extensionBlacklist": "不允許的副檔名 ${extension}",
        "name": "檔名必須符合格式 ${pattern}",
        "nameBlacklist": "檔名不可符合格式 ${pattern}",
        "imageOnly": "僅允許圖片檔案",
        "documentOnly": "僅允許文件檔案",
        "videoOnly": "僅允許影片檔案",
        "audioOnly": "僅允許音訊檔案",
        "archiveOnly": "僅允許壓縮檔案",
    },
    "id": {
        "required": "必填",
        "invalid": "無效的 ID 格式",
        "allowedTypes": "無效的 ID 格式（允許的類型：${allowedTypes}）",
        "minLength": "長度至少 ${minLength} 字元",
        "maxLength": "長度最多 ${maxLength} 字元",
        "numeric": "必須為數字 ID",
        "uuid": "必須為有效的 UUID",
        "objectId": "必須為有效的 MongoDB ObjectId",
        "nanoid": "必須為有效的 Nano ID",
        "snowflake": "必須為有效的 Snowflake ID",
        "cuid": "必須為有效的 CUID",
        "ulid": "必須為有效的 ULID",
        "shortid": "必須為有效的 Short ID",
        "customFormat": "無效的 ID 格式",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
        "startsWith": "必須以「${startsWith}」開頭",
        "endsWith": "必須以「${endsWith}」結尾",
    },
    "ip": {
        "required": "必填",
        "invalid": "無效的 IP 位址",
        "notIPv4": "必須為有效的 IPv4 位址",
        "notIPv6": "必須為有效的 IPv6 位址",
        "notInWhitelist": "IP 位址不在允許清單中",
    },
    "password": {
        "required": "必填",
        "invalid": "密碼格式錯誤",
        "min": "長度至少 ${min} 字元",
        "max": "長度最多 ${max} 字元",
        "uppercase": "必須包含至少一個大寫字母",
        "lowercase": "必須包含至少一個小寫字母",
        "digits": "必須包含至少一個數字",
        "special": "必須包含至少一個特殊字元",
        "noRepeating": "不得包含重複字元",
        "noSequential": "不得包含連續字元",
        "noCommonWords": "不得包含常見密碼",
        "minStrength": "密碼強度至少需為 ${minStrength}",
        "includes": "必須包含「${includes}」",
        "excludes": "不得包含「${excludes}」",
    },
    "businessId": {
        "required": "必填",
        "digits": "只能包含數字",
        "length": "必須為8位數字",
        "checksum": "統一編號檢查碼錯誤",
    },
    "nationalId": {
        "required": "必填",
        "invalid": "無效的身分證字號",
        "checksum": "無效的身分證字號檢查碼",
    },
    "mobile": {
        "required": "必填",
        "invalid": "無效的手機號碼格式",
        "notInWhitelist": "不在允許的手機號碼清單中",
    },
    "tel": {
        "required": "必填",
        "invalid": "無效的市話號碼格式",
        "notInWhitelist": "不在允許的市話號碼清單中",
    },
    "fax": {
        "required": "必填",
        "invalid": "無效的傳真號碼格式",
        "notInWhitelist": "不在允許的傳真號碼清單中",
    },
    "postalCode": {
        "required": "必填",
        "invalid": "無效的郵遞區號",
        "format3Only": "僅允許 3 碼郵遞區號",
        "format5Only": "僅允許 5 碼郵遞區號",
        "format6Only": "僅允許 6 碼郵遞區號",
        "invalidSuffix": "無效的郵遞區號後綴",
        "deprecated5Digit": "5 碼郵遞區號已停用",
        "legacy5DigitWarning": "5 碼郵遞區號為舊制格式，建議使用 6 碼郵遞區號",
    },
    "bankAccount": {
        "required": "必填",
        "invalid": "無效的銀行帳號格式",
        "invalidBankCode": "無效的銀行代碼",
        "invalidAccountNumber": "無效的帳號號碼",
    },
    "invoice": {
        "required": "必填",
        "invalid": "無效的統一發票號碼",
    },
    "licensePlate": {
        "required": "必填",
        "invalid": "無效的車牌號碼",
    },
    "passport": {
        "required": "必填",
        "invalid": "無效的護照號碼",
    },
}
