"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: en.py
@DateTime: 2026-10-19
@Docs: Built-in English message templates.
内置英文消息模板。
"""

MESSAGES: dict[str, dict[str, str]] = {
    "boolean": {
        "required": "Required",
        "invalid": "Must be a boolean value",
        "shouldBeTrue": "Must be True",
        "shouldBeFalse": "Must be False",
    },
    "number": {
        "required": "Required",
        "invalid": "Must be a valid number",
        "integer": "Must be an integer",
        "float": "Must be a decimal number",
        "finite": "Must be a finite number",
        "positive": "Must be positive",
        "negative": "Must be negative",
        "nonNegative": "Must be non-negative",
        "nonPositive": "Must be non-positive",
        "min": "Must be at least ${min}",
        "max": "Must be at most ${max}",
        "multipleOf": "Must be a multiple of ${multipleOf}",
        "precision": "Must have at most ${precision} decimal places",
    },
    "text": {
        "required": "Required",
        "notEmpty": "Cannot be empty or whitespace only",
        "minLength": "Must be at least ${minLength} characters",
        "maxLength": "Must be at most ${maxLength} characters",
        "startsWith": "Must start with ${startsWith}",
        "endsWith": "Must end with ${endsWith}",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "invalid": "Invalid format",
    },
    "email": {
        "required": "Required",
        "invalid": "Invalid email format",
        "minLength": "Must be at least ${minLength} characters",
        "maxLength": "Must be at most ${maxLength} characters",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "domain": "Must be under the domain ${domain}",
        "domainBlacklist": "Domain ${domain} is not allowed",
        "businessOnly": "Only business email addresses are allowed",
        "noDisposable": "Disposable email addresses are not allowed",
    },
    "url": {
        "required": "Required",
        "invalid": "Invalid URL format",
        "min": "Must be at least ${min} characters",
        "max": "Must be at most ${max} characters",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "protocol": "Protocol must be one of: ${protocols}",
        "domain": "Domain must be one of: ${domains}",
        "domainBlacklist": "Domain ${domain} is not allowed",
        "port": "Port must be one of: ${ports}",
        "portBlacklist": "Port ${port} is not allowed",
        "pathStartsWith": "Path must start with ${path}",
        "pathEndsWith": "Path must end with ${path}",
        "hasQuery": "Must have query parameters",
        "noQuery": "Must not have query parameters",
        "hasFragment": "Must have a fragment",
        "noFragment": "Must not have a fragment",
        "localhost": "Localhost URLs are not allowed",
        "noLocalhost": "Localhost URLs are blocked",
    },
    "color": {
        "required": "Required",
        "invalid": "Invalid color format",
        "notHex": "Must be a valid hex color",
        "notRgb": "Must be a valid RGB color",
        "notHsl": "Must be a valid HSL color",
    },
    "coordinate": {
        "required": "Required",
        "invalid": "Invalid coordinate",
        "invalidLatitude": "Latitude must be between -90 and 90",
        "invalidLongitude": "Longitude must be between -180 and 180",
    },
    "creditCard": {
        "required": "Required",
        "invalid": "Invalid credit card number",
        "notInWhitelist": "Credit card number is not in the allowed list",
    },
    "date": {
        "required": "Required",
        "format": "Must be in ${format} format",
        "min": "Date must be on or after ${min}",
        "max": "Date must be on or before ${max}",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "past": "Date must be in the past",
        "future": "Date must be in the future",
        "today": "Date must be today",
        "notToday": "Date must not be today",
        "weekday": "Date must be a weekday",
        "weekend": "Date must be a weekend",
    },
    "datetime": {
        "required": "Required",
        "format": "Must be in ${format} format",
        "invalid": "Invalid datetime format",
        "customRegex": "Does not match the required datetime pattern",
        "notInWhitelist": "DateTime is not in the allowed list",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "hour": "Hour must be between ${minHour} and ${maxHour}",
        "minute": "Minutes must be in ${minuteStep}-minute intervals",
        "min": "DateTime must be after ${min}",
        "max": "DateTime must be before ${max}",
        "past": "DateTime must be in the past",
        "future": "DateTime must be in the future",
        "today": "DateTime must be today",
        "notToday": "DateTime must not be today",
        "weekday": "DateTime must be a weekday",
        "weekend": "DateTime must be a weekend",
    },
    "time": {
        "required": "Required",
        "format": "Must be in ${format} format",
        "invalid": "Invalid time",
        "customRegex": "Does not match the required time pattern",
        "notInWhitelist": "Time is not in the allowed list",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "hour": "Hour must be between ${minHour} and ${maxHour}",
        "minute": "Minutes must be in ${minuteStep}-minute intervals",
        "second": "Seconds must be in ${secondStep}-second intervals",
        "min": "Time must be after ${min}",
        "max": "Time must be before ${max}",
    },
    "file": {
        "required": "Required",
        "invalid": "Must be a valid file",
        "minSize": "File size must be at least ${minSize}",
        "maxSize": "File size must not exceed ${maxSize}",
        "type": "File type must be one of: ${type}",
        "typeBlacklist": "File type ${type} is not allowed",
        "extension": "File extension must be one of: ${extension}",
        "extensionBlacklist": "File extension ${extension} is not allowed",
        "name": "File name must match pattern ${pattern}",
        "nameBlacklist": "File name must not match pattern ${pattern}",
        "imageOnly": "Only image files are allowed",
        "documentOnly": "Only document files are allowed",
        "videoOnly": "Only video files are allowed",
        "audioOnly": "Only audio files are allowed",
        "archiveOnly": "Only archive files are allowed",
    },
    "id": {
        "required": "Required",
        "invalid": "Invalid ID format",
        "allowedTypes": "Invalid ID format (allowed types: ${allowedTypes})",
        "minLength": "Must be at least ${minLength} characters",
        "maxLength": "Must be at most ${maxLength} characters",
        "numeric": "Must be a numeric ID",
        "uuid": "Must be a valid UUID",
        "objectId": "Must be a valid MongoDB ObjectId",
        "nanoid": "Must be a valid Nano ID",
        "snowflake": "Must be a valid Snowflake ID",
        "cuid": "Must be a valid CUID",
        "ulid": "Must be a valid ULID",
        "shortid": "Must be a valid Short ID",
        "customFormat": "Invalid ID format",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
        "startsWith": "Must start with ${startsWith}",
        "endsWith": "Must end with ${endsWith}",
    },
    "ip": {
        "required": "Required",
        "invalid": "Invalid IP address",
        "notIPv4": "Must be a valid IPv4 address",
        "notIPv6": "Must be a valid IPv6 address",
        "notInWhitelist": "IP address is not in the allowed list",
    },
    "password": {
        "required": "Required",
        "invalid": "Invalid password format",
        "min": "Must be at least ${min} characters",
        "max": "Must be at most ${max} characters",
        "uppercase": "Must contain at least one uppercase letter",
        "lowercase": "Must contain at least one lowercase letter",
        "digits": "Must contain at least one digit",
        "special": "Must contain at least one special character",
        "noRepeating": "Must not contain repeating characters",
        "noSequential": "Must not contain sequential characters",
        "noCommonWords": "Must not contain common words",
        "minStrength": "Password strength must be at least ${minStrength}",
        "includes": "Must include ${includes}",
        "excludes": "Must not contain ${excludes}",
    },
    "businessId": {
        "required": "Required",
        "digits": "Must contain only numbers",
        "length": "Must be exactly 8 digits",
        "checksum": "Invalid Taiwan Business ID checksum",
    },
    "nationalId": {
        "required": "Required",
        "invalid": "Invalid Taiwan National ID",
        "checksum": "Invalid Taiwan National ID checksum",
    },
    "mobile": {
        "required": "Required",
        "invalid": "Invalid Taiwan mobile phone format",
        "notInWhitelist": "Not in allowed mobile phone list",
    },
    "tel": {
        "required": "Required",
        "invalid": "Invalid Taiwan telephone format",
        "notInWhitelist": "Not in allowed telephone list",
    },
    "fax": {
        "required": "Required",
        "invalid": "Invalid Taiwan fax format",
        "notInWhitelist": "Not in allowed fax list",
    },
    "postalCode": {
        "required": "Required",
        "invalid": "Invalid Taiwan postal code",
        "format3Only": "Only 3-digit postal codes are allowed",
        "format5Only": "Only 5-digit postal codes are allowed",
        "format6Only": "Only 6-digit postal codes are allowed",
        "invalidSuffix": "Invalid postal code suffix",
        "deprecated5Digit": "5-digit postal codes are deprecated",
        "legacy5DigitWarning": "5-digit postal codes are a legacy format, 6-digit codes are recommended",
    },
    "bankAccount": {
        "required": "Required",
        "invalid": "Invalid bank account format",
        "invalidBankCode": "Invalid bank code",
        "invalidAccountNumber": "Invalid account number",
    },
    "invoice": {
        "required": "Required",
        "invalid": "Invalid Taiwan uniform invoice number",
    },
    "licensePlate": {
        "required": "Required",
        "invalid": "Invalid Taiwan license plate number",
    },
    "passport": {
        "required": "Required",
        "invalid": "Invalid Taiwan passport number",
    },
}
