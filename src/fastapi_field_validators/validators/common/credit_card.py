"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: credit_card.py
@DateTime: 2026-10-19
@Docs: Credit card field validator.
信用卡字段校验器。
"""

from typing import Any

from fastapi_field_validators.algorithms.cards import CardType, detect_card_type, validate_credit_card
from fastapi_field_validators.core import FieldOptions, FieldValidator, Rule, check
from fastapi_field_validators.normalization import normalize_text, strip_chars


class CreditCardOptions(FieldOptions):
    """
    Credit card options.
    信用卡选项。

    Attributes:
        card_type: Accepted brand(s); ``any`` accepts every brand.
        card_type: 接受的卡组织；``any`` 表示全部。
        whitelist: Accepted card numbers (separators ignored); checked last.
        whitelist: 接受的卡号（忽略分隔符）；最后检查。
    """

    card_type: CardType | tuple[CardType, ...] | None = None
    whitelist: tuple[str, ...] = ()


class CreditCardValidator(FieldValidator[CreditCardOptions]):
    """Credit card validator; returns digits only.
    信用卡校验器；返回纯数字卡号。
    """

    kind = "creditCard"
    options_model = CreditCardOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(strip_chars(normalize_text(value)), transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = [lambda v: check(validate_credit_card(v), "invalid")]
        if opts.card_type is not None:
            allowed = (opts.card_type,) if isinstance(opts.card_type, CardType) else opts.card_type
            if CardType.ANY not in allowed:
                rules.append(lambda v: check(detect_card_type(v) in allowed, "invalid"))
        if opts.whitelist:
            cleaned = {strip_chars(w) for w in opts.whitelist}
            rules.append(lambda v: check(v in cleaned, "notInWhitelist"))
        return rules


def credit_card(required: bool | None = None, /, **options: Any) -> CreditCardValidator:
    """
    Create a credit card validator.
    创建信用卡校验器。

    Examples:
        >>> credit_card().parse("4111 1111 1111 1111")
        '4111111111111111'
    """
    return CreditCardValidator.create(required, **options)
