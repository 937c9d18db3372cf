"""Global enums: values are the exact strings carried in event tags.

Event kinds follow NIP-01 / NIP-09 / NIP-99 numbering.
"""

from enum import Enum


class EventKind(int, Enum):
    DELETION = 5
    CLASSIFIED_LISTING = 30402
    P2P_TRADE_OFFER = 38400  # legacy trade-offer kind, still accepted on read


class TradeOfferType(str, Enum):
    """Direction of the offer from the creator's point of view."""
    BUY = "buy"
    SELL = "sell"

    @property
    def display_name(self) -> str:
        return "Buy BTC" if self is TradeOfferType.BUY else "Sell BTC"


class TradeOfferStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    EXPIRED = "expired"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def can_publish(self) -> bool:
        return self in (TradeOfferStatus.DRAFT, TradeOfferStatus.PAUSED)

    @property
    def can_edit(self) -> bool:
        return self is TradeOfferStatus.DRAFT

    @property
    def can_cancel(self) -> bool:
        return self in (TradeOfferStatus.ACTIVE, TradeOfferStatus.PAUSED)

    @property
    def is_visible_in_marketplace(self) -> bool:
        return self is TradeOfferStatus.ACTIVE


class PaymentMethod(str, Enum):
    """Payment rails accepted for the fiat leg of a trade.

    The value is the canonical machine name used in the ``payment`` tag.
    """
    CASH_IN_PERSON = "cash_in_person"
    BANK_TRANSFER = "bank_transfer"
    CASH_DEPOSIT = "cash_deposit"
    PAYPAL = "paypal"
    REVOLUT = "revolut"
    WISE = "wise"
    ZELLE = "zelle"
    VENMO = "venmo"
    STRIKE = "strike"
    BIZUM = "bizum"
    CASH_BY_MAIL = "cash_by_mail"
    MONEY_ORDER = "money_order"
    GIFT_CARD = "gift_card"
    MOBILE_MONEY = "mobile_money"
    CRYPTOCURRENCY = "cryptocurrency"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _PAYMENT_METHOD_INFO[self][0]

    @property
    def description(self) -> str:
        return _PAYMENT_METHOD_INFO[self][1]

    @property
    def topic(self) -> str:
        """Hashtag form: ``cash_in_person`` -> ``cash-in-person``."""
        return self.value.replace("_", "-")

    @property
    def requires_in_person(self) -> bool:
        return self is PaymentMethod.CASH_IN_PERSON

    @property
    def is_reversible(self) -> bool:
        # chargeback risk
        return self in (PaymentMethod.PAYPAL, PaymentMethod.VENMO, PaymentMethod.GIFT_CARD)

    @property
    def is_instant(self) -> bool:
        return self in (
            PaymentMethod.CASH_IN_PERSON,
            PaymentMethod.REVOLUT,
            PaymentMethod.STRIKE,
            PaymentMethod.BIZUM,
            PaymentMethod.ZELLE,
        )

    @classmethod
    def from_name(cls, name: str | None) -> "PaymentMethod | None":
        """Case-insensitive lookup by machine name; None when unknown."""
        if name is None:
            return None
        try:
            return cls(name.lower())
        except ValueError:
            return None


_PAYMENT_METHOD_INFO: dict[PaymentMethod, tuple[str, str]] = {
    PaymentMethod.CASH_IN_PERSON: ("Cash in Person", "Meet face-to-face and exchange cash for BTC"),
    PaymentMethod.BANK_TRANSFER: ("Bank Transfer", "Direct bank transfer (SEPA, ACH, wire, etc.)"),
    PaymentMethod.CASH_DEPOSIT: ("Cash Deposit", "Deposit cash at bank or ATM"),
    PaymentMethod.PAYPAL: ("PayPal", "PayPal payment"),
    PaymentMethod.REVOLUT: ("Revolut", "Revolut payment"),
    PaymentMethod.WISE: ("Wise (TransferWise)", "Wise transfer"),
    PaymentMethod.ZELLE: ("Zelle", "Zelle payment (US)"),
    PaymentMethod.VENMO: ("Venmo", "Venmo payment (US)"),
    PaymentMethod.STRIKE: ("Strike", "Strike Lightning payment"),
    PaymentMethod.BIZUM: ("Bizum", "Bizum payment (Spain)"),
    PaymentMethod.CASH_BY_MAIL: ("Cash by Mail", "Physical cash sent by mail"),
    PaymentMethod.MONEY_ORDER: ("Money Order", "Postal or bank money order"),
    PaymentMethod.GIFT_CARD: ("Gift Card", "Amazon, Steam, or other gift cards"),
    PaymentMethod.MOBILE_MONEY: ("Mobile Money", "M-Pesa, bKash, or other mobile money"),
    PaymentMethod.CRYPTOCURRENCY: ("Cryptocurrency", "Payment in other cryptocurrency"),
    PaymentMethod.OTHER: ("Other", "Other payment method (specify in terms)"),
}
