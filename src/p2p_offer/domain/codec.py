"""Trade offer <-> Nostr event codec.

encode_offer        TradeOffer -> kind 30402 classified listing (unsigned)
decode_offer        kind 30402 / 38400 event -> TradeOffer, or None
encode_retraction   TradeOffer -> kind 5 deletion event

Tag schema written by encode_offer, in order:
    d, title, summary, published_at, [location], [price <value> <currency>],
    amt <sats> sats, type, payment, status, min_trade <sats> sats,
    max_trade <sats> sats, escrow_hours, t bitcoin, t p2p, t <currency>, t <payment>
"""

import logging
from decimal import Decimal

from src.p2p_common.datetime_utils import epoch_now, from_epoch
from src.p2p_common.enums import EventKind, PaymentMethod, TradeOfferStatus, TradeOfferType
from src.p2p_common.errors import AppError, OfferDecodeError, UnsupportedEventKindError
from src.p2p_common.id_generator import generate_offer_id
from src.p2p_common.result import Result, failure, success
from src.p2p_nostr.domain.models import Event, TagSet
from src.p2p_offer.domain.content import render_body, render_summary, render_title
from src.p2p_offer.domain.models import TradeOffer
from src.p2p_offer.domain.tag_parsing import (
    parse_decimal,
    parse_epoch,
    parse_int,
    parse_or_default,
)

logger = logging.getLogger(__name__)

DECODABLE_KINDS = frozenset(
    {EventKind.CLASSIFIED_LISTING.value, EventKind.P2P_TRADE_OFFER.value}
)
SATS_UNIT = "sats"
TOPICS = ("bitcoin", "p2p")
RETRACTION_CONTENT = "Offer closed"

# Decode defaults for missing or degraded tags
DEFAULT_AMOUNT_SATS = 10_000_000
DEFAULT_MIN_TRADE_SATS = 100_000
DEFAULT_ESCROW_HOURS = 24
DEFAULT_CURRENCY = "USD"
DEFAULT_PAYMENT_METHOD = PaymentMethod.BANK_TRANSFER
ANONYMOUS = "Anonymous"


def encode_offer(offer: TradeOffer, author_key: str) -> Event:
    """Build the unsigned classified-listing event for an offer.

    Always stamps ``status=active`` and the current time as ``published_at``.
    """
    tags = TagSet()
    tags.add("d", offer.id if offer.id is not None else generate_offer_id())
    tags.add("title", render_title(offer))
    tags.add("summary", render_summary(offer))
    tags.add("published_at", str(epoch_now()))
    if offer.location:
        tags.add("location", offer.location)
    if not offer.use_market_price:
        tags.add("price", str(offer.price), offer.currency)
    tags.add("amt", str(offer.amount_sats), SATS_UNIT)
    tags.add("type", offer.type.value)
    tags.add("payment", offer.payment_method.value)
    tags.add("status", TradeOfferStatus.ACTIVE.value)
    tags.add("min_trade", str(offer.min_trade_sats), SATS_UNIT)
    tags.add("max_trade", str(offer.max_trade_sats), SATS_UNIT)
    tags.add("escrow_hours", str(offer.escrow_time_hours))
    for topic in TOPICS:
        tags.add("t", topic)
    tags.add("t", offer.currency.lower())
    tags.add("t", offer.payment_method.topic)

    return Event(
        pubkey=author_key,
        kind=EventKind.CLASSIFIED_LISTING.value,
        content=render_body(offer),
        tags=tags.to_wire(),
    )


def decode_offer(event: Event) -> TradeOffer | None:
    """Reconstruct an offer from a received event; None on any failure."""
    return decode_offer_result(event).value


def decode_offer_result(event: Event) -> Result[TradeOffer]:
    if event.kind not in DECODABLE_KINDS:
        logger.warning("Event is not a classified listing or trade offer: kind=%s", event.kind)
        return failure(UnsupportedEventKindError(event.kind))
    try:
        return success(_build_offer(event))
    except AppError as exc:
        logger.error("Failed to parse offer from event %s: %s", event.id, exc.message)
        return failure(OfferDecodeError(exc.message))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to parse offer from event %s", event.id)
        return failure(OfferDecodeError(f"Failed to parse offer from event: {exc}"))


def _build_offer(event: Event) -> TradeOffer:
    tags = event.tag_set
    offer_id = tags.value("d")

    type_str = tags.value("type")
    offer_type = (
        TradeOfferType.BUY if type_str is not None and type_str.lower() == "buy"
        else TradeOfferType.SELL
    )

    amount_sats = parse_or_default("amt", tags.value("amt"), parse_int, DEFAULT_AMOUNT_SATS)

    use_market_price = True
    price = Decimal("0")
    currency = DEFAULT_CURRENCY
    price_tag = tags.first("price")
    if price_tag is not None and price_tag.value is not None:
        parsed = parse_or_default("price", price_tag.value, parse_decimal, None)
        if parsed is not None:
            use_market_price = False
            price = parsed
            currency = price_tag.qualifier if price_tag.qualifier is not None else DEFAULT_CURRENCY

    payment_str = tags.value("payment")
    payment_method = PaymentMethod.from_name(payment_str)
    if payment_method is None:
        if payment_str is not None:
            logger.warning("Unknown payment method: %s", payment_str)
        payment_method = DEFAULT_PAYMENT_METHOD

    min_trade_sats = parse_or_default(
        "min_trade", tags.value("min_trade"), parse_int, DEFAULT_MIN_TRADE_SATS, lenient=False
    )
    max_trade_sats = parse_or_default(
        "max_trade", tags.value("max_trade"), parse_int, amount_sats, lenient=False
    )
    escrow_hours = parse_or_default(
        "escrow_hours", tags.value("escrow_hours"), parse_int, DEFAULT_ESCROW_HOURS, lenient=False
    )

    published_at = parse_or_default(
        "published_at", tags.value("published_at"), parse_epoch, None
    )
    if published_at is None and event.created_at > 0:
        published_at = from_epoch(event.created_at)

    return TradeOffer(
        id=offer_id if offer_id is not None else event.id,
        type=offer_type,
        amount_sats=amount_sats,
        currency=currency,
        price=price,
        use_market_price=use_market_price,
        premium_percent=Decimal("0"),
        min_trade_sats=min_trade_sats,
        max_trade_sats=max_trade_sats,
        payment_method=payment_method,
        location=tags.value("location"),
        description=event.content,
        escrow_time_hours=escrow_hours,
        creator_pubkey=event.pubkey,
        creator_display_name=ANONYMOUS,
        status=TradeOfferStatus.ACTIVE,
        nostr_event_id=event.id,
        published_at=published_at,
    )


def encode_retraction(offer: TradeOffer, author_key: str) -> Event:
    """NIP-09 deletion event withdrawing a published offer."""
    listing_kind = str(EventKind.CLASSIFIED_LISTING.value)
    tags = TagSet()
    if offer.nostr_event_id is not None:
        tags.add("e", offer.nostr_event_id)
    if offer.id is not None:
        tags.add("a", f"{listing_kind}:{author_key}:{offer.id}")
    tags.add("k", listing_kind)

    return Event(
        pubkey=author_key,
        kind=EventKind.DELETION.value,
        content=RETRACTION_CONTENT,
        tags=tags.to_wire(),
    )
