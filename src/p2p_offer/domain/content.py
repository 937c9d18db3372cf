"""Human-readable parts of a published offer: markdown body, title, summary.

Body layout (lines only present when their source field is set):

    ## Selling 0.5 BTC

    **Amount:** 50,000,000 sats
    **Price:** 50000.00 USD | Market price | Market +5%
    **Payment:** Bank Transfer
    **Location:** Berlin

    <description>

    ### Terms
    <terms>

Readers never parse this back; structured fields travel in tags.
"""

from src.p2p_common.enums import TradeOfferType
from src.p2p_common.sats import format_btc, format_fiat, format_premium, format_sats
from src.p2p_offer.domain.models import TradeOffer


def _verb(offer: TradeOffer) -> str:
    return "Selling" if offer.type is TradeOfferType.SELL else "Buying"


def price_text(offer: TradeOffer) -> str:
    if offer.use_market_price:
        return format_premium(offer.premium_percent)
    return f"{format_fiat(offer.price)} {offer.currency}"


def render_title(offer: TradeOffer) -> str:
    title = f"{_verb(offer)} {format_btc(offer.amount_sats)} BTC"
    if not offer.use_market_price:
        title += f" for {format_fiat(offer.price)} {offer.currency}"
    return title


def render_summary(offer: TradeOffer) -> str:
    return f"{render_title(offer)} via {offer.payment_method.display_name}"


def render_body(offer: TradeOffer) -> str:
    lines = [
        f"## {_verb(offer)} {format_btc(offer.amount_sats)} BTC",
        "",
        f"**Amount:** {format_sats(offer.amount_sats)} sats",
        f"**Price:** {price_text(offer)}",
        f"**Payment:** {offer.payment_method.display_name}",
    ]
    if offer.location:
        lines.append(f"**Location:** {offer.location}")
    if offer.description:
        lines += ["", offer.description]
    if offer.terms:
        lines += ["", "### Terms", offer.terms]
    return "\n".join(lines) + "\n"
