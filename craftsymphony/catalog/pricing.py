import math
import re

PLN_PER_USD = 4
NBSP = "\u00a0"
EMPTY = "—"


def plain_number(value):
    """Render a number the way the storefront prints sizes: 95.0 -> '95'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def to_number(value):
    """Coerce form/JSON input to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def format_pl_number(value):
    """Polish grouping: no separator below 10 000, NBSP groups above, comma decimals."""
    text = plain_number(value)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    whole, _, frac = text.partition(".")
    if len(whole) > 4:
        groups = []
        while whole:
            groups.insert(0, whole[-3:])
            whole = whole[:-3]
        whole = NBSP.join(groups)
    return sign + whole + ("," + frac if frac else "")


def format_usd(value):
    usd = float(value) / PLN_PER_USD
    sign = "-" if usd < 0 else ""
    return f"{sign}${abs(usd):,.2f}"


def _parse_price_text(text):
    cleaned = re.sub(r"[^\d.,]", "", str(text)).replace(",", ".", 1)
    return to_number(cleaned)


def format_price(price, lang="pl"):
    """Format a PLN price for the UI language.

    Numbers render as ``"1 234 PLN"`` in Polish and as the dollar equivalent
    (PLN / 4) in English. Pre-formatted strings pass through untouched in
    Polish and are parsed back to a number for the English conversion.
    """
    if price is None:
        return EMPTY

    if isinstance(price, (int, float)) and not isinstance(price, bool):
        if lang == "pl":
            return f"{format_pl_number(price)} PLN"
        return format_usd(price)

    if lang == "pl":
        return price

    numeric = _parse_price_text(price)
    if numeric is None:
        return price
    return format_usd(numeric)


def format_size(value):
    number = to_number(value)
    if number is None:
        return None
    return f"{plain_number(number)} cm"


def size_bounds(size_min, size_max):
    """Return ("<upper> cm", "<lower> cm") for an unordered size pair."""
    a, b = to_number(size_min), to_number(size_max)
    if a is None or b is None:
        return EMPTY, EMPTY
    return f"{plain_number(max(a, b))} cm", f"{plain_number(min(a, b))} cm"
