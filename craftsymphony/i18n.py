from flask import request, session

from craftsymphony.catalog.pricing import format_price

LANGS = ("pl", "en")
DEFAULT_LANG = "pl"
SESSION_KEY = "cs_lang"

UI_STRINGS = {
    "pl": {
        "nav_leather": "Skóra",
        "nav_wood": "Drewno",
        "price": "Cena:",
        "belt_no": "Nr paska:",
        "upper_size": "Rozmiar maks.:",
        "lower_size": "Rozmiar min.:",
        "main_size": "Rozmiar główny:",
        "buckle_size": "Sprzączka:",
        "loading": "Ładowanie…",
        "empty": "Brak produktów",
        "filter": "Filtruj",
        "search": "Szukaj",
        "price_from": "Cena od",
        "price_to": "Cena do",
        "size_from": "Rozmiar od",
        "size_to": "Rozmiar do",
        "buckle_from": "Sprzączka od",
        "buckle_to": "Sprzączka do",
        "interested_heading": "Zainteresowany?",
        "interested_text": "Zostaw e-mail i numer paska, odezwiemy się.",
        "email_placeholder": "Twój e-mail",
        "belt_no_placeholder": "Nr paska",
        "submit": "Wyślij",
        "prev": "Poprzedni",
        "next": "Następny",
        "visits": "Odwiedziny",
    },
    "en": {
        "nav_leather": "Leather",
        "nav_wood": "Wood",
        "price": "Price:",
        "belt_no": "Belt no.:",
        "upper_size": "Max size:",
        "lower_size": "Min size:",
        "main_size": "Main size:",
        "buckle_size": "Buckle:",
        "loading": "Loading…",
        "empty": "No products",
        "filter": "Filter",
        "search": "Search",
        "price_from": "Price from",
        "price_to": "Price to",
        "size_from": "Size from",
        "size_to": "Size to",
        "buckle_from": "Buckle from",
        "buckle_to": "Buckle to",
        "interested_heading": "Interested?",
        "interested_text": "Leave your e-mail and the belt number, we will get back to you.",
        "email_placeholder": "Your e-mail",
        "belt_no_placeholder": "Belt no.",
        "submit": "Send",
        "prev": "Previous",
        "next": "Next",
        "visits": "Visits",
    },
}


def current_lang():
    requested = (request.args.get("lang") or "").lower()
    if requested in LANGS:
        session[SESSION_KEY] = requested
        return requested
    saved = session.get(SESSION_KEY)
    return saved if saved in LANGS else DEFAULT_LANG


def localized(pl_text, en_text, lang):
    if lang == "en" and en_text:
        return en_text
    return pl_text or en_text or ""


def init_i18n(app):
    @app.context_processor
    def inject_lang():
        lang = current_lang()
        return {"lang": lang, "t": UI_STRINGS[lang]}

    app.add_template_filter(format_price, "price")
    app.add_template_global(localized, "localized")
