import re
import unicodedata

# Letters NFKD cannot decompose to ASCII
_TRANSLITERATE = str.maketrans({"ł": "l", "Ł": "L", "ß": "ss", "ø": "o", "Ø": "O"})


def slugify(name, max_len=80):
    norm = unicodedata.normalize("NFKD", (name or "").strip().translate(_TRANSLITERATE))
    s = "".join(ch for ch in norm if unicodedata.category(ch) != "Mn").lower()
    s = re.sub(r"[^a-z0-9\s-]", "", s).strip()
    s = re.sub(r"[\s-]+", "-", s).strip("-")
    return s[:max_len]
