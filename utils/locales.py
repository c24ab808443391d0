"""
Display strings per locale. Unknown locales fall back to English.
"""

DEFAULT_LOCALE = "en"

SLOT_LABELS = {
    "en": {
        "Fajr": "Fajr",
        "Sunrise": "Sunrise",
        "Dhuhr": "Dhuhr",
        "Asr": "Asr",
        "Maghrib": "Maghrib",
        "Isha": "Isha",
    },
    "tr": {
        "Fajr": "İmsak",
        "Sunrise": "Güneş",
        "Dhuhr": "Öğle",
        "Asr": "İkindi",
        "Maghrib": "Akşam",
        "Isha": "Yatsı",
    },
}

REMAINING_TEMPLATES = {
    "en": "{hours}h {minutes}m",
    "tr": "{hours} sa {minutes} dk",
}

HIJRI_MONTHS = {
    "tr": {
        "Muḥarram": "Muharrem",
        "Ṣafar": "Safer",
        "Rabīʿ al-awwal": "Rebiülevvel",
        "Rabīʿ al-thānī": "Rebiülahir",
        "Jumādá al-ūlá": "Cemaziyelevvel",
        "Jumādá al-ākhirah": "Cemaziyelahir",
        "Rajab": "Recep",
        "Shaʿbān": "Şaban",
        "Ramaḍān": "Ramazan",
        "Shawwāl": "Şevval",
        "Dhū al-Qaʿdah": "Zilkade",
        "Dhū al-Ḥijjah": "Zilhicce",
    },
}


def slot_label(key: str, locale: str = DEFAULT_LOCALE) -> str:
    labels = SLOT_LABELS.get(locale, SLOT_LABELS[DEFAULT_LOCALE])
    return labels.get(key, key)


def remaining_template(locale: str = DEFAULT_LOCALE) -> str:
    return REMAINING_TEMPLATES.get(locale, REMAINING_TEMPLATES[DEFAULT_LOCALE])


def hijri_month(name: str, locale: str = DEFAULT_LOCALE) -> str:
    return HIJRI_MONTHS.get(locale, {}).get(name, name)
