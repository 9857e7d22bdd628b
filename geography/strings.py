"""
Localized text for the atlas.
Nepali ("ne") is the classroom language and the default; English ("en") is kept for teachers and reviewers.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "ne"

STRINGS: Dict[str, Dict[str, str]] = {
    "ne": {
        "fallback_description": "{province} प्रदेशमा अवस्थित एक महत्वपूर्ण भौगोलिक विशेषता।",
        "list_summary": "तपाईंको फिल्टर अनुसार {count} वस्तुहरू देखाइएको छ",
        "assistant_apology": "माफ गर्नुहोस्, मलाई अहिले केही समस्या भइरहेको छ। कृपया पछि फेरि प्रयास गर्नुहोस्।",
        "assistant_empty_reply": "माफ गर्नुहोस्, मैले त्यो अनुरोध प्रशोधन गर्न सकिन।",
        "assistant_welcome": "मलाई नेपालको भूगोलको बारेमा केहि सोध्नुहोस्!",
        "province_badge": "प्रदेश",
        "all_provinces": "सबै प्रदेशहरू",
    },
    "en": {
        "fallback_description": "An important geographic feature located in {province} province.",
        "list_summary": "Showing {count} features for your filters",
        "assistant_apology": "Sorry, I am having some trouble right now. Please try again later.",
        "assistant_empty_reply": "Sorry, I could not process that request.",
        "assistant_welcome": "Ask me anything about the geography of Nepal!",
        "province_badge": "Province",
        "all_provinces": "All provinces",
    },
}

CATEGORY_LABELS: Dict[str, Dict[str, str]] = {
    "ne": {
        "mountains": "हिमाल",
        "rivers": "नदी",
        "lakes": "ताल",
        "production": "उत्पादन क्षेत्र",
        "protectedAreas": "संरक्षित क्षेत्र",
        "religiousSites": "धार्मिक स्थल",
        "tradeCenters": "व्यापारिक केन्द्र",
        "nationalPrideProjects": "राष्ट्रिय गौरव",
        "highways": "राजमार्ग",
        "capitals": "राजधानी",
    },
    "en": {
        "mountains": "Mountains",
        "rivers": "Rivers",
        "lakes": "Lakes",
        "production": "Production Zones",
        "protectedAreas": "Protected Areas",
        "religiousSites": "Religious Sites",
        "tradeCenters": "Trade Centers",
        "nationalPrideProjects": "National Pride Projects",
        "highways": "Highways",
        "capitals": "Provincial Capitals",
    },
}


def resolve_locale(locale: str = None) -> str:
    """Return a supported locale code, falling back to Nepali."""
    if not locale:
        return DEFAULT_LOCALE
    code = locale.strip().lower()
    if code not in STRINGS:
        logger.warning(f"Unsupported locale '{locale}', falling back to '{DEFAULT_LOCALE}'")
        return DEFAULT_LOCALE
    return code


def text(key: str, locale: str = None, **values) -> str:
    template = STRINGS[resolve_locale(locale)][key]
    return template.format(**values) if values else template


def fallback_description(province: str, locale: str = None) -> str:
    return text("fallback_description", locale, province=province)


def feature_description(feature, locale: str = None) -> str:
    """Popup / list description: the feature's own text, or the province template when it has none."""
    if feature.description:
        return feature.description
    return fallback_description(feature.province, locale)
