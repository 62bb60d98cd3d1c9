"""
Country culture presets.

Reference data (ISO country and currency codes) bundled with ready-made
currency and signed-number formats.
"""

from src.country.culture import SUPPORTED_COUNTRIES, CountryCultureSpec, country_culture

__all__ = [
    "CountryCultureSpec",
    "SUPPORTED_COUNTRIES",
    "country_culture",
]
