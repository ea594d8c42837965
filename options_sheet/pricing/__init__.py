"""
Options pricing module.

Provides:
- Zelen & Severo approximation of the standard normal CDF
- Black-Scholes premiums and Greeks
"""

from options_sheet.pricing.normal import normal_cdf, normal_pdf
from options_sheet.pricing.black_scholes import (
    bs_model,
    get_call,
    get_put,
    bs_delta,
    bs_gamma,
    bs_vega,
    bs_theta,
    bs_rho,
    bs_greeks,
    normalize_option_type,
    OptionGreeks,
    BlackScholesCalculator,
)

__all__ = [
    "normal_cdf",
    "normal_pdf",
    "bs_model",
    "get_call",
    "get_put",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_rho",
    "bs_greeks",
    "normalize_option_type",
    "OptionGreeks",
    "BlackScholesCalculator",
]
