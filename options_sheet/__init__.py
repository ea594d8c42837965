"""
Options Sheet

Black-Scholes option pricing and numeric sequence generation, usable from
Python and as spreadsheet custom formulas.
"""

__version__ = "0.1.0"

from options_sheet.config import (
    SheetConfig,
    PricingConfig,
    SequenceConfig,
    get_default_config,
)
from options_sheet.errors import (
    OptionsSheetError,
    InvalidOptionTypeError,
    InvalidParameterError,
    ZeroRowCountError,
)
from options_sheet.logger import get_logger, setup_logger
from options_sheet.pricing import (
    normal_cdf,
    bs_model,
    get_call,
    get_put,
    bs_greeks,
    OptionGreeks,
    BlackScholesCalculator,
)
from options_sheet.sequence import set_sequence
from options_sheet.sheet import FormulaError, evaluate

__all__ = [
    # Version
    "__version__",
    # Config
    "SheetConfig",
    "PricingConfig",
    "SequenceConfig",
    "get_default_config",
    # Errors
    "OptionsSheetError",
    "InvalidOptionTypeError",
    "InvalidParameterError",
    "ZeroRowCountError",
    # Logging
    "get_logger",
    "setup_logger",
    # Pricing
    "normal_cdf",
    "bs_model",
    "get_call",
    "get_put",
    "bs_greeks",
    "OptionGreeks",
    "BlackScholesCalculator",
    # Sequences
    "set_sequence",
    # Sheet formulas
    "FormulaError",
    "evaluate",
]
