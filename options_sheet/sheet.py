"""
Spreadsheet custom formulas.

Each formula takes raw cell values, coerces them to numbers, and calls the
pricing or sequence function behind it. Bad input never raises: it comes
back as a FormulaError carrying the spreadsheet error code (#VALUE!, #NUM!,
#DIV/0!) that the sheet displays in the cell.

Formulas are registered by upper-case name in FORMULAS and can be called
directly or dispatched by name through evaluate().
"""

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np

from options_sheet.config import SheetConfig, get_default_config
from options_sheet.errors import (
    OptionsSheetError,
    InvalidParameterError,
    ZeroRowCountError,
)
from options_sheet.logger import get_logger
from options_sheet.pricing.black_scholes import bs_model, bs_greeks
from options_sheet.pricing.normal import normal_cdf
from options_sheet.sequence import set_sequence

logger = get_logger(__name__)

VALUE_ERROR = "#VALUE!"
NUM_ERROR = "#NUM!"
DIV0_ERROR = "#DIV/0!"
NAME_ERROR = "#NAME?"

GREEK_NAMES = ["delta", "gamma", "vega", "theta", "rho"]


@dataclass(frozen=True)
class FormulaError:
    """
    Tagged failure returned in place of a cell value.

    Attributes:
        code: Spreadsheet error code, e.g. '#VALUE!'
        message: Human readable cause
    """
    code: str
    message: str = ""

    def __str__(self) -> str:
        return self.code


class CellValueError(OptionsSheetError):
    """A cell holds something that is not a number."""


CellValue = Union[float, int, str, None]
FormulaResult = Union[float, List[List[Any]], FormulaError]

FORMULAS: Dict[str, Callable[..., FormulaResult]] = {}


def _error_code(exc: OptionsSheetError) -> str:
    if isinstance(exc, ZeroRowCountError):
        return DIV0_ERROR
    if isinstance(exc, InvalidParameterError):
        return NUM_ERROR
    return VALUE_ERROR


def custom_function(name: str):
    """
    Register a function as a spreadsheet formula under ``name``.

    The registered wrapper converts OptionsSheetError into a FormulaError.
    """
    def register(func):
        @functools.wraps(func)
        def formula(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OptionsSheetError as exc:
                error = FormulaError(_error_code(exc), str(exc))
                logger.debug(f"{name}{args} -> {error.code}: {error.message}")
                return error

        FORMULAS[name] = formula
        return formula

    return register


def to_number(value: CellValue, name: str, blank: Optional[float] = None) -> float:
    """
    Coerce a cell value to float.

    Args:
        value: Raw cell content
        name: Argument name, used in error messages
        blank: Value substituted for an empty cell; None rejects blanks

    Returns:
        The numeric value

    Raises:
        CellValueError: the cell is blank (and blank is None), a boolean,
            or text that does not parse as a number
        InvalidParameterError: an integer too large for a float
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if blank is None:
            raise CellValueError(f"{name} is empty")
        return blank
    if isinstance(value, (bool, np.bool_)):
        raise CellValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float, np.number)):
        try:
            return float(value)
        except OverflowError:
            raise InvalidParameterError(f"{name} is too large to represent") from None
    if isinstance(value, str):
        try:
            return float(value.strip().replace(',', ''))
        except ValueError:
            raise CellValueError(f"{name} must be a number, got {value!r}") from None
    raise CellValueError(f"{name} must be a number, got {type(value).__name__}")


def _config(config: Optional[SheetConfig]) -> SheetConfig:
    return config if config is not None else get_default_config()


def _premium(
    option_type: CellValue,
    spot: CellValue,
    strike: CellValue,
    risk_free_rate: CellValue,
    time_to_maturity: CellValue,
    volatility: CellValue,
    config: SheetConfig,
) -> float:
    return bs_model(
        option_type,
        to_number(spot, 'spot'),
        to_number(strike, 'strike'),
        to_number(risk_free_rate, 'risk_free_rate'),
        to_number(time_to_maturity, 'time_to_maturity', blank=0.0),
        to_number(volatility, 'volatility'),
        days_per_year=config.pricing.days_per_year,
    )


@custom_function("NORMALCDF")
def normalcdf(x: CellValue) -> FormulaResult:
    """Standard normal CDF of x."""
    x = to_number(x, 'x')
    if np.isnan(x):
        raise InvalidParameterError("x must be a number, got nan")
    return normal_cdf(x)


@custom_function("BSMODEL")
def bsmodel(
    option_type: CellValue,
    spot: CellValue,
    strike: CellValue,
    risk_free_rate: CellValue,
    time_to_maturity: CellValue,
    volatility: CellValue,
    *,
    config: Optional[SheetConfig] = None,
) -> FormulaResult:
    """Black-Scholes premium. time_to_maturity is in days; a blank cell means 0."""
    return _premium(
        option_type, spot, strike, risk_free_rate, time_to_maturity, volatility,
        _config(config),
    )


@custom_function("GETCALL")
def getcall(
    spot: CellValue,
    strike: CellValue,
    time: CellValue,
    iv: CellValue,
    *,
    config: Optional[SheetConfig] = None,
) -> FormulaResult:
    """Call premium at the configured risk-free rate."""
    config = _config(config)
    return _premium('call', spot, strike, config.pricing.risk_free_rate, time, iv, config)


@custom_function("GETPUT")
def getput(
    spot: CellValue,
    strike: CellValue,
    time: CellValue,
    iv: CellValue,
    *,
    config: Optional[SheetConfig] = None,
) -> FormulaResult:
    """Put premium at the configured risk-free rate."""
    config = _config(config)
    return _premium('put', spot, strike, config.pricing.risk_free_rate, time, iv, config)


@custom_function("SETSEQUENCE")
def setsequence(
    start: CellValue,
    end: CellValue,
    rows: CellValue,
    *,
    config: Optional[SheetConfig] = None,
) -> FormulaResult:
    """Evenly spaced values from start to end, spilled as a column (or a row)."""
    config = _config(config)
    values = set_sequence(
        to_number(start, 'start'),
        to_number(end, 'end'),
        to_number(rows, 'rows'),
    )
    if config.sequence.orientation == 'row':
        return [values]
    return [[value] for value in values]


@custom_function("BSGREEKS")
def bsgreeks(
    option_type: CellValue,
    spot: CellValue,
    strike: CellValue,
    risk_free_rate: CellValue,
    time_to_maturity: CellValue,
    volatility: CellValue,
    *,
    config: Optional[SheetConfig] = None,
) -> FormulaResult:
    """Greeks as a two-row table: names, then values."""
    config = _config(config)
    greeks = bs_greeks(
        option_type,
        to_number(spot, 'spot'),
        to_number(strike, 'strike'),
        to_number(risk_free_rate, 'risk_free_rate'),
        to_number(time_to_maturity, 'time_to_maturity', blank=0.0),
        to_number(volatility, 'volatility'),
        days_per_year=config.pricing.days_per_year,
    )
    return [list(GREEK_NAMES), [getattr(greeks, greek) for greek in GREEK_NAMES]]


def evaluate(name: str, *args: CellValue, config: Optional[SheetConfig] = None) -> FormulaResult:
    """
    Evaluate a registered formula by name, as the sheet would.

    Args:
        name: Formula name (case-insensitive), e.g. 'BSMODEL'
        *args: Raw cell values
        config: Sheet configuration (defaults if omitted)

    Returns:
        Formula result, or a FormulaError for unknown names, wrong argument
        counts, and invalid input
    """
    formula = FORMULAS.get(name.strip().upper())
    if formula is None:
        return FormulaError(NAME_ERROR, f"Unknown formula: {name}")

    signature = inspect.signature(formula)
    kwargs = {'config': config} if 'config' in signature.parameters else {}
    try:
        signature.bind(*args, **kwargs)
    except TypeError as exc:
        return FormulaError(VALUE_ERROR, f"{name.upper()}: {exc}")

    return formula(*args, **kwargs)
