"""
Black-Scholes option pricing and Greeks calculation.

Maturities are quoted in calendar days, as they are typed into a sheet,
and converted to years with the configured day count.
"""

import numpy as np
from typing import Literal, Optional
from dataclasses import dataclass

from options_sheet.config import PricingConfig, DAYS_PER_YEAR, DEFAULT_RISK_FREE_RATE
from options_sheet.errors import InvalidOptionTypeError, InvalidParameterError
from options_sheet.logger import get_logger
from options_sheet.pricing.normal import normal_cdf, normal_pdf

logger = get_logger(__name__)

OptionType = Literal['call', 'put']


def normalize_option_type(option_type) -> str:
    """Return 'call' or 'put', accepting any case and surrounding whitespace."""
    if isinstance(option_type, str):
        normalized = option_type.strip().lower()
        if normalized in ('call', 'put'):
            return normalized
    raise InvalidOptionTypeError(option_type)


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not np.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number, got {value}")


def _validate(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float,
) -> float:
    """Validate pricing inputs and return the maturity in years."""
    _check_finite(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
    )
    if spot <= 0:
        raise InvalidParameterError(f"spot must be positive, got {spot}")
    if strike <= 0:
        raise InvalidParameterError(f"strike must be positive, got {strike}")
    if time_to_maturity < 0:
        raise InvalidParameterError(
            f"time_to_maturity must be non-negative, got {time_to_maturity}"
        )
    if volatility <= 0:
        raise InvalidParameterError(f"volatility must be positive, got {volatility}")
    if days_per_year <= 0:
        raise InvalidParameterError(f"days_per_year must be positive, got {days_per_year}")

    return time_to_maturity / days_per_year


def _d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate d1 parameter for Black-Scholes formula."""
    return (np.log(S / K) + (r + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))


def _d2(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate d2 parameter for Black-Scholes formula."""
    return _d1(S, K, T, r, sigma) - sigma * np.sqrt(T)


def bs_model(
    option_type: OptionType,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate the Black-Scholes premium of a European option.

    Args:
        option_type: 'call' or 'put' (case-insensitive)
        spot: Current price of the underlying
        strike: Strike price
        risk_free_rate: Risk-free interest rate (annual)
        time_to_maturity: Time to expiry in calendar days
        volatility: Implied volatility (annual)
        days_per_year: Day count used to convert days to years

    Returns:
        Option premium

    Raises:
        InvalidOptionTypeError: option_type is not 'call' or 'put'
        InvalidParameterError: a numeric input is out of range
    """
    option_type = normalize_option_type(option_type)
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)

    if T == 0:
        # At expiration
        if option_type == 'call':
            return max(spot - strike, 0.0)
        return max(strike - spot, 0.0)

    d1 = _d1(spot, strike, T, risk_free_rate, volatility)
    d2 = d1 - volatility * np.sqrt(T)
    discount = np.exp(-risk_free_rate * T)

    if option_type == 'call':
        price = spot * normal_cdf(d1) - strike * discount * normal_cdf(d2)
    else:
        price = strike * discount * normal_cdf(-d2) - spot * normal_cdf(-d1)

    return float(price)


def get_call(
    spot: float,
    strike: float,
    time: float,
    iv: float,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """Call premium at the house risk-free rate. ``time`` is in days."""
    return bs_model('call', spot, strike, risk_free_rate, time, iv)


def get_put(
    spot: float,
    strike: float,
    time: float,
    iv: float,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """Put premium at the house risk-free rate. ``time`` is in days."""
    return bs_model('put', spot, strike, risk_free_rate, time, iv)


def bs_delta(
    option_type: OptionType,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate Black-Scholes delta (∂V/∂S).

    Returns:
        Delta value
    """
    option_type = normalize_option_type(option_type)
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)

    if T == 0:
        if option_type == 'call':
            return 1.0 if spot > strike else 0.0
        return -1.0 if spot < strike else 0.0

    d1 = _d1(spot, strike, T, risk_free_rate, volatility)

    if option_type == 'call':
        return float(normal_cdf(d1))
    return float(-normal_cdf(-d1))


def bs_gamma(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate Black-Scholes gamma (∂²V/∂S²). Same for calls and puts.
    """
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)
    if T == 0:
        return 0.0

    d1 = _d1(spot, strike, T, risk_free_rate, volatility)
    return float(normal_pdf(d1) / (spot * volatility * np.sqrt(T)))


def bs_vega(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate Black-Scholes vega (∂V/∂σ). Same for calls and puts.

    Returns:
        Vega value (per 1 point change in volatility)
    """
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)
    if T == 0:
        return 0.0

    d1 = _d1(spot, strike, T, risk_free_rate, volatility)
    vega = spot * normal_pdf(d1) * np.sqrt(T)
    return float(vega / 100)


def bs_theta(
    option_type: OptionType,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate Black-Scholes theta (∂V/∂t).

    Returns:
        Theta value (per calendar day)
    """
    option_type = normalize_option_type(option_type)
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)
    if T == 0:
        return 0.0

    d1 = _d1(spot, strike, T, risk_free_rate, volatility)
    d2 = d1 - volatility * np.sqrt(T)
    discount = np.exp(-risk_free_rate * T)

    decay = -(spot * normal_pdf(d1) * volatility) / (2 * np.sqrt(T))
    if option_type == 'call':
        carry = -risk_free_rate * strike * discount * normal_cdf(d2)
    else:
        carry = risk_free_rate * strike * discount * normal_cdf(-d2)

    return float((decay + carry) / days_per_year)


def bs_rho(
    option_type: OptionType,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """
    Calculate Black-Scholes rho (∂V/∂r).

    Returns:
        Rho value (per 1% change in interest rate)
    """
    option_type = normalize_option_type(option_type)
    T = _validate(spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)
    if T == 0:
        return 0.0

    d2 = _d2(spot, strike, T, risk_free_rate, volatility)
    discount = np.exp(-risk_free_rate * T)

    if option_type == 'call':
        rho = strike * T * discount * normal_cdf(d2)
    else:
        rho = -strike * T * discount * normal_cdf(-d2)

    return float(rho / 100)


@dataclass
class OptionGreeks:
    """Container for option Greeks."""
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float


def bs_greeks(
    option_type: OptionType,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    days_per_year: float = DAYS_PER_YEAR,
) -> OptionGreeks:
    """Calculate all Greeks at once."""
    args = (spot, strike, risk_free_rate, time_to_maturity, volatility, days_per_year)
    return OptionGreeks(
        delta=bs_delta(option_type, *args),
        gamma=bs_gamma(*args),
        vega=bs_vega(*args),
        theta=bs_theta(option_type, *args),
        rho=bs_rho(option_type, *args),
    )


class BlackScholesCalculator:
    """
    Black-Scholes calculator bound to a set of market conventions.

    Useful for repeated calculations with the same rate and day count.
    """

    def __init__(self, pricing_config: Optional[PricingConfig] = None):
        """
        Initialize calculator with pricing configuration.

        Args:
            pricing_config: Pricing configuration dataclass (defaults if omitted)
        """
        self.config = pricing_config if pricing_config is not None else PricingConfig()
        logger.debug(f"Initialized BlackScholesCalculator with config: {self.config}")

    def price(
        self,
        option_type: OptionType,
        spot: float,
        strike: float,
        time_to_maturity: float,
        volatility: float,
    ) -> float:
        """Calculate option price."""
        return bs_model(
            option_type,
            spot,
            strike,
            self.config.risk_free_rate,
            time_to_maturity,
            volatility,
            days_per_year=self.config.days_per_year,
        )

    def call(self, spot: float, strike: float, time_to_maturity: float, volatility: float) -> float:
        """Calculate call price."""
        return self.price('call', spot, strike, time_to_maturity, volatility)

    def put(self, spot: float, strike: float, time_to_maturity: float, volatility: float) -> float:
        """Calculate put price."""
        return self.price('put', spot, strike, time_to_maturity, volatility)

    def greeks(
        self,
        option_type: OptionType,
        spot: float,
        strike: float,
        time_to_maturity: float,
        volatility: float,
    ) -> OptionGreeks:
        """Calculate all Greeks at once."""
        return bs_greeks(
            option_type,
            spot,
            strike,
            self.config.risk_free_rate,
            time_to_maturity,
            volatility,
            days_per_year=self.config.days_per_year,
        )
