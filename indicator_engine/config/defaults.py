"""Default indicator parameters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RSIParams:
    """RSI calculation parameters."""
    period: int = 14


@dataclass(frozen=True)
class MACDParams:
    """MACD calculation parameters."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9


@dataclass(frozen=True)
class StochasticParams:
    """Stochastic oscillator parameters."""
    k_period: int = 14
    d_period: int = 3


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rsi: RSIParams
    macd: MACDParams
    stochastic: StochasticParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rsi=RSIParams(),
        macd=MACDParams(),
        stochastic=StochasticParams(),
    )


def config_from_dict(data: dict) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary."""
    return DefaultConfig(
        rsi=RSIParams(**data.get("rsi", {})),
        macd=MACDParams(**data.get("macd", {})),
        stochastic=StochasticParams(**data.get("stochastic", {})),
    )
