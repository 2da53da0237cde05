"""
Indicator analysis coordinator.

Resolves per-symbol parameters, runs the RSI, MACD and Stochastic
calculators over a candle series and fuses their readings into a composite
signal. The calculators themselves stay pure; this layer adds configuration,
candle lookup and logging.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from .config.defaults import DefaultConfig, config_from_dict
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Candle, closes
from .data.repository import CandleRepository
from .data.validators import validate_candles
from .errors import (
    ConfigurationError,
    DataQualityError,
    IndicatorCalculationError,
    MalformedDataError,
    MissingDataError,
)
from .indicators.macd import compute_macd
from .indicators.rsi import compute_rsi
from .indicators.stochastic import compute_stochastic
from .logging.config import get_logger, get_signal_logger, log_signal_decision
from .models.results import AnalysisSnapshot
from .signals.composer import compose_signal, indicator_votes

logger = get_logger(__name__)
signal_logger = get_signal_logger(__name__)


class IndicatorAnalyzer:
    """
    Main coordinator for indicator analysis.

    Pipeline:
    Candles → Validation → RSI / MACD / Stochastic → Composite signal
    """

    def __init__(
        self,
        config_loader: Optional[ConfigLoader] = None,
        repository: Optional[CandleRepository] = None,
        config_dir: Optional[Path] = None,
    ) -> None:
        self.config_loader = config_loader or ConfigLoader.create(config_dir)
        self.repository = repository
        self.logger = logger
        self.signal_logger = signal_logger

    def resolve_config(self, symbol: str, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge and validate the parameters used for a symbol.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        try:
            merged = self.config_loader.merge_config(symbol, overrides)
            errors = ConfigValidator.validate_config(merged)
        except ConfigurationError as e:
            errors = e.errors

        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error(
                "Indicator configuration validation failed",
                symbol=symbol,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid configuration for {symbol}: {'; '.join(error_msgs)}",
                errors=errors,
                context={"symbol": symbol}
            )

        return config_from_dict(merged)

    def get_warmup_period(self, symbol: str, overrides: Optional[dict[str, Any]] = None) -> int:
        """Minimum number of candles before no indicator reports its neutral default"""
        config = self.resolve_config(symbol, overrides)
        return self._warmup_period(config)

    def analyze(
        self,
        symbol: str,
        candles: Iterable[Candle],
        overrides: Optional[dict[str, Any]] = None,
    ) -> AnalysisSnapshot:
        """
        Analyze a candle series for a symbol.

        Args:
            symbol: Symbol the candles belong to
            candles: Candles in chronological order
            overrides: Per-call parameter overrides, e.g. {"rsi": {"period": 7}}

        Returns:
            AnalysisSnapshot with every indicator reading and the composite signal

        Raises:
            ConfigurationError: If the resolved parameters are invalid
            MalformedDataError: If any candle is malformed
            IndicatorCalculationError: On unexpected calculation failure
        """
        config = self.resolve_config(symbol, overrides)
        candle_list = list(candles)

        try:
            validate_candles(candle_list)
        except MalformedDataError as e:
            self.logger.warning(
                "Rejected malformed candle series",
                symbol=symbol,
                index=e.index,
                field=e.field,
                error=str(e)
            )
            raise

        warmup_period = self._warmup_period(config)
        if len(candle_list) < warmup_period:
            self.logger.debug(
                "Insufficient history, neutral defaults in use",
                symbol=symbol,
                candle_count=len(candle_list),
                warmup_period=warmup_period
            )

        try:
            close_prices = closes(candle_list)
            rsi = compute_rsi(close_prices, config.rsi.period)
            macd = compute_macd(
                close_prices,
                config.macd.fast_period,
                config.macd.slow_period,
                config.macd.signal_period,
            )
            stochastic = compute_stochastic(
                candle_list,
                config.stochastic.k_period,
                config.stochastic.d_period,
            )
            composite = compose_signal(rsi, macd, stochastic)
        except (DataQualityError, IndicatorCalculationError):
            raise
        except Exception as e:
            raise IndicatorCalculationError(
                f"Unexpected error in indicator calculation: {str(e)}",
                indicator_name="unknown",
                calculation_input={"symbol": symbol, "candle_count": len(candle_list)}
            ) from e

        votes = indicator_votes(rsi, macd, stochastic)
        log_signal_decision(
            self.signal_logger,
            symbol=symbol,
            signal=composite.signal.value,
            confidence=composite.confidence,
            votes={name: vote.value for name, vote in votes.items()},
            context={"candle_count": len(candle_list)}
        )

        last_candle = candle_list[-1] if candle_list else None
        return AnalysisSnapshot(
            symbol=symbol,
            rsi=rsi,
            macd=macd,
            stochastic=stochastic,
            composite=composite,
            candle_count=len(candle_list),
            last_close=last_candle.close if last_candle else None,
            as_of=last_candle.timestamp if last_candle else None,
        )

    def analyze_symbol(self, symbol: str, overrides: Optional[dict[str, Any]] = None) -> AnalysisSnapshot:
        """
        Analyze a symbol using candles from the injected repository.

        Raises:
            MissingDataError: If no repository is configured or it has no history for the symbol
        """
        if self.repository is None:
            raise MissingDataError("No candle repository configured", data_type="repository")

        candles = self.repository.get_candles(symbol)
        if candles is None:
            self.logger.warning("No candle history for symbol", symbol=symbol)
            raise MissingDataError(
                f"No candle history for {symbol}",
                data_type="candles",
                context={"symbol": symbol}
            )

        return self.analyze(symbol, candles, overrides)

    @staticmethod
    def _warmup_period(config: DefaultConfig) -> int:
        return max(
            config.rsi.period + 1,
            config.macd.slow_period,
            config.stochastic.k_period + config.stochastic.d_period - 1,
        )
