from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

ProgressCallback = Callable[[dict[str, Any]], Awaitable[None] | None]


@dataclass(frozen=True)
class ConversionRequest:
	amount: float
	from_currency: str
	to_currency: str
	progress_callback: ProgressCallback | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ExchangeRateSnapshot:
	"""Rate table for one base currency as returned by the provider."""

	rates: dict[str, float]
	provider: str | None = None
	base: str | None = None
	date: str | None = None
	time_last_updated: int | None = None


@dataclass(frozen=True)
class ConversionResult:
	amount: float
	from_currency: str
	to_currency: str
	rate: float
	equivalent_string: str
	timestamp: str
	last_updated: str | None
	provider: str

	def to_response(self) -> dict[str, Any]:
		return {
			'data': {
				'amount': self.amount,
				'fromCurrency': self.from_currency,
				'toCurrency': self.to_currency,
				'rate': self.rate,
				'equivalentString': self.equivalent_string,
				'timestamp': self.timestamp,
				'lastUpdated': self.last_updated,
				'provider': self.provider,
			}
		}


@dataclass(frozen=True)
class ConversionError:
	message: str
	details: Any | None = None

	@classmethod
	def from_exception(cls, exc: Exception, fallback: str) -> 'ConversionError':
		return cls(message=str(exc) or fallback, details=getattr(exc, 'details', None))

	def to_response(self) -> dict[str, Any]:
		return {'error': {'message': self.message, 'details': self.details}}


ConversionOutcome = ConversionResult | ConversionError
