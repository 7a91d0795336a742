import logging
from collections.abc import Callable
from datetime import datetime

from domain.exceptions.currency import ProviderError, UnsupportedCurrencyError
from domain.formatting import (
	format_number,
	from_unix_seconds,
	round_to_cents,
	to_iso_timestamp,
	utc_now,
)
from domain.models.currency import ConversionError, ConversionOutcome, ConversionResult
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_NAME = 'Exchange Rate API'
FETCH_FAILED_MESSAGE = 'Failed to fetch exchange rates'


class ConversionService:
	def __init__(
		self,
		provider: ExchangeRateProvider,
		default_provider_name: str = DEFAULT_PROVIDER_NAME,
		clock: Callable[[], datetime] = utc_now,
	):
		self.provider = provider
		self.default_provider_name = default_provider_name
		self.clock = clock

	async def convert(self, amount: float, from_currency: str, to_currency: str) -> ConversionOutcome:
		"""Convert ``amount`` using the provider's rate table for ``from_currency``.

		Provider failures and unsupported targets come back as a ``ConversionError``.
		Anything else propagates to the caller.
		"""
		try:
			snapshot = await self.provider.fetch_rates(from_currency)
		except ProviderError as e:
			logger.warning(f'Provider {self.provider.name} failed for base {from_currency}: {e}')
			return ConversionError.from_exception(e, FETCH_FAILED_MESSAGE)

		rate = snapshot.rates.get(to_currency)
		if not rate:
			logger.info(f'{to_currency} missing from {from_currency} rate table')
			return ConversionError.from_exception(UnsupportedCurrencyError(to_currency), FETCH_FAILED_MESSAGE)

		converted_amount = round_to_cents(amount * rate)

		last_updated = None
		if snapshot.time_last_updated:
			last_updated = to_iso_timestamp(from_unix_seconds(snapshot.time_last_updated))

		return ConversionResult(
			amount=converted_amount,
			from_currency=from_currency,
			to_currency=to_currency,
			rate=rate,
			equivalent_string=(
				f'{format_number(amount)} {from_currency} = {format_number(converted_amount)} {to_currency}'
			),
			timestamp=to_iso_timestamp(self.clock()),
			last_updated=last_updated,
			provider=snapshot.provider or self.default_provider_name,
		)
