from typing import Protocol

from domain.models.currency import ExchangeRateSnapshot


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_rates(self, base: str) -> ExchangeRateSnapshot:
		"""Fetch the full rate table keyed off ``base``."""
		...
