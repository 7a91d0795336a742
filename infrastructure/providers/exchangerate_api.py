import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from domain.exceptions.currency import ProviderError
from domain.models.currency import ExchangeRateSnapshot

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = 'Failed to fetch exchange rates'


class ExchangeRatePayload(BaseModel):
	"""Body of ``GET /v4/latest/{base}``. Only ``rates`` is required."""

	model_config = ConfigDict(extra='ignore')

	rates: dict[str, float | None]
	provider: str | None = None
	base: str | None = None
	date: str | None = None
	time_last_updated: int | None = None


class ExchangeRateAPIProvider:
	BASE_URL = 'https://api.exchangerate-api.com/v4/latest'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10.0,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.timeout = timeout
		self._client = client

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def fetch_rates(self, base: str) -> ExchangeRateSnapshot:
		url = f'{self.base_url}/{base}'

		if self._client is not None:
			data = await self._request(self._client, url)
		else:
			async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
				data = await self._request(client, url)

		try:
			payload = ExchangeRatePayload.model_validate(data)
		except ValidationError as e:
			logger.warning(f'Malformed payload from {self.name} for base {base}: {e.error_count()} errors')
			raise ProviderError(FETCH_FAILED_MESSAGE) from e

		return ExchangeRateSnapshot(
			rates={code: rate for code, rate in payload.rates.items() if rate is not None},
			provider=payload.provider,
			base=payload.base,
			date=payload.date,
			time_last_updated=payload.time_last_updated,
		)

	async def _request(self, client: httpx.AsyncClient, url: str) -> Any:
		try:
			response = await client.get(url)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			status_code = e.response.status_code
			raise ProviderError(
				f'Request failed with status code {status_code}',
				details=_response_body(e.response),
			) from e
		except httpx.RequestError as e:
			raise ProviderError(str(e) or FETCH_FAILED_MESSAGE) from e
		except ValueError as e:
			raise ProviderError(FETCH_FAILED_MESSAGE) from e


def _response_body(response: httpx.Response) -> Any | None:
	try:
		return response.json()
	except ValueError:
		return response.text or None
