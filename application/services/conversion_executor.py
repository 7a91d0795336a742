import inspect
import json
import logging

from application.services.conversion_service import ConversionService
from domain.models.currency import ConversionError, ConversionRequest, ProgressCallback

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = 'Failed to convert currency'
PROGRESS_MESSAGE = 'Fetching current exchange rates...'
PROGRESS_PERCENT = 25


class ConversionExecutor:
	"""Tool boundary: runs one conversion and always resolves to JSON text."""

	def __init__(self, service: ConversionService):
		self.service = service

	async def execute(self, request: ConversionRequest) -> str:
		if request.progress_callback is not None:
			await self._publish_progress(request.progress_callback)

		try:
			outcome = await self.service.convert(
				request.amount, request.from_currency, request.to_currency
			)
			return json.dumps(outcome.to_response(), allow_nan=False)
		except Exception as e:
			logger.error(f'Currency conversion error: {e}', exc_info=True)
			error = ConversionError(message=str(e) or FALLBACK_ERROR_MESSAGE)
			return json.dumps(error.to_response())

	async def _publish_progress(self, callback: ProgressCallback) -> None:
		event = {
			'type': 'progress',
			'data': {'message': PROGRESS_MESSAGE, 'progress': PROGRESS_PERCENT},
		}
		try:
			result = callback(event)
			if inspect.isawaitable(result):
				await result
		except Exception as e:
			logger.warning(f'Progress callback failed: {e}', exc_info=True)
