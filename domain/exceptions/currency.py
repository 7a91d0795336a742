from typing import Any


class CurrencyException(Exception):
	pass


class ProviderError(CurrencyException):
	"""The rate provider was unreachable, failed, or returned an unusable payload."""

	def __init__(self, message: str, details: Any | None = None):
		super().__init__(message)
		self.message = message
		self.details = details


class UnsupportedCurrencyError(CurrencyException):
	def __init__(self, currency: str):
		super().__init__(f'Conversion to {currency} is not supported')
		self.currency = currency


class ToolNotFoundError(CurrencyException):
	def __init__(self, tool_name: str):
		super().__init__(f'Tool {tool_name} not found')
		self.tool_name = tool_name


class InvalidToolArgumentsError(CurrencyException):
	def __init__(self, tool_name: str, errors: list[dict[str, Any]]):
		super().__init__(f'Invalid arguments for tool {tool_name}')
		self.tool_name = tool_name
		self.errors = errors
