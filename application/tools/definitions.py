from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from application.services.conversion_executor import ConversionExecutor
from domain.models.currency import ConversionRequest, ProgressCallback

ToolExecutor = Callable[[Any, ProgressCallback | None], Awaitable[str]]

CONVERT_CURRENCY_TOOL_NAME = 'convert-currency'


class ConvertCurrencyArguments(BaseModel):
	model_config = ConfigDict(extra='forbid')

	amount: float = Field(..., strict=True, allow_inf_nan=False, description='The amount of money to convert')
	from_currency: str = Field(
		..., alias='fromCurrency', strict=True, description='The source currency code (e.g., USD, EUR, GBP)'
	)
	to_currency: str = Field(
		..., alias='toCurrency', strict=True, description='The target currency code (e.g., USD, EUR, GBP)'
	)


@dataclass(frozen=True)
class ToolDefinition:
	name: str
	description: str
	parameters: dict[str, Any]
	arguments_model: type[BaseModel]
	executor: ToolExecutor

	def to_schema(self) -> dict[str, Any]:
		return {
			'type': 'function',
			'function': {
				'name': self.name,
				'description': self.description,
				'strict': True,
				'parameters': self.parameters,
			},
		}


def _convert_currency_parameters() -> dict[str, Any]:
	json_types = {float: 'number', str: 'string'}
	properties = {}
	for field_name, field_info in ConvertCurrencyArguments.model_fields.items():
		properties[field_info.alias or field_name] = {
			'type': json_types[field_info.annotation],
			'description': field_info.description,
		}
	return {
		'type': 'object',
		'properties': properties,
		'required': list(properties),
		'additionalProperties': False,
	}


def build_convert_currency_tool(executor: ConversionExecutor) -> ToolDefinition:
	async def run(arguments: ConvertCurrencyArguments, progress_callback: ProgressCallback | None = None) -> str:
		request = ConversionRequest(
			amount=arguments.amount,
			from_currency=arguments.from_currency,
			to_currency=arguments.to_currency,
			progress_callback=progress_callback,
		)
		return await executor.execute(request)

	return ToolDefinition(
		name=CONVERT_CURRENCY_TOOL_NAME,
		description='Convert an amount from one currency to another using current exchange rates',
		parameters=_convert_currency_parameters(),
		arguments_model=ConvertCurrencyArguments,
		executor=run,
	)
