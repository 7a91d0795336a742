from .definitions import (
	CONVERT_CURRENCY_TOOL_NAME,
	ConvertCurrencyArguments,
	ToolDefinition,
	build_convert_currency_tool,
)
from .registry import ToolRegistry

__all__ = [
	'CONVERT_CURRENCY_TOOL_NAME',
	'ConvertCurrencyArguments',
	'ToolDefinition',
	'ToolRegistry',
	'build_convert_currency_tool',
]
