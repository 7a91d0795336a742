import json
from unittest.mock import AsyncMock

import pytest

from application.tools import (
    CONVERT_CURRENCY_TOOL_NAME,
    ConvertCurrencyArguments,
    ToolDefinition,
    ToolRegistry,
)
from domain.exceptions.currency import InvalidToolArgumentsError, ToolNotFoundError


def test_convert_currency_schema(registry):
    definitions = registry.list_definitions()

    assert definitions == [{
        'type': 'function',
        'function': {
            'name': 'convert-currency',
            'description': 'Convert an amount from one currency to another using current exchange rates',
            'strict': True,
            'parameters': {
                'type': 'object',
                'properties': {
                    'amount': {
                        'type': 'number',
                        'description': 'The amount of money to convert',
                    },
                    'fromCurrency': {
                        'type': 'string',
                        'description': 'The source currency code (e.g., USD, EUR, GBP)',
                    },
                    'toCurrency': {
                        'type': 'string',
                        'description': 'The target currency code (e.g., USD, EUR, GBP)',
                    },
                },
                'required': ['amount', 'fromCurrency', 'toCurrency'],
                'additionalProperties': False,
            },
        },
    }]


def test_get_unknown_tool_raises(registry):
    with pytest.raises(ToolNotFoundError) as exc_info:
        registry.get('convert-weather')

    assert exc_info.value.tool_name == 'convert-weather'


def test_register_duplicate_name_rejected(registry):
    duplicate = registry.get(CONVERT_CURRENCY_TOOL_NAME)

    with pytest.raises(ValueError):
        registry.register(duplicate)


@pytest.mark.asyncio
async def test_invoke_runs_conversion(registry, mock_provider):
    result = await registry.invoke(
        CONVERT_CURRENCY_TOOL_NAME, {'amount': 100, 'fromCurrency': 'USD', 'toCurrency': 'EUR'}
    )

    assert json.loads(result)['data']['equivalentString'] == '100 USD = 92 EUR'
    mock_provider.fetch_rates.assert_awaited_once_with('USD')


@pytest.mark.asyncio
async def test_invoke_forwards_progress_callback(registry):
    callback = AsyncMock()

    await registry.invoke(
        CONVERT_CURRENCY_TOOL_NAME,
        {'amount': 1.5, 'fromCurrency': 'USD', 'toCurrency': 'GBP'},
        progress_callback=callback,
    )

    callback.assert_awaited_once()
    assert callback.await_args.args[0]['type'] == 'progress'


@pytest.mark.asyncio
@pytest.mark.parametrize('arguments', [
    {'amount': 100, 'fromCurrency': 'USD'},
    {'amount': '100', 'fromCurrency': 'USD', 'toCurrency': 'EUR'},
    {'amount': 100, 'fromCurrency': 'USD', 'toCurrency': 'EUR', 'precision': 4},
    {'amount': 100, 'from_currency': 'USD', 'to_currency': 'EUR'},
    {'amount': True, 'fromCurrency': 'USD', 'toCurrency': 'EUR'},
    None,
])
async def test_invoke_rejects_arguments_outside_schema(registry, mock_provider, arguments):
    with pytest.raises(InvalidToolArgumentsError) as exc_info:
        await registry.invoke(CONVERT_CURRENCY_TOOL_NAME, arguments)

    assert exc_info.value.errors
    mock_provider.fetch_rates.assert_not_called()


@pytest.mark.asyncio
async def test_invoke_unknown_tool(registry):
    with pytest.raises(ToolNotFoundError):
        await registry.invoke('missing', {})


@pytest.mark.asyncio
async def test_registry_routes_to_custom_tool():
    async def echo(arguments, progress_callback=None):
        return json.dumps({'data': {'amount': arguments.amount}})

    registry = ToolRegistry()
    registry.register(ToolDefinition(
        name='echo',
        description='Echo the amount',
        parameters={'type': 'object'},
        arguments_model=ConvertCurrencyArguments,
        executor=echo,
    ))

    result = await registry.invoke('echo', {'amount': 7, 'fromCurrency': 'A', 'toCurrency': 'B'})

    assert json.loads(result) == {'data': {'amount': 7.0}}
