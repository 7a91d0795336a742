import logging

from application.services import ConversionExecutor, ConversionService
from application.tools import ToolRegistry, build_convert_currency_tool
from config.settings import Settings, get_settings
from infrastructure.providers import ExchangeRateAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	registry: ToolRegistry | None = None


deps = AppDependencies()


def build_registry(settings: Settings) -> ToolRegistry:
	provider = ExchangeRateAPIProvider(
		base_url=settings.RATE_PROVIDER_URL, timeout=settings.RATE_PROVIDER_TIMEOUT
	)
	service = ConversionService(provider, default_provider_name=settings.DEFAULT_PROVIDER_NAME)
	registry = ToolRegistry()
	registry.register(build_convert_currency_tool(ConversionExecutor(service)))
	return registry


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	deps.registry = build_registry(get_settings())
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')
	deps.registry = None
	logger.info('Cleanup complete')


def get_tool_registry() -> ToolRegistry:
	if deps.registry is None:
		raise RuntimeError('Tool registry not initialized')
	return deps.registry
