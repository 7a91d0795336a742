import logging
from typing import Any

from pydantic import ValidationError

from application.tools.definitions import ToolDefinition
from domain.exceptions.currency import InvalidToolArgumentsError, ToolNotFoundError
from domain.models.currency import ProgressCallback

logger = logging.getLogger(__name__)


class ToolRegistry:
	"""Holds tool definitions by name and routes validated calls to their executors."""

	def __init__(self):
		self._tools: dict[str, ToolDefinition] = {}

	def register(self, tool: ToolDefinition) -> None:
		if tool.name in self._tools:
			raise ValueError(f'Tool {tool.name} is already registered')
		self._tools[tool.name] = tool
		logger.info(f'Registered tool {tool.name}')

	def get(self, name: str) -> ToolDefinition:
		try:
			return self._tools[name]
		except KeyError as e:
			raise ToolNotFoundError(name) from e

	def list_definitions(self) -> list[dict[str, Any]]:
		return [tool.to_schema() for tool in self._tools.values()]

	async def invoke(
		self,
		name: str,
		arguments: Any,
		progress_callback: ProgressCallback | None = None,
	) -> str:
		tool = self.get(name)
		try:
			validated = tool.arguments_model.model_validate(arguments)
		except ValidationError as e:
			raise InvalidToolArgumentsError(
				name, e.errors(include_url=False, include_context=False, include_input=False)
			) from e

		return await tool.executor(validated, progress_callback)
