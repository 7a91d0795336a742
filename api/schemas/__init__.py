from .responses import HealthResponse, ToolErrorMessage

__all__ = [
	'HealthResponse',
	'ToolErrorMessage',
]
