from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
	tools: list[str] = Field(..., description='Names of registered tools')

	model_config = ConfigDict(
		json_schema_extra={'example': {'status': 'ok', 'tools': ['convert-currency']}}
	)


class ToolErrorMessage(BaseModel):
	type: str = Field('error', description='Message type')
	detail: Any = Field(..., description='What went wrong')
