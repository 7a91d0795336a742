import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, WebSocket, WebSocketDisconnect, status

from api.dependencies import get_tool_registry
from api.schemas import ToolErrorMessage
from application.tools import ToolRegistry
from domain.exceptions.currency import InvalidToolArgumentsError, ToolNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api/tools', tags=['tools'])


@router.get(
	'',
	status_code=status.HTTP_200_OK,
	summary='List registered tool definitions',
)
async def list_tools(
	registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> list[dict[str, Any]]:
	return registry.list_definitions()


@router.post(
	'/{tool_name}',
	status_code=status.HTTP_200_OK,
	summary='Invoke a tool',
)
async def invoke_tool(
	tool_name: str,
	arguments: Annotated[dict[str, Any], Body()],
	registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> Response:
	result = await registry.invoke(tool_name, arguments)
	return Response(content=result, media_type='application/json')


@router.websocket('/{tool_name}/ws')
async def invoke_tool_ws(
	websocket: WebSocket,
	tool_name: str,
	registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
):
	"""
	Invoke a tool and stream its progress.

	The client sends one JSON object of arguments. The server replies with any
	progress messages, then ``{"type": "result", "data": <tool response>}``.
	"""
	await websocket.accept()

	try:
		arguments = await websocket.receive_json()
	except WebSocketDisconnect:
		logger.info(f'Client disconnected before calling {tool_name}')
		return
	except json.JSONDecodeError:
		message = ToolErrorMessage(detail='Arguments must be valid JSON').model_dump()
	else:
		try:
			result = await registry.invoke(tool_name, arguments, progress_callback=websocket.send_json)
			message = {'type': 'result', 'data': json.loads(result)}
		except ToolNotFoundError as e:
			message = ToolErrorMessage(detail=str(e)).model_dump()
		except InvalidToolArgumentsError as e:
			message = ToolErrorMessage(detail=e.errors).model_dump()

	# The client may have gone away while the tool was running.
	try:
		await websocket.send_json(message)
		await websocket.close()
	except (WebSocketDisconnect, RuntimeError, OSError) as e:
		logger.info(f'Client disconnected before {tool_name} finished: {e}')
