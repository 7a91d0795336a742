import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import InvalidToolArgumentsError, ToolNotFoundError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ToolNotFoundError)
	async def tool_not_found_handler(request: Request, exc: ToolNotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(InvalidToolArgumentsError)
	async def invalid_arguments_handler(request: Request, exc: InvalidToolArgumentsError):
		logger.info(f'Rejected call to {exc.tool_name}: {len(exc.errors)} validation errors')
		return JSONResponse(status_code=422, content={'detail': exc.errors})
