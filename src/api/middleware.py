import os
import time
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.error_handling import ErrorHandler, ErrorContext


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = os.urandom(8).hex()
        request.state.request_id = request_id

        registry = request.app.state.registry
        logger = registry.get_logger("http")
        operation = f"{request.method} {request.url.path}"

        try:
            with logger.request_context(operation, request_id):
                response = await call_next(request)
        except Exception as e:
            context = ErrorContext(request_id=request_id, endpoint_path=request.url.path)
            http_exc = ErrorHandler.handle_internal_server_error(
                error_details=str(e),
                context=context,
                original_exception=e,
                registry=registry
            )
            response = JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        logger.debug(f"Response: {operation} | request_id={request_id} | status={response.status_code}")

        return response
