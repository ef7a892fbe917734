"""
Main Error Handler

This module provides the main error handling utility for creating standardized
HTTPExceptions and JSON error responses with proper logging.
"""

from typing import Optional
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from .error_types import ErrorType, ErrorContext
from .error_logger import ErrorLogger
from ..exceptions import InvalidArgument
from ..logging import LoggerRegistry


class ErrorHandler:
    """Centralized error handling utility."""

    @staticmethod
    def create_http_exception(
        error_type: ErrorType,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        log_error: bool = True,
        registry: Optional[LoggerRegistry] = None,
        **format_kwargs
    ) -> HTTPException:
        """
        Create a standardized HTTPException with proper logging.

        Args:
            error_type: The type of error to create
            context: Error context information
            original_exception: Original exception that caused this error
            log_error: Whether to log the error
            registry: Logger registry to log through, default registry if omitted
            **format_kwargs: Additional kwargs for message formatting

        Returns:
            HTTPException with standardized format
        """
        if context is None:
            context = ErrorContext()

        format_dict = {**context.__dict__, **format_kwargs}
        error_detail = error_type.create_error_detail(**format_dict)

        if log_error:
            ErrorLogger.log_error(
                error_type=error_type,
                context=context,
                original_exception=original_exception,
                registry=registry,
                **format_kwargs
            )

        return HTTPException(
            status_code=error_type.status_code,
            detail=error_detail
        )

    @staticmethod
    def handle_invalid_argument(
        exc: InvalidArgument,
        context: ErrorContext,
        registry: Optional[LoggerRegistry] = None
    ) -> HTTPException:
        """Handle an InvalidArgument raised while serving a request."""
        return ErrorHandler.create_http_exception(
            error_type=ErrorType.INVALID_ARGUMENT,
            context=context,
            original_exception=exc,
            registry=registry,
            error_details=exc.message
        )

    @staticmethod
    def handle_internal_server_error(
        error_details: str,
        context: ErrorContext,
        original_exception: Optional[Exception] = None,
        registry: Optional[LoggerRegistry] = None
    ) -> HTTPException:
        """Handle internal server errors."""
        return ErrorHandler.create_http_exception(
            error_type=ErrorType.INTERNAL_SERVER_ERROR,
            context=context,
            original_exception=original_exception,
            registry=registry,
            error_details=error_details
        )

    @staticmethod
    async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
        """FastAPI exception handler turning InvalidArgument into a 400 response."""
        context = ErrorContext(
            request_id=getattr(request.state, "request_id", None),
            endpoint_path=request.url.path
        )
        registry = getattr(request.app.state, "registry", None)
        http_exc = ErrorHandler.handle_invalid_argument(exc, context, registry)
        return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)
