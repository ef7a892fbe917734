from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from ..core.config_manager import ConfigManager
from ..core.error_handling import ErrorHandler
from ..core.exceptions import InvalidArgument
from ..core.logging import LoggerRegistry, get_default_registry, set_default_registry
from .middleware import RequestLoggerMiddleware

INDEX_HTML = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Create App</title>
  </head>
  <body>
    <main>
      <h1>Welcome</h1>
      <p>Get started by calling <code>/api/hello</code>.</p>
    </main>
  </body>
</html>
"""


def create_app(
    registry: Optional[LoggerRegistry] = None,
    config_manager: Optional[ConfigManager] = None
) -> FastAPI:
    """
    Build the web application.

    Without an explicit registry the process-wide default is used; it reads
    LOG_LEVEL and LOG_TIMESTAMPS from the environment on first use.
    """
    config_manager = config_manager or ConfigManager()
    if registry is None:
        registry = get_default_registry()

    app = FastAPI()
    app.state.config_manager = config_manager
    app.state.registry = registry

    if config_manager.problems:
        config_logger = registry.get_logger("config")
        for problem in config_manager.problems:
            config_logger.warn(problem)

    app.add_middleware(RequestLoggerMiddleware)
    app.add_exception_handler(InvalidArgument, ErrorHandler.invalid_argument_handler)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        logger = request.app.state.registry.get_logger("app")

        logger.error("a error message from _app")
        logger.debug("a debug message from _app")
        logger.info("a info message from _app")

        return HTMLResponse(INDEX_HTML)

    @app.get("/api/hello")
    async def hello(request: Request):
        logger = request.app.state.registry.get_logger("hello")
        logger.debug("a debug message from hello.")

        return {"name": "John Doe"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


# Initialize ConfigManager
config_manager = ConfigManager()

# The served app and get_logger() share one registry configured from the app settings
registry = LoggerRegistry(config_manager.logging_config())
set_default_registry(registry)
app = create_app(registry, config_manager)


def main():
    uvicorn.run(app, host=config_manager.host, port=config_manager.port)


if __name__ == "__main__":
    main()
