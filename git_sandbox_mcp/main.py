"""
Entry point for the Git Sandbox MCP server.

Loads the environment, configures logging and checks the configuration
against the exercise catalog before the server is imported.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from git_sandbox_mcp.exercises import get_all_exercises
from git_sandbox_mcp.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


def check_config(config: ServiceConfig) -> list[str]:
    """Returns the configuration problems that would stop sessions from starting."""
    problems = []
    catalog = get_all_exercises()
    if config.DEFAULT_EXERCISE_ID not in catalog:
        known = ", ".join(str(exercise_id) for exercise_id in sorted(catalog))
        problems.append(f"DEFAULT_EXERCISE_ID={config.DEFAULT_EXERCISE_ID} is not one of: {known}")
    if config.MCP_TRANSPORT not in ("stdio", "sse", "streamable-http"):
        problems.append(f"Unsupported MCP_TRANSPORT: {config.MCP_TRANSPORT}")
    return problems


def setup_environment() -> bool:
    """
    Loads .env, configures logging and validates the service configuration.

    Returns:
        False if the configuration cannot be used.
    """
    load_dotenv()

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = ServiceConfig()
    except ValidationError as e:
        logger.error(f"Invalid service configuration: {e}")
        return False

    problems = check_config(config)
    for problem in problems:
        logger.error(problem)
    return not problems


def run_server() -> None:
    """Sets up the environment and runs the MCP server."""
    if not setup_environment():
        logger.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    # The server module builds its app at import time from the validated config.
    from git_sandbox_mcp.server import mcp_app, server_config

    for exercise in get_all_exercises().values():
        logger.info(f"Exercise {exercise.id}: {exercise.title} ({len(exercise.allowed_commands)} commands)")
    logger.info(f"Starting Git Sandbox MCP server with transport: {server_config.MCP_TRANSPORT}")
    if server_config.MCP_TRANSPORT != "stdio":
        logger.info(f"Server will listen on: {server_config.MCP_HOST}:{server_config.MCP_PORT}")

    mcp_app.run(transport=server_config.MCP_TRANSPORT)


if __name__ == "__main__":
    run_server()
