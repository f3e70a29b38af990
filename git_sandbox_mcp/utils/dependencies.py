"""
Configuration and dependency management for the Git Sandbox MCP server.
"""

import logging
from functools import lru_cache

from git_sandbox_mcp.engine.dispatcher import CommandDispatcher
from git_sandbox_mcp.exercises import get_all_exercises
from git_sandbox_mcp.models.exercise import ExerciseConfig
from git_sandbox_mcp.utils.config import ServiceConfig
from git_sandbox_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_exercise_catalog() -> dict[int, ExerciseConfig]:
    """Returns the exercises keyed by id."""
    return get_all_exercises()


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    """Returns a cached CommandDispatcher over the default command registry."""
    logger.info("Initializing CommandDispatcher singleton.")
    return CommandDispatcher()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns the singleton SessionManager holding every learner session."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(
        exercises=get_exercise_catalog(),
        dispatcher=get_dispatcher(),
        default_exercise_id=get_base_config().DEFAULT_EXERCISE_ID,
    )
