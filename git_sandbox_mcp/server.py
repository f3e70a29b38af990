"""
MCP server definition for the Git Sandbox MCP.
"""

import logging
from typing import Any

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from git_sandbox_mcp.engine.graph import project
from git_sandbox_mcp.prompts import build_tutor_prompt
from git_sandbox_mcp.utils.config import ServiceConfig
from git_sandbox_mcp.utils.dependencies import get_base_config, get_session_manager
from git_sandbox_mcp.utils.path_utils import display_path


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "git-sandbox-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )

# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Git Tutor Prompt")
def get_tutor_prompt(session_id: str = "default") -> str:
    """Provides the tutor system prompt with the briefing for the session's exercise."""
    session = get_session_manager().get_session(session_id)
    return build_tutor_prompt(session.exercise)

# --- Tool Definitions ---

@mcp_app.tool()
async def list_exercises(context: Context) -> dict[str, Any]:
    """
    Lists the available exercises.

    Returns:
        A dictionary with each exercise's id, title, goal, steps and allowed commands.
    """
    logger.info("Executing list_exercises")
    try:
        exercises = get_session_manager().exercises
        return {
            "status": "success",
            "exercises": [exercise.model_dump(mode="json", exclude={"initial_file_structure"}) for exercise in exercises],
        }
    except Exception as e:
        logger.error(f"Error listing exercises: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def start_exercise(
    context: Context,
    exercise_id: int,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Starts an exercise from its initial file tree, discarding the session's current state.

    Args:
        exercise_id: The id of the exercise to start.
        session_id: The learner session to reset.

    Returns:
        A dictionary with the exercise title and the starting working directory.
    """
    logger.info(f"Starting exercise {exercise_id} for session '{session_id}'")
    try:
        session = get_session_manager().start_exercise(exercise_id, session_id)
        return {
            "status": "success",
            "exercise_id": session.exercise.id,
            "title": session.exercise.title,
            "cwd": session.state.file_system.cwd,
        }
    except ValueError as e:
        return {"status": "error", "error": str(e)}
    except Exception as e:
        logger.error(f"Error starting exercise: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def run_command(
    context: Context,
    command: str,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Runs one terminal line in the sandbox, exactly as a learner would type it.

    Args:
        command: The command line, e.g. 'git add .' or 'git commit -m "first"'.
        session_id: The learner session to run it in.

    Returns:
        A dictionary containing the command output, whether the terminal should
        be cleared, and whether the exercise is now complete.
    """
    logger.info(f"Executing sandbox command '{command}' in session '{session_id}'")
    try:
        manager = get_session_manager()
        result = manager.run_command(command, session_id)
        return {
            "status": "success",
            "output": result.output,
            "clear_terminal": result.clear_terminal,
            "completed": manager.get_session(session_id).completed,
        }
    except Exception as e:
        logger.error(f"Error executing sandbox command: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def get_graph(context: Context, session_id: str = "default") -> dict[str, Any]:
    """
    Projects the session's commit history into graph nodes and edges.

    Args:
        session_id: The learner session to read.

    Returns:
        A dictionary with the node and edge lists for the graph renderer.
    """
    logger.info(f"Projecting commit graph for session '{session_id}'")
    try:
        session = get_session_manager().get_session(session_id)
        return {"status": "success", **project(session.state.git).model_dump(mode="json")}
    except Exception as e:
        logger.error(f"Error projecting commit graph: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def get_state(context: Context, session_id: str = "default") -> dict[str, Any]:
    """
    Summarizes the session's sandbox: working directory, branch, staged and tracked files.

    Args:
        session_id: The learner session to read.

    Returns:
        A dictionary describing the current engine state.
    """
    logger.info(f"Reading state for session '{session_id}'")
    try:
        session = get_session_manager().get_session(session_id)
        git = session.state.git
        return {
            "status": "success",
            "exercise_id": session.exercise.id,
            "cwd": session.state.file_system.cwd,
            "initialized": git.is_initialized,
            "branch": git.current_branch,
            "staged_files": sorted(display_path(p) for p in git.staged_files),
            "tracked_files": sorted(display_path(p) for p in git.tracked_files),
            "commit_count": len(git.commits),
            "completed": session.completed,
        }
    except Exception as e:
        logger.error(f"Error reading sandbox state: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}
