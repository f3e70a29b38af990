"""Defines the composable prompts for the MCP server."""

from git_sandbox_mcp.models.exercise import ExerciseConfig

BASE_PROMPT = """You are a patient Git tutor working inside a simulated terminal.
The learner types commands into a sandbox that holds a virtual file tree and a simplified Git repository.
Nothing they run touches a real disk, so encourage them to experiment.

Follow these steps when helping:

1.  Read the exercise briefing below and keep its goal in mind.
2.  Run commands with the `run_command` tool exactly as the learner would type them, one line at a time.
3.  After every Git command, explain in one or two sentences what changed in the working tree, the staging area or the commit graph.
4.  Use `get_state` and `get_graph` to check your explanation against the sandbox instead of guessing.
5.  If a command is rejected as not allowed, point the learner to the commands listed by `help` or in the briefing.

**Guiding Principle:** Teach the model behind each command (working tree, staging area, commits, branches), not just the keystrokes.
"""

SUPPORTED_COMMANDS_NOTE = """
# Sandbox Limits

The sandbox executes `git init`, `git add`, `git commit`, `git status` and `git log`, plus `ls`, `cd`, `pwd`, `cat`, `touch`, `mkdir`, `rm`, `clear` and `help`.
Files have names but no contents. Branching, merging and rebasing are described in the docs but are not executed here.
"""


def render_exercise_briefing(exercise: ExerciseConfig) -> str:
    """Formats an exercise's title, goal, steps and allowed commands as markdown."""
    lines = [f"# Exercise {exercise.id}: {exercise.title}", ""]
    if exercise.goal:
        lines.extend([exercise.goal, ""])
    lines.append("## Steps")
    lines.extend(f"{number}. {step}" for number, step in enumerate(exercise.steps, start=1))
    lines.extend(["", "## Allowed commands"])
    lines.extend(f"- `{command}`" for command in exercise.allowed_commands)
    return "\n".join(lines)


def get_prompts() -> dict[str, str]:
    """
    Returns a dictionary of available prompt components.
    """
    return {
        "base": BASE_PROMPT,
        "sandbox-limits": SUPPORTED_COMMANDS_NOTE,
    }
