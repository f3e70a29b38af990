import logging
from collections.abc import Mapping

from pydantic import BaseModel

from git_sandbox_mcp.engine.dispatcher import CommandDispatcher
from git_sandbox_mcp.models.engine import CommandResult, EngineState
from git_sandbox_mcp.models.exercise import ExerciseConfig

logger = logging.getLogger(__name__)


class Session(BaseModel):
    """The exercise a learner is working on and the engine state they have reached."""

    exercise: ExerciseConfig
    state: EngineState

    @property
    def completed(self) -> bool:
        return self.exercise.is_complete(self.state)


class SessionManager:
    """Manages the engine state for all learner sessions."""

    def __init__(
        self,
        exercises: Mapping[int, ExerciseConfig],
        dispatcher: CommandDispatcher,
        default_exercise_id: int,
    ) -> None:
        if default_exercise_id not in exercises:
            raise ValueError(f"Unknown default exercise: {default_exercise_id}")
        self._exercises = dict(exercises)
        self._dispatcher = dispatcher
        self._default_exercise_id = default_exercise_id
        # Simple dict as an in-process session storage; sessions end with the process.
        self._storage: dict[str, Session] = {}

    @property
    def exercises(self) -> list[ExerciseConfig]:
        return list(self._exercises.values())

    def get_exercise(self, exercise_id: int) -> ExerciseConfig:
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            raise ValueError(f"Unknown exercise: {exercise_id}")
        return exercise

    def get_session(self, session_id: str = "default") -> Session:
        """Returns or creates the session, starting new ones in the default exercise."""
        if session_id not in self._storage:
            logger.info(f"Creating session '{session_id}'")
            return self.start_exercise(self._default_exercise_id, session_id)
        return self._storage[session_id]

    def start_exercise(self, exercise_id: int, session_id: str = "default") -> Session:
        """Discards the session's current state and starts `exercise_id` from scratch."""
        exercise = self.get_exercise(exercise_id)
        session = Session(exercise=exercise, state=exercise.create_state())
        self._storage[session_id] = session
        logger.info(f"Session '{session_id}' started exercise {exercise.id}: {exercise.title}")
        return session

    def run_command(self, raw_input: str, session_id: str = "default") -> CommandResult:
        """Dispatches one line in the session's exercise and keeps the resulting state."""
        session = self.get_session(session_id)
        result = self._dispatcher.dispatch(session.state, raw_input, session.exercise.allowed_commands)
        session.state = result.state
        return result
