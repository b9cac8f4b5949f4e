from functools import wraps

from core.exceptions import StepFailedError
from logger import logger
from models.pipeline import PipelineState


def pipeline_step(state: PipelineState):
    """
    Runs a pipeline coroutine method as the `state` step.

    The owner must expose `_transition(state)`. Any exception moves it to
    FAILED and is re-raised as StepFailedError, so later steps never run.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            self._transition(state)
            try:
                return await func(self, *args, **kwargs)
            except Exception as e:
                logger.error(f"[Pipeline] Step `{state.value}` failed: {e}")
                self._transition(PipelineState.FAILED)
                raise StepFailedError(step=state.value, cause=e) from e

        return wrapper

    return decorator
