import inspect
import logging
from contextlib import suppress

from modality.types import V_T


########################## Misc #########################
def make_default(value: V_T | None, default: V_T) -> V_T:
    """
    If the `value` is None this returns `default` else it returns `value`

    `make_default(age, 0)`
    """
    return default if value is None else value


def log_error(msg: str):
    logging.error(msg)


############################# Calling ###############################
def call(callback, *args, **kwargs):
    """
    Call the callback with as many positional arguments as it accepts.
    This way `lambda: ...` is as good a handler as `lambda event: ...`
    """
    _args = args
    with suppress(ValueError, TypeError):
        params = inspect.signature(callback).parameters.values()
        if not any(param.kind is inspect.Parameter.VAR_POSITIONAL for param in params):
            _args = args[
                : min(
                    len(
                        [
                            param
                            for param in params
                            if param.kind
                            in (
                                inspect.Parameter.POSITIONAL_ONLY,
                                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                            )
                        ]
                    ),
                    len(args),
                )
            ]
    return callback(*_args, **kwargs)


def call_safely(callback, *args, **kwargs) -> bool:
    """
    Like `call` but an exception in the callback is logged instead of raised,
    so that one failing callback cannot stop the others.
    Returns whether the callback succeeded.
    """
    try:
        call(callback, *args, **kwargs)
    except Exception as e:
        log_error(f"Exception in callback {callback!r}: {e!r}")
        return False
    return True
