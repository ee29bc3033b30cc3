"""Callback-style host bridge.

Hosts that speak the plugin convention call ``execute(action, args,
callback)`` and expect exactly one of ``callback.success`` or
``callback.error`` to be invoked, plus a boolean return value.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol

from loguru import logger
from pydantic import JsonValue

from .common.errors import ErrorKind
from .common.schemas import ActionError
from .dispatcher import ResizeDispatcher


class CallbackContext(Protocol):
    """Continuation pair supplied by the host for a single call."""

    def success(self, payload: dict[str, JsonValue]) -> None: ...

    def error(self, message: str) -> None: ...


def execute(
    action: str,
    args: Sequence[object],
    callback: CallbackContext,
    dispatcher: ResizeDispatcher | None = None,
) -> bool:
    """Run one action and report it through ``callback``.

    Args:
        action: ``resizeImage``, ``imageSize`` or ``storeImage``
        args: Host argument list; the first element is the request bundle
        callback: Success/error continuation pair
        dispatcher: Dispatcher to use (a default one if None)

    Returns:
        True if ``callback.success`` was invoked, False otherwise
    """
    dispatcher = dispatcher or ResizeDispatcher()

    if not args:
        outcome = ActionError(kind=ErrorKind.validation, message="Missing request bundle")
    else:
        bundle = args[0]
        if isinstance(bundle, Mapping):
            outcome = dispatcher.dispatch(action, bundle)
        else:
            outcome = ActionError(
                kind=ErrorKind.validation,
                message=f"Request bundle must be an object, got {type(bundle).__name__}",
            )

    if isinstance(outcome, ActionError):
        logger.debug(f"Reporting {outcome.kind.value} error to host for {action}")
        callback.error(outcome.message)
        return False

    callback.success(outcome.result.to_payload())
    return True
