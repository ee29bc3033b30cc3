"""Image resize route factory."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException

from .common.config import DEFAULT_RESIZER_DEFAULTS, ResizerDefaults
from .common.errors import ErrorKind
from .common.schemas import ActionError
from .dispatcher import ResizeDispatcher

STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.validation: 422,
    ErrorKind.unknown_action: 404,
    ErrorKind.not_found: 404,
    ErrorKind.decode: 400,
    ErrorKind.invalid_dimension: 400,
    ErrorKind.path: 400,
    ErrorKind.io: 500,
}


def create_router(defaults: ResizerDefaults = DEFAULT_RESIZER_DEFAULTS) -> APIRouter:
    """Create router bound to a dispatcher built from ``defaults``.

    Args:
        defaults: Request defaults for the dispatcher

    Returns:
        Configured APIRouter with the ``/images/{action}`` endpoint

    Example:
        from fastapi import FastAPI
        from cl_image_resizer.routes import create_router

        app = FastAPI()
        app.include_router(create_router(), prefix="/api")
    """
    router = APIRouter()
    dispatcher = ResizeDispatcher(defaults)

    @router.post("/images/{action}")
    def run_action(
        action: str,
        bundle: Annotated[dict[str, Any], Body(description="Request bundle")],
    ):
        """Run ``resizeImage``, ``imageSize`` or ``storeImage`` synchronously.

        Returns:
            width/height plus imageData or filename
        """
        outcome = dispatcher.dispatch(action, bundle)
        if isinstance(outcome, ActionError):
            raise HTTPException(
                status_code=STATUS_CODES[outcome.kind],
                detail={"kind": outcome.kind.value, "message": outcome.message},
            )
        return outcome.result.to_payload()

    # Mark function as used (accessed via FastAPI decorator)
    _ = run_action

    return router
