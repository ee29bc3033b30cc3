"""Request dispatcher - validates bundles and routes them to operations."""

from collections.abc import Mapping

import pydantic
from loguru import logger

from .algo.encode import encode, store, to_base64
from .algo.image_source import RasterImage, decode
from .algo.rescale import scale
from .algo.scale_factors import resolve
from .common.config import DEFAULT_RESIZER_DEFAULTS, ResizerDefaults
from .common.errors import ImageResizerError, UnknownActionError, ValidationError
from .common.schemas import (
    Action,
    ActionError,
    ActionOk,
    Destination,
    ImageDimensions,
    ImageFormat,
    ImageRequest,
    RequestBundle,
    ResizeParams,
    ResizeResult,
)


def _describe(exc: pydantic.ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "bundle"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class ResizeDispatcher:
    """
    Stateless entry point for ``resizeImage``, ``imageSize`` and ``storeImage``.

    - Defaults are fixed at construction and never mutated
    - dispatch() never raises for request errors; it returns ActionError
    - resize(), measure() and store() raise ImageResizerError subclasses
    """

    def __init__(self, defaults: ResizerDefaults = DEFAULT_RESIZER_DEFAULTS) -> None:
        self.defaults: ResizerDefaults = defaults

    # ─────────────────────────────────────────────────────────
    # Entry point
    # ─────────────────────────────────────────────────────────

    def dispatch(self, action: str, bundle: Mapping[str, object]) -> ActionOk | ActionError:
        try:
            result = self.handle(action, bundle)
        except ImageResizerError as exc:
            logger.warning(f"{action} failed [{exc.kind.value}]: {exc}")
            return ActionError(kind=exc.kind, message=str(exc))

        logger.info(f"{action} completed: {result.width}x{result.height}")
        return ActionOk(result=result)

    def handle(self, action: str, bundle: Mapping[str, object]) -> ImageDimensions:
        operation = self.parse_action(action)
        fields = self.parse_bundle(bundle)
        request = self.build_request(operation, fields)

        if operation is Action.measure:
            return self.measure(request)

        params = self.build_params(operation, fields)
        if operation is Action.resize:
            return self.resize(request, params)
        return self.store(request, params)

    # ─────────────────────────────────────────────────────────
    # Validation and defaults
    # ─────────────────────────────────────────────────────────

    @staticmethod
    def parse_action(action: str) -> Action:
        try:
            return Action(action)
        except ValueError as exc:
            raise UnknownActionError(action) from exc

    @staticmethod
    def parse_bundle(bundle: Mapping[str, object]) -> RequestBundle:
        if not isinstance(bundle, Mapping):
            raise ValidationError(f"Request bundle must be an object, got {type(bundle).__name__}")
        try:
            return RequestBundle.model_validate(dict(bundle))
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid request: {_describe(exc)}") from exc

    def build_request(self, operation: Action, fields: RequestBundle) -> ImageRequest:
        return ImageRequest(
            payload=fields.data,
            payload_kind=fields.image_data_type or self.defaults.image_data_type,
            target_format=fields.format or self.defaults.format,
            operation=operation,
        )

    def build_params(self, operation: Action, fields: RequestBundle) -> ResizeParams:
        persist = operation is Action.store or fields.store_image

        if operation is Action.resize and (fields.width is None or fields.height is None):
            raise ValidationError("Fields 'width' and 'height' are required for resizeImage")

        destination: Destination | None = None
        if persist:
            if not fields.filename or not fields.directory:
                raise ValidationError(
                    "Fields 'filename' and 'directory' are required when storing an image"
                )
            destination = Destination(directory=fields.directory, filename=fields.filename)

        try:
            return ResizeParams(
                resize_mode=fields.resize_type or self.defaults.resize_type,
                target_width=fields.width if fields.width is not None else 1.0,
                target_height=fields.height if fields.height is not None else 1.0,
                compensate_density=fields.pixel_density,
                device_density=fields.device_density or self.defaults.device_density,
                quality=fields.quality if fields.quality is not None else self.defaults.quality,
                persist=persist,
                destination=destination,
            )
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid resize parameters: {_describe(exc)}") from exc

    # ─────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────

    def _decode(self, request: ImageRequest) -> RasterImage:
        return decode(request.payload, request.payload_kind, root=self.defaults.storage_root)

    def measure(self, request: ImageRequest) -> ImageDimensions:
        image = self._decode(request)
        return ImageDimensions(width=image.width, height=image.height)

    def resize(self, request: ImageRequest, params: ResizeParams) -> ResizeResult:
        image = self._decode(request)
        factors = resolve(
            image.size,
            params.resize_mode,
            params.target_width,
            params.target_height,
            compensate=params.compensate_density,
            device_density=params.device_density,
        )
        resized = scale(image, factors.width_factor, factors.height_factor)

        if params.persist:
            return self._persist(resized, request.target_format, params)

        data = encode(resized, request.target_format, params.quality)
        return ResizeResult(
            width=resized.width,
            height=resized.height,
            image_data=to_base64(data),
        )

    def store(self, request: ImageRequest, params: ResizeParams) -> ResizeResult:
        image = self._decode(request)
        return self._persist(image, request.target_format, params)

    def _persist(
        self, image: RasterImage, format: ImageFormat, params: ResizeParams
    ) -> ResizeResult:
        destination = params.destination
        if destination is None:
            raise ValidationError("A destination is required when storing an image")

        data = encode(image, format, params.quality)
        _ = store(
            data,
            destination.directory,
            destination.filename,
            root=self.defaults.storage_root,
        )
        return ResizeResult(
            width=image.width,
            height=image.height,
            filename=destination.filename,
        )
