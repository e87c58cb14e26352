"""Callback argument binding.

Binds the declared parameters of an application callback to values, in
three layers:

1. Services: every parameter annotated with a service class is looked up
   in the DI container. A resolved instance wins over a request parameter
   of the same name; an unresolved one is simply not supplied.
2. The dispatcher itself, under the reserved name ``presenter``.
3. Request parameters by name, with string-to-scalar coercion for
   ``int``, ``float``, ``bool`` and ``str`` annotations; then declared
   defaults; then ``None`` for annotations that admit it. A parameter
   annotated with a service class only accepts an instance of that class,
   so a request value never fills it.

Parameters that end up without a value, or with a value that cannot be
coerced, are reported in ``ArgumentBinding.errors``. Binding never raises
for them; the caller decides how to fail.
"""

from __future__ import annotations

import inspect
import logging
import re
import types
import typing
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

if TYPE_CHECKING:
    from micro_presenter.ports.outbound.service_locator import ServiceLocator

logger = logging.getLogger(__name__)

PRESENTER_PARAMETER = "presenter"

_SCALAR_TYPES: tuple[type, ...] = (bool, int, float, str)

# Builtins that are never looked up in the container
_NON_SERVICE_TYPES: frozenset[type] = frozenset(
    {bool, int, float, str, bytes, complex, dict, list, tuple, set, frozenset, object, type(None)}
)

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_TRUE_VALUES = frozenset({"1", "true"})
_FALSE_VALUES = frozenset({"0", "false"})

_MISSING = object()


@dataclass
class ArgumentBinding:
    """Outcome of binding a callback's parameters."""

    args: list[Any] = field(default_factory=list)
    kwargs: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class ArgumentResolver:
    """Binds callback parameters from the DI container and request values.

    Example:
        binding = ArgumentResolver().bind(callback, params, container, presenter)
        if binding.ok:
            callback(*binding.args, **binding.kwargs)
    """

    def bind(
        self,
        callback: Callable[..., Any],
        parameters: Mapping[str, Any],
        locator: Optional["ServiceLocator"],
        presenter: Any,
    ) -> ArgumentBinding:
        """Bind arguments for a callback.

        Args:
            callback: Callable to bind for.
            parameters: Request parameters.
            locator: DI container, or None to skip service lookup.
            presenter: Value injected under the reserved ``presenter`` name.

        Returns:
            Bound positional and keyword arguments plus binding errors.
        """
        try:
            signature = inspect.signature(callback)
        except (ValueError, TypeError):
            # Builtins such as dict expose no signature; they are called without arguments
            logger.debug(f"No signature for {_callable_name(callback)}, binding no arguments")
            return ArgumentBinding()
        hints = _type_hints(callback, signature)
        values = dict(parameters)

        if locator is not None:
            for name in signature.parameters:
                service_type = service_type_of(hints.get(name))
                if service_type is None:
                    continue
                service = locator.get_by_type(service_type, throw=False)
                if service is not None:
                    values[name] = service
                else:
                    logger.debug(f"No service registered for {service_type.__name__}, parameter '{name}'")

        values[PRESENTER_PARAMETER] = presenter
        return self.combine(callback, signature, hints, values)

    def combine(
        self,
        callback: Callable[..., Any],
        signature: inspect.Signature,
        hints: Mapping[str, Any],
        values: Mapping[str, Any],
    ) -> ArgumentBinding:
        """Combine values into arguments following the declared signature."""
        binding = ArgumentBinding()
        name_of_callback = _callable_name(callback)

        for name, param in signature.parameters.items():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            annotation = hints.get(name, param.annotation)
            value = values.get(name)

            if value is not None:
                value, error = _coerce(value, annotation)
                if error:
                    binding.errors.append(
                        f"Argument '{name}' passed to {name_of_callback}() must be {error}."
                    )
                    continue
            elif param.default is not param.empty:
                value = param.default
            elif _admits_none(annotation):
                value = None
            else:
                binding.errors.append(f"Missing parameter '{name}' required by {name_of_callback}().")
                continue

            if param.kind == param.KEYWORD_ONLY:
                binding.kwargs[name] = value
            else:
                binding.args.append(value)

        return binding


def service_type_of(annotation: Any) -> Optional[type]:
    """Return the service class an annotation asks for, if any.

    ``Optional[X]`` and ``X | None`` unwrap to ``X``. Builtin scalars,
    containers and generic aliases are not services.
    """
    if annotation is None or annotation is inspect.Parameter.empty or annotation is Any:
        return None
    if _is_union(annotation):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        annotation = members[0]
    if not isinstance(annotation, type) or typing.get_origin(annotation) is not None:
        return None
    if annotation in _NON_SERVICE_TYPES:
        return None
    return annotation


def _type_hints(callback: Callable[..., Any], signature: inspect.Signature) -> dict[str, Any]:
    target = callback
    if not (inspect.isfunction(callback) or inspect.ismethod(callback)):
        target = getattr(callback, "__call__", callback)
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError):
        # Unresolvable forward references: keep only real annotation objects
        return {
            name: param.annotation
            for name, param in signature.parameters.items()
            if param.annotation is not param.empty and not isinstance(param.annotation, str)
        }


def _is_union(annotation: Any) -> bool:
    origin = typing.get_origin(annotation)
    return origin is Union or (hasattr(types, "UnionType") and origin is types.UnionType)


def _admits_none(annotation: Any) -> bool:
    if annotation is None or annotation is type(None) or annotation is Any:
        return True
    return _is_union(annotation) and type(None) in typing.get_args(annotation)


def _scalar_type_of(annotation: Any) -> Optional[type]:
    if _is_union(annotation):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        annotation = members[0]
    return annotation if annotation in _SCALAR_TYPES else None


def _coerce(value: Any, annotation: Any) -> tuple[Any, Optional[str]]:
    """Coerce a request value to a scalar annotation, or check it against a service class.

    Returns:
        (value, None) on success, (original value, expected description) on failure.
    """
    expected = _scalar_type_of(annotation)
    if expected is None:
        service_type = service_type_of(annotation)
        if service_type is not None and not _is_service_instance(value, service_type):
            return value, f"{service_type.__name__}, {type(value).__name__} given"
        return value, None

    description = f"{expected.__name__}, {type(value).__name__} given"

    if isinstance(value, str):
        text = value.strip()
        if expected is str:
            return value, None
        if expected is int and _INT_PATTERN.fullmatch(text):
            return int(text), None
        if expected is float and _FLOAT_PATTERN.fullmatch(text):
            return float(text), None
        if expected is bool and text.lower() in _TRUE_VALUES:
            return True, None
        if expected is bool and text.lower() in _FALSE_VALUES:
            return False, None
        return value, description

    if expected is bool:
        if isinstance(value, bool):
            return value, None
        if isinstance(value, int) and value in (0, 1):
            return bool(value), None
        return value, description
    if isinstance(value, bool):
        return value, description
    if expected is float and isinstance(value, (int, float)):
        return float(value), None
    if expected is int and isinstance(value, int):
        return value, None
    if expected is str and isinstance(value, (int, float)):
        return str(value), None
    return value, description


def _is_service_instance(value: Any, service_type: type) -> bool:
    if getattr(service_type, "_is_protocol", False) and not getattr(service_type, "_is_runtime_protocol", False):
        # Structural types cannot be checked at runtime; request scalars never qualify
        return not isinstance(value, _SCALAR_TYPES)
    return isinstance(value, service_type)


def _callable_name(callback: Callable[..., Any]) -> str:
    name = getattr(callback, "__qualname__", None) or getattr(callback, "__name__", None)
    return name or type(callback).__name__
