"""Unit tests for callback argument binding."""

from typing import Any, Optional, Union

import pytest

from micro_presenter.adapters.outbound.jinja_engine import JinjaEngineFactory
from micro_presenter.domain.services.argument_resolver import (
    PRESENTER_PARAMETER,
    ArgumentResolver,
    service_type_of,
)
from micro_presenter.infrastructure.container import Container
from micro_presenter.ports.outbound.template_engine import TemplateEngineFactory


class Clock:
    """Service type used in annotations."""


class SystemClock(Clock):
    """Concrete service registered under its own type."""


class Page:
    """Callable object with an annotated __call__."""

    def __call__(self, clock: Clock, slug: str = "home"):
        return slug


@pytest.fixture
def resolver() -> ArgumentResolver:
    """Create an argument resolver."""
    return ArgumentResolver()


@pytest.mark.unit
class TestServiceType:
    """Tests for service_type_of."""

    def test_class_is_service(self) -> None:
        """A plain class annotation asks for a service."""
        assert service_type_of(Clock) is Clock

    def test_optional_unwraps(self) -> None:
        """Optional[X] asks for X."""
        assert service_type_of(Optional[Clock]) is Clock

    @pytest.mark.parametrize(
        "annotation", [int, str, bool, float, dict, list, list[int], Any, None]
    )
    def test_builtins_are_not_services(self, annotation: Any) -> None:
        """Scalars, containers and generics are never looked up."""
        assert service_type_of(annotation) is None

    def test_optional_builtin_is_not_service(self) -> None:
        assert service_type_of(Optional[int]) is None

    def test_union_of_services_is_ambiguous(self) -> None:
        assert service_type_of(Union[Clock, Page]) is None


@pytest.mark.unit
class TestBind:
    """Tests for ArgumentResolver.bind."""

    def test_positional_order_follows_signature(self, resolver: ArgumentResolver) -> None:
        """Arguments come out in declaration order, not request order."""

        def callback(b, a):
            return None

        binding = resolver.bind(callback, {"a": 1, "b": 2}, None, presenter="p")

        assert binding.ok
        assert binding.args == [2, 1]

    def test_keyword_only_parameters(self, resolver: ArgumentResolver) -> None:
        """Keyword-only parameters are bound as keywords."""

        def callback(a, *, flag: bool = False):
            return None

        binding = resolver.bind(callback, {"a": "x", "flag": "1"}, None, presenter="p")

        assert binding.args == ["x"]
        assert binding.kwargs == {"flag": True}

    def test_var_arguments_are_not_filled(self, resolver: ArgumentResolver) -> None:
        """*args and **kwargs do not collect extra request parameters."""

        def callback(a, *args, **kwargs):
            return None

        binding = resolver.bind(callback, {"a": 1, "extra": 2}, None, presenter="p")

        assert binding.args == [1]
        assert binding.kwargs == {}

    def test_presenter_reserved_name(self, resolver: ArgumentResolver) -> None:
        """The presenter parameter cannot be supplied by the request."""

        def callback(presenter):
            return None

        binding = resolver.bind(
            callback, {PRESENTER_PARAMETER: "request value"}, None, presenter="dispatcher"
        )

        assert binding.args == ["dispatcher"]

    def test_defaults_fill_missing(self, resolver: ArgumentResolver) -> None:
        """Declared defaults are used for absent parameters."""

        def callback(page: int = 1, sort: Optional[str] = None):
            return None

        binding = resolver.bind(callback, {}, None, presenter="p")

        assert binding.args == [1, None]

    def test_optional_without_default_is_none(self, resolver: ArgumentResolver) -> None:
        def callback(sort: Optional[str]):
            return None

        binding = resolver.bind(callback, {}, None, presenter="p")

        assert binding.ok
        assert binding.args == [None]

    def test_none_value_uses_default(self, resolver: ArgumentResolver) -> None:
        """A None request value counts as absent."""

        def callback(page: int = 5):
            return None

        binding = resolver.bind(callback, {"page": None}, None, presenter="p")

        assert binding.args == [5]

    def test_missing_required_is_reported(self, resolver: ArgumentResolver) -> None:
        """Every missing required parameter is reported, in order."""

        def callback(a, b):
            return None

        binding = resolver.bind(callback, {}, None, presenter="p")

        assert not binding.ok
        assert len(binding.errors) == 2
        assert "Missing parameter 'a'" in binding.errors[0]
        assert "Missing parameter 'b'" in binding.errors[1]

    def test_service_from_container(self, resolver: ArgumentResolver) -> None:
        """A subclass registration satisfies a base-class annotation."""
        container = Container()
        clock = SystemClock()
        container.register_singleton(SystemClock, clock)

        def callback(clock: Clock):
            return None

        binding = resolver.bind(callback, {}, container, presenter="p")

        assert binding.args == [clock]

    def test_service_overrides_request_value(self, resolver: ArgumentResolver) -> None:
        """A resolved service wins over a request parameter of the same name."""
        container = Container()
        clock = Clock()
        container.register_singleton(Clock, clock)

        def callback(clock: Clock):
            return None

        binding = resolver.bind(callback, {"clock": "from query"}, container, presenter="p")

        assert binding.args == [clock]

    def test_request_value_cannot_fill_service(self, resolver: ArgumentResolver) -> None:
        """A request string never stands in for an unregistered service."""

        def callback(clock: Clock):
            return None

        binding = resolver.bind(callback, {"clock": "from query"}, Container(), presenter="p")

        assert not binding.ok
        assert binding.args == []
        assert "must be Clock, str given" in binding.errors[0]

    def test_request_value_cannot_fill_optional_service(self, resolver: ArgumentResolver) -> None:
        def callback(clock: Optional[Clock] = None):
            return None

        binding = resolver.bind(callback, {"clock": "from query"}, None, presenter="p")

        assert not binding.ok
        assert "must be Clock" in binding.errors[0]

    def test_service_instance_passed_as_parameter(self, resolver: ArgumentResolver) -> None:
        """Instances of the annotated class are accepted without a container."""
        clock = SystemClock()

        def callback(clock: Clock):
            return None

        binding = resolver.bind(callback, {"clock": clock}, None, presenter="p")

        assert binding.args == [clock]

    def test_protocol_service_from_container(self, resolver: ArgumentResolver) -> None:
        """Services registered under a Protocol are accepted for that Protocol."""
        container = Container()
        factory = JinjaEngineFactory()
        container.register_singleton(TemplateEngineFactory, factory)

        def callback(engines: TemplateEngineFactory):
            return None

        binding = resolver.bind(callback, {}, container, presenter="p")

        assert binding.ok
        assert binding.args == [factory]

    def test_protocol_rejects_request_string(self, resolver: ArgumentResolver) -> None:
        def callback(engines: TemplateEngineFactory):
            return None

        binding = resolver.bind(callback, {"engines": "jinja"}, Container(), presenter="p")

        assert "must be TemplateEngineFactory, str given" in binding.errors[0]

    @pytest.mark.parametrize("builtin", [dict, object])
    def test_callable_without_signature(self, resolver: ArgumentResolver, builtin: Any) -> None:
        """Callables without an introspectable signature bind no arguments."""
        binding = resolver.bind(builtin, {"a": "1"}, Container(), presenter="p")

        assert binding.ok
        assert binding.args == []
        assert binding.kwargs == {}

    def test_unresolved_service_is_missing(self, resolver: ArgumentResolver) -> None:
        """An unregistered required service is a binding error."""

        def callback(clock: Clock):
            return None

        binding = resolver.bind(callback, {}, Container(), presenter="p")

        assert not binding.ok
        assert "Missing parameter 'clock'" in binding.errors[0]

    def test_callable_object(self, resolver: ArgumentResolver) -> None:
        """Instances with __call__ are bound through their call signature."""
        container = Container()
        container.register_singleton(Clock, Clock())

        binding = resolver.bind(Page(), {"slug": "about"}, container, presenter="p")

        assert binding.ok
        assert binding.args[1] == "about"

    def test_unresolvable_forward_reference_is_untyped(self, resolver: ArgumentResolver) -> None:
        def callback(thing: "DoesNotExist"):  # noqa: F821
            return None

        binding = resolver.bind(callback, {"thing": "x"}, Container(), presenter="p")

        assert binding.args == ["x"]


@pytest.mark.unit
class TestScalarCoercion:
    """Tests for request value coercion."""

    @pytest.mark.parametrize(
        "annotation,raw,expected",
        [
            (int, "42", 42),
            (int, "-7", -7),
            (float, "2.5", 2.5),
            (float, "3", 3.0),
            (bool, "1", True),
            (bool, "false", False),
            (str, "text", "text"),
            (str, 12, "12"),
            (Optional[int], "8", 8),
        ],
    )
    def test_coerces(self, resolver: ArgumentResolver, annotation: Any, raw: Any, expected: Any) -> None:
        """Request strings convert to the annotated scalar."""

        def callback(value):
            return None

        callback.__annotations__ = {"value": annotation}

        binding = resolver.bind(callback, {"value": raw}, None, presenter="p")

        assert binding.ok
        assert binding.args == [expected]
        assert type(binding.args[0]) is type(expected)

    @pytest.mark.parametrize(
        "annotation,raw",
        [
            (int, "4.2"),
            (int, "abc"),
            (int, True),
            (float, "x1"),
            (bool, "yes"),
            (bool, 2),
        ],
    )
    def test_rejects(self, resolver: ArgumentResolver, annotation: type, raw: Any) -> None:
        """Values that do not fit the annotation are reported."""

        def callback(value):
            return None

        callback.__annotations__ = {"value": annotation}

        binding = resolver.bind(callback, {"value": raw}, None, presenter="p")

        assert not binding.ok
        assert f"must be {annotation.__name__}" in binding.errors[0]

    def test_untyped_values_pass_unchanged(self, resolver: ArgumentResolver) -> None:
        payload = {"nested": [1, 2]}

        def callback(data):
            return None

        binding = resolver.bind(callback, {"data": payload}, None, presenter="p")

        assert binding.args[0] is payload
