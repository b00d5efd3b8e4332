"""
Tests for describing decorated classes via runtime reflection.
"""

from typing import Annotated, Optional

import pytest

from stresscraft import (
    DoubleGen,
    IntGen,
    Param,
    ScalarKind,
    StringGen,
    build_test_structure,
    op_group_config,
    operation,
    param,
)
from stresscraft.adapters.introspection.class_introspector import (
    ClassIntrospector,
    parse_annotation,
)
from stresscraft.adapters.introspection.decorators import get_operation_config
from stresscraft.config.models import StressCraftConfig
from stresscraft.domain.errors import (
    ConflictingParamConfigError,
    ParameterCountMismatchError,
    UnknownGeneratorError,
    UnresolvedParameterError,
)
from stresscraft.domain.models import GeneratorDeclaration, GroupDeclaration


@param("id", gen=IntGen, conf="1:10")
@param("word", gen="string", conf="4:ab")
@op_group_config("writers", non_parallel=True)
@op_group_config("readers")
class Counter:
    @operation(group="writers")
    def increment(self, by: Annotated[int, Param(name="id")]) -> None:
        pass

    def helper(self):
        pass

    @operation
    def get(self) -> int:
        return 0

    @operation(params=["word"], run_once=True)
    @staticmethod
    def tag(label: str) -> str:
        return label

    @operation(handle_exceptions_as_result=(KeyError,))
    @classmethod
    def scale(cls, factor: float, name: Optional[str] = None) -> None:
        pass


class TestDecorators:
    """Test the marking decorators."""

    def test_declarations_keep_source_order(self):
        """Test that stacked class decorators are reported top to bottom."""
        definition = ClassIntrospector().describe(Counter)

        assert definition.generators == (
            GeneratorDeclaration(name="id", gen=IntGen, conf="1:10"),
            GeneratorDeclaration(name="word", gen="string", conf="4:ab"),
        )
        assert definition.groups == (
            GroupDeclaration(name="writers", non_parallel=True),
            GroupDeclaration(name="readers"),
        )

    def test_bare_and_called_operation(self):
        """Test that @operation works with and without arguments."""
        assert get_operation_config(Counter.get) is not None
        assert get_operation_config(Counter.increment).group == "writers"
        assert get_operation_config(Counter.helper) is None

    def test_operation_on_static_and_class_methods(self):
        """Test that the marker lands on the wrapped function."""
        assert get_operation_config(Counter.tag).run_once is True
        assert get_operation_config(Counter.scale).handle_exceptions_as_result == (
            KeyError,
        )

    def test_decorated_method_still_callable(self):
        """Test that marking leaves the method unchanged."""
        assert Counter.tag("x") == "x"

    def test_params_given_as_string_rejected(self):
        """Test that params must be a sequence of names, not a string."""
        with pytest.raises(TypeError, match="not a string"):
            operation(params="id")


class TestClassIntrospector:
    """Test the structural description of classes."""

    def test_methods_in_definition_order(self):
        """Test that all methods are described, in source order."""
        definition = ClassIntrospector().describe(Counter)

        assert [m.name for m in definition.methods] == [
            "increment",
            "helper",
            "get",
            "tag",
            "scale",
        ]
        assert [m.name for m in definition.operations] == [
            "increment",
            "get",
            "tag",
            "scale",
        ]

    def test_receiver_is_not_a_parameter(self):
        """Test that self and cls are dropped but static parameters are kept."""
        methods = {m.name: m for m in ClassIntrospector().describe(Counter).methods}

        assert len(methods["increment"].parameters) == 1
        assert len(methods["get"].parameters) == 0
        assert len(methods["tag"].parameters) == 1
        assert len(methods["scale"].parameters) == 2

    def test_parameter_kinds_and_inline_config(self):
        """Test scalar kinds and Param metadata taken from annotations."""
        methods = {m.name: m for m in ClassIntrospector().describe(Counter).methods}

        (by,) = methods["increment"].parameters
        assert by.kind == ScalarKind.INT
        assert by.param == Param(name="id")
        assert by.type_name == "int"

        factor, name = methods["scale"].parameters
        assert factor.kind == ScalarKind.DOUBLE
        assert name.kind == ScalarKind.STRING
        assert name.position == 1

    def test_parameter_names_hidden_by_default(self):
        """Test that declared names are not reported unless exposed."""
        methods = {m.name: m for m in ClassIntrospector().describe(Counter).methods}

        assert methods["increment"].parameters[0].name is None
        assert methods["increment"].parameters[0].display_name == "#0: int"

    def test_parameter_names_exposed(self):
        """Test that declared names are reported when configured."""
        introspector = ClassIntrospector(expose_parameter_names=True)
        methods = {m.name: m for m in introspector.describe(Counter).methods}

        assert methods["increment"].parameters[0].name == "by"
        assert methods["increment"].parameters[0].display_name == "by: int"

    def test_rejects_non_class(self):
        """Test that only classes can be described."""
        with pytest.raises(TypeError, match="must be a class"):
            ClassIntrospector().describe(Counter())

    def test_variadic_operation_rejected(self):
        """Test that operations cannot take *args or **kwargs."""

        class Variadic:
            @operation
            def push(self, *values: int) -> None:
                pass

        with pytest.raises(UnresolvedParameterError, match="variadic"):
            ClassIntrospector().describe(Variadic)

    def test_variadic_helper_is_skipped(self):
        """Test that unmarked variadic methods are described without them."""

        class Helper:
            def log(self, *args, **kwargs):
                pass

        (method,) = ClassIntrospector().describe(Helper).methods
        assert method.parameters == ()

    def test_unannotated_parameter_has_no_kind(self):
        """Test that missing annotations leave the kind unset."""

        class Untyped:
            @operation
            def push(self, value):
                pass

        (method,) = ClassIntrospector().describe(Untyped).methods
        assert method.parameters[0].kind is None
        assert method.parameters[0].type_name == ""

    def test_unresolvable_annotation_keeps_other_hints(self):
        """Test that one unresolvable annotation leaves the others resolved."""

        class Node:
            pass

        class Tree:
            @operation
            def insert(self, key: "int") -> "Node":
                return Node()

            @operation
            def find(
                self, key: "Annotated[int, Param(name='id')]", hint: "Node"
            ) -> "Tree":
                return self

        insert, find = ClassIntrospector().describe(Tree).methods

        assert insert.parameters[0].kind == ScalarKind.INT
        key, hint = find.parameters
        assert key.kind == ScalarKind.INT
        assert key.param == Param(name="id")
        assert hint.kind is None
        assert hint.type_name == "Node"

    def test_unresolvable_return_annotation_builds(self):
        """Test building a structure for a method returning a local class."""

        class Node:
            pass

        class Tree:
            @operation
            def insert(self, key: "int") -> "Node":
                return Node()

        (gen,) = build_test_structure(Tree).get_actor_generator(
            "insert"
        ).argument_generators
        assert isinstance(gen, IntGen)

    def test_annotation_naming_own_class(self):
        """Test that annotations may name the class being described."""

        class Chain:
            @operation
            def link(self, other: "Chain", weight: "float") -> None:
                pass

        other, weight = ClassIntrospector().describe(Chain).methods[0].parameters
        assert other.kind is None
        assert other.type_name == "Chain"
        assert weight.kind == ScalarKind.DOUBLE


class TestInheritance:
    """Test collection of base class members."""

    @pytest.fixture
    def derived(self):
        @param("id", gen=IntGen)
        @op_group_config("writers")
        class Base:
            @operation(group="writers")
            def push(self, x: Annotated[int, Param(name="id")]) -> None:
                pass

        class Derived(Base):
            @operation
            def pop(self) -> int:
                return 0

        return Derived

    def test_own_members_only_by_default(self, derived):
        """Test that base operations and declarations are ignored by default."""
        definition = ClassIntrospector().describe(derived)

        assert [m.name for m in definition.methods] == ["pop"]
        assert definition.generators == ()
        assert definition.groups == ()

    def test_inherited_members_most_base_first(self, derived):
        """Test that inherited operations come before the subclass's own."""
        definition = ClassIntrospector(include_inherited=True).describe(derived)

        assert [m.name for m in definition.methods] == ["push", "pop"]
        assert [g.name for g in definition.generators] == ["id"]
        assert [g.name for g in definition.groups] == ["writers"]


class TestParseAnnotation:
    """Test annotation parsing."""

    @pytest.mark.parametrize(
        "annotation, kind",
        [
            (int, ScalarKind.INT),
            (float, ScalarKind.DOUBLE),
            (str, ScalarKind.STRING),
            (Optional[int], ScalarKind.INT),
            (int | None, ScalarKind.INT),
            (Annotated[int, ScalarKind.LONG], ScalarKind.LONG),
            (Annotated[float, ScalarKind.FLOAT], ScalarKind.FLOAT),
            (ScalarKind.BYTE, ScalarKind.BYTE),
            (list[int], None),
            (bool, None),
        ],
    )
    def test_scalar_kind(self, annotation, kind):
        """Test the scalar kind derived from each annotation."""
        assert parse_annotation(annotation)[0] == kind

    def test_inline_config_from_annotated(self):
        """Test that Param metadata is extracted."""
        annotation = Annotated[str, Param(gen=StringGen, conf="3")]

        _, config, base = parse_annotation(annotation)

        assert config == Param(gen=StringGen, conf="3")
        assert base is str


class TestBuildTestStructure:
    """Test building structures straight from decorated classes."""

    def test_build_counter(self):
        """Test the full path from decorators to test structure."""
        structure = build_test_structure(Counter)

        increment = structure.get_actor_generator("increment")
        (gen,) = increment.argument_generators
        assert isinstance(gen, IntGen)
        assert (gen.begin, gen.end) == (1, 10)

        (word,) = structure.get_actor_generator("tag").argument_generators
        assert isinstance(word, StringGen)
        assert word.alphabet == "ab"

        factor, name = structure.get_actor_generator("scale").argument_generators
        assert isinstance(factor, DoubleGen)
        assert isinstance(name, StringGen)

        writers = structure.get_group("writers")
        assert writers.non_parallel is True
        assert writers.actors == (increment,)
        assert structure.get_group("readers").actors == ()

    def test_exposed_names_resolve_against_named_generators(self):
        """Test that exposed parameter names act as generator names."""

        @param("x", gen=IntGen, conf="3:4")
        class Named:
            @operation
            def push(self, x: int) -> None:
                pass

        config = StressCraftConfig(introspection={"expose_parameter_names": True})
        structure = build_test_structure(Named, config)

        (gen,) = structure.get_actor_generator("push").argument_generators
        assert (gen.begin, gen.end) == (3, 4)

    def test_exposed_names_must_be_declared(self):
        """Test that an exposed name without a generator is an error."""

        class Named:
            @operation
            def push(self, x: int) -> None:
                pass

        config = StressCraftConfig(introspection={"expose_parameter_names": True})
        with pytest.raises(UnknownGeneratorError, match='"x"'):
            build_test_structure(Named, config)

    def test_inline_kind_shadows_exposed_name(self):
        """Test that an inline kind builds a fresh generator over a same-named one."""

        @param("x", gen=IntGen, conf="1:2")
        class Shadowed:
            @operation
            def push(self, x: Annotated[int, Param(gen=IntGen, conf="0:5")]) -> None:
                pass

            @operation
            def pull(self, x: int) -> None:
                pass

        config = StressCraftConfig(introspection={"expose_parameter_names": True})
        structure = build_test_structure(Shadowed, config)

        (inline,) = structure.get_actor_generator("push").argument_generators
        (shared,) = structure.get_actor_generator("pull").argument_generators
        assert inline is not shared
        assert (inline.begin, inline.end) == (0, 5)
        assert (shared.begin, shared.end) == (1, 2)

    def test_conflicting_inline_config(self):
        """Test that Param with both name and gen is rejected."""

        @param("id", gen=IntGen)
        class Conflicting:
            @operation
            def push(self, x: Annotated[int, Param(name="id", gen=IntGen)]) -> None:
                pass

        with pytest.raises(ConflictingParamConfigError):
            build_test_structure(Conflicting)

    def test_params_count_mismatch(self):
        """Test that params must name every parameter."""

        @param("id", gen=IntGen)
        class Mismatched:
            @operation(params=["id", "id"])
            def push(self, x: int) -> None:
                pass

        with pytest.raises(ParameterCountMismatchError):
            build_test_structure(Mismatched)

    def test_parameter_without_default_kind(self):
        """Test that a non-scalar parameter needs explicit configuration."""

        class Listy:
            @operation
            def push(self, values: list[int]) -> None:
                pass

        with pytest.raises(UnresolvedParameterError, match="values|#0"):
            build_test_structure(Listy)
