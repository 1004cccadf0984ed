import pytest

from cldpy.ast import Citizen, CitizenKind, IdentifierValue, ListValue, NumberValue, StringValue
from cldpy.errors import (
    MissingOriginError,
    TypeMismatchError,
    UnresolvedReferenceError,
    ValidationError,
    to_diagnostic,
)
from cldpy.validate import (
    CORE_ANCHORS_FIELD,
    CoreAnchorsResolvedRule,
    OriginExistsRule,
    PredicateRule,
    default_world_rules,
    validate_world,
    validate_world_rules,
)
from cldpy.world import World, assemble_world


def origin(**fields) -> Citizen:
    return Citizen(CitizenKind.ORIGIN, "Genesis", fields)


def core_event(name: str) -> Citizen:
    return Citizen(CitizenKind.CORE_EVENT, name)


def anchors(*names: str) -> ListValue:
    return ListValue(tuple(IdentifierValue(name) for name in names))


def test_origin_without_anchors_is_valid() -> None:
    validate_world(assemble_world([origin()]))


def test_missing_origin() -> None:
    with pytest.raises(MissingOriginError) as excinfo:
        validate_world(assemble_world([core_event("A")]))

    error = excinfo.value
    assert error.rule == "OriginExists"
    assert error.code == "VALIDATION_MISSING_ORIGIN"
    assert str(error) == "!Origin missing: A world must have exactly one @Origin."


def test_resolved_core_anchors_are_valid() -> None:
    world = assemble_world([origin(**{CORE_ANCHORS_FIELD: anchors("A", "B")}), core_event("A"), core_event("B")])

    validate_world(world)


def test_empty_anchor_list_is_valid() -> None:
    validate_world(assemble_world([origin(**{CORE_ANCHORS_FIELD: anchors()})]))


def test_anchor_declared_as_plain_event_is_unresolved() -> None:
    world = assemble_world(
        [
            origin(**{CORE_ANCHORS_FIELD: anchors("AnchorEvent")}),
            Citizen(CitizenKind.EVENT, "AnchorEvent"),
        ]
    )

    with pytest.raises(UnresolvedReferenceError) as excinfo:
        validate_world(world)

    assert excinfo.value.name == "AnchorEvent"
    assert excinfo.value.rule == "CoreAnchorsResolved"
    assert str(excinfo.value) == "CoreEvent 'AnchorEvent' referenced in Origin.核心锚点 is not defined"


def test_first_unresolved_anchor_is_reported() -> None:
    world = assemble_world([origin(**{CORE_ANCHORS_FIELD: anchors("A", "Missing1", "Missing2")}), core_event("A")])

    with pytest.raises(UnresolvedReferenceError) as excinfo:
        validate_world(world)
    assert excinfo.value.name == "Missing1"


@pytest.mark.parametrize(
    "value",
    [NumberValue(3.0), StringValue("A"), IdentifierValue("A")],
    ids=["number", "string", "identifier"],
)
def test_non_list_anchors_are_type_mismatch(value) -> None:
    world = assemble_world([origin(**{CORE_ANCHORS_FIELD: value}), core_event("A")])

    with pytest.raises(TypeMismatchError) as excinfo:
        validate_world(world)

    assert str(excinfo.value) == "Origin.核心锚点 must be a list"
    assert excinfo.value.field == CORE_ANCHORS_FIELD
    assert excinfo.value.code == "VALIDATION_TYPE_MISMATCH"


@pytest.mark.parametrize(
    "item",
    [StringValue("A"), NumberValue(1.0), ListValue((IdentifierValue("A"),))],
    ids=["string", "number", "nested_list"],
)
def test_non_identifier_anchor_is_type_mismatch(item) -> None:
    world = assemble_world(
        [origin(**{CORE_ANCHORS_FIELD: ListValue((IdentifierValue("A"), item))}), core_event("A")]
    )

    with pytest.raises(TypeMismatchError, match="must contain only identifiers"):
        validate_world(world)


def test_core_anchor_rule_never_dereferences_missing_origin() -> None:
    error = CoreAnchorsResolvedRule().check(World())

    assert isinstance(error, MissingOriginError)
    assert error.rule == "CoreAnchorsResolved"


def test_validation_is_fail_fast_and_ordered() -> None:
    calls: list[str] = []

    def failing(name: str):
        def predicate(world: World) -> bool:
            calls.append(name)
            return False

        return PredicateRule(name, "VALIDATION_CUSTOM", predicate)

    with pytest.raises(ValidationError) as excinfo:
        validate_world(World(), [failing("first"), failing("second")])

    assert calls == ["first"]
    assert excinfo.value.rule == "first"


def test_missing_origin_wins_over_custom_rules() -> None:
    rules = default_world_rules()
    rules.append(PredicateRule("NeverRuns", "VALIDATION_CUSTOM", lambda world: False))

    with pytest.raises(MissingOriginError):
        validate_world(World(), rules)


def test_custom_rule_appended_to_defaults() -> None:
    rules = default_world_rules()
    rules.append(
        PredicateRule(
            "HasTimeline",
            "VALIDATION_NO_TIMELINE",
            lambda world: bool(world.timelines),
            message="a world needs at least one timeline",
        )
    )

    with pytest.raises(ValidationError) as excinfo:
        validate_world(assemble_world([origin()]), rules)

    error = excinfo.value
    assert type(error) is ValidationError
    assert error.rule == "HasTimeline"
    assert error.code == "VALIDATION_NO_TIMELINE"
    assert to_diagnostic(error).code == "VALIDATION_NO_TIMELINE"
    assert to_diagnostic(error).message == "a world needs at least one timeline"

    validate_world(
        assemble_world([origin(), Citizen(CitizenKind.TIMELINE, "Main")]),
        rules,
    )


def test_default_rules_are_a_fresh_list() -> None:
    rules = default_world_rules()
    rules.clear()

    assert [rule.name for rule in default_world_rules()] == ["OriginExists", "CoreAnchorsResolved"]


def test_default_rule_metadata_is_valid() -> None:
    validate_world_rules(default_world_rules())
    assert OriginExistsRule().code == "VALIDATION_MISSING_ORIGIN"


def test_rule_names_must_be_unique() -> None:
    with pytest.raises(ValueError, match="registered more than once"):
        validate_world_rules([OriginExistsRule(), OriginExistsRule()])


def test_rule_codes_need_validation_prefix() -> None:
    rule = PredicateRule("Bad", "LINT_BAD", lambda world: True)

    with pytest.raises(ValueError, match="VALIDATION_"):
        validate_world(World(), [rule])


def test_empty_rule_list_accepts_anything() -> None:
    validate_world(World(), [])
