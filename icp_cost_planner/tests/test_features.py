import pytest

from icp_cost_planner.breakdown import Amount, Category, Kind
from icp_cost_planner.features import (
    Callee,
    Caller,
    Canister,
    ComputeAllocation,
    Ecdsa,
    FieldKind,
    Heartbeat,
    HttpOutcall,
    Ingress,
    MemoryAllocation,
    Query,
    Schnorr,
    Storage,
    Timer,
    build_default_registry,
)
from icp_cost_planner.features.values import REPEAT_VALUES, repeat_to_string


class RecordingPricing:
    """Prices every call at (count, 10 * count) and remembers the calls."""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        count = args[-1]
        return Amount(float(count), 10.0 * count)

    def canister_creation(self, count):
        return self._record("canister_creation", count)

    def execution(self, mode, instructions, count):
        return self._record("execution", mode, instructions, count)

    def storage(self, size, days, count):
        return self._record("storage", size, days, count)

    def memory_allocation(self, size, days, count):
        return self._record("memory_allocation", size, days, count)

    def compute_allocation(self, percent, days, count):
        return self._record("compute_allocation", percent, days, count)

    def message(self, mode, direction, size, count):
        return self._record("message", mode, direction, size, count)

    def http_outcall(self, request, response, count):
        return self._record("http_outcall", request, response, count)

    def sign_with_ecdsa(self, count):
        return self._record("sign_with_ecdsa", count)

    def sign_with_schnorr(self, count):
        return self._record("sign_with_schnorr", count)


EXPECTED_CATEGORIES = {
    "Canister": [Category.CANISTER],
    "Storage": [Category.STORAGE],
    "MemoryAllocation": [Category.STORAGE],
    "ComputeAllocation": [Category.COMPUTE],
    "Ingress": [Category.INGRESS_EXECUTION, Category.INGRESS_NETWORK],
    "Query": [Category.QUERY_EXECUTION, Category.QUERY_NETWORK],
    "Caller": [Category.CALLER_EXECUTION, Category.CALLER_NETWORK],
    "Callee": [Category.CALLEE_EXECUTION],
    "Timer": [Category.TIMER],
    "Heartbeat": [Category.HEARTBEAT],
    "HttpOutcall": [Category.HTTP_OUTCALL],
    "Ecdsa": [Category.ECDSA],
    "Schnorr": [Category.SCHNORR],
}


def test_registry_labels_are_unique_and_match_instances():
    registry = build_default_registry()

    assert len(registry.labels()) == len(set(registry.labels())) == 13
    for label, build in registry.items():
        assert build().label == label
    assert registry.build("Nope") is None
    assert "Ingress" in registry
    assert "Nope" not in registry
    assert registry.get("Ingress") is Ingress
    assert registry.get("Nope") is None


def test_every_registered_feature_describes_itself():
    for label, build in build_default_registry().items():
        assert build().info().strip(), label


def test_registry_rejects_duplicates_and_mislabelled_builders():
    registry = build_default_registry()

    with pytest.raises(ValueError, match="already registered"):
        registry.register("Canister", Canister)

    registry = type(registry)()
    with pytest.raises(ValueError, match="labelled 'Storage'"):
        registry.register("Disk", Storage)


@pytest.mark.parametrize("label", sorted(EXPECTED_CATEGORIES))
def test_each_variant_contributes_its_categories(label):
    feature = build_default_registry().build(label)

    breakdown = feature.cost(RecordingPricing())

    assert [c.category for c in breakdown] == EXPECTED_CATEGORIES[label]


def test_constructor_defaults():
    assert Canister().parameters() == {"count": 1}
    assert Storage().parameters() == {"count": 1, "storage_index": 2}
    assert ComputeAllocation().parameters() == {"count": 1, "percent_index": 2}
    assert Ingress().parameters() == {
        "count": 100,
        "repeat_index": 3,
        "instruction_index": 3,
        "request_index": 4,
        "response_index": 4,
    }
    assert Callee().parameters() == {"count": 100, "repeat_index": 3, "instruction_index": 3}
    assert Timer().parameters() == {"count": 1, "repeat_index": 4, "instruction_index": 3}
    assert Heartbeat().parameters() == {"count": 1, "instruction_index": 3}
    assert HttpOutcall().parameters() == {"count": 1, "repeat_index": 3, "request_index": 4, "response_index": 4}
    assert Ecdsa().parameters() == Schnorr().parameters() == {"count": 1, "repeat_index": 3}


@pytest.mark.parametrize(
    "repeat,kind,count",
    [
        (0, Kind.ONE_TIME, 100),
        (1, Kind.PER_DAY, 100),
        (24, Kind.PER_DAY, 2400),
    ],
)
def test_ingress_frequency_selects_kind_and_effective_count(repeat, kind, count):
    feature = Ingress()
    feature.count = 100
    feature.repeat_index = REPEAT_VALUES.index(repeat)
    pricing = RecordingPricing()

    breakdown = feature.cost(pricing)

    assert {c.kind for c in breakdown} == {kind}
    assert [call[-1] for call in pricing.calls] == [count, count]


def test_ingress_network_bytes_are_request_plus_response():
    feature = Ingress()
    feature.request_index = 1  # 256 bytes
    feature.response_index = 3  # 1 KB
    pricing = RecordingPricing()

    feature.cost(pricing)

    message = [call for call in pricing.calls if call[0] == "message"][0]
    assert message[3] == 256 + 1024


def test_heartbeat_runs_every_second_of_the_day():
    pricing = RecordingPricing()

    breakdown = Heartbeat().cost(pricing)

    (cost,) = breakdown.costs()
    assert cost.kind == Kind.PER_DAY
    assert pricing.calls[0][-1] == 24 * 3600


def test_storage_is_priced_per_day():
    feature = Storage()
    feature.count = 3
    pricing = RecordingPricing()

    (cost,) = feature.cost(pricing).costs()

    assert cost.kind == Kind.PER_DAY
    assert pricing.calls == [("storage", 10 * 1024 * 1024, 1, 3)]


def test_field_on_change_is_visible_to_next_cost():
    feature = Timer()
    fields = {f.label: f for f in feature.fields()}

    assert fields["Timer"].kind == FieldKind.INCREMENT
    assert fields["Frequency"].choices == [repeat_to_string(v) for v in REPEAT_VALUES]
    assert fields["Frequency"].default == 4

    fields["Timer"].on_change(5)
    fields["Frequency"].on_change(0)
    pricing = RecordingPricing()
    (cost,) = feature.cost(pricing).costs()

    assert cost.kind == Kind.ONE_TIME
    assert pricing.calls[0][-1] == 5


def test_field_on_change_rejects_out_of_range_index():
    feature = MemoryAllocation()
    size = [f for f in feature.fields() if f.label == "Size"][0]

    with pytest.raises(ValueError, match="out of range"):
        size.on_change(99)
    assert feature.storage_index == 2


def test_set_parameter_rejects_unknown_names_and_bad_values():
    feature = Caller()

    with pytest.raises(KeyError):
        feature.set_parameter("storage_index", 1)
    with pytest.raises(ValueError, match="integer"):
        feature.set_parameter("repeat_index", 1.5)
    with pytest.raises(ValueError, match="non-negative"):
        feature.set_parameter("count", -1)
    with pytest.raises(ValueError, match="number"):
        feature.set_parameter("count", "10")
    with pytest.raises(ValueError, match="finite"):
        feature.set_parameter("count", float("inf"))
    with pytest.raises(ValueError, match="finite"):
        feature.set_parameter("count", float("nan"))


def test_cost_fails_fast_on_out_of_range_index():
    feature = Query()
    feature.instruction_index = 42

    with pytest.raises(IndexError, match="Query"):
        feature.cost(RecordingPricing())


def test_features_are_independent():
    a = Ingress()
    b = Ingress()
    a.count = 7

    assert b.count == 100
    assert a != b
