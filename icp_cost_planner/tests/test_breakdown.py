import pytest

from icp_cost_planner.breakdown import Amount, Breakdown, Category, Cost, Kind, add


def test_amount_addition_is_componentwise_and_order_independent():
    a = Amount(1.5, 100.0)
    b = Amount(0.25, 20.0)
    c = Amount(2.0, 5.0)

    assert add(a, b) == Amount(1.75, 120.0)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)
    assert a + Amount.zero() == a


def test_merge_if_same_kind_sums_only_matching_kinds():
    target = Cost(Kind.PER_DAY, Category.STORAGE, Amount(1.0, 10.0))

    assert target.merge_if_same_kind(Cost(Kind.PER_DAY, Category.TIMER, Amount(2.0, 20.0)))
    assert target.amount == Amount(3.0, 30.0)

    assert not target.merge_if_same_kind(Cost(Kind.ONE_TIME, Category.STORAGE, Amount(5.0, 50.0)))
    assert target.amount == Amount(3.0, 30.0)


def test_merge_if_same_category_and_kind_requires_both():
    target = Cost(Kind.ONE_TIME, Category.CANISTER, Amount(1.0, 1.0))

    assert not target.merge_if_same_category_and_kind(Cost(Kind.ONE_TIME, Category.STORAGE, Amount(1.0, 1.0)))
    assert not target.merge_if_same_category_and_kind(Cost(Kind.PER_DAY, Category.CANISTER, Amount(1.0, 1.0)))
    assert target.amount == Amount(1.0, 1.0)

    assert target.merge_if_same_category_and_kind(Cost(Kind.ONE_TIME, Category.CANISTER, Amount(2.0, 3.0)))
    assert target.amount == Amount(3.0, 4.0)


def test_project_scales_per_day_costs_only():
    per_day = Cost(Kind.PER_DAY, Category.STORAGE, Amount(0.5, 50.0))
    one_time = Cost(Kind.ONE_TIME, Category.CANISTER, Amount(1.0, 100.0))

    assert per_day.project(30) == Amount(15.0, 1500.0)
    assert per_day.project(0.5) == Amount(0.25, 25.0)
    assert per_day.project(0) == Amount(0.0, 0.0)
    for days in (0, 1, 365):
        assert one_time.project(days) == Amount(1.0, 100.0)


def test_project_rejects_negative_days():
    with pytest.raises(ValueError, match="non-negative"):
        Cost(Kind.PER_DAY, Category.STORAGE, Amount(1.0, 1.0)).project(-1)


@pytest.mark.parametrize("days", [float("nan"), float("inf")])
def test_project_rejects_non_finite_days(days):
    with pytest.raises(ValueError, match="finite"):
        Cost(Kind.PER_DAY, Category.STORAGE, Amount(1.0, 1.0)).project(days)


def test_breakdown_add_never_keeps_duplicate_pairs():
    breakdown = Breakdown()
    items = [
        Cost(Kind.PER_DAY, Category.INGRESS_EXECUTION, Amount(1.0, 10.0)),
        Cost(Kind.PER_DAY, Category.INGRESS_NETWORK, Amount(0.5, 5.0)),
        Cost(Kind.PER_DAY, Category.INGRESS_EXECUTION, Amount(2.0, 20.0)),
        Cost(Kind.ONE_TIME, Category.INGRESS_EXECUTION, Amount(4.0, 40.0)),
        Cost(Kind.PER_DAY, Category.INGRESS_NETWORK, Amount(0.5, 5.0)),
    ]
    for item in items:
        breakdown.add(item)

    pairs = [(c.kind, c.category) for c in breakdown]
    assert len(pairs) == len(set(pairs)) == 3
    assert breakdown.costs()[0].amount == Amount(3.0, 30.0)
    assert breakdown.costs()[1].amount == Amount(1.0, 10.0)


def test_breakdown_add_does_not_mutate_inserted_items():
    first = Cost(Kind.PER_DAY, Category.TIMER, Amount(1.0, 1.0))
    second = Cost(Kind.PER_DAY, Category.TIMER, Amount(2.0, 2.0))
    breakdown = Breakdown()
    breakdown.add(first)
    breakdown.add(second)

    assert first.amount == Amount(1.0, 1.0)
    assert second.amount == Amount(2.0, 2.0)
    assert breakdown.costs()[0].amount == Amount(3.0, 3.0)


def test_breakdown_total_is_independent_of_insertion_order():
    a = Cost(Kind.ONE_TIME, Category.CANISTER, Amount(1.0, 100.0))
    b = Cost(Kind.PER_DAY, Category.STORAGE, Amount(0.5, 50.0))

    ab = Breakdown()
    ab.add(a)
    ab.add(b)
    ba = Breakdown()
    ba.add(b)
    ba.add(a)

    assert ab.total() == ba.total()


def test_breakdown_total_and_projection_scenario():
    breakdown = Breakdown()
    breakdown.add(Cost(Kind.ONE_TIME, Category.CANISTER, Amount(1.0, 100.0)))
    breakdown.add(Cost(Kind.PER_DAY, Category.STORAGE, Amount(0.5, 50.0)))

    one_time, per_day = breakdown.total()

    assert one_time == Cost(Kind.ONE_TIME, Category.TOTAL, Amount(1.0, 100.0))
    assert per_day == Cost(Kind.PER_DAY, Category.TOTAL, Amount(0.5, 50.0))
    assert per_day.project(30) == Amount(15.0, 1500.0)


def test_breakdown_merge_equals_adding_each_item():
    left = Breakdown()
    left.add(Cost(Kind.PER_DAY, Category.TIMER, Amount(1.0, 1.0)))
    right = Breakdown()
    right.add(Cost(Kind.PER_DAY, Category.TIMER, Amount(2.0, 2.0)))
    right.add(Cost(Kind.ONE_TIME, Category.CANISTER, Amount(3.0, 3.0)))

    left.merge(right)

    assert left.costs() == [
        Cost(Kind.PER_DAY, Category.TIMER, Amount(3.0, 3.0)),
        Cost(Kind.ONE_TIME, Category.CANISTER, Amount(3.0, 3.0)),
    ]


def test_breakdown_sort_orders_by_category_then_kind():
    breakdown = Breakdown()
    breakdown.add(Cost(Kind.PER_DAY, Category.SCHNORR, Amount(1.0, 1.0)))
    breakdown.add(Cost(Kind.PER_DAY, Category.CANISTER, Amount(1.0, 1.0)))
    breakdown.add(Cost(Kind.ONE_TIME, Category.SCHNORR, Amount(1.0, 1.0)))
    total_before = breakdown.total()

    breakdown.sort()

    assert [(c.category, c.kind) for c in breakdown] == [
        (Category.CANISTER, Kind.PER_DAY),
        (Category.SCHNORR, Kind.ONE_TIME),
        (Category.SCHNORR, Kind.PER_DAY),
    ]
    assert breakdown.total() == total_before


def test_cost_labels():
    assert Cost(Kind.ONE_TIME, Category.INGRESS_EXECUTION).label == "Execution:Ingress"
    assert Cost(Kind.ONE_TIME, Category.CALLER_NETWORK).label == "Network:Caller"
    assert Cost(Kind.ONE_TIME, Category.TOTAL).label == ""
