# backend/tests/test_workflow.py
import pytest

from utils.workflow import (
    ALLOWED_TRANSITIONS, ORDER_STATUSES, STATUS_EFFECTS, RoleTarget, TransitionEffect,
    WorkflowConfigError, is_transition_allowed, plan_order_update, validate_workflow_tables,
)


def _order(**fields):
    base = {
        "id": "abcdef12-0000-0000-0000-000000000000",
        "customer_name": "Anadolu Lokum",
        "status": "created",
        "assigned_user_id": None,
        "assigned_role_name": None,
        "items": [
            {"product_id": "p1", "product_name": "Kutu 1", "quantity": 100},
            {"product_id": "p2", "product_name": "Kutu 2", "quantity": 40},
        ],
    }
    base.update(fields)
    return base


def test_tables_are_consistent():
    validate_workflow_tables()
    assert set(ALLOWED_TRANSITIONS) == set(ORDER_STATUSES)


def test_validation_rejects_unknown_status():
    effects = dict(STATUS_EFFECTS)
    effects["teleported"] = TransitionEffect(targets=(RoleTarget("Admin"),), title="x", message="x")
    with pytest.raises(WorkflowConfigError, match="teleported"):
        validate_workflow_tables(effects=effects)


def test_validation_rejects_unknown_placeholder():
    effects = {"invoice_added": TransitionEffect(targets=(RoleTarget("Sevkiyat"),), title="x",
                                                 message="{order_ref} for {salesman}")}
    with pytest.raises(WorkflowConfigError, match="salesman"):
        validate_workflow_tables(effects=effects)


def test_validation_rejects_missing_adjacency_entry():
    transitions = dict(ALLOWED_TRANSITIONS)
    del transitions["order_completed"]
    with pytest.raises(WorkflowConfigError, match="order_completed"):
        validate_workflow_tables(transitions=transitions)


@pytest.mark.parametrize("status", sorted(STATUS_EFFECTS))
def test_status_in_table_notifies_its_targets(status):
    plan = plan_order_update(_order(), {"status": status})
    targets = [n.role for n in plan.notifications]
    assert targets == list(STATUS_EFFECTS[status].targets)
    assert all(n.type == "workflow" and n.related_id == _order()["id"] for n in plan.notifications)


def test_status_outside_table_notifies_nobody():
    plan = plan_order_update(_order(), {"status": "offer_sent"})
    assert plan.status_changed
    assert plan.notifications == []


def test_unchanged_status_is_a_noop():
    plan = plan_order_update(_order(status="design_approved"), {"status": "design_approved"})
    assert not plan.status_changed
    assert plan.notifications == []


def test_supply_design_process_notifies_design_and_procurement():
    plan = plan_order_update(_order(), {"status": "supply_design_process"})
    assert [(n.role.name, n.role.fallback) for n in plan.notifications] == [
        ("Tasarımcı", None),
        ("Tedarik", "Matbaa"),
    ]


def test_message_mentions_customer_and_short_reference():
    plan = plan_order_update(_order(), {"status": "invoice_added"})
    assert "Anadolu Lokum" in plan.notifications[0].message
    assert "#ABCDEF12" in plan.notifications[0].message


def test_user_assignment_wins_over_role_assignment():
    plan = plan_order_update(_order(), {"assigned_user_id": "u1", "assigned_role_name": "Matbaa"})
    assert len(plan.notifications) == 1
    note = plan.notifications[0]
    assert note.user_id == "u1" and note.role is None
    assert note.title == "Yeni İş Ataması"


def test_role_assignment_broadcasts_to_role():
    plan = plan_order_update(_order(), {"assigned_role_name": "Matbaa"})
    assert len(plan.notifications) == 1
    assert plan.notifications[0].role == RoleTarget("Matbaa")
    assert plan.notifications[0].title == "Departman İş Ataması"


def test_same_assignment_again_creates_nothing():
    current = _order(assigned_user_id="u1", assigned_role_name="Matbaa")
    plan = plan_order_update(current, {"assigned_user_id": "u1", "assigned_role_name": "Matbaa"})
    assert plan.notifications == []


def test_clearing_assignment_creates_nothing():
    plan = plan_order_update(_order(assigned_user_id="u1"), {"assigned_user_id": None})
    assert plan.notifications == []


def test_shipping_completed_deducts_every_line():
    plan = plan_order_update(_order(status="invoice_added"), {"status": "shipping_completed"})
    assert [(d.product_id, d.quantity) for d in plan.stock_deductions] == [("p1", 100.0), ("p2", 40.0)]


def test_shipping_completed_uses_items_from_same_request():
    changes = {"status": "shipping_completed", "items": [{"product_id": "p9", "quantity": 7}]}
    plan = plan_order_update(_order(), changes)
    assert [(d.product_id, d.quantity) for d in plan.stock_deductions] == [("p9", 7.0)]


def test_shipping_completed_twice_deducts_nothing():
    plan = plan_order_update(_order(status="shipping_completed"), {"status": "shipping_completed"})
    assert plan.stock_deductions == []


def test_transition_adjacency():
    assert is_transition_allowed("created", "offer_sent")
    assert is_transition_allowed("invoice_added", "shipping_completed")
    assert is_transition_allowed("design_approved", "design_approved")
    assert not is_transition_allowed("created", "order_completed")
    assert not is_transition_allowed("order_completed", "created")

