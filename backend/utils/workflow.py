# backend/utils/workflow.py
"""Order workflow: which department hears about a status change.

Everything here is pure; the orders route turns a ``WorkflowPlan`` into
notification and stock rows inside the same transaction as the order update.

``STATUS_EFFECTS`` decides *who is notified* when an order enters a status.
``ALLOWED_TRANSITIONS`` describes *which moves are legal*; it is only enforced
when ``ENFORCE_WORKFLOW_ORDER`` is enabled, otherwise any status may follow
any other.
"""
import string
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

ORDER_STATUSES: Tuple[str, ...] = (
    "created",
    "offer_sent",
    "waiting_manager_approval",
    "manager_approved",
    "revision_requested",
    "offer_accepted",
    "offer_cancelled",
    "supply_design_process",
    "design_pending",
    "design_approved",
    "supply_completed",
    "production_pending",
    "production_planned",
    "production_started",
    "production_completed",
    "invoice_added",
    "shipping_completed",
    "order_completed",
    "order_cancelled",
    "production_cancelled",
)

INITIAL_STATUS = "created"
SHIPPING_COMPLETED = "shipping_completed"

# Role names as seeded on first boot
ROLE_ADMIN = "Admin"
ROLE_GENERAL_MANAGER = "Genel Müdür"
ROLE_DESIGN = "Tasarımcı"
ROLE_PROCUREMENT = "Tedarik"
ROLE_PRINTING = "Matbaa"
ROLE_FACTORY = "Fabrika Müdürü"
ROLE_ACCOUNTING = "Muhasebe"
ROLE_SHIPPING = "Sevkiyat"

TEMPLATE_FIELDS = {"order_ref", "customer"}


class WorkflowConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class RoleTarget:
    name: str
    fallback: Optional[str] = None


@dataclass(frozen=True)
class TransitionEffect:
    targets: Tuple[RoleTarget, ...]
    title: str
    message: str


STATUS_EFFECTS: Dict[str, TransitionEffect] = {
    "waiting_manager_approval": TransitionEffect(
        targets=(RoleTarget(ROLE_GENERAL_MANAGER, ROLE_ADMIN),),
        title="Onay Bekliyor",
        message="{customer} firmasının {order_ref} numaralı teklifi onayınızı bekliyor.",
    ),
    "supply_design_process": TransitionEffect(
        targets=(RoleTarget(ROLE_DESIGN), RoleTarget(ROLE_PROCUREMENT, ROLE_PRINTING)),
        title="Tasarım ve Tedarik Süreci",
        message="{customer} firmasının {order_ref} numaralı siparişi tasarım ve tedarik sürecine alındı.",
    ),
    "design_approved": TransitionEffect(
        targets=(RoleTarget(ROLE_PROCUREMENT, ROLE_PRINTING),),
        title="Tasarım Onaylandı",
        message="{customer} firmasının {order_ref} numaralı siparişinin tasarımı onaylandı, tedarik başlayabilir.",
    ),
    "supply_completed": TransitionEffect(
        targets=(RoleTarget(ROLE_FACTORY),),
        title="Tedarik Tamamlandı",
        message="{customer} firmasının {order_ref} numaralı siparişi üretime hazır.",
    ),
    "production_completed": TransitionEffect(
        targets=(RoleTarget(ROLE_ACCOUNTING),),
        title="Üretim Tamamlandı",
        message="{customer} firmasının {order_ref} numaralı siparişi için fatura kesilebilir.",
    ),
    "invoice_added": TransitionEffect(
        targets=(RoleTarget(ROLE_SHIPPING),),
        title="Fatura Eklendi",
        message="{customer} firmasının {order_ref} numaralı siparişi sevkiyata hazır.",
    ),
    SHIPPING_COMPLETED: TransitionEffect(
        targets=(RoleTarget(ROLE_GENERAL_MANAGER, ROLE_ADMIN),),
        title="Sevkiyat Tamamlandı",
        message="{customer} firmasının {order_ref} numaralı siparişi sevk edildi, kapanış bekliyor.",
    ),
}

_CANCEL = frozenset({"order_cancelled"})

ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "created": frozenset({"offer_sent", "waiting_manager_approval"}) | _CANCEL,
    "offer_sent": frozenset({"offer_accepted", "offer_cancelled", "revision_requested", "waiting_manager_approval"}),
    "waiting_manager_approval": frozenset({"manager_approved", "revision_requested"}) | _CANCEL,
    "manager_approved": frozenset({"offer_sent", "offer_accepted"}) | _CANCEL,
    "revision_requested": frozenset({"created", "offer_sent", "waiting_manager_approval"}) | _CANCEL,
    "offer_accepted": frozenset({"supply_design_process", "design_pending"}) | _CANCEL,
    "offer_cancelled": frozenset({"created", "offer_sent"}),
    "supply_design_process": frozenset({"design_pending", "design_approved"}) | _CANCEL,
    "design_pending": frozenset({"design_approved", "supply_design_process"}) | _CANCEL,
    "design_approved": frozenset({"supply_completed"}) | _CANCEL,
    "supply_completed": frozenset({"production_pending", "production_planned"}) | _CANCEL,
    "production_pending": frozenset({"production_planned", "production_cancelled"}) | _CANCEL,
    "production_planned": frozenset({"production_started", "production_cancelled"}) | _CANCEL,
    "production_started": frozenset({"production_completed", "production_cancelled"}),
    "production_completed": frozenset({"invoice_added"}),
    "invoice_added": frozenset({SHIPPING_COMPLETED}),
    SHIPPING_COMPLETED: frozenset({"order_completed"}),
    "order_completed": frozenset(),
    "order_cancelled": frozenset({"created"}),
    "production_cancelled": frozenset({"production_pending"}) | _CANCEL,
}


def validate_workflow_tables(
    effects: Mapping[str, TransitionEffect] = STATUS_EFFECTS,
    transitions: Mapping[str, FrozenSet[str]] = ALLOWED_TRANSITIONS,
    statuses: Tuple[str, ...] = ORDER_STATUSES,
) -> None:
    """Fail fast on a status table that references unknown statuses or fields."""
    known = set(statuses)
    problems: List[str] = []

    for status, effect in effects.items():
        if status not in known:
            problems.append(f"notification table uses unknown status {status!r}")
        if not effect.targets:
            problems.append(f"{status!r} notifies nobody")
        used = {name for _, name, _, _ in string.Formatter().parse(effect.message) if name}
        if used - TEMPLATE_FIELDS:
            problems.append(f"{status!r} message uses unknown fields {sorted(used - TEMPLATE_FIELDS)}")

    missing = known - set(transitions)
    if missing:
        problems.append(f"no transition entry for {sorted(missing)}")
    for source, targets in transitions.items():
        if source not in known:
            problems.append(f"transition table uses unknown status {source!r}")
        unknown = set(targets) - known
        if unknown:
            problems.append(f"{source!r} leads to unknown statuses {sorted(unknown)}")
        if source in targets:
            problems.append(f"{source!r} lists itself as a transition")

    if problems:
        raise WorkflowConfigError("; ".join(problems))


def is_transition_allowed(current: Optional[str], new: str) -> bool:
    if current == new:
        return True
    if current is None:
        return new == INITIAL_STATUS
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def order_ref(order_id: str) -> str:
    return "#" + order_id[:8].upper()


@dataclass
class NotificationIntent:
    title: str
    message: str
    type: str
    related_id: str
    user_id: Optional[str] = None
    role: Optional[RoleTarget] = None


@dataclass
class StockDeduction:
    product_id: str
    product_name: str
    quantity: float


@dataclass
class WorkflowPlan:
    changes: Dict[str, Any]
    status_changed: bool = False
    notifications: List[NotificationIntent] = field(default_factory=list)
    stock_deductions: List[StockDeduction] = field(default_factory=list)


def _changed(current: Mapping[str, Any], changes: Mapping[str, Any], key: str) -> bool:
    return key in changes and changes[key] is not None and changes[key] != current.get(key)


def plan_order_update(current: Mapping[str, Any], changes: Mapping[str, Any]) -> WorkflowPlan:
    """Work out the side effects of applying ``changes`` to an order.

    ``current`` is the stored order as a dict of column values (``items`` as a
    list of line dicts); ``changes`` holds only the fields the client sent.
    """
    merged = {**current, **changes}
    order_id = merged["id"]
    context = {"order_ref": order_ref(order_id), "customer": merged.get("customer_name") or ""}

    plan = WorkflowPlan(changes=dict(changes))
    plan.status_changed = _changed(current, changes, "status")

    if plan.status_changed:
        effect = STATUS_EFFECTS.get(changes["status"])
        if effect is not None:
            for target in effect.targets:
                plan.notifications.append(NotificationIntent(
                    title=effect.title,
                    message=effect.message.format(**context),
                    type="workflow",
                    related_id=order_id,
                    role=target,
                ))

    # A named user outranks a department assignment sent in the same request
    if _changed(current, changes, "assigned_user_id"):
        plan.notifications.append(NotificationIntent(
            title="Yeni İş Ataması",
            message="{customer} firmasının {order_ref} numaralı siparişi size atandı.".format(**context),
            type="assignment",
            related_id=order_id,
            user_id=changes["assigned_user_id"],
        ))
    elif _changed(current, changes, "assigned_role_name"):
        plan.notifications.append(NotificationIntent(
            title="Departman İş Ataması",
            message="{customer} firmasının {order_ref} numaralı siparişi departmanınıza atandı.".format(**context),
            type="assignment",
            related_id=order_id,
            role=RoleTarget(changes["assigned_role_name"]),
        ))

    if plan.status_changed and changes["status"] == SHIPPING_COMPLETED:
        for line in merged.get("items") or []:
            plan.stock_deductions.append(StockDeduction(
                product_id=line["product_id"],
                product_name=line.get("product_name") or "",
                quantity=float(line["quantity"]),
            ))

    return plan
