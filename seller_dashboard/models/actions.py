"""Advisor result models."""

from dataclasses import dataclass, field

from seller_dashboard.models.enums import Priority


@dataclass(frozen=True)
class ActionLink:
    """Follow-up for an action item.

    ``href`` points at a page of the web app. ``command`` names a follow-up
    the presentation layer runs itself (e.g. ``"price_suggest"``).
    """

    label: str
    href: str | None = None
    command: str | None = None


@dataclass(frozen=True)
class ActionItem:
    """A single advisory recommendation for one listing."""

    rule_id: str
    priority: Priority
    title: str
    description: str
    link: ActionLink | None = None


@dataclass
class PropertyAdvice:
    """Advisor output for one property.

    ``skipped_rules`` lists rules that could not be evaluated because the
    property lacked data; ``issues`` says why.
    """

    property_id: str
    actions: list[ActionItem] = field(default_factory=list)
    skipped_rules: list[str] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)

    @property
    def top_priority(self) -> Priority:
        if not self.actions:
            return Priority.LOW
        return min((a.priority for a in self.actions), key=lambda p: p.rank)

    @property
    def rule_ids(self) -> list[str]:
        return [a.rule_id for a in self.actions]


@dataclass(frozen=True)
class SchedulePhase:
    """One step of the sale schedule shown to a seller."""

    name: str
    target_day: int
    completed: bool
