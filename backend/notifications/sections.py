"""
Grouping of notifications into titled email sections.

Each notification type belongs to one bundle group (see config.events_config).
Groups may be split further by a field of the notification data, and section
titles are produced from the group's template by substituting ``<field>``
placeholders with the values found in the notifications of that section.
"""

import re
from typing import Any, Dict, List, Mapping, Sequence

from config.events_config import EVENT_BUNDLES, BundleGroup
from models.notification import Section

PLACEHOLDER_PATTERN = re.compile(r"<[a-zA-Z]+>")


def classify(notification_type: str | None) -> BundleGroup:
    """
    Find the bundle group owning a notification type.

    Groups are scanned in declaration order, so if two groups share a type the
    earlier one wins. Unknown types fall back to ``BundleGroup.DEFAULT``.
    """
    for group, definition in EVENT_BUNDLES.items():
        if notification_type in definition.types:
            return group
    return BundleGroup.DEFAULT


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def summarize_values(values: Sequence[str]) -> str:
    """
    Natural language form of a list of values.

    Up to two values are comma-joined. From three values on, the first two are
    kept and followed by a count of ``total - 3`` remaining values.
    """
    total = len(values)
    if total < 3:
        return ", ".join(values)
    return ", ".join(values[:2]) + " and " + str(total - 3) + "others"


def resolve_placeholders(template: str, data_list: Sequence[Mapping[str, Any]]) -> str:
    """
    Replace ``<field>`` tokens in ``template`` with values taken from ``data_list``.

    Each token is replaced by the full comma-joined list of that field's values
    across ``data_list``; the shortened summary is not used for substitution.

    Args:
        template: Title or subject template, e.g. "Files shared by <authorHandle>"
        data_list: Notification data dicts, in display order

    Returns:
        The resolved string
    """
    result = template
    for placeholder in PLACEHOLDER_PATTERN.findall(template):
        field = placeholder[1:-1]
        values = [_render_value(data.get(field)) for data in data_list]
        result = result.replace(placeholder, ", ".join(values), 1)
    return result


def _group_by(
    notifications: Sequence[Mapping[str, Any]], key_func
) -> Dict[Any, List[Mapping[str, Any]]]:
    groups: Dict[Any, List[Mapping[str, Any]]] = {}
    for notification in notifications:
        groups.setdefault(key_func(notification), []).append(notification)
    return groups


def build_sections(notifications: Sequence[Mapping[str, Any]]) -> List[Section]:
    """
    Build email sections for the notifications of one project.

    Notifications are grouped by bundle group. A group without ``group_by``
    yields a single section; otherwise one section is produced per distinct
    value of the ``group_by`` field. Order of sections follows first
    appearance but callers should not depend on it.

    Args:
        notifications: Notification data dicts (each carries its ``type``)

    Returns:
        List of sections, together holding every input notification exactly once
    """
    sections: List[Section] = []

    by_group = _group_by(notifications, lambda n: classify(n.get("type")))
    for group, group_notifications in by_group.items():
        definition = EVENT_BUNDLES[group]

        if not definition.group_by:
            partitions = [group_notifications]
        else:
            field = definition.group_by
            partitions = list(_group_by(group_notifications, lambda n: n.get(field)).values())

        for partition in partitions:
            sections.append(
                Section(
                    title=resolve_placeholders(definition.title, partition),
                    group_key=group.value,
                    notifications=[dict(n) for n in partition],
                )
            )

    return sections
