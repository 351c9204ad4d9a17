"""
Actions offered for a node, keyed by its kind.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from ..store.models import ContentNode, ListEntry, NodeKind


class NodeAction(str, Enum):
    """Operator actions on a node."""
    ENTER = "enter"
    SAVE = "save"
    SHOW = "show"
    BACK = "back"
    EXIT = "exit"


@dataclass(frozen=True)
class Choice:
    """One selectable option in an operator prompt."""
    value: Any
    label: str


NAVIGATION_ACTIONS: Dict[NodeKind, Tuple[NodeAction, ...]] = {
    NodeKind.DIRECTORY: (NodeAction.ENTER, NodeAction.SAVE, NodeAction.BACK, NodeAction.EXIT),
    NodeKind.FILE: (NodeAction.SAVE, NodeAction.SHOW, NodeAction.BACK, NodeAction.EXIT),
    NodeKind.EMPTY: (NodeAction.BACK, NodeAction.EXIT),
}

# Single-shot inspection has no Enter/Back
INSPECTION_ACTIONS: Dict[NodeKind, Tuple[NodeAction, ...]] = {
    kind: tuple(a for a in actions if a not in (NodeAction.ENTER, NodeAction.BACK))
    for kind, actions in NAVIGATION_ACTIONS.items()
}

_LABELS = {
    NodeAction.ENTER: "Enter directory",
    NodeAction.SHOW: "Show file contents",
    NodeAction.BACK: "Go back",
    NodeAction.EXIT: "Go to main options",
}


def action_label(action: NodeAction, kind: NodeKind) -> str:
    if action is NodeAction.SAVE:
        return "Save directory to local" if kind is NodeKind.DIRECTORY else "Save file to local path"
    return _LABELS[action]


def action_choices(kind: NodeKind, navigable: bool = True) -> List[Choice]:
    """Choices for the action menu of a node of the given kind."""
    table = NAVIGATION_ACTIONS if navigable else INSPECTION_ACTIONS
    return [Choice(value=action, label=action_label(action, kind)) for action in table[kind]]


def child_choices(listing: Sequence[ListEntry]) -> List[Choice]:
    """One choice per listed child, valued by its ContentNode."""
    nodes = [ContentNode.from_entry(entry) for entry in listing]
    return [Choice(value=node, label=node.label) for node in nodes]
