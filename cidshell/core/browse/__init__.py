"""
Browsing module.

Classification of listed CIDs, the interactive navigator, and the single-CID
inspector.
"""
from .actions import Choice, NodeAction, action_choices, child_choices
from .classifier import classify
from .content import ContentActions, read_text, save_to_local
from .inspector import Inspector
from .navigator import NavigationContext, NavigationEngine, NavigationState
from .protocols import Operator

__all__ = [
    'Choice',
    'NodeAction',
    'action_choices',
    'child_choices',
    'classify',
    'ContentActions',
    'read_text',
    'save_to_local',
    'Inspector',
    'NavigationContext',
    'NavigationEngine',
    'NavigationState',
    'Operator',
]
