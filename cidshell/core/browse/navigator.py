"""
Interactive navigation over a tree of CIDs.

The store exposes no parent pointers, so the engine keeps its own back-stack
of visited CIDs. Every visit lists the current CID afresh; nothing is cached.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..logging import get_logger
from ..store.models import ContentNode, ListEntry, NodeKind
from ..store.protocols import ContentStore
from .actions import NodeAction, action_choices, child_choices
from .classifier import Classifier, classify
from .content import ContentActions
from .protocols import Operator

logger = get_logger('cidshell.browse.navigator')


class NavigationState(Enum):
    LISTING = "listing"
    ACTION_MENU = "action_menu"
    TERMINATED = "terminated"


@dataclass
class NavigationContext:
    """
    Position in the tree.
    
    Attributes:
        current: CID being shown
        history: CIDs to return to with Back, most recent last
    """
    current: str
    history: List[str] = field(default_factory=list)
    
    def enter(self, child_cid: str) -> None:
        """Descend into a child, remembering where we came from."""
        self.history.append(self.current)
        self.current = child_cid
    
    def back(self) -> bool:
        """
        Step back one level.
        
        Returns:
            True if navigation should terminate: the history is empty, or
            the popped CID is the one already shown
        """
        if not self.history:
            return True
        previous = self.history.pop()
        if previous == self.current:
            return True
        self.current = previous
        return False


class NavigationEngine:
    """
    Browse/back-stack state machine.
    
    States: LISTING -> ACTION_MENU -> (LISTING | ACTION_MENU | TERMINATED).
    
    Store failures propagate to the caller and end the session; they are
    not retried.
    
    Example:
        >>> engine = NavigationEngine(store, operator)
        >>> await engine.run("bafy...")
    """
    
    def __init__(
        self,
        store: ContentStore,
        operator: Operator,
        classifier: Classifier = classify
    ):
        self._store = store
        self._operator = operator
        self._classify = classifier
        self._content = ContentActions(store, operator)
        self.state = NavigationState.TERMINATED
        self.context: Optional[NavigationContext] = None
    
    async def run(self, root_cid: str) -> NavigationContext:
        """
        Navigate from root_cid until the operator exits.
        
        Returns:
            The final navigation context
        """
        context = NavigationContext(current=root_cid)
        self.context = context
        self.state = NavigationState.LISTING
        listing: List[ListEntry] = []
        kind = NodeKind.EMPTY
        logger.info(f"Navigation started at {root_cid}")
        
        while self.state is not NavigationState.TERMINATED:
            if self.state is NavigationState.LISTING:
                listing = await self._store.ls(context.current)
                kind = self._classify(listing)
                logger.debug(f"{context.current} is {kind.value} with {len(listing)} entries")
                self.state = NavigationState.ACTION_MENU
            
            action = self._operator.choose("What to do?", action_choices(kind))
            self.state = await self._perform(action, context, listing)
        
        logger.info(f"Navigation ended at {context.current}")
        return context
    
    async def _perform(
        self,
        action: NodeAction,
        context: NavigationContext,
        listing: List[ListEntry]
    ) -> NavigationState:
        if action is NodeAction.ENTER:
            child: ContentNode = self._operator.choose("Directory contents", child_choices(listing))
            context.enter(child.cid)
            return NavigationState.LISTING
        if action is NodeAction.SAVE:
            await self._content.save(context.current)
            return NavigationState.LISTING
        if action is NodeAction.SHOW:
            await self._content.show(context.current)
            return NavigationState.ACTION_MENU
        if action is NodeAction.BACK:
            if context.back():
                return NavigationState.TERMINATED
            return NavigationState.LISTING
        return NavigationState.TERMINATED
