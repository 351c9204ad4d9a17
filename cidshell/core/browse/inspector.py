"""Single-CID viewer."""
from ..logging import get_logger
from ..store.protocols import ContentStore
from .actions import NodeAction, action_choices
from .classifier import Classifier, classify
from .content import ContentActions
from .protocols import Operator

logger = get_logger('cidshell.browse.inspector')


class Inspector:
    """
    Shows the immediate children of one CID, then acts on that CID.
    
    The raw listing is displayed for every kind. Actions are Save/Show/Exit
    as the kind allows; each call is independent.
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
    
    async def inspect(self, cid: str) -> NodeAction:
        """
        Inspect a CID.
        
        Returns:
            The action the operator chose
        """
        listing = await self._store.ls(cid)
        kind = self._classify(listing)
        logger.debug(f"Inspecting {cid}: {kind.value}, {len(listing)} entries")
        self._operator.show_listing(listing)
        
        action = self._operator.choose("What to do?", action_choices(kind, navigable=False))
        if action is NodeAction.SAVE:
            await self._content.save(cid)
        elif action is NodeAction.SHOW:
            await self._content.show(cid)
        return action
