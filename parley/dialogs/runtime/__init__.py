"""Runtime orchestration components."""

from .delete import DeleteDispatcher, build_delete_request
from .dialogs import DialogIter
from .entities import EntitySet, index_messages
from .iter_buffer import IterBuffer

__all__ = [
    "DeleteDispatcher",
    "DialogIter",
    "EntitySet",
    "IterBuffer",
    "build_delete_request",
    "index_messages",
]
