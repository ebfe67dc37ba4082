"""Session layer — the shared board and the command entry points.

Quick start::

    from chessgrid.session import CommandDispatcher

    dispatcher = CommandDispatcher()
    moves = dispatcher.invoke("get_moves", {"from": {"r": 6, "f": 4}})
    dispatcher.invoke(
        "make_move",
        {"moves": moves, "from": {"r": 6, "f": 4}, "to": {"r": 4, "f": 4}},
    )
"""

from chessgrid.session.board_session import BoardSession, MoveReply
from chessgrid.session.commands import CommandDispatcher, CommandError

__all__ = [
    "BoardSession",
    "CommandDispatcher",
    "CommandError",
    "MoveReply",
]
