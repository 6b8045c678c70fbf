from collections import OrderedDict, deque
from typing import Deque, List

from internal.chat.type import Turn


class SessionStore:
    """Per-session turn history, bounded in both directions.

    Each session keeps its last ``history_size`` turns; past
    ``max_sessions`` the least recently used session is evicted.
    """

    def __init__(self, history_size: int, max_sessions: int):
        self.history_size = history_size
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, Deque[Turn]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> List[Turn]:
        turns = self._sessions.get(session_id)
        return list(turns) if turns else []

    def append(self, session_id: str, role: str, content: str) -> None:
        if self.history_size == 0:
            return
        turns = self._sessions.get(session_id)
        if turns is None:
            turns = deque(maxlen=self.history_size)
            self._sessions[session_id] = turns
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
        else:
            self._sessions.move_to_end(session_id)
        turns.append(Turn(role=role, content=content))


__all__ = ["SessionStore"]
