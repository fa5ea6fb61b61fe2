"""Error taxonomy shared by the game services and the transports.

Services report expected failures by returning ``Rejected`` rather than
raising, so the caller decides who hears about it.
"""

from dataclasses import dataclass
from typing import Any, Dict


class ScoreboardError(Exception):
    kind = 'error'

    def __init__(self, reason: str, data: Any = None):
        super().__init__(reason)
        self.reason = reason
        self.data = data


class ValidationError(ScoreboardError):
    kind = 'validation'


class NotFoundError(ScoreboardError):
    kind = 'not_found'


class StateError(ScoreboardError):
    kind = 'state'


@dataclass(frozen=True)
class Rejected:
    error: ScoreboardError

    ok = False

    def notice(self) -> Dict[str, Any]:
        return {
            'kind': self.error.kind,
            'reason': self.error.reason,
            'data': self.error.data,
        }
