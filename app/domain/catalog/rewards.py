"""
Badges and experience points awarded by catalog operations.

Each successful operation carries a fixed reward in its response envelope.
A ProgressTracker accumulates what one running application has handed out.
"""

import time
from dataclasses import dataclass, field
from enum import Enum

BADGE_CRUD_MASTER = "Mestre do CRUD"
BADGE_PATCH_BONUS = "Desafio Bônus PATCH"


class Operation(Enum):
    """Operations that award badges and XP."""

    CREATE = "create"
    LIST = "list"
    GET = "get"
    UPDATE = "update"
    PATCH = "patch"
    DELETE = "delete"
    ROOT = "root"


@dataclass(frozen=True)
class Reward:
    """XP and badges granted for one operation."""

    xp: int
    badges: tuple[str, ...] = (BADGE_CRUD_MASTER,)


REWARDS: dict[Operation, Reward] = {
    Operation.CREATE: Reward(xp=30),
    Operation.LIST: Reward(xp=20),
    Operation.GET: Reward(xp=20),
    Operation.UPDATE: Reward(xp=25),
    Operation.PATCH: Reward(xp=35, badges=(BADGE_CRUD_MASTER, BADGE_PATCH_BONUS)),
    Operation.DELETE: Reward(xp=20),
    Operation.ROOT: Reward(xp=170, badges=(BADGE_CRUD_MASTER, BADGE_PATCH_BONUS)),
}


def reward_for(operation: Operation) -> Reward:
    """Return the reward attached to an operation."""
    return REWARDS[operation]


@dataclass
class ProgressTracker:
    """Accumulated progress of one running application.

    Attributes:
        total_requests: Requests handled by the product API.
        total_xp: Sum of XP from every successful operation.
        badges: Unlocked badges, in unlock order.
        started_at: Monotonic start time, for uptime.
    """

    total_requests: int = 0
    total_xp: int = 0
    badges: list[str] = field(default_factory=list)
    started_at: float = field(default_factory=time.monotonic)

    def record_request(self) -> None:
        self.total_requests += 1

    def award(self, operation: Operation) -> Reward:
        """Credit the reward of a successful operation and return it."""
        reward = reward_for(operation)
        self.total_xp += reward.xp
        for badge in reward.badges:
            if badge not in self.badges:
                self.badges.append(badge)
        return reward

    @property
    def uptime_seconds(self) -> float:
        return round(time.monotonic() - self.started_at, 3)
