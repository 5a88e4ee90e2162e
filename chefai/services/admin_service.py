"""Admin back-office operations.

Dashboard metrics and the moderation queue are example data; the users and
content tables operate on the real database.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from chefai.models.post import Post
from chefai.models.user import User
from chefai.services.community_service import CommunityService
from chefai.services.user_service import UserService

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardMetrics:
    total_revenue: float
    total_users: int
    total_content: int


@dataclass(frozen=True)
class VerificationRequest:
    id: str
    username: str
    reason: str
    status: str = "pending"


EXAMPLE_METRICS = DashboardMetrics(total_revenue=12345.67, total_users=1289, total_content=5432)

EXAMPLE_MODERATION_QUEUE = (
    VerificationRequest("req-1", "chef_maria", "Professional chef with a restaurant"),
    VerificationRequest("req-2", "veggie.lab", "Plant-based recipe creator"),
    VerificationRequest("req-3", "panaderia_juan", "Bakery owner sharing bread recipes"),
)


class AdminError(ValueError):
    pass


class AdminService:
    def __init__(self, user_service: UserService, community: CommunityService | None = None):
        self._users = user_service
        self._community = community or CommunityService()

    def require_admin(self, session: Session, user_id: int | None) -> User:
        user = self._users.get_user(session, user_id) if user_id else None
        if not self._users.is_admin(user):
            raise AdminError("Admin access required")
        return user

    def dashboard_metrics(self) -> DashboardMetrics:
        return EXAMPLE_METRICS

    def moderation_queue(self) -> list[VerificationRequest]:
        return list(EXAMPLE_MODERATION_QUEUE)

    def list_users(self, session: Session) -> list[User]:
        return self._users.list_users(session)

    def update_subscription(self, session: Session, user_id: int, tier: str | None) -> User:
        user = self._users.set_subscription(session, user_id, tier)
        if user is None:
            raise AdminError("User not found")
        _log.info("Subscription of user %s set to %s", user_id, tier or "free")
        return user

    def delete_user(self, session: Session, admin_id: int, user_id: int) -> None:
        if admin_id == user_id:
            raise AdminError("You cannot delete your own account from the admin panel")
        if not self._users.delete_user(session, user_id):
            raise AdminError("User not found")
        _log.info("Admin %s deleted user %s", admin_id, user_id)

    def list_content(self, session: Session) -> list[Post]:
        return self._community.list_all_posts(session)

    def delete_post(self, session: Session, admin_id: int, post_id: int) -> None:
        if not self._community.delete_post(session, post_id, admin_id, is_admin=True):
            raise AdminError("Post not found")
        _log.info("Admin %s deleted post %s", admin_id, post_id)
