"""Admin back-office state: metrics, users, content and the post generator."""

from pydantic import BaseModel, ValidationError

from chefai.models.user import SubscriptionTier
from chefai.services.admin_service import AdminError, AdminService
from chefai.services.flows import generate_admin_post
from chefai.services.genai_client import FlowError
from chefai.services.user_service import UserServiceError
from chefai.ui.state.base_state import BaseState, get_sync_session, get_user_service

TIER_OPTIONS = ["free"] + [tier.value for tier in SubscriptionTier]


class MetricsItem(BaseModel):
    total_revenue: str = ""
    total_users: int = 0
    total_content: int = 0


class RequestItem(BaseModel):
    id: str = ""
    username: str = ""
    reason: str = ""
    status: str = ""


class AdminUserItem(BaseModel):
    id: int = 0
    name: str = ""
    username: str = ""
    email: str = ""
    tier: str = "free"
    is_premium: bool = False
    created_at: str = ""


class AdminPostItem(BaseModel):
    id: int = 0
    publisher_id: int = 0
    type: str = ""
    content: str = ""
    likes_count: int = 0
    comments_count: int = 0
    created_at: str = ""


def _admin_service() -> AdminService:
    return AdminService(get_user_service())


class AdminState(BaseState):
    metrics: MetricsItem = MetricsItem()
    requests: list[RequestItem] = []
    users: list[AdminUserItem] = []
    posts: list[AdminPostItem] = []

    topic: str = ""
    is_generating: bool = False
    generated_post_id: int = 0

    def set_topic(self, value: str):
        self.topic = value

    async def _require_admin(self) -> int:
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            _admin_service().require_admin(session, user_id)
        return user_id

    def load_dashboard(self):
        svc = _admin_service()
        metrics = svc.dashboard_metrics()
        self.metrics = MetricsItem(
            total_revenue=f"${metrics.total_revenue:,.2f}",
            total_users=metrics.total_users,
            total_content=metrics.total_content,
        )
        self.requests = [
            RequestItem(id=r.id, username=r.username, reason=r.reason, status=r.status)
            for r in svc.moderation_queue()
        ]

    async def load_users(self):
        try:
            await self._require_admin()
        except AdminError as exc:
            self.error_message = str(exc)
            return
        with get_sync_session() as session:
            self.users = [
                AdminUserItem(
                    id=u.id,
                    name=u.name,
                    username=u.username,
                    email=u.email,
                    tier=u.subscription_tier.value if u.subscription_tier else "free",
                    is_premium=u.is_premium,
                    created_at=u.created_at.strftime("%Y-%m-%d") if u.created_at else "",
                )
                for u in _admin_service().list_users(session)
            ]
        self.error_message = ""

    async def set_tier(self, user_id: int, tier: str):
        try:
            await self._require_admin()
            with get_sync_session() as session:
                _admin_service().update_subscription(
                    session, user_id, None if tier == "free" else tier
                )
                session.commit()
        except (AdminError, UserServiceError) as exc:
            self.error_message = str(exc)
            return
        await self.load_users()

    async def delete_user(self, user_id: int):
        try:
            admin_id = await self._require_admin()
            with get_sync_session() as session:
                _admin_service().delete_user(session, admin_id, user_id)
                session.commit()
        except AdminError as exc:
            self.error_message = str(exc)
            return
        await self.load_users()

    async def load_content(self):
        try:
            await self._require_admin()
        except AdminError as exc:
            self.error_message = str(exc)
            return
        with get_sync_session() as session:
            self.posts = [
                AdminPostItem(
                    id=p.id,
                    publisher_id=p.publisher_id,
                    type=p.type.value,
                    content=p.content[:120],
                    likes_count=p.likes_count,
                    comments_count=p.comments_count,
                    created_at=p.created_at.strftime("%Y-%m-%d") if p.created_at else "",
                )
                for p in _admin_service().list_content(session)
            ]
        self.error_message = ""

    async def delete_post(self, post_id: int):
        try:
            admin_id = await self._require_admin()
            with get_sync_session() as session:
                _admin_service().delete_post(session, admin_id, post_id)
                session.commit()
        except AdminError as exc:
            self.error_message = str(exc)
            return
        await self.load_content()

    async def generate_post(self):
        self.error_message = ""
        self.generated_post_id = 0
        self.is_generating = True
        yield
        try:
            await self._require_admin()
            with get_sync_session() as session:
                post = await generate_admin_post(session, self.topic.strip())
                post_id = post.id
                session.commit()
        except AdminError as exc:
            self.error_message = str(exc)
            return
        except ValidationError:
            self.error_message = "The topic must be at least 5 characters."
            return
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_generating = False
        self.generated_post_id = post_id
        self.topic = ""
