"""Public profile state: header, follow button and the user's posts."""

from pydantic import BaseModel

from chefai.models.user import ProfileType
from chefai.services.community_service import CommunityError, CommunityService
from chefai.ui.state.base_state import BaseState, get_sync_session, parse_int
from chefai.ui.state.community_state import CommunityState, UserCard


class ProfileItem(BaseModel):
    id: int = 0
    name: str = ""
    username: str = ""
    bio: str = ""
    photo_url: str = ""
    is_private: bool = False
    followers_count: int = 0
    following_count: int = 0
    posts_count: int = 0


class ProfileState(BaseState):
    profile: ProfileItem = ProfileItem()
    not_found: bool = False
    is_own: bool = False
    is_following: bool = False
    # Private profiles only show posts to the owner and followers
    can_view_posts: bool = True
    followers: list[UserCard] = []
    following: list[UserCard] = []

    async def load_profile(self):
        viewer_id = await self._get_user_id()
        profile_id = parse_int(self.router.page.params.get("profile_id", ""), 0)
        svc = CommunityService()
        with get_sync_session() as session:
            data = svc.get_profile(session, profile_id) if profile_id else None
            if data is None:
                self.not_found = True
                self.profile = ProfileItem()
                return CommunityState.clear_posts
            user = data.user
            self.not_found = False
            self.profile = ProfileItem(
                id=user.id,
                name=user.name,
                username=user.username,
                bio=user.bio or "",
                photo_url=user.photo_url or "",
                is_private=user.profile_type == ProfileType.PRIVATE,
                followers_count=data.followers_count,
                following_count=data.following_count,
                posts_count=data.posts_count,
            )
            self.is_own = user.id == viewer_id
            self.is_following = svc.is_following(session, viewer_id, user.id)
            self.followers = [
                UserCard(id=u.id, name=u.name, username=u.username, photo_url=u.photo_url or "")
                for u in svc.list_followers(session, user.id)
            ]
            self.following = [
                UserCard(id=u.id, name=u.name, username=u.username, photo_url=u.photo_url or "")
                for u in svc.list_following(session, user.id)
            ]
        self.can_view_posts = not self.profile.is_private or self.is_own or self.is_following
        if self.can_view_posts:
            return CommunityState.load_user_posts(self.profile.id)
        return CommunityState.clear_posts

    async def toggle_follow(self):
        viewer_id = await self._get_user_id()
        svc = CommunityService()
        try:
            with get_sync_session() as session:
                if self.is_following:
                    svc.unfollow(session, viewer_id, self.profile.id)
                else:
                    svc.follow(session, viewer_id, self.profile.id)
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        return ProfileState.load_profile
