"""Community feed: posts, comments, likes, follows and saved posts."""

from dataclasses import dataclass

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from chefai.models.post import Comment, Post, PostLike, PostType, SavedPost
from chefai.models.user import Follow, ProfileType, User
from chefai.services.recipe_schemas import DailyMealPlan, Recipe

MAX_POST_LENGTH = 5000
MAX_COMMENT_LENGTH = 1000


class CommunityError(ValueError):
    pass


@dataclass
class ProfileData:
    user: User
    followers_count: int
    following_count: int
    posts_count: int


class CommunityService:
    # -- Posts --

    def create_post(
        self,
        session: Session,
        publisher_id: int,
        content: str,
        post_type: PostType = PostType.TEXT,
        recipe: Recipe | None = None,
        weekly_meal_plan: list[DailyMealPlan] | None = None,
        media_url: str | None = None,
    ) -> Post:
        publisher = session.get(User, publisher_id)
        if publisher is None:
            raise CommunityError("User profile not found")
        content = (content or "").strip()
        if post_type == PostType.TEXT and not content:
            raise CommunityError("Post content is required")
        if len(content) > MAX_POST_LENGTH:
            raise CommunityError(f"Post content exceeds {MAX_POST_LENGTH} characters")
        if post_type == PostType.RECIPE and recipe is None:
            raise CommunityError("A recipe post needs a recipe")
        if post_type == PostType.MENU and not weekly_meal_plan:
            raise CommunityError("A menu post needs a meal plan")

        post = Post(
            publisher_id=publisher_id,
            type=post_type,
            profile_type=publisher.profile_type,
            content=content,
            media_url=media_url or None,
            recipe=recipe.model_dump() if recipe is not None else None,
            weekly_meal_plan=(
                [day.model_dump() for day in weekly_meal_plan] if weekly_meal_plan else None
            ),
        )
        session.add(post)
        session.flush()
        return post

    def publish_recipe_as_post(
        self, session: Session, publisher_id: int, recipe: Recipe, content: str = ""
    ) -> Post:
        return self.create_post(
            session,
            publisher_id,
            content or recipe.name,
            post_type=PostType.RECIPE,
            recipe=recipe,
        )

    def publish_menu_as_post(
        self,
        session: Session,
        publisher_id: int,
        weekly_meal_plan: list[DailyMealPlan],
        content: str = "",
    ) -> Post:
        return self.create_post(
            session,
            publisher_id,
            content,
            post_type=PostType.MENU,
            weekly_meal_plan=weekly_meal_plan,
        )

    def get_post(self, session: Session, post_id: int) -> Post | None:
        return session.get(Post, post_id)

    def update_post(
        self, session: Session, post_id: int, user_id: int, content: str
    ) -> Post | None:
        post = self.get_post(session, post_id)
        if post is None:
            return None
        if post.publisher_id != user_id:
            raise CommunityError("Only the publisher can edit this post")
        content = (content or "").strip()
        if post.type == PostType.TEXT and not content:
            raise CommunityError("Post content is required")
        if len(content) > MAX_POST_LENGTH:
            raise CommunityError(f"Post content exceeds {MAX_POST_LENGTH} characters")
        post.content = content
        session.flush()
        return post

    def delete_post(
        self, session: Session, post_id: int, user_id: int, is_admin: bool = False
    ) -> bool:
        post = self.get_post(session, post_id)
        if post is None:
            return False
        if post.publisher_id != user_id and not is_admin:
            raise CommunityError("Only the publisher can delete this post")
        for model in (Comment, PostLike, SavedPost):
            session.execute(delete(model).where(model.post_id == post_id))
        session.delete(post)
        session.flush()
        return True

    def list_public_feed(self, session: Session, limit: int = 50) -> list[Post]:
        stmt = (
            select(Post)
            .where(Post.profile_type == ProfileType.PUBLIC)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
        )
        return list(session.execute(stmt).scalars().all())

    def list_all_posts(self, session: Session) -> list[Post]:
        stmt = select(Post).order_by(Post.created_at.desc(), Post.id.desc())
        return list(session.execute(stmt).scalars().all())

    def list_user_posts(self, session: Session, user_id: int) -> list[Post]:
        stmt = (
            select(Post)
            .where(Post.publisher_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(session.execute(stmt).scalars().all())

    def list_following_feed(self, session: Session, user_id: int, limit: int = 50) -> list[Post]:
        followed = select(Follow.followed_id).where(Follow.follower_id == user_id)
        stmt = (
            select(Post)
            .where(Post.publisher_id.in_(followed))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
        )
        return list(session.execute(stmt).scalars().all())

    # -- Comments --

    def add_comment(self, session: Session, post_id: int, user_id: int, text: str) -> Comment:
        post = self.get_post(session, post_id)
        if post is None:
            raise CommunityError("Post not found")
        text = (text or "").strip()
        if not text:
            raise CommunityError("Comment cannot be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            raise CommunityError(f"Comment exceeds {MAX_COMMENT_LENGTH} characters")
        comment = Comment(post_id=post_id, user_id=user_id, text=text)
        session.add(comment)
        post.comments_count += 1
        session.flush()
        return comment

    def list_comments(self, session: Session, post_id: int) -> list[Comment]:
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return list(session.execute(stmt).scalars().all())

    # -- Likes --

    def _get_like(self, session: Session, post_id: int, user_id: int) -> PostLike | None:
        stmt = select(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id)
        return session.execute(stmt).scalar_one_or_none()

    def is_liked(self, session: Session, post_id: int, user_id: int) -> bool:
        return self._get_like(session, post_id, user_id) is not None

    def toggle_like(self, session: Session, post_id: int, user_id: int) -> bool:
        """Like or unlike ``post_id``; returns the new liked state."""
        post = self.get_post(session, post_id)
        if post is None:
            raise CommunityError("Post not found")
        like = self._get_like(session, post_id, user_id)
        if like is not None:
            session.delete(like)
            post.likes_count = max(post.likes_count - 1, 0)
            liked = False
        else:
            session.add(PostLike(post_id=post_id, user_id=user_id))
            post.likes_count += 1
            liked = True
        session.flush()
        return liked

    # -- Follows --

    def _get_follow(self, session: Session, follower_id: int, followed_id: int) -> Follow | None:
        stmt = select(Follow).where(
            Follow.follower_id == follower_id,
            Follow.followed_id == followed_id,
        )
        return session.execute(stmt).scalar_one_or_none()

    def follow(self, session: Session, follower_id: int, followed_id: int) -> Follow:
        if follower_id == followed_id:
            raise CommunityError("You cannot follow yourself")
        if session.get(User, followed_id) is None:
            raise CommunityError("User not found")
        existing = self._get_follow(session, follower_id, followed_id)
        if existing is not None:
            return existing
        follow = Follow(follower_id=follower_id, followed_id=followed_id)
        session.add(follow)
        session.flush()
        return follow

    def unfollow(self, session: Session, follower_id: int, followed_id: int) -> bool:
        follow = self._get_follow(session, follower_id, followed_id)
        if follow is None:
            return False
        session.delete(follow)
        session.flush()
        return True

    def is_following(self, session: Session, follower_id: int, followed_id: int) -> bool:
        return self._get_follow(session, follower_id, followed_id) is not None

    def list_followers(self, session: Session, user_id: int) -> list[User]:
        stmt = (
            select(User)
            .join(Follow, Follow.follower_id == User.id)
            .where(Follow.followed_id == user_id)
            .order_by(User.username)
        )
        return list(session.execute(stmt).scalars().all())

    def list_following(self, session: Session, user_id: int) -> list[User]:
        stmt = (
            select(User)
            .join(Follow, Follow.followed_id == User.id)
            .where(Follow.follower_id == user_id)
            .order_by(User.username)
        )
        return list(session.execute(stmt).scalars().all())

    def get_profile(self, session: Session, user_id: int) -> ProfileData | None:
        user = session.get(User, user_id)
        if user is None:
            return None

        def count(stmt) -> int:
            return session.execute(stmt).scalar_one()

        return ProfileData(
            user=user,
            followers_count=count(
                select(func.count()).select_from(Follow).where(Follow.followed_id == user_id)
            ),
            following_count=count(
                select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
            ),
            posts_count=count(
                select(func.count()).select_from(Post).where(Post.publisher_id == user_id)
            ),
        )

    # -- Saved posts --

    def _get_saved(self, session: Session, user_id: int, post_id: int) -> SavedPost | None:
        stmt = select(SavedPost).where(SavedPost.user_id == user_id, SavedPost.post_id == post_id)
        return session.execute(stmt).scalar_one_or_none()

    def save_post(self, session: Session, user_id: int, post_id: int) -> SavedPost:
        if self.get_post(session, post_id) is None:
            raise CommunityError("Post not found")
        existing = self._get_saved(session, user_id, post_id)
        if existing is not None:
            return existing
        saved = SavedPost(user_id=user_id, post_id=post_id)
        session.add(saved)
        session.flush()
        return saved

    def unsave_post(self, session: Session, user_id: int, post_id: int) -> bool:
        saved = self._get_saved(session, user_id, post_id)
        if saved is None:
            return False
        session.delete(saved)
        session.flush()
        return True

    def is_saved(self, session: Session, user_id: int, post_id: int) -> bool:
        return self._get_saved(session, user_id, post_id) is not None

    def list_saved_posts(self, session: Session, user_id: int) -> list[Post]:
        stmt = (
            select(Post)
            .join(SavedPost, SavedPost.post_id == Post.id)
            .where(SavedPost.user_id == user_id)
            .order_by(SavedPost.created_at.desc(), SavedPost.id.desc())
        )
        return list(session.execute(stmt).scalars().all())
