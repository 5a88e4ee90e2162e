"""Tests for the database models."""

from datetime import datetime

from chefai.models.base import Base


def _columns(table_name: str) -> dict:
    table = Base.metadata.tables[table_name]
    return {c.name: c for c in table.columns}


def _has_fk_to(table_name: str, col_name: str, target_table: str) -> bool:
    col = _columns(table_name)[col_name]
    return any(fk.column.table.name == target_table for fk in col.foreign_keys)


def _unique_sets(table_name: str) -> list[set[str]]:
    table = Base.metadata.tables[table_name]
    return [
        {c.name for c in constraint.columns}
        for constraint in table.constraints
        if constraint.__class__.__name__ == "UniqueConstraint"
    ]


class TestTables:
    def test_all_tables_registered(self):
        expected = {
            "users",
            "follows",
            "saved_recipes",
            "saved_menus",
            "posts",
            "comments",
            "post_likes",
            "saved_posts",
            "shopping_list_items",
            "user_preferences",
        }
        assert expected <= set(Base.metadata.tables)

    def test_timestamps_on_every_table(self):
        for name in Base.metadata.tables:
            cols = _columns(name)
            assert "created_at" in cols, name
            assert "updated_at" in cols, name


# ===========================================================================
# User
# ===========================================================================
class TestUser:
    def test_email_and_username_unique(self):
        cols = _columns("users")
        assert cols["email"].unique
        assert cols["username"].unique

    def test_create_user_defaults(self, db_session):
        from chefai.models.user import ProfileType, User

        user = User(email="a@example.com", password_hash="x", name="Ana", username="ana")
        db_session.add(user)
        db_session.flush()

        assert isinstance(user.id, int)
        assert user.is_active is True
        assert user.is_admin is False
        assert user.is_premium is False
        assert user.subscription_tier is None
        assert user.profile_type == ProfileType.PUBLIC
        assert user.stripe_connect_account_id is None
        assert isinstance(user.created_at, datetime)

    def test_subscription_tier_values(self):
        from chefai.models.user import SubscriptionTier

        assert [t.value for t in SubscriptionTier] == ["pro", "voice+", "lifetime"]


class TestFollow:
    def test_fks(self):
        assert _has_fk_to("follows", "follower_id", "users")
        assert _has_fk_to("follows", "followed_id", "users")

    def test_unique_pair(self):
        assert {"follower_id", "followed_id"} in _unique_sets("follows")


# ===========================================================================
# Recipes and menus
# ===========================================================================
class TestSavedRecipe:
    def test_fk_to_user(self):
        assert _has_fk_to("saved_recipes", "user_id", "users")

    def test_json_roundtrip(self, db_session, make_user):
        from chefai.models.recipe import SavedRecipe

        user = make_user()
        saved = SavedRecipe(user_id=user.id, name="Soup", data={"name": "Soup", "ingredients": []})
        db_session.add(saved)
        db_session.flush()
        db_session.expire(saved)
        assert saved.data["name"] == "Soup"


class TestSavedMenu:
    def test_defaults(self, db_session, make_user):
        from chefai.models.recipe import SavedMenu

        user = make_user()
        menu = SavedMenu(user_id=user.id, weekly_meal_plan=[{"day": "Day 1"}])
        db_session.add(menu)
        db_session.flush()
        assert menu.number_of_days == 7
        assert menu.number_of_people == 2
        assert menu.ingredients == ""


# ===========================================================================
# Community
# ===========================================================================
class TestPost:
    def test_fk_to_publisher(self):
        assert _has_fk_to("posts", "publisher_id", "users")

    def test_counters_default_to_zero(self, db_session, make_user):
        from chefai.models.post import Post, PostType

        user = make_user()
        post = Post(publisher_id=user.id, type=PostType.TEXT, content="hi")
        db_session.add(post)
        db_session.flush()
        assert post.likes_count == 0
        assert post.comments_count == 0
        assert post.recipe is None


class TestPostRelations:
    def test_comment_fks(self):
        assert _has_fk_to("comments", "post_id", "posts")
        assert _has_fk_to("comments", "user_id", "users")

    def test_like_unique(self):
        assert {"post_id", "user_id"} in _unique_sets("post_likes")

    def test_saved_unique(self):
        assert {"user_id", "post_id"} in _unique_sets("saved_posts")


class TestShoppingListItem:
    def test_defaults(self, db_session, make_user):
        from chefai.models.shopping_list import ShoppingListItem

        user = make_user()
        item = ShoppingListItem(user_id=user.id, category="Dairy", name="Milk")
        db_session.add(item)
        db_session.flush()
        assert item.checked is False
        assert item.position == 0


class TestUserPreference:
    def test_unique_key_per_user(self):
        assert {"user_id", "key"} in _unique_sets("user_preferences")
