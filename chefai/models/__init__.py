from chefai.models.base import Base, TimestampMixin
from chefai.models.post import Comment, Post, PostLike, PostType, SavedPost
from chefai.models.preference import UserPreference
from chefai.models.recipe import SavedMenu, SavedRecipe
from chefai.models.shopping_list import ShoppingListItem
from chefai.models.user import Follow, ProfileType, SubscriptionTier, User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Follow",
    "ProfileType",
    "SubscriptionTier",
    "SavedRecipe",
    "SavedMenu",
    "Post",
    "PostType",
    "Comment",
    "PostLike",
    "SavedPost",
    "ShoppingListItem",
    "UserPreference",
]
