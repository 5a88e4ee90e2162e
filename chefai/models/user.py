import enum

from sqlalchemy import BigInteger, Boolean, Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chefai.models.base import Base, TimestampMixin


class ProfileType(enum.StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"


class SubscriptionTier(enum.StrEnum):
    PRO = "pro"
    VOICE_PLUS = "voice+"
    LIFETIME = "lifetime"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    photo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_premium: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    subscription_tier: Mapped[SubscriptionTier | None] = mapped_column(
        Enum(SubscriptionTier, native_enum=False, length=20), nullable=True
    )
    profile_type: Mapped[ProfileType] = mapped_column(
        Enum(ProfileType, native_enum=False, length=20),
        default=ProfileType.PUBLIC,
        nullable=False,
    )
    can_monetize: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    stripe_connect_account_id: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Follow(Base, TimestampMixin):
    __tablename__ = "follows"
    __table_args__ = (UniqueConstraint("follower_id", "followed_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    follower_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id"), nullable=False)
    followed_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id"), nullable=False)
