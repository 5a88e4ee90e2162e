from sqlalchemy import JSON, BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chefai.models.base import Base, TimestampMixin


class SavedRecipe(Base, TimestampMixin):
    __tablename__ = "saved_recipes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)


class SavedMenu(Base, TimestampMixin):
    __tablename__ = "saved_menus"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id"), nullable=False, index=True
    )
    weekly_meal_plan: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    ingredients: Mapped[str] = mapped_column(Text, nullable=False, default="")
    dietary_preferences: Mapped[str] = mapped_column(Text, nullable=False, default="")
    number_of_days: Mapped[int] = mapped_column(Integer, nullable=False, default=7)
    number_of_people: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
