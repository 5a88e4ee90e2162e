"""Saved recipes and weekly menus, per-user CRUD."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from chefai.models.recipe import SavedMenu, SavedRecipe
from chefai.services.recipe_schemas import (
    DailyMealPlan,
    Recipe,
    normalize_plan,
    normalize_recipe,
)


class RecipeServiceError(ValueError):
    pass


class RecipeService:
    def add_recipe(self, session: Session, user_id: int, recipe: Recipe) -> SavedRecipe:
        if not recipe.name.strip():
            raise RecipeServiceError("Recipe name is required")
        saved = SavedRecipe(
            user_id=user_id,
            name=recipe.name.strip(),
            data=recipe.model_dump(),
        )
        session.add(saved)
        session.flush()
        return saved

    def list_recipes(self, session: Session, user_id: int) -> list[SavedRecipe]:
        stmt = (
            select(SavedRecipe)
            .where(SavedRecipe.user_id == user_id)
            .order_by(SavedRecipe.created_at.desc(), SavedRecipe.id.desc())
        )
        return list(session.execute(stmt).scalars().all())

    def get_recipe(self, session: Session, user_id: int, recipe_id: int) -> SavedRecipe | None:
        stmt = select(SavedRecipe).where(
            SavedRecipe.id == recipe_id,
            SavedRecipe.user_id == user_id,
        )
        return session.execute(stmt).scalar_one_or_none()

    def delete_recipe(self, session: Session, user_id: int, recipe_id: int) -> bool:
        saved = self.get_recipe(session, user_id, recipe_id)
        if saved is None:
            return False
        session.delete(saved)
        session.flush()
        return True

    @staticmethod
    def to_recipe(saved: SavedRecipe) -> Recipe:
        return normalize_recipe(saved.data)


class MenuService:
    def add_menu(
        self,
        session: Session,
        user_id: int,
        weekly_meal_plan: list[DailyMealPlan],
        ingredients: str = "",
        dietary_preferences: str = "",
        number_of_days: int = 7,
        number_of_people: int = 2,
    ) -> SavedMenu:
        if not weekly_meal_plan:
            raise RecipeServiceError("A menu needs at least one day")
        menu = SavedMenu(
            user_id=user_id,
            weekly_meal_plan=[day.model_dump() for day in weekly_meal_plan],
            ingredients=ingredients,
            dietary_preferences=dietary_preferences,
            number_of_days=number_of_days,
            number_of_people=number_of_people,
        )
        session.add(menu)
        session.flush()
        return menu

    def list_menus(self, session: Session, user_id: int) -> list[SavedMenu]:
        stmt = (
            select(SavedMenu)
            .where(SavedMenu.user_id == user_id)
            .order_by(SavedMenu.created_at.desc(), SavedMenu.id.desc())
        )
        return list(session.execute(stmt).scalars().all())

    def get_menu(self, session: Session, user_id: int, menu_id: int) -> SavedMenu | None:
        stmt = select(SavedMenu).where(SavedMenu.id == menu_id, SavedMenu.user_id == user_id)
        return session.execute(stmt).scalar_one_or_none()

    def update_menu(
        self,
        session: Session,
        user_id: int,
        menu_id: int,
        weekly_meal_plan: list[DailyMealPlan],
    ) -> SavedMenu | None:
        menu = self.get_menu(session, user_id, menu_id)
        if menu is None:
            return None
        menu.weekly_meal_plan = [day.model_dump() for day in weekly_meal_plan]
        session.flush()
        return menu

    def delete_menu(self, session: Session, user_id: int, menu_id: int) -> bool:
        menu = self.get_menu(session, user_id, menu_id)
        if menu is None:
            return False
        session.delete(menu)
        session.flush()
        return True

    @staticmethod
    def to_plan(menu: SavedMenu) -> list[DailyMealPlan]:
        return normalize_plan(menu.weekly_meal_plan)
