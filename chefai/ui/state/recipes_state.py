"""Saved recipes state, plus the recipe and meal-plan view models shared by other pages."""

import logging

import reflex as rx
from pydantic import BaseModel

from chefai.services.community_service import CommunityError, CommunityService
from chefai.services.recipe_schemas import (
    DailyMealPlan,
    NutritionalInfo,
    Recipe,
    normalize_recipe,
)
from chefai.services.recipe_service import RecipeService
from chefai.ui.state.base_state import BaseState, get_sync_session

_log = logging.getLogger(__name__)


class RecipeItem(BaseModel):
    name: str = ""
    ingredients: list[str] = []
    instructions: list[str] = []
    equipment: list[str] = []
    benefits: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fats: str = ""
    has_nutrition: bool = False


class MenuDayItem(BaseModel):
    day: str = ""
    breakfast: RecipeItem = RecipeItem()
    lunch: RecipeItem = RecipeItem()
    main_course: RecipeItem = RecipeItem()
    dinner: RecipeItem = RecipeItem()


class SavedRecipeItem(BaseModel):
    id: int = 0
    created_at: str = ""
    recipe: RecipeItem = RecipeItem()


def recipe_item(recipe: Recipe) -> RecipeItem:
    table = recipe.nutritional_table
    return RecipeItem(
        name=recipe.name,
        ingredients=list(recipe.ingredients),
        instructions=list(recipe.instructions),
        equipment=list(recipe.equipment),
        benefits=recipe.benefits or "",
        calories=table.calories if table else "",
        protein=table.protein if table else "",
        carbs=table.carbs if table else "",
        fats=table.fats if table else "",
        has_nutrition=table is not None,
    )


def to_recipe(item: RecipeItem) -> Recipe:
    nutrition = None
    if item.has_nutrition:
        nutrition = NutritionalInfo(
            calories=item.calories, protein=item.protein, carbs=item.carbs, fats=item.fats
        )
    return Recipe(
        name=item.name,
        ingredients=item.ingredients,
        instructions=item.instructions,
        equipment=item.equipment,
        benefits=item.benefits or None,
        nutritional_table=nutrition,
    )


def menu_day_item(day: DailyMealPlan) -> MenuDayItem:
    return MenuDayItem(
        day=day.day,
        breakfast=recipe_item(day.breakfast),
        lunch=recipe_item(day.lunch),
        main_course=recipe_item(day.main_course),
        dinner=recipe_item(day.dinner),
    )


def to_plan(days: list[MenuDayItem]) -> list[DailyMealPlan]:
    return [
        DailyMealPlan(
            day=d.day,
            breakfast=to_recipe(d.breakfast),
            lunch=to_recipe(d.lunch),
            main_course=to_recipe(d.main_course),
            dinner=to_recipe(d.dinner),
        )
        for d in days
    ]


class RecipesState(BaseState):
    recipes: list[SavedRecipeItem] = []
    expanded_id: int = 0
    published_id: int = 0

    async def load_recipes(self):
        user_id = await self._get_user_id()
        svc = RecipeService()
        with get_sync_session() as session:
            self.recipes = [
                SavedRecipeItem(
                    id=r.id,
                    created_at=r.created_at.strftime("%Y-%m-%d") if r.created_at else "",
                    recipe=recipe_item(normalize_recipe(r.data)),
                )
                for r in svc.list_recipes(session, user_id)
            ]
        self.error_message = ""

    def toggle_expanded(self, recipe_id: int):
        self.expanded_id = 0 if self.expanded_id == recipe_id else recipe_id

    async def delete_recipe(self, recipe_id: int):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            RecipeService().delete_recipe(session, user_id, recipe_id)
            session.commit()
        await self.load_recipes()

    async def publish_recipe(self, recipe_id: int):
        user_id = await self._get_user_id()
        svc = RecipeService()
        try:
            with get_sync_session() as session:
                saved = svc.get_recipe(session, user_id, recipe_id)
                if saved is None:
                    self.error_message = "Recipe not found"
                    return
                CommunityService().publish_recipe_as_post(
                    session, user_id, svc.to_recipe(saved)
                )
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.published_id = recipe_id
        self.error_message = ""

    @rx.var
    def has_recipes(self) -> bool:
        return len(self.recipes) > 0
