"""Saved menus state: browse, detail a meal, publish and rebuild the shopping list."""

import reflex as rx
from pydantic import BaseModel, ValidationError

from chefai.i18n.resolver import localize_path
from chefai.services import flows
from chefai.services.community_service import CommunityError, CommunityService
from chefai.services.genai_client import FlowError
from chefai.services.recipe_schemas import MEALS
from chefai.services.recipe_service import MenuService, RecipeService, RecipeServiceError
from chefai.ui.state.base_state import BaseState, get_sync_session
from chefai.ui.state.planner_state import build_shopping_list
from chefai.ui.state.recipes_state import (
    MenuDayItem,
    RecipeItem,
    menu_day_item,
    recipe_item,
    to_plan,
    to_recipe,
)


class SavedMenuItem(BaseModel):
    id: int = 0
    created_at: str = ""
    ingredients: str = ""
    dietary_preferences: str = ""
    number_of_days: int = 0
    number_of_people: int = 0
    days: list[MenuDayItem] = []


class MenusState(BaseState):
    menus: list[SavedMenuItem] = []
    selected_id: int = 0
    is_working: bool = False
    notice: str = ""

    # Meal being expanded into a detailed recipe
    detail_day: int = -1
    detail_meal: str = ""
    detailed_recipe: RecipeItem = RecipeItem()
    has_detailed_recipe: bool = False

    @rx.var
    def selected_menu(self) -> SavedMenuItem:
        for menu in self.menus:
            if menu.id == self.selected_id:
                return menu
        return SavedMenuItem()

    async def load_menus(self):
        user_id = await self._get_user_id()
        svc = MenuService()
        with get_sync_session() as session:
            self.menus = [
                SavedMenuItem(
                    id=m.id,
                    created_at=m.created_at.strftime("%Y-%m-%d") if m.created_at else "",
                    ingredients=m.ingredients or "",
                    dietary_preferences=m.dietary_preferences or "",
                    number_of_days=m.number_of_days,
                    number_of_people=m.number_of_people,
                    days=[menu_day_item(day) for day in svc.to_plan(m)],
                )
                for m in svc.list_menus(session, user_id)
            ]
        if self.selected_id and all(m.id != self.selected_id for m in self.menus):
            self.selected_id = 0
        self.error_message = ""

    def select_menu(self, menu_id: int):
        self.selected_id = 0 if self.selected_id == menu_id else menu_id
        self.close_detail()

    async def delete_menu(self, menu_id: int):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            MenuService().delete_menu(session, user_id, menu_id)
            session.commit()
        await self.load_menus()

    async def publish_menu(self, menu_id: int):
        user_id = await self._get_user_id()
        svc = MenuService()
        try:
            with get_sync_session() as session:
                menu = svc.get_menu(session, user_id, menu_id)
                if menu is None:
                    self.error_message = "Menu not found"
                    return
                CommunityService().publish_menu_as_post(session, user_id, svc.to_plan(menu))
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.notice = "published"

    async def shopping_list_from_menu(self, menu_id: int):
        user_id = await self._get_user_id()
        language = await self._get_ai_language()
        locale = await self._get_locale()
        with get_sync_session() as session:
            menu = MenuService().get_menu(session, user_id, menu_id)
            plan = MenuService.to_plan(menu) if menu is not None else []
        if not plan:
            self.error_message = "Menu not found"
            return
        self.is_working = True
        yield
        try:
            await build_shopping_list(user_id, plan, language)
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_working = False
        yield rx.redirect(localize_path("/shopping-list", locale))

    async def expand_meal(self, day_index: int, meal: str):
        """Expand one meal of the selected menu into a detailed recipe."""
        menu = self.selected_menu
        if meal not in MEALS or not 0 <= day_index < len(menu.days):
            return
        current: RecipeItem = getattr(menu.days[day_index], meal)
        language = await self._get_ai_language()
        self.detail_day = day_index
        self.detail_meal = meal
        self.has_detailed_recipe = False
        self.is_working = True
        yield
        try:
            recipe = await flows.generate_detailed_recipe(
                recipe_name=current.name,
                servings=max(menu.number_of_people, 1),
                language=language,
                context=menu.dietary_preferences or None,
            )
        except ValidationError:
            self.error_message = "This meal has no name to expand."
            return
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_working = False
        self.detailed_recipe = recipe_item(recipe)
        self.has_detailed_recipe = True

    def close_detail(self):
        self.detail_day = -1
        self.detail_meal = ""
        self.detailed_recipe = RecipeItem()
        self.has_detailed_recipe = False

    async def save_detailed_recipe(self):
        if not self.has_detailed_recipe:
            return
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                RecipeService().add_recipe(session, user_id, to_recipe(self.detailed_recipe))
                session.commit()
        except RecipeServiceError as exc:
            self.error_message = str(exc)
            return
        self.notice = "recipe_saved"

    async def replace_meal_with_detail(self):
        """Swap the expanded meal in the saved menu for its detailed recipe."""
        if not self.has_detailed_recipe or self.detail_meal not in MEALS:
            return
        menu = self.selected_menu
        if not 0 <= self.detail_day < len(menu.days):
            return
        days = [day.model_copy(deep=True) for day in menu.days]
        setattr(days[self.detail_day], self.detail_meal, self.detailed_recipe)
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            MenuService().update_menu(session, user_id, menu.id, to_plan(days))
            session.commit()
        self.close_detail()
        self.notice = "menu_updated"
        await self.load_menus()
