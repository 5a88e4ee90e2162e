"""Weekly planner state: generate a plan, save it as a menu, build a shopping list."""

import reflex as rx
from pydantic import ValidationError

from chefai.i18n.resolver import localize_path
from chefai.services import flows
from chefai.services.community_service import CommunityError, CommunityService
from chefai.services.genai_client import FlowError
from chefai.services.recipe_service import MenuService, RecipeServiceError
from chefai.services.shopping_list_service import ShoppingListService, all_ingredients_from_plan
from chefai.ui.state.base_state import BaseState, get_sync_session, parse_int
from chefai.ui.state.recipes_state import MenuDayItem, menu_day_item, to_plan

DAY_OPTIONS = [str(n) for n in range(1, 8)]


async def build_shopping_list(user_id: int, plan, language: str) -> None:
    """Generate a categorized list from ``plan`` and make it the user's shopping list."""
    shopping = await flows.generate_shopping_list(all_ingredients_from_plan(plan), language)
    with get_sync_session() as session:
        ShoppingListService().replace_list(session, user_id, shopping.shopping_list)
        session.commit()


class PlannerState(BaseState):
    form_ingredients: str = ""
    form_dietary: str = ""
    form_cuisine: str = ""
    form_days: str = "7"
    form_people: str = "2"

    plan: list[MenuDayItem] = []
    is_generating: bool = False
    is_building_list: bool = False
    menu_saved: bool = False
    menu_published: bool = False

    def set_form_ingredients(self, value: str):
        self.form_ingredients = value

    def set_form_dietary(self, value: str):
        self.form_dietary = value

    def set_form_cuisine(self, value: str):
        self.form_cuisine = value

    def set_form_days(self, value: str):
        self.form_days = value

    def set_form_people(self, value: str):
        self.form_people = value

    @rx.var
    def has_plan(self) -> bool:
        return len(self.plan) > 0

    async def generate_plan(self):
        self.error_message = ""
        language = await self._get_ai_language()
        self.is_generating = True
        yield
        try:
            result = await flows.create_weekly_meal_plan(
                ingredients=self.form_ingredients.strip(),
                number_of_days=parse_int(self.form_days, 0),
                number_of_people=parse_int(self.form_people, 0),
                language=language,
                dietary_preferences=self.form_dietary.strip() or None,
                cuisine=self.form_cuisine.strip() or None,
            )
        except ValidationError:
            self.error_message = "Enter some ingredients, 1 to 7 days and at least one person."
            return
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_generating = False
        self.plan = [menu_day_item(day) for day in result.weekly_meal_plan]
        self.menu_saved = False
        self.menu_published = False

    async def save_menu(self):
        if not self.plan:
            return
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                MenuService().add_menu(
                    session,
                    user_id,
                    to_plan(self.plan),
                    ingredients=self.form_ingredients.strip(),
                    dietary_preferences=self.form_dietary.strip(),
                    number_of_days=parse_int(self.form_days, len(self.plan)),
                    number_of_people=parse_int(self.form_people, 1),
                )
                session.commit()
        except RecipeServiceError as exc:
            self.error_message = str(exc)
            return
        self.menu_saved = True

    async def publish_menu(self):
        if not self.plan:
            return
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                CommunityService().publish_menu_as_post(session, user_id, to_plan(self.plan))
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.menu_published = True

    async def create_shopping_list(self):
        if not self.plan:
            return
        user_id = await self._get_user_id()
        language = await self._get_ai_language()
        locale = await self._get_locale()
        self.is_building_list = True
        yield
        try:
            await build_shopping_list(user_id, to_plan(self.plan), language)
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_building_list = False
        yield rx.redirect(localize_path("/shopping-list", locale))
