"""Recipe generator state: generate, save, publish and the cooking assistant chat."""

import logging

from pydantic import BaseModel, ValidationError

from chefai.services import flows
from chefai.services.community_service import CommunityError, CommunityService
from chefai.services.genai_client import FlowError
from chefai.services.recipe_service import RecipeService, RecipeServiceError
from chefai.ui.state.base_state import BaseState, get_sync_session, parse_int
from chefai.ui.state.recipes_state import RecipeItem, recipe_item, to_recipe

_log = logging.getLogger(__name__)


class ChatItem(BaseModel):
    role: str = "user"
    content: str = ""


class GeneratorState(BaseState):
    form_ingredients: str = ""
    form_servings: str = "2"
    form_cuisine: str = ""

    recipe: RecipeItem = RecipeItem()
    has_recipe: bool = False
    is_generating: bool = False
    recipe_saved: bool = False
    recipe_published: bool = False

    chat_history: list[ChatItem] = []
    chat_input: str = ""
    is_answering: bool = False

    def set_form_ingredients(self, value: str):
        self.form_ingredients = value

    def set_form_servings(self, value: str):
        self.form_servings = value

    def set_form_cuisine(self, value: str):
        self.form_cuisine = value

    def set_chat_input(self, value: str):
        self.chat_input = value

    async def generate_recipe(self):
        self.error_message = ""
        language = await self._get_ai_language()
        self.is_generating = True
        yield
        try:
            recipe = await flows.generate_recipe(
                ingredients=self.form_ingredients.strip(),
                servings=parse_int(self.form_servings, 0),
                language=language,
                cuisine=self.form_cuisine.strip() or None,
            )
        except ValidationError:
            self.error_message = "Enter some ingredients and a number of servings."
            return
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_generating = False
        self.recipe = recipe_item(recipe)
        self.has_recipe = True
        self.recipe_saved = False
        self.recipe_published = False
        self.chat_history = []

    async def save_recipe(self):
        if not self.has_recipe:
            return
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                RecipeService().add_recipe(session, user_id, to_recipe(self.recipe))
                session.commit()
        except RecipeServiceError as exc:
            self.error_message = str(exc)
            return
        self.recipe_saved = True

    async def publish_recipe(self):
        if not self.has_recipe:
            return
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                CommunityService().publish_recipe_as_post(
                    session, user_id, to_recipe(self.recipe)
                )
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.recipe_published = True

    def clear_recipe(self):
        self.recipe = RecipeItem()
        self.has_recipe = False
        self.chat_history = []
        self.chat_input = ""

    async def ask_assistant(self):
        query = self.chat_input.strip()
        if not query or not self.has_recipe:
            return
        language = await self._get_ai_language()
        history = [flows.ChatMessage(role=m.role, content=m.content) for m in self.chat_history]
        self.chat_history.append(ChatItem(role="user", content=query))
        self.chat_input = ""
        self.is_answering = True
        yield
        try:
            answer = await flows.cooking_assistant(
                recipe=to_recipe(self.recipe),
                history=history,
                user_query=query,
                language=language,
            )
        except FlowError as exc:
            self.error_message = str(exc)
            return
        finally:
            self.is_answering = False
        self.chat_history.append(ChatItem(role="model", content=answer))
