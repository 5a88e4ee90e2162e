"""Generative flows: recipes, weekly plans, shopping lists and the cooking assistant.

Each flow validates its input with a pydantic model, renders one prompt and
sends a single request through :class:`GenerativeClient`. Invalid input raises
``pydantic.ValidationError`` before anything is sent; provider failures raise
:class:`FlowError`.
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, PositiveInt
from sqlalchemy import select
from sqlalchemy.orm import Session

from chefai.config import settings
from chefai.i18n import DEFAULT_LOCALE, REGISTRY
from chefai.models.post import Post
from chefai.models.user import User
from chefai.services import prompts
from chefai.services.community_service import CommunityService
from chefai.services.genai_client import FlowError, GenerativeClient
from chefai.services.recipe_schemas import Recipe, ShoppingList, WeeklyMealPlan

_log = logging.getLogger(__name__)

ADMIN_POST_SERVINGS = 4


class GenerateRecipeInput(BaseModel):
    ingredients: str = Field(min_length=1)
    servings: PositiveInt
    language: str = Field(min_length=1)
    cuisine: str | None = None


class GenerateDetailedRecipeInput(BaseModel):
    recipe_name: str = Field(min_length=1)
    servings: PositiveInt
    language: str = Field(min_length=1)
    context: str | None = None


class WeeklyMealPlanInput(BaseModel):
    ingredients: str = Field(min_length=1)
    dietary_preferences: str | None = None
    number_of_days: int = Field(ge=1, le=7)
    number_of_people: int = Field(ge=1)
    cuisine: str | None = None
    language: str = Field(min_length=1)


class ShoppingListInput(BaseModel):
    all_ingredients: str = Field(min_length=1)
    language: str = Field(min_length=1)


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    content: str


class CookingAssistantInput(BaseModel):
    recipe: Recipe
    history: list[ChatMessage] = []
    user_query: str = Field(min_length=1)
    language: str = Field(min_length=1)


class AdminPostInput(BaseModel):
    topic: str = Field(min_length=5)


def _client(client: GenerativeClient | None) -> GenerativeClient:
    return client if client is not None else GenerativeClient()


def _bullets(lines: list[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


async def generate_recipe(
    ingredients: str,
    servings: int,
    language: str,
    cuisine: str | None = None,
    client: GenerativeClient | None = None,
) -> Recipe:
    params = GenerateRecipeInput(
        ingredients=ingredients, servings=servings, language=language, cuisine=cuisine
    )
    prompt = prompts.GENERATE_RECIPE.format(
        ingredients=params.ingredients,
        servings=params.servings,
        cuisine_line=f"- Cuisine type: {params.cuisine}\n" if params.cuisine else "",
        format=prompts.RECIPE_FORMAT,
        language=params.language,
    )
    return await _client(client).generate_structured(
        "generate-recipe", prompt, Recipe, temperature=1.0
    )


async def generate_detailed_recipe(
    recipe_name: str,
    servings: int,
    language: str,
    context: str | None = None,
    client: GenerativeClient | None = None,
) -> Recipe:
    params = GenerateDetailedRecipeInput(
        recipe_name=recipe_name, servings=servings, language=language, context=context
    )
    prompt = prompts.GENERATE_DETAILED_RECIPE.format(
        recipe_name=params.recipe_name,
        servings=params.servings,
        context_line=f"User context: {params.context}\n" if params.context else "",
        format=prompts.RECIPE_FORMAT,
        language=params.language,
    )
    return await _client(client).generate_structured(
        "generate-detailed-recipe", prompt, Recipe, temperature=0.8, safety=False
    )


async def create_weekly_meal_plan(
    ingredients: str,
    number_of_days: int,
    number_of_people: int,
    language: str,
    dietary_preferences: str | None = None,
    cuisine: str | None = None,
    client: GenerativeClient | None = None,
) -> WeeklyMealPlan:
    params = WeeklyMealPlanInput(
        ingredients=ingredients,
        dietary_preferences=dietary_preferences,
        number_of_days=number_of_days,
        number_of_people=number_of_people,
        cuisine=cuisine,
        language=language,
    )
    prompt = prompts.WEEKLY_MEAL_PLAN.format(
        ingredients=params.ingredients,
        dietary_preferences=params.dietary_preferences or "None",
        cuisine=params.cuisine or "Varied",
        number_of_days=params.number_of_days,
        number_of_people=params.number_of_people,
        language=params.language,
    )
    plan = await _client(client).generate_structured(
        "create-weekly-meal-plan", prompt, WeeklyMealPlan, temperature=1.0
    )
    if not plan.weekly_meal_plan:
        raise FlowError("The AI returned an empty meal plan. Please try again.")
    return plan


async def generate_shopping_list(
    all_ingredients: str, language: str, client: GenerativeClient | None = None
) -> ShoppingList:
    params = ShoppingListInput(all_ingredients=all_ingredients, language=language)
    prompt = prompts.SHOPPING_LIST.format(
        all_ingredients=params.all_ingredients, language=params.language
    )
    return await _client(client).generate_structured(
        "generate-shopping-list", prompt, ShoppingList
    )


async def cooking_assistant(
    recipe: Recipe,
    history: list[ChatMessage],
    user_query: str,
    language: str,
    client: GenerativeClient | None = None,
) -> str:
    params = CookingAssistantInput(
        recipe=recipe, history=history, user_query=user_query, language=language
    )
    prompt = prompts.COOKING_ASSISTANT.format(
        recipe_name=params.recipe.name,
        ingredients=_bullets(params.recipe.ingredients),
        instructions=_bullets(params.recipe.instructions),
        history="\n".join(f"{m.role}: {m.content}" for m in params.history) or "(none)",
        user_query=params.user_query,
        language=params.language,
    )
    return await _client(client).generate_text("cooking-assistant", prompt, temperature=0.7)


async def generate_admin_post(
    session: Session,
    topic: str,
    client: GenerativeClient | None = None,
    community: CommunityService | None = None,
) -> Post:
    """Generate a recipe about ``topic`` and publish it as the official account."""
    params = AdminPostInput(topic=topic)
    official = session.execute(
        select(User).where(User.email == settings.official_account_email)
    ).scalar_one_or_none()
    if official is None:
        raise FlowError(
            f"Official account {settings.official_account_email} not found. "
            "Create it before generating posts."
        )

    recipe = await generate_recipe(
        ingredients=params.topic,
        servings=ADMIN_POST_SERVINGS,
        language=REGISTRY.ai_language(DEFAULT_LOCALE),
        client=client,
    )
    post = (community or CommunityService()).publish_recipe_as_post(
        session, official.id, recipe
    )
    _log.info("Published generated post %s for topic %r", post.id, params.topic)
    return post
