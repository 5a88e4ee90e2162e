"""Tests for the generative flows."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from chefai.models.post import PostType
from chefai.services import flows
from chefai.services.genai_client import FlowError
from chefai.services.recipe_schemas import (
    DailyMealPlan,
    Recipe,
    ShoppingList,
    ShoppingListCategory,
    WeeklyMealPlan,
)


def _recipe(name="Lentil stew") -> Recipe:
    return Recipe(
        name=name,
        ingredients=["200 g lentils", "1 carrot"],
        instructions=["1. Simmer everything."],
        equipment=["Pot"],
    )


def _fake_client(structured=None, text=None):
    client = MagicMock()
    client.generate_structured = AsyncMock(return_value=structured)
    client.generate_text = AsyncMock(return_value=text)
    return client


def _prompt(client, method="generate_structured") -> str:
    return getattr(client, method).call_args.args[1]


class TestGenerateRecipe:
    @pytest.mark.asyncio
    async def test_prompt_and_schema(self):
        client = _fake_client(_recipe())
        result = await flows.generate_recipe(
            "lentils, carrot", 3, "French", cuisine="Moroccan", client=client
        )

        assert result.name == "Lentil stew"
        args = client.generate_structured.call_args.args
        assert args[0] == "generate-recipe"
        assert args[2] is Recipe
        prompt = args[1]
        assert "lentils, carrot" in prompt
        assert "Servings: 3" in prompt
        assert "Cuisine type: Moroccan" in prompt
        assert "French" in prompt

    @pytest.mark.asyncio
    async def test_no_cuisine_line(self):
        client = _fake_client(_recipe())
        await flows.generate_recipe("rice", 2, "Spanish", client=client)
        assert "Cuisine type:" not in _prompt(client)

    @pytest.mark.asyncio
    async def test_invalid_input_sends_nothing(self):
        client = _fake_client(_recipe())
        with pytest.raises(ValidationError):
            await flows.generate_recipe("", 2, "Spanish", client=client)
        with pytest.raises(ValidationError):
            await flows.generate_recipe("rice", 0, "Spanish", client=client)
        client.generate_structured.assert_not_called()


class TestDetailedRecipe:
    @pytest.mark.asyncio
    async def test_safety_off_and_context(self):
        client = _fake_client(_recipe("Paella"))
        await flows.generate_detailed_recipe(
            "Paella", 4, "Spanish", context="Dinner of Day 2", client=client
        )
        call = client.generate_structured.call_args
        assert call.args[0] == "generate-detailed-recipe"
        assert call.kwargs["safety"] is False
        assert "Dinner of Day 2" in call.args[1]


class TestWeeklyMealPlan:
    def _plan(self, days=1):
        return WeeklyMealPlan(
            weekly_meal_plan=[
                DailyMealPlan(
                    day=f"Day {n}",
                    breakfast=_recipe("Oats"),
                    lunch=_recipe("Salad"),
                    main_course=_recipe(),
                    dinner=_recipe("Soup"),
                )
                for n in range(1, days + 1)
            ]
        )

    @pytest.mark.asyncio
    async def test_returns_plan(self):
        client = _fake_client(self._plan(2))
        plan = await flows.create_weekly_meal_plan("eggs, rice", 2, 3, "Italian", client=client)
        assert len(plan.weekly_meal_plan) == 2
        prompt = _prompt(client)
        assert "eggs, rice" in prompt
        assert "Italian" in prompt

    @pytest.mark.asyncio
    async def test_days_bounds(self):
        client = _fake_client(self._plan())
        with pytest.raises(ValidationError):
            await flows.create_weekly_meal_plan("eggs", 8, 2, "English", client=client)
        with pytest.raises(ValidationError):
            await flows.create_weekly_meal_plan("eggs", 3, 0, "English", client=client)

    @pytest.mark.asyncio
    async def test_empty_plan_is_an_error(self):
        client = _fake_client(WeeklyMealPlan(weekly_meal_plan=[]))
        with pytest.raises(FlowError, match="empty meal plan"):
            await flows.create_weekly_meal_plan("eggs", 3, 2, "English", client=client)


class TestShoppingList:
    @pytest.mark.asyncio
    async def test_generate(self):
        shopping = ShoppingList(
            shopping_list=[ShoppingListCategory(category="Dairy", items=["Milk"])]
        )
        client = _fake_client(shopping)
        result = await flows.generate_shopping_list("1 l milk\n2 eggs", "German", client=client)
        assert result is shopping
        assert client.generate_structured.call_args.args[2] is ShoppingList
        assert "1 l milk" in _prompt(client)

    @pytest.mark.asyncio
    async def test_empty_ingredients(self):
        with pytest.raises(ValidationError):
            await flows.generate_shopping_list("", "German", client=_fake_client())


class TestCookingAssistant:
    @pytest.mark.asyncio
    async def test_history_in_prompt(self):
        client = _fake_client(text="Yes, use butter.")
        history = [
            flows.ChatMessage(role="user", content="Can I skip the carrot?"),
            flows.ChatMessage(role="model", content="Sure."),
        ]
        answer = await flows.cooking_assistant(
            _recipe(), history, "Butter instead of oil?", "English", client=client
        )

        assert answer == "Yes, use butter."
        prompt = _prompt(client, "generate_text")
        assert "user: Can I skip the carrot?" in prompt
        assert "model: Sure." in prompt
        assert "- 200 g lentils" in prompt
        assert "Butter instead of oil?" in prompt

    @pytest.mark.asyncio
    async def test_empty_history(self):
        client = _fake_client(text="ok")
        await flows.cooking_assistant(_recipe(), [], "Why?", "English", client=client)
        assert "(none)" in _prompt(client, "generate_text")

    def test_invalid_role(self):
        with pytest.raises(ValidationError):
            flows.ChatMessage(role="system", content="x")


class TestAdminPost:
    @pytest.mark.asyncio
    async def test_publishes_as_official_account(self, db_session, make_user):
        official = make_user(email="chef@chefai.app")
        client = _fake_client(_recipe("Ramen"))

        post = await flows.generate_admin_post(db_session, "Japanese noodle soup", client=client)

        assert post.publisher_id == official.id
        assert post.type == PostType.RECIPE
        assert post.content == "Ramen"
        prompt = _prompt(client)
        assert "Japanese noodle soup" in prompt
        assert "Servings: 4" in prompt
        assert "Spanish" in prompt

    @pytest.mark.asyncio
    async def test_missing_official_account(self, db_session):
        with pytest.raises(FlowError, match="not found"):
            await flows.generate_admin_post(db_session, "Japanese noodle soup", client=_fake_client())

    @pytest.mark.asyncio
    async def test_topic_too_short(self, db_session):
        with pytest.raises(ValidationError):
            await flows.generate_admin_post(db_session, "soup", client=_fake_client())
