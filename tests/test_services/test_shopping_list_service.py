"""Tests for the categorized shopping list."""

import pytest

from chefai.services.recipe_schemas import DailyMealPlan, Recipe, ShoppingListCategory
from chefai.services.shopping_list_service import (
    ShoppingListError,
    ShoppingListService,
    all_ingredients_from_plan,
)


@pytest.fixture
def svc():
    return ShoppingListService()


def _categories():
    return [
        ShoppingListCategory(category="Dairy", items=["Milk", "  ", "Cheese"]),
        ShoppingListCategory(category=" Bakery ", items=["Bread"]),
    ]


class TestReplaceList:
    def test_skips_blank_items_and_orders(self, svc, db_session, make_user):
        user = make_user()
        items = svc.replace_list(db_session, user.id, _categories())
        assert [i.name for i in items] == ["Milk", "Cheese", "Bread"]
        assert [i.position for i in items] == [0, 1, 2]
        assert items[2].category == "Bakery"

    def test_replaces_previous_list(self, svc, db_session, make_user):
        user = make_user()
        svc.replace_list(db_session, user.id, _categories())
        svc.replace_list(
            db_session, user.id, [ShoppingListCategory(category="Meat", items=["Chicken"])]
        )
        assert [i.name for i in svc.list_items(db_session, user.id)] == ["Chicken"]

    def test_other_users_untouched(self, svc, db_session, make_user):
        alice, bob = make_user(), make_user()
        svc.replace_list(db_session, alice.id, _categories())
        svc.replace_list(db_session, bob.id, [])
        assert len(svc.list_items(db_session, alice.id)) == 3


class TestCategories:
    def test_first_seen_order(self, svc, db_session, make_user):
        user = make_user()
        svc.replace_list(db_session, user.id, _categories())
        svc.add_item(db_session, user.id, "Dairy", "Yogurt")

        grouped = svc.list_categories(db_session, user.id)
        assert [name for name, _ in grouped] == ["Dairy", "Bakery"]
        assert [i.name for i in grouped[0][1]] == ["Milk", "Cheese", "Yogurt"]


class TestItems:
    def test_add_item_appends(self, svc, db_session, make_user):
        user = make_user()
        first = svc.add_item(db_session, user.id, "Fruit", "Apple")
        second = svc.add_item(db_session, user.id, "", " Pear ")
        assert first.position == 0
        assert second.position == 1
        assert second.category == "Other"
        assert second.name == "Pear"

    def test_add_item_requires_name(self, svc, db_session, make_user):
        user = make_user()
        with pytest.raises(ShoppingListError, match="Item name is required"):
            svc.add_item(db_session, user.id, "Fruit", "  ")

    def test_toggle_item(self, svc, db_session, make_user):
        user, other = make_user(), make_user()
        item = svc.add_item(db_session, user.id, "Fruit", "Apple")
        assert svc.toggle_item(db_session, user.id, item.id).checked is True
        assert svc.toggle_item(db_session, user.id, item.id).checked is False
        assert svc.toggle_item(db_session, other.id, item.id) is None

    def test_remove_item(self, svc, db_session, make_user):
        user = make_user()
        item = svc.add_item(db_session, user.id, "Fruit", "Apple")
        assert svc.remove_item(db_session, user.id, item.id) is True
        assert svc.remove_item(db_session, user.id, item.id) is False

    def test_clear_checked(self, svc, db_session, make_user):
        user = make_user()
        items = svc.replace_list(db_session, user.id, _categories())
        svc.toggle_item(db_session, user.id, items[0].id)
        svc.toggle_item(db_session, user.id, items[2].id)

        assert svc.clear_checked(db_session, user.id) == 2
        db_session.expire_all()
        assert [i.name for i in svc.list_items(db_session, user.id)] == ["Cheese"]


class TestAllIngredientsFromPlan:
    def test_joins_every_meal(self):
        def recipe(*ingredients):
            return Recipe(name="x", ingredients=list(ingredients), instructions=[], equipment=[])

        plan = [
            DailyMealPlan(
                day="Day 1",
                breakfast=recipe("Oats", " "),
                lunch=recipe("Lettuce"),
                main_course=recipe(" Rice "),
                dinner=recipe(),
            )
        ]
        assert all_ingredients_from_plan(plan) == "Oats\nLettuce\nRice"

    def test_empty_plan(self):
        assert all_ingredients_from_plan([]) == ""
