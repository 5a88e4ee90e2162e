"""Categorized shopping list per user."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from chefai.models.shopping_list import ShoppingListItem
from chefai.services.recipe_schemas import MEALS, DailyMealPlan, ShoppingListCategory


class ShoppingListError(ValueError):
    pass


def all_ingredients_from_plan(plan: list[DailyMealPlan]) -> str:
    """Every ingredient line of a meal plan, newline separated."""
    lines: list[str] = []
    for day in plan:
        for meal in MEALS:
            lines.extend(getattr(day, meal).ingredients)
    return "\n".join(line.strip() for line in lines if line.strip())


class ShoppingListService:
    def replace_list(
        self, session: Session, user_id: int, categories: list[ShoppingListCategory]
    ) -> list[ShoppingListItem]:
        session.execute(delete(ShoppingListItem).where(ShoppingListItem.user_id == user_id))
        items = []
        position = 0
        for category in categories:
            for name in category.items:
                if not name.strip():
                    continue
                items.append(
                    ShoppingListItem(
                        user_id=user_id,
                        category=category.category.strip(),
                        name=name.strip(),
                        position=position,
                    )
                )
                position += 1
        session.add_all(items)
        session.flush()
        return items

    def list_items(self, session: Session, user_id: int) -> list[ShoppingListItem]:
        stmt = (
            select(ShoppingListItem)
            .where(ShoppingListItem.user_id == user_id)
            .order_by(ShoppingListItem.position, ShoppingListItem.id)
        )
        return list(session.execute(stmt).scalars().all())

    def list_categories(
        self, session: Session, user_id: int
    ) -> list[tuple[str, list[ShoppingListItem]]]:
        """Items grouped by category, categories in first-seen order."""
        grouped: dict[str, list[ShoppingListItem]] = {}
        for item in self.list_items(session, user_id):
            grouped.setdefault(item.category, []).append(item)
        return list(grouped.items())

    def add_item(
        self, session: Session, user_id: int, category: str, name: str
    ) -> ShoppingListItem:
        if not name or not name.strip():
            raise ShoppingListError("Item name is required")
        category = (category or "").strip() or "Other"
        last = session.execute(
            select(func.max(ShoppingListItem.position)).where(ShoppingListItem.user_id == user_id)
        ).scalar_one()
        item = ShoppingListItem(
            user_id=user_id,
            category=category,
            name=name.strip(),
            position=(last + 1) if last is not None else 0,
        )
        session.add(item)
        session.flush()
        return item

    def _get_item(self, session: Session, user_id: int, item_id: int) -> ShoppingListItem | None:
        stmt = select(ShoppingListItem).where(
            ShoppingListItem.id == item_id,
            ShoppingListItem.user_id == user_id,
        )
        return session.execute(stmt).scalar_one_or_none()

    def toggle_item(self, session: Session, user_id: int, item_id: int) -> ShoppingListItem | None:
        item = self._get_item(session, user_id, item_id)
        if item is None:
            return None
        item.checked = not item.checked
        session.flush()
        return item

    def remove_item(self, session: Session, user_id: int, item_id: int) -> bool:
        item = self._get_item(session, user_id, item_id)
        if item is None:
            return False
        session.delete(item)
        session.flush()
        return True

    def clear_checked(self, session: Session, user_id: int) -> int:
        result = session.execute(
            delete(ShoppingListItem).where(
                ShoppingListItem.user_id == user_id,
                ShoppingListItem.checked.is_(True),
            )
        )
        session.flush()
        return result.rowcount
