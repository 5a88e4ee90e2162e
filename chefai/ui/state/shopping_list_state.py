"""Shopping list state: categorized items with check, add, remove and clear."""

import reflex as rx
from pydantic import BaseModel

from chefai.services.shopping_list_service import ShoppingListError, ShoppingListService
from chefai.ui.state.base_state import BaseState, get_sync_session


class ShoppingItem(BaseModel):
    id: int = 0
    name: str = ""
    checked: bool = False


class ShoppingCategory(BaseModel):
    name: str = ""
    items: list[ShoppingItem] = []


class ShoppingListState(BaseState):
    categories: list[ShoppingCategory] = []
    form_category: str = ""
    form_name: str = ""

    def set_form_category(self, value: str):
        self.form_category = value

    def set_form_name(self, value: str):
        self.form_name = value

    @rx.var
    def item_count(self) -> int:
        return sum(len(c.items) for c in self.categories)

    @rx.var
    def checked_count(self) -> int:
        return sum(1 for c in self.categories for i in c.items if i.checked)

    async def load_list(self):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            self.categories = [
                ShoppingCategory(
                    name=name,
                    items=[ShoppingItem(id=i.id, name=i.name, checked=i.checked) for i in items],
                )
                for name, items in ShoppingListService().list_categories(session, user_id)
            ]

    async def toggle_item(self, item_id: int):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            ShoppingListService().toggle_item(session, user_id, item_id)
            session.commit()
        await self.load_list()

    async def remove_item(self, item_id: int):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            ShoppingListService().remove_item(session, user_id, item_id)
            session.commit()
        await self.load_list()

    async def add_item(self):
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                ShoppingListService().add_item(session, user_id, self.form_category, self.form_name)
                session.commit()
        except ShoppingListError as exc:
            self.error_message = str(exc)
            return
        self.form_name = ""
        self.error_message = ""
        await self.load_list()

    async def clear_checked(self):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            ShoppingListService().clear_checked(session, user_id)
            session.commit()
        await self.load_list()
