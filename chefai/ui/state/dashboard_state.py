"""Dashboard state: counts of the user's recipes, menus, posts and open shopping items."""

from pydantic import BaseModel

from chefai.services.community_service import CommunityService
from chefai.services.recipe_service import MenuService, RecipeService
from chefai.services.shopping_list_service import ShoppingListService
from chefai.ui.state.base_state import BaseState, get_sync_session


class DashboardStats(BaseModel):
    total_recipes: int = 0
    total_menus: int = 0
    total_posts: int = 0
    open_shopping_items: int = 0


class DashboardState(BaseState):
    stats: DashboardStats = DashboardStats()
    recent_recipes: list[str] = []

    async def load_dashboard(self):
        user_id = await self._get_user_id()
        with get_sync_session() as session:
            recipes = RecipeService().list_recipes(session, user_id)
            items = ShoppingListService().list_items(session, user_id)
            self.stats = DashboardStats(
                total_recipes=len(recipes),
                total_menus=len(MenuService().list_menus(session, user_id)),
                total_posts=len(CommunityService().list_user_posts(session, user_id)),
                open_shopping_items=sum(1 for i in items if not i.checked),
            )
            self.recent_recipes = [r.name for r in recipes[:5]]
        self.error_message = ""
