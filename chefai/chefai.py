import reflex as rx

from chefai.models import Base
from chefai.ui.pages.admin.content import admin_content_page
from chefai.ui.pages.admin.content_generator import admin_content_generator_page
from chefai.ui.pages.admin.dashboard import admin_dashboard_page
from chefai.ui.pages.admin.users import admin_users_page
from chefai.ui.pages.community import community_page
from chefai.ui.pages.dashboard import dashboard_page
from chefai.ui.pages.generator import generator_page
from chefai.ui.pages.landing import landing_page
from chefai.ui.pages.login import login_page
from chefai.ui.pages.my_menus import my_menus_page
from chefai.ui.pages.my_recipes import my_recipes_page
from chefai.ui.pages.planner import planner_page
from chefai.ui.pages.pro import pro_page
from chefai.ui.pages.profile import profile_page
from chefai.ui.pages.saved import saved_page
from chefai.ui.pages.settings import settings_page
from chefai.ui.pages.shopping_list import shopping_list_page
from chefai.ui.pages.signup import signup_page
from chefai.ui.state.admin_state import AdminState
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.banner_state import BannerState
from chefai.ui.state.base_state import _engine
from chefai.ui.state.community_state import CommunityState
from chefai.ui.state.dashboard_state import DashboardState
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.menus_state import MenusState
from chefai.ui.state.profile_state import ProfileState
from chefai.ui.state.recipes_state import RecipesState
from chefai.ui.state.settings_state import SettingsState
from chefai.ui.state.shopping_list_state import ShoppingListState

app = rx.App(
    head_components=[
        rx.el.link(rel="icon", href="/favicon.ico", type="image/x-icon"),
    ],
)

Base.metadata.create_all(_engine)

# Paths without a locale prefix are sent to the negotiated locale
app.add_page(
    rx.fragment,
    route="/",
    title="ChefAI",
    on_load=I18nState.redirect_to_locale,
)
app.add_page(
    rx.fragment,
    route="/[locale]",
    title="ChefAI",
    on_load=I18nState.redirect_to_locale,
)

# Public pages
app.add_page(
    landing_page,
    route="/[locale]/landing",
    title="ChefAI",
    on_load=I18nState.load_locale,
)
app.add_page(
    login_page,
    route="/[locale]/login",
    title="Login | ChefAI",
    on_load=I18nState.load_locale,
)
app.add_page(
    signup_page,
    route="/[locale]/signup",
    title="Sign Up | ChefAI",
    on_load=I18nState.load_locale,
)

# Protected pages
_protected = [I18nState.load_locale, AuthState.check_auth]

app.add_page(
    dashboard_page,
    route="/[locale]/dashboard",
    title="Dashboard | ChefAI",
    on_load=[*_protected, DashboardState.load_dashboard],
)
app.add_page(
    generator_page,
    route="/[locale]/generator",
    title="Recipe Generator | ChefAI",
    on_load=[*_protected, BannerState.load_banners],
)
app.add_page(
    planner_page,
    route="/[locale]/planner",
    title="Meal Planner | ChefAI",
    on_load=[*_protected, BannerState.load_banners],
)
app.add_page(
    my_recipes_page,
    route="/[locale]/my-recipes",
    title="My Recipes | ChefAI",
    on_load=[*_protected, RecipesState.load_recipes],
)
app.add_page(
    my_menus_page,
    route="/[locale]/my-menus",
    title="My Menus | ChefAI",
    on_load=[*_protected, MenusState.load_menus],
)
app.add_page(
    shopping_list_page,
    route="/[locale]/shopping-list",
    title="Shopping List | ChefAI",
    on_load=[*_protected, ShoppingListState.load_list],
)
app.add_page(
    community_page,
    route="/[locale]/community",
    title="Community | ChefAI",
    on_load=[*_protected, BannerState.load_banners, CommunityState.load_feed],
)
app.add_page(
    saved_page,
    route="/[locale]/saved",
    title="Saved | ChefAI",
    on_load=[*_protected, CommunityState.load_saved],
)
app.add_page(
    profile_page,
    route="/[locale]/profile/[profile_id]",
    title="Profile | ChefAI",
    on_load=[*_protected, ProfileState.load_profile],
)
app.add_page(
    settings_page,
    route="/[locale]/settings",
    title="Settings | ChefAI",
    on_load=[*_protected, SettingsState.load_settings],
)
app.add_page(
    pro_page,
    route="/[locale]/pro",
    title="ChefAI Pro",
    on_load=_protected,
)

# Admin back office (English only)
_admin = [AuthState.check_admin]

app.add_page(
    admin_dashboard_page,
    route="/admin",
    title="Admin | ChefAI",
    on_load=[*_admin, AdminState.load_dashboard],
)
app.add_page(
    admin_users_page,
    route="/admin/users",
    title="Users | ChefAI Admin",
    on_load=[*_admin, AdminState.load_users],
)
app.add_page(
    admin_content_page,
    route="/admin/content",
    title="Content | ChefAI Admin",
    on_load=[*_admin, AdminState.load_content],
)
app.add_page(
    admin_content_generator_page,
    route="/admin/content-generator",
    title="Content Generator | ChefAI Admin",
    on_load=_admin,
)

# Mount payment API routes on the Starlette backend
from chefai.services.payment_routes import payment_routes  # noqa: E402

for _route in payment_routes:
    app._api.routes.append(_route)
