"""Tests for explicit setter methods and event handler signatures."""

import inspect


def _params(handler) -> list[str]:
    fn = handler.fn if hasattr(handler, "fn") else handler
    return list(inspect.signature(fn).parameters.keys())


class TestAuthStateHandlers:
    def test_clear_auth_error_exists(self):
        from chefai.ui.state.auth_state import AuthState

        method = getattr(AuthState, "clear_auth_error", None)
        assert method is not None, "AuthState missing clear_auth_error"
        assert callable(method)

    def test_form_handlers_accept_form_data(self):
        from chefai.ui.state.auth_state import AuthState

        for name in ["login", "signup"]:
            assert "form_data" in _params(getattr(AuthState, name)), (
                f"AuthState.{name} should accept form_data"
            )


class TestFormSetters:
    def test_generator_setters(self):
        from chefai.ui.state.generator_state import GeneratorState

        for name in [
            "set_form_ingredients",
            "set_form_servings",
            "set_form_cuisine",
            "set_chat_input",
        ]:
            assert callable(getattr(GeneratorState, name, None)), f"missing {name}"

    def test_planner_setters(self):
        from chefai.ui.state.planner_state import PlannerState

        for name in [
            "set_form_ingredients",
            "set_form_dietary",
            "set_form_cuisine",
            "set_form_days",
            "set_form_people",
        ]:
            assert callable(getattr(PlannerState, name, None)), f"missing {name}"

    def test_settings_setters(self):
        from chefai.ui.state.settings_state import SettingsState

        for name in [
            "set_form_name",
            "set_form_username",
            "set_form_bio",
            "set_form_photo_url",
            "set_confirm_delete",
        ]:
            assert callable(getattr(SettingsState, name, None)), f"missing {name}"

    def test_community_and_shopping_setters(self):
        from chefai.ui.state.community_state import CommunityState
        from chefai.ui.state.shopping_list_state import ShoppingListState

        for name in ["set_new_post_content", "set_comment_input", "set_search_query"]:
            assert callable(getattr(CommunityState, name, None)), f"missing {name}"
        for name in ["set_form_category", "set_form_name"]:
            assert callable(getattr(ShoppingListState, name, None)), f"missing {name}"


class TestHandlerSignatures:
    def test_post_handlers_take_post_id(self):
        from chefai.ui.state.community_state import CommunityState

        for name in ["toggle_like", "toggle_save", "delete_post", "tip_post"]:
            assert "post_id" in _params(getattr(CommunityState, name)), name

    def test_menu_detail_handler(self):
        from chefai.ui.state.menus_state import MenusState

        params = _params(MenusState.expand_meal)
        assert "day_index" in params
        assert "meal" in params

    def test_admin_set_tier(self):
        from chefai.ui.state.admin_state import AdminState

        params = _params(AdminState.set_tier)
        assert params[1:] == ["user_id", "tier"]

    def test_locale_switch(self):
        from chefai.ui.state.i18n_state import I18nState

        assert "locale" in _params(I18nState.switch_locale)

    def test_banner_dismiss(self):
        from chefai.ui.state.banner_state import BannerState

        assert "key" in _params(BannerState.dismiss)
