"""Weekly meal planner page."""

import reflex as rx

from chefai.ui.components.intro_banner import intro_banner
from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.components.recipe_card import meal_plan
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.planner_state import DAY_OPTIONS, PlannerState

_t = I18nState.translations


def _labeled(label: rx.Var[str], control: rx.Component, **props) -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        control,
        spacing="1",
        **props,
    )


def planner_form() -> rx.Component:
    return rx.card(
        rx.vstack(
            _labeled(
                _t["planner.ingredients"],
                rx.text_area(
                    placeholder=_t["planner.ph_ingredients"],
                    value=PlannerState.form_ingredients,
                    on_change=PlannerState.set_form_ingredients,
                    width="100%",
                    rows="3",
                ),
                width="100%",
            ),
            rx.hstack(
                _labeled(
                    _t["planner.dietary"],
                    rx.input(
                        placeholder=_t["planner.ph_dietary"],
                        value=PlannerState.form_dietary,
                        on_change=PlannerState.set_form_dietary,
                        width="100%",
                    ),
                    flex="1",
                ),
                _labeled(
                    _t["planner.cuisine"],
                    rx.input(
                        placeholder=_t["generator.ph_cuisine"],
                        value=PlannerState.form_cuisine,
                        on_change=PlannerState.set_form_cuisine,
                        width="100%",
                    ),
                    flex="1",
                ),
                spacing="3",
                width="100%",
            ),
            rx.hstack(
                _labeled(
                    _t["planner.days"],
                    rx.select(
                        DAY_OPTIONS,
                        value=PlannerState.form_days,
                        on_change=PlannerState.set_form_days,
                    ),
                ),
                _labeled(
                    _t["planner.people"],
                    rx.input(
                        type="number",
                        min="1",
                        value=PlannerState.form_people,
                        on_change=PlannerState.set_form_people,
                    ),
                ),
                spacing="3",
            ),
            rx.button(
                rx.cond(
                    PlannerState.is_generating,
                    rx.spinner(size="2"),
                    rx.icon("sparkles", size=16),
                ),
                _t["planner.generate"],
                on_click=PlannerState.generate_plan,
                disabled=PlannerState.is_generating,
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def planner_page() -> rx.Component:
    return page_layout(
        intro_banner("banner.planner_intro", _t["banner.planner_intro"]),
        error_callout(PlannerState.error_message),
        planner_form(),
        rx.cond(
            PlannerState.has_plan,
            rx.vstack(
                rx.hstack(
                    rx.button(
                        rx.icon("save", size=16),
                        rx.cond(PlannerState.menu_saved, _t["common.saved"], _t["common.save"]),
                        on_click=PlannerState.save_menu,
                        disabled=PlannerState.menu_saved,
                    ),
                    rx.button(
                        rx.icon("share-2", size=16),
                        rx.cond(
                            PlannerState.menu_published,
                            _t["common.published"],
                            _t["common.publish"],
                        ),
                        on_click=PlannerState.publish_menu,
                        disabled=PlannerState.menu_published,
                        variant="outline",
                    ),
                    rx.button(
                        rx.cond(
                            PlannerState.is_building_list,
                            rx.spinner(size="2"),
                            rx.icon("shopping-cart", size=16),
                        ),
                        _t["planner.shopping_list"],
                        on_click=PlannerState.create_shopping_list,
                        disabled=PlannerState.is_building_list,
                        variant="outline",
                    ),
                    spacing="2",
                    wrap="wrap",
                ),
                meal_plan(PlannerState.plan),
                spacing="3",
                width="100%",
            ),
        ),
        title=_t["planner.title"],
    )
