"""
Unit tests for component styling resolve/update and editor selection.
"""

import pytest

from admin_core.models.contracts.branding import BrandingConfig, ComponentStyle
from admin_core.models.enums import ComponentTab, ThemeMode
from admin_core.services.component_styling import (
    COMPONENTS,
    ELEMENTS,
    INPUT_BACKGROUND_DEFAULT,
    INPUT_COMPONENTS,
    ComponentSelection,
    expand_component,
    reset,
    resolve,
    update,
)


@pytest.fixture
def styled_config():
    """Config with overrides for button and card."""
    return BrandingConfig(
        component_styling={
            "button": ComponentStyle(
                light={"backgroundColor": "#0a84ff", "textColor": "#ffffff"},
                dark={"backgroundColor": "#0060df"},
            ),
            "card": ComponentStyle(light={"borderRadius": "12px"}),
        }
    )


class TestCatalogs:
    """Tests for the element/component catalogs."""

    def test_catalogs_are_disjoint(self):
        """Test no id is both an element and a component."""
        assert not set(ELEMENTS) & set(COMPONENTS)

    def test_input_components_are_components(self):
        """Test every input component is in the components catalog."""
        assert INPUT_COMPONENTS <= set(COMPONENTS)

    def test_expand_composite_element(self):
        """Test composite elements expand to their storage ids."""
        assert len(expand_component("platform-sidebar")) == 5
        assert expand_component("vertical-tab-menu") == (
            "vertical-tab-menu-normal",
            "vertical-tab-menu-hover",
            "vertical-tab-menu-active",
        )

    def test_expand_plain_id(self):
        """Test non-composite ids map to themselves."""
        assert expand_component("button") == ("button",)


class TestResolve:
    """Tests for the style resolver."""

    @pytest.mark.parametrize("component_id", sorted(INPUT_COMPONENTS))
    def test_input_default_floor_without_entry(self, component_id):
        """Test inputs resolve to the filled background when nothing is stored."""
        resolved = resolve(BrandingConfig(), component_id)

        assert resolved["light"]["backgroundColor"] == INPUT_BACKGROUND_DEFAULT
        assert resolved["dark"]["backgroundColor"] == "#f7f7f7"

    @pytest.mark.parametrize("component_id", sorted(INPUT_COMPONENTS))
    def test_input_default_floor_reasserted_for_empty_value(self, component_id):
        """Test a stored empty backgroundColor falls back to the input default."""
        config = BrandingConfig(
            component_styling={component_id: ComponentStyle(light={"backgroundColor": ""})}
        )

        assert resolve(config, component_id)["light"]["backgroundColor"] == "#f7f7f7"

    @pytest.mark.parametrize("component_id", ["button", "card", "checkbox", "top-menu-bar"])
    def test_non_input_resolves_to_empty_background(self, component_id):
        """Test non-input components without entry have an empty backgroundColor."""
        resolved = resolve(BrandingConfig(), component_id)

        assert resolved == {"light": {"backgroundColor": ""}, "dark": {"backgroundColor": ""}}

    def test_stored_values_are_returned(self, styled_config):
        """Test stored overrides are returned per mode."""
        resolved = resolve(styled_config, "button")

        assert resolved["light"] == {"backgroundColor": "#0a84ff", "textColor": "#ffffff"}
        assert resolved["dark"] == {"backgroundColor": "#0060df"}

    def test_stored_input_background_wins_over_floor(self):
        """Test a non-empty stored input background is kept."""
        config = BrandingConfig(
            component_styling={"select": ComponentStyle(dark={"backgroundColor": "#1c1c1e"})}
        )

        resolved = resolve(config, "select")

        assert resolved["dark"]["backgroundColor"] == "#1c1c1e"
        assert resolved["light"]["backgroundColor"] == "#f7f7f7"

    def test_resolve_does_not_mutate_config(self, styled_config):
        """Test mutating the resolved record leaves the config untouched."""
        resolved = resolve(styled_config, "button")
        resolved["light"]["backgroundColor"] = "red"

        assert styled_config.component_styling["button"].light["backgroundColor"] == "#0a84ff"


class TestUpdate:
    """Tests for the immutable single-field mutator."""

    def test_update_sets_field_on_edited_mode(self, styled_config):
        """Test the edited mode receives the new value."""
        result = update(styled_config, "button", ThemeMode.LIGHT, "borderRadius", "4px")

        assert result.component_styling["button"].light["borderRadius"] == "4px"
        assert result.component_styling["button"].light["backgroundColor"] == "#0a84ff"

    def test_update_returns_new_config(self, styled_config):
        """Test the input configuration is not modified."""
        result = update(styled_config, "button", "light", "borderRadius", "4px")

        assert result is not styled_config
        assert "borderRadius" not in styled_config.component_styling["button"].light

    def test_untouched_mode_shared_by_reference(self, styled_config):
        """Test the other mode's record is the same object after update."""
        before = styled_config.component_styling["button"]

        result = update(styled_config, "button", "light", "textColor", "#000000")

        assert result.component_styling["button"].dark is before.dark

    def test_other_components_shared_by_reference(self, styled_config):
        """Test entries of other component ids are the same objects."""
        result = update(styled_config, "button", "dark", "textColor", "#ffffff")

        assert result.component_styling["card"] is styled_config.component_styling["card"]

    def test_unrelated_branches_shared(self, styled_config):
        """Test palettes and global styling are shared with the previous version."""
        result = update(styled_config, "button", "dark", "textColor", "#ffffff")

        assert result.light_mode is styled_config.light_mode
        assert result.global_styling is styled_config.global_styling

    def test_dark_border_radius_leaves_light_resolution(self, styled_config):
        """Test a dark-mode edit resolves in dark and leaves light resolving as before."""
        before = resolve(styled_config, "button")

        result = update(styled_config, "button", "dark", "borderRadius", "12px")
        after = resolve(result, "button")

        assert after["dark"]["borderRadius"] == "12px"
        assert after["light"] == before["light"]

    def test_update_new_entry_seeds_both_modes_from_resolver(self):
        """Test a first edit stores the resolved default for the other mode."""
        result = update(BrandingConfig(), "textarea", "dark", "textColor", "#eeeeee")
        entry = result.component_styling["textarea"]

        assert entry.dark == {"backgroundColor": "#f7f7f7", "textColor": "#eeeeee"}
        assert entry.light == {"backgroundColor": "#f7f7f7"}

    def test_update_stores_value_without_validation(self):
        """Test arbitrary CSS strings are stored as given."""
        result = update(BrandingConfig(), "card", "light", "boxShadow", "not a shadow")

        assert result.component_styling["card"].light["boxShadow"] == "not a shadow"

    def test_reset_drops_composite_parts(self):
        """Test reset removes the stored parts of a composite element."""
        config = update(BrandingConfig(), "platform-sidebar-primary", "light", "textColor", "#fff")
        config = update(config, "button", "light", "textColor", "#000")

        result = reset(config, "platform-sidebar")

        assert "platform-sidebar-primary" not in result.component_styling
        assert "button" in result.component_styling


class TestComponentSelection:
    """Tests for editor tab/selection state."""

    def test_initial_selection_is_first_element(self):
        """Test the editor starts on the first element."""
        selection = ComponentSelection()

        assert selection.active_tab == ComponentTab.ELEMENTS
        assert selection.active_component == ELEMENTS[0]

    def test_switch_tab_resets_to_first_of_tab(self):
        """Test switching tabs selects the first id of the new tab."""
        selection = ComponentSelection()
        selection.select("typography")

        assert selection.switch_tab("components") == COMPONENTS[0]

    def test_select_outside_tab_resets(self):
        """Test selecting an id of the other tab resets the selection."""
        selection = ComponentSelection(ComponentTab.COMPONENTS)
        selection.select("card")

        assert selection.select("typography") == "text-input"

    def test_select_inside_tab(self):
        """Test selecting an id of the active tab."""
        selection = ComponentSelection("components")

        assert selection.select("switch") == "switch"
        assert selection.storage_ids() == ("switch",)

    def test_storage_ids_for_composite(self):
        """Test composite selection exposes its parts."""
        selection = ComponentSelection()
        selection.select("vertical-tab-menu")

        assert len(selection.storage_ids()) == 3
