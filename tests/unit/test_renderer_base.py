"""
Unit Tests for the Renderer Base
================================

Tests for DOM identity, value resolution, error display, hints and
behaviour wiring shared by every field renderer.
"""

import pytest
from pydantic import ValidationError

from pagelayout.core.rendering.base import FieldConfigError, json_attribute, present_field_as_label
from pagelayout.core.rendering.field_types import FieldRendererFactory
from pagelayout.core.rendering.input import InputRenderer
from pagelayout.models.schemas import BehaviourKind, BehaviourRule, FieldConfig, PageConfig

from tests.utils.helpers import render_field


class TestLabelDerivation:
    """Test caption derivation from field names."""

    @pytest.mark.parametrize(
        "field_name,expected",
        [
            ("name", "Name"),
            ("first_name", "First Name"),
            ("customer_id", "Customer"),
            ("id_number", "Id Number"),
        ],
    )
    def test_present_field_as_label(self, field_name, expected):
        """Test labels strip a trailing _id and capitalise each word."""
        assert present_field_as_label(field_name) == expected

    def test_caption_overrides_derived_label(self):
        html = render_field("customer_id", {"caption": "Client"})
        assert '<label for="crossbeams_customer_id">Client</label>' in html


class TestDomIdentity:
    """Test ids and names assigned to rendered controls."""

    @pytest.fixture
    def renderer(self, make_page_config):
        renderer = InputRenderer()
        renderer.configure("email", FieldConfig(), make_page_config(name="user"))
        return renderer

    def test_id_and_name(self, renderer):
        assert renderer.id_base == "user_email"
        assert renderer.field_id == 'id="user_email"'
        assert renderer.name_attribute == 'name="user[email]"'
        assert renderer.name_attribute_multi == 'name="user[email][]"'
        assert renderer.wrapper_id == 'id="user_email_field_wrapper"'

    def test_render_before_configure_raises(self):
        """Test a renderer must be bound to a field before rendering."""
        with pytest.raises(FieldConfigError):
            InputRenderer().render()


class TestValueResolution:
    """Test where field values are read from."""

    def test_value_from_form_object(self):
        html = render_field("name", form_object={"name": "Bob"})
        assert 'value="Bob"' in html

    def test_missing_value_renders_empty(self):
        html = render_field("name")
        assert 'value=""' in html

    def test_extended_column_value(self):
        """Test extcol_ fields read from the extended_columns mapping."""
        html = render_field("extcol_colour", form_object={"extended_columns": {"colour": "red"}})
        assert 'value="red"' in html
        assert 'name="crossbeams[extcol_colour]"' in html

    def test_extended_column_without_mapping(self):
        html = render_field("extcol_colour", form_object={})
        assert 'value=""' in html

    def test_form_values_override_form_object(self):
        html = render_field("name", form_object={"name": "Bob"}, form_values={"name": "Alice"})
        assert 'value="Alice"' in html

    def test_form_values_without_field_fall_back(self):
        html = render_field("name", form_object={"name": "Bob"}, form_values={"other": "x"})
        assert 'value="Bob"' in html


class TestErrorDisplay:
    """Test rendering of validation errors."""

    def test_error_class_and_messages(self):
        html = render_field("name", form_errors={"name": ["is missing", None, "is too short"]})
        assert 'class="crossbeams-field crossbeams-div-error bg-washed-red"' in html
        assert "<span class='brown crossbeams-form-error'><br>is missing; is too short</span>" in html

    def test_errors_on_other_fields_are_ignored(self):
        html = render_field("name", form_errors={"email": ["is invalid"]})
        assert 'class="crossbeams-field"' in html
        assert "crossbeams-form-error" not in html

    def test_error_messages_are_escaped(self):
        html = render_field("name", form_errors={"name": ["<b>bad</b>"]})
        assert "&lt;b&gt;bad&lt;/b&gt;" in html


class TestHintsAndVisibility:
    """Test hint blocks and hide-on-load."""

    def test_hint_block_and_trigger(self):
        html = render_field("name", {"hint": "Your full name"})
        assert '<div style="display:none" data-cb-hint="crossbeams_name">' in html
        assert "Your full name" in html
        assert "data-cb-hint-for='crossbeams_name'" in html

    def test_no_hint_by_default(self):
        html = render_field("name")
        assert "data-cb-hint" not in html

    def test_hide_on_load(self):
        html = render_field("name", {"hide_on_load": True})
        assert 'id="crossbeams_name_field_wrapper" class="crossbeams-field" hidden>' in html


class TestBehaviours:
    """Test data attributes wiring client-side behaviours."""

    def test_change_affects(self):
        html = render_field("province", behaviours=[{"province": {"change_affects": "city;suburb"}}])
        assert 'data-change-values="crossbeams_city,crossbeams_suburb"' in html

    def test_enable_on_change(self):
        html = render_field("status", behaviours=[{"status": {"enable_on_change": [1, "y"]}}])
        assert 'data-enable-on-values="1,y"' in html

    def test_notify(self):
        rule = {"notify": [{"url": "/check", "param_keys": ["crossbeams_code"], "param_values": {"id": 3}}]}
        html = render_field("code", behaviours=[{"code": rule}])
        assert (
            """data-observe-change='[{"url":"/check","param_keys":["crossbeams_code"],"param_values":{"id":"3"}}]'"""
            in html
        )

    def test_populate_from_selected(self):
        html = render_field("items", behaviours=[{"items": {"populate_from_selected": [{"sortable": "s1"}]}}])
        assert """data-observe-selected='[{"sortable":"s1"}]'""" in html

    def test_rules_for_other_fields_ignored(self):
        html = render_field("name", behaviours=[{"province": {"change_affects": "city"}}])
        assert "data-change-values" not in html

    def test_different_kinds_combine(self):
        behaviours = [
            {"province": {"change_affects": "city"}},
            {"province": {"enable_on_change": ["x"]}},
        ]
        html = render_field("province", behaviours=behaviours)
        assert 'data-change-values="crossbeams_city"' in html
        assert 'data-enable-on-values="x"' in html

    def test_duplicate_kind_raises(self):
        """Test two rules of the same kind for one field are rejected at render."""
        behaviours = [
            {"province": {"change_affects": "city"}},
            {"province": {"change_affects": "suburb"}},
        ]
        with pytest.raises(FieldConfigError, match='same behaviour for field "province"'):
            render_field("province", behaviours=behaviours)

    def test_rule_requires_exactly_one_effect(self):
        with pytest.raises(ValidationError):
            BehaviourRule(change_affects=["a"], enable_on_change=["b"])
        with pytest.raises(ValidationError):
            BehaviourRule()

    def test_rule_kind(self):
        assert BehaviourRule(change_affects="a;b").kind == BehaviourKind.CHANGE_AFFECTS
        assert BehaviourRule(change_affects="a;b").change_affects == ["a", "b"]


class TestJsonAttribute:
    """Test JSON embedded in single-quoted attributes."""

    def test_compact_output(self):
        assert json_attribute({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_single_quotes_escaped(self):
        assert json_attribute(["it's"]) == '["it&#39;s"]'


class TestFieldConfig:
    """Test field configuration invariants."""

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            FieldConfig(colour="red")

    def test_frozen(self):
        config = FieldConfig(caption="Name")
        with pytest.raises(ValidationError):
            config.caption = "Other"

    def test_merged_keeps_original(self):
        config = FieldConfig(caption="Name", required=True)
        merged = config.merged({"caption": "Full name"})
        assert merged.caption == "Full name"
        assert merged.required is True
        assert config.caption == "Name"

    def test_render_is_repeatable(self, make_page_config):
        page_config = make_page_config({"name": {}}, form_object={"name": "Bob"})
        renderer = FieldRendererFactory.create("name", page_config.field_config("name"), page_config)
        assert renderer.render() == renderer.render()

    def test_page_name_defaults_from_settings(self):
        assert PageConfig().name == "crossbeams"
