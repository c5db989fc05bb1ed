"""
Unit Tests for the Datetime Renderer
====================================
"""

from datetime import date, datetime

import pytest

from pagelayout.core.rendering.base import FieldConfigError

from tests.utils.helpers import render_field


class TestDatetimeRenderer:
    """Test split date/time controls with a combined hidden value."""

    def test_parts_and_names(self):
        html = render_field("starts_at", {"renderer": "datetime"})
        assert 'type="date"' in html
        assert 'name="crossbeams[starts_at_date]" id="crossbeams_starts_at_date"' in html
        assert 'name="crossbeams[starts_at_time]" id="crossbeams_starts_at_time"' in html
        assert 'type="hidden" value="" name="crossbeams[starts_at]" id="crossbeams_starts_at"' in html
        assert '<label for="crossbeams_starts_at_date">Starts At</label>' in html

    def test_default_time_without_value(self):
        """Test the time control is seeded and the hidden value stays empty."""
        html = render_field("starts_at", {"renderer": "datetime", "default_hour": 9, "default_minute": 30})
        assert '<input type="time" value="09:30"' in html
        assert '<input type="date" value=""' in html
        assert '<input type="hidden" value=""' in html

    def test_default_minute_is_optional(self):
        html = render_field("starts_at", {"renderer": "datetime", "default_hour": 7})
        assert '<input type="time" value="07:00"' in html

    def test_no_default_time(self):
        html = render_field("starts_at", {"renderer": "datetime"})
        assert '<input type="time" value=""' in html

    def test_datetime_value(self):
        html = render_field(
            "starts_at", {"renderer": "datetime"}, form_object={"starts_at": datetime(2024, 1, 15, 14, 45)}
        )
        assert '<input type="date" value="2024-01-15"' in html
        assert '<input type="time" value="14:45"' in html
        assert '<input type="hidden" value="2024-01-15T14:45"' in html

    def test_iso_string_value(self):
        html = render_field("starts_at", {"renderer": "datetime"}, form_object={"starts_at": "2024-01-15T08:05:00"})
        assert '<input type="time" value="08:05"' in html
        assert '<input type="hidden" value="2024-01-15T08:05"' in html

    def test_empty_string_is_no_value(self):
        html = render_field("starts_at", {"renderer": "datetime"}, form_object={"starts_at": "  "})
        assert '<input type="hidden" value=""' in html

    def test_date_only_value(self):
        """Test a plain date shows the default time and submits midnight."""
        html = render_field(
            "starts_at",
            {"renderer": "datetime", "default_hour": 9},
            form_object={"starts_at": date(2024, 1, 15)},
        )
        assert '<input type="date" value="2024-01-15"' in html
        assert '<input type="time" value="09:00"' in html
        assert '<input type="hidden" value="2024-01-15T00:00"' in html

    def test_date_only_string(self):
        html = render_field("starts_at", {"renderer": "datetime"}, form_object={"starts_at": "2024-01-15"})
        assert '<input type="time" value=""' in html
        assert '<input type="hidden" value="2024-01-15T00:00"' in html

    def test_part_bounds(self):
        html = render_field(
            "starts_at",
            {"renderer": "datetime", "minvalue_date": "2024-01-01", "maxvalue_time": "17:00"},
        )
        date_input = next(line for line in html.splitlines() if 'type="date"' in line)
        time_input = next(line for line in html.splitlines() if 'type="time"' in line)
        assert 'min="2024-01-01"' in date_input
        assert "max=" not in date_input
        assert 'max="17:00"' in time_input
        assert "min=" not in time_input

    @pytest.mark.parametrize(
        "options,message",
        [
            ({"default_hour": 24}, "Default hour must be a number from 0 to 23."),
            ({"default_hour": -1}, "Default hour must be a number from 0 to 23."),
            ({"default_hour": 9, "default_minute": 60}, "Default minute must be a number from 0 to 59."),
        ],
    )
    def test_out_of_range_defaults(self, options, message):
        with pytest.raises(FieldConfigError, match=message):
            render_field("starts_at", {"renderer": "datetime", **options})
