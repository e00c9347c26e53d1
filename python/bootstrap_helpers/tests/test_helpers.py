"""Test the Bootstrap view helpers."""

import pytest
from markupsafe import Markup

from bootstrap_helpers import (
    LabelStyle,
    OptionsError,
    alert,
    icon_tag,
    image_tag,
    image_tag_with_tooltip,
    label,
    tooltip,
)


class TestIconTag:
    """icon_tag prefixes the name and handles the white option."""

    def test_prefix_added_and_white_class_by_default(self):
        """A bare name gets the icon- prefix, and white=False adds icon-white."""
        assert icon_tag("camera") == '<i class="icon-camera icon-white"></i>'

    def test_existing_prefix_not_doubled(self):
        """Names already starting with icon- are left alone."""
        assert icon_tag("icon-camera", white=True) == '<i class="icon-camera"></i>'

    def test_white_true_suppresses_white_class(self):
        """white=True renders the plain icon."""
        assert icon_tag("camera", white=True) == '<i class="icon-camera"></i>'

    def test_white_none_falls_back_to_default(self):
        """An explicit None behaves like the default."""
        assert icon_tag("camera", white=None) == '<i class="icon-camera icon-white"></i>'

    def test_empty_name(self):
        """An empty name still produces the prefix tokens."""
        assert icon_tag("") == '<i class="icon- icon-white"></i>'

    def test_returns_markup(self):
        """Output is marked safe so templates don't escape it again."""
        assert isinstance(icon_tag("camera"), Markup)

    def test_unknown_options_ignored(self):
        """Keys icon_tag doesn't know about don't end up in the markup."""
        assert icon_tag("camera", white=True, size="big") == '<i class="icon-camera"></i>'

    def test_white_accepts_boolean_strings(self):
        """Boolean-like strings are coerced the usual pydantic way."""
        assert icon_tag("camera", white="false") == '<i class="icon-camera icon-white"></i>'
        assert icon_tag("camera", white="true") == '<i class="icon-camera"></i>'

    def test_non_boolean_white_raises(self):
        """A value that can't be read as a boolean is rejected."""
        with pytest.raises(OptionsError, match="white"):
            icon_tag("camera", white="maybe")

    def test_caller_options_untouched(self):
        """The caller's option mapping is not modified."""
        options = {"white": True}
        icon_tag("camera", **options)
        assert options == {"white": True}


class TestTooltip:
    """tooltip wraps an anchor in a link carrying tooltip attributes."""

    def test_default_link(self):
        """Without a link the anchor points at #."""
        assert tooltip("hover me", "a tip") == (
            '<a href="#" data-original-title="a tip" rel="tooltip">hover me</a>'
        )

    def test_custom_link(self):
        """The link argument becomes the href."""
        result = tooltip("PRO", "Pro feature", "mailto:support@example.com")
        assert result == (
            '<a href="mailto:support@example.com" data-original-title="Pro feature" '
            'rel="tooltip">PRO</a>'
        )

    def test_plain_text_is_escaped(self):
        """Plain anchor text and the tip are escaped."""
        assert tooltip("<b>", 'say "hi"') == (
            '<a href="#" data-original-title="say &#34;hi&#34;" rel="tooltip">&lt;b&gt;</a>'
        )

    def test_markup_anchor_nested_as_is(self):
        """An image_tag anchor is nested without escaping."""
        result = tooltip(image_tag("lock_icon.png", size="10x14", class_="lock"), "Private")
        assert result == (
            '<a href="#" data-original-title="Private" rel="tooltip">'
            '<img src="lock_icon.png" alt="Lock_icon" width="10" height="14" class="lock" />'
            '</a>'
        )


class TestImageTagWithTooltip:
    """image_tag_with_tooltip puts the tooltip attributes on the image."""

    def test_tip_becomes_original_title(self):
        """tip is rendered as data-original-title alongside rel=tooltip."""
        result = image_tag_with_tooltip("x.png", tip="hi")
        assert result == '<img src="x.png" alt="X" rel="tooltip" data-original-title="hi" />'

    def test_tip_attribute_not_rendered(self):
        """The tip option is consumed, not passed through."""
        assert " tip=" not in image_tag_with_tooltip("x.png", tip="hi")

    def test_caller_original_title_wins(self):
        """A caller-supplied data-original-title is not overwritten by tip."""
        result = image_tag_with_tooltip("x.png", tip="hi", **{"data-original-title": "mine"})
        assert 'data-original-title="mine"' in result
        assert 'data-original-title="hi"' not in result
        assert 'rel="tooltip"' in result

    def test_data_dict_original_title_wins(self):
        """data={"original_title": ...} counts as a caller-supplied title."""
        result = image_tag_with_tooltip("x.png", tip="hi", data={"original_title": "mine"})
        assert result == '<img src="x.png" alt="X" data-original-title="mine" rel="tooltip" />'

    def test_data_dict_dashed_key_wins(self):
        """The dashed spelling inside data is honoured too."""
        result = image_tag_with_tooltip("x.png", tip="hi", data={"original-title": "mine"})
        assert result.count("data-original-title=") == 1
        assert 'data-original-title="mine"' in result

    def test_caller_rel_wins(self):
        """A caller-supplied rel is kept."""
        result = image_tag_with_tooltip("x.png", tip="hi", rel="popover")
        assert 'rel="popover"' in result
        assert 'rel="tooltip"' not in result

    def test_missing_tip_defaults_to_empty(self):
        """Without a tip the title attribute is present but empty."""
        result = image_tag_with_tooltip("x.png")
        assert 'data-original-title=""' in result

    def test_image_options_passed_through(self):
        """size and class reach image_tag."""
        result = image_tag_with_tooltip("lock.png", tip="Locked", size="10x14", class_="lock")
        assert result == (
            '<img src="lock.png" alt="Lock" width="10" height="14" class="lock" '
            'rel="tooltip" data-original-title="Locked" />'
        )

    def test_caller_options_untouched(self):
        """tip is removed from a copy, never from the caller's mapping."""
        options = {"tip": "hi", "data-original-title": "mine"}
        image_tag_with_tooltip("x.png", **options)
        assert options == {"tip": "hi", "data-original-title": "mine"}


class TestAlert:
    """alert builds a closable alert box."""

    def test_classes_prefixed_and_msg_raw(self):
        """Each class gets alert-; the message is inserted unescaped."""
        assert alert("<b>hi</b>", ["danger", "small"]) == (
            '<div class="alert alert-danger alert-small">'
            '<a href="#" class="close">x</a><b>hi</b></div>'
        )

    def test_no_classes_has_no_trailing_space(self):
        """Without extra classes the class attribute is exactly 'alert'."""
        assert alert("hi") == '<div class="alert"><a href="#" class="close">x</a>hi</div>'

    def test_single_class(self):
        """A single string is treated as one class, not split into letters."""
        assert alert("hi", "error") == (
            '<div class="alert alert-error"><a href="#" class="close">x</a>hi</div>'
        )

    def test_empty_sequence(self):
        """An empty sequence is the same as no classes."""
        assert alert("hi", ()) == alert("hi")

    def test_none_message(self):
        """A None message leaves only the close button."""
        assert alert(None) == '<div class="alert"><a href="#" class="close">x</a></div>'

    def test_bytes_class_is_one_token(self):
        """Bytes are decoded into a single class rather than iterated."""
        assert alert("hi", b"ok") == (
            '<div class="alert alert-ok"><a href="#" class="close">x</a>hi</div>'
        )

    def test_close_button_first(self):
        """Content starts with the close link."""
        result = alert("Saved.", "success")
        inner = result.split(">", 1)[1]
        assert inner.startswith('<a href="#" class="close">x</a>')


class TestLabel:
    """label builds a Bootstrap label."""

    def test_class_order(self):
        """Extra classes come first, then label, then the style."""
        assert label("Pro", class_="extra", label_style="success") == (
            '<div class="extra label success">Pro</div>'
        )

    def test_plain_label(self):
        """No options gives just the label class."""
        assert label("New") == '<div class="label">New</div>'

    def test_whitespace_in_class_collapsed(self):
        """The class option is split on whitespace and rejoined with single spaces."""
        result = label("Pro", **{"class": " a  b "}, label_style=LabelStyle.INVERSE)
        assert result == '<div class="a b label inverse">Pro</div>'

    def test_unknown_style_passed_through(self):
        """Styles aren't validated; typos land in the class list."""
        assert label("x", label_style="sucess") == '<div class="label sucess">x</div>'

    def test_empty_style_dropped(self):
        """An empty style adds no token."""
        assert label("x", label_style="") == '<div class="label">x</div>'

    def test_text_escaped(self):
        """Label text is escaped."""
        assert label("<x>") == '<div class="label">&lt;x&gt;</div>'

    def test_extra_attributes(self):
        """Unrecognised options are rendered as HTML attributes."""
        assert label("Pro", id="plan", title="Upgrade") == (
            '<div class="label" id="plan" title="Upgrade">Pro</div>'
        )

    def test_non_string_style_uses_string_form(self):
        """Any style value is rendered through str() instead of being rejected."""
        assert label("x", label_style=1) == '<div class="label 1">x</div>'

    def test_caller_options_untouched(self):
        """The caller's option mapping is not modified."""
        options = {"class": "extra", "label_style": LabelStyle.SUCCESS, "id": "plan"}
        label("Pro", **options)
        assert options == {"class": "extra", "label_style": LabelStyle.SUCCESS, "id": "plan"}
