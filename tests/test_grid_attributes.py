from __future__ import annotations

import unittest

from shortcode_grid import GridConfig, transform
from shortcode_grid.attributes import (
    absint,
    find_malformed_fragments,
    is_empty_value,
    parse_shortcode_atts,
    sanitize_html_class,
)


class TestParseShortcodeAtts(unittest.TestCase):
    def test_token_forms(self) -> None:
        atts = parse_shortcode_atts('col:6 md=4 class="two words" required')
        self.assertEqual(atts, {"col": "6", "md": "4", "class": "two words", "required": ""})
        self.assertEqual(list(atts), ["col", "md", "class", "required"])

    def test_empty_and_blank(self) -> None:
        self.assertEqual(parse_shortcode_atts(""), {})
        self.assertEqual(parse_shortcode_atts("   "), {})

    def test_later_keys_overwrite(self) -> None:
        self.assertEqual(parse_shortcode_atts("gap:8 gap:24"), {"gap": "24"})

    def test_keys_are_case_sensitive(self) -> None:
        self.assertEqual(parse_shortcode_atts("Col:3 col:4"), {"Col": "3", "col": "4"})

    def test_malformed_tokens_skipped(self) -> None:
        self.assertEqual(parse_shortcode_atts(": :: = gap:8"), {"gap": "8"})
        self.assertEqual(
            parse_shortcode_atts(': col:4 md:"oops sm:6'),
            {"col": "4", "md": "", "oops": "", "sm": "6"},
        )

    def test_non_ascii_key_characters_split_keys(self) -> None:
        # Only [A-Za-z0-9_] forms keys.
        self.assertEqual(parse_shortcode_atts("gäp:4"), {"g": "", "p": "4"})

    def test_malformed_fragments_reported_in_order(self) -> None:
        self.assertEqual(find_malformed_fragments(': col:4 md:"oops sm:6'), [":", ':"'])
        self.assertEqual(find_malformed_fragments("col:4 sm:6"), [])
        self.assertEqual(find_malformed_fragments("col:4 -"), ["-"])


class TestCoercion(unittest.TestCase):
    def test_absint(self) -> None:
        self.assertEqual(absint("12"), 12)
        self.assertEqual(absint(" 7"), 7)
        self.assertEqual(absint("12px"), 12)
        self.assertEqual(absint("-5"), 5)
        self.assertEqual(absint("abc"), 0)
        self.assertEqual(absint(""), 0)
        self.assertEqual(absint(None), 0)
        self.assertEqual(absint(-3), 3)

    def test_absint_ascii_digits_only(self) -> None:
        self.assertEqual(absint("\u0663"), 0)
        self.assertEqual(absint("1\u0663"), 1)
        self.assertEqual(absint("\u2003 7"), 0)

    def test_sanitize_html_class(self) -> None:
        self.assertEqual(sanitize_html_class("my-class_2"), "my-class_2")
        self.assertEqual(sanitize_html_class("two words"), "twowords")
        self.assertEqual(sanitize_html_class('x"><script>'), "xscript")
        self.assertEqual(sanitize_html_class("a%20b"), "ab")
        self.assertEqual(sanitize_html_class(""), "")

    def test_is_empty_value(self) -> None:
        self.assertTrue(is_empty_value(""))
        self.assertTrue(is_empty_value("0"))
        self.assertTrue(is_empty_value(None))
        self.assertFalse(is_empty_value("00"))
        self.assertFalse(is_empty_value("abc"))


class TestAttributeCoercionInOutput(unittest.TestCase):
    def test_gap_coercion(self) -> None:
        self.assertIn("--grid-gap: 0px;", transform("[row gap:wide][/row]"))
        self.assertIn("--grid-gap: 5px;", transform("[row gap:-5][/row]"))
        self.assertIn("--grid-gap: 0px;", transform("[row gap][/row]"))

    def test_col_coercion(self) -> None:
        self.assertIn('data-col="0"', transform("[col col:][/col]"))
        self.assertIn('data-col="0"', transform("[col col:half][/col]"))

    def test_non_ascii_digits_coerce_to_zero(self) -> None:
        out = transform("[col col:\u0663 sm:\u0664][/col]")
        self.assertEqual(out, '<div class="grid-col" data-col="0" data-sm="0"></div>')

    def test_out_of_range_passes_through(self) -> None:
        out = transform("[col col:99 sm:40][/col]")
        self.assertEqual(out, '<div class="grid-col" data-col="99" data-sm="40"></div>')

    def test_clamp_when_enabled(self) -> None:
        cfg = GridConfig(clamp_columns=True)
        out = transform("[col col:99 sm:40 md:abc][/col]", cfg)
        self.assertEqual(out, '<div class="grid-col" data-col="12" data-sm="12" data-md="1"></div>')
        self.assertIn('data-col="1"', transform("[col col:0][/col]", cfg))

    def test_breakpoint_zero_and_empty_omitted(self) -> None:
        out = transform("[col col:6 sm: md:0 lg:abc][/col]")
        self.assertEqual(out, '<div class="grid-col" data-col="6" data-lg="0"></div>')

    def test_class_sanitized_in_output(self) -> None:
        out = transform('[row class="a b<c"][/row]')
        self.assertEqual(out, '<div class="grid-row abc" style="--grid-gap: 16px;"></div>')

    def test_configured_defaults(self) -> None:
        cfg = GridConfig(default_gap=24, default_col=6)
        self.assertEqual(
            transform("[row][col]A[/col][/row]", cfg),
            '<div class="grid-row" style="--grid-gap: 24px;"><div class="grid-col" data-col="6">A</div></div>',
        )


if __name__ == "__main__":
    unittest.main()
