from __future__ import annotations

import unittest

from shortcode_grid import transform

ROW = '<div class="grid-row" style="--grid-gap: 16px;">'


class TestGridTransformContract(unittest.TestCase):
    def test_flat_row_with_two_columns(self) -> None:
        out = transform("[row][col col:6]A[/col][col col:6]B[/col][/row]")
        self.assertEqual(
            out,
            ROW + '<div class="grid-col" data-col="6">A</div><div class="grid-col" data-col="6">B</div></div>',
        )
        # Document order preserved.
        self.assertLess(out.index(">A<"), out.index(">B<"))

    def test_row_defaults(self) -> None:
        self.assertEqual(transform("[row][/row]"), ROW + "</div>")

    def test_row_attribute_override(self) -> None:
        self.assertEqual(
            transform("[row gap:40 class:custom][/row]"),
            '<div class="grid-row custom" style="--grid-gap: 40px;"></div>',
        )

    def test_breakpoints_omitted_when_not_given(self) -> None:
        out = transform("[col col:12][/col]")
        self.assertEqual(out, '<div class="grid-col" data-col="12"></div>')
        for bp in ("sm", "md", "lg", "xl"):
            self.assertNotIn(f"data-{bp}", out)

    def test_all_breakpoints_in_fixed_order(self) -> None:
        out = transform("[col xl:3 sm:12 lg:4 md:6 col:12 class:field]X[/col]")
        self.assertEqual(
            out,
            '<div class="grid-col field" data-col="12" data-sm="12" data-md="6" data-lg="4" data-xl="3">X</div>',
        )

    def test_unclosed_tag_passthrough(self) -> None:
        self.assertEqual(transform("[row]unclosed"), "[row]unclosed")

    def test_nested_rows_resolve_by_depth(self) -> None:
        out = transform("[row][col col:6][row gap:8][col col:12]X[/col][/row][/col][/row]")
        self.assertEqual(
            out,
            ROW
            + '<div class="grid-col" data-col="6">'
            + '<div class="grid-row" style="--grid-gap: 8px;">'
            + '<div class="grid-col" data-col="12">X</div>'
            + "</div></div></div>",
        )
        self.assertEqual(out.count("<div"), 4)
        self.assertEqual(out.count("</div>"), 4)

    def test_malformed_attributes_do_not_break_later_ones(self) -> None:
        out = transform('[col : col:4 md:"oops sm:6][/col]')
        self.assertEqual(out, '<div class="grid-col" data-col="4" data-sm="6"></div>')

    def test_output_is_a_fixed_point(self) -> None:
        src = "[row gap:24][col col:6 md:4]A[/col][col col:6]B[/col][/row] tail"
        once = transform(src)
        self.assertEqual(transform(once), once)

    def test_no_shortcodes_returns_input(self) -> None:
        src = '<label> Your name [text* your-name] </label>\n[submit "Send"]'
        self.assertEqual(transform(src), src)
        self.assertEqual(transform(""), "")

    def test_form_field_tags_inside_columns_untouched(self) -> None:
        src = "[row]\n[col col:6]\n[text* your-name]\n[/col]\n[/row]"
        self.assertEqual(
            transform(src),
            ROW + '\n<div class="grid-col" data-col="6">\n[text* your-name]\n</div>\n</div>',
        )

    def test_non_ascii_body_preserved(self) -> None:
        out = transform("[col]Привет — ☃[/col]")
        self.assertEqual(out, '<div class="grid-col" data-col="12">Привет — ☃</div>')

    def test_non_string_input_returns_empty_string(self) -> None:
        self.assertEqual(transform(None), "")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
