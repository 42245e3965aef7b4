from dataclasses import FrozenInstanceError

from django.test import SimpleTestCase

from django_slotgrid.grid.breakpoints import BreakpointClassifier, BreakpointThresholds
from django_slotgrid.grid.constants import SPAN_TABLE, Breakpoint, ColumnBucket, RowBucket
from django_slotgrid.grid.exceptions import InvalidBucket
from django_slotgrid.grid.spans import (
    GridItemSpec,
    ResolvedSpan,
    grid_columns,
    resolve_all,
    resolve_column_span,
    resolve_for_width,
    resolve_row_span,
    resolve_span,
)

EXPECTED_TABLE = {
    # bucket: (full, mid, narrow, mobile)
    6: (6, 4, 4, 2),
    5: (5, 4, 3, 2),
    4: (4, 4, 4, 2),
    3: (3, 3, 3, 2),
    2: (2, 2, 2, 2),
    1: (1, 1, 1, 2),
}
WIDEST_FIRST = (Breakpoint.FULL, Breakpoint.MID, Breakpoint.NARROW, Breakpoint.MOBILE)


class ResolveColumnSpanTests(SimpleTestCase):
    def test_table_matches_declared_spans(self):
        for bucket, spans in EXPECTED_TABLE.items():
            for breakpoint, span in zip(WIDEST_FIRST, spans):
                with self.subTest(bucket=bucket, breakpoint=breakpoint.label):
                    self.assertEqual(resolve_column_span(bucket, breakpoint), span)

    def test_full_width_is_identity(self):
        for bucket in ColumnBucket:
            self.assertEqual(resolve_column_span(bucket, Breakpoint.FULL), bucket)

    def test_spans_fit_grid_for_multi_column_buckets(self):
        for bucket in ColumnBucket.values[1:]:
            for breakpoint in Breakpoint:
                with self.subTest(bucket=bucket, breakpoint=breakpoint.label):
                    self.assertLessEqual(
                        resolve_column_span(bucket, breakpoint), grid_columns(breakpoint)
                    )

    def test_single_column_slot_only_widens_on_mobile(self):
        self.assertEqual(resolve_column_span(1, Breakpoint.MID), 1)
        self.assertEqual(resolve_column_span(1, Breakpoint.NARROW), 1)
        self.assertEqual(resolve_column_span(1, Breakpoint.MOBILE), 2)

    def test_unknown_bucket_rejected(self):
        with self.assertRaises(InvalidBucket):
            resolve_column_span(9, Breakpoint.FULL)

    def test_unknown_breakpoint_rejected(self):
        with self.assertRaises(ValueError):
            resolve_column_span(3, 9)

    def test_table_is_closed_and_read_only(self):
        self.assertEqual(len(SPAN_TABLE), 24)
        with self.assertRaises(TypeError):
            SPAN_TABLE[(ColumnBucket.ONE, Breakpoint.MID)] = 4


class GridColumnsTests(SimpleTestCase):
    def test_column_counts(self):
        self.assertEqual(
            [grid_columns(bp) for bp in WIDEST_FIRST],
            [6, 4, 4, 2],
        )


class ResolveRowSpanTests(SimpleTestCase):
    def test_row_span_is_declared_bucket(self):
        for row in RowBucket:
            self.assertEqual(resolve_row_span(row), int(row))

    def test_row_span_constant_across_breakpoints(self):
        for row in RowBucket:
            item = GridItemSpec(ColumnBucket.FOUR, row)
            rows = {resolve_span(item, bp).row_span for bp in Breakpoint}
            self.assertEqual(rows, {int(row)})

    def test_unknown_row_bucket_rejected(self):
        with self.assertRaises(InvalidBucket):
            resolve_row_span(4)


class ResolveSpanTests(SimpleTestCase):
    def test_five_by_two_on_narrow(self):
        self.assertEqual(
            resolve_span(GridItemSpec(5, 2), Breakpoint.NARROW),
            ResolvedSpan(column_span=3, row_span=2),
        )

    def test_six_by_one_on_mobile(self):
        self.assertEqual(
            resolve_span(GridItemSpec(6, 1), Breakpoint.MOBILE),
            ResolvedSpan(column_span=2, row_span=1),
        )

    def test_one_by_three_on_mid(self):
        self.assertEqual(
            resolve_span(GridItemSpec(1, 3), Breakpoint.MID),
            ResolvedSpan(column_span=1, row_span=3),
        )

    def test_resolution_is_repeatable(self):
        item = GridItemSpec(5, 2)
        self.assertEqual(
            resolve_span(item, Breakpoint.MID), resolve_span(item, Breakpoint.MID)
        )

    def test_resolve_all_covers_every_breakpoint(self):
        spans = resolve_all(GridItemSpec(5, 2))
        self.assertEqual(list(spans), list(Breakpoint))
        self.assertEqual(
            {bp.label: span.column_span for bp, span in spans.items()},
            {"Mobile": 2, "Narrow": 3, "Mid": 4, "Full": 5},
        )

    def test_resolve_for_width(self):
        breakpoint, span = resolve_for_width(GridItemSpec(6, 2), 700)
        self.assertEqual(breakpoint, Breakpoint.NARROW)
        self.assertEqual(span, ResolvedSpan(4, 2))

    def test_resolve_for_width_with_custom_classifier(self):
        classifier = BreakpointClassifier(BreakpointThresholds(320, 640, 960))
        breakpoint, span = resolve_for_width(GridItemSpec(5, 1), 700, classifier)
        self.assertEqual(breakpoint, Breakpoint.MID)
        self.assertEqual(span.column_span, 4)

    def test_as_dict(self):
        self.assertEqual(
            ResolvedSpan(3, 2).as_dict(), {"column_span": 3, "row_span": 2}
        )


class GridItemSpecTests(SimpleTestCase):
    def test_buckets_are_coerced_to_enums(self):
        item = GridItemSpec(5, 2)
        self.assertIs(item.column_bucket, ColumnBucket.FIVE)
        self.assertIs(item.row_bucket, RowBucket.TWO)
        self.assertEqual(item.label, "5x2")

    def test_out_of_range_buckets_rejected(self):
        for column, row in [(7, 1), (0, 1), (3, 0), (3, 4), ("3", 1), (None, 1), (True, 1)]:
            with self.subTest(column=column, row=row):
                with self.assertRaises(InvalidBucket):
                    GridItemSpec(column, row)

    def test_invalid_bucket_is_value_error(self):
        with self.assertRaises(ValueError):
            GridItemSpec(7, 1)

    def test_spec_is_immutable(self):
        item = GridItemSpec(2, 1)
        with self.assertRaises(FrozenInstanceError):
            item.column_bucket = ColumnBucket.SIX

    def test_parse_label(self):
        self.assertEqual(GridItemSpec.parse("5x2"), GridItemSpec(5, 2))
        self.assertEqual(GridItemSpec.parse(" 3 X 1 "), GridItemSpec(3, 1))

    def test_parse_rejects_bad_labels(self):
        for label in ["7x1", "2x4", "wide", "5x", ""]:
            with self.subTest(label=label):
                with self.assertRaises(InvalidBucket):
                    GridItemSpec.parse(label)
