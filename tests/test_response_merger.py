# -*- coding: utf-8 -*-

"""
Response merger Testleri

Sayfaların birleştirme kurallarını test eder.
"""

import copy
import unittest
import os
import sys

# src dizinini path'e ekle
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from restpager.modules.response_merger import merge_responses, merge_pages


class TestMergeResponses(unittest.TestCase):
    """merge_responses testleri"""

    def test_arrays_are_concatenated(self):
        """Array'ler sırayla birleştirilir"""
        self.assertEqual(merge_responses([1, 2, 3], [4, 5, 6]), [1, 2, 3, 4, 5, 6])

    def test_arrays_are_not_deduplicated(self):
        """Tekrar eden elemanlar silinmez"""
        self.assertEqual(merge_responses([{"id": 1}], [{"id": 1}]), [{"id": 1}, {"id": 1}])

    def test_objects_with_paginated_items(self):
        """Ortak key'ler recursive birleştirilir"""
        merged = merge_responses(
            {"total_count": 100, "items": [{"id": 1}, {"id": 2}]},
            {"total_count": 100, "items": [{"id": 3}, {"id": 4}]},
        )
        self.assertEqual(merged["total_count"], 100)
        self.assertEqual([item["id"] for item in merged["items"]], [1, 2, 3, 4])

    def test_nested_objects(self):
        """İç içe object'ler de birleştirilir"""
        merged = merge_responses(
            {"data": {"nodes": [1], "meta": {"a": 1}}},
            {"data": {"nodes": [2], "meta": {"b": 2}}},
        )
        self.assertEqual(merged, {"data": {"nodes": [1, 2], "meta": {"a": 1, "b": 2}}})

    def test_scalar_overlay_wins(self):
        """Scalar değerlerde son yazan kazanır"""
        merged = merge_responses({"incomplete_results": True}, {"incomplete_results": False})
        self.assertEqual(merged, {"incomplete_results": False})

    def test_null_overlay_wins(self):
        """null da scalar gibi davranır"""
        self.assertEqual(merge_responses({"cursor": "abc"}, {"cursor": None}), {"cursor": None})

    def test_mismatched_shapes_overlay_wins(self):
        """Uyuşmayan tiplerde overlay kazanır, hata fırlatılmaz"""
        self.assertEqual(merge_responses({"x": [1]}, {"x": {"a": 1}}), {"x": {"a": 1}})
        self.assertEqual(merge_responses([1], {"a": 1}), {"a": 1})
        self.assertEqual(merge_responses({"a": 1}, "text"), "text")

    def test_overlay_only_key_is_added(self):
        """Sadece overlay'de olan key olduğu gibi eklenir"""
        overlay_value = {"nested": [1, 2]}
        merged = merge_responses({"a": 1}, {"b": overlay_value})
        self.assertEqual(merged, {"a": 1, "b": {"nested": [1, 2]}})

    def test_disjoint_keys_union(self):
        """Ayrık key'lerde sonuç iki key kümesinin birleşimidir"""
        left = {"a": 1, "b": [1]}
        right = {"c": "x", "d": {"e": None}}
        self.assertEqual(merge_responses(left, right), {**left, **right})
        self.assertEqual(set(merge_responses(right, left)), set(merge_responses(left, right)))

    def test_not_commutative(self):
        """Birleştirme sırası sonucu etkiler"""
        self.assertNotEqual(merge_responses([1], [2]), merge_responses([2], [1]))
        self.assertEqual(merge_responses({"a": 1}, {"a": 2}), {"a": 2})
        self.assertEqual(merge_responses({"a": 2}, {"a": 1}), {"a": 1})

    def test_inputs_are_not_mutated(self):
        """Girdiler değiştirilmez"""
        target = {"items": [1, 2], "meta": {"page": 1}}
        overlay = {"items": [3], "meta": {"page": 2}}
        target_copy = copy.deepcopy(target)
        overlay_copy = copy.deepcopy(overlay)

        merge_responses(target, overlay)

        self.assertEqual(target, target_copy)
        self.assertEqual(overlay, overlay_copy)


class TestMergePages(unittest.TestCase):
    """merge_pages testleri"""

    def test_empty(self):
        self.assertIsNone(merge_pages([]))

    def test_single_page(self):
        self.assertEqual(merge_pages([{"a": 1}]), {"a": 1})

    def test_pages_in_order(self):
        """Sayfalar soldan sağa birleştirilir"""
        self.assertEqual(merge_pages([[1], [2, 3], [4]]), [1, 2, 3, 4])


if __name__ == '__main__':
    unittest.main()
