# -*- coding: utf-8 -*-

"""
PaginationConfig Testleri
"""

import unittest
import os
import sys
from unittest import mock

# src dizinini path'e ekle
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from restpager.infrastructure.config import PaginationConfig


class TestPaginationConfig(unittest.TestCase):
    """PaginationConfig testleri"""

    def test_defaults(self):
        config = PaginationConfig()
        self.assertEqual(config.per_page_param, "per_page")
        self.assertEqual(config.default_per_page, 100)
        self.assertIsNone(config.max_pages)
        self.assertTrue(config.detect_cycles)

    def test_invalid_values(self):
        """Geçersiz değerler ValueError fırlatır"""
        with self.assertRaises(ValueError):
            PaginationConfig(default_per_page=0)
        with self.assertRaises(ValueError):
            PaginationConfig(max_pages=0)
        with self.assertRaises(ValueError):
            PaginationConfig(per_page_param="")

    def test_from_env(self):
        """Environment variable'lar okunur"""
        env = {
            "RESTPAGER_PER_PAGE": "50",
            "RESTPAGER_PER_PAGE_PARAM": "limit",
            "RESTPAGER_MAX_PAGES": "10",
            "RESTPAGER_DETECT_CYCLES": "false",
        }
        with mock.patch.dict(os.environ, env):
            config = PaginationConfig.from_env()

        self.assertEqual(config.default_per_page, 50)
        self.assertEqual(config.per_page_param, "limit")
        self.assertEqual(config.max_pages, 10)
        self.assertFalse(config.detect_cycles)

    def test_from_env_defaults(self):
        """Değişken yoksa varsayılanlar kullanılır"""
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(PaginationConfig.from_env(), PaginationConfig())

    def test_from_env_invalid_number(self):
        with mock.patch.dict(os.environ, {"RESTPAGER_PER_PAGE": "many"}):
            with self.assertRaises(ValueError):
                PaginationConfig.from_env()


if __name__ == '__main__':
    unittest.main()
