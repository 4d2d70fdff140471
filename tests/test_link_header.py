# -*- coding: utf-8 -*-

"""
Link header Testleri

RFC 8288 Link header parse ve 'next' ilişkisi çıkarma davranışını test eder.
"""

import unittest
import os
import sys

# src dizinini path'e ekle
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from restpager.modules.link_header import Link, LinkHeader, parse_link_header, next_page_url


GITHUB_LINKS = (
    '<https://api.github.com/repositories/1/issues?page=2>; rel="next", '
    '<https://api.github.com/repositories/1/issues?page=5>; rel="last"'
)


class TestLinkHeader(unittest.TestCase):
    """LinkHeader testleri"""

    def test_parse_github_style_header(self):
        """GitHub tarzı next/last header'ını parse et"""
        links = parse_link_header(GITHUB_LINKS)
        self.assertEqual(len(links), 2)
        self.assertEqual(
            [link.rel for link in links],
            ["next", "last"],
        )

    def test_filter_by_rel(self):
        """filter_by_rel sadece eşleşen ilişkileri döndürür"""
        links = parse_link_header(GITHUB_LINKS)
        last = links.filter_by_rel("last")
        self.assertEqual(len(last), 1)
        self.assertEqual(last[0].url, "https://api.github.com/repositories/1/issues?page=5")
        self.assertEqual(links.filter_by_rel("prev"), [])

    def test_filter_is_case_sensitive(self):
        """İlişki ismi büyük/küçük harf duyarlı eşleşir"""
        links = parse_link_header('<https://example.com/?page=2>; rel="Next"')
        self.assertEqual(links.filter_by_rel("next"), [])

    def test_empty_header(self):
        """Boş veya olmayan header boş sonuç verir"""
        self.assertEqual(len(parse_link_header(None)), 0)
        self.assertEqual(len(parse_link_header("")), 0)
        self.assertFalse(LinkHeader.parse(None))

    def test_next_page_url(self):
        """next_page_url ilk 'next' URL'ini döndürür"""
        self.assertEqual(
            next_page_url(GITHUB_LINKS),
            "https://api.github.com/repositories/1/issues?page=2",
        )

    def test_next_page_url_without_next(self):
        """'next' yoksa None döner, hata fırlatılmaz"""
        header = '<https://example.com/?page=1>; rel="prev"'
        self.assertIsNone(next_page_url(header))
        self.assertIsNone(next_page_url(None))

    def test_malformed_entries_are_dropped(self):
        """Parse edilemeyen girdiler atlanır, geçerli olanlar korunur"""
        header = 'garbage, <https://example.com/?page=2>; rel="next"'
        links = parse_link_header(header)
        self.assertEqual(len(links), 1)
        self.assertEqual(next_page_url(header), "https://example.com/?page=2")

    def test_entry_without_rel_is_dropped(self):
        """rel parametresi olmayan girdi atlanır"""
        links = parse_link_header('<https://example.com/?page=2>; title="x"')
        self.assertEqual(len(links), 0)

    def test_multiple_relation_types(self):
        """rel="next last" her ilişki için ayrı Link üretir"""
        links = parse_link_header('<https://example.com/?page=2>; rel="next last"')
        self.assertEqual([link.rel for link in links], ["next", "last"])
        self.assertEqual(len(links.filter_by_rel("last")), 1)

    def test_extra_params_are_kept(self):
        """Ek parametreler Link.params içinde saklanır"""
        links = list(parse_link_header('<https://example.com/?page=2>; rel="next"; title="Page 2"'))
        self.assertEqual(links[0].params, {"title": "Page 2"})
        self.assertEqual(links[0], Link(url="https://example.com/?page=2", rel="next"))

    def test_quoted_param_with_equals_sign(self):
        """Tırnaklı değer içindeki '=' sonraki parametreleri bozmaz"""
        header = '<https://example.com/?page=2>; title="a=b"; rel="next"'
        links = list(parse_link_header(header))
        self.assertEqual(len(links), 1)
        self.assertEqual(links[0].params, {"title": "a=b"})
        self.assertEqual(next_page_url(header), "https://example.com/?page=2")

    def test_quoted_param_with_semicolon(self):
        header = '<https://example.com/?page=3>; title="x; y"; rel=next'
        self.assertEqual(next_page_url(header), "https://example.com/?page=3")
        self.assertEqual(list(parse_link_header(header))[0].params, {"title": "x; y"})

    def test_first_rel_param_wins(self):
        """Aynı parametre tekrar ederse ilk değer kullanılır"""
        links = parse_link_header('<https://example.com/?page=2>; rel="next"; rel="last"')
        self.assertEqual([link.rel for link in links], ["next"])


if __name__ == '__main__':
    unittest.main()
