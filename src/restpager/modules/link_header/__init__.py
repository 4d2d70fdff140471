# -*- coding: utf-8 -*-
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""RFC 8288 Link header parsing"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from requests.utils import unquote_header_value

# Girdiler "<" ile başlar, requests.utils.parse_header_links ile aynı ayrım
_ENTRY_SEPARATOR = re.compile(r", *<")
# ; key=value veya ; key="quoted value" (tırnak içinde ; ve = olabilir)
_PARAM = re.compile(r';\s*([^\s=;]+)\s*(?:=\s*("(?:[^"\\]|\\.)*"|[^;]*))?')


def _parse_params(value: str) -> Dict[str, str]:
    """Girdinin '>' sonrasındaki parametrelerini oku, aynı isimde ilki kazanır"""
    params: Dict[str, str] = {}
    for match in _PARAM.finditer(value):
        key = match.group(1).lower()
        raw = (match.group(2) or "").strip()
        params.setdefault(key, unquote_header_value(raw))
    return params


@dataclass(frozen=True)
class Link:
    """Link header'daki tek bir (url, rel) girdisi"""

    url: str
    rel: str
    params: Dict[str, str] = field(default_factory=dict, compare=False)


class LinkHeader:
    """Bir Link header değerinden çıkarılan sıralı link kümesi"""

    def __init__(self, links: Optional[List[Link]] = None):
        self._links: List[Link] = list(links or [])

    @classmethod
    def parse(cls, value: Optional[str]) -> "LinkHeader":
        """
        Link header değerini parse et

        Parse edilemeyen, url'si veya rel'i olmayan girdiler atlanır.
        'rel="next last"' gibi birden fazla ilişki içeren girdiler her ilişki
        için ayrı bir Link üretir.

        Args:
            value: Ham Link header değeri (None veya boş olabilir)

        Returns:
            LinkHeader instance'ı
        """
        links: List[Link] = []
        if not value:
            return cls(links)

        for entry in _ENTRY_SEPARATOR.split(value.strip()):
            url, _, rest = entry.strip().lstrip("<").partition(">")
            url = url.strip()
            params = _parse_params(rest)
            rel_value = params.pop("rel", "")
            if not url or not rel_value:
                continue

            for rel in rel_value.split():
                links.append(Link(url=url, rel=rel, params=params))

        return cls(links)

    def filter_by_rel(self, rel: str) -> List[Link]:
        """
        İlişki ismine göre linkleri filtrele (büyük/küçük harf duyarlı)

        Args:
            rel: İlişki ismi (örn: 'next')

        Returns:
            Eşleşen linkler, header'daki sırayla
        """
        return [link for link in self._links if link.rel == rel]

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __bool__(self) -> bool:
        return bool(self._links)

    def __repr__(self) -> str:
        return f"<LinkHeader: {len(self._links)} link>"


def parse_link_header(value: Optional[str]) -> LinkHeader:
    """Link header değerini parse et"""
    return LinkHeader.parse(value)


def next_page_url(value: Optional[str]) -> Optional[str]:
    """
    Link header'dan 'next' ilişkili ilk URL'i döndür

    Args:
        value: Ham Link header değeri

    Returns:
        Sonraki sayfanın URL'i veya None
    """
    next_links = LinkHeader.parse(value).filter_by_rel("next")
    if not next_links:
        return None
    return next_links[0].url


__all__ = ["Link", "LinkHeader", "parse_link_header", "next_page_url"]
