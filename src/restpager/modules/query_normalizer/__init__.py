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

"""Page size query parameter normalization and next-URL validation"""

import re
from urllib.parse import parse_qsl, urlencode

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from ...infrastructure.exceptions import MalformedURLError

DEFAULT_PER_PAGE_PARAM = "per_page"
DEFAULT_PER_PAGE = 100

# '%' ardından iki hex karakter gelmiyorsa geçersiz escape
_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# Boşluk ve kontrol karakterleri
_INVALID_URL_CHARS = re.compile(r"[\x00-\x20\x7f]")


def _parse(url: str):
    try:
        return parse_url(url)
    except LocationParseError as e:
        raise MalformedURLError(f"URL parse edilemedi: {url!r}", url=url) from e


def set_per_page(
    url: str,
    param: str = DEFAULT_PER_PAGE_PARAM,
    default: int = DEFAULT_PER_PAGE,
) -> str:
    """
    URL'de sayfa boyutu parametresi yoksa varsayılan değeri ekle

    Parametre zaten varsa (örn: per_page=50) URL olduğu gibi döndürülür.

    Args:
        url: İstek URL'i
        param: Sayfa boyutu parametresinin ismi
        default: Parametre yoksa eklenecek değer

    Returns:
        Normalize edilmiş URL

    Raises:
        MalformedURLError: URL veya query string parse edilemezse
    """
    # parse_url geçersiz '%' karakterlerini '%25' olarak yeniden kodlar,
    # bu yüzden kontrol ham query üzerinde yapılmalı
    raw_query = url.partition("#")[0].partition("?")[2]
    if _INVALID_ESCAPE.search(raw_query):
        raise MalformedURLError(f"Query string parse edilemedi: {raw_query!r}", url=url)

    parsed = _parse(url)
    pairs = parse_qsl(parsed.query or "", keep_blank_values=True)
    if any(key == param for key, _ in pairs):
        return url

    pairs.append((param, str(default)))
    return parsed._replace(query=urlencode(pairs)).url


def resolve_url(url: str) -> str:
    """
    'next' ilişkisinden gelen URL'i doğrula

    Args:
        url: Link header'dan okunan URL

    Returns:
        Doğrulanmış mutlak URL

    Raises:
        MalformedURLError: URL mutlak değilse veya geçersiz karakter içeriyorsa
    """
    if _INVALID_URL_CHARS.search(url) or _INVALID_ESCAPE.search(url):
        raise MalformedURLError(f"Geçersiz sonraki sayfa URL'i: {url!r}", url=url)

    parsed = _parse(url)
    if not parsed.scheme or not parsed.host:
        raise MalformedURLError(f"Sonraki sayfa URL'i mutlak değil: {url!r}", url=url)

    return url


__all__ = ["set_per_page", "resolve_url", "DEFAULT_PER_PAGE_PARAM", "DEFAULT_PER_PAGE"]
