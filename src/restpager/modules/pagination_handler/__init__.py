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

"""Pagination handler module for following Link headers and merging every page"""

import re
import threading
from typing import Any, Dict, Optional

from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter

from ...infrastructure.config import PaginationConfig, DEFAULT_CONFIG
from ..query_normalizer import set_per_page
from .page_collector import collect_all_pages, clone_request

JSON_MEDIA_TYPE = "application/json"

_TOKEN = r"[A-Za-z0-9!#$%&'*+.^_`|~-]+"
_MEDIA_TYPE = re.compile(rf"^{_TOKEN}/{_TOKEN}$")


class PaginationHandler:
    """Sayfalama yönetimi için handler sınıfı"""

    def __init__(self, config: Optional[PaginationConfig] = None):
        """
        PaginationHandler oluştur

        Args:
            config: Sayfalama konfigürasyonu (None ise varsayılanlar)
        """
        self.config = config or DEFAULT_CONFIG

    def is_paginated_method(self, request: PreparedRequest) -> bool:
        """Sadece GET istekleri sayfalanır"""
        return (request.method or "").upper() == "GET"

    def media_type(self, response: Response) -> Optional[str]:
        """
        Content-Type header'ından media type'ı çıkar

        Args:
            response: HTTP response objesi

        Returns:
            Küçük harfli media type (parametreler hariç), header yoksa veya
            parse edilemiyorsa None
        """
        content_type = response.headers.get("Content-Type")
        if not content_type:
            return None

        media_type = content_type.split(";", 1)[0].strip().lower()
        if not _MEDIA_TYPE.match(media_type):
            return None
        return media_type

    def is_json_response(self, response: Response) -> bool:
        """Response JSON mu kontrol et"""
        return self.media_type(response) == JSON_MEDIA_TYPE

    def has_link_header(self, response: Response) -> bool:
        """Response'da boş olmayan bir Link header'ı var mı kontrol et"""
        return bool(response.headers.get("Link"))

    def first_page_url(self, url: str) -> str:
        """İlk sayfa URL'ine sayfa boyutu parametresini ekle"""
        return set_per_page(
            url,
            self.config.per_page_param,
            self.config.default_per_page,
        )

    def collect_all_pages(
        self,
        transport: BaseAdapter,
        request: PreparedRequest,
        send_kwargs: Optional[Dict[str, Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Response:
        """
        Tüm sayfaları topla ve tek bir response olarak birleştir

        Args:
            transport: Tek bir HTTP round trip yapan adapter
            request: Çağıranın isteği (değiştirilmez)
            send_kwargs: transport.send() için ek parametreler (timeout, verify, ...)
            cancel_event: Set edildiğinde sayfalamayı durduran event

        Returns:
            Birleştirilmiş veya olduğu gibi bırakılmış response
        """
        return collect_all_pages(
            transport,
            request,
            self,
            send_kwargs=send_kwargs,
            cancel_event=cancel_event,
        )


__all__ = ['PaginationHandler', 'JSON_MEDIA_TYPE', 'clone_request']
