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

"""Transport adapter that transparently follows paginated JSON responses"""

import threading
from typing import Optional

from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter, HTTPAdapter

from ...infrastructure.config import PaginationConfig
from ...infrastructure.exceptions import PaginationCancelled
from ..pagination_handler import PaginationHandler


class PaginatingAdapter(BaseAdapter):
    """
    Başka bir adapter'ı saran ve GET isteklerinin tüm sayfalarını
    tek bir response'da birleştiren adapter.

    Session'a mount edilir:

        session.mount("https://", PaginatingAdapter(HTTPAdapter()))
    """

    def __init__(
        self,
        transport: Optional[BaseAdapter] = None,
        config: Optional[PaginationConfig] = None,
    ):
        """
        PaginatingAdapter oluştur

        Args:
            transport: Tek bir HTTP round trip yapan adapter (None ise HTTPAdapter)
            config: Sayfalama konfigürasyonu
        """
        super().__init__()
        self.transport = transport if transport is not None else HTTPAdapter()
        self.handler = PaginationHandler(config)

    @property
    def config(self) -> PaginationConfig:
        return self.handler.config

    def send(
        self,
        request: PreparedRequest,
        stream: bool = False,
        timeout=None,
        verify=True,
        cert=None,
        proxies=None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Response:
        """
        İsteği gönder; GET ise tüm sayfaları topla

        Args:
            request: Gönderilecek istek
            stream, timeout, verify, cert, proxies: Her round trip'e aynen iletilir
            cancel_event: Set edildiğinde sıradaki round trip yapılmaz

        Returns:
            Response objesi
        """
        send_kwargs = {
            "stream": stream,
            "timeout": timeout,
            "verify": verify,
            "cert": cert,
            "proxies": proxies,
        }

        if not self.handler.is_paginated_method(request):
            if cancel_event is not None and cancel_event.is_set():
                raise PaginationCancelled("İstek iptal edildi", url=request.url)
            return self.transport.send(request, **send_kwargs)

        return self.handler.collect_all_pages(
            self.transport,
            request,
            send_kwargs=send_kwargs,
            cancel_event=cancel_event,
        )

    def close(self) -> None:
        """Sarılan adapter'ı kapat"""
        self.transport.close()


__all__ = ['PaginatingAdapter']
