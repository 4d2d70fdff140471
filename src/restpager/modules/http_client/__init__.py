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

from __future__ import annotations

import threading
import time
from typing import Any, Dict, Optional, Tuple, Union

from urllib3.util.retry import Retry
from requests.adapters import BaseAdapter, HTTPAdapter
from requests import Request, Response, Session

from ..version import __fullname__
from ...infrastructure.config import PaginationConfig
from ...infrastructure.logger import get_logger, performance_timer
from .paginating_adapter import PaginatingAdapter

_SEND_KWARGS = ("timeout", "allow_redirects", "proxies", "stream", "verify", "cert")


def wrap_session(session: Session, config: Optional[PaginationConfig] = None) -> Session:
    """
    Session'a mount edilmiş tüm adapter'ları PaginatingAdapter ile sar

    Args:
        session: Mevcut requests Session'ı
        config: Sayfalama konfigürasyonu

    Returns:
        Aynı session (zincirleme kullanım için)
    """
    for prefix, adapter in list(session.adapters.items()):
        if isinstance(adapter, PaginatingAdapter):
            continue
        session.mount(prefix, PaginatingAdapter(adapter, config))
    return session


class HTTPClient:
    """
    Sayfalamayı otomatik yapan, retry mekanizması olan HTTP client.
    Context manager olarak kullanılabilir.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        retries: int = 3,
        backoff_factor: float = 1.0,
        status_forcelist: Tuple[int, ...] = (500, 502, 503, 504),
        allowed_methods: Optional[Tuple[str, ...]] = None,
        timeout: Optional[Union[float, Tuple[float, float]]] = None,
        headers: Optional[Dict[str, str]] = None,
        verify: bool = True,
        allow_redirects: bool = True,
        raise_for_status: bool = True,
        pagination: Optional[PaginationConfig] = None,
        transport: Optional[BaseAdapter] = None,
    ):
        """
        HTTP Client oluştur

        Args:
            base_url: Göreli path'lerin ekleneceği kök URL (örn: https://api.github.com)
            retries: Toplam retry sayısı
            backoff_factor: Retry arasındaki bekleme çarpanı
            status_forcelist: Retry yapılacak HTTP status kodları
            allowed_methods: Retry yapılacak HTTP metodları (None ise tüm metodlar)
            timeout: Request timeout süresi (saniye) veya (connect_timeout, read_timeout) tuple
            headers: Varsayılan header'lar
            verify: SSL sertifika doğrulaması
            allow_redirects: Redirect'lere izin ver (default: True)
            raise_for_status: 4xx/5xx response'larda HTTPError fırlat
            pagination: Sayfalama konfigürasyonu (None ise varsayılanlar)
            transport: Round trip'i yapacak adapter (None ise retry'lı HTTPAdapter)
        """
        self.base_url = base_url
        self.retries = retries
        self.backoff_factor = backoff_factor
        self.status_forcelist = status_forcelist
        self.allowed_methods = allowed_methods or ("GET", "POST", "PUT", "DELETE", "PATCH")
        self.timeout = timeout
        self.headers = headers or {}
        self.verify = verify
        self.allow_redirects = allow_redirects
        self.raise_for_status = raise_for_status
        self.pagination = pagination
        self.transport = transport

        self._session: Optional[Session] = None
        self.logger = get_logger()

    def _create_transport(self) -> BaseAdapter:
        """Retry mekanizması olan adapter oluştur"""
        retry_strategy = Retry(
            total=self.retries,
            read=self.retries,
            connect=self.retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=list(self.status_forcelist),
            allowed_methods=list(self.allowed_methods),
            raise_on_status=False,
        )

        return HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=10,
            pool_maxsize=20,
        )

    def _create_session(self) -> Session:
        """Sayfalama adapter'ı mount edilmiş session oluştur"""
        session = Session()

        transport = self.transport if self.transport is not None else self._create_transport()
        adapter = PaginatingAdapter(transport, self.pagination)

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({"User-Agent": __fullname__, "Accept": "application/json"})

        # Varsayılan header'ları ayarla
        if self.headers:
            session.headers.update(self.headers)

        return session

    def __enter__(self) -> HTTPClient:
        """Context manager giriş"""
        self._get_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager çıkış"""
        self.close()

    def _get_session(self) -> Session:
        """Session'ı al veya oluştur"""
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def _resolve(self, path: str) -> str:
        if "://" in path or not self.base_url:
            return path
        return self.buildurl(self.base_url, path)

    def request(
        self,
        method: str,
        path: str,
        cancel_event: Optional[threading.Event] = None,
        **kwargs: Any
    ) -> Response:
        """
        HTTP request yap

        Args:
            method: HTTP metodu (GET, POST, vb.)
            path: Mutlak URL veya base_url'e göre göreli path
            cancel_event: Set edildiğinde sayfalamayı durduran event
            **kwargs: requests.Request ve Session.send için ek parametreler

        Returns:
            Response objesi (GET ise tüm sayfalar birleştirilmiş)

        Raises:
            RequestException: Transport hatası
            HTTPError: raise_for_status açıkken 4xx/5xx status
            RestPagerException: Sayfalama hatası
        """
        session = self._get_session()
        method = method.upper()
        url = self._resolve(path)

        # Timeout ayarla
        if self.timeout is not None and 'timeout' not in kwargs:
            kwargs['timeout'] = self.timeout

        # SSL doğrulaması
        if 'verify' not in kwargs:
            kwargs['verify'] = self.verify

        # Redirect ayarı
        if 'allow_redirects' not in kwargs:
            kwargs['allow_redirects'] = self.allow_redirects

        send_kwargs = {key: kwargs.pop(key) for key in _SEND_KWARGS if key in kwargs}
        prepared = session.prepare_request(Request(method=method, url=url, **kwargs))

        settings = session.merge_environment_settings(
            prepared.url,
            send_kwargs.pop("proxies", None) or {},
            send_kwargs.pop("stream", None),
            send_kwargs.pop("verify", None),
            send_kwargs.pop("cert", None),
        )
        send_kwargs.update(settings)
        if cancel_event is not None:
            send_kwargs["cancel_event"] = cancel_event

        start_time = time.time()
        self.logger.log_operation("http_request_start", method=method, url=url)

        try:
            response = session.send(prepared, **send_kwargs)
        except Exception as e:
            self.logger.log_error(
                "http_request_exception",
                method=method,
                url=url,
                error_msg=str(e),
                duration=time.time() - start_time,
            )
            raise

        # Birleştirilmiş response'un raw'ı gerçek bağlantı değil, Session
        # cookie'leri kendisi çıkaramaz
        session.cookies.update(response.cookies)

        self.logger.log_performance(
            "http_request",
            time.time() - start_time,
            method=method,
            url=url,
            status_code=response.status_code,
            success=response.ok,
        )

        if self.raise_for_status and not response.ok:
            self.logger.log_error(
                "http_request_error",
                method=method,
                url=url,
                status_code=response.status_code,
                response_text=response.text[:500],  # İlk 500 karakter
            )
            response.raise_for_status()

        return response

    @performance_timer("http_do")
    def do(self, method: str, path: str, body: Any = None, **kwargs: Any) -> Any:
        """
        İstek yap ve JSON body'yi decode et

        Args:
            method: HTTP metodu
            path: Mutlak URL veya göreli path
            body: str/bytes ise ham data, diğer tipler JSON olarak gönderilir
            **kwargs: request() için ek parametreler

        Returns:
            Decode edilmiş JSON, 204 No Content ise None
        """
        if body is not None:
            if isinstance(body, (str, bytes)):
                kwargs['data'] = body
            else:
                kwargs['json'] = body

        response = self.request(method, path, **kwargs)
        try:
            if response.status_code == 204:
                return None
            return response.json()
        finally:
            response.close()

    def get(self, path: str, **kwargs: Any) -> Any:
        """GET request (tüm sayfalar)"""
        return self.do("GET", path, **kwargs)

    def post(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        """POST request"""
        return self.do("POST", path, body, **kwargs)

    def put(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        """PUT request"""
        return self.do("PUT", path, body, **kwargs)

    def patch(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        """PATCH request"""
        return self.do("PATCH", path, body, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        """DELETE request"""
        return self.do("DELETE", path, **kwargs)

    def buildurl(self, *parts: str) -> str:

        cleaned = [str(part).strip("/") for part in parts if part]
        if not cleaned:
            return ""
        # Eğer ilk parça bir protokol içeriyorsa, protokolü koruyalım (örn: "https://")
        if "://" in cleaned[0]:
            protocol, rest = cleaned[0].split("://", 1)
            url = protocol + "://" + "/".join([rest] + cleaned[1:])
        else:
            url = "/".join(cleaned)
        return url

    def close(self) -> None:
        """Session'ı kapat"""
        if self._session:
            self._session.close()
            self._session = None


__all__ = ['HTTPClient', 'PaginatingAdapter', 'wrap_session']
