# -*- coding: utf-8 -*-

"""
Testler için sahte transport

Sırayla hazır sayfalar döndüren, gelen istekleri ve kapatılan body'leri
kaydeden bir requests adapter'ı.
"""

import io
import os
import sys

# src dizinini path'e ekle
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from requests import Response
from requests.adapters import BaseAdapter
from requests.exceptions import ConnectionError
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers


class TrackedBody(io.BytesIO):
    """release_conn çağrılarını sayan body"""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.released = 0

    def release_conn(self):
        self.released += 1


def page(body, status=200, content_type="application/json", link=None, headers=None):
    """Sahte sayfa tanımı oluştur"""
    page_headers = {}
    if content_type is not None:
        page_headers["Content-Type"] = content_type
    if link is not None:
        page_headers["Link"] = link
    if headers:
        page_headers.update(headers)
    if isinstance(body, str):
        body = body.encode("utf-8")
    return status, page_headers, body


def next_link(url):
    return f'<{url}>; rel="next"'


class FakeTransport(BaseAdapter):
    """Hazır sayfaları sırayla döndüren adapter"""

    def __init__(self, pages=None, error=None):
        super().__init__()
        self.pages = list(pages or [])
        self.error = error
        self.requests = []
        self.send_kwargs = []
        self.bodies = []
        self.responses = []
        self.closed = False

    @property
    def call_count(self):
        return len(self.requests)

    @property
    def urls(self):
        return [request.url for request in self.requests]

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        if self.error is not None:
            raise self.error
        if len(self.requests) >= len(self.pages):
            raise ConnectionError(f"unexpected request: {request.url}")

        self.requests.append(request)
        self.send_kwargs.append({"stream": stream, "timeout": timeout, "verify": verify})
        status, headers, body = self.pages[len(self.requests) - 1]

        raw = TrackedBody(body)
        self.bodies.append(raw)

        response = Response()
        response.status_code = status
        response.headers = CaseInsensitiveDict(headers)
        response.encoding = get_encoding_from_headers(response.headers)
        response.raw = raw
        response.url = request.url
        response.request = request
        response.reason = "OK" if status < 400 else "Error"
        response.connection = self
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True
