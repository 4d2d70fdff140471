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

"""Page collection utilities"""

import io
import json
import time
import threading
from datetime import timedelta
from typing import Any, Dict, Optional

from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter
from requests.cookies import RequestsCookieJar
from requests.exceptions import InvalidURL, MissingSchema
from requests.exceptions import JSONDecodeError as RequestsJSONDecodeError
from requests.structures import CaseInsensitiveDict

from ...infrastructure.exceptions import (
    MalformedURLError,
    PageDecodeError,
    PaginationCancelled,
    PaginationCycleError,
    PaginationLimitError,
    RestPagerException,
    UnexpectedContentTypeError,
    UnexpectedShapeError,
    shape_name,
)
from ...infrastructure.logger import get_logger
from ..link_header import next_page_url
from ..query_normalizer import resolve_url
from ..response_merger import merge_responses


def clone_request(request: PreparedRequest, url: str) -> PreparedRequest:
    """
    İsteği kopyala ve yeni URL'e yönlendir (orijinal istek değiştirilmez)

    Args:
        request: Kopyalanacak istek
        url: Yeni hedef URL

    Returns:
        Method, header ve body'si korunmuş yeni istek

    Raises:
        MalformedURLError: URL hazırlanamazsa
    """
    cloned = request.copy()
    try:
        cloned.prepare_url(url, None)
    except (InvalidURL, MissingSchema) as e:
        raise MalformedURLError(f"URL hazırlanamadı: {url!r}", url=url) from e
    return cloned


def _check_cancelled(cancel_event: Optional[threading.Event], url: str, page_number: int) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise PaginationCancelled(
            "Sayfalama iptal edildi",
            url=url,
            page_number=page_number,
        )


def _read_page(response: Response, page_number: int) -> Any:
    """Sayfayı decode et, her durumda body'yi kapat"""
    try:
        return response.json()
    except RequestsJSONDecodeError as e:
        raise PageDecodeError(
            f"Sayfa JSON olarak decode edilemedi: {e}",
            url=response.url,
            page_number=page_number,
            response=response,
        ) from e
    finally:
        response.close()


def _build_merged_response(
    last: Response,
    document: Any,
    elapsed: float,
    cookies: RequestsCookieJar,
) -> Response:
    """Son sayfanın status/header bilgileriyle birleştirilmiş response oluştur"""
    # Çıktı ASCII, tek başına surrogate'ler \uXXXX olarak kalır
    body = json.dumps(document, separators=(",", ":")).encode("utf-8")

    merged = Response()
    merged.status_code = last.status_code
    merged.reason = last.reason
    merged.url = last.url
    merged.request = last.request
    merged.connection = getattr(last, "connection", None)
    merged.cookies = cookies
    merged.elapsed = timedelta(seconds=elapsed)

    merged.headers = CaseInsensitiveDict(last.headers)
    # Body artık sıkıştırılmış veya chunked değil
    merged.headers.pop("Content-Encoding", None)
    merged.headers.pop("Transfer-Encoding", None)
    merged.headers["Content-Length"] = str(len(body))
    merged.headers["Content-Type"] = "application/json; charset=utf-8"

    merged.encoding = "utf-8"
    merged.raw = io.BytesIO(body)
    merged._content = body
    merged._content_consumed = True
    return merged


def collect_all_pages(
    transport: BaseAdapter,
    request: PreparedRequest,
    handler,
    send_kwargs: Optional[Dict[str, Any]] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Response:
    """
    Link header'daki 'next' zincirini takip ederek tüm sayfaları topla

    İlk sayfa JSON değilse veya Link header'ı yoksa response olduğu gibi
    döndürülür. Aksi halde her sayfa decode edilip biriken değere eklenir ve
    son sayfanın header'larıyla tek bir response oluşturulur.

    Args:
        transport: Tek bir HTTP round trip yapan adapter
        request: Çağıranın GET isteği
        handler: PaginationHandler instance'ı
        send_kwargs: transport.send() için ek parametreler
        cancel_event: Set edildiğinde sayfalamayı durduran event

    Returns:
        Response objesi

    Raises:
        MalformedURLError, PageDecodeError, UnexpectedShapeError,
        UnexpectedContentTypeError, PaginationLimitError, PaginationCancelled
    """
    send_kwargs = send_kwargs or {}
    config = handler.config
    logger = get_logger()
    start_time = time.time()

    accumulator: Any = None
    visited = set()
    cookies = RequestsCookieJar()
    page_number = 0

    try:
        current = clone_request(request, handler.first_page_url(request.url))

        while True:
            page_number += 1
            _check_cancelled(cancel_event, current.url, page_number)

            if config.max_pages is not None and page_number > config.max_pages:
                raise PaginationLimitError(
                    f"Sayfa sınırı aşıldı: {config.max_pages}",
                    url=current.url,
                    page_number=page_number,
                    max_pages=config.max_pages,
                )
            if config.detect_cycles:
                if current.url in visited:
                    raise PaginationCycleError(
                        f"'next' zinciri daha önce ziyaret edilen URL'e döndü: {current.url}",
                        url=current.url,
                        page_number=page_number,
                    )
                visited.add(current.url)

            response = transport.send(current, **send_kwargs)

            if not handler.is_json_response(response):
                if accumulator is None:
                    return response
                content_type = response.headers.get("Content-Type")
                response.close()
                raise UnexpectedContentTypeError(
                    f"Sayfalama sırasında JSON olmayan sayfa: {content_type!r}",
                    url=current.url,
                    page_number=page_number,
                    content_type=content_type,
                    response=response,
                )

            if accumulator is None and not handler.has_link_header(response):
                # Tek sayfa, body'ye dokunmadan döndür
                return response

            cookies.update(response.cookies)
            page = _read_page(response, page_number)

            if not isinstance(page, (list, dict)):
                raise UnexpectedShapeError(
                    f"unexpected response type: {shape_name(page)}",
                    url=current.url,
                    page_number=page_number,
                    expected="array or object",
                    actual=shape_name(page),
                    response=response,
                )

            if accumulator is None:
                accumulator = page
            elif type(page) is not type(accumulator):
                raise UnexpectedShapeError(
                    f"unexpected response type: {shape_name(page)}, "
                    f"expected {shape_name(accumulator)}",
                    url=current.url,
                    page_number=page_number,
                    expected=shape_name(accumulator),
                    actual=shape_name(page),
                    response=response,
                )
            else:
                accumulator = merge_responses(accumulator, page)

            logger.log_debug(
                "pagination_page",
                url=current.url,
                page=page_number,
                size=len(page),
            )

            next_url = next_page_url(response.headers.get("Link"))
            if next_url is None:
                break

            current = clone_request(request, resolve_url(next_url))

    except RestPagerException as e:
        logger.log_error(
            "pagination_error",
            url=request.url,
            page=page_number,
            error_type=type(e).__name__,
            error_msg=str(e),
        )
        raise

    duration = time.time() - start_time
    logger.log_performance(
        "pagination",
        duration,
        url=request.url,
        pages=page_number,
    )
    return _build_merged_response(response, accumulator, duration, cookies)


__all__ = ['collect_all_pages', 'clone_request']
