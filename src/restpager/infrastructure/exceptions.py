# -*- coding: utf-8 -*-

"""
restpager Exception sınıfları

Tüm sınıflar requests.exceptions.RequestException'dan türer; böylece
Session kullanan bir çağıran tek bir except bloğu ile hepsini yakalayabilir.
"""

from typing import Optional

from requests.exceptions import InvalidURL, RequestException

# Sarmalanan transport'un fırlattığı hatalar olduğu gibi yukarı taşınır
TransportError = RequestException


class RestPagerException(RequestException):
    """restpager base exception"""

    def __init__(self, message: str, url: Optional[str] = None,
                 page_number: Optional[int] = None, **kwargs):
        self.url = url
        self.page_number = page_number
        super().__init__(message, **kwargs)


class MalformedURLError(RestPagerException, InvalidURL):
    """URL veya query string parse edilemedi"""
    pass


class PageDecodeError(RestPagerException):
    """application/json olarak işaretlenen sayfa geçerli JSON değil"""
    pass


class UnexpectedShapeError(RestPagerException):
    """Sayfanın kök değeri array/object değil ya da önceki sayfalarla uyuşmuyor"""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None, **kwargs):
        self.expected = expected
        self.actual = actual
        super().__init__(message, **kwargs)


class UnexpectedContentTypeError(RestPagerException):
    """Sayfalama başladıktan sonra JSON olmayan bir sayfa geldi"""

    def __init__(self, message: str, content_type: Optional[str] = None, **kwargs):
        self.content_type = content_type
        super().__init__(message, **kwargs)


class PaginationLimitError(RestPagerException):
    """Sayfa sayısı üst sınırı aşıldı"""

    def __init__(self, message: str, max_pages: Optional[int] = None, **kwargs):
        self.max_pages = max_pages
        super().__init__(message, **kwargs)


class PaginationCycleError(PaginationLimitError):
    """'next' zinciri daha önce ziyaret edilmiş bir URL'e döndü"""
    pass


class PaginationCancelled(RestPagerException):
    """Sayfalama çağıran tarafından iptal edildi"""
    pass


def shape_name(value) -> str:
    """
    JSON değerinin kök tipini okunabilir isim olarak döndür

    Args:
        value: Decode edilmiş JSON değeri

    Returns:
        'array', 'object', 'string', 'number', 'boolean' veya 'null'
    """
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


__all__ = [
    "TransportError",
    "RestPagerException",
    "MalformedURLError",
    "PageDecodeError",
    "UnexpectedShapeError",
    "UnexpectedContentTypeError",
    "PaginationLimitError",
    "PaginationCycleError",
    "PaginationCancelled",
    "shape_name",
]
