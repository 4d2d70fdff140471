# -*- coding: utf-8 -*-

"""Deep merge of paginated JSON fragments"""

from typing import Any, Iterable


def merge_responses(target: Any, overlay: Any) -> Any:
    """
    İki JSON değerini birleştir (girdiler değiştirilmez)

    - array + array: target elemanları, ardından overlay elemanları
    - object + object: ortak key'ler recursive birleştirilir, sadece
      overlay'de olan key'ler olduğu gibi eklenir
    - diğer tüm durumlar: overlay kazanır

    Sıra önemlidir: target her zaman biriken değer, overlay yeni sayfa olmalı.

    Args:
        target: Şimdiye kadar biriken değer
        overlay: Yeni gelen sayfanın değeri

    Returns:
        Birleştirilmiş değer
    """
    if isinstance(target, list) and isinstance(overlay, list):
        return target + overlay

    if isinstance(target, dict) and isinstance(overlay, dict):
        merged = dict(target)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = merge_responses(merged[key], value)
            else:
                merged[key] = value
        return merged

    # Son yazan kazanır
    return overlay


def merge_pages(pages: Iterable[Any]) -> Any:
    """
    Sayfaları soldan sağa birleştir

    Args:
        pages: Sayfa sırasıyla decode edilmiş değerler

    Returns:
        Birleştirilmiş değer, sayfa yoksa None
    """
    merged = None
    first = True
    for page in pages:
        if first:
            merged = page
            first = False
        else:
            merged = merge_responses(merged, page)
    return merged


__all__ = ["merge_responses", "merge_pages"]
