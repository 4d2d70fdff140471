# -*- coding: utf-8 -*-

import os
from dataclasses import dataclass
from typing import Optional


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} tam sayı olmalı, alınan: {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PaginationConfig:
    """Sayfalama konfigürasyonu - sayfa boyutu parametresi ve zincir sınırları"""

    per_page_param: str = "per_page"
    default_per_page: int = 100

    # None ise sınır yok, zincir sunucu 'next' vermeyene kadar takip edilir
    max_pages: Optional[int] = None
    detect_cycles: bool = True

    def __post_init__(self):
        if not self.per_page_param:
            raise ValueError("per_page_param boş olamaz")
        if self.default_per_page <= 0:
            raise ValueError(
                f"default_per_page pozitif olmalı, alınan: {self.default_per_page}"
            )
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError(f"max_pages pozitif olmalı, alınan: {self.max_pages}")

    @classmethod
    def from_env(cls, prefix: str = "RESTPAGER_") -> "PaginationConfig":
        """
        Environment variable'lardan konfigürasyon oluştur

        Args:
            prefix: Değişken isim öneki (örn: RESTPAGER_PER_PAGE)

        Returns:
            PaginationConfig instance'ı
        """
        defaults = cls()
        return cls(
            per_page_param=os.getenv(f"{prefix}PER_PAGE_PARAM") or defaults.per_page_param,
            default_per_page=_env_int(f"{prefix}PER_PAGE", defaults.default_per_page),
            max_pages=_env_int(f"{prefix}MAX_PAGES", defaults.max_pages),
            detect_cycles=_env_bool(f"{prefix}DETECT_CYCLES", defaults.detect_cycles),
        )


DEFAULT_CONFIG = PaginationConfig()


__all__ = ["PaginationConfig", "DEFAULT_CONFIG"]
