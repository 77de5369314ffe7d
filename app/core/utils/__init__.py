"""유틸리티 모듈"""

from app.core.utils.pagination import (
    Page,
    PageParams,
    clamp_page_number,
    clamp_page_size,
)
from app.core.utils.time import measure_time

__all__ = [
    # pagination
    "Page",
    "PageParams",
    "clamp_page_number",
    "clamp_page_size",
    # time measurement
    "measure_time",
]
