"""응답 콘텐츠 협상 (JSON / XML)

Accept 헤더에 XML이 명시되어 있고 다른 모든 미디어 타입보다 우선순위가
높을 때만 XML로, 그 외에는 JSON으로 응답합니다.
"""

from typing import Any, Mapping, Optional
from xml.etree import ElementTree

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

XML_MEDIA_TYPES = ("application/xml", "text/xml")


def _parse_accept(header: str) -> list[tuple[str, float]]:
    """Accept 헤더를 (미디어 타입, q) 목록으로 변환"""
    entries = []
    for part in header.split(","):
        media_type, *params = [p.strip() for p in part.split(";")]
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        entries.append((media_type.lower(), quality))
    return entries


def prefers_xml(request: Request) -> bool:
    """요청이 XML 응답을 선호하는지 여부"""
    accept = request.headers.get("accept")
    if not accept:
        return False

    # 브라우저 기본 헤더(text/html, ..., application/xml;q=0.9, */*;q=0.8)는 JSON
    best_xml = best_other = 0.0
    for media_type, quality in _parse_accept(accept):
        if media_type in XML_MEDIA_TYPES:
            best_xml = max(best_xml, quality)
        else:
            best_other = max(best_other, quality)
    return best_xml > best_other


def _append(parent: ElementTree.Element, tag: str, value: Any) -> None:
    element = ElementTree.SubElement(parent, tag)
    if isinstance(value, dict):
        for key, item in value.items():
            _append(element, key, item)
    elif isinstance(value, list):
        for item in value:
            _append(element, "item", item)
    elif value is None:
        element.set("nil", "true")
    else:
        element.text = str(value).lower() if isinstance(value, bool) else str(value)


def to_xml(content: Any, root_tag: str) -> bytes:
    """JSON 호환 데이터를 XML 문서로 직렬화"""
    root = ElementTree.Element(root_tag)
    data = jsonable_encoder(content)
    if isinstance(data, dict):
        for key, value in data.items():
            _append(root, key, value)
    elif isinstance(data, list):
        item_tag = root_tag[:-1] if root_tag.endswith("s") else "item"
        for item in data:
            _append(root, item_tag, item)
    else:
        root.text = "" if data is None else str(data)
    return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def negotiate(
    request: Request,
    content: Any,
    *,
    root_tag: str,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Accept 헤더에 맞춰 응답 생성

    Args:
        request: 현재 요청
        content: 직렬화할 데이터 (pydantic 모델, dict, list, 스칼라)
        root_tag: XML 루트 요소 이름
        status_code: 응답 상태 코드
        headers: 추가 응답 헤더

    Returns:
        JSONResponse 또는 application/xml Response
    """
    if prefers_xml(request):
        return Response(
            content=to_xml(content, root_tag),
            status_code=status_code,
            headers=dict(headers or {}),
            media_type="application/xml",
        )
    return JSONResponse(
        content=jsonable_encoder(content, by_alias=True),
        status_code=status_code,
        headers=dict(headers or {}),
    )
