import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class EncodedImage:
    """Base64 image payload paired with its MIME type."""

    payload: str
    mime_type: str = "image/png"

    @property
    def is_empty(self) -> bool:
        return not self.payload

    def decode(self) -> bytes:
        if self.is_empty:
            return b""
        try:
            return base64.b64decode(self.payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid base64 image payload: {e}")

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.payload}"


def _encoded(payload: Optional[str], mime_type: str) -> Optional[EncodedImage]:
    if not payload:
        return None
    return EncodedImage(payload=payload, mime_type=mime_type)


class _WireModel(BaseModel):
    # Unknown keys are kept so the copied JSON matches what the backend sent.
    model_config = ConfigDict(extra="allow", frozen=True)

    def to_wire(self) -> dict:
        """The JSON-ready dict this model was parsed from: sent fields plus extras."""
        data = {}
        for name, info in type(self).model_fields.items():
            if name in self.model_fields_set:
                data[info.alias or name] = _to_wire(getattr(self, name))
        data.update(self.model_extra or {})
        return data


def _to_wire(value: Any) -> Any:
    if isinstance(value, _WireModel):
        return value.to_wire()
    if isinstance(value, list):
        return [_to_wire(item) for item in value]
    return value


class Segmentation(_WireModel):
    cropped_b64: Optional[str] = None
    mask_b64: Optional[str] = None

    @property
    def cropped_image(self) -> Optional[EncodedImage]:
        return _encoded(self.cropped_b64, "image/png")

    @property
    def mask_image(self) -> Optional[EncodedImage]:
        return _encoded(self.mask_b64, "image/png")


class Product(_WireModel):
    name: Optional[str] = None
    confidence: Any = None
    rationale: Optional[str] = Field(default=None, alias="reason")
    frame_b64: Optional[str] = None
    segmentation: Optional[Segmentation] = None
    enhanced: Optional[List[Optional[str]]] = None

    @property
    def confidence_score(self) -> Optional[float]:
        # bool is an int subclass but never a score
        if isinstance(self.confidence, bool):
            return None
        if isinstance(self.confidence, (int, float)):
            try:
                return float(self.confidence)
            except OverflowError:
                return None
        return None

    @property
    def best_frame_image(self) -> Optional[EncodedImage]:
        return _encoded(self.frame_b64, "image/jpeg")

    @property
    def enhanced_images(self) -> List[EncodedImage]:
        return [
            EncodedImage(payload=b64 or "", mime_type="image/png")
            for b64 in (self.enhanced or [])
        ]


class ProcessingResult(_WireModel):
    source_url: str = Field(alias="youtube_url")
    save_directory: Optional[str] = Field(default=None, alias="save_dir")
    products: Optional[List[Product]] = None

    @property
    def product_list(self) -> List[Product]:
        return list(self.products or [])


def serialize_result(result: ProcessingResult) -> str:
    """Stable text form of a result, as written by the copy action."""
    return json.dumps(result.to_wire(), indent=2, ensure_ascii=False)
