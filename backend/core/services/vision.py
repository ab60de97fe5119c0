"""
Vision Analysis Interface

Boundary to the external vision-analysis service. The service scores
swing frames on its own and returns a JSON blob; this module only reads
that blob. No vision model runs inside the engine.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union

from ..domain.analysis import LeakType, MotorProfile, VisionSwingResult

logger = logging.getLogger(__name__)


class VisionPayloadError(ValueError):
    """The vision service returned something that is not a JSON object."""


class VisionAnalysisProvider(ABC):
    """
    Anything that can turn swing frames into a VisionSwingResult.

    Implementations live outside the engine (they talk to a remote
    model). The engine treats their output as a low-fidelity data source.
    """

    @abstractmethod
    def analyze(self, frames: Sequence[bytes]) -> VisionSwingResult:
        """
        Score a swing from extracted frames.

        Args:
            frames: Encoded images, in capture order

        Returns:
            Parsed result (scores uncapped, as the service produced them)
        """


def _strip_code_fence(content: str) -> str:
    """Remove a Markdown ```json fence the service sometimes wraps output in."""
    text = content.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _number(value: Any) -> Optional[float]:
    """Numeric field or None; bools and strings are not scores."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_vision_payload(raw: Union[str, bytes, dict]) -> VisionSwingResult:
    """
    Read a vision-service response.

    Args:
        raw: Response body (possibly fenced as Markdown) or an already
            decoded JSON object

    Returns:
        VisionSwingResult; fields that are missing or not numbers come
        back as None

    Raises:
        VisionPayloadError: If the body is not valid JSON or not an object
    """
    if isinstance(raw, dict):
        data = raw
    else:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        try:
            data = json.loads(_strip_code_fence(raw))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse vision response: {raw[:200]!r}")
            raise VisionPayloadError(f"Vision response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise VisionPayloadError("Vision response must be a JSON object")

    cog = _number(data.get("cog_velo_y"))
    if cog is None:
        visible = data.get("visible_metrics")
        if isinstance(visible, dict):
            cog = _number(visible.get("cog_velo_y"))

    return VisionSwingResult(
        body=_number(data.get("body")),
        brain=_number(data.get("brain")),
        bat=_number(data.get("bat")),
        ball=_number(data.get("ball")),
        composite=_number(data.get("composite")),
        grade=_text(data.get("grade")),
        leak=LeakType.parse(_text(data.get("leak_detected"))),
        leak_evidence=_text(data.get("leak_evidence")),
        motor_profile=MotorProfile.parse(_text(data.get("motor_profile"))),
        profile_evidence=_text(data.get("profile_evidence")),
        coaching_narrative=_text(data.get("coach_rick_take")),
        priority_drill=_text(data.get("priority_drill")),
        confidence=_number(data.get("confidence")),
        cog_velocity_y=cog,
        pelvis_angular_velocity=_number(data.get("pelvis_av")),
        trunk_angular_velocity=_number(data.get("trunk_av")),
        arm_angular_velocity=_number(data.get("arm_av")),
    )
