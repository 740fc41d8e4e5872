"""Input validation — rejects unusable markup before the pipeline runs."""

from __future__ import annotations

import logging
import re

from svgrn.models.responses import ErrorKind, ValidationResult
from svgrn.svg.parser import clean_svg_string, is_figma_svg, parse_svg

logger = logging.getLogger(__name__)

_SVG_OPEN_RE = re.compile(r"<\s*(?:[\w-]+:)?svg[\s>/]", re.IGNORECASE)

WARN_NO_VIEWBOX = "SVG has no viewBox attribute. This may cause scaling issues."
WARN_NO_DIMENSIONS = "SVG has no width or height attributes."
WARN_GRADIENTS = "SVG contains gradients. Ensure react-native-svg supports your gradient type."
WARN_CLIP_PATHS = "SVG contains clip paths. These may not render identically across platforms."
WARN_TRANSFORMS = (
    "SVG contains transform attributes. "
    "Consider baking transforms into path data for better compatibility."
)
WARN_DESIGN_TOOL = (
    "SVG looks like a Figma or Sketch export. "
    "Enable the optimizer to strip editor metadata and redundant groups."
)


def validate_svg(svg_text: str) -> ValidationResult:
    """Check that the input is parseable SVG and collect advisory warnings."""
    if not svg_text.strip():
        return ValidationResult(
            valid=False,
            error="SVG input is empty",
            error_kind=ErrorKind.EMPTY_INPUT,
        )

    # Comments are stripped first so a commented-out <svg> does not count
    if not _SVG_OPEN_RE.search(clean_svg_string(svg_text)):
        return ValidationResult(
            valid=False,
            error="No SVG element found in input",
            error_kind=ErrorKind.NO_ROOT_ELEMENT,
        )

    result = parse_svg(svg_text)
    if not result.valid:
        logger.debug("Validation failed: %s", result.error)
        return ValidationResult(valid=False, error=result.error, error_kind=result.error_kind)

    warnings: list[str] = []
    meta = result.metadata
    if not meta.view_box:
        warnings.append(WARN_NO_VIEWBOX)
    if meta.width is None and meta.height is None:
        warnings.append(WARN_NO_DIMENSIONS)
    if result.has_gradients:
        warnings.append(WARN_GRADIENTS)
    if result.has_clip_paths:
        warnings.append(WARN_CLIP_PATHS)
    if result.has_transforms:
        warnings.append(WARN_TRANSFORMS)
    if is_figma_svg(svg_text):
        warnings.append(WARN_DESIGN_TOOL)

    return ValidationResult(valid=True, warnings=warnings)
